"""Bilingual labels for report lines and error messages.

Messages live in ``app/locales/<lang>/messages.json``; a language is
available when its directory holds that file.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from finreports.app.core.config import settings

logger = logging.getLogger(__name__)

_LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"
_FALLBACK_LANG = "en"


@lru_cache(maxsize=1)
def available_languages() -> frozenset[str]:
    return frozenset(
        p.parent.name for p in _LOCALES_DIR.glob("*/messages.json")
    )


@lru_cache(maxsize=4)
def _load_messages(lang: str) -> dict[str, str]:
    path = _LOCALES_DIR / lang / "messages.json"
    with open(path, encoding="utf-8") as f:
        return json.load(f)


class _Placeholders(dict):
    """Leaves unknown ``{placeholders}`` in place instead of raising."""

    def __init__(self, key: str, values: dict[str, str]) -> None:
        super().__init__(values)
        self.key = key

    def __missing__(self, name: str) -> str:
        logger.warning("Missing placeholder %r for message %s", name, self.key)
        return "{" + name + "}"


def translate(lang: str, key: str, **kwargs: str) -> str:
    """Return the label for *key* in *lang*.

    Unknown languages resolve to the configured default. A key missing from
    that catalogue falls back to English, then to the raw key.
    """
    if lang not in available_languages():
        lang = settings.DEFAULT_LANGUAGE
    text = _load_messages(lang).get(key)
    if text is None and lang != _FALLBACK_LANG:
        text = _load_messages(_FALLBACK_LANG).get(key)
    if text is None:
        logger.warning("No translation for %s", key)
        return key
    return text.format_map(_Placeholders(key, kwargs))
