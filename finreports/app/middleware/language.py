"""Accept-Language detection middleware."""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from finreports.app.core.config import settings
from finreports.app.core.i18n import available_languages


class LanguageMiddleware(BaseHTTPMiddleware):
    """Resolve the report language and expose it as ``request.state.language``.

    The language is echoed back in the ``Content-Language`` header so clients
    know which labels the cash flow details carry.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        language = _parse_preferred(request.headers.get("Accept-Language", ""))
        request.state.language = language

        response = await call_next(request)
        response.headers["Content-Language"] = language
        return response


def _parse_preferred(header: str) -> str:
    """First listed language with a message catalogue; q-weights are ignored."""
    supported = available_languages()
    for part in header.split(","):
        tag = part.split(";")[0].strip().lower()
        if not tag:
            continue
        for candidate in (tag, tag.split("-")[0]):
            if candidate in supported:
                return candidate
    return settings.DEFAULT_LANGUAGE
