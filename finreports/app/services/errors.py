"""Exceptions raised by the reporting services.

Each error carries an i18n ``message_key`` so the API layer can render it
in the caller's language.
"""

from __future__ import annotations


class ReportError(Exception):
    """Base class for report failures."""

    message_key = "errors.ledger_unavailable"


class LedgerUnavailableError(ReportError):
    """The ledger store could not be queried; no report can be produced."""

    message_key = "errors.ledger_unavailable"


class AccountNotFoundError(ReportError):
    message_key = "errors.account_not_found"


class InvalidPeriodError(ReportError):
    message_key = "errors.invalid_period"
