from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy.orm import Session

from finreports.app.core.config import settings
from finreports.app.core.database import get_db
from finreports.app.core.i18n import translate
from finreports.app.schemas.reports import (
    AccountStatementResponse,
    BalanceSheetResponse,
    CashFlowResponse,
    IncomeStatementResponse,
    TrialBalanceResponse,
)
from finreports.app.services.errors import (
    AccountNotFoundError,
    InvalidPeriodError,
    ReportError,
)
from finreports.app.services.reports import (
    get_account_statement as _get_account_statement,
    get_balance_sheet as _get_balance_sheet,
    get_cash_flow as _get_cash_flow,
    get_income_statement as _get_income_statement,
    get_trial_balance as _get_trial_balance,
)

router = APIRouter()


def _language(request: Request) -> str:
    return getattr(request.state, "language", settings.DEFAULT_LANGUAGE)


def _http_error(exc: ReportError, lang: str) -> HTTPException:
    if isinstance(exc, AccountNotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, InvalidPeriodError):
        code = status.HTTP_400_BAD_REQUEST
    else:
        code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HTTPException(status_code=code, detail=translate(lang, exc.message_key))


def _default_dates(
    from_date: date | None, to_date: date | None,
) -> tuple[date, date]:
    today = date.today()
    if from_date is None:
        from_date = today.replace(day=1)
    if to_date is None:
        to_date = today
    return from_date, to_date


# ── Trial Balance ───────────────────────────────────────────────────────────


@router.get("/trial-balance", response_model=TrialBalanceResponse)
def trial_balance(
    request: Request,
    from_date: date | None = Query(None),
    to_date: date | None = Query(None),
    db: Session = Depends(get_db),
) -> dict[str, object]:
    try:
        return _get_trial_balance(db, from_date, to_date)
    except ReportError as e:
        raise _http_error(e, _language(request))


# ── Income Statement ────────────────────────────────────────────────────────


@router.get("/income-statement", response_model=IncomeStatementResponse)
def income_statement(
    request: Request,
    from_date: date | None = Query(None),
    to_date: date | None = Query(None),
    db: Session = Depends(get_db),
) -> dict[str, object]:
    fd, td = _default_dates(from_date, to_date)
    try:
        return _get_income_statement(db, fd, td)
    except ReportError as e:
        raise _http_error(e, _language(request))


# ── Balance Sheet ───────────────────────────────────────────────────────────


@router.get("/balance-sheet", response_model=BalanceSheetResponse)
def balance_sheet(
    request: Request,
    db: Session = Depends(get_db),
) -> dict[str, object]:
    try:
        return _get_balance_sheet(db)
    except ReportError as e:
        raise _http_error(e, _language(request))


# ── Cash Flow ───────────────────────────────────────────────────────────────


@router.get("/cash-flow", response_model=CashFlowResponse)
def cash_flow(
    request: Request,
    from_date: date | None = Query(None),
    to_date: date | None = Query(None),
    db: Session = Depends(get_db),
) -> dict[str, object]:
    fd, td = _default_dates(from_date, to_date)
    lang = _language(request)
    try:
        return _get_cash_flow(db, fd, td, lang=lang)
    except ReportError as e:
        raise _http_error(e, lang)


# ── Account Statement ──────────────────────────────────────────────────────


@router.get("/account-statement/{account_id}", response_model=AccountStatementResponse)
def account_statement(
    account_id: UUID,
    request: Request,
    from_date: date | None = Query(None),
    to_date: date | None = Query(None),
    db: Session = Depends(get_db),
) -> dict[str, object]:
    try:
        return _get_account_statement(db, account_id, from_date, to_date)
    except ReportError as e:
        raise _http_error(e, _language(request))
