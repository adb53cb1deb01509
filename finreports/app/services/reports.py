"""Service layer for financial reports."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from sqlalchemy.orm import Session

from finreports.app.core.config import settings
from finreports.app.core.i18n import translate
from finreports.app.models.account import AccountRole, CashFlowType
from finreports.app.services.account_tree import build_forest, flatten_sections
from finreports.app.services.classification import (
    BALANCE_SHEET_PREFIXES,
    AccountCategory,
    cash_flow_activity,
    is_cash_account,
    is_depreciation_account,
    operating_group,
)
from finreports.app.services.errors import AccountNotFoundError, InvalidPeriodError
from finreports.app.services.ledger import (
    LedgerAccount,
    fetch_active_accounts,
    fetch_posted_lines,
    get_account,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
NOISE_THRESHOLD = Decimal("0.01")


@dataclass
class ReportLine:
    account_id: UUID
    account_code: str
    account_name: str
    debit: Decimal = ZERO
    credit: Decimal = ZERO
    balance: Decimal = ZERO
    level: int = 3
    is_parent: bool = False
    semantic_role: AccountRole | None = None

    @classmethod
    def for_account(cls, account: LedgerAccount) -> ReportLine:
        return cls(
            account_id=account.id,
            account_code=account.code,
            account_name=account.name,
            level=account.level,
            is_parent=account.is_parent,
            semantic_role=account.semantic_role,
        )

    def as_dict(self) -> dict[str, object]:
        return {
            "account_id": str(self.account_id),
            "account_code": self.account_code,
            "account_name": self.account_name,
            "debit": str(self.debit),
            "credit": str(self.credit),
            "balance": str(self.balance),
            "level": self.level,
            "is_parent": self.is_parent,
        }


# ── Helpers ──────────────────────────────────────────────────────────────────


def _check_period(start_date: date | None, end_date: date | None) -> None:
    if start_date and end_date and start_date > end_date:
        raise InvalidPeriodError(f"{start_date} is after {end_date}")


def _by_code(lines: dict[str, ReportLine]) -> list[ReportLine]:
    return sorted(lines.values(), key=lambda r: r.account_code)


def _iso(d: date | None) -> str | None:
    return d.isoformat() if d else None


# ── Trial Balance ───────────────────────────────────────────────────────────


def trial_balance_lines(
    db: Session,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[ReportLine]:
    """Per-account period debit/credit and closing balance (``debit - credit``).

    Activity dated before *start_date* only feeds the balance, as an opening
    balance; it is never shown in the period debit/credit columns.
    """
    _check_period(start_date, end_date)
    ledger_lines = fetch_posted_lines(db, end_date=end_date)

    rows: dict[str, ReportLine] = {}
    for line in ledger_lines:
        code = line.account.code
        rec = rows.get(code)
        if rec is None:
            rec = rows[code] = ReportLine.for_account(line.account)

        if start_date and line.entry_date < start_date:
            rec.balance += line.debit - line.credit
        else:
            rec.debit += line.debit
            rec.credit += line.credit
            rec.balance += line.debit - line.credit

    return _by_code(rows)


def get_trial_balance(
    db: Session,
    from_date: date | None = None,
    to_date: date | None = None,
) -> dict[str, object]:
    rows = trial_balance_lines(db, from_date, to_date)
    total_debit = sum((r.debit for r in rows), ZERO)
    total_credit = sum((r.credit for r in rows), ZERO)

    return {
        "from_date": _iso(from_date),
        "to_date": _iso(to_date),
        "accounts": [r.as_dict() for r in rows],
        "total_debit": str(total_debit),
        "total_credit": str(total_credit),
        "is_balanced": total_debit == total_credit,
    }


# ── Income Statement ────────────────────────────────────────────────────────


@dataclass
class IncomeStatement:
    revenues: list[ReportLine]
    cogs: list[ReportLine]
    expenses: list[ReportLine]
    total_revenue: Decimal
    total_cogs: Decimal
    gross_profit: Decimal
    total_expense: Decimal
    net_income: Decimal


def income_statement(db: Session, start_date: date, end_date: date) -> IncomeStatement:
    _check_period(start_date, end_date)
    ledger_lines = fetch_posted_lines(db, start_date, end_date)

    buckets: dict[AccountCategory, dict[str, ReportLine]] = {
        AccountCategory.REVENUE: {},
        AccountCategory.COST_OF_REVENUE: {},
        AccountCategory.EXPENSE: {},
    }
    for line in ledger_lines:
        bucket = buckets.get(line.account.category)
        if bucket is None:
            continue
        rec = bucket.get(line.account.code)
        if rec is None:
            rec = bucket[line.account.code] = ReportLine.for_account(line.account)
        rec.debit += line.debit
        rec.credit += line.credit

    # Revenue is credit-natured; COGS and expenses are debit-natured
    for rec in buckets[AccountCategory.REVENUE].values():
        rec.balance = rec.credit - rec.debit
    for category in (AccountCategory.COST_OF_REVENUE, AccountCategory.EXPENSE):
        for rec in buckets[category].values():
            rec.balance = rec.debit - rec.credit

    revenues = _by_code(buckets[AccountCategory.REVENUE])
    cogs = _by_code(buckets[AccountCategory.COST_OF_REVENUE])
    expenses = _by_code(buckets[AccountCategory.EXPENSE])

    total_revenue = sum((r.balance for r in revenues), ZERO)
    total_cogs = sum((r.balance for r in cogs), ZERO)
    total_expense = sum((r.balance for r in expenses), ZERO)
    gross_profit = total_revenue - total_cogs

    return IncomeStatement(
        revenues=revenues,
        cogs=cogs,
        expenses=expenses,
        total_revenue=total_revenue,
        total_cogs=total_cogs,
        gross_profit=gross_profit,
        total_expense=total_expense,
        net_income=gross_profit - total_expense,
    )


def get_income_statement(
    db: Session, from_date: date, to_date: date,
) -> dict[str, object]:
    stmt = income_statement(db, from_date, to_date)
    return {
        "from_date": from_date.isoformat(),
        "to_date": to_date.isoformat(),
        "revenues": [r.as_dict() for r in stmt.revenues],
        "cogs": [r.as_dict() for r in stmt.cogs],
        "expenses": [r.as_dict() for r in stmt.expenses],
        "total_revenue": str(stmt.total_revenue),
        "total_cogs": str(stmt.total_cogs),
        "gross_profit": str(stmt.gross_profit),
        "total_expense": str(stmt.total_expense),
        "net_income": str(stmt.net_income),
    }


# ── Balance Sheet ───────────────────────────────────────────────────────────


def get_balance_sheet(db: Session) -> dict[str, object]:
    """Balance sheet as of now, rolled up over the account hierarchy.

    Displayed balances are absolute values regardless of the ledger's
    debit/credit sign.
    """
    accounts = fetch_active_accounts(db)
    balances = {r.account_code: r.balance for r in trial_balance_lines(db)}

    roots = build_forest(accounts, balances)
    logger.debug("Balance sheet: %d accounts, %d roots", len(accounts), len(roots))
    sections, totals = flatten_sections(roots, settings.BALANCE_SHEET_DISPLAY_DEPTH)

    def _rows(category: AccountCategory) -> list[dict[str, object]]:
        return [
            {
                "id": str(node.account.id),
                "account_code": node.account.code,
                "name": node.account.name,
                "name_en": node.account.name_en,
                "balance": str(abs(node.total_balance)),
                "level": node.account.level,
                "is_parent": node.account.is_parent,
                "has_children": bool(node.children),
            }
            for node in sections[category]
        ]

    return {
        "as_of_date": date.today().isoformat(),
        "assets": _rows(AccountCategory.ASSET),
        "liabilities": _rows(AccountCategory.LIABILITY),
        "equity": _rows(AccountCategory.EQUITY),
        "total_assets": str(totals[AccountCategory.ASSET]),
        "total_liabilities": str(abs(totals[AccountCategory.LIABILITY])),
        "total_equity": str(abs(totals[AccountCategory.EQUITY])),
    }


# ── Cash Flow Statement (indirect method) ──────────────────────────────────


def get_cash_flow(
    db: Session, from_date: date, to_date: date, lang: str | None = None,
) -> dict[str, object]:
    lang = lang or settings.DEFAULT_LANGUAGE
    stmt = income_statement(db, from_date, to_date)

    details: dict[CashFlowType, list[dict[str, str]]] = {t: [] for t in CashFlowType}
    totals: dict[CashFlowType, Decimal] = {t: ZERO for t in CashFlowType}

    def _add(activity: CashFlowType, name: str, amount: Decimal) -> None:
        if abs(amount) < NOISE_THRESHOLD:
            return
        details[activity].append({"name": name, "amount": str(amount)})
        totals[activity] += amount

    # Depreciation reduced net income without consuming cash
    depreciation = sum(
        (
            r.balance
            for r in stmt.expenses
            if is_depreciation_account(r.account_name, r.semantic_role)
        ),
        ZERO,
    )
    _add(CashFlowType.OPERATING, translate(lang, "cash_flow.depreciation"), depreciation)

    movements = fetch_posted_lines(db, from_date, to_date, code_prefixes=BALANCE_SHEET_PREFIXES)

    # Cash effect of a balance-sheet change is credit - debit for every category
    changes: dict[str, Decimal] = {}
    accounts: dict[str, LedgerAccount] = {}
    for line in movements:
        code = line.account.code
        if is_cash_account(code):
            continue
        accounts.setdefault(code, line.account)
        changes[code] = changes.get(code, ZERO) + (line.credit - line.debit)

    groups: dict[AccountRole, Decimal] = {
        AccountRole.RECEIVABLE: ZERO,
        AccountRole.INVENTORY: ZERO,
        AccountRole.PAYABLE: ZERO,
    }
    for code in sorted(changes):
        account = accounts[code]
        cash_effect = changes[code]
        activity = cash_flow_activity(code, account.cash_flow_type)

        if activity != CashFlowType.OPERATING:
            _add(
                activity,
                translate(lang, "cash_flow.net_change_in_account", name=account.name),
                cash_effect,
            )
            continue

        group = operating_group(code, account.name, account.semantic_role)
        if group is not None:
            groups[group] += cash_effect
        else:
            _add(
                activity,
                translate(lang, "cash_flow.change_in_account", name=account.name),
                cash_effect,
            )

    _add(CashFlowType.OPERATING, translate(lang, "cash_flow.change_in_receivables"),
         groups[AccountRole.RECEIVABLE])
    _add(CashFlowType.OPERATING, translate(lang, "cash_flow.change_in_inventory"),
         groups[AccountRole.INVENTORY])
    _add(CashFlowType.OPERATING, translate(lang, "cash_flow.change_in_payables"),
         groups[AccountRole.PAYABLE])

    operating = stmt.net_income + totals[CashFlowType.OPERATING]
    investing = totals[CashFlowType.INVESTING]
    financing = totals[CashFlowType.FINANCING]

    return {
        "from_date": from_date.isoformat(),
        "to_date": to_date.isoformat(),
        "net_income": str(stmt.net_income),
        "operating_activities": str(operating),
        "operating_details": details[CashFlowType.OPERATING],
        "investing_activities": str(investing),
        "investing_details": details[CashFlowType.INVESTING],
        "financing_activities": str(financing),
        "financing_details": details[CashFlowType.FINANCING],
        "net_cash_flow": str(operating + investing + financing),
    }


# ── Account Statement ──────────────────────────────────────────────────────


def get_account_statement(
    db: Session,
    account_id: UUID,
    from_date: date | None = None,
    to_date: date | None = None,
) -> dict[str, object]:
    """Running statement of a single account (debit-natured balance)."""
    _check_period(from_date, to_date)
    account = get_account(db, account_id)
    if account is None:
        raise AccountNotFoundError(f"Account {account_id} not found")

    lines = fetch_posted_lines(db, end_date=to_date, account_id=account.id)
    in_period = [ln for ln in lines if not (from_date and ln.entry_date < from_date)]
    opening_balance = sum(
        (ln.debit - ln.credit for ln in lines if from_date and ln.entry_date < from_date),
        ZERO,
    )

    running = opening_balance
    total_debit = ZERO
    total_credit = ZERO
    transactions: list[dict[str, str]] = []

    for line in in_period:
        running += line.debit - line.credit
        total_debit += line.debit
        total_credit += line.credit
        transactions.append({
            "date": line.entry_date.isoformat(),
            "description": line.description or line.entry_description or "-",
            "reference": line.entry_number,
            "debit": str(line.debit),
            "credit": str(line.credit),
            "balance": str(running),
        })

    return {
        "account_id": str(account.id),
        "account_code": account.code,
        "account_name": account.name,
        "from_date": _iso(from_date),
        "to_date": _iso(to_date),
        "opening_balance": str(opening_balance),
        "transactions": transactions,
        "total_debit": str(total_debit),
        "total_credit": str(total_credit),
        "closing_balance": str(running),
    }
