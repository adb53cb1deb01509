"""Read access to the posted general ledger."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from finreports.app.models.accounting import (
    Account,
    AccountRole,
    CashFlowType,
    EntryStatus,
    JournalEntry,
    JournalEntryLine,
)
from finreports.app.services.classification import AccountCategory, classify_account_code
from finreports.app.services.errors import LedgerUnavailableError

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


@dataclass(frozen=True)
class LedgerAccount:
    id: UUID
    code: str
    name: str
    name_en: str | None
    parent_id: UUID | None
    level: int
    is_parent: bool
    category: AccountCategory | None
    cash_flow_type: CashFlowType | None = None
    semantic_role: AccountRole | None = None


@dataclass(frozen=True)
class LedgerLine:
    account: LedgerAccount
    entry_date: date
    entry_number: str
    entry_description: str | None
    description: str | None
    debit: Decimal
    credit: Decimal


def to_ledger_account(account: Account) -> LedgerAccount:
    return LedgerAccount(
        id=account.id,
        code=account.code,
        name=account.name,
        name_en=account.name_en,
        parent_id=account.parent_id,
        level=account.level,
        is_parent=account.is_parent,
        category=classify_account_code(account.code),
        cash_flow_type=account.cash_flow_type,
        semantic_role=account.semantic_role,
    )


def fetch_posted_lines(
    db: Session,
    start_date: date | None = None,
    end_date: date | None = None,
    code_prefixes: tuple[str, ...] | None = None,
    account_id: UUID | None = None,
) -> list[LedgerLine]:
    """Posted journal-entry lines joined to their account and entry header.

    Both date bounds are inclusive and optional. Lines whose account is
    missing are dropped.
    """
    try:
        query = (
            db.query(JournalEntryLine, Account, JournalEntry)
            .join(JournalEntry, JournalEntryLine.journal_entry_id == JournalEntry.id)
            .outerjoin(Account, JournalEntryLine.account_id == Account.id)
            .filter(JournalEntry.status == EntryStatus.POSTED)
        )
        if start_date:
            query = query.filter(JournalEntry.entry_date >= start_date)
        if end_date:
            query = query.filter(JournalEntry.entry_date <= end_date)
        if code_prefixes:
            query = query.filter(or_(*(Account.code.like(f"{p}%") for p in code_prefixes)))
        if account_id:
            query = query.filter(JournalEntryLine.account_id == account_id)
        rows = query.order_by(JournalEntry.entry_date, JournalEntry.entry_number).all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to read posted ledger lines")
        raise LedgerUnavailableError("ledger query failed") from exc

    accounts: dict[UUID, LedgerAccount] = {}
    lines: list[LedgerLine] = []
    for line, account, entry in rows:
        if account is None or not account.code:
            logger.debug("Skipping ledger line %s without a linked account", line.id)
            continue
        resolved = accounts.get(account.id)
        if resolved is None:
            resolved = accounts[account.id] = to_ledger_account(account)
        lines.append(
            LedgerLine(
                account=resolved,
                entry_date=entry.entry_date,
                entry_number=entry.entry_number,
                entry_description=entry.description,
                description=line.description,
                debit=Decimal(str(line.debit or ZERO)),
                credit=Decimal(str(line.credit or ZERO)),
            )
        )
    return lines


def fetch_active_accounts(db: Session) -> list[LedgerAccount]:
    """Active chart of accounts ordered by code."""
    try:
        accounts = (
            db.query(Account)
            .filter(Account.is_active.is_(True))
            .order_by(Account.code)
            .all()
        )
    except SQLAlchemyError as exc:
        logger.exception("Failed to read chart of accounts")
        raise LedgerUnavailableError("chart of accounts query failed") from exc
    return [to_ledger_account(a) for a in accounts]


def get_account(db: Session, account_id: UUID) -> LedgerAccount | None:
    try:
        account = db.query(Account).filter(Account.id == account_id).first()
    except SQLAlchemyError as exc:
        logger.exception("Failed to read account %s", account_id)
        raise LedgerUnavailableError("account query failed") from exc
    return to_ledger_account(account) if account else None
