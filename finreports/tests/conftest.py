"""Shared test fixtures.

Each test runs against its own in-memory SQLite database holding the ledger
schema; the database is dropped when the test completes, so tests never
pollute each other.
"""

from __future__ import annotations

import itertools
import os
from datetime import date
from decimal import Decimal
from typing import Callable, Generator

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from finreports.app.core.database import Base, get_db
from finreports.app.main import app
from finreports.app.models.accounting import (
    Account,
    AccountRole,
    CashFlowType,
    EntryStatus,
    JournalEntry,
    JournalEntryLine,
)


# ─── DB session on a throwaway database ──────────────────────────────────────


@pytest.fixture()
def db() -> Generator[Session, None, None]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    session = Session(bind=engine)

    yield session

    session.close()
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture()
def client(db: Session) -> Generator[TestClient, None, None]:
    """FastAPI TestClient wired to the test session."""

    def _override_get_db() -> Generator[Session, None, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ─── Ledger factories ────────────────────────────────────────────────────────


@pytest.fixture()
def make_account(db: Session) -> Callable[..., Account]:
    """Factory creating an account; level defaults to the code length (max 4)."""

    def _make(
        code: str,
        name: str,
        parent: Account | None = None,
        level: int | None = None,
        is_parent: bool = False,
        is_active: bool = True,
        cash_flow_type: CashFlowType | None = None,
        semantic_role: AccountRole | None = None,
    ) -> Account:
        acc = Account(
            code=code,
            name=name,
            parent_id=parent.id if parent else None,
            level=level if level is not None else min(len(code), 4),
            is_parent=is_parent,
            is_active=is_active,
            cash_flow_type=cash_flow_type,
            semantic_role=semantic_role,
        )
        db.add(acc)
        db.flush()
        return acc

    return _make


@pytest.fixture()
def post_entry(db: Session) -> Callable[..., JournalEntry]:
    """Factory creating a journal entry from ``(account, debit, credit)`` lines."""
    numbers = itertools.count(1)

    def _post(
        entry_date: date,
        lines: list[tuple[Account | None, Decimal, Decimal]],
        status: EntryStatus = EntryStatus.POSTED,
        description: str | None = "Test entry",
    ) -> JournalEntry:
        je = JournalEntry(
            entry_number=f"JE-{next(numbers):05d}",
            entry_date=entry_date,
            status=status,
            description=description,
        )
        db.add(je)
        db.flush()
        for account, debit, credit in lines:
            db.add(JournalEntryLine(
                journal_entry_id=je.id,
                account_id=account.id if account else None,
                debit=debit,
                credit=credit,
            ))
        db.flush()
        return je

    return _post
