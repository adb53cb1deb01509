from __future__ import annotations

import enum
import uuid
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Numeric,
    String,
    Text,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from finreports.app.core.database import Base


class EntryStatus(str, enum.Enum):
    DRAFT = "draft"
    POSTED = "posted"


class JournalEntry(Base):
    """Journal entry header.

    Entries are written and balanced by the posting side of the application;
    the reporting layer only reads entries whose status is ``posted``.
    """

    __tablename__ = "journal_entries"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    entry_number: Mapped[str] = mapped_column(String(50), nullable=False)
    entry_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[EntryStatus] = mapped_column(
        Enum(EntryStatus), nullable=False, default=EntryStatus.DRAFT
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    lines: Mapped[list[JournalEntryLine]] = relationship(
        back_populates="journal_entry", cascade="all, delete-orphan"
    )

    __table_args__ = (
        Index("ix_journal_entries_date", "entry_date"),
        Index("ix_journal_entries_status", "status"),
    )


class JournalEntryLine(Base):
    """A single debit/credit line within a journal entry.

    ``account_id`` is nullable: lines left behind by a removed account are
    kept and skipped by the reports.
    """

    __tablename__ = "journal_entry_lines"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    journal_entry_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("journal_entries.id"), nullable=False
    )
    account_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("accounts.id", ondelete="SET NULL"), nullable=True
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    debit: Mapped[Decimal] = mapped_column(
        Numeric(precision=20, scale=4), nullable=False, default=Decimal("0")
    )
    credit: Mapped[Decimal] = mapped_column(
        Numeric(precision=20, scale=4), nullable=False, default=Decimal("0")
    )

    journal_entry: Mapped[JournalEntry] = relationship(back_populates="lines")
    account: Mapped["Account | None"] = relationship(back_populates="lines")  # noqa: F821

    __table_args__ = (
        CheckConstraint("debit >= 0", name="ck_line_debit_non_negative"),
        CheckConstraint("credit >= 0", name="ck_line_credit_non_negative"),
        Index("ix_lines_journal", "journal_entry_id"),
        Index("ix_lines_account", "account_id"),
    )
