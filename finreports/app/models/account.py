from __future__ import annotations

import enum
import uuid
from datetime import datetime

from sqlalchemy import DateTime, Enum, ForeignKey, Index, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from finreports.app.core.database import Base


class CashFlowType(str, enum.Enum):
    OPERATING = "operating"
    INVESTING = "investing"
    FINANCING = "financing"


class AccountRole(str, enum.Enum):
    """Semantic role used by the cash flow statement's operating groups."""

    INVENTORY = "inventory"
    RECEIVABLE = "receivable"
    PAYABLE = "payable"
    DEPRECIATION = "depreciation"


class Account(Base):
    __tablename__ = "accounts"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    code: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    name_en: Mapped[str | None] = mapped_column(String(255), nullable=True)
    parent_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("accounts.id"), nullable=True
    )
    level: Mapped[int] = mapped_column(default=1)
    is_parent: Mapped[bool] = mapped_column(default=False)
    is_active: Mapped[bool] = mapped_column(default=True)
    cash_flow_type: Mapped[CashFlowType | None] = mapped_column(
        Enum(CashFlowType), nullable=True
    )
    semantic_role: Mapped[AccountRole | None] = mapped_column(
        Enum(AccountRole), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    parent: Mapped[Account | None] = relationship(remote_side="Account.id")
    lines: Mapped[list["JournalEntryLine"]] = relationship(back_populates="account")  # noqa: F821

    __table_args__ = (
        Index("ix_accounts_code", "code"),
        Index("ix_accounts_parent", "parent_id"),
    )
