"""Seed the database with a standard Arabic chart of accounts.

Usage:
    python -m finreports.scripts.seed
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from finreports.app.core.config import settings
from finreports.app.core.database import SessionLocal
from finreports.app.core.logging_config import configure_logging
from finreports.app.models.accounting import Account, AccountRole, CashFlowType

logger = logging.getLogger("finreports.scripts.seed")

# (code, name, name_en, parent_code, is_parent, cash_flow_type, semantic_role)
ACCOUNTS: list[
    tuple[str, str, str, str | None, bool, CashFlowType | None, AccountRole | None]
] = [
    # Assets
    ("1", "الأصول", "Assets", None, True, None, None),
    ("11", "الأصول المتداولة", "Current Assets", "1", True, None, None),
    ("111", "النقدية وما في حكمها", "Cash and Equivalents", "11", True, None, None),
    ("1111", "الصندوق", "Cash on Hand", "111", False, None, None),
    ("1112", "البنك", "Bank", "111", False, None, None),
    ("112", "العملاء", "Accounts Receivable", "11", True, None, AccountRole.RECEIVABLE),
    ("12", "الأصول غير المتداولة", "Non-current Assets", "1", True, None, None),
    ("120", "المخزون", "Inventory", "12", True, None, AccountRole.INVENTORY),
    ("1201", "مخزون البضاعة", "Merchandise Inventory", "120", False, None, AccountRole.INVENTORY),
    ("121", "الأصول الثابتة", "Fixed Assets", "12", True, CashFlowType.INVESTING, None),
    ("1211", "السيارات", "Vehicles", "121", False, CashFlowType.INVESTING, None),
    ("1212", "الأثاث والمعدات", "Furniture and Equipment", "121", False, CashFlowType.INVESTING, None),
    # Liabilities
    ("2", "الخصوم", "Liabilities", None, True, None, None),
    ("21", "الخصوم المتداولة", "Current Liabilities", "2", True, None, None),
    ("211", "الموردين", "Accounts Payable", "21", True, None, AccountRole.PAYABLE),
    ("212", "مصروفات مستحقة", "Accrued Expenses", "21", True, None, None),
    ("22", "الخصوم طويلة الأجل", "Long-term Liabilities", "2", True, None, None),
    ("2201", "قروض طويلة الأجل", "Long-term Loans", "22", False, CashFlowType.FINANCING, None),
    # Equity
    ("3", "حقوق الملكية", "Equity", None, True, None, None),
    ("31", "رأس المال", "Capital", "3", False, CashFlowType.FINANCING, None),
    ("32", "الأرباح المحتجزة", "Retained Earnings", "3", False, CashFlowType.FINANCING, None),
    # Revenue
    ("4", "الإيرادات", "Revenue", None, True, None, None),
    ("41", "إيرادات المبيعات", "Sales Revenue", "4", True, None, None),
    ("4101", "مبيعات البضاعة", "Merchandise Sales", "41", False, None, None),
    ("42", "إيرادات أخرى", "Other Income", "4", False, None, None),
    # Expenses
    ("5", "المصروفات", "Expenses", None, True, None, None),
    ("51", "تكلفة المبيعات", "Cost of Sales", "5", True, None, None),
    ("5101", "تكلفة البضاعة المباعة", "Cost of Goods Sold", "51", False, None, None),
    ("52", "المصروفات التشغيلية", "Operating Expenses", "5", True, None, None),
    ("5201", "الرواتب والأجور", "Salaries and Wages", "52", False, None, None),
    ("5202", "الإيجار", "Rent", "52", False, None, None),
    ("53", "مصروفات الإهلاك", "Depreciation Expense", "5", True, None, AccountRole.DEPRECIATION),
    ("5301", "إهلاك السيارات", "Vehicles Depreciation", "53", False, None, AccountRole.DEPRECIATION),
]


def _level(code: str) -> int:
    """Codes grow one digit per level down to level 3, then two digits."""
    return len(code) if len(code) <= 3 else 4


def seed_accounts(db: Session) -> int:
    """Create missing chart-of-accounts rows; returns the number created."""
    by_code: dict[str, Account] = {a.code: a for a in db.query(Account).all()}
    created = 0
    for code, name, name_en, parent_code, is_parent, cf_type, role in ACCOUNTS:
        if code in by_code:
            continue
        parent = by_code.get(parent_code) if parent_code else None
        account = Account(
            code=code,
            name=name,
            name_en=name_en,
            parent_id=parent.id if parent else None,
            level=_level(code),
            is_parent=is_parent,
            cash_flow_type=cf_type,
            semantic_role=role,
        )
        db.add(account)
        db.flush()
        by_code[code] = account
        created += 1
    return created


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    db = SessionLocal()
    try:
        created = seed_accounts(db)
        db.commit()
        logger.info("Seeded %d accounts", created)
    finally:
        db.close()


if __name__ == "__main__":
    main()
