"""Account classification rules shared by every financial statement.

Categories are derived from the leading digits of the account code and
resolved once per account when the ledger is read.
"""

from __future__ import annotations

import enum

from finreports.app.models.account import AccountRole, CashFlowType


class AccountCategory(str, enum.Enum):
    ASSET = "ASSET"
    LIABILITY = "LIABILITY"
    EQUITY = "EQUITY"
    REVENUE = "REVENUE"
    COST_OF_REVENUE = "COST_OF_REVENUE"
    EXPENSE = "EXPENSE"


BALANCE_SHEET_CATEGORIES = (
    AccountCategory.ASSET,
    AccountCategory.LIABILITY,
    AccountCategory.EQUITY,
)

BALANCE_SHEET_PREFIXES = ("1", "2", "3")

# Cash and bank accounts (1111 cash, 1112 bank, ...)
CASH_PREFIX = "111"

INVENTORY_PREFIX = "120"
FIXED_ASSET_PREFIX = "12"
RECEIVABLE_PREFIX = "112"
PAYABLE_PREFIX = "211"
LONG_TERM_LIABILITY_PREFIX = "22"
EQUITY_PREFIX = "3"

_DEPRECIATION_MARKERS = ("إهلاك", "depreciation")
_INVENTORY_MARKERS = ("مخزون",)
_RECEIVABLE_MARKERS = ("عملاء", "ذمم مدينة")
_PAYABLE_MARKERS = ("موردين", "ذمم دائنة")


def classify_account_code(code: str) -> AccountCategory | None:
    """Map an account code to its statement category; first match wins."""
    if code.startswith("1"):
        return AccountCategory.ASSET
    if code.startswith("2"):
        return AccountCategory.LIABILITY
    if code.startswith("3"):
        return AccountCategory.EQUITY
    if code.startswith("4"):
        return AccountCategory.REVENUE
    # "51" must be checked before the generic "5" expense rule
    if code.startswith("51"):
        return AccountCategory.COST_OF_REVENUE
    if code.startswith("5"):
        return AccountCategory.EXPENSE
    return None


def is_cash_account(code: str) -> bool:
    return code.startswith(CASH_PREFIX)


def is_depreciation_account(name: str, role: AccountRole | None) -> bool:
    """Explicit role wins; untagged accounts fall back to name matching."""
    if role is not None:
        return role == AccountRole.DEPRECIATION
    lowered = name.lower()
    return any(marker in lowered for marker in _DEPRECIATION_MARKERS)


def cash_flow_activity(code: str, tag: CashFlowType | None) -> CashFlowType:
    """Activity section for a balance-sheet account's period change."""
    if tag is not None:
        return tag
    if code.startswith(FIXED_ASSET_PREFIX) and not code.startswith(INVENTORY_PREFIX):
        return CashFlowType.INVESTING
    if code.startswith(LONG_TERM_LIABILITY_PREFIX) or code.startswith(EQUITY_PREFIX):
        return CashFlowType.FINANCING
    return CashFlowType.OPERATING


def operating_group(code: str, name: str, role: AccountRole | None) -> AccountRole | None:
    """Composite working-capital line an operating account rolls into, if any."""
    if role is not None:
        if role in (AccountRole.INVENTORY, AccountRole.RECEIVABLE, AccountRole.PAYABLE):
            return role
        return None
    if code.startswith(INVENTORY_PREFIX) or _contains_any(name, _INVENTORY_MARKERS):
        return AccountRole.INVENTORY
    if code.startswith(RECEIVABLE_PREFIX) or _contains_any(name, _RECEIVABLE_MARKERS):
        return AccountRole.RECEIVABLE
    if code.startswith(PAYABLE_PREFIX) or _contains_any(name, _PAYABLE_MARKERS):
        return AccountRole.PAYABLE
    return None


def _contains_any(name: str, markers: tuple[str, ...]) -> bool:
    return any(marker in name for marker in markers)
