# finreports/app/models/accounting.py: ledger model registry
#
# Re-exports every ledger model so callers (and Base.metadata) see the
# full schema from a single import.

from finreports.app.models.account import Account, AccountRole, CashFlowType
from finreports.app.models.journal import EntryStatus, JournalEntry, JournalEntryLine

__all__ = [
    "Account",
    "AccountRole",
    "CashFlowType",
    "EntryStatus",
    "JournalEntry",
    "JournalEntryLine",
]
