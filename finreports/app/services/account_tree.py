"""Chart-of-accounts forest used by the balance sheet.

The tree is handled in four passes: index the flat account list, attach
children through ``parent_id``, roll balances up post-order, and flatten to
display rows per statement section.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID

from finreports.app.services.classification import (
    BALANCE_SHEET_CATEGORIES,
    AccountCategory,
)
from finreports.app.services.ledger import LedgerAccount

ZERO = Decimal("0")


@dataclass
class BalanceSheetNode:
    account: LedgerAccount
    computed_balance: Decimal = ZERO
    total_balance: Decimal = ZERO
    children: list[BalanceSheetNode] = field(default_factory=list)

    @property
    def code(self) -> str:
        return self.account.code

    @property
    def level(self) -> int:
        return self.account.level


def index_accounts(
    accounts: list[LedgerAccount], balances: dict[str, Decimal],
) -> dict[UUID, BalanceSheetNode]:
    """One node per account, seeded with its own ledger balance (0 if idle)."""
    return {
        acc.id: BalanceSheetNode(account=acc, computed_balance=balances.get(acc.code, ZERO))
        for acc in accounts
    }


def attach_children(nodes: dict[UUID, BalanceSheetNode]) -> list[BalanceSheetNode]:
    """Link every node under its parent and return the roots.

    A node whose parent is missing from *nodes* becomes a root.
    """
    roots: list[BalanceSheetNode] = []
    for node in nodes.values():
        parent_id = node.account.parent_id
        parent = nodes.get(parent_id) if parent_id is not None else None
        if parent is not None:
            parent.children.append(node)
        else:
            roots.append(node)
    return roots


def roll_up(node: BalanceSheetNode) -> Decimal:
    """Set ``total_balance`` on *node* and all its descendants, children first."""
    children_sum = ZERO
    for child in node.children:
        children_sum += roll_up(child)
    node.total_balance = node.computed_balance + children_sum
    return node.total_balance


def flatten_sections(
    roots: list[BalanceSheetNode], depth_limit: int = 3,
) -> tuple[dict[AccountCategory, list[BalanceSheetNode]], dict[AccountCategory, Decimal]]:
    """Display rows and top-level totals per balance-sheet category.

    Totals come from level-1 nodes only so a parent and its visible children
    are never counted twice. Traversal stops at *depth_limit*; balances below
    it are already folded into their ancestors by :func:`roll_up`.
    """
    sections: dict[AccountCategory, list[BalanceSheetNode]] = {
        c: [] for c in BALANCE_SHEET_CATEGORIES
    }
    totals: dict[AccountCategory, Decimal] = {c: ZERO for c in BALANCE_SHEET_CATEGORIES}

    def _visit(node: BalanceSheetNode) -> None:
        category = node.account.category
        if category in sections:
            level = node.level
            should_show = level <= depth_limit or (
                not node.account.is_parent and level < depth_limit
            )
            if should_show and (node.total_balance != ZERO or level == 1):
                sections[category].append(node)
            if level == 1:
                totals[category] += node.total_balance

        if node.level < depth_limit:
            for child in sorted(node.children, key=lambda n: n.code):
                _visit(child)

    for root in sorted(roots, key=lambda n: n.code):
        _visit(root)

    return sections, totals


def build_forest(
    accounts: list[LedgerAccount], balances: dict[str, Decimal],
) -> list[BalanceSheetNode]:
    """Index, attach and roll up; returns the rolled-up roots."""
    nodes = index_accounts(accounts, balances)
    roots = attach_children(nodes)
    for root in roots:
        roll_up(root)
    return roots
