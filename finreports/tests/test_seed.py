"""Tests for the chart-of-accounts seed script."""
from __future__ import annotations

from finreports.app.models.accounting import Account, AccountRole
from finreports.scripts.seed import ACCOUNTS, seed_accounts


def test_seed_creates_hierarchy(db):
    created = seed_accounts(db)
    assert created == len(ACCOUNTS)

    by_code = {a.code: a for a in db.query(Account).all()}
    assert by_code["1111"].parent_id == by_code["111"].id
    assert by_code["1111"].level == 4
    assert by_code["111"].level == 3
    assert by_code["1"].parent_id is None
    assert by_code["5301"].semantic_role == AccountRole.DEPRECIATION


def test_seed_is_idempotent(db):
    seed_accounts(db)
    assert seed_accounts(db) == 0
    assert db.query(Account).count() == len(ACCOUNTS)
