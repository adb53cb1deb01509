"""Tests for account-code classification rules."""
from __future__ import annotations

import pytest

from finreports.app.models.account import AccountRole, CashFlowType
from finreports.app.services.classification import (
    AccountCategory,
    cash_flow_activity,
    classify_account_code,
    is_cash_account,
    is_depreciation_account,
    operating_group,
)


class TestClassifyAccountCode:

    @pytest.mark.parametrize("code, expected", [
        ("1110", AccountCategory.ASSET),
        ("2", AccountCategory.LIABILITY),
        ("3100", AccountCategory.EQUITY),
        ("4100", AccountCategory.REVENUE),
        ("5200", AccountCategory.EXPENSE),
        ("5", AccountCategory.EXPENSE),
    ])
    def test_leading_digit(self, code, expected):
        assert classify_account_code(code) == expected

    @pytest.mark.parametrize("code", ["51", "510", "5101"])
    def test_cogs_takes_precedence_over_expense(self, code):
        assert classify_account_code(code) == AccountCategory.COST_OF_REVENUE

    @pytest.mark.parametrize("code", ["6100", "9", "0001", ""])
    def test_unknown_prefix_is_unclassified(self, code):
        assert classify_account_code(code) is None


def test_cash_accounts():
    assert is_cash_account("1111")
    assert is_cash_account("1112")
    assert not is_cash_account("1120")


class TestCashFlowActivity:

    @pytest.mark.parametrize("code, expected", [
        ("1211", CashFlowType.INVESTING),
        ("12", CashFlowType.INVESTING),
        ("1201", CashFlowType.OPERATING),
        ("1120", CashFlowType.OPERATING),
        ("2110", CashFlowType.OPERATING),
        ("2201", CashFlowType.FINANCING),
        ("31", CashFlowType.FINANCING),
    ])
    def test_code_fallback(self, code, expected):
        assert cash_flow_activity(code, None) == expected

    def test_explicit_tag_wins(self):
        assert cash_flow_activity("1211", CashFlowType.OPERATING) == CashFlowType.OPERATING
        assert cash_flow_activity("1120", CashFlowType.FINANCING) == CashFlowType.FINANCING


class TestOperatingGroup:

    @pytest.mark.parametrize("code, name, expected", [
        ("1201", "بضاعة", AccountRole.INVENTORY),
        ("1150", "مخزون قطع الغيار", AccountRole.INVENTORY),
        ("1121", "عميل أ", AccountRole.RECEIVABLE),
        ("1160", "ذمم مدينة أخرى", AccountRole.RECEIVABLE),
        ("1170", "حسابات العملاء", AccountRole.RECEIVABLE),
        ("2111", "مورد أ", AccountRole.PAYABLE),
        ("2150", "ذمم دائنة متنوعة", AccountRole.PAYABLE),
        ("2120", "مصروفات مستحقة", None),
    ])
    def test_code_and_name_fallback(self, code, name, expected):
        assert operating_group(code, name, None) == expected

    def test_explicit_role_wins(self):
        assert operating_group("1201", "مخزون", AccountRole.PAYABLE) == AccountRole.PAYABLE
        assert operating_group("1180", "Prepaid", AccountRole.RECEIVABLE) == AccountRole.RECEIVABLE

    def test_non_group_role_is_listed_individually(self):
        assert operating_group("1201", "مخزون", AccountRole.DEPRECIATION) is None


class TestDepreciationMarker:

    @pytest.mark.parametrize("name", [
        "إهلاك السيارات",
        "Vehicle Depreciation",
        "DEPRECIATION - equipment",
    ])
    def test_name_fallback(self, name):
        assert is_depreciation_account(name, None)

    def test_other_names(self):
        assert not is_depreciation_account("الإيجار", None)

    def test_explicit_role(self):
        assert is_depreciation_account("Amortisation", AccountRole.DEPRECIATION)
        assert not is_depreciation_account("إهلاك", AccountRole.INVENTORY)
