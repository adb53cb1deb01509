"""Pydantic response schemas for financial reports."""
from __future__ import annotations

from pydantic import BaseModel


# ── Shared line-item ─────────────────────────────────────────────────────────

class ReportLineOut(BaseModel):
    account_id: str
    account_code: str
    account_name: str
    debit: str
    credit: str
    balance: str
    level: int
    is_parent: bool


# ── Trial Balance ────────────────────────────────────────────────────────────

class TrialBalanceResponse(BaseModel):
    from_date: str | None
    to_date: str | None
    accounts: list[ReportLineOut]
    total_debit: str
    total_credit: str
    is_balanced: bool


# ── Income Statement ─────────────────────────────────────────────────────────

class IncomeStatementResponse(BaseModel):
    from_date: str
    to_date: str
    revenues: list[ReportLineOut]
    cogs: list[ReportLineOut]
    expenses: list[ReportLineOut]
    total_revenue: str
    total_cogs: str
    gross_profit: str
    total_expense: str
    net_income: str


# ── Balance Sheet ────────────────────────────────────────────────────────────

class BalanceSheetRow(BaseModel):
    id: str
    account_code: str
    name: str
    name_en: str | None
    balance: str
    level: int
    is_parent: bool
    has_children: bool


class BalanceSheetResponse(BaseModel):
    as_of_date: str
    assets: list[BalanceSheetRow]
    liabilities: list[BalanceSheetRow]
    equity: list[BalanceSheetRow]
    total_assets: str
    total_liabilities: str
    total_equity: str


# ── Cash Flow Statement ─────────────────────────────────────────────────────

class CashFlowDetail(BaseModel):
    name: str
    amount: str


class CashFlowResponse(BaseModel):
    from_date: str
    to_date: str
    net_income: str
    operating_activities: str
    operating_details: list[CashFlowDetail]
    investing_activities: str
    investing_details: list[CashFlowDetail]
    financing_activities: str
    financing_details: list[CashFlowDetail]
    net_cash_flow: str


# ── Account Statement ───────────────────────────────────────────────────────

class StatementTransaction(BaseModel):
    date: str
    description: str
    reference: str
    debit: str
    credit: str
    balance: str


class AccountStatementResponse(BaseModel):
    account_id: str
    account_code: str
    account_name: str
    from_date: str | None
    to_date: str | None
    opening_balance: str
    transactions: list[StatementTransaction]
    total_debit: str
    total_credit: str
    closing_balance: str
