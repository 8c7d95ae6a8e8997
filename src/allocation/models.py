from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel


@dataclass(frozen=True)
class HoldingRecord:
    symbol: str
    description: str
    account: str
    account_shortened: str
    investment_type: str
    morningstar_category: str
    stock_style: str
    bond_style: str
    quantity: float
    price: float
    value: float  # authoritative dollar amount, always >= 0
    portfolio_weight: str  # exported text, not recomputed
    asset_class: str


@dataclass(frozen=True)
class Group:
    key: str
    items: tuple[HoldingRecord, ...]
    value: float


@dataclass(frozen=True)
class AccountGroup(Group):
    account: str  # first record's full label
    account_type: str


@dataclass(frozen=True)
class ConsolidatedGroup(Group):
    description: str
    asset_class: str
    accounts: tuple[str, ...]  # distinct shortened labels, first-seen order
    total_quantity: float


@dataclass(frozen=True)
class ParsedExport:
    holdings: tuple[HoldingRecord, ...]
    as_of_date: str
    headers: tuple[str, ...] = ()
    row_count: int = 0
    skipped_count: int = 0


class GroupSummaryRow(BaseModel):
    key: str
    value: float
    pct_of_total: float
    item_count: int


class PortfolioMetrics(BaseModel):
    total: float
    equity_total: float
    bond_total: float
    cash_total: float
    us_equity_total: float
    intl_equity_total: float
    invested: float
    individual_stocks: float
    stock_pct: float  # of invested
    bond_pct: float  # of invested
    us_equity_pct: float  # of equity_total
    intl_equity_pct: float  # of equity_total
    cash_pct: float  # of total
