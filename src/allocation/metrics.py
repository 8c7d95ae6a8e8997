from __future__ import annotations

from typing import Iterable, Sequence

from src.allocation.classify import CASH, INTL_BONDS, INTL_EQUITY, US_BONDS, US_EQUITY
from src.allocation.models import Group, HoldingRecord, PortfolioMetrics


FIXED_INCOME = "Fixed Income"


def _pct(part: float, whole: float) -> float:
    return part / whole * 100.0 if whole > 0 else 0.0


def compute_metrics(asset_class_groups: Sequence[Group], holdings: Iterable[HoldingRecord]) -> PortfolioMetrics:
    by_class = {g.key: g.value for g in asset_class_groups}

    def val(name: str) -> float:
        return by_class.get(name, 0.0)

    holdings = list(holdings)
    total = sum(h.value for h in holdings)
    us_eq = val(US_EQUITY)
    intl_eq = val(INTL_EQUITY)
    equity = us_eq + intl_eq
    bonds = val(US_BONDS) + val(INTL_BONDS) + val(FIXED_INCOME)
    cash = val(CASH)
    invested = equity + bonds
    individual_stocks = sum(h.value for h in holdings if h.investment_type.strip().lower() == "equity")
    return PortfolioMetrics(
        total=total,
        equity_total=equity,
        bond_total=bonds,
        cash_total=cash,
        us_equity_total=us_eq,
        intl_equity_total=intl_eq,
        invested=invested,
        individual_stocks=individual_stocks,
        stock_pct=_pct(equity, invested),
        bond_pct=_pct(bonds, invested),
        us_equity_pct=_pct(us_eq, equity),
        intl_equity_pct=_pct(intl_eq, equity),
        cash_pct=_pct(cash, total),
    )
