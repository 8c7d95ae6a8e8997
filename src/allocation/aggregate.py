from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from src.allocation.models import (
    AccountGroup,
    ConsolidatedGroup,
    Group,
    GroupSummaryRow,
    HoldingRecord,
)
from src.allocation.normalize import account_type


G = TypeVar("G", bound=Group)


def _bucket(holdings: Iterable[HoldingRecord], key: Callable[[HoldingRecord], str]) -> dict[str, list[HoldingRecord]]:
    # dicts keep insertion order, so equal-value groups stay in first-seen order.
    buckets: dict[str, list[HoldingRecord]] = {}
    for h in holdings:
        buckets.setdefault(key(h), []).append(h)
    return buckets


def _sum_value(items: Iterable[HoldingRecord]) -> float:
    return sum(h.value for h in items)


def _by_value_desc(groups: list[G]) -> list[G]:
    # sorted() is stable with reverse=True as well.
    return sorted(groups, key=lambda g: g.value, reverse=True)


def portfolio_total(holdings: Iterable[HoldingRecord]) -> float:
    return _sum_value(holdings)


def group_by_asset_class(holdings: Iterable[HoldingRecord]) -> list[Group]:
    buckets = _bucket(holdings, lambda h: h.asset_class)
    return _by_value_desc([Group(key=k, items=tuple(v), value=_sum_value(v)) for k, v in buckets.items()])


def group_by_account(holdings: Iterable[HoldingRecord]) -> list[AccountGroup]:
    buckets = _bucket(holdings, lambda h: h.account_shortened)
    groups = [
        AccountGroup(
            key=k,
            items=tuple(v),
            value=_sum_value(v),
            account=v[0].account,
            account_type=account_type(v[0].account),
        )
        for k, v in buckets.items()
    ]
    return _by_value_desc(groups)


def group_by_consolidated_symbol(holdings: Iterable[HoldingRecord]) -> list[ConsolidatedGroup]:
    buckets = _bucket(holdings, lambda h: h.symbol)
    groups = [
        ConsolidatedGroup(
            key=k,
            items=tuple(v),
            value=_sum_value(v),
            description=v[0].description,
            asset_class=v[0].asset_class,
            accounts=tuple(dict.fromkeys(h.account_shortened for h in v)),
            # Summed as-is; only meaningful when the symbol is the same instrument everywhere.
            total_quantity=sum(h.quantity for h in v),
        )
        for k, v in buckets.items()
    ]
    return _by_value_desc(groups)


def style_key(h: HoldingRecord) -> str:
    return h.stock_style or h.asset_class or "Other"


def group_by_style(holdings: Iterable[HoldingRecord]) -> list[Group]:
    buckets = _bucket(holdings, style_key)
    return _by_value_desc([Group(key=k, items=tuple(v), value=_sum_value(v)) for k, v in buckets.items()])


def filter_holdings(holdings: Iterable[HoldingRecord], term: str = "") -> list[HoldingRecord]:
    t = (term or "").strip().lower()
    if t:
        matched = [
            h
            for h in holdings
            if any(
                t in s.lower()
                for s in (
                    h.symbol,
                    h.description,
                    h.account_shortened,
                    h.account,
                    h.asset_class,
                    h.investment_type,
                )
            )
        ]
    else:
        matched = list(holdings)
    return sorted(matched, key=lambda h: h.value, reverse=True)


def summarize_groups(groups: Iterable[Group], total: float) -> list[GroupSummaryRow]:
    return [
        GroupSummaryRow(
            key=g.key,
            value=g.value,
            pct_of_total=(g.value / total * 100.0) if total > 0 else 0.0,
            item_count=len(g.items),
        )
        for g in groups
    ]
