from __future__ import annotations

from typing import Mapping, Sequence


SYMBOL = "Symbol"
DESCRIPTION = "Description"
ACCOUNT = "Account"
INVESTMENT_TYPE = "Investment Type"
MORNINGSTAR = "Morningstar"
STOCK_STYLE = "Stock Style"
BOND_STYLE = "Bond Style"
TOTAL_VALUE = "Total Value"
QUANTITY = "Quantity"
PRICE = "Price"
PORTFOLIO_WEIGHT = "Portfolio Weight"

# Canonical field -> lowercase header substrings, tried in order.
FIELD_SYNONYMS: dict[str, tuple[str, ...]] = {
    SYMBOL: ("symbol",),
    DESCRIPTION: ("description",),
    ACCOUNT: ("account",),
    INVESTMENT_TYPE: ("investment type",),
    MORNINGSTAR: ("morningstar",),
    STOCK_STYLE: ("stock style",),
    BOND_STYLE: ("bond style",),
    TOTAL_VALUE: ("total value", "current value"),
    QUANTITY: ("quantity",),
    PRICE: ("price",),
    PORTFOLIO_WEIGHT: ("portfolio weight", "percent of account"),
}


def match_header(headers: Sequence[str], synonyms: Sequence[str]) -> str | None:
    """First header (column order) containing a synonym; earlier synonyms win."""
    for syn in synonyms:
        needle = syn.strip().lower()
        if not needle:
            continue
        for h in headers:
            if needle in (h or "").strip().lower():
                return h
    return None


def resolve_field(
    row: Mapping[str, str],
    canonical: str,
    synonyms: Mapping[str, Sequence[str]] = FIELD_SYNONYMS,
) -> str:
    key = match_header(list(row.keys()), synonyms.get(canonical) or (canonical,))
    if key is None:
        return ""
    return (row.get(key) or "").strip()
