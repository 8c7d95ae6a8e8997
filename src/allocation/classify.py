from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


US_EQUITY = "US Equity"
INTL_EQUITY = "Intl Equity"
US_BONDS = "US Bonds"
INTL_BONDS = "Intl Bonds"
CASH = "Cash"
OTHER = "Other"

ASSET_CLASSES: tuple[str, ...] = (US_EQUITY, INTL_EQUITY, US_BONDS, INTL_BONDS, CASH, OTHER)


@dataclass(frozen=True)
class ClassRule:
    """
    One row of the classification table.

    Matches lowercased text containing any of `keywords`, at least one of
    `requires` (when given) and none of `excludes`.
    """

    label: str
    keywords: tuple[str, ...]
    requires: tuple[str, ...] = ()
    excludes: tuple[str, ...] = ()

    def matches(self, text: str) -> bool:
        if not any(k in text for k in self.keywords):
            return False
        if self.requires and not any(k in text for k in self.requires):
            return False
        if any(k in text for k in self.excludes):
            return False
        return True


_BOND_KEYWORDS = ("bond", "fixed income", "government", "corporate")
_FOREIGN_KEYWORDS = ("international", "global", "foreign", "intl", "emerging", "world")

# Bond and cash rows come before the equity-style rows: style words such as
# "growth" or "value" also appear in bond fund names.
DEFAULT_RULES: tuple[ClassRule, ...] = (
    ClassRule(US_BONDS, _BOND_KEYWORDS, excludes=_FOREIGN_KEYWORDS),
    ClassRule(INTL_BONDS, _BOND_KEYWORDS, requires=_FOREIGN_KEYWORDS),
    ClassRule(CASH, ("money market", "cash")),
    ClassRule(INTL_EQUITY, ("foreign", "international", "intl", "emerging")),
    ClassRule(US_EQUITY, ("stock", "equity", "blend", "growth", "value", "large", "small", "mid")),
)


def classify_text(value: Optional[str], rules: Sequence[ClassRule] = DEFAULT_RULES) -> Optional[str]:
    if not value or not value.strip():
        return None
    v = value.lower()
    for rule in rules:
        if rule.matches(v):
            return rule.label
    return None


def classify_asset_class(
    morningstar: str,
    investment_type: str,
    stock_style: str,
    bond_style: str,
    *,
    rules: Sequence[ClassRule] = DEFAULT_RULES,
) -> str:
    fields = (morningstar, investment_type, stock_style, bond_style)
    for f in fields:
        label = classify_text(f, rules)
        if label:
            return label
    # Unclassified: surface the exporter's own label so it still groups sensibly.
    for f in fields:
        if f and f.strip():
            return f.strip()
    return OTHER
