from __future__ import annotations

import logging
import math
import re
from functools import lru_cache
from typing import Iterable


log = logging.getLogger(__name__)

_NUMERIC_NOISE_RE = re.compile(r"[$,\"\s]")
_DECIMAL_RE = re.compile(r"[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?")
_WS_RE = re.compile(r"\s+")

DEFAULT_PLACEHOLDER_TOKENS: tuple[str, ...] = ("- -", "--", "N/A")
ELLIPSIS = "…"


def parse_numeric(value: str | None) -> float:
    """
    Coerce exported currency/quantity text to a float.

    Currency symbols, thousands separators, quotes and whitespace are dropped.
    Anything that is still not a plain decimal number comes back as 0.0.
    """
    s = _NUMERIC_NOISE_RE.sub("", value or "")
    if not s or not _DECIMAL_RE.fullmatch(s):
        return 0.0
    n = float(s)
    if math.isnan(n) or math.isinf(n):
        return 0.0
    return n


@lru_cache(maxsize=32)
def _placeholder_re(tokens: tuple[str, ...]) -> re.Pattern[str]:
    # Longest first so "- -" is not split by a shorter token.
    ordered = sorted({t for t in tokens if t}, key=len, reverse=True)
    if not ordered:
        return re.compile(r"(?!)")
    return re.compile("|".join(re.escape(t) for t in ordered), re.IGNORECASE)


_DEFAULT_PLACEHOLDER_RE = _placeholder_re(DEFAULT_PLACEHOLDER_TOKENS)


def clean_placeholder(value: str | None, tokens: Iterable[str] | None = None) -> str:
    pat = _DEFAULT_PLACEHOLDER_RE if tokens is None else _placeholder_re(tuple(tokens))
    return pat.sub("", value or "").strip()


def is_cash_like(morningstar: str, investment_type: str) -> bool:
    t = (investment_type or "").strip().lower()
    return "money market" in (morningstar or "").lower() or "money market" in t or t == "cash"


def derive_value(
    *,
    total_text: str,
    quantity: float,
    price: float,
    morningstar: str,
    investment_type: str,
) -> float:
    value = parse_numeric(total_text)
    if value == 0 and quantity > 0 and price > 0:
        value = quantity * price
    if value == 0 and quantity > 0 and is_cash_like(morningstar, investment_type):
        # Money market funds hold a $1.00 NAV, so units are dollars.
        value = quantity
    if value < 0:
        log.debug("Clamping negative value %r to 0", total_text)
        value = 0.0
    return value


def shorten_account(label: str, max_len: int = 40) -> str:
    s = label or ""
    if len(s) <= max_len:
        return s
    if " - " in s:
        parts = s.split(" - ")
        return " - ".join(parts[:2])[:max_len]
    return s[: max_len - 3] + ELLIPSIS


def derive_symbol(symbol: str, *, investment_type: str, description: str) -> str:
    if symbol:
        return symbol
    if investment_type.strip().lower() == "cash":
        return "CASH"
    return description[:8] or "OTHER"


def account_type(label: str) -> str:
    """Badge category for a full account label (Roth, 401(k), Taxable, ...)."""
    a = _WS_RE.sub(" ", (label or "").lower())
    if "roth" in a:
        return "Roth"
    if any(k in a for k in ["traditional", "trad", "rollover"]):
        return "Traditional"
    if "401k" in a or "401(k)" in a:
        return "401(k)"
    if "403b" in a or "403(b)" in a:
        return "403(b)"
    if "hsa" in a:
        return "HSA"
    if "529" in a:
        return "529"
    if "trust" in a:
        return "Trust"
    if "espp" in a:
        return "ESPP"
    if "checking" in a or "savings" in a:
        return "Bank"
    return "Taxable"
