from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any


def _to_decimal(value: Any) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return None
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    s = str(value).strip().replace(",", "").replace("$", "")
    if not s:
        return None
    try:
        return Decimal(s)
    except InvalidOperation:
        return None


def format_usd(value: Any, digits: int = 2) -> str:
    """
    "$1,234.56" (or "$1,235" if digits=0). Missing or non-numeric input
    formats as "$0", the way the holdings tables show empty cells.
    """
    d = _to_decimal(value)
    if d is None:
        return "$0"
    digits = max(0, int(digits))
    q = Decimal(1) if digits == 0 else Decimal("1").scaleb(-digits)
    d = d.quantize(q, rounding=ROUND_HALF_UP)
    sign = "-" if d < 0 else ""
    d_abs = -d if d < 0 else d
    return f"{sign}${d_abs:,.{digits}f}"


def format_compact_usd(value: Any) -> str:
    """Summary-card style: "$1.23M", "$12,345", "$12.34"."""
    d = _to_decimal(value)
    if d is None:
        return "$0"
    if abs(d) >= Decimal(1_000_000):
        return format_usd(d / Decimal(1_000_000), 2) + "M"
    if abs(d) >= Decimal(1_000):
        return format_usd(d, 0)
    return format_usd(d, 2)


def format_pct(value: float, digits: int = 1) -> str:
    if value is None or math.isnan(value) or math.isinf(value):
        return "0%"
    return f"{value:.{digits}f}%"
