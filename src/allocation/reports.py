from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable

from src.allocation.models import GroupSummaryRow, HoldingRecord
from src.utils.money import format_compact_usd, format_pct, format_usd


def format_table(
    rows: list[GroupSummaryRow],
    *,
    headers: tuple[str, str, str, str] = ("Key", "Value", "Weight", "Items"),
) -> str:
    if not rows:
        return "(no rows)"
    cells = [(r.key, format_compact_usd(r.value), format_pct(r.pct_of_total), str(r.item_count)) for r in rows]
    k_w = max(len(headers[0]), *(len(c[0]) for c in cells))
    v_w = max(len(headers[1]), *(len(c[1]) for c in cells))
    p_w = max(len(headers[2]), *(len(c[2]) for c in cells))
    n_w = max(len(headers[3]), *(len(c[3]) for c in cells))

    def line(k: str, v: str, p: str, n: str) -> str:
        return f"{k:<{k_w}}  {v:>{v_w}}  {p:>{p_w}}  {n:>{n_w}}"

    out = [line(*headers), line("-" * k_w, "-" * v_w, "-" * p_w, "-" * n_w)]
    for c in cells:
        out.append(line(*c))
    return "\n".join(out)


def format_holdings(holdings: list[HoldingRecord], *, total: float) -> str:
    if not holdings:
        return "(no holdings)"
    lines = []
    for h in holdings:
        weight = format_pct(h.value / total * 100.0 if total > 0 else 0.0, 2)
        lines.append(
            f"{h.symbol:<10} {h.account_shortened[:40]:<40} {h.asset_class[:14]:<14} "
            f"{format_usd(h.value):>16} {weight:>8}"
        )
    return "\n".join(lines)


def write_csv(rows: Iterable[GroupSummaryRow], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=["key", "value", "pct_of_total", "item_count"])
        w.writeheader()
        for r in rows:
            w.writerow(
                {
                    "key": r.key,
                    "value": f"{r.value:.2f}",
                    "pct_of_total": f"{r.pct_of_total:.4f}",
                    "item_count": r.item_count,
                }
            )
