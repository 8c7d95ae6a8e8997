from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from src.allocation.aggregate import (
    filter_holdings,
    group_by_account,
    group_by_asset_class,
    group_by_consolidated_symbol,
    group_by_style,
    portfolio_total,
    summarize_groups,
)
from src.allocation.config import load_allocation_config
from src.allocation.errors import AllocationError
from src.allocation.ingest import load_export_file
from src.allocation.metrics import compute_metrics
from src.allocation.models import ParsedExport
from src.allocation.reports import format_holdings, format_table, write_csv
from src.utils.money import format_compact_usd


allocation_app = typer.Typer(help="Asset allocation analysis for Guided Portfolio Summary exports.")

GROUPINGS = {
    "asset-class": group_by_asset_class,
    "account": group_by_account,
    "holding": group_by_consolidated_symbol,
    "style": group_by_style,
}


@allocation_app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")


def _load(file: Path) -> ParsedExport:
    load_dotenv()
    cfg, cfg_path = load_allocation_config()
    if cfg_path:
        typer.echo(f"Using config: {cfg_path}", err=True)
    try:
        return load_export_file(file, cfg)
    except AllocationError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=2)


@allocation_app.command("summary")
def summary_cmd(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="GPS CSV export"),
):
    parsed = _load(file)
    total = portfolio_total(parsed.holdings)
    groups = group_by_asset_class(parsed.holdings)
    metrics = compute_metrics(groups, parsed.holdings)
    typer.echo(f"As of: {parsed.as_of_date or 'unknown'}")
    typer.echo(f"Total: {format_compact_usd(total)} across {len(parsed.holdings)} holdings")
    typer.echo(json.dumps(metrics.model_dump(), indent=2))
    typer.echo("\nBy asset class\n" + format_table(summarize_groups(groups, total), headers=("Asset Class", "Value", "Weight", "Items")))


@allocation_app.command("groups")
def groups_cmd(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="GPS CSV export"),
    by: str = typer.Option("asset-class", help="asset-class|account|holding|style"),
    out: Optional[Path] = typer.Option(None, help="Write the grouping to this CSV path"),
):
    fn = GROUPINGS.get(by.strip().lower())
    if fn is None:
        raise typer.BadParameter(f"Unknown grouping: {by}")
    parsed = _load(file)
    total = portfolio_total(parsed.holdings)
    rows = summarize_groups(fn(parsed.holdings), total)
    typer.echo(format_table(rows))
    if out:
        write_csv(rows, out)
        typer.echo(f"Wrote {out}")


@allocation_app.command("holdings")
def holdings_cmd(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="GPS CSV export"),
    search: str = typer.Option("", help="Substring over symbol, description, account, class, type"),
    limit: int = typer.Option(0, help="Max rows to show (0 = all)"),
):
    parsed = _load(file)
    total = portfolio_total(parsed.holdings)
    rows = filter_holdings(parsed.holdings, search)
    if limit > 0:
        rows = rows[:limit]
    typer.echo(format_holdings(rows, total=total))
