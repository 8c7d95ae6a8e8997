from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from src.allocation.cli import allocation_app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


def test_summary(gps_sample_path: Path) -> None:
    res = runner.invoke(allocation_app, ["summary", str(gps_sample_path)])
    assert res.exit_code == 0, res.output
    assert "As of: 03/15/2024" in res.output
    assert "8 holdings" in res.output
    start = res.output.index("{")
    end = res.output.index("}") + 1
    metrics = json.loads(res.output[start:end])
    assert metrics["equity_total"] == 50000.0
    assert "US Equity" in res.output


def test_groups_writes_csv(gps_sample_path: Path, tmp_path: Path) -> None:
    out = tmp_path / "accounts.csv"
    res = runner.invoke(allocation_app, ["groups", str(gps_sample_path), "--by", "account", "--out", str(out)])
    assert res.exit_code == 0, res.output
    assert "Individual - TOD" in res.output
    assert out.exists()
    assert out.read_text().splitlines()[0] == "key,value,pct_of_total,item_count"


def test_groups_rejects_unknown_grouping(gps_sample_path: Path) -> None:
    res = runner.invoke(allocation_app, ["groups", str(gps_sample_path), "--by", "sector"])
    assert res.exit_code != 0


def test_holdings_search(gps_sample_path: Path) -> None:
    res = runner.invoke(allocation_app, ["holdings", str(gps_sample_path), "--search", "roth"])
    assert res.exit_code == 0, res.output
    lines = res.output.strip().splitlines()
    assert [line.split()[0] for line in lines] == ["VXUS", "VTI"]


def test_parse_error_exit_code(tmp_path: Path) -> None:
    p = tmp_path / "bad.csv"
    p.write_text("no header here\n")
    res = runner.invoke(allocation_app, ["summary", str(p)])
    assert res.exit_code == 2


def test_root_cli_mounts_allocation_commands(gps_sample_path: Path) -> None:
    from src.cli import app

    res = runner.invoke(app, ["allocation", "groups", str(gps_sample_path), "--by", "style"])
    assert res.exit_code == 0, res.output
    assert "Large Blend" in res.output
