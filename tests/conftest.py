from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.allocation.models import HoldingRecord
from src.allocation.normalize import shorten_account

FIXTURES = ROOT / "tests" / "fixtures" / "allocation"


@pytest.fixture()
def gps_sample_path() -> Path:
    return FIXTURES / "gps_sample.csv"


@pytest.fixture()
def gps_sample_text(gps_sample_path: Path) -> str:
    return gps_sample_path.read_text(encoding="utf-8")


def make_holding(
    symbol: str = "VTI",
    *,
    value: float = 0.0,
    account: str = "Roth IRA",
    asset_class: str = "US Equity",
    investment_type: str = "ETF",
    stock_style: str = "",
    quantity: float = 0.0,
    description: str = "",
) -> HoldingRecord:
    return HoldingRecord(
        symbol=symbol,
        description=description or symbol,
        account=account,
        account_shortened=shorten_account(account),
        investment_type=investment_type,
        morningstar_category="",
        stock_style=stock_style,
        bond_style="",
        quantity=quantity,
        price=0.0,
        value=value,
        portfolio_weight="",
        asset_class=asset_class,
    )


@pytest.fixture()
def holding_factory():
    return make_holding
