from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Sequence

from src.allocation.classify import classify_asset_class
from src.allocation.importers import fields as F
from src.allocation.importers.base import HoldingsImporter
from src.allocation.importers.fields import resolve_field
from src.allocation.models import HoldingRecord
from src.allocation.normalize import (
    clean_placeholder,
    derive_symbol,
    derive_value,
    parse_numeric,
    shorten_account,
)

if TYPE_CHECKING:
    from src.allocation.config import AllocationConfig


log = logging.getLogger(__name__)


def is_non_holding_row(*, value: float, investment_type: str, description: str, markers: Sequence[str]) -> bool:
    # Footer/summary rows carry no value and no investment type.
    if value <= 0 and not investment_type:
        return True
    d = (description or "").lower()
    return any(m and m.lower() in d for m in markers)


class GuidedPortfolioSummaryImporter(HoldingsImporter):
    format_name = "gps_csv"

    def detect(self, headers: Iterable[str]) -> bool:
        return any("symbol" in (h or "").lower() for h in headers)

    def parse_rows(self, *, rows: list[dict[str, str]], config: "AllocationConfig") -> list[HoldingRecord]:
        synonyms = config.synonyms()
        rules = config.compiled_rules()
        tokens = config.placeholder_tokens
        out: list[HoldingRecord] = []
        for i, r in enumerate(rows, start=2):

            def get(field: str) -> str:
                return resolve_field(r, field, synonyms)

            symbol = get(F.SYMBOL)
            desc = get(F.DESCRIPTION)
            account = get(F.ACCOUNT)
            inv_type = get(F.INVESTMENT_TYPE)
            morningstar = get(F.MORNINGSTAR)
            qty = parse_numeric(get(F.QUANTITY))
            price = parse_numeric(get(F.PRICE))
            value = derive_value(
                total_text=get(F.TOTAL_VALUE),
                quantity=qty,
                price=price,
                morningstar=morningstar,
                investment_type=inv_type,
            )

            if is_non_holding_row(
                value=value, investment_type=inv_type, description=desc, markers=config.footer_markers
            ):
                log.debug("Skipping non-holding row %d (%r)", i, desc[:40])
                continue

            clean_morningstar = clean_placeholder(morningstar, tokens)
            clean_type = clean_placeholder(inv_type, tokens)
            clean_stock_style = clean_placeholder(get(F.STOCK_STYLE), tokens)
            clean_bond_style = clean_placeholder(get(F.BOND_STYLE), tokens)

            display_symbol = derive_symbol(symbol, investment_type=clean_type, description=desc)
            out.append(
                HoldingRecord(
                    symbol=display_symbol,
                    description=desc or display_symbol,
                    account=account,
                    account_shortened=shorten_account(account, config.account_label_max),
                    investment_type=clean_type or "Other",
                    morningstar_category=clean_morningstar,
                    stock_style=clean_stock_style,
                    bond_style=clean_bond_style,
                    quantity=qty,
                    price=price,
                    value=value,
                    portfolio_weight=get(F.PORTFOLIO_WEIGHT),
                    asset_class=classify_asset_class(
                        clean_morningstar,
                        clean_type,
                        clean_stock_style,
                        clean_bond_style,
                        rules=rules,
                    ),
                )
            )
        return out
