from __future__ import annotations

from src.allocation.importers.fields import FIELD_SYNONYMS, match_header, resolve_field


def test_resolve_field_case_insensitive_substring() -> None:
    row = {"Account Name/Number": " Roth IRA ", "SYMBOL": "VTI", "Total Value ($)": "$1,000"}
    assert resolve_field(row, "Account") == "Roth IRA"
    assert resolve_field(row, "Symbol") == "VTI"
    assert resolve_field(row, "Total Value") == "$1,000"


def test_resolve_field_missing_column_or_blank_cell() -> None:
    row = {"Symbol": "VTI", "Description": "   "}
    assert resolve_field(row, "Bond Style") == ""
    assert resolve_field(row, "Description") == ""


def test_first_header_in_column_order_wins() -> None:
    row = {"Last Price": "10", "Price Change": "-1"}
    assert resolve_field(row, "Price") == "10"


def test_synonyms_are_tried_in_order() -> None:
    # "total value" is preferred even though "current value" appears first.
    row = {"Current Value": "5", "Total Value": "7"}
    assert resolve_field(row, "Total Value") == "7"
    assert resolve_field({"Current Value": "5"}, "Total Value") == "5"


def test_custom_synonym_table() -> None:
    synonyms = dict(FIELD_SYNONYMS)
    synonyms["Symbol"] = ("ticker",)
    assert resolve_field({"Ticker": "AAPL"}, "Symbol", synonyms) == "AAPL"


def test_match_header_returns_none_when_absent() -> None:
    assert match_header(["A", "B"], ("symbol",)) is None
