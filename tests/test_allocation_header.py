from __future__ import annotations

import pytest

from src.allocation.errors import HeaderNotFoundError
from src.allocation.importers.base import locate_header, read_csv_rows, split_lines


def test_locate_header_captures_as_of_date() -> None:
    text = "\n".join(
        [
            "Guided Portfolio Summary",
            "As of date: 03/15/2024, Other, stuff",
            "",
            "Account,Symbol,Description,Total Value",
            "Roth IRA,VTI,Vanguard,100",
        ]
    )
    idx, as_of = locate_header(split_lines(text))
    assert idx == 3
    assert as_of == "03/15/2024"


def test_locate_header_is_case_insensitive_and_tolerates_crlf() -> None:
    text = "as OF DATE:   Jan 2, 2025\r\nACCOUNT,SYMBOL ,DESCRIPTION\r\nA,B,C\r\n"
    lines = split_lines(text)
    idx, as_of = locate_header(lines)
    assert idx == 1
    # The capture stops at the first separator.
    assert as_of == "Jan 2"


def test_as_of_date_only_read_from_preamble() -> None:
    text = "Account,Symbol,Description\nAs of date: 01/01/2020,X,Y\n"
    idx, as_of = locate_header(split_lines(text))
    assert idx == 0
    assert as_of == ""


def test_first_as_of_match_wins() -> None:
    text = "As of date: 01/01/2024\nAs of date: 02/02/2024\nSymbol,Total Value\n"
    _, as_of = locate_header(split_lines(text))
    assert as_of == "01/01/2024"


def test_missing_header_raises() -> None:
    with pytest.raises(HeaderNotFoundError):
        locate_header(split_lines("Ticker,Value\nVTI,100\n"))


def test_symbol_without_separator_is_not_a_header() -> None:
    with pytest.raises(HeaderNotFoundError):
        locate_header(split_lines("Symbol\nVTI\n"))


def test_read_csv_rows_handles_quotes_and_blank_lines() -> None:
    content = "\n".join(
        [
            "Account , Symbol,Total Value",
            '"Brokerage - Joint, WROS",VTI,"$1,234.50"',
            "",
            '  "Roth IRA" , VXUS ,  10',
            "Short,ROW",
        ]
    )
    headers, rows = read_csv_rows(content)
    assert headers == ["Account", "Symbol", "Total Value"]
    assert len(rows) == 3
    assert rows[0] == {"Account": "Brokerage - Joint, WROS", "Symbol": "VTI", "Total Value": "$1,234.50"}
    assert rows[1]["Account"] == "Roth IRA"
    assert rows[1]["Symbol"] == "VXUS"
    assert rows[2]["Total Value"] == ""


def test_read_csv_rows_drops_cells_past_header_width() -> None:
    headers, rows = read_csv_rows("Symbol,Total Value\nVTI,100,extra,more\n")
    assert headers == ["Symbol", "Total Value"]
    assert rows == [{"Symbol": "VTI", "Total Value": "100"}]
