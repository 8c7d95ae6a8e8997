from __future__ import annotations

import csv
import io
import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable

from src.allocation.errors import HeaderNotFoundError

if TYPE_CHECKING:
    from src.allocation.config import AllocationConfig
    from src.allocation.models import HoldingRecord


_LINE_SPLIT_RE = re.compile(r"\r?\n")
_HEADER_RE = re.compile(r"Symbol\s*,", re.IGNORECASE)
_AS_OF_RE = re.compile(r"As of date:\s*(.+?)(?:,|$)", re.IGNORECASE)


class _ExportDialect(csv.Dialect):
    delimiter = ","
    quotechar = '"'
    doublequote = True
    skipinitialspace = True
    lineterminator = "\n"
    quoting = csv.QUOTE_MINIMAL


def split_lines(text: str) -> list[str]:
    return _LINE_SPLIT_RE.split(text or "")


def locate_header(lines: list[str]) -> tuple[int, str]:
    """
    Find the holdings header row and the preamble "As of date".

    Returns `(header_index, as_of_date)`; the date is "" when the preamble
    has none.
    """
    header_idx = -1
    for i, line in enumerate(lines):
        if _HEADER_RE.search(line):
            header_idx = i
            break
    if header_idx == -1:
        raise HeaderNotFoundError("Could not find header row with 'Symbol' column")

    as_of = ""
    for line in lines[:header_idx]:
        m = _AS_OF_RE.search(line)
        if m:
            as_of = m.group(1).strip()
            break
    return header_idx, as_of


def read_csv_rows(content: str) -> tuple[list[str], list[dict[str, str]]]:
    f = io.StringIO(content)
    reader = csv.DictReader(f, dialect=_ExportDialect)
    headers = [h.strip() for h in (reader.fieldnames or []) if h]
    rows: list[dict[str, str]] = []
    for r in reader:
        # Cells past the header width land under the None key.
        rows.append({(k or "").strip(): (v or "").strip() for k, v in r.items() if k is not None})
    return headers, rows


class HoldingsImporter(ABC):
    format_name: str

    @abstractmethod
    def detect(self, headers: Iterable[str]) -> bool: ...

    @abstractmethod
    def parse_rows(self, *, rows: list[dict[str, str]], config: "AllocationConfig") -> list["HoldingRecord"]: ...
