from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from src.allocation.config import AllocationConfig
from src.allocation.errors import EmptyDatasetError, HeaderNotFoundError
from src.allocation.importers import default_importers
from src.allocation.importers.base import locate_header, read_csv_rows, split_lines
from src.allocation.models import ParsedExport


log = logging.getLogger(__name__)


def parse_export(text: str, config: Optional[AllocationConfig] = None) -> ParsedExport:
    """
    Turn raw export text into normalized holdings plus the preamble "As of" date.

    Raises HeaderNotFoundError when no holdings header row exists. An export
    whose table holds no usable rows comes back with an empty `holdings`.
    """
    cfg = config or AllocationConfig()
    lines = split_lines(text)
    header_idx, as_of = locate_header(lines)
    headers, rows = read_csv_rows("\n".join(lines[header_idx:]))

    importer = next((i for i in default_importers() if i.detect(headers)), None)
    if importer is None:
        raise HeaderNotFoundError(f"No importer recognizes headers: {headers!r}")

    holdings = importer.parse_rows(rows=rows, config=cfg)
    log.info(
        "Parsed %s export: %d rows, %d holdings, as of %r",
        importer.format_name,
        len(rows),
        len(holdings),
        as_of,
    )
    return ParsedExport(
        holdings=tuple(holdings),
        as_of_date=as_of,
        headers=tuple(headers),
        row_count=len(rows),
        skipped_count=len(rows) - len(holdings),
    )


def load_export(text: str, config: Optional[AllocationConfig] = None) -> ParsedExport:
    result = parse_export(text, config)
    if not result.holdings:
        raise EmptyDatasetError("No holdings found in CSV")
    return result


def load_export_file(path: Path, config: Optional[AllocationConfig] = None) -> ParsedExport:
    # utf-8-sig: exports saved from spreadsheets often start with a BOM.
    return load_export(Path(path).read_text(encoding="utf-8-sig"), config)
