from __future__ import annotations

from src.allocation.importers.base import HoldingsImporter
from src.allocation.importers.gps_csv import GuidedPortfolioSummaryImporter


def default_importers() -> list[HoldingsImporter]:
    return [GuidedPortfolioSummaryImporter()]
