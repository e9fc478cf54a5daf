"""Mini README: Savings and deposit assets for the household ledger.

This package groups the asset record types, the in-memory store that owns
their lifecycle, the interest projector and the portfolio totals shown on
the dashboard. The projector is a pure function; everything with state lives
in the store.
"""

from .models import Asset, AssetKind, AssetStatus
from .portfolio import PortfolioSummary, project_assets, summarise_portfolio
from .projection import (
    DAYS_PER_YEAR,
    DEFAULT_WITHHOLDING_TAX_RATE,
    InterestProjection,
    InterestProjector,
    project,
)
from .store import AssetStore, AssetTransitionError

__all__ = [
    "Asset",
    "AssetKind",
    "AssetStatus",
    "AssetStore",
    "AssetTransitionError",
    "DAYS_PER_YEAR",
    "DEFAULT_WITHHOLDING_TAX_RATE",
    "InterestProjection",
    "InterestProjector",
    "PortfolioSummary",
    "project",
    "project_assets",
    "summarise_portfolio",
]
