"""Mini README: Portfolio-level totals built from per-asset projections.

The summary sums principal across every asset regardless of status, while
interest totals naturally include only active assets because the projector
returns zero for the rest.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .models import Asset, AssetStatus
from .projection import DateLike, InterestProjection, InterestProjector


@dataclass(slots=True)
class PortfolioSummary:
    """Totals displayed above the asset table."""

    asset_count: int
    active_count: int
    total_principal: float
    total_interest_before_tax: float
    total_interest_after_tax: float

    def as_dict(self) -> Dict[str, object]:
        return {
            "asset_count": self.asset_count,
            "active_count": self.active_count,
            "total_principal": self.total_principal,
            "total_interest_before_tax": self.total_interest_before_tax,
            "total_interest_after_tax": self.total_interest_after_tax,
        }


def project_assets(
    assets: Iterable[Asset],
    as_of: DateLike,
    projector: Optional[InterestProjector] = None,
) -> List[Tuple[Asset, InterestProjection]]:
    """Pair every asset with its projection as of ``as_of``."""

    projector = projector or InterestProjector()
    return [(asset, projector.project(asset, as_of)) for asset in assets]


def summarise_portfolio(
    assets: Iterable[Asset],
    as_of: DateLike,
    projector: Optional[InterestProjector] = None,
) -> PortfolioSummary:
    """Reduce per-asset projections into portfolio totals."""

    summary = PortfolioSummary(0, 0, 0.0, 0.0, 0.0)
    for asset, projection in project_assets(assets, as_of, projector):
        summary.asset_count += 1
        if asset.status is AssetStatus.ACTIVE:
            summary.active_count += 1
        summary.total_principal += asset.principal
        summary.total_interest_before_tax += projection.interest_before_tax
        summary.total_interest_after_tax += projection.interest_after_tax
    return summary
