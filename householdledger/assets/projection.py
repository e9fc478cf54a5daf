"""Mini README: Interest projection for savings and time-deposit assets.

Structure:
    * InterestProjection - immutable result (pre-tax, post-tax, days left).
    * project - pure function computing the projection for one asset.
    * InterestProjector - holds a configured tax rate for repeated use.

Rules:
    * Only active assets accrue; any other status projects to zero.
    * Before maturity the estimate covers the remaining days only.
    * On or after maturity it covers the whole holding period, from the
      opening date to the maturity date, clamped to at least one day.
    * Simple interest on a 365-day year with whole-day counts. Leap days are
      not adjusted for.

Every date is truncated to its calendar day before subtraction so the time
of day never shifts a day count.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Optional, Union

from ..logging_utils import get_logger
from .models import Asset, AssetStatus

LOGGER = get_logger(__name__)

DAYS_PER_YEAR = 365
# 14% national income tax + 1.4% local surtax on interest income.
DEFAULT_WITHHOLDING_TAX_RATE = 0.154

DateLike = Union[date, datetime]


@dataclass(frozen=True, slots=True)
class InterestProjection:
    """Projected interest for a single asset."""

    interest_before_tax: float
    interest_after_tax: float
    days_remaining: int

    def as_dict(self) -> Dict[str, object]:
        return {
            "interest_before_tax": self.interest_before_tax,
            "interest_after_tax": self.interest_after_tax,
            "days_remaining": self.days_remaining,
        }


ZERO_PROJECTION = InterestProjection(0.0, 0.0, 0)


def _as_calendar_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def _days_between(start: DateLike, end: DateLike) -> int:
    return (_as_calendar_date(end) - _as_calendar_date(start)).days


def _is_active(status: object) -> bool:
    """Return True only for values that read as the active status."""

    if isinstance(status, AssetStatus):
        return status is AssetStatus.ACTIVE
    try:
        return AssetStatus.from_str(str(status)) is AssetStatus.ACTIVE
    except ValueError:
        return False


def _simple_interest(principal: float, annual_rate: float, days: int) -> float:
    years = days / DAYS_PER_YEAR
    return principal * (annual_rate / 100) * years


def project(
    asset: Asset,
    as_of: DateLike,
    *,
    tax_rate: float = DEFAULT_WITHHOLDING_TAX_RATE,
) -> InterestProjection:
    """Project interest for ``asset`` as seen on ``as_of``.

    Returns zeros for non-active assets. When the maturity date is still
    ahead, interest accrues over the days remaining; otherwise over the full
    period from ``created_at`` (or ``as_of`` when unknown) to maturity.
    """

    if not _is_active(asset.status):
        return ZERO_PROJECTION

    days_diff = _days_between(as_of, asset.maturity_date)

    if days_diff > 0:
        before_tax = _simple_interest(asset.principal, asset.annual_rate, days_diff)
        days_remaining = days_diff
    else:
        start: DateLike = asset.created_at if asset.created_at is not None else as_of
        total_days = max(_days_between(start, asset.maturity_date), 1)
        before_tax = _simple_interest(asset.principal, asset.annual_rate, total_days)
        days_remaining = 0

    after_tax = before_tax * (1 - tax_rate)
    LOGGER.debug(
        "Projected %s as of %s -> before=%.2f after=%.2f days=%s",
        asset.asset_id,
        _as_calendar_date(as_of),
        before_tax,
        after_tax,
        days_remaining,
    )
    return InterestProjection(before_tax, after_tax, days_remaining)


class InterestProjector:
    """Apply ``project`` with a tax rate chosen once by the caller."""

    def __init__(self, tax_rate: Optional[float] = None) -> None:
        self.tax_rate = DEFAULT_WITHHOLDING_TAX_RATE if tax_rate is None else tax_rate

    def project(self, asset: Asset, as_of: DateLike) -> InterestProjection:
        return project(asset, as_of, tax_rate=self.tax_rate)
