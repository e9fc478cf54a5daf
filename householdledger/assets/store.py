"""Mini README: In-memory asset store with lifecycle transitions.

Structure:
    * AssetTransitionError - raised for lifecycle moves the store forbids.
    * AssetStore - CRUD-like behaviour plus status updates for assets.

The store validates and coerces incoming payloads, stamps creation and update
times from an injectable clock, and logs every mutation. It can be replaced by
a persistent implementation exposing the same methods.
"""

from __future__ import annotations

from dataclasses import replace
import math
from datetime import date, datetime
from typing import Callable, Dict, Iterable, List, Mapping, Optional

from ..logging_utils import get_logger
from .models import Asset, AssetKind, AssetStatus

LOGGER = get_logger(__name__)

EDITABLE_FIELDS = ("kind", "bank_name", "principal", "annual_rate", "maturity_date")
REQUIRED_FIELDS = ("kind", "principal", "annual_rate", "maturity_date")

_ALLOWED_TRANSITIONS: Dict[AssetStatus, frozenset] = {
    AssetStatus.ACTIVE: frozenset({AssetStatus.MATURED, AssetStatus.CLOSED}),
    AssetStatus.MATURED: frozenset(),
    AssetStatus.CLOSED: frozenset(),
}


class AssetTransitionError(ValueError):
    """Raised when a status change is not allowed from the current state."""

    def __init__(self, asset_id: str, current: AssetStatus, requested: AssetStatus) -> None:
        super().__init__(
            f"Asset {asset_id} cannot move from {current.value} to {requested.value}."
        )
        self.asset_id = asset_id
        self.current = current
        self.requested = requested


def _coerce_fields(payload: Mapping[str, object]) -> Dict[str, object]:
    """Validate and coerce editable asset fields."""

    coerced: Dict[str, object] = {}
    for key, value in payload.items():
        if key not in EDITABLE_FIELDS:
            raise ValueError(f"Field '{key}' cannot be set directly.")
        if value is None:
            continue
        if key == "kind":
            coerced[key] = value if isinstance(value, AssetKind) else AssetKind.from_str(str(value))
        elif key == "bank_name":
            coerced[key] = str(value).strip()
        elif key in {"principal", "annual_rate"}:
            coerced[key] = _non_negative(key, value)
        elif key == "maturity_date":
            coerced[key] = _parse_date(value)
    return coerced


def _non_negative(key: str, value: object) -> float:
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as error:
        raise ValueError(f"{key} must be a number, got {value!r}.") from error
    if not math.isfinite(number) or number < 0:
        raise ValueError(f"{key} must be a finite, non-negative number.")
    return number


def _parse_date(value: object) -> date:
    """Parse ISO formatted strings or date objects safely."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as error:
            raise ValueError(f"Invalid date: {value!r}. Use YYYY-MM-DD.") from error
    raise ValueError("Dates must be provided as ISO strings or date/datetime instances.")


class AssetStore:
    """Manage asset records and their lifecycle."""

    def __init__(
        self,
        assets: Optional[Iterable[Asset]] = None,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._assets: Dict[str, Asset] = {}
        self._sequence = 0
        self._clock = clock
        for asset in assets or ():
            self._register(asset)
        LOGGER.debug("Asset store initialised with %s assets", len(self._assets))

    def seed_demo_assets(self) -> None:
        """Populate the store with a few deterministic sample deposits."""

        samples = [
            {
                "kind": "deposit",
                "bank_name": "KB Kookmin",
                "principal": 10_000_000,
                "annual_rate": 3.5,
                "maturity_date": date(2027, 3, 31),
            },
            {
                "kind": "savings",
                "bank_name": "Shinhan",
                "principal": 3_600_000,
                "annual_rate": 4.0,
                "maturity_date": date(2026, 12, 20),
            },
            {
                "kind": "deposit",
                "bank_name": "Woori",
                "principal": 5_000_000,
                "annual_rate": 3.2,
                "maturity_date": date(2026, 6, 30),
            },
        ]
        for payload in samples:
            self.create_asset(payload)

    def _next_id(self) -> str:
        self._sequence += 1
        return f"asset_{self._sequence:04d}"

    def _register(self, asset: Asset) -> None:
        """Store an asset ensuring identifiers remain unique."""

        if asset.asset_id in self._assets:
            raise ValueError(f"Asset {asset.asset_id} already exists.")
        self._assets[asset.asset_id] = asset
        suffix = asset.asset_id.rsplit("_", 1)[-1]
        if suffix.isdigit():
            self._sequence = max(self._sequence, int(suffix))

    def list_assets(self) -> List[Asset]:
        """Return assets ordered by nearest maturity first."""

        return sorted(
            self._assets.values(),
            key=lambda asset: (asset.maturity_date, asset.asset_id),
        )

    def get_asset(self, asset_id: str) -> Asset:
        """Retrieve an asset, raising informative errors when missing."""

        if asset_id not in self._assets:
            raise KeyError(f"Asset {asset_id} not found")
        return self._assets[asset_id]

    def create_asset(self, payload: Mapping[str, object]) -> Asset:
        """Validate ``payload`` and store a new active asset."""

        fields = _coerce_fields(payload)
        fields.setdefault("bank_name", "")
        missing = [key for key in REQUIRED_FIELDS if key not in fields]
        if missing:
            raise ValueError(f"Missing required asset fields: {', '.join(missing)}")

        now = self._clock()
        asset = Asset(
            asset_id=self._next_id(),
            created_at=now,
            updated_at=now,
            status=AssetStatus.ACTIVE,
            **fields,
        )
        self._register(asset)
        LOGGER.info(
            "Created asset %s (%s, %s won at %s%%)",
            asset.asset_id,
            asset.kind.value,
            asset.principal,
            asset.annual_rate,
        )
        return asset

    def update_asset(self, asset_id: str, changes: Mapping[str, object]) -> Asset:
        """Apply field changes to an existing asset."""

        current = self.get_asset(asset_id)
        fields = _coerce_fields(changes)
        updated = replace(current, updated_at=self._clock(), **fields)
        self._assets[asset_id] = updated
        LOGGER.info("Updated asset %s fields: %s", asset_id, sorted(fields))
        return updated

    def delete_asset(self, asset_id: str) -> None:
        self.get_asset(asset_id)
        del self._assets[asset_id]
        LOGGER.info("Deleted asset %s", asset_id)

    def update_status(self, asset_id: str, status: object) -> Asset:
        """Move an asset through its lifecycle.

        Raises ``ValueError`` for unknown status values and
        ``AssetTransitionError`` when leaving a terminal state or repeating
        the current one.
        """

        requested = status if isinstance(status, AssetStatus) else AssetStatus.from_str(str(status))
        current = self.get_asset(asset_id)
        if requested not in _ALLOWED_TRANSITIONS[current.status]:
            raise AssetTransitionError(asset_id, current.status, requested)
        updated = replace(current, status=requested, updated_at=self._clock())
        self._assets[asset_id] = updated
        LOGGER.info(
            "Asset %s status %s -> %s", asset_id, current.status.value, requested.value
        )
        return updated
