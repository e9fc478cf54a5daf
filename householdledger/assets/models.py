"""Mini README: Asset records tracked by the household ledger.

Structure:
    * AssetKind - savings versus fixed deposit, informational only.
    * AssetStatus - lifecycle state (active, matured, closed).
    * Asset - dataclass storing a single deposit product.

Records are plain dataclasses so the store, the projector and the web layer
can share them without an ORM. Dates stay as ``date`` objects; timestamps as
``datetime``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Dict, Optional


class AssetKind(str, Enum):
    """Enumerate the supported deposit products."""

    SAVINGS = "savings"
    DEPOSIT = "deposit"

    @classmethod
    def from_str(cls, value: str) -> "AssetKind":
        """Coerce arbitrary casing into a valid asset kind."""

        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported asset kind: {value}") from error


class AssetStatus(str, Enum):
    """Lifecycle states; matured and closed are terminal."""

    ACTIVE = "active"
    MATURED = "matured"
    CLOSED = "closed"

    @classmethod
    def from_str(cls, value: str) -> "AssetStatus":
        """Coerce arbitrary casing into a valid status."""

        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as error:
            raise ValueError(
                "Invalid status. Must be active, matured, or closed."
            ) from error


@dataclass(slots=True)
class Asset:
    """A savings or time-deposit product held by the household."""

    asset_id: str
    kind: AssetKind
    bank_name: str
    principal: float
    annual_rate: float
    maturity_date: date
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    status: AssetStatus = AssetStatus.ACTIVE

    def as_dict(self) -> Dict[str, object]:
        """Export the asset with serialisable values."""

        return {
            "asset_id": self.asset_id,
            "kind": self.kind.value,
            "bank_name": self.bank_name,
            "principal": self.principal,
            "annual_rate": self.annual_rate,
            "maturity_date": self.maturity_date.isoformat(),
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "status": self.status.value,
        }
