"""Mini README: Centralised configuration for the household ledger service.

Structure:
    * HouseholdLedgerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read environment variables (prefixed with
    ``HOUSEHOLDLEDGER_``) such as the bind address or the interest withholding
    tax rate. Validation runs once per process thanks to the cache.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .assets.projection import DEFAULT_WITHHOLDING_TAX_RATE


class HouseholdLedgerSettings(BaseSettings):
    """Runtime configuration for the household ledger."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the web service exposes.",
        ge=1,
        le=65535,
    )
    withholding_tax_rate: float = Field(
        DEFAULT_WITHHOLDING_TAX_RATE,
        description=(
            "Flat tax withheld from deposit interest, as a fraction."
            " Defaults to the Korean resident rate (14% national + 1.4% local)."
        ),
    )
    seed_demo_assets: bool = Field(
        True,
        description="Populate the in-memory asset store with sample deposits on start.",
    )

    class Config:
        env_prefix = "HOUSEHOLDLEDGER_"
        env_file = ".env"
        case_sensitive = False

    @validator("withholding_tax_rate")
    def _check_tax_rate(cls, value: float) -> float:
        """Reject rates that would make after-tax interest negative or zero."""

        if not 0 <= value < 1:
            raise ValueError("withholding_tax_rate must be in the range [0, 1).")
        return value


@lru_cache()
def get_settings() -> HouseholdLedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return HouseholdLedgerSettings()
