"""Mini README: Entry point CLI for the household ledger.

Commands:
    * run - start the FastAPI service with uvicorn.
    * project - print a one-off interest projection for a deposit.

Settings are drawn from ``HOUSEHOLDLEDGER_*`` environment variables when
command line options are omitted.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import typer
import uvicorn

from householdledger.assets import Asset, AssetKind, InterestProjector
from householdledger.configuration import get_settings
from householdledger.logging_utils import configure_root_logger, level_for_environment
from householdledger.utils.amounts import format_amount

cli = typer.Typer(help="Run the household ledger service and inspect deposit interest.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(level_for_environment(settings.environment))

    # Browsers cannot navigate to the 0.0.0.0 / :: bind-all addresses.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting household ledger on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "householdledger.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def project(
    principal: float = typer.Argument(..., min=0, help="Deposited amount in won."),
    rate: float = typer.Argument(..., min=0, help="Annual interest rate in percent."),
    maturity: datetime = typer.Argument(..., formats=["%Y-%m-%d"], help="Maturity date."),
    created_at: Optional[datetime] = typer.Option(
        None, formats=["%Y-%m-%d"], help="Opening date, used once maturity has passed."
    ),
    as_of: Optional[datetime] = typer.Option(
        None, formats=["%Y-%m-%d"], help="Reference date (defaults to today)."
    ),
    status: str = typer.Option("active", help="Lifecycle status: active, matured or closed."),
) -> None:
    """Print projected interest before and after withholding tax."""

    settings = get_settings()
    asset = Asset(
        asset_id="cli",
        kind=AssetKind.DEPOSIT,
        bank_name="",
        principal=principal,
        annual_rate=rate,
        maturity_date=maturity.date(),
        created_at=created_at,
        status=status,  # type: ignore[arg-type]
    )
    reference = as_of.date() if as_of else date.today()
    projection = InterestProjector(tax_rate=settings.withholding_tax_rate).project(asset, reference)
    typer.echo(f"As of {reference.isoformat()}")
    typer.echo(f"Interest before tax: {format_amount(projection.interest_before_tax)} won")
    typer.echo(f"Interest after tax:  {format_amount(projection.interest_after_tax)} won")
    typer.echo(f"Days remaining:      {projection.days_remaining}")


if __name__ == "__main__":
    cli()
