"""Mini README: FastAPI service exposing assets and interest projections.

Structure:
    * create_application - application factory wiring routes and templates.
    * Request models - JSON payloads accepted by the asset endpoints.

The dashboard renders the asset table with projected interest and portfolio
totals. JSON endpoints mirror the asset store: create, update, delete and
status transitions, plus a summary endpoint for the totals alone. Store
errors map onto HTTP codes (missing -> 404, invalid -> 400, illegal
transition -> 409).
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Callable, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from ..assets import (
    AssetStore,
    AssetTransitionError,
    InterestProjector,
    project_assets,
    summarise_portfolio,
)
from ..configuration import HouseholdLedgerSettings, get_settings
from ..logging_utils import configure_root_logger, get_logger, level_for_environment
from ..utils.amounts import format_amount

LOGGER = get_logger(__name__)


class AssetCreateRequest(BaseModel):
    kind: str
    bank_name: str = ""
    principal: float
    annual_rate: float
    maturity_date: date


class AssetUpdateRequest(BaseModel):
    kind: Optional[str] = None
    bank_name: Optional[str] = None
    principal: Optional[float] = None
    annual_rate: Optional[float] = None
    maturity_date: Optional[date] = None


class StatusUpdateRequest(BaseModel):
    status: Optional[str] = None


def create_application(
    *,
    store: Optional[AssetStore] = None,
    settings: Optional[HouseholdLedgerSettings] = None,
    today: Callable[[], date] = date.today,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = settings or get_settings()
    configure_root_logger(level_for_environment(settings.environment))
    if store is None:
        store = AssetStore()
        if settings.seed_demo_assets:
            store.seed_demo_assets()
    projector = InterestProjector(tax_rate=settings.withholding_tax_rate)

    app = FastAPI(title="Household Ledger", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    templates.env.filters["won"] = format_amount

    def _asset_payloads(as_of: date) -> List[Dict[str, object]]:
        payload = []
        for asset, projection in project_assets(store.list_assets(), as_of, projector):
            entry = asset.as_dict()
            entry["projection"] = projection.as_dict()
            payload.append(entry)
        return payload

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request) -> HTMLResponse:
        """Render the asset table with projections and portfolio totals."""

        as_of = today()
        rows = project_assets(store.list_assets(), as_of, projector)
        summary = summarise_portfolio(store.list_assets(), as_of, projector)
        LOGGER.debug("Rendering dashboard with %s assets as of %s", len(rows), as_of)
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "rows": rows,
                "summary": summary,
                "as_of": as_of,
                "tax_rate": projector.tax_rate,
            },
        )

    @app.get("/assets")
    async def list_assets(as_of: Optional[date] = None) -> JSONResponse:
        """Return every asset along with its projection."""

        return JSONResponse(_asset_payloads(as_of or today()))

    @app.get("/assets/summary")
    async def portfolio_summary(as_of: Optional[date] = None) -> JSONResponse:
        """Return portfolio totals as of ``as_of`` (defaults to today)."""

        effective = as_of or today()
        summary = summarise_portfolio(store.list_assets(), effective, projector)
        payload = summary.as_dict()
        payload["as_of"] = effective.isoformat()
        return JSONResponse(payload)

    @app.get("/assets/{asset_id}")
    async def get_asset(asset_id: str, as_of: Optional[date] = None) -> JSONResponse:
        try:
            asset = store.get_asset(asset_id)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        payload = asset.as_dict()
        payload["projection"] = projector.project(asset, as_of or today()).as_dict()
        return JSONResponse(payload)

    @app.post("/assets")
    async def create_asset(request_body: AssetCreateRequest) -> JSONResponse:
        """Create an active asset from the submitted form."""

        try:
            asset = store.create_asset(request_body.model_dump())
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(asset.as_dict(), status_code=201)

    @app.put("/assets/{asset_id}")
    async def update_asset(asset_id: str, request_body: AssetUpdateRequest) -> JSONResponse:
        """Update editable fields of an existing asset."""

        try:
            asset = store.update_asset(asset_id, request_body.model_dump(exclude_unset=True))
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(asset.as_dict())

    @app.delete("/assets/{asset_id}")
    async def delete_asset(asset_id: str) -> JSONResponse:
        try:
            store.delete_asset(asset_id)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse({"success": True})

    @app.put("/assets/{asset_id}/status")
    async def update_status(asset_id: str, request_body: StatusUpdateRequest) -> JSONResponse:
        """Mark an asset as matured or closed."""

        if request_body.status not in {"active", "matured", "closed"}:
            raise HTTPException(
                status_code=400,
                detail="Invalid status. Must be active, matured, or closed.",
            )
        try:
            asset = store.update_status(asset_id, request_body.status)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        except AssetTransitionError as error:
            raise HTTPException(status_code=409, detail=str(error)) from error
        LOGGER.info("Status of %s set to %s via API", asset_id, asset.status.value)
        return JSONResponse(asset.as_dict())

    return app
