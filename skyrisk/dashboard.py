"""SkyRisk dashboard: FastAPI backend holding one view controller."""

import logging
import os
from datetime import date
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse
from pydantic import BaseModel, model_validator

from skyrisk.app import build_controller
from skyrisk.config.loader import load_config_or_default
from skyrisk.config.schema import SkyRiskConfig
from skyrisk.controller.state import ViewState
from skyrisk.controller.view_controller import ViewController
from skyrisk.ingest.geolocation import ReportedPosition
from skyrisk.reporting.formatters import render_bars

logger = logging.getLogger(__name__)

CONFIG_ENV = "SKYRISK_CONFIG"
DASHBOARD_HTML = Path(__file__).parent / "static" / "dashboard.html"


class DateUpdate(BaseModel):
    date: date


class CityUpdate(BaseModel):
    query: str


class PositionReport(BaseModel):
    """Browser geolocation outcome: coordinates, or a W3C error code."""

    latitude: float | None = None
    longitude: float | None = None
    error_code: int | None = None
    supported: bool = True

    @model_validator(mode="after")
    def _coords_or_error(self) -> "PositionReport":
        if not self.supported or self.error_code is not None:
            return self
        if self.latitude is None or self.longitude is None:
            raise ValueError("latitude and longitude are required without an error_code")
        return self


def serialize_state(state: ViewState) -> dict:
    location = None
    if state.location is not None:
        location = {
            "latitude": state.location.latitude,
            "longitude": state.location.longitude,
            "name": state.location.display_name,
            "label": state.location.label,
        }
    return {
        "date": state.selected_date.isoformat(),
        "city_query": state.city_query,
        "location": location,
        "phase": state.phase.value,
        "loading": state.loading,
        "risk": state.result.as_dict() if state.result else None,
        "panels": render_bars(state.result) if state.result else [],
        "notification": state.notification,
        "error_kind": state.error_kind.value if state.error_kind else None,
    }


def create_app(
    config: SkyRiskConfig | None = None, controller: ViewController | None = None
) -> FastAPI:
    config = config or load_config_or_default(os.environ.get(CONFIG_ENV))
    controller = controller or build_controller(config)

    app = FastAPI(title="SkyRisk Weather Dashboard", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.controller = controller

    # ── State & inputs ──────────────────────────────────────────

    @app.get("/api/state")
    def get_state():
        return serialize_state(controller.state)

    @app.post("/api/date")
    def set_date(update: DateUpdate):
        return serialize_state(controller.set_date(update.date))

    @app.post("/api/city")
    def set_city(update: CityUpdate):
        return serialize_state(controller.set_city_query(update.query))

    # ── Actions ─────────────────────────────────────────────────

    @app.post("/api/location")
    def use_my_location(report: PositionReport):
        provider = None
        if report.supported:
            provider = ReportedPosition(
                latitude=report.latitude,
                longitude=report.longitude,
                error_code=report.error_code,
            )
        return serialize_state(controller.use_my_location(provider))

    @app.post("/api/search")
    def search_city():
        return serialize_state(controller.search_city())

    @app.get("/api/climatology")
    def get_climatology():
        table = controller.climatology
        if not hasattr(table, "records"):
            raise HTTPException(404, "Climatology source is not enumerable")
        return [
            {
                "month": r.month, "tmax": r.tmax, "tmin": r.tmin,
                "precip": r.precip, "wind": r.wind,
            }
            for r in table.records()
        ]

    # ── Serve dashboard ─────────────────────────────────────────

    @app.get("/")
    def serve_dashboard():
        if DASHBOARD_HTML.exists():
            return FileResponse(DASHBOARD_HTML, media_type="text/html")
        return HTMLResponse("<h1>Dashboard not found</h1>", status_code=404)

    return app


if __name__ == "__main__":
    import uvicorn

    cfg = load_config_or_default(os.environ.get(CONFIG_ENV))
    uvicorn.run(create_app(cfg), host=cfg.dashboard.host, port=cfg.dashboard.port)
