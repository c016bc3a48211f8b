"""Resort weather dashboard: FastAPI backend serving the observable state."""

from collections.abc import Callable
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI

from slopeweather.config.loader import load_config
from slopeweather.config.schema import AppConfig
from slopeweather.dates.navigation import DateNavigator
from slopeweather.ingest.openweather_client import OpenWeatherClient
from slopeweather.ingest.ports import WeatherFetchPort
from slopeweather.models.common import utc_now
from slopeweather.pipeline.load_pipeline import LoadPipeline
from slopeweather.reporting.formatters import snapshot_to_dict
from slopeweather.state.store import WeatherStore


def create_app(
    config: AppConfig | None = None,
    port: WeatherFetchPort | None = None,
    clock: Callable[[], datetime] = utc_now,
) -> FastAPI:
    config = config or load_config()
    client = OpenWeatherClient.from_config(config.provider) if port is None else None
    store = WeatherStore(LoadPipeline.from_config(config, port or client, clock=clock))
    navigator = DateNavigator(
        tz=config.calendar.zone,
        clock=clock,
        max_forecast_days=config.calendar.max_forecast_days,
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        yield
        if client is not None:
            await client.aclose()

    app = FastAPI(title="Resort Weather Dashboard", version="0.1.0", lifespan=lifespan)
    app.state.store = store
    app.state.navigator = navigator

    def _date_state() -> dict:
        return {
            "selected": navigator.formatted_selected,
            "min_allowed": navigator.min_allowed.isoformat(),
            "max_allowed": navigator.max_allowed.isoformat(),
        }

    # ── Catalog ─────────────────────────────────────────────────

    @app.get("/api/resorts")
    def get_resorts():
        """Enabled resorts in catalog order."""
        return [r.model_dump() for r in config.enabled_resorts]

    # ── Date navigation ─────────────────────────────────────────

    @app.get("/api/date")
    def get_date():
        return _date_state()

    @app.post("/api/date/move")
    def move_date(days: int):
        """Shift the selected day; moves outside the window are ignored."""
        navigator.move(days)
        return _date_state()

    @app.post("/api/date/today")
    def reset_date():
        navigator.reset_to_today()
        return _date_state()

    # ── Weather ─────────────────────────────────────────────────

    @app.get("/api/weather")
    def get_weather():
        """Last published snapshot plus the live loading flag."""
        data = snapshot_to_dict(store.snapshot)
        data["is_loading"] = store.is_loading
        data["last_error_message"] = store.last_error_message
        return data

    @app.post("/api/weather/refresh")
    async def refresh_weather():
        """Load every resort for the selected day and return the result."""
        published = await store.load_weather(config.enabled_resorts, navigator.selected)
        data = get_weather()
        data["published"] = published
        return data

    return app
