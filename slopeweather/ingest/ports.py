"""Provider capability consumed by the weather fetcher."""

from datetime import datetime
from typing import Protocol

from slopeweather.models.forecast import ForecastBundle, HistoricalBundle


class WeatherFetchPort(Protocol):
    async def fetch_forecast_bundle(self, lat: float, lon: float) -> ForecastBundle: ...

    # Not called by the load pipeline: past dates are rejected before any fetch.
    async def fetch_historical(
        self, lat: float, lon: float, when: datetime
    ) -> HistoricalBundle: ...
