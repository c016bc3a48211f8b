"""OpenWeatherMap One Call 3.0 async client."""

import logging
import math
import os
from datetime import datetime
from typing import Any

import httpx

from slopeweather.config.schema import OPENWEATHER_BASE_URL, ProviderConfig
from slopeweather.ingest.errors import (
    InvalidRequestError,
    MalformedResponseError,
    MissingCredentialError,
    RemoteStatusError,
    SubscriptionRequiredError,
    TransportFailureError,
)
from slopeweather.ingest.onecall_parser import parse_onecall, parse_timemachine
from slopeweather.models.forecast import ForecastBundle, HistoricalBundle

logger = logging.getLogger(__name__)

API_KEY_ENV = "OPEN_WEATHER_API_KEY"
DEFAULT_USER_AGENT = "slopeweather/0.1.0"
INVALID_KEY_MARKER = "Invalid API key"


def resolve_api_key(override: str | None = None, configured: str = "") -> str:
    """Pick the first non-empty key: explicit override, environment, config."""
    if override:
        return override
    env_key = os.environ.get(API_KEY_ENV, "")
    if env_key:
        return env_key
    return configured


class OpenWeatherClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = OPENWEATHER_BASE_URL,
        units: str = "metric",
        lang: str = "kr",
        timeout: float = 10.0,
        http: httpx.AsyncClient | None = None,
    ):
        self.api_key = resolve_api_key(api_key)
        self.base_url = base_url.rstrip("/")
        self.units = units
        self.lang = lang
        self.http = http or httpx.AsyncClient(
            timeout=timeout, headers={"User-Agent": DEFAULT_USER_AGENT}
        )

    @classmethod
    def from_config(
        cls, provider: ProviderConfig, api_key: str | None = None
    ) -> "OpenWeatherClient":
        return cls(
            api_key=resolve_api_key(api_key, provider.api_key),
            base_url=provider.base_url,
            units=provider.units,
            lang=provider.lang,
            timeout=provider.timeout_seconds,
        )

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "OpenWeatherClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def fetch_forecast_bundle(self, lat: float, lon: float) -> ForecastBundle:
        """Fetch current conditions plus the 8-day daily outlook."""
        raw = await self._get(
            "/onecall", lat, lon, {"exclude": "minutely,hourly"}
        )
        return parse_onecall(raw)

    async def fetch_historical(
        self, lat: float, lon: float, when: datetime
    ) -> HistoricalBundle:
        """Fetch observed conditions for a past moment (timemachine endpoint)."""
        raw = await self._get(
            "/onecall/timemachine", lat, lon, {"dt": str(int(when.timestamp()))}
        )
        return parse_timemachine(raw)

    async def _get(
        self, path: str, lat: float, lon: float, extra: dict[str, str]
    ) -> dict[str, Any]:
        if not self.api_key:
            raise MissingCredentialError()
        _check_coordinates(lat, lon)

        url = f"{self.base_url}{path}"
        params = {
            "lat": str(lat),
            "lon": str(lon),
            **extra,
            "appid": self.api_key,
            "units": self.units,
            "lang": self.lang,
        }
        try:
            resp = await self.http.get(url, params=params)
        except httpx.InvalidURL as e:
            raise InvalidRequestError() from e
        except httpx.RequestError as e:
            logger.warning("OpenWeather request to %s failed: %s", path, e)
            raise TransportFailureError() from e

        if not resp.is_success:
            _raise_for_status(path, resp)

        try:
            return resp.json()
        except ValueError as e:
            raise MalformedResponseError() from e


def _check_coordinates(lat: float, lon: float) -> None:
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise InvalidRequestError(f"Invalid coordinates: {lat}, {lon}")
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
        raise InvalidRequestError(f"Invalid coordinates: {lat}, {lon}")


def _raise_for_status(path: str, resp: httpx.Response) -> None:
    body = resp.text
    logger.debug("OpenWeather %s returned HTTP %d: %s", path, resp.status_code, body)
    if resp.status_code == 401:
        if INVALID_KEY_MARKER in body:
            raise MissingCredentialError()
        raise SubscriptionRequiredError()
    raise RemoteStatusError(resp.status_code)
