"""Decoding of One Call 3.0 JSON payloads into forecast models."""

import logging
from typing import Any

from slopeweather.ingest.errors import MalformedResponseError
from slopeweather.models.common import from_unix
from slopeweather.models.forecast import (
    CurrentConditions,
    DailyForecast,
    ForecastBundle,
    HistoricalBundle,
    HistoricalObservation,
    WeatherCondition,
)

logger = logging.getLogger(__name__)

# Wrong shapes, bad numbers and out-of-range timestamps.
_DECODE_ERRORS = (KeyError, TypeError, ValueError, AttributeError, OverflowError, OSError)


def parse_onecall(raw: dict[str, Any]) -> ForecastBundle:
    """Decode a /onecall response (current + daily)."""
    try:
        current = _parse_current(raw["current"])
        daily = [_parse_daily(d) for d in raw.get("daily", [])]
    except _DECODE_ERRORS as e:
        logger.debug("Undecodable onecall payload: %r", raw)
        raise MalformedResponseError() from e
    return ForecastBundle(current=current, daily=daily)


def parse_timemachine(raw: dict[str, Any]) -> HistoricalBundle:
    """Decode a /onecall/timemachine response."""
    try:
        data = [_parse_historical(d) for d in raw["data"]]
    except _DECODE_ERRORS as e:
        logger.debug("Undecodable timemachine payload: %r", raw)
        raise MalformedResponseError() from e
    return HistoricalBundle(data=data)


def _parse_conditions(items: list[dict[str, Any]]) -> list[WeatherCondition]:
    conditions = []
    for w in items:
        if not isinstance(w, dict):
            raise TypeError(f"weather entry is not an object: {w!r}")
        conditions.append(
            WeatherCondition(
                description=str(w.get("description", "")),
                icon=str(w.get("icon", "")),
            )
        )
    return conditions


def _parse_current(c: dict[str, Any]) -> CurrentConditions:
    return CurrentConditions(
        observed_at=from_unix(float(c["dt"])),
        temp=float(c["temp"]),
        feels_like=float(c["feels_like"]),
        humidity=int(c["humidity"]),
        wind_speed=float(c["wind_speed"]),
        weather=_parse_conditions(c.get("weather", [])),
    )


def _parse_daily(d: dict[str, Any]) -> DailyForecast:
    temp = d["temp"]
    return DailyForecast(
        forecast_at=from_unix(float(d["dt"])),
        temp_day=float(temp["day"]),
        temp_min=float(temp["min"]),
        temp_max=float(temp["max"]),
        feels_like_day=float(d["feels_like"]["day"]),
        humidity=int(d["humidity"]),
        wind_speed=float(d["wind_speed"]),
        sunrise=from_unix(float(d["sunrise"])),
        sunset=from_unix(float(d["sunset"])),
        weather=_parse_conditions(d.get("weather", [])),
    )


def _parse_historical(h: dict[str, Any]) -> HistoricalObservation:
    return HistoricalObservation(
        observed_at=from_unix(float(h["dt"])),
        temp=float(h["temp"]),
        feels_like=float(h["feels_like"]),
        humidity=int(h["humidity"]),
        wind_speed=float(h["wind_speed"]),
        weather=_parse_conditions(h.get("weather", [])),
    )
