"""Test doubles and builders shared by the test modules."""

import asyncio
from datetime import UTC, date, datetime, time, timedelta

from slopeweather.models.common import canonical_zone
from slopeweather.models.forecast import (
    CurrentConditions,
    DailyForecast,
    ForecastBundle,
    WeatherCondition,
)

SEOUL = canonical_zone("Asia/Seoul")
# 2026-01-15 12:00 in Seoul.
FROZEN_NOW = datetime(2026, 1, 15, 3, 0, 0, tzinfo=UTC)
TODAY = date(2026, 1, 15)


class FakePort:
    """Call-counting stand-in for the OpenWeather client.

    ``responses`` maps (lat, lon) to a bundle or an exception to raise;
    ``delays`` maps (lat, lon) to seconds to sleep before answering, which
    lets tests pin the completion order. When ``gate`` is set, each call
    waits on the event that was current when the call started.
    """

    def __init__(self, default: ForecastBundle | Exception | None = None):
        self.default = default
        self.responses: dict[tuple[float, float], ForecastBundle | Exception] = {}
        self.delays: dict[tuple[float, float], float] = {}
        self.gate: asyncio.Event | None = None
        self.calls: list[tuple[float, float]] = []
        self.historical_calls: list[tuple[float, float, datetime]] = []

    async def fetch_forecast_bundle(self, lat: float, lon: float) -> ForecastBundle:
        self.calls.append((lat, lon))
        gate = self.gate
        if gate is not None:
            await gate.wait()
        delay = self.delays.get((lat, lon), 0.0)
        if delay:
            await asyncio.sleep(delay)
        result = self.responses.get((lat, lon), self.default)
        if isinstance(result, Exception):
            raise result
        assert result is not None, f"no scripted response for {(lat, lon)}"
        return result

    async def fetch_historical(self, lat: float, lon: float, when: datetime):
        self.historical_calls.append((lat, lon, when))
        raise AssertionError("historical endpoint must not be called")


def make_daily(day: date, temp: float = -5.0, icon: str = "13d") -> DailyForecast:
    noon = datetime.combine(day, time(12, 0), tzinfo=SEOUL)
    return DailyForecast(
        forecast_at=noon,
        temp_day=temp,
        temp_min=temp - 5,
        temp_max=temp + 3,
        feels_like_day=temp - 4,
        humidity=70,
        wind_speed=3.0,
        sunrise=datetime.combine(day, time(7, 40), tzinfo=SEOUL),
        sunset=datetime.combine(day, time(17, 35), tzinfo=SEOUL),
        weather=[WeatherCondition(description="눈", icon=icon)],
    )


def make_bundle(
    today: date = TODAY,
    offsets: list[int] | None = None,
    current_temp: float = -2.0,
) -> ForecastBundle:
    if offsets is None:
        offsets = list(range(8))
    current = CurrentConditions(
        observed_at=datetime.combine(today, time(12, 0), tzinfo=SEOUL),
        temp=current_temp,
        feels_like=current_temp - 5,
        humidity=55,
        wind_speed=6.0,
        weather=[WeatherCondition(description="가벼운 눈", icon="13d")],
    )
    daily = [
        make_daily(today + timedelta(days=o), temp=-10.0 - o) for o in offsets
    ]
    return ForecastBundle(current=current, daily=daily)

