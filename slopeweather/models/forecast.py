"""OpenWeatherMap One Call data models."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class WeatherCondition:
    description: str
    icon: str


@dataclass(frozen=True)
class CurrentConditions:
    observed_at: datetime
    temp: float
    feels_like: float
    humidity: int
    wind_speed: float
    weather: list[WeatherCondition] = field(default_factory=list)


@dataclass(frozen=True)
class DailyForecast:
    forecast_at: datetime
    temp_day: float
    temp_min: float
    temp_max: float
    feels_like_day: float
    humidity: int
    wind_speed: float
    sunrise: datetime
    sunset: datetime
    weather: list[WeatherCondition] = field(default_factory=list)


@dataclass(frozen=True)
class ForecastBundle:
    """Current conditions plus the daily outlook (index 0 is today)."""

    current: CurrentConditions
    daily: list[DailyForecast]


@dataclass(frozen=True)
class HistoricalObservation:
    observed_at: datetime
    temp: float
    feels_like: float
    humidity: int
    wind_speed: float
    weather: list[WeatherCondition] = field(default_factory=list)


@dataclass(frozen=True)
class HistoricalBundle:
    data: list[HistoricalObservation]
