"""Display-ready weather reading for a single resort and day."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from slopeweather.models.common import utc_now
from slopeweather.models.forecast import (
    CurrentConditions,
    DailyForecast,
    HistoricalObservation,
    WeatherCondition,
)

ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{code}@2x.png"
DEFAULT_ICON_CODE = "01d"
UNKNOWN_DESCRIPTION = "정보 없음"


class Condition(StrEnum):
    CLEAR = "clear"
    PARTLY_CLOUDY = "partly_cloudy"
    CLOUDY = "cloudy"
    RAIN = "rain"
    THUNDERSTORM = "thunderstorm"
    SNOW = "snow"
    FOG = "fog"


_ICON_PREFIX_CONDITIONS: dict[str, Condition] = {
    "01": Condition.CLEAR,
    "02": Condition.PARTLY_CLOUDY,
    "03": Condition.CLOUDY,
    "04": Condition.CLOUDY,
    "09": Condition.RAIN,
    "10": Condition.RAIN,
    "11": Condition.THUNDERSTORM,
    "13": Condition.SNOW,
    "50": Condition.FOG,
}

# Checked in order; first keyword found in the description wins.
_DESCRIPTION_KEYWORDS: list[tuple[tuple[str, ...], Condition]] = [
    (("맑음", "청명"), Condition.CLEAR),
    (("구름",), Condition.CLOUDY),
    (("비",), Condition.RAIN),
    (("눈",), Condition.SNOW),
    (("천둥",), Condition.THUNDERSTORM),
    (("안개",), Condition.FOG),
]

# Provider (lang=kr) wording -> shorter display wording.
DESCRIPTION_ALIASES: dict[str, str] = {
    "맑음": "맑음",
    "청명함": "맑음",
    "약간의 구름이 낀 하늘": "구름 조금",
    "한 조각 구름이 낀 하늘": "구름 조금",
    "튼구름": "구름 많음",
    "온흐림": "흐림",
    "구름많음": "구름 많음",
    "구름조금": "구름 조금",
    "가벼운 비": "약한 비",
    "보통 비": "비",
    "강한 비": "폭우",
    "매우 강한 비": "폭우",
    "극심한 비": "폭우",
    "소나기": "소나기",
    "약한 소나기 비": "약한 소나기",
    "소나기 비": "소나기",
    "강한 소나기 비": "강한 소나기",
    "가벼운 눈": "약한 눈",
    "눈": "눈",
    "강한 눈": "폭설",
    "진눈깨비": "진눈깨비",
    "약한 눈보라": "눈보라",
    "눈보라": "눈보라",
    "박무": "옅은 안개",
    "안개": "안개",
    "연무": "연무",
    "뇌우": "천둥번개",
    "실 비": "이슬비",
    "우박": "우박",
}


def normalize_description(raw: str) -> str:
    return DESCRIPTION_ALIASES.get(raw, raw)


def _primary(weather: list[WeatherCondition]) -> tuple[str, str]:
    if not weather:
        return UNKNOWN_DESCRIPTION, DEFAULT_ICON_CODE
    first = weather[0]
    return normalize_description(first.description), first.icon


@dataclass(frozen=True)
class WeatherReading:
    temperature: float
    feels_like: float
    humidity: int
    wind_speed: float
    description: str
    icon_code: str
    sunrise: datetime
    sunset: datetime
    resort_name: str
    observed_at: datetime

    @property
    def icon_url(self) -> str | None:
        if not self.icon_code:
            return None
        return ICON_URL_TEMPLATE.format(code=self.icon_code)

    @property
    def condition(self) -> Condition:
        match = _ICON_PREFIX_CONDITIONS.get(self.icon_code[:2])
        if match is not None:
            return match
        desc = self.description.lower()
        for keywords, condition in _DESCRIPTION_KEYWORDS:
            if any(k in desc for k in keywords):
                return condition
        return Condition.PARTLY_CLOUDY

    @classmethod
    def from_current(
        cls,
        current: CurrentConditions,
        today: DailyForecast | None,
        resort_name: str,
    ) -> "WeatherReading":
        """Current conditions borrow sunrise/sunset from today's daily entry."""
        description, icon = _primary(current.weather)
        if today is not None:
            sunrise, sunset = today.sunrise, today.sunset
        else:
            sunrise = sunset = utc_now()
        return cls(
            temperature=current.temp,
            feels_like=current.feels_like,
            humidity=current.humidity,
            wind_speed=current.wind_speed,
            description=description,
            icon_code=icon,
            sunrise=sunrise,
            sunset=sunset,
            resort_name=resort_name,
            observed_at=current.observed_at,
        )

    @classmethod
    def from_daily(cls, daily: DailyForecast, resort_name: str) -> "WeatherReading":
        description, icon = _primary(daily.weather)
        return cls(
            temperature=daily.temp_day,
            feels_like=daily.feels_like_day,
            humidity=daily.humidity,
            wind_speed=daily.wind_speed,
            description=description,
            icon_code=icon,
            sunrise=daily.sunrise,
            sunset=daily.sunset,
            resort_name=resort_name,
            observed_at=daily.forecast_at,
        )

    @classmethod
    def from_historical(
        cls, observation: HistoricalObservation, resort_name: str
    ) -> "WeatherReading":
        # Historical data has no sun times; the construction time stands in.
        description, icon = _primary(observation.weather)
        now = utc_now()
        return cls(
            temperature=observation.temp,
            feels_like=observation.feels_like,
            humidity=observation.humidity,
            wind_speed=observation.wind_speed,
            description=description,
            icon_code=icon,
            sunrise=now,
            sunset=now,
            resort_name=resort_name,
            observed_at=observation.observed_at,
        )
