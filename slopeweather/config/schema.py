"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/3.0"


class ErrorPolicy(StrEnum):
    LAST = "last"
    ALL = "all"


class OperatingHours(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    day: str
    night: str | None = None
    late_night: str | None = None

    @classmethod
    def simple(cls, hours: str) -> "OperatingHours":
        return cls(day=hours)

    @property
    def short_summary(self) -> str:
        """Card label: daytime hours only."""
        if self.night is not None:
            return f"Day {self.day}"
        return self.day

    @property
    def detail_text(self) -> str:
        text = f"Day {self.day}"
        if self.night is not None:
            text += f" | Night {self.night}"
        if self.late_night is not None:
            text += f" | Late night {self.late_night}"
        return text


class ResortConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    name: str
    slug: str
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    homepage_url: str = ""
    slope_status_url: str = ""
    webcam_url: str | None = None
    operating_hours: OperatingHours | None = None
    enabled: bool = True


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OPENWEATHER_BASE_URL
    api_key: str = ""
    units: str = "metric"
    lang: str = "kr"
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class CalendarConfig(BaseModel):
    model_config = {"extra": "forbid"}

    timezone: str = "Asia/Seoul"
    max_forecast_days: int = Field(default=7, ge=0, le=7)

    @field_validator("timezone")
    @classmethod
    def _known_zone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {v}") from e
        return v

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


class ErrorsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    policy: ErrorPolicy = ErrorPolicy.LAST


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    calendar: CalendarConfig = CalendarConfig()
    errors: ErrorsConfig = ErrorsConfig()
    resorts: list[ResortConfig] = []

    @field_validator("resorts")
    @classmethod
    def _unique_slugs(cls, v: list[ResortConfig]) -> list[ResortConfig]:
        seen: set[str] = set()
        for r in v:
            if r.slug in seen:
                raise ValueError(f"Duplicate resort slug: {r.slug}")
            seen.add(r.slug)
        return v

    @property
    def enabled_resorts(self) -> list[ResortConfig]:
        return [r for r in self.resorts if r.enabled]
