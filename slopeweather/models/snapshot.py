"""Per-resort fetch outcomes and the aggregated snapshot."""

from dataclasses import dataclass, field
from datetime import date
from typing import TypeAlias

from slopeweather.ingest.errors import WeatherServiceError
from slopeweather.models.common import ResortSlug
from slopeweather.models.weather import WeatherReading


@dataclass(frozen=True)
class Success:
    reading: WeatherReading


@dataclass(frozen=True)
class Failure:
    error: WeatherServiceError


FetchOutcome: TypeAlias = Success | Failure


@dataclass(frozen=True)
class SnapshotError:
    message: str
    kinds: tuple[str, ...] = ()
    by_resort: dict[ResortSlug, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Snapshot:
    target_date: date | None
    readings: dict[ResortSlug, WeatherReading] = field(default_factory=dict)
    is_loading: bool = False
    last_error: SnapshotError | None = None

    @property
    def last_error_message(self) -> str | None:
        return self.last_error.message if self.last_error else None


EMPTY_SNAPSHOT = Snapshot(target_date=None)
