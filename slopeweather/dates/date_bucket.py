"""Date bucket classification: which retrieval strategy applies to a day."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from zoneinfo import ZoneInfo

from slopeweather.models.common import canonical_zone

MAX_FORECAST_DAYS = 7


class BucketKind(StrEnum):
    UNSUPPORTED_PAST = "unsupported_past"
    TODAY = "today"
    FUTURE = "future"
    UNSUPPORTED_TOO_FAR = "unsupported_too_far"


@dataclass(frozen=True)
class DateBucket:
    kind: BucketKind
    offset_days: int

    @property
    def is_supported(self) -> bool:
        return self.kind in (BucketKind.TODAY, BucketKind.FUTURE)


def normalize_day(value: date | datetime, tz: ZoneInfo | None = None) -> date:
    """Reduce a moment to its calendar day in the canonical time zone.

    Aware datetimes are converted into ``tz`` first. Naive datetimes are taken
    to be wall-clock times in ``tz`` already.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(tz or canonical_zone())
        return value.date()
    return value


def days_between(
    start: date | datetime, end: date | datetime, tz: ZoneInfo | None = None
) -> int:
    """Signed number of calendar days from ``start`` to ``end``."""
    return (normalize_day(end, tz) - normalize_day(start, tz)).days


def classify(
    today: date | datetime,
    selected: date | datetime,
    tz: ZoneInfo | None = None,
    max_forecast_days: int = MAX_FORECAST_DAYS,
) -> DateBucket:
    offset = days_between(today, selected, tz)
    if offset < 0:
        return DateBucket(BucketKind.UNSUPPORTED_PAST, offset)
    if offset == 0:
        return DateBucket(BucketKind.TODAY, 0)
    if offset <= max_forecast_days:
        return DateBucket(BucketKind.FUTURE, offset)
    return DateBucket(BucketKind.UNSUPPORTED_TOO_FAR, offset)
