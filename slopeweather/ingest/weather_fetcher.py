"""Weather fetcher: retrieves the reading for one resort on one day."""

import logging
from datetime import date
from zoneinfo import ZoneInfo

from slopeweather.config.schema import ResortConfig
from slopeweather.dates.date_bucket import BucketKind, DateBucket, normalize_day
from slopeweather.ingest.errors import NoDataAvailableError, WeatherServiceError
from slopeweather.ingest.ports import WeatherFetchPort
from slopeweather.models.forecast import DailyForecast
from slopeweather.models.snapshot import Failure, FetchOutcome, Success
from slopeweather.models.weather import WeatherReading

logger = logging.getLogger(__name__)


class WeatherFetcher:
    def __init__(self, port: WeatherFetchPort, tz: ZoneInfo):
        self.port = port
        self.tz = tz

    async def fetch(
        self, resort: ResortConfig, bucket: DateBucket, selected_day: date
    ) -> FetchOutcome:
        """Produce the outcome for a resort.

        Unsupported buckets fail without touching the provider. Provider
        errors become ``Failure`` outcomes; nothing escapes to the caller.
        """
        if not bucket.is_supported:
            return Failure(NoDataAvailableError())

        try:
            bundle = await self.port.fetch_forecast_bundle(
                resort.latitude, resort.longitude
            )
        except WeatherServiceError as e:
            logger.warning(
                "Weather fetch failed for %s (%s): %s", resort.slug, e.kind, e.message
            )
            return Failure(e)

        if bucket.kind == BucketKind.TODAY:
            today = bundle.daily[0] if bundle.daily else None
            return Success(WeatherReading.from_current(bundle.current, today, resort.name))

        daily = select_daily_for_day(bundle.daily, selected_day, self.tz)
        if daily is None:
            logger.warning(
                "No daily forecast for %s on %s in %d entries",
                resort.slug, selected_day, len(bundle.daily),
            )
            return Failure(NoDataAvailableError())
        return Success(WeatherReading.from_daily(daily, resort.name))


def select_daily_for_day(
    daily: list[DailyForecast], target_day: date, tz: ZoneInfo
) -> DailyForecast | None:
    """First entry whose calendar day in ``tz`` equals ``target_day``.

    Matched by day rather than by index since providers may omit or reorder days.
    """
    for entry in daily:
        if normalize_day(entry.forecast_at, tz) == target_day:
            return entry
    return None
