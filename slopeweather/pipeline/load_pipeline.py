"""Load pipeline: concurrent per-resort fetch for one selected day."""

import asyncio
import logging
import time
from collections.abc import Callable, Sequence
from datetime import date, datetime
from zoneinfo import ZoneInfo

from slopeweather.config.schema import AppConfig, ResortConfig
from slopeweather.dates.date_bucket import MAX_FORECAST_DAYS, classify, normalize_day
from slopeweather.ingest.ports import WeatherFetchPort
from slopeweather.ingest.weather_fetcher import WeatherFetcher
from slopeweather.models.common import ResortSlug, canonical_zone, utc_now
from slopeweather.models.snapshot import FetchOutcome, Snapshot, Success
from slopeweather.pipeline.aggregator import SnapshotAggregator, policy_for

logger = logging.getLogger(__name__)


class LoadPipeline:
    def __init__(
        self,
        port: WeatherFetchPort,
        tz: ZoneInfo | None = None,
        aggregator: SnapshotAggregator | None = None,
        clock: Callable[[], datetime] = utc_now,
        max_forecast_days: int = MAX_FORECAST_DAYS,
    ):
        self.tz = tz or canonical_zone()
        self.fetcher = WeatherFetcher(port, self.tz)
        self.aggregator = aggregator or SnapshotAggregator()
        self.clock = clock
        self.max_forecast_days = max_forecast_days

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        port: WeatherFetchPort,
        clock: Callable[[], datetime] = utc_now,
    ) -> "LoadPipeline":
        return cls(
            port,
            tz=config.calendar.zone,
            aggregator=SnapshotAggregator(policy_for(config.errors.policy)),
            clock=clock,
            max_forecast_days=config.calendar.max_forecast_days,
        )

    async def run(
        self, resorts: Sequence[ResortConfig], target: date | datetime
    ) -> Snapshot:
        """Fetch every resort for ``target`` and reduce to one snapshot."""
        start_time = time.monotonic()
        selected_day = normalize_day(target, self.tz)
        bucket = classify(
            self.clock(), selected_day, self.tz, self.max_forecast_days
        )

        if not resorts:
            return Snapshot(target_date=selected_day)

        # One task per resort with no concurrency cap. The catalog is a
        # small fixed list; put a semaphore here if it ever grows.
        tasks = [
            asyncio.create_task(self._fetch_one(resort, bucket, selected_day))
            for resort in resorts
        ]
        outcomes: dict[ResortSlug, FetchOutcome] = {}
        for next_done in asyncio.as_completed(tasks):
            slug, outcome = await next_done
            outcomes[slug] = outcome

        snapshot = self.aggregator.reduce(selected_day, outcomes)
        succeeded = sum(1 for o in outcomes.values() if isinstance(o, Success))
        logger.info(
            "Loaded %s (%s): %d ok, %d failed in %.2fs",
            selected_day, bucket.kind, succeeded, len(outcomes) - succeeded,
            time.monotonic() - start_time,
        )
        return snapshot

    async def _fetch_one(self, resort, bucket, selected_day):
        outcome = await self.fetcher.fetch(resort, bucket, selected_day)
        return resort.slug, outcome
