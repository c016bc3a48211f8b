"""Observable weather state shared with the presentation layer."""

import logging
from collections.abc import Sequence
from datetime import date, datetime

from slopeweather.config.schema import ResortConfig
from slopeweather.models.common import ResortSlug
from slopeweather.models.snapshot import EMPTY_SNAPSHOT, Snapshot
from slopeweather.models.weather import WeatherReading
from slopeweather.pipeline.load_pipeline import LoadPipeline

logger = logging.getLogger(__name__)


class WeatherStore:
    """Holds the latest published snapshot and the loading flag.

    Every ``load_weather`` call takes a new generation number. A run only
    publishes if no newer run has started since, so a slow request for an
    old date cannot overwrite a newer selection.
    """

    def __init__(self, pipeline: LoadPipeline):
        self.pipeline = pipeline
        self._snapshot: Snapshot = EMPTY_SNAPSHOT
        self._is_loading = False
        self._error_message: str | None = None
        self._generation = 0

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def readings(self) -> dict[ResortSlug, WeatherReading]:
        return dict(self._snapshot.readings)

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def last_error_message(self) -> str | None:
        return self._error_message

    @property
    def generation(self) -> int:
        return self._generation

    def dismiss_error(self) -> None:
        self._error_message = None

    async def load_weather(
        self, resorts: Sequence[ResortConfig], target: date | datetime
    ) -> bool:
        """Run the pipeline and publish its snapshot.

        Returns False when the result was dropped because a newer load began.
        """
        self._generation += 1
        generation = self._generation
        self._is_loading = True
        self._error_message = None

        try:
            snapshot = await self.pipeline.run(resorts, target)
        except Exception:
            if generation == self._generation:
                self._is_loading = False
            raise

        if generation != self._generation:
            logger.info(
                "Discarding stale snapshot for %s (generation %d, current %d)",
                snapshot.target_date, generation, self._generation,
            )
            return False

        self._snapshot = snapshot
        self._is_loading = False
        self._error_message = snapshot.last_error_message
        return True
