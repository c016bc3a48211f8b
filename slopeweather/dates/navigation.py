"""Selected-date state with the allowed forecast window enforced."""

import logging
from collections.abc import Callable
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from slopeweather.dates.date_bucket import MAX_FORECAST_DAYS, normalize_day
from slopeweather.models.common import canonical_zone, utc_now

logger = logging.getLogger(__name__)


class DateNavigator:
    """Holds the day the user is looking at.

    The window is recomputed from the clock on every call, so a navigator
    kept alive across midnight tracks the new "today".
    """

    def __init__(
        self,
        tz: ZoneInfo | None = None,
        clock: Callable[[], datetime] = utc_now,
        max_forecast_days: int = MAX_FORECAST_DAYS,
        selected: datetime | None = None,
    ):
        self.tz = tz or canonical_zone()
        self._clock = clock
        self.max_forecast_days = max_forecast_days
        self.selected: datetime = selected if selected is not None else clock()

    @property
    def min_allowed(self) -> date:
        return normalize_day(self._clock(), self.tz)

    @property
    def max_allowed(self) -> date:
        return self.min_allowed + timedelta(days=self.max_forecast_days)

    @property
    def selected_day(self) -> date:
        return normalize_day(self.selected, self.tz)

    @property
    def formatted_selected(self) -> str:
        return self.selected_day.isoformat()

    def can_move(self, days: int) -> bool:
        candidate = normalize_day(self.selected + timedelta(days=days), self.tz)
        return self.min_allowed <= candidate <= self.max_allowed

    def move(self, days: int) -> None:
        """Shift the selection by ``days``; out-of-window moves are ignored."""
        if not self.can_move(days):
            logger.debug(
                "Ignoring move by %d from %s: outside %s..%s",
                days, self.formatted_selected, self.min_allowed, self.max_allowed,
            )
            return
        self.selected = self.selected + timedelta(days=days)

    def reset_to_today(self) -> None:
        self.selected = self._clock()
