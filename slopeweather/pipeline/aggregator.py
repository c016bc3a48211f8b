"""Reduces per-resort outcomes into a single snapshot."""

from datetime import date
from typing import Protocol

from slopeweather.config.schema import ErrorPolicy
from slopeweather.ingest.errors import WeatherServiceError
from slopeweather.models.common import ResortSlug
from slopeweather.models.snapshot import FetchOutcome, Snapshot, SnapshotError, Success
from slopeweather.models.weather import WeatherReading


class ErrorSummaryPolicy(Protocol):
    def summarize(
        self, failures: list[tuple[ResortSlug, WeatherServiceError]]
    ) -> SnapshotError | None: ...


class LastErrorPolicy:
    """Report only the most recent failure in arrival order."""

    def summarize(
        self, failures: list[tuple[ResortSlug, WeatherServiceError]]
    ) -> SnapshotError | None:
        last: WeatherServiceError | None = None
        for _, error in failures:
            last = error
        if last is None:
            return None
        return SnapshotError(message=last.message, kinds=(last.kind.value,))


class CollectAllErrorsPolicy:
    """Report every failing resort, keyed by slug."""

    def summarize(
        self, failures: list[tuple[ResortSlug, WeatherServiceError]]
    ) -> SnapshotError | None:
        if not failures:
            return None
        by_resort = {slug: error.message for slug, error in failures}
        kinds = tuple(dict.fromkeys(error.kind.value for _, error in failures))
        details = "; ".join(f"{slug}: {msg}" for slug, msg in by_resort.items())
        return SnapshotError(
            message=f"{len(by_resort)} resort(s) failed: {details}",
            kinds=kinds,
            by_resort=by_resort,
        )


def policy_for(name: ErrorPolicy) -> ErrorSummaryPolicy:
    if name == ErrorPolicy.ALL:
        return CollectAllErrorsPolicy()
    return LastErrorPolicy()


class SnapshotAggregator:
    def __init__(self, policy: ErrorSummaryPolicy | None = None):
        self.policy = policy or LastErrorPolicy()

    def reduce(
        self, target_date: date, outcomes: dict[ResortSlug, FetchOutcome]
    ) -> Snapshot:
        """Build a fresh snapshot. ``outcomes`` must be in completion order."""
        readings: dict[ResortSlug, WeatherReading] = {}
        failures: list[tuple[ResortSlug, WeatherServiceError]] = []
        for slug, outcome in outcomes.items():
            if isinstance(outcome, Success):
                readings[slug] = outcome.reading
            else:
                failures.append((slug, outcome.error))
        return Snapshot(
            target_date=target_date,
            readings=readings,
            is_loading=False,
            last_error=self.policy.summarize(failures),
        )
