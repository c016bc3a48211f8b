"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from typing import TypeAlias
from zoneinfo import ZoneInfo

ResortSlug: TypeAlias = str

DEFAULT_TIMEZONE = "Asia/Seoul"


def utc_now() -> datetime:
    return datetime.now(UTC)


def from_unix(ts: float) -> datetime:
    """Convert a provider epoch timestamp to an aware UTC datetime."""
    return datetime.fromtimestamp(ts, UTC)


def canonical_zone(name: str = DEFAULT_TIMEZONE) -> ZoneInfo:
    return ZoneInfo(name)
