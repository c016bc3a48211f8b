"""Output formatters for weather snapshots."""

import json
from collections.abc import Sequence
from datetime import datetime
from zoneinfo import ZoneInfo

from slopeweather.config.schema import ResortConfig
from slopeweather.models.snapshot import Snapshot
from slopeweather.models.weather import WeatherReading


def _clock(dt: datetime, tz: ZoneInfo) -> str:
    return dt.astimezone(tz).strftime("%H:%M")


def format_snapshot_text(
    s: Snapshot, resorts: Sequence[ResortConfig], tz: ZoneInfo
) -> str:
    """Plain text table, one line per resort in catalog order."""
    day = s.target_date.isoformat() if s.target_date else "-"
    lines = [f"=== Resort Weather | {day} | {len(s.readings)}/{len(resorts)} ==="]
    for resort in resorts:
        r = s.readings.get(resort.slug)
        if r is None:
            lines.append(f"{resort.name:<22} no data")
            continue
        lines.append(
            f"{resort.name:<22} {r.temperature:>5.0f}°  {r.description} "
            f"(feels {r.feels_like:.0f}°, wind {r.wind_speed:.0f}m/s, "
            f"humidity {r.humidity}%, sun {_clock(r.sunrise, tz)}-{_clock(r.sunset, tz)})"
        )
    if s.last_error is not None:
        lines.append(f"Error: {s.last_error.message}")
    return "\n".join(lines)


def reading_to_dict(r: WeatherReading) -> dict:
    return {
        "resort_name": r.resort_name,
        "temperature": r.temperature,
        "feels_like": r.feels_like,
        "humidity": r.humidity,
        "wind_speed": r.wind_speed,
        "description": r.description,
        "icon_code": r.icon_code,
        "icon_url": r.icon_url,
        "condition": r.condition.value,
        "sunrise": r.sunrise.isoformat(),
        "sunset": r.sunset.isoformat(),
        "observed_at": r.observed_at.isoformat(),
    }


def snapshot_to_dict(s: Snapshot) -> dict:
    return {
        "target_date": s.target_date.isoformat() if s.target_date else None,
        "is_loading": s.is_loading,
        "last_error_message": s.last_error_message,
        "error_kinds": list(s.last_error.kinds) if s.last_error else [],
        "readings": {slug: reading_to_dict(r) for slug, r in s.readings.items()},
    }


def format_snapshot_json(s: Snapshot) -> str:
    """JSON snapshot for programmatic consumption."""
    return json.dumps(snapshot_to_dict(s), indent=2, ensure_ascii=False)
