"""CLI entry point for resort weather lookups."""

import argparse
import asyncio
import logging
from datetime import date

from slopeweather.config.loader import get_config_value, load_config, set_config_value
from slopeweather.config.schema import AppConfig
from slopeweather.dates.navigation import DateNavigator
from slopeweather.ingest.openweather_client import OpenWeatherClient
from slopeweather.pipeline.load_pipeline import LoadPipeline
from slopeweather.reporting.formatters import format_snapshot_json, format_snapshot_text
from slopeweather.state.store import WeatherStore


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="slopeweather",
        description="Ski resort weather for a selected day",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command")

    # resorts
    sub.add_parser("resorts", help="List the resort catalog")

    # weather
    weather_p = sub.add_parser("weather", help="Fetch weather for every resort")
    when = weather_p.add_mutually_exclusive_group()
    when.add_argument("--date", type=date.fromisoformat, help="Day as YYYY-MM-DD")
    when.add_argument("--offset", type=int, default=0, help="Days from today (0-7)")
    weather_p.add_argument("--json", action="store_true", help="JSON output")
    weather_p.add_argument("--api-key", default=None, help="OpenWeatherMap API key")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "resorts":
        return _cmd_resorts(config)
    elif args.command == "weather":
        return _cmd_weather(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_resorts(config: AppConfig) -> int:
    for r in config.enabled_resorts:
        hours = r.operating_hours.short_summary if r.operating_hours else "-"
        print(f"{r.slug:<12} {r.name:<22} {r.latitude:.4f},{r.longitude:.4f}  {hours}")
    return 0


def _cmd_weather(config: AppConfig, args) -> int:
    navigator = DateNavigator(
        tz=config.calendar.zone,
        max_forecast_days=config.calendar.max_forecast_days,
    )
    target = args.date
    if target is None:
        navigator.move(args.offset)
        target = navigator.selected

    store = asyncio.run(_load(config, target, args.api_key))
    if args.json:
        print(format_snapshot_json(store.snapshot))
    else:
        print(format_snapshot_text(store.snapshot, config.enabled_resorts, config.calendar.zone))
    return 0 if store.readings else 1


async def _load(config: AppConfig, target, api_key: str | None) -> WeatherStore:
    async with OpenWeatherClient.from_config(config.provider, api_key) as client:
        store = WeatherStore(LoadPipeline.from_config(config, client))
        await store.load_weather(config.enabled_resorts, target)
    return store


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1
