"""CLI entry point for the SkyView weather client."""

import argparse
import asyncio
import logging

from skyview.config.loader import get_config_value, load_config, save_config, set_config_value
from skyview.config.schema import AppConfig
from skyview.display.console import ConsoleSink
from skyview.display.formatters import format_recent, format_suggestions
from skyview.ingest.geolocation import FixedLocation, GeolocationSource, IpGeolocationSource
from skyview.ingest.validator import validate_place_name
from skyview.ingest.weather_client import WeatherClient
from skyview.models.common import TemperatureUnit
from skyview.models.errors import SkyviewError
from skyview.models.query import PlaceQuery
from skyview.pipeline.lookup_pipeline import LookupPipeline
from skyview.storage.recent_cities import RecentCityStore

DEFAULT_CONFIG = "configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="skyview",
        description="Current weather and 5-day forecast lookup",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("--db", default=None, help="SQLite DB path (overrides config)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command")

    # weather
    weather_p = sub.add_parser("weather", help="Look up a city by name")
    weather_p.add_argument("city", nargs="+", help="City name, e.g. São Paulo")
    _add_display_args(weather_p)

    # here
    here_p = sub.add_parser("here", help="Look up the current location")
    here_p.add_argument("--lat", type=float, help="Latitude")
    here_p.add_argument("--lon", type=float, help="Longitude")
    _add_display_args(here_p)

    # recent / recent clear
    recent_p = sub.add_parser("recent", help="Show recent searches")
    recent_sub = recent_p.add_subparsers(dest="recent_command")
    recent_sub.add_parser("clear", help="Clear recent searches")

    # suggest
    suggest_p = sub.add_parser("suggest", help="Suggest matching city names")
    suggest_p.add_argument("text", nargs="+", help="Partial city name")
    suggest_p.add_argument("--limit", type=int, default=5, help="Max results")

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
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "weather":
        return _cmd_weather(config, args)
    elif args.command == "here":
        return _cmd_here(config, args)
    elif args.command == "recent":
        return _cmd_recent(config, args)
    elif args.command == "suggest":
        return _cmd_suggest(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _add_display_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--units",
        choices=[u.value for u in TemperatureUnit],
        help="Temperature unit (default from config)",
    )
    p.add_argument("--json", action="store_true", help="Emit JSON")


def _build_pipeline(
    config: AppConfig, args, announce_location: bool = False
) -> LookupPipeline:
    pipeline = LookupPipeline.from_config(config, db_path=args.db)
    if args.units:
        pipeline.context.session.set_unit(args.units)
    pipeline.sink = ConsoleSink(
        pipeline.context.session,
        json_output=args.json,
        announce_location=announce_location,
    )
    return pipeline


def _cmd_weather(config: AppConfig, args) -> int:
    pipeline = _build_pipeline(config, args)
    query = PlaceQuery.by_name(" ".join(args.city))
    outcome = asyncio.run(pipeline.lookup(query))
    return 0 if outcome.ok else 1


def _cmd_here(config: AppConfig, args) -> int:
    if (args.lat is None) != (args.lon is None):
        print("Error: --lat and --lon must be given together")
        return 1

    source: GeolocationSource
    if args.lat is not None:
        source = FixedLocation(args.lat, args.lon)
    else:
        source = IpGeolocationSource.from_config(config.geolocation)

    pipeline = _build_pipeline(config, args, announce_location=True)
    outcome = asyncio.run(pipeline.lookup_here(source))
    return 0 if outcome.ok else 1


def _cmd_recent(config: AppConfig, args) -> int:
    store = RecentCityStore(args.db or config.recent.db_path, config.recent.max_cities)
    if args.recent_command == "clear":
        store.clear()
        print("Recent searches cleared.")
        return 0
    print(format_recent(store.load()))
    return 0


def _cmd_suggest(config: AppConfig, args) -> int:
    validation = validate_place_name(" ".join(args.text))
    if not validation.valid:
        print(f"Error: {validation.message}")
        return 1

    client = WeatherClient.from_config(config.provider)
    try:
        suggestions = asyncio.run(
            client.get_city_suggestions(validation.value, limit=args.limit)
        )
    except SkyviewError as e:
        print(f"Error: {e}")
        return 1
    print(format_suggestions(suggestions))
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2, exclude={"provider": {"api_key"}}))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            save_config(new_config, args.config)
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except (KeyError, ValueError) as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1
