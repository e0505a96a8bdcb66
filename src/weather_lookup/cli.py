# Project: weather-lookup
# Owner: GreenUnicorn
"""
cli.py — Command-line interface for weather-lookup.

Commands:
  weather-lookup weather PLACE [--unit UNIT]  — print current weather at PLACE
  weather-lookup location PLACE               — print PLACE's coordinates

The API key comes from --open-weather-api-key, $OPEN_WEATHER_API_KEY, or the
[openweather] section of config.toml (see config.py).
"""

import argparse
import logging
import sys
from pathlib import Path

from weather_lookup.client import Client
from weather_lookup.config import API_KEY_ENV_VAR, resolve_settings
from weather_lookup.errors import InvalidUnitSelectorError, WeatherLookupError
from weather_lookup.report import format_location, format_report
from weather_lookup.units import Unit, parse_unit


def configure_logging(verbose: bool) -> None:
    """Send log records to stdout as bare messages; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        stream=sys.stdout,
        force=True,
    )
    # requests/urllib3 would otherwise echo full URLs, appid included
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def _unit_arg(value: str) -> Unit:
    try:
        return parse_unit(value)
    except InvalidUnitSelectorError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _client_from_args(args, unit: Unit | None = None) -> Client:
    settings = resolve_settings(
        api_key=args.api_key,
        unit=unit,
        config_path=args.config,
    )
    return Client.login(settings.api_key).with_unit(settings.unit)


def cmd_weather(args) -> None:
    """Resolve the place, fetch its weather and print the report."""
    client = _client_from_args(args, unit=args.unit)
    reading = client.weather_at(args.location)
    print(format_report(reading))


def cmd_location(args) -> None:
    """Resolve the place and print its coordinates."""
    client = _client_from_args(args)
    location = client.resolve(args.location)
    print(format_location(location))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weather-lookup",
        description="Look up current weather by place name using the OpenWeather API",
    )
    parser.add_argument(
        "--open-weather-api-key",
        dest="api_key",
        metavar="KEY",
        default=None,
        help=f"OpenWeather API key. Prefer setting ${API_KEY_ENV_VAR} instead.",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        default=None,
        help="TOML config file. Default: config.toml if present.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print each request and parsing step",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    p_weather = subparsers.add_parser("weather", help="Get the current weather at a place")
    p_weather.add_argument("location", metavar="PLACE", help='Place name, e.g. "London, GB"')
    p_weather.add_argument(
        "-u", "--unit",
        type=_unit_arg,
        default=None,
        help='"imperial" (i) or "metric" (m). Default: config file unit, else imperial.',
    )

    p_location = subparsers.add_parser("location", help="Get the coordinates of a place")
    p_location.add_argument("location", metavar="PLACE", help='Place name, e.g. "Tokyo"')

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    commands = {
        "weather": cmd_weather,
        "location": cmd_location,
    }
    try:
        commands[args.command](args)
    except (WeatherLookupError, ValueError, FileNotFoundError) as e:
        print(f"[error] {e}", file=sys.stderr)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
