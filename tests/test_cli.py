# Project: weather-lookup
# Owner: GreenUnicorn
"""
test_cli.py — Tests for the command-line entry point.

get_json is patched in the geocode and weather modules — no network calls.
"""

from unittest.mock import MagicMock

import pytest

from weather_lookup.cli import build_parser, main
from weather_lookup.units import Unit

GEOCODE_BODY = [{"lat": 51.5, "lon": -0.12}]
WEATHER_BODY = {
    "main": {
        "temp": 15.2,
        "feels_like": 14.8,
        "temp_min": 13.0,
        "temp_max": 17.0,
        "pressure": 1012.0,
        "humidity": 60.0,
    }
}


@pytest.fixture(autouse=True)
def _env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPEN_WEATHER_API_KEY", "env-key")


@pytest.fixture()
def api(monkeypatch):
    geo = MagicMock(return_value=GEOCODE_BODY)
    wx = MagicMock(return_value=WEATHER_BODY)
    monkeypatch.setattr("weather_lookup.geocode.get_json", geo)
    monkeypatch.setattr("weather_lookup.weather.get_json", wx)
    return geo, wx


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def test_parser_weather_unit_shorthand():
    args = build_parser().parse_args(["weather", "London", "-u", "m"])
    assert args.command == "weather"
    assert args.location == "London"
    assert args.unit is Unit.METRIC


def test_parser_rejects_invalid_unit(capsys):
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(["weather", "London", "--unit", "kelvin"])
    assert exc_info.value.code == 2
    assert "kelvin" in capsys.readouterr().err


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------

def test_weather_command_prints_report(api, capsys):
    main(["weather", "London", "--unit", "metric"])

    out = capsys.readouterr().out
    assert "Temperature: 15.2 °C" in out
    assert "Humidity: 60%" in out
    assert "metric system" in out


def test_weather_command_defaults_to_imperial(api):
    _, wx = api
    main(["weather", "London"])
    assert wx.call_args[0][1]["units"] == "imperial"


def test_weather_command_uses_env_key(api):
    geo, _ = api
    main(["weather", "London"])
    assert geo.call_args[0][1]["appid"] == "env-key"


def test_cli_key_overrides_env(api):
    geo, _ = api
    main(["--open-weather-api-key", "cli-key", "location", "London"])
    assert geo.call_args[0][1]["appid"] == "cli-key"


def test_location_command_prints_coordinates(api, capsys):
    main(["location", "London"])
    assert capsys.readouterr().out.strip() == "(51.5, -0.12)"


def test_lookup_error_exits_1(api, capsys):
    geo, wx = api
    geo.return_value = []

    with pytest.raises(SystemExit) as exc_info:
        main(["weather", "Nowhere"])

    assert exc_info.value.code == 1
    assert "[error] No result was found" in capsys.readouterr().err
    wx.assert_not_called()


def test_missing_key_exits_1(api, monkeypatch, capsys):
    monkeypatch.delenv("OPEN_WEATHER_API_KEY")

    with pytest.raises(SystemExit) as exc_info:
        main(["location", "London"])

    assert exc_info.value.code == 1
    assert "No OpenWeather API key found" in capsys.readouterr().err


def test_verbose_logs_steps(api, capsys):
    main(["-v", "location", "London"])

    out = capsys.readouterr().out
    assert 'Requesting location of "London"' in out
    assert "env-key" not in out
