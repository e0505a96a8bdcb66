# Project: weather-lookup
# Owner: GreenUnicorn
"""Tests for report.py text rendering."""

import pytest

from weather_lookup.models import Location, WeatherReading
from weather_lookup.report import fmt_number, format_location, format_report
from weather_lookup.units import Unit


def _make_reading(unit=Unit.METRIC, **overrides) -> WeatherReading:
    values = {
        "temperature": 15.2,
        "feels_like": 14.8,
        "temp_min": 13.0,
        "temp_max": 17.0,
        "pressure": 1012.0,
        "humidity": 60.0,
    }
    values.update(overrides)
    return WeatherReading(unit=unit, **values)


@pytest.mark.parametrize("value, expected", [
    (60.0, "60"),
    (15.2, "15.2"),
    (-0.5, "-0.5"),
    (0.0, "0"),
    (1012.25, "1012.25"),
    (1e-05, "0.00001"),
    (-2.5e-07, "-0.00000025"),
    (60, "60"),
])
def test_fmt_number(value, expected):
    assert fmt_number(value) == expected


def test_report_metric_lines():
    report = format_report(_make_reading())
    lines = report.splitlines()

    assert lines[0] == ""
    assert lines[1] == "Weather report for today:"
    assert lines[2] == "  Temperature: 15.2 °C  Feels like: 14.8 °C"
    assert lines[3] == "  Min: 13 °C  Max: 17 °C"
    assert lines[4] == "  Pressure: 1012 hPa  Humidity: 60%"
    assert lines[5] == "  All units are in the metric system"


def test_report_customary_symbols():
    report = format_report(_make_reading(unit=Unit.CUSTOMARY, temperature=59.4))

    assert "Temperature: 59.4 °F" in report
    assert "°C" not in report
    assert "Pressure: 1012 hPa" in report
    assert report.endswith("All units are in the imperial system")


def test_format_location():
    assert format_location(Location(latitude=51.5, longitude=-0.12)) == "(51.5, -0.12)"
    assert format_location(Location(latitude=35.0, longitude=139.0)) == "(35, 139)"


def test_format_location_with_integer_coordinates():
    """Integer fields render without calling float-only methods on int."""
    assert format_location(Location(latitude=35, longitude=139)) == "(35, 139)"
