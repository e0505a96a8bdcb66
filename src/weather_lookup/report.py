# Project: weather-lookup
# Owner: GreenUnicorn
"""
report.py — Plain-text rendering of lookup results.

All rendering functions return strings ready to print.
"""

from decimal import Decimal

from weather_lookup.models import Location, WeatherReading


def fmt_number(value: float) -> str:
    """Format a number in plain positional notation.

    Whole values lose their fractional part and no value is ever written
    with an exponent.

    Args:
        value: Any finite int or float.

    Returns:
        '60' for 60.0, '15.2' for 15.2, '0.00001' for 1e-05.
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    # repr gives the shortest round-tripping digits; Decimal drops the exponent
    return format(Decimal(repr(value)), "f")


def format_location(location: Location) -> str:
    return f"({fmt_number(location.latitude)}, {fmt_number(location.longitude)})"


def format_report(reading: WeatherReading) -> str:
    """Render a weather reading as a short multi-line report.

    Args:
        reading: WeatherReading from fetch_weather.

    Returns:
        Report text. Temperatures and pressure carry the symbols of the
        reading's unit, and the last line names the unit system.
    """
    unit = reading.unit
    temp = unit.temperature_symbol
    pressure = unit.pressure_symbol

    lines = [
        "",
        "Weather report for today:",
        f"  Temperature: {fmt_number(reading.temperature)} {temp}"
        f"  Feels like: {fmt_number(reading.feels_like)} {temp}",
        f"  Min: {fmt_number(reading.temp_min)} {temp}"
        f"  Max: {fmt_number(reading.temp_max)} {temp}",
        f"  Pressure: {fmt_number(reading.pressure)} {pressure}"
        f"  Humidity: {fmt_number(reading.humidity)}%",
        f"  All units are in the {unit.system_name} system",
    ]
    return "\n".join(lines)
