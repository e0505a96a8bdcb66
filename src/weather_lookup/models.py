# Project: weather-lookup
# Owner: GreenUnicorn
"""
models.py — Immutable values produced by the resolver and the fetcher.
"""

from dataclasses import dataclass

from weather_lookup.units import Unit


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"


@dataclass(frozen=True)
class WeatherReading:
    """Current conditions at a location, in the unit system they were requested in.

    Temperatures use unit.temperature_symbol, pressure uses
    unit.pressure_symbol and humidity is a 0-100 percentage.
    """

    temperature: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: float
    humidity: float
    unit: Unit
