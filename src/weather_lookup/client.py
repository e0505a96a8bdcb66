# Project: weather-lookup
# Owner: GreenUnicorn
"""
client.py — Public entry point: a credential plus a unit system.

    client = Client.login(api_key).with_unit(Unit.METRIC)
    reading = client.weather_at("London, GB")

A Client is immutable; with_unit returns a new one. Every client carries a
unit (customary by default), so a weather fetch can never run without one.
"""

from dataclasses import dataclass, replace

from weather_lookup import geocode, weather
from weather_lookup.models import Location, WeatherReading
from weather_lookup.units import Unit


@dataclass(frozen=True)
class Client:
    api_key: str
    unit: Unit = Unit.CUSTOMARY

    def __post_init__(self):
        if not self.api_key:
            raise ValueError("An OpenWeather API key is required")

    def __repr__(self) -> str:
        # Keep the credential out of tracebacks and debug output
        return f"Client(api_key='***', unit={self.unit})"

    @classmethod
    def login(cls, api_key: str) -> "Client":
        return cls(api_key=api_key)

    def with_unit(self, unit: Unit) -> "Client":
        return replace(self, unit=unit)

    def resolve(self, place: str) -> Location:
        """Resolve a place name to coordinates."""
        return geocode.resolve_location(self.api_key, place)

    def fetch_weather(self, location: Location) -> WeatherReading:
        """Fetch current weather at location in this client's unit system."""
        return weather.fetch_weather(self.api_key, location, self.unit)

    def weather_at(self, place: str) -> WeatherReading:
        """Resolve place, then fetch its weather.

        Any error from the resolve step propagates unchanged and no weather
        request is made.
        """
        location = self.resolve(place)
        return self.fetch_weather(location)
