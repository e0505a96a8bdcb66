# Project: weather-lookup
# Owner: GreenUnicorn
"""
weather.py — Fetch current conditions from the OpenWeather Current Weather API.

The unit system is sent as the ``units`` parameter, so every value comes
back already converted. The returned reading is tagged with the unit that
was requested, not anything echoed in the response body.

API docs: https://openweathermap.org/current
"""

import logging
from typing import Any

from weather_lookup.document import as_object, require_numbers
from weather_lookup.errors import NoResultError
from weather_lookup.models import Location, WeatherReading
from weather_lookup.transport import get_json, raise_for_provider_error
from weather_lookup.units import Unit

logger = logging.getLogger(__name__)

WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"

# Fields we read from the response's "main" object, in reading order
MAIN_FIELDS = [
    "temp",
    "feels_like",
    "temp_min",
    "temp_max",
    "pressure",
    "humidity",
]


def fetch_weather(api_key: str, location: Location, unit: Unit) -> WeatherReading:
    """Fetch the current weather at a location.

    Args:
        api_key: OpenWeather API key.
        location: Coordinates to query.
        unit: Unit system the values should be returned in.

    Returns:
        WeatherReading tagged with unit.

    Raises:
        RequestError: If the request fails.
        ProviderError: If OpenWeather returns an error envelope.
        NoResultError: If the response has no 'main' object.
        MissingFieldsError: If any of MAIN_FIELDS is absent or not numeric.
    """
    params = {
        "lat": location.latitude,
        "lon": location.longitude,
        "units": unit.token,
        "appid": api_key,
    }

    logger.debug("Requesting weather at %s", location)
    data = get_json(WEATHER_URL, params)
    raise_for_provider_error(data)

    logger.debug("Parsing weather at %s", location)
    reading = _parse_weather(data, unit)

    logger.debug("Got weather at %s", location)
    return reading


def _parse_weather(data: Any, unit: Unit) -> WeatherReading:
    body = as_object(data)
    if body is None:
        raise NoResultError()

    main = as_object(body.get("main"))
    if main is None:
        raise NoResultError()

    values = require_numbers(main, MAIN_FIELDS)
    return WeatherReading(
        temperature=values["temp"],
        feels_like=values["feels_like"],
        temp_min=values["temp_min"],
        temp_max=values["temp_max"],
        pressure=values["pressure"],
        humidity=values["humidity"],
        unit=unit,
    )
