# Project: weather-lookup
# Owner: GreenUnicorn
"""
geocode.py — Look up coordinates for a place name using the OpenWeather
Geocoding API.

API docs: https://openweathermap.org/api/geocoding-api
"""

import logging
from typing import Any

from weather_lookup.document import as_array, as_object, require_numbers
from weather_lookup.errors import NoResultError
from weather_lookup.models import Location
from weather_lookup.transport import get_json, raise_for_provider_error

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://api.openweathermap.org/geo/1.0/direct"
RESULT_LIMIT = 1


def resolve_location(api_key: str, place: str) -> Location:
    """Look up coordinates for a place name.

    Args:
        api_key: OpenWeather API key.
        place: Human-readable place name, e.g. 'Tokyo' or 'London, GB'.

    Returns:
        Location of the provider's best match.

    Raises:
        RequestError: If the request fails.
        ProviderError: If OpenWeather returns an error envelope.
        NoResultError: If no match is found.
        MissingFieldsError: If the match has no numeric lat/lon.
    """
    params = {
        "q": place,
        "limit": RESULT_LIMIT,
        "appid": api_key,
    }

    logger.debug('Requesting location of "%s"', place)
    data = get_json(GEOCODING_URL, params)
    raise_for_provider_error(data)

    logger.debug('Parsing location of "%s"', place)
    location = _parse_location(data)

    logger.debug('Got location of "%s": %s', place, location)
    return location


def _parse_location(data: Any) -> Location:
    """Extract the first match from a geocoding response.

    Args:
        data: Decoded geocoding response, expected to be a list of objects.

    Returns:
        Location built from the first object's lat and lon.

    Raises:
        NoResultError: If data is not a list, is empty, or its first element
            is not an object.
        MissingFieldsError: If lat or lon is absent or not numeric.
    """
    results = as_array(data)
    if not results:
        raise NoResultError()

    first = as_object(results[0])
    if first is None:
        raise NoResultError()

    coords = require_numbers(first, ["lat", "lon"])
    return Location(latitude=coords["lat"], longitude=coords["lon"])
