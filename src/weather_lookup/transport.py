# Project: weather-lookup
# Owner: GreenUnicorn
"""
transport.py — Single blocking GET against the OpenWeather API.

get_json performs exactly one request and decodes the body; it knows nothing
about geocoding or weather. Status codes are deliberately left alone here:
OpenWeather returns its error details in the JSON body alongside a 4xx
status, and raise_for_provider_error inspects that body instead.

API docs: https://openweathermap.org/api
"""

import logging
from typing import Any

import requests

from weather_lookup.errors import ProviderError, RequestError

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS = 10

# Messages substituted when an error envelope carries a code but no message
NOT_FOUND_MESSAGE = "Result not found"
UNKNOWN_ERROR_MESSAGE = "Unknown error"


def get_json(url: str, params: dict) -> Any:
    """Send one GET request and decode the JSON body.

    Args:
        url: Endpoint URL without a query string.
        params: Query parameters, including the appid credential.

    Returns:
        The decoded body: a dict, list or scalar.

    Raises:
        RequestError: On connection failure, timeout, or a body that is not
            valid JSON.
    """
    try:
        r = requests.get(url, params=params, timeout=REQUEST_TIMEOUT_SECONDS)
        logger.debug("GET %s -> HTTP %s", url, r.status_code)
        return r.json()
    except (requests.RequestException, ValueError) as e:
        raise RequestError(e) from e


def _status_code(value: Any) -> int | None:
    """Read an envelope 'cod' as an int; strings and booleans are not codes."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def raise_for_provider_error(document: Any) -> None:
    """Raise ProviderError if document is an OpenWeather error envelope.

    An envelope is an object with an integer 'cod' and a string 'message'.
    A 'cod' of 400 or above without a message is also an error, with a
    substituted message. Anything else is left for the caller to parse.

    Raises:
        ProviderError: Carrying the envelope's code and message.
    """
    if not isinstance(document, dict) or "cod" not in document:
        return

    code = _status_code(document["cod"])
    if code is None:
        return

    message = document.get("message")
    if isinstance(message, str):
        raise ProviderError(code, message)

    if "message" not in document and code >= 400:
        raise ProviderError(code, NOT_FOUND_MESSAGE if code == 404 else UNKNOWN_ERROR_MESSAGE)
