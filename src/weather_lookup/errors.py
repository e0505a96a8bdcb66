# Project: weather-lookup
# Owner: GreenUnicorn
"""
errors.py — Failure kinds raised by the lookup client.

Every error is terminal: nothing in the client retries. The CLI prints
str(error) for any WeatherLookupError and exits non-zero.
"""

import re

# Matches the credential query parameter in URLs quoted by requests errors
APPID_PATTERN = re.compile(r"(appid=)[^&\s'\")]+")


class WeatherLookupError(Exception):
    """Base class for every failure the lookup client reports."""


class RequestError(WeatherLookupError):
    """The HTTP request failed or the body could not be decoded."""

    def __init__(self, cause: Exception):
        self.cause = cause
        detail = APPID_PATTERN.sub(r"\1***", str(cause))
        super().__init__(f"Something went wrong getting the request: {detail}")


class ProviderError(WeatherLookupError):
    """OpenWeather answered with an error envelope."""

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(f"API returned error code {code}: {message}")


class NoResultError(WeatherLookupError):
    """The response did not have the outer shape the operation expects."""

    def __init__(self):
        super().__init__("No result was found")


class MissingFieldsError(WeatherLookupError):
    """Required numeric fields were absent or not numbers."""

    def __init__(self, fields: list[str] | None = None):
        self.fields = list(fields or [])
        msg = "Required fields were missing"
        if self.fields:
            msg += ": " + ", ".join(self.fields)
        super().__init__(msg)


class InvalidUnitSelectorError(WeatherLookupError, ValueError):
    """A unit selector string was not one of the recognised tokens."""

    def __init__(self, given: str):
        self.given = given
        super().__init__(f"Failed to parse the given weather unit: {given}")
