# Project: weather-lookup
# Owner: GreenUnicorn
"""
units.py — Measurement systems supported by the OpenWeather API.

OpenWeather converts temperatures server-side when the ``units`` query
parameter is set, so a Unit only needs to know its request token and how
its values are labelled in a report.
"""

from enum import Enum

from weather_lookup.errors import InvalidUnitSelectorError


class Unit(Enum):
    CUSTOMARY = "imperial"
    METRIC = "metric"

    @property
    def token(self) -> str:
        """Value sent as the ``units`` request parameter."""
        return self.value

    @property
    def temperature_symbol(self) -> str:
        return "°F" if self is Unit.CUSTOMARY else "°C"

    @property
    def pressure_symbol(self) -> str:
        # OpenWeather reports pressure in hPa regardless of the unit system
        return "hPa"

    @property
    def system_name(self) -> str:
        return self.value


# Accepted selector strings, including the single-letter shorthands
SELECTORS = {
    "imperial": Unit.CUSTOMARY,
    "i": Unit.CUSTOMARY,
    "metric": Unit.METRIC,
    "m": Unit.METRIC,
}


def parse_unit(token: str) -> Unit:
    """Map a unit selector string to a Unit.

    Args:
        token: One of 'imperial', 'i', 'metric' or 'm'.

    Returns:
        The matching Unit.

    Raises:
        InvalidUnitSelectorError: If the token is not a recognised selector.
    """
    try:
        return SELECTORS[token]
    except KeyError:
        raise InvalidUnitSelectorError(token) from None
