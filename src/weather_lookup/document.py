# Project: weather-lookup
# Owner: GreenUnicorn
"""
document.py — Safe accessors for decoded JSON response bodies.

A decoded body is a tree of dicts, lists and scalars. These helpers never
raise on an unexpected shape (except require_numbers, which raises the
typed MissingFieldsError), so malformed responses surface as lookup errors
rather than KeyError or TypeError.
"""

import math
from typing import Any

from weather_lookup.errors import MissingFieldsError


def as_object(value: Any) -> dict | None:
    return value if isinstance(value, dict) else None


def as_array(value: Any) -> list | None:
    return value if isinstance(value, list) else None


def number_field(obj: dict, key: str) -> float | None:
    """Return obj[key] as a finite float, or None if absent or not a number.

    JSON booleans decode to bool, which is an int subclass, so they are
    rejected explicitly. NaN and Infinity literals, and integers too large
    for a float, are rejected as well.
    """
    value = obj.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        value = float(value)
    except OverflowError:
        return None
    if not math.isfinite(value):
        return None
    return value


def require_numbers(obj: dict, keys: list[str]) -> dict[str, float]:
    """Read every key in keys as a finite float.

    Raises:
        MissingFieldsError: Naming every key that is absent or not numeric.
    """
    values = {key: number_field(obj, key) for key in keys}
    missing = [key for key, value in values.items() if value is None]
    if missing:
        raise MissingFieldsError(missing)
    return values
