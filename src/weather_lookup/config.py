# Project: weather-lookup
# Owner: GreenUnicorn
"""
config.py — Work out the API key and unit system for a run.

Sources, highest priority first:
  1. the --open-weather-api-key / --unit command-line options
  2. the OPEN_WEATHER_API_KEY environment variable (key only)
  3. a TOML config file, "config.toml" in the current working directory
     unless another path is given

We use tomllib (Python 3.11+ stdlib) so no extra install is needed.
"""

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from weather_lookup.units import Unit, parse_unit


DEFAULT_CONFIG_PATH = Path("config.toml")
API_KEY_ENV_VAR = "OPEN_WEATHER_API_KEY"
DEFAULT_UNIT = Unit.CUSTOMARY


@dataclass(frozen=True)
class Settings:
    api_key: str
    unit: Unit

    def __repr__(self) -> str:
        return f"Settings(api_key='***', unit={self.unit})"


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> dict:
    """Load and validate a TOML configuration file.

    Args:
        path: Path to the TOML config file.

    Returns:
        Nested dict of configuration values.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If the file is not valid TOML or a key has the wrong type.
    """
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            "Create it with an [openweather] section, or pass the API key "
            f"with --open-weather-api-key or ${API_KEY_ENV_VAR}."
        )

    with open(path, "rb") as f:
        try:
            config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {path}: {e}") from e

    _validate(config)
    return config


def _validate(config: dict) -> None:
    """Validate the optional [openweather] section.

    Expected config schema::

        [openweather]
        api_key = <str>   # OpenWeather API key
        unit    = <str>   # "imperial", "i", "metric" or "m"

    Both keys are optional; a missing key falls back to the other sources.

    Args:
        config: Parsed TOML config dict.

    Raises:
        ValueError: If the section or a key has the wrong type, or unit is
            not a recognised selector.
    """
    section = config.get("openweather")
    if section is None:
        return
    if not isinstance(section, dict):
        raise ValueError("Config entry [openweather] must be a table")

    for key in ("api_key", "unit"):
        if key in section and not isinstance(section[key], str):
            raise ValueError(f"Config key [openweather].{key} must be a string")

    if "unit" in section:
        parse_unit(section["unit"])


def resolve_settings(
    api_key: str | None = None,
    unit: Unit | None = None,
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Merge command-line values, the environment and the config file.

    Args:
        api_key: Key given on the command line, if any.
        unit: Unit given on the command line, if any.
        config_path: Explicit config file. When None, DEFAULT_CONFIG_PATH is
            read if it exists and silently skipped otherwise.
        environ: Environment mapping, os.environ by default.

    Returns:
        Settings with a non-empty api_key and a unit.

    Raises:
        FileNotFoundError: If config_path is given but does not exist.
        ValueError: If no API key is found anywhere, or the config file is
            invalid.
    """
    if environ is None:
        environ = os.environ

    if config_path is not None:
        file_section = load_config(config_path).get("openweather", {})
    elif DEFAULT_CONFIG_PATH.exists():
        file_section = load_config(DEFAULT_CONFIG_PATH).get("openweather", {})
    else:
        file_section = {}

    key = api_key or environ.get(API_KEY_ENV_VAR) or file_section.get("api_key")
    if not key:
        raise ValueError(
            "No OpenWeather API key found. Pass --open-weather-api-key, set "
            f"${API_KEY_ENV_VAR}, or add api_key to the [openweather] section "
            "of the config file."
        )

    if unit is None:
        unit = parse_unit(file_section["unit"]) if "unit" in file_section else DEFAULT_UNIT

    return Settings(api_key=key, unit=unit)
