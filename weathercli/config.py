"""Command-line options and their validation."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from weathercli.errors import ConfigError

# Environment variable holding the default OpenWeather API key
API_KEY_ENV = "OPENWEATHER_API_KEY"


class Units(str, Enum):
    """Unit system requested from the provider."""

    METRIC = "metric"
    IMPERIAL = "imperial"

    @property
    def temperature_symbol(self) -> str:
        return "F" if self is Units.IMPERIAL else "C"

    @property
    def wind_speed_symbol(self) -> str:
        return "mi/h" if self is Units.IMPERIAL else "m/s"


DEFAULT_UNITS = Units.METRIC


@dataclass(frozen=True)
class Options:
    """Validated options for a single invocation."""

    api_key: str
    city_name: str
    units: Units = DEFAULT_UNITS
    verbose: bool = False


def validate_units(value: str) -> str:
    """Accept only the literal unit system names."""
    if value not in (Units.METRIC.value, Units.IMPERIAL.value):
        raise ConfigError("unit must be 'metric' or 'imperial'")
    return value


def build_options(
    api_key: Optional[str],
    city_words: Optional[Sequence[str]],
    units: str = DEFAULT_UNITS.value,
    verbose: bool = False,
) -> Options:
    """
    Assemble and validate the invocation options.

    Args:
        api_key: Key from ``-key`` or the environment (flag wins).
        city_words: Positional arguments, joined with single spaces.
        units: Unit system name.
        verbose: Whether the multi-line report was requested.

    Raises:
        ConfigError: If the key is missing, the city is blank or the units are unknown.
    """
    city_name = " ".join(city_words or ())

    if not api_key:
        raise ConfigError("openweather api key is required")

    if not city_name.strip():
        raise ConfigError("city name is required")

    return Options(
        api_key=api_key,
        city_name=city_name,
        units=Units(validate_units(units)),
        verbose=verbose,
    )
