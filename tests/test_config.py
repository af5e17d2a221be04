"""Tests for option assembly and validation."""

import pytest
import typer

from weathercli.config import Options, Units, build_options, validate_units
from weathercli.errors import ConfigError


def test_defaults_to_metric():
    options = build_options("key", ["Paris"])
    assert options == Options(api_key="key", city_name="Paris", units=Units.METRIC, verbose=False)


def test_city_words_joined_with_single_spaces():
    options = build_options("key", ("Rio", "de", "Janeiro"), units="imperial", verbose=True)
    assert options.city_name == "Rio de Janeiro"
    assert options.units is Units.IMPERIAL
    assert options.verbose


@pytest.mark.parametrize("api_key", [None, ""])
def test_missing_api_key(api_key):
    with pytest.raises(ConfigError, match="api key is required"):
        build_options(api_key, ["Paris"])


@pytest.mark.parametrize("words", [None, [], ["   "], ["", "\t"]])
def test_blank_city(words):
    with pytest.raises(ConfigError, match="city name is required"):
        build_options("key", words)


def test_missing_key_reported_before_blank_city():
    with pytest.raises(ConfigError, match="api key"):
        build_options(None, None)


@pytest.mark.parametrize("value", ["kelvin", "Metric", "", "imperial "])
def test_validate_units_rejects_other_values(value):
    with pytest.raises(ConfigError, match="unit must be 'metric' or 'imperial'"):
        validate_units(value)


def test_unit_symbols():
    assert (Units.METRIC.temperature_symbol, Units.METRIC.wind_speed_symbol) == ("C", "m/s")
    assert (Units.IMPERIAL.temperature_symbol, Units.IMPERIAL.wind_speed_symbol) == ("F", "mi/h")


def test_config_error_is_a_typer_usage_error():
    """Configuration errors exit with the usage code through typer."""
    error = ConfigError("city name is required")
    assert isinstance(error, typer.BadParameter)
    assert error.exit_code == 2
    assert error.message == "city name is required"
