"""OpenWeather current-weather provider."""

from typing import Optional, Union
from urllib.parse import quote_plus

import httpx
from loguru import logger
from pydantic import ValidationError

from weathercli.config import Options
from weathercli.errors import DecodeError, NetworkError, ProtocolError
from weathercli.models import CurrentWeatherResponse, WeatherReading


# OpenWeather current weather endpoint
BASE_URL = "https://api.openweathermap.org/data/2.5/weather"


def build_request_url(city_name: str, units: str, api_key: str) -> str:
    """
    Build the current-weather query URL.

    Args:
        city_name: City to look up, as typed by the user.
        units: ``metric`` or ``imperial``.
        api_key: OpenWeather API key.

    Returns:
        URL with ``q``, ``units`` and ``appid`` query parameters.
    """
    return f"{BASE_URL}?q={quote_plus(city_name)}&units={units}&appid={quote_plus(api_key)}"


def _redact(url: str) -> str:
    base, sep, _ = url.partition("&appid=")
    return f"{base}{sep}***" if sep else url


def fetch_weather(url: str, *, transport: Optional[httpx.BaseTransport] = None) -> bytes:
    """
    Issue a single GET request and return the raw response body.

    Args:
        url: Query URL from build_request_url().
        transport: Optional httpx transport, mainly for tests.

    Raises:
        NetworkError: If no HTTP response was received.
        ProtocolError: If the response status is not 2xx.
    """
    logger.debug(f"GET {_redact(url)}")

    try:
        with httpx.Client(transport=transport) as client:
            response = client.get(url)
    except httpx.HTTPError as e:
        logger.error(f"Weather request failed: {e!r}")
        raise NetworkError(str(e) or e.__class__.__name__) from e

    if not response.is_success:
        logger.warning(f"Weather request returned {response.status_code}: {response.text[:200]}")
        raise ProtocolError(response.status_code, response.reason_phrase)

    return response.content


def decode_weather(body: Union[bytes, str]) -> WeatherReading:
    """
    Decode a current-weather JSON body into a WeatherReading.

    Raises:
        DecodeError: If the body is not valid JSON or violates the schema.
    """
    try:
        payload = CurrentWeatherResponse.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(str(e)) from e

    reading = payload.to_reading()
    logger.debug(f"Decoded weather for {reading.city_name!r}: {reading.conditions!r}, icon={reading.icon!r}")
    return reading


def get_weather(options: Options, *, transport: Optional[httpx.BaseTransport] = None) -> WeatherReading:
    """Fetch and decode the current weather for the configured city."""
    url = build_request_url(options.city_name, options.units.value, options.api_key)
    return decode_weather(fetch_weather(url, transport=transport))
