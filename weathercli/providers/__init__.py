"""Weather data providers."""

from weathercli.providers.openweather import (
    BASE_URL,
    build_request_url,
    decode_weather,
    fetch_weather,
    get_weather,
)

__all__ = ["BASE_URL", "build_request_url", "decode_weather", "fetch_weather", "get_weather"]
