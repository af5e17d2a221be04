"""Shared fixtures for weathercli tests."""

import json

import pytest

from weathercli.config import API_KEY_ENV

# Current weather response for Paris, trimmed to the fields the CLI reads plus a few it ignores
PARIS_RESPONSE = {
    "coord": {"lon": 2.3488, "lat": 48.8534},
    "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}],
    "base": "stations",
    "main": {"temp": 3.2, "feels_like": -1.1, "pressure": 1011, "humidity": 81.0},
    "visibility": 10000,
    "wind": {"speed": 7.7, "deg": 10},
    "dt": 1700000000,
    "timezone": 3600,
    "id": 2988507,
    "name": "Paris",
    "cod": 200,
}


@pytest.fixture
def paris_response() -> dict:
    return json.loads(json.dumps(PARIS_RESPONSE))


@pytest.fixture(autouse=True)
def no_env_api_key(monkeypatch):
    """Keep a developer's real key out of the tests."""
    monkeypatch.delenv(API_KEY_ENV, raising=False)
