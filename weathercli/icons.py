"""Display glyphs for OpenWeather icon codes."""

# https://openweathermap.org/weather-conditions#Icon-list
ICON_GLYPHS: dict[str, str] = {
    # clear sky
    "01d": "☀️",
    "01n": "🌙",
    # few clouds
    "02d": "⛅",
    "02n": "☁️",
    # scattered clouds
    "03d": "☁️",
    "03n": "☁️",
    # broken clouds
    "04d": "☁️",
    "04n": "☁️",
    # shower rain
    "09d": "🌧️",
    "09n": "🌧️",
    # rain
    "10d": "🌦️",
    "10n": "🌧️",
    "11d": "⛈️",
    "11n": "⛈️",
    "13d": "❄️",
    "13n": "❄️",
    # mist
    "50d": "🌫️",
    "50n": "🌫️",
}


def icon_glyph(code: str) -> str:
    """Return the glyph for an icon code, or an empty string if it is not known."""
    return ICON_GLYPHS.get(code, "")
