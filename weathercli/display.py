"""Text rendering of a weather reading."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from weathercli.config import Options
from weathercli.icons import icon_glyph
from weathercli.models import WeatherReading

SEPARATOR = "=" * 24

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_stamp(moment: datetime) -> str:
    """Format like ``Jan _2 15:04:05``: English month, space-padded day."""
    return f"{_MONTHS[moment.month - 1]} {moment.day:2d} {moment:%H:%M:%S}"


def local_time(offset_seconds: int, now: Optional[datetime] = None) -> datetime:
    """Current UTC instant shifted by the city's UTC offset."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc) + timedelta(seconds=offset_seconds)


def _condition(reading: WeatherReading) -> str:
    glyph = icon_glyph(reading.icon)
    return f"{glyph} {reading.conditions}" if glyph else reading.conditions


def render(reading: WeatherReading, options: Options, now: Optional[datetime] = None) -> str:
    """
    Render a reading as the one-line summary or, in verbose mode, the full report.

    Values are shown in the units they were requested in; nothing is converted.
    """
    temperature_symbol = options.units.temperature_symbol
    wind_speed_symbol = options.units.wind_speed_symbol

    if not options.verbose:
        return f"{reading.city_name}  {reading.temperature:.0f} °{temperature_symbol}  {_condition(reading)}"

    stamp = format_stamp(local_time(reading.timezone, now))
    lines = [
        f"{reading.city_name} {stamp}",
        SEPARATOR,
        f"condition: {_condition(reading)}",
        f"temperature: {reading.temperature:.0f} °{temperature_symbol}",
        f"pressure: {reading.pressure:.0f} hPa",
        f"humidity: {reading.humidity:.1f}%",
        f"wind: {reading.wind_degrees:.0f}° {reading.wind_speed:.1f} {wind_speed_symbol}",
    ]
    return "\n".join(lines)
