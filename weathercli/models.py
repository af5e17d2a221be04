"""Weather reading and the OpenWeather current-weather response schema."""

from dataclasses import dataclass
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, model_validator


@dataclass(frozen=True)
class WeatherReading:
    """Current conditions for one city, in the unit system that was requested."""

    city_name: str
    timezone: int  # offset from UTC, seconds
    visibility: float  # metres
    temperature: float
    pressure: float  # hPa
    humidity: float  # percent
    wind_speed: float
    wind_degrees: float
    conditions: str
    icon: str


class _Schema(BaseModel):
    # No silent str -> float coercion; unknown fields are ignored.
    model_config = ConfigDict(strict=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _null_is_zero(cls, data: Any) -> Any:
        # null decodes to the field default, like an absent field
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class ConditionBlock(_Schema):
    main: str = ""
    description: str = ""
    icon: str = ""


class MainBlock(_Schema):
    temp: float = 0.0
    pressure: float = 0.0
    humidity: float = 0.0


class WindBlock(_Schema):
    speed: float = 0.0
    deg: float = 0.0


class CurrentWeatherResponse(_Schema):
    """
    Subset of https://openweathermap.org/current that the CLI reads.

    Absent or null fields fall back to zero values.
    """

    weather: List[ConditionBlock] = Field(default_factory=list)
    main: MainBlock = Field(default_factory=MainBlock)
    wind: WindBlock = Field(default_factory=WindBlock)
    name: str = ""
    timezone: int = 0
    visibility: float = 0.0

    def to_reading(self) -> WeatherReading:
        # Only the first reported condition is shown
        condition = self.weather[0] if self.weather else ConditionBlock()
        return WeatherReading(
            city_name=self.name,
            timezone=self.timezone,
            visibility=self.visibility,
            temperature=self.main.temp,
            pressure=self.main.pressure,
            humidity=self.main.humidity,
            wind_speed=self.wind.speed,
            wind_degrees=self.wind.deg,
            conditions=condition.description,
            icon=condition.icon,
        )
