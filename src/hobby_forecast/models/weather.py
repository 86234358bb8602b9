"""Daily forecast models supplied by a forecast provider."""

from __future__ import annotations

import datetime as dt
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class WeatherType(str, Enum):
    """Categorical weather condition for a forecast day."""

    CLEAR = "clear"
    CLOUDS = "clouds"
    RAIN = "rain"
    DRIZZLE = "drizzle"
    THUNDERSTORM = "thunderstorm"
    SNOW = "snow"
    MIST = "mist"
    FOG = "fog"
    HAZE = "haze"
    DUST = "dust"


class DailyTemperature(BaseModel):
    """Temperature range for one day, with optional day-segment values."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    min_c: float = Field(..., description="Daily minimum temperature in Celsius")
    max_c: float = Field(..., description="Daily maximum temperature in Celsius")

    # Segment temperatures, when the provider reports them
    morning_c: float | None = Field(default=None, description="Morning temperature")
    day_c: float | None = Field(default=None, description="Daytime temperature")
    evening_c: float | None = Field(default=None, description="Evening temperature")
    night_c: float | None = Field(default=None, description="Night temperature")

    @property
    def midpoint_c(self) -> float:
        """Representative temperature for the whole day."""
        return (self.min_c + self.max_c) / 2

    def segment_c(self, segment: str) -> float | None:
        """Get the reported temperature for a day segment, if any."""
        return getattr(self, f"{segment}_c", None)


class ForecastDay(BaseModel):
    """Weather forecast for a single calendar day."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    date: dt.date = Field(..., description="Local calendar date")
    weather_type: WeatherType = Field(..., description="Dominant weather condition")
    weather_description: str = Field(default="", description="Free-text condition label")
    temperature: DailyTemperature = Field(..., description="Temperature range")

    pop: float = Field(
        default=0.0, ge=0, le=1, description="Probability of precipitation (0-1)"
    )
    humidity: float = Field(default=0.0, ge=0, le=100, description="Relative humidity (%)")
    wind_speed_ms: float | None = Field(
        default=None, ge=0, description="Wind speed in m/s (None when not reported)"
    )
    uv_index: float = Field(
        default=0.0, ge=0, description="UV index (0 when not reported)"
    )

    @property
    def is_weekend(self) -> bool:
        """Saturday or Sunday."""
        return self.date.weekday() >= 5


class Forecast(BaseModel):
    """Multi-day forecast for one location."""

    model_config = ConfigDict(frozen=True)

    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    location_name: str | None = Field(default=None, description="Display name of the location")
    generated_at: dt.datetime | None = Field(
        default=None, description="When the provider generated this forecast"
    )
    days: list[ForecastDay] = Field(
        default_factory=list, description="Daily forecasts in date order"
    )

    def get_day(self, target: dt.date) -> ForecastDay | None:
        """Get the forecast for a specific date."""
        for day in self.days:
            if day.date == target:
                return day
        return None
