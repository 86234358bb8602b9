"""Hobby models holding per-hobby weather preferences."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hobby_forecast.models.weather import WeatherType


class TimeOfDay(str, Enum):
    """Qualitative day segments a hobby may prefer."""

    MORNING = "morning"  # 06:00-11:59
    DAY = "day"  # 12:00-17:59
    EVENING = "evening"  # 18:00-20:59
    NIGHT = "night"  # 21:00-05:59

    @property
    def hours(self) -> str:
        """Clock range covered by this segment."""
        return _SEGMENT_HOURS[self]


_SEGMENT_HOURS = {
    TimeOfDay.MORNING: "06:00-11:59",
    TimeOfDay.DAY: "12:00-17:59",
    TimeOfDay.EVENING: "18:00-20:59",
    TimeOfDay.NIGHT: "21:00-05:59",
}


class WeatherCondition(BaseModel):
    """How much a hobby likes one weather type."""

    model_config = ConfigDict(frozen=True)

    condition: WeatherType = Field(..., description="Weather type")
    weight: int = Field(..., ge=1, le=10, description="Preference weight (1-10)")


class Hobby(BaseModel):
    """A user-registered hobby and its weather preferences.

    Temperature bounds are inclusive and optional; ``None`` means the hobby
    is unbounded on that side. ``min_temperature > max_temperature`` is
    accepted here and treated as an always-failing fit when scoring.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: int | str = Field(..., description="Unique hobby identifier")
    name: str = Field(..., min_length=1, description="Display name")
    description: str | None = Field(default=None, description="Display description")

    preferred_weather: list[WeatherCondition] = Field(
        default_factory=list, description="Weather preferences, unique per condition"
    )
    preferred_time_of_day: list[TimeOfDay] = Field(
        default_factory=list, description="Preferred activity windows"
    )

    is_active: bool = Field(default=True, description="Eligible for recommendations")
    is_outdoor: bool = Field(default=False, description="Sensitive to rain and wind")

    min_temperature: float | None = Field(default=None, description="Minimum in Celsius")
    max_temperature: float | None = Field(default=None, description="Maximum in Celsius")

    @field_validator("preferred_weather")
    @classmethod
    def unique_conditions(cls, v: list[WeatherCondition]) -> list[WeatherCondition]:
        """Reject more than one preference for the same weather type."""
        seen: set[WeatherType] = set()
        for pref in v:
            if pref.condition in seen:
                raise ValueError(f"Duplicate weather preference: {pref.condition.value}")
            seen.add(pref.condition)
        return v

    @field_validator("preferred_time_of_day")
    @classmethod
    def dedupe_time_of_day(cls, v: list[TimeOfDay]) -> list[TimeOfDay]:
        """Collapse repeated windows while keeping their order."""
        return list(dict.fromkeys(v))

    def weight_for(self, weather_type: WeatherType) -> int | None:
        """Get the declared weight for a weather type, if any."""
        for pref in self.preferred_weather:
            if pref.condition == weather_type:
                return pref.weight
        return None

    @property
    def has_temperature_bounds(self) -> bool:
        """Check if either temperature bound is set."""
        return self.min_temperature is not None or self.max_temperature is not None

    @property
    def has_valid_temperature_bounds(self) -> bool:
        """Check that the bounds, when both set, are ordered."""
        if self.min_temperature is None or self.max_temperature is None:
            return True
        return self.min_temperature <= self.max_temperature
