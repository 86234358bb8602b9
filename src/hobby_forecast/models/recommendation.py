"""Recommendation models produced by the scoring engine."""

from __future__ import annotations

import datetime as dt
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from hobby_forecast.models.hobby import Hobby
from hobby_forecast.models.weather import ForecastDay, WeatherType


class ScoreBand(str, Enum):
    """Display band for a 0-100 score."""

    EXCELLENT = "excellent"  # 80+
    GOOD = "good"  # 60-79
    FAIR = "fair"  # 40-59
    POOR = "poor"  # below 40

    @classmethod
    def from_score(cls, score: float) -> "ScoreBand":
        """Classify a score into its display band."""
        if score >= 80:
            return cls.EXCELLENT
        if score >= 60:
            return cls.GOOD
        if score >= 40:
            return cls.FAIR
        return cls.POOR


class DateRange(BaseModel):
    """Inclusive calendar date window."""

    model_config = ConfigDict(frozen=True)

    start: dt.date = Field(..., description="First date in the window")
    end: dt.date = Field(..., description="Last date in the window")

    def contains(self, target: dt.date) -> bool:
        """Check if a date lies within the window."""
        return self.start <= target <= self.end


class RecommendationFilters(BaseModel):
    """User-supplied constraints; every absent field means no constraint.

    A ``date_range`` with ``start > end`` and setting both weekday
    exclusions are valid and simply leave no eligible days.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    min_score: float | None = Field(
        default=None, description="Drop hobbies whose best score is below this"
    )
    date_range: DateRange | None = Field(default=None, description="Candidate day window")
    weather_types: list[WeatherType] | None = Field(
        default=None, description="Only these weather types can be recommended"
    )
    exclude_weekends: bool = Field(default=False, description="Skip Saturday and Sunday")
    exclude_weekdays: bool = Field(default=False, description="Skip Monday to Friday")

    def allows_day(self, day: ForecastDay) -> bool:
        """Check whether a forecast day survives the day-level filters."""
        if self.date_range is not None and not self.date_range.contains(day.date):
            return False
        if self.exclude_weekends and day.is_weekend:
            return False
        if self.exclude_weekdays and not day.is_weekend:
            return False
        if self.weather_types is not None and day.weather_type not in self.weather_types:
            return False
        return True


class DayScore(BaseModel):
    """Score and explanation for one hobby on one forecast day."""

    model_config = ConfigDict(frozen=True)

    date: dt.date = Field(..., description="Forecast date")
    score: int = Field(..., ge=0, le=100, description="Suitability score (0-100)")
    forecast: ForecastDay = Field(..., description="Forecast the score was computed from")
    matching_factors: list[str] = Field(
        default_factory=list, description="Conditions in favour of the day"
    )
    warning_factors: list[str] = Field(
        default_factory=list, description="Conditions against the day"
    )

    @property
    def band(self) -> ScoreBand:
        return ScoreBand.from_score(self.score)


class HobbyRecommendation(BaseModel):
    """Ranked day recommendations for a single hobby."""

    model_config = ConfigDict(frozen=True)

    hobby: Hobby = Field(..., description="Hobby being recommended")
    recommended_days: list[DayScore] = Field(
        ..., min_length=1, description="Eligible days, best first"
    )
    overall_score: int = Field(..., ge=0, le=100, description="Score of the best day")
    best_day_index: int = Field(default=0, ge=0, description="Index of the best day")

    @model_validator(mode="after")
    def check_best_day(self) -> "HobbyRecommendation":
        """Keep the best-day index inside the recommended days."""
        if self.best_day_index >= len(self.recommended_days):
            raise ValueError("best_day_index is out of range")
        return self

    @property
    def best_day(self) -> DayScore:
        """The recommended day at ``best_day_index``."""
        return self.recommended_days[self.best_day_index]

    @property
    def band(self) -> ScoreBand:
        return ScoreBand.from_score(self.overall_score)
