"""Domain models for hobby forecast recommendations."""

from hobby_forecast.models.weather import (
    WeatherType,
    DailyTemperature,
    ForecastDay,
    Forecast,
)
from hobby_forecast.models.hobby import (
    Hobby,
    TimeOfDay,
    WeatherCondition,
)
from hobby_forecast.models.recommendation import (
    DateRange,
    DayScore,
    HobbyRecommendation,
    RecommendationFilters,
    ScoreBand,
)

__all__ = [
    # Weather
    "WeatherType",
    "DailyTemperature",
    "ForecastDay",
    "Forecast",
    # Hobby
    "Hobby",
    "TimeOfDay",
    "WeatherCondition",
    # Recommendation
    "DateRange",
    "DayScore",
    "HobbyRecommendation",
    "RecommendationFilters",
    "ScoreBand",
]
