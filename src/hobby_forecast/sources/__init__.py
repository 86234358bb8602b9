"""Read-only input sources for hobbies and forecasts."""

from hobby_forecast.sources.base import (
    ForecastProvider,
    HobbyStore,
    SourceError,
    SourceFormatError,
    SourceNotFoundError,
)
from hobby_forecast.sources.json_file import JsonForecastProvider, JsonHobbyStore

__all__ = [
    "ForecastProvider",
    "HobbyStore",
    "SourceError",
    "SourceFormatError",
    "SourceNotFoundError",
    "JsonForecastProvider",
    "JsonHobbyStore",
]
