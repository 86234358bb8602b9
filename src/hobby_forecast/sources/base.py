"""Input sources for the recommendation engine.

The engine itself performs no I/O. Hobbies come from a ``HobbyStore`` and
the forecast from a ``ForecastProvider``; both are read-only from the
engine's point of view.

## Implementations

- ``JsonHobbyStore`` / ``JsonForecastProvider``: local JSON files, used by
  the command-line interface
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from hobby_forecast.models.hobby import Hobby
from hobby_forecast.models.weather import Forecast


class SourceError(Exception):
    """Base exception for input source errors."""

    def __init__(self, message: str, source: str):
        super().__init__(message)
        self.source = source


class SourceNotFoundError(SourceError):
    """Raised when the underlying data does not exist."""

    pass


class SourceFormatError(SourceError):
    """Raised when the data cannot be parsed into domain models."""

    def __init__(self, message: str, source: str, errors: list[str] | None = None):
        super().__init__(message, source)
        self.errors = errors or []


class HobbyStore(ABC):
    """Read access to registered hobbies."""

    name: str = "base"

    @abstractmethod
    def list_hobbies(self) -> list[Hobby]:
        """Get every stored hobby, active or not."""
        pass

    def list_active_hobbies(self) -> list[Hobby]:
        """Get hobbies currently flagged active."""
        return [h for h in self.list_hobbies() if h.is_active]


class ForecastProvider(ABC):
    """Supplies a multi-day forecast already resolved to local dates."""

    name: str = "base"

    @abstractmethod
    def get_forecast(self) -> Forecast:
        """Get the current forecast."""
        pass
