"""JSON file sources.

Hobby files hold either a list of hobby objects or an object with a
``hobbies`` key. Forecast files hold a single forecast object:

```json
{
  "location_name": "Tokyo",
  "days": [
    {
      "date": "2025-06-14",
      "weather_type": "clear",
      "temperature": {"min_c": 18, "max_c": 24},
      "pop": 0.1
    }
  ]
}
```
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from hobby_forecast.models.hobby import Hobby
from hobby_forecast.models.weather import Forecast
from hobby_forecast.sources.base import (
    ForecastProvider,
    HobbyStore,
    SourceError,
    SourceFormatError,
    SourceNotFoundError,
)

logger = logging.getLogger(__name__)

_hobby_list = TypeAdapter(list[Hobby])


def _read_json(path: Path, source: str) -> Any:
    """Load a JSON document, translating failures into source errors."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise SourceNotFoundError(f"File not found: {path}", source=source) from e
    except UnicodeDecodeError as e:
        raise SourceFormatError(f"{path} is not valid UTF-8 text", source=source) from e
    except OSError as e:
        raise SourceError(f"Cannot read {path}: {e.strerror or e}", source=source) from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise SourceFormatError(f"Invalid JSON in {path}: {e}", source=source) from e


def _error_lines(error: ValidationError) -> list[str]:
    return [
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in error.errors()
    ]


class JsonHobbyStore(HobbyStore):
    """Hobbies read from a JSON file on every call."""

    name = "json"

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def list_hobbies(self) -> list[Hobby]:
        data = _read_json(self.path, self.name)
        if isinstance(data, dict):
            if "hobbies" not in data:
                raise SourceFormatError(
                    f"Expected a list of hobbies or a 'hobbies' key in {self.path}",
                    source=self.name,
                )
            data = data["hobbies"]

        try:
            hobbies = _hobby_list.validate_python(data)
        except ValidationError as e:
            raise SourceFormatError(
                f"Invalid hobby data in {self.path}",
                source=self.name,
                errors=_error_lines(e),
            ) from e

        logger.debug(f"Loaded {len(hobbies)} hobbies from {self.path}")
        return hobbies


class JsonForecastProvider(ForecastProvider):
    """Forecast read from a JSON file on every call."""

    name = "json"

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def get_forecast(self) -> Forecast:
        data = _read_json(self.path, self.name)

        try:
            forecast = Forecast.model_validate(data)
        except ValidationError as e:
            raise SourceFormatError(
                f"Invalid forecast data in {self.path}",
                source=self.name,
                errors=_error_lines(e),
            ) from e

        logger.debug(f"Loaded {len(forecast.days)} forecast days from {self.path}")
        return forecast
