"""Application configuration.

Configuration is loaded from environment variables using pydantic-settings.
Nested scoring and notification values use a double underscore delimiter.

## Optional Environment Variables

- DEBUG: Enable debug mode and the interactive API docs (default: false)
- LOG_LEVEL: Root log level (default: INFO)
- SCORING__WEATHER_WEIGHT: Weight of the weather term (default: 0.5)
- SCORING__HIGH_POP_PENALTY: Multiplier for outdoor hobbies on wet days (default: 0.7)
- NOTIFICATIONS__MIN_SCORE: Score that counts as a high score (default: 80)

## Example .env file

```
DEBUG=true
LOG_LEVEL=DEBUG
SCORING__TEMPERATURE_DECAY_C=8
NOTIFICATIONS__TOP_N=5
```
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringConfig(BaseModel):
    """Tunable constants for the day scorer.

    Passed explicitly into every engine invocation; the engine never reads
    settings on its own.
    """

    weather_weight: float = Field(default=0.5, ge=0, le=1)
    temperature_weight: float = Field(default=0.35, ge=0, le=1)
    time_of_day_weight: float = Field(default=0.15, ge=0, le=1)

    # Outdoor hobbies on wet days
    high_pop_threshold: float = Field(
        default=0.5, ge=0, le=1, description="Precipitation probability that triggers the penalty"
    )
    high_pop_penalty: float = Field(
        default=0.7, ge=0, le=1, description="Multiplier applied to the weather subscore"
    )

    # Temperature decay
    temperature_decay_c: float = Field(
        default=10.0, gt=0, description="Distance in °C over which the fit decays to zero"
    )

    # Factor thresholds on the 1-10 preference weight
    favorable_weight: int = Field(default=7, ge=1, le=10)
    unfavorable_weight: int = Field(default=3, ge=1, le=10)

    # Exposure thresholds for outdoor hobbies; these add factors only
    strong_wind_ms: float = Field(default=8.0, ge=0, description="Wind above this warns")
    calm_wind_ms: float = Field(default=3.0, ge=0, description="Wind at or below this is calm")
    high_uv_index: float = Field(default=7.0, ge=0, description="UV index above this warns")

    @model_validator(mode="after")
    def check_consistency(self) -> "ScoringConfig":
        """Ensure weights sum to 1.0 and thresholds are ordered."""
        total = self.weather_weight + self.temperature_weight + self.time_of_day_weight
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"Scoring weights must sum to 1.0, got {total}")
        if self.unfavorable_weight >= self.favorable_weight:
            raise ValueError(
                f"unfavorable_weight ({self.unfavorable_weight}) must be below "
                f"favorable_weight ({self.favorable_weight})"
            )
        if self.calm_wind_ms >= self.strong_wind_ms:
            raise ValueError(
                f"calm_wind_ms ({self.calm_wind_ms}) must be below "
                f"strong_wind_ms ({self.strong_wind_ms})"
            )
        return self


class NotificationConfig(BaseModel):
    """Thresholds for deriving high-score notification data."""

    min_score: int = Field(default=80, ge=0, le=100)
    top_n: int = Field(default=3, ge=1)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Hobby Forecast"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
    allowed_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="CORS allowed origins",
    )

    # Engine
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    notifications: NotificationConfig = Field(default_factory=NotificationConfig)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()


def get_settings_uncached() -> Settings:
    """Get fresh settings without caching.

    Useful for testing when environment variables change.
    """
    return Settings()
