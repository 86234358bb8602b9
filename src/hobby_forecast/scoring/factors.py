"""Structured scoring factors and evaluator results.

Evaluators never build display strings themselves. They return an
``EvaluationResult`` holding a subscore and a list of ``Factor`` records;
the day scorer renders the factors into short phrases at the very end.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FactorKind(str, Enum):
    """Whether a factor speaks for or against a day."""

    MATCHING = "matching"
    WARNING = "warning"


class FactorCode(str, Enum):
    """Identifies what a factor is about."""

    FAVORABLE_WEATHER = "favorable_weather"
    UNFAVORABLE_WEATHER = "unfavorable_weather"
    UNLISTED_WEATHER = "unlisted_weather"
    HIGH_PRECIPITATION = "high_precipitation"
    COMFORTABLE_TEMPERATURE = "comfortable_temperature"
    TOO_COLD = "too_cold"
    TOO_HOT = "too_hot"
    INVALID_TEMPERATURE_RANGE = "invalid_temperature_range"
    SUGGESTED_TIME = "suggested_time"
    STRONG_WIND = "strong_wind"
    CALM_WIND = "calm_wind"
    HIGH_UV = "high_uv"


_TEMPLATES: dict[FactorCode, str] = {
    FactorCode.FAVORABLE_WEATHER: "Favorable weather: {condition} (weight {weight})",
    FactorCode.UNFAVORABLE_WEATHER: "Unfavorable weather: {condition} (weight {weight})",
    FactorCode.UNLISTED_WEATHER: "Not a preferred condition: {condition}",
    FactorCode.HIGH_PRECIPITATION: "High chance of rain: {pop_percent:.0f}%",
    FactorCode.COMFORTABLE_TEMPERATURE: "Comfortable temperature: {temperature_c:.1f}°C",
    FactorCode.TOO_COLD: "Too cold: {temperature_c:.1f}°C, {distance_c:.1f}°C below {bound_c:g}°C",
    FactorCode.TOO_HOT: "Too hot: {temperature_c:.1f}°C, {distance_c:.1f}°C above {bound_c:g}°C",
    FactorCode.INVALID_TEMPERATURE_RANGE: (
        "Invalid temperature range: minimum {min_c:g}°C is above maximum {max_c:g}°C"
    ),
    FactorCode.SUGGESTED_TIME: "Suggested time: {window} ({hours})",
    FactorCode.STRONG_WIND: "Strong wind: {wind_ms:.1f} m/s",
    FactorCode.CALM_WIND: "Calm wind: {wind_ms:.1f} m/s",
    FactorCode.HIGH_UV: "High UV index: {uv_index:g}",
}


@dataclass(frozen=True)
class Factor:
    """A single reason contributing to a day's score."""

    code: FactorCode
    kind: FactorKind
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def is_warning(self) -> bool:
        return self.kind == FactorKind.WARNING

    def describe(self) -> str:
        """Render this factor as a short human-readable phrase."""
        return _TEMPLATES[self.code].format(**self.details)


def matching(code: FactorCode, **details: Any) -> Factor:
    """Create a matching factor."""
    return Factor(code=code, kind=FactorKind.MATCHING, details=details)


def warning(code: FactorCode, **details: Any) -> Factor:
    """Create a warning factor."""
    return Factor(code=code, kind=FactorKind.WARNING, details=details)


@dataclass(frozen=True)
class EvaluationResult:
    """Output of one evaluator for one (hobby, day) pair."""

    subscore: float  # 0-1
    factors: tuple[Factor, ...] = ()

    @property
    def matching(self) -> list[Factor]:
        """Get matching factors in emission order."""
        return [f for f in self.factors if not f.is_warning]

    @property
    def warnings(self) -> list[Factor]:
        """Get warning factors in emission order."""
        return [f for f in self.factors if f.is_warning]

    @property
    def codes(self) -> list[FactorCode]:
        return [f.code for f in self.factors]
