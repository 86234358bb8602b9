"""Time-of-day evaluator.

Forecasts are day-granular, so this evaluator is advisory only: it never
rejects a day and never warns.
"""

from __future__ import annotations

from hobby_forecast.config import ScoringConfig
from hobby_forecast.models.hobby import Hobby, TimeOfDay
from hobby_forecast.models.weather import ForecastDay
from hobby_forecast.scoring.factors import EvaluationResult, FactorCode, matching

NEUTRAL_SUBSCORE = 0.5
PREFERENCE_SUBSCORE = 1.0


def _conflicts(day: ForecastDay, hobby: Hobby, window: TimeOfDay) -> bool:
    """Check if the window's reported temperature falls outside the bounds."""
    segment_c = day.temperature.segment_c(window.value)
    if segment_c is None or not hobby.has_valid_temperature_bounds:
        return False
    if hobby.min_temperature is not None and segment_c < hobby.min_temperature:
        return True
    if hobby.max_temperature is not None and segment_c > hobby.max_temperature:
        return True
    return False


def evaluate_time_of_day(
    day: ForecastDay,
    hobby: Hobby,
    config: ScoringConfig | None = None,
) -> EvaluationResult:
    """Score alignment between preferred windows and the forecast day.

    Any declared preference scores 1.0, none scores 0.5. A hobby with a
    single preferred window gets a note suggesting it, unless the
    forecast reports a temperature for that window outside the hobby's
    bounds.
    """
    if not hobby.preferred_time_of_day:
        return EvaluationResult(subscore=NEUTRAL_SUBSCORE)

    if len(hobby.preferred_time_of_day) == 1:
        window = hobby.preferred_time_of_day[0]
        if not _conflicts(day, hobby, window):
            return EvaluationResult(
                subscore=PREFERENCE_SUBSCORE,
                factors=(
                    matching(FactorCode.SUGGESTED_TIME, window=window.value, hours=window.hours),
                ),
            )

    return EvaluationResult(subscore=PREFERENCE_SUBSCORE)
