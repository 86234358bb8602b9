"""Temperature fit evaluator."""

from __future__ import annotations

import math

from hobby_forecast.config import ScoringConfig
from hobby_forecast.models.hobby import Hobby
from hobby_forecast.models.weather import ForecastDay
from hobby_forecast.scoring.factors import EvaluationResult, FactorCode, matching, warning

NEUTRAL_SUBSCORE = 0.5


def evaluate_temperature(
    day: ForecastDay,
    hobby: Hobby,
    config: ScoringConfig | None = None,
) -> EvaluationResult:
    """Score the day's midpoint temperature against the hobby's bounds.

    Inside the bounds scores 1.0. Outside, the subscore decays linearly
    with the distance to the nearest bound and reaches 0 after
    ``config.temperature_decay_c`` degrees. Bounds with min above max
    never fit.

    Args:
        day: Forecast day to evaluate
        hobby: Hobby with optional temperature bounds
        config: Scoring constants (defaults when omitted)

    Returns:
        EvaluationResult with a subscore in [0, 1]
    """
    config = config or ScoringConfig()

    if not hobby.has_temperature_bounds:
        return EvaluationResult(subscore=NEUTRAL_SUBSCORE)

    if not hobby.has_valid_temperature_bounds:
        return EvaluationResult(
            subscore=0.0,
            factors=(
                warning(
                    FactorCode.INVALID_TEMPERATURE_RANGE,
                    min_c=hobby.min_temperature,
                    max_c=hobby.max_temperature,
                ),
            ),
        )

    temp_c = day.temperature.midpoint_c
    low = hobby.min_temperature if hobby.min_temperature is not None else -math.inf
    high = hobby.max_temperature if hobby.max_temperature is not None else math.inf

    if low <= temp_c <= high:
        return EvaluationResult(
            subscore=1.0,
            factors=(matching(FactorCode.COMFORTABLE_TEMPERATURE, temperature_c=temp_c),),
        )

    if temp_c < low:
        distance = low - temp_c
        factor = warning(
            FactorCode.TOO_COLD, temperature_c=temp_c, distance_c=distance, bound_c=low
        )
    else:
        distance = temp_c - high
        factor = warning(
            FactorCode.TOO_HOT, temperature_c=temp_c, distance_c=distance, bound_c=high
        )

    subscore = max(0.0, 1.0 - distance / config.temperature_decay_c)
    return EvaluationResult(subscore=subscore, factors=(factor,))
