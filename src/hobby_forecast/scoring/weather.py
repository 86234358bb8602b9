"""Weather matcher: how well a day's condition suits a hobby."""

from __future__ import annotations

from hobby_forecast.config import ScoringConfig
from hobby_forecast.models.hobby import Hobby
from hobby_forecast.models.weather import ForecastDay
from hobby_forecast.scoring.factors import (
    EvaluationResult,
    Factor,
    FactorCode,
    matching,
    warning,
)

NEUTRAL_SUBSCORE = 0.5
UNLISTED_WEIGHT = 1


def _exposure_factors(day: ForecastDay, hobby: Hobby, config: ScoringConfig) -> list[Factor]:
    """Wind and UV notes for outdoor hobbies. These never change the subscore."""
    if not hobby.is_outdoor:
        return []

    factors: list[Factor] = []
    wind = day.wind_speed_ms
    if wind is not None:
        if wind > config.strong_wind_ms:
            factors.append(warning(FactorCode.STRONG_WIND, wind_ms=wind))
        elif wind <= config.calm_wind_ms:
            factors.append(matching(FactorCode.CALM_WIND, wind_ms=wind))

    # 0 means not reported
    if day.uv_index > config.high_uv_index:
        factors.append(warning(FactorCode.HIGH_UV, uv_index=day.uv_index))

    return factors


def match_weather(
    day: ForecastDay,
    hobby: Hobby,
    config: ScoringConfig | None = None,
) -> EvaluationResult:
    """Score a day's weather type against a hobby's weather preferences.

    A hobby without preferences has no opinion and gets a neutral 0.5.
    Otherwise the declared weight (1-10) for the day's condition becomes
    the subscore ``weight / 10``; an undeclared condition counts as
    weight 1. Outdoor hobbies facing a high precipitation probability
    are penalised on top of that.

    Outdoor hobbies also get wind and UV factors. They explain the day
    but leave the subscore as it is.

    Args:
        day: Forecast day to evaluate
        hobby: Hobby with weather preferences
        config: Scoring constants (defaults when omitted)

    Returns:
        EvaluationResult with a subscore in [0, 1]
    """
    config = config or ScoringConfig()

    if not hobby.preferred_weather:
        return EvaluationResult(
            subscore=NEUTRAL_SUBSCORE,
            factors=tuple(_exposure_factors(day, hobby, config)),
        )

    factors: list[Factor] = []
    condition = day.weather_type.value
    declared = hobby.weight_for(day.weather_type)

    if declared is None:
        weight = UNLISTED_WEIGHT
        factors.append(warning(FactorCode.UNLISTED_WEATHER, condition=condition))
    else:
        weight = declared
        if weight >= config.favorable_weight:
            factors.append(
                matching(FactorCode.FAVORABLE_WEATHER, condition=condition, weight=weight)
            )
        elif weight <= config.unfavorable_weight:
            factors.append(
                warning(FactorCode.UNFAVORABLE_WEATHER, condition=condition, weight=weight)
            )

    subscore = weight / 10

    if hobby.is_outdoor and day.pop >= config.high_pop_threshold:
        factors.append(warning(FactorCode.HIGH_PRECIPITATION, pop_percent=day.pop * 100))
        subscore *= config.high_pop_penalty

    factors.extend(_exposure_factors(day, hobby, config))
    return EvaluationResult(subscore=subscore, factors=tuple(factors))
