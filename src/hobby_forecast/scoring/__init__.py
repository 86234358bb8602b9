"""Per-day scoring of hobbies against forecast conditions."""

from hobby_forecast.scoring.factors import (
    EvaluationResult,
    Factor,
    FactorCode,
    FactorKind,
)
from hobby_forecast.scoring.weather import match_weather
from hobby_forecast.scoring.temperature import evaluate_temperature
from hobby_forecast.scoring.time_of_day import evaluate_time_of_day
from hobby_forecast.scoring.day_scorer import DayEvaluation, DayScorer, to_score

__all__ = [
    "EvaluationResult",
    "Factor",
    "FactorCode",
    "FactorKind",
    "match_weather",
    "evaluate_temperature",
    "evaluate_time_of_day",
    "DayEvaluation",
    "DayScorer",
    "to_score",
]
