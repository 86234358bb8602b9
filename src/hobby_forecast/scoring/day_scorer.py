"""Day scorer combining the weather, temperature and time-of-day evaluators."""

from __future__ import annotations

import math
from dataclasses import dataclass

from hobby_forecast.config import ScoringConfig
from hobby_forecast.models.hobby import Hobby
from hobby_forecast.models.recommendation import DayScore
from hobby_forecast.models.weather import ForecastDay
from hobby_forecast.scoring.factors import EvaluationResult, Factor
from hobby_forecast.scoring.temperature import evaluate_temperature
from hobby_forecast.scoring.time_of_day import evaluate_time_of_day
from hobby_forecast.scoring.weather import match_weather


def to_score(weighted_sum: float) -> int:
    """Convert a 0-1 weighted sum into a 0-100 integer score.

    Halves round up. The intermediate value is rounded first so float
    noise such as 92.49999999 still lands on 93.
    """
    score = math.floor(round(weighted_sum * 100, 6) + 0.5)
    return max(0, min(100, score))


@dataclass(frozen=True)
class DayEvaluation:
    """Structured breakdown of a day's score before factor rendering."""

    weather: EvaluationResult
    temperature: EvaluationResult
    time_of_day: EvaluationResult
    score: int

    @property
    def results(self) -> tuple[EvaluationResult, EvaluationResult, EvaluationResult]:
        """Evaluator results in fixed order."""
        return (self.weather, self.temperature, self.time_of_day)

    @property
    def matching(self) -> list[Factor]:
        return [f for r in self.results for f in r.matching]

    @property
    def warnings(self) -> list[Factor]:
        return [f for r in self.results for f in r.warnings]


class DayScorer:
    """Scores one hobby against one forecast day.

    Example:
        ```python
        scorer = DayScorer()
        day_score = scorer.score(hobby, forecast_day)
        print(day_score.score, day_score.matching_factors)
        ```
    """

    def __init__(self, config: ScoringConfig | None = None):
        """Initialize the scorer.

        Args:
            config: Scoring constants (defaults when omitted)
        """
        self.config = config or ScoringConfig()

    def evaluate(self, hobby: Hobby, day: ForecastDay) -> DayEvaluation:
        """Run every evaluator and combine their subscores.

        Args:
            hobby: Hobby to score
            day: Forecast day to score against

        Returns:
            DayEvaluation with structured factors and the final score
        """
        weather = match_weather(day, hobby, self.config)
        temperature = evaluate_temperature(day, hobby, self.config)
        time_of_day = evaluate_time_of_day(day, hobby, self.config)

        weighted_sum = (
            weather.subscore * self.config.weather_weight
            + temperature.subscore * self.config.temperature_weight
            + time_of_day.subscore * self.config.time_of_day_weight
        )

        return DayEvaluation(
            weather=weather,
            temperature=temperature,
            time_of_day=time_of_day,
            score=to_score(weighted_sum),
        )

    def score(self, hobby: Hobby, day: ForecastDay) -> DayScore:
        """Score a day and render its factors for display.

        Matching factors come first, then warnings, each in evaluator
        order. Identical phrases from different evaluators are kept.
        """
        evaluation = self.evaluate(hobby, day)
        return DayScore(
            date=day.date,
            score=evaluation.score,
            forecast=day,
            matching_factors=[f.describe() for f in evaluation.matching],
            warning_factors=[f.describe() for f in evaluation.warnings],
        )
