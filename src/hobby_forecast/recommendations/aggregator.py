"""Recommendation aggregator: best days for each hobby."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from hobby_forecast.config import ScoringConfig
from hobby_forecast.models.hobby import Hobby
from hobby_forecast.models.recommendation import (
    DayScore,
    HobbyRecommendation,
    RecommendationFilters,
)
from hobby_forecast.models.weather import ForecastDay
from hobby_forecast.scoring.day_scorer import DayScorer

logger = logging.getLogger(__name__)

NO_FILTERS = RecommendationFilters()


def sort_days(days: Iterable[DayScore]) -> list[DayScore]:
    """Order day scores best first, earliest date winning ties."""
    return sorted(days, key=lambda d: (-d.score, d.date))


class RecommendationAggregator:
    """Builds one ``HobbyRecommendation`` per hobby from a forecast.

    Days are filtered out, not down-scored: a day outside the date range,
    excluded by the weekday rules or not in the weather-type allow-list
    never appears in ``recommended_days``, however well it scores.
    """

    def __init__(self, scorer: DayScorer | None = None, config: ScoringConfig | None = None):
        """Initialize the aggregator.

        Args:
            scorer: DayScorer to use (built from ``config`` when omitted)
            config: Scoring constants for a new scorer
        """
        self.scorer = scorer or DayScorer(config)

    def aggregate(
        self,
        hobby: Hobby,
        days: Sequence[ForecastDay],
        filters: RecommendationFilters | None = None,
    ) -> HobbyRecommendation | None:
        """Score every forecast day for a hobby and pick the best.

        Args:
            hobby: Hobby to recommend days for
            days: Forecast days to consider
            filters: Day-level filters (date range, weekdays, weather types)

        Returns:
            HobbyRecommendation, or None when the hobby is inactive or no
            eligible day remains
        """
        filters = filters or NO_FILTERS

        if not hobby.is_active:
            logger.debug(f"Skipping inactive hobby {hobby.id!r}")
            return None

        scored = [self.scorer.score(hobby, day) for day in days]
        eligible = sort_days(s for s in scored if filters.allows_day(s.forecast))

        if not eligible:
            logger.debug(f"No eligible days for hobby {hobby.id!r} ({len(scored)} scored)")
            return None

        logger.debug(
            f"Hobby {hobby.id!r}: {len(eligible)}/{len(scored)} days eligible, "
            f"best {eligible[0].date} scored {eligible[0].score}"
        )

        return HobbyRecommendation(
            hobby=hobby,
            recommended_days=eligible,
            overall_score=eligible[0].score,
            best_day_index=0,
        )

    def aggregate_all(
        self,
        hobbies: Iterable[Hobby],
        days: Sequence[ForecastDay],
        filters: RecommendationFilters | None = None,
    ) -> list[HobbyRecommendation]:
        """Aggregate every hobby, dropping those without a recommendation.

        A hobby whose scoring fails is logged and dropped so that one bad
        record cannot abort the others.
        """
        recommendations: list[HobbyRecommendation] = []

        for hobby in hobbies:
            try:
                recommendation = self.aggregate(hobby, days, filters)
            except (ValueError, ArithmeticError) as e:
                logger.warning(f"Dropping hobby {hobby.id!r} after scoring error: {e}")
                continue
            if recommendation is not None:
                recommendations.append(recommendation)

        return recommendations
