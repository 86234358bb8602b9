"""Filter and rank pipeline producing the final recommendation list.

The engine is a pure function of its arguments:

```python
engine = RecommendationEngine()
ranked = engine.generate_recommendations(hobbies, forecast, filters)
```

Nothing is cached between calls and no input is modified, so the same
engine can serve a UI refresh and a background notification check at the
same time.
"""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Iterable

from hobby_forecast.config import ScoringConfig
from hobby_forecast.models.hobby import Hobby
from hobby_forecast.models.recommendation import (
    DateRange,
    HobbyRecommendation,
    RecommendationFilters,
)
from hobby_forecast.models.weather import Forecast
from hobby_forecast.recommendations.aggregator import RecommendationAggregator

logger = logging.getLogger(__name__)


def rank_recommendations(
    recommendations: Iterable[HobbyRecommendation],
    min_score: float | None = None,
) -> list[HobbyRecommendation]:
    """Apply the minimum score and order hobbies best first.

    Ties are broken by hobby name, then by id, so identical inputs always
    produce the same order. No truncation is applied.
    """
    kept = [
        r for r in recommendations if min_score is None or r.overall_score >= min_score
    ]
    return sorted(kept, key=lambda r: (-r.overall_score, r.hobby.name, str(r.hobby.id)))


class RecommendationEngine:
    """Turns hobbies and a forecast into ranked hobby recommendations."""

    def __init__(self, config: ScoringConfig | None = None):
        """Initialize the engine.

        Args:
            config: Scoring constants (defaults when omitted)
        """
        self.config = config or ScoringConfig()
        self.aggregator = RecommendationAggregator(config=self.config)

    def generate_recommendations(
        self,
        hobbies: Iterable[Hobby],
        forecast: Forecast,
        filters: RecommendationFilters | None = None,
    ) -> list[HobbyRecommendation]:
        """Generate the ranked recommendation list.

        Args:
            hobbies: Hobbies to consider (inactive ones are skipped)
            forecast: Multi-day forecast for one location
            filters: Optional user filters

        Returns:
            Recommendations ordered by overall score, best first
        """
        filters = filters or RecommendationFilters()
        aggregated = self.aggregator.aggregate_all(hobbies, forecast.days, filters)
        ranked = rank_recommendations(aggregated, filters.min_score)

        logger.debug(
            f"Generated {len(ranked)} recommendations "
            f"({len(aggregated) - len(ranked)} below minimum score)"
        )
        return ranked

    def top_recommendations(
        self,
        hobbies: Iterable[Hobby],
        forecast: Forecast,
        limit: int = 5,
        filters: RecommendationFilters | None = None,
    ) -> list[HobbyRecommendation]:
        """Get the ``limit`` best recommendations."""
        if limit <= 0:
            return []
        return self.generate_recommendations(hobbies, forecast, filters)[:limit]

    def recommendations_for_date(
        self,
        hobbies: Iterable[Hobby],
        forecast: Forecast,
        target: dt.date,
        filters: RecommendationFilters | None = None,
    ) -> list[HobbyRecommendation]:
        """Get recommendations restricted to a single date.

        Each hobby keeps only its score for ``target`` and is ranked by it.
        A ``target`` outside an existing date range yields no results.
        """
        filters = filters or RecommendationFilters()
        if filters.date_range is not None and not filters.date_range.contains(target):
            return []

        single_day = filters.model_copy(
            update={"date_range": DateRange(start=target, end=target)}
        )
        return self.generate_recommendations(hobbies, forecast, single_day)


def generate_recommendations(
    hobbies: Iterable[Hobby],
    forecast: Forecast,
    filters: RecommendationFilters | None = None,
    config: ScoringConfig | None = None,
) -> list[HobbyRecommendation]:
    """Convenience function to generate recommendations.

    Args:
        hobbies: Hobbies to consider
        forecast: Multi-day forecast
        filters: Optional user filters
        config: Scoring constants

    Returns:
        Ranked recommendations, best first
    """
    engine = RecommendationEngine(config)
    return engine.generate_recommendations(hobbies, forecast, filters)
