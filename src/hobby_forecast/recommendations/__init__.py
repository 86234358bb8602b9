"""Aggregation, ranking and summaries of hobby recommendations."""

from hobby_forecast.recommendations.aggregator import (
    RecommendationAggregator,
    sort_days,
)
from hobby_forecast.recommendations.pipeline import (
    RecommendationEngine,
    generate_recommendations,
    rank_recommendations,
)
from hobby_forecast.recommendations.notifications import (
    HighScoreEntry,
    HighScoreSummary,
    summarize_high_scores,
)

__all__ = [
    "RecommendationAggregator",
    "sort_days",
    "RecommendationEngine",
    "generate_recommendations",
    "rank_recommendations",
    "HighScoreEntry",
    "HighScoreSummary",
    "summarize_high_scores",
]
