"""Recommendation routes.

Callers post the hobbies and forecast they hold; the service keeps no
state between requests.
"""

from __future__ import annotations

import datetime as dt

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from hobby_forecast.config import Settings, get_settings
from hobby_forecast.models.hobby import Hobby
from hobby_forecast.models.recommendation import HobbyRecommendation, RecommendationFilters
from hobby_forecast.models.weather import Forecast
from hobby_forecast.recommendations.notifications import (
    HighScoreSummary,
    summarize_high_scores,
)
from hobby_forecast.recommendations.pipeline import RecommendationEngine

router = APIRouter()


class RecommendationRequest(BaseModel):
    """Inputs for one engine invocation."""

    hobbies: list[Hobby] = Field(default_factory=list)
    forecast: Forecast
    filters: RecommendationFilters | None = None


def get_engine(settings: Settings = Depends(get_settings)) -> RecommendationEngine:
    """Build an engine from the configured scoring constants."""
    return RecommendationEngine(settings.scoring)


@router.post("", response_model=list[HobbyRecommendation])
async def recommend(
    request: RecommendationRequest,
    engine: RecommendationEngine = Depends(get_engine),
) -> list[HobbyRecommendation]:
    """Rank every eligible hobby, best first."""
    return engine.generate_recommendations(request.hobbies, request.forecast, request.filters)


@router.post("/top", response_model=list[HobbyRecommendation])
async def recommend_top(
    request: RecommendationRequest,
    limit: int = Query(default=5, ge=1, le=100),
    engine: RecommendationEngine = Depends(get_engine),
) -> list[HobbyRecommendation]:
    """Get the ``limit`` best hobbies."""
    return engine.top_recommendations(
        request.hobbies, request.forecast, limit=limit, filters=request.filters
    )


@router.post("/date/{target}", response_model=list[HobbyRecommendation])
async def recommend_for_date(
    target: dt.date,
    request: RecommendationRequest,
    engine: RecommendationEngine = Depends(get_engine),
) -> list[HobbyRecommendation]:
    """Rank hobbies on a single date."""
    return engine.recommendations_for_date(
        request.hobbies, request.forecast, target, filters=request.filters
    )


@router.post("/high-scores", response_model=HighScoreSummary)
async def high_scores(
    request: RecommendationRequest,
    engine: RecommendationEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> HighScoreSummary:
    """Summarize hobbies worth a high-score notification."""
    ranked = engine.generate_recommendations(request.hobbies, request.forecast, request.filters)
    return summarize_high_scores(ranked, settings.notifications)
