"""High-score summaries for the notification layer.

Builds the data a notification needs ("3 hobbies score 80 or higher")
from ranked recommendations. Delivery, cooldowns and templates belong to
the notification layer itself.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Sequence

from pydantic import BaseModel, Field

from hobby_forecast.config import NotificationConfig
from hobby_forecast.models.recommendation import HobbyRecommendation, ScoreBand


class HighScoreEntry(BaseModel):
    """One hobby worth notifying about."""

    hobby_id: int | str
    hobby_name: str
    score: int = Field(..., ge=0, le=100)
    best_date: dt.date
    band: ScoreBand
    reasons: list[str] = Field(default_factory=list, description="Matching factors of the best day")


class HighScoreSummary(BaseModel):
    """Notification-ready summary of high-scoring hobbies."""

    should_notify: bool = Field(..., description="True if any hobby crossed the threshold")
    min_score: int = Field(..., description="Threshold that was applied")
    entries: list[HighScoreEntry] = Field(default_factory=list)
    title: str | None = None
    message: str | None = None
    reason: str | None = Field(default=None, description="Why no notification is due")

    @property
    def count(self) -> int:
        return len(self.entries)

    @property
    def top_score(self) -> int | None:
        return self.entries[0].score if self.entries else None


def summarize_high_scores(
    recommendations: Sequence[HobbyRecommendation],
    config: NotificationConfig | None = None,
) -> HighScoreSummary:
    """Pick the top hobbies scoring at or above the threshold.

    Args:
        recommendations: Ranked recommendations, best first
        config: Threshold and maximum number of hobbies

    Returns:
        HighScoreSummary; ``should_notify`` is False when nothing qualifies
    """
    config = config or NotificationConfig()

    qualifying = sorted(
        (r for r in recommendations if r.overall_score >= config.min_score),
        key=lambda r: (-r.overall_score, r.hobby.name, str(r.hobby.id)),
    )[: config.top_n]

    if not qualifying:
        return HighScoreSummary(
            should_notify=False,
            min_score=config.min_score,
            reason=f"No hobby scores {config.min_score} or higher",
        )

    entries = [
        HighScoreEntry(
            hobby_id=r.hobby.id,
            hobby_name=r.hobby.name,
            score=r.overall_score,
            best_date=r.best_day.date,
            band=r.band,
            reasons=list(r.best_day.matching_factors),
        )
        for r in qualifying
    ]

    top = entries[0]
    if len(entries) == 1:
        title = f"Great day for {top.hobby_name}!"
        message = f"{top.hobby_name} scores {top.score} on {top.best_date.isoformat()}."
    else:
        names = ", ".join(e.hobby_name for e in entries)
        title = f"{len(entries)} hobbies are a great fit!"
        message = (
            f"{names} score {config.min_score} or higher. Best score: {top.score}."
        )

    return HighScoreSummary(
        should_notify=True,
        min_score=config.min_score,
        entries=entries,
        title=title,
        message=message,
    )
