"""
Recommendation service.

Business logic behind the recommendation endpoints: weekly aggregation,
live preview, and single-shot recommendations.
"""

import logging
import random
from typing import Iterable, Optional

from fastapi import HTTPException, status

from fitcoach.coach.live_preview import preview_recommendation, sample_week
from fitcoach.coach.recommendations import (
    RecommendationConfig,
    generate_recommendations,
)
from fitcoach.coach.weekly_stats import build_week, summarize_week, to_daily_stats
from fitcoach.core.config import Settings, settings as default_settings
from fitcoach.schemas.preview import PreviewResponse
from fitcoach.schemas.recommendation import (
    DailyStats,
    FitnessGoal,
    Recommendation,
    UserGoals,
    coerce_goal,
)
from fitcoach.schemas.weekly import WeeklyDashboard, WorkoutReading

logger = logging.getLogger(__name__)


class RecommendationService:
    """Service for recommendation-related business logic."""

    def __init__(
        self,
        app_settings: Optional[Settings] = None,
        config: Optional[RecommendationConfig] = None,
    ):
        """
        Initialize service.

        Args:
            app_settings: Application settings (defaults to the global instance)
            config: Optional engine threshold override
        """
        self.settings = app_settings or default_settings
        self.config = config

    def recommend(self, stats: DailyStats, goals: UserGoals) -> Recommendation:
        """Recommendation for one set of daily statistics."""
        return generate_recommendations(stats, goals, self.config)

    def weekly(
        self,
        readings: Iterable[WorkoutReading],
        goal: FitnessGoal = FitnessGoal.GENERAL_HEALTH,
    ) -> WeeklyDashboard:
        """
        Build the weekly dashboard from activity readings.

        Args:
            readings: Activity rows of the user, any order
            goal: The user's goal

        Returns:
            Chart points, summary cards, derived daily stats and the
            recommendation for them
        """
        points = build_week(readings)
        summary = summarize_week(points)
        stats = to_daily_stats(summary, days=self.settings.STATS_WINDOW_DAYS)
        recommendation = self.recommend(stats, UserGoals(goal=goal))

        logger.info(
            "Weekly dashboard: %d steps total, goal=%s",
            summary.total_steps, goal.value,
        )
        return WeeklyDashboard(
            points=points,
            summary=summary,
            stats=stats,
            recommendation=recommendation,
        )

    def preview(
        self,
        ticks: int,
        seed: Optional[int] = None,
        goal: Optional[str] = None,
    ) -> PreviewResponse:
        """
        Simulate the landing page's live counters.

        Raises:
            HTTPException: If ``ticks`` is negative or above the configured limit
        """
        if ticks < 0 or ticks > self.settings.PREVIEW_MAX_TICKS:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"ticks must be between 0 and {self.settings.PREVIEW_MAX_TICKS}",
            )

        resolved = coerce_goal(goal or self.settings.DEFAULT_GOAL)
        live, stats, recommendation = preview_recommendation(ticks, seed, resolved)

        return PreviewResponse(
            ticks=ticks,
            seed=seed,
            live=live,
            stats=stats,
            sample_week=sample_week(random.Random(seed)),
            recommendation=recommendation,
        )
