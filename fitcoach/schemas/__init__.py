"""Pydantic schemas for request/response validation."""

from fitcoach.schemas.recommendation import (
    DailyStats,
    FitnessGoal,
    Recommendation,
    RecommendationRequest,
    UserGoals,
)
from fitcoach.schemas.weekly import (
    DayPoint,
    WeeklyDashboard,
    WeeklyRequest,
    WeeklySummary,
    WorkoutReading,
)
from fitcoach.schemas.preview import LiveStats, PreviewResponse, WeeklyStepSample

__all__ = [
    "DailyStats",
    "FitnessGoal",
    "Recommendation",
    "RecommendationRequest",
    "UserGoals",
    "DayPoint",
    "WeeklyDashboard",
    "WeeklyRequest",
    "WeeklySummary",
    "WorkoutReading",
    "LiveStats",
    "PreviewResponse",
    "WeeklyStepSample",
]
