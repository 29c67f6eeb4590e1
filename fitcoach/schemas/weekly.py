"""
Weekly dashboard schemas.

A reading is one row of tracked activity (as stored by the activity
source, oldest first).  The dashboard lays the readings out over a
Mon..Sun week and aggregates them into the engine's daily statistics.
"""

from __future__ import annotations

import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from fitcoach.schemas.recommendation import (
    CamelModel,
    DailyStats,
    FitnessGoal,
    Recommendation,
    coerce_goal,
)


class WorkoutReading(CamelModel):
    """One tracked activity row.  Missing metrics count as zero."""

    steps: Optional[int] = Field(None, description="Step count")
    hr: Optional[float] = Field(None, description="Average heart rate (bpm)")
    calories: Optional[float] = Field(None, description="Active energy (kcal)")
    sleep: Optional[int] = Field(None, description="Sleep duration (minutes)")
    created_at: Optional[datetime.datetime] = Field(
        None,
        description="When the reading was recorded; used for ordering",
    )


class DayPoint(CamelModel):
    """One slot of the weekly chart."""

    label: str
    steps: int = 0
    hr: float = 0.0
    calories: float = 0.0
    sleep: int = 0


class WeeklySummary(CamelModel):
    """Headline numbers for the dashboard cards."""

    avg_heart_rate: int
    total_steps: int
    avg_sleep_minutes: int
    avg_calories: int
    sleep_label: str = Field(..., description="Average sleep as 'Xh Ym'")


class WeeklyRequest(CamelModel):
    """Request body for the weekly dashboard."""

    readings: list[WorkoutReading] = Field(default_factory=list)
    goal: FitnessGoal = Field(FitnessGoal.GENERAL_HEALTH)

    @field_validator("goal", mode="before")
    @classmethod
    def resolve_goal(cls, value: Any) -> FitnessGoal:
        return coerce_goal(value)


class WeeklyDashboard(CamelModel):
    """Everything the dashboard renders for one week."""

    points: list[DayPoint]
    summary: WeeklySummary
    stats: DailyStats
    recommendation: Recommendation
