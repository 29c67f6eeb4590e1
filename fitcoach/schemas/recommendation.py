"""
Recommendation engine schemas.

Inputs are the user's recent daily statistics and stated fitness goal;
the output bundles workout suggestions, diet suggestions, a hydration
target, explanatory notes and a confidence score.

Numeric inputs carry no range validation on purpose: the engine accepts
any number and feeds it through its arithmetic unchanged.  The expected
domains are documented in the field descriptions only.

JSON payloads use camelCase (``avgHeartRate``, ``hydrationLiters``);
Python code uses the snake_case attribute names.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class FitnessGoal(str, enum.Enum):
    """Goal stated in the user profile."""

    LOSE_WEIGHT = "lose_weight"
    BUILD_MUSCLE = "build_muscle"
    IMPROVE_ENDURANCE = "improve_endurance"
    GENERAL_HEALTH = "general_health"


def coerce_goal(value: Any) -> FitnessGoal:
    """Resolve a raw goal value, falling back to general health.

    Missing and unrecognised values never fail; unrecognised ones are
    logged so a misspelt goal does not go unnoticed.
    """
    if isinstance(value, FitnessGoal):
        return value
    if value is None:
        return FitnessGoal.GENERAL_HEALTH
    try:
        return FitnessGoal(value)
    except ValueError:
        logger.warning(
            "Unknown fitness goal %r, falling back to %s",
            value, FitnessGoal.GENERAL_HEALTH.value,
        )
        return FitnessGoal.GENERAL_HEALTH


class CamelModel(BaseModel):
    """Immutable model serialised with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class DailyStats(CamelModel):
    """Aggregated activity and physiology for the measurement window."""

    steps: int = Field(
        ...,
        description="Step count (expected >= 0)",
    )
    avg_heart_rate: float = Field(
        ...,
        description="Average heart rate in bpm (physiologically 30-220)",
    )
    sleep_minutes: int = Field(
        ...,
        description="Minutes of sleep in the window (expected >= 0)",
    )
    calories: float = Field(
        ...,
        description="Active energy in kcal (expected >= 0)",
    )


class UserGoals(CamelModel):
    """Goal information from the user profile."""

    goal: FitnessGoal = Field(
        FitnessGoal.GENERAL_HEALTH,
        description="Fitness goal; unknown values resolve to general_health",
    )
    weekly_target_minutes: Optional[float] = Field(
        None,
        description="Weekly training target in minutes (not used by current rules)",
    )

    @field_validator("goal", mode="before")
    @classmethod
    def resolve_goal(cls, value: Any) -> FitnessGoal:
        return coerce_goal(value)


class Recommendation(CamelModel):
    """Complete engine output.  Built fresh on every call."""

    workouts: tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Workout suggestions in rule order (sleep, heart rate, steps, goal)",
    )
    diet: tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Diet suggestions from the goal rule",
    )
    hydration_liters: float = Field(
        ...,
        description="Daily water target in liters, one decimal (1.8-3.5 by default)",
    )
    reasoning: tuple[str, ...] = Field(
        default=(),
        description="Explanatory notes; may be empty",
    )
    confidence: float = Field(
        ...,
        description="Confidence in the recommendation (0.5-0.95 by default)",
    )


class RecommendationRequest(CamelModel):
    """Request body for a single recommendation."""

    stats: DailyStats
    goals: UserGoals = Field(default_factory=UserGoals)
