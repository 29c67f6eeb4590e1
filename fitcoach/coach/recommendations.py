"""
Rule-based recommendation engine.

Maps a user's recent daily statistics and stated goal to workout and
diet suggestions, a hydration target and a confidence score.

Model
-----
Four rules run in a fixed order over a shared draft.  Each rule is a
pure function ``(stats, goals, draft, config) -> draft`` that may add
workouts, diet lines, reasoning notes or adjust the running confidence:

    1. sleep       one recovery or moderate session, -0.05 when short
    2. heart rate  breathing + mobility when average HR is elevated
    3. steps       step-goal walk or post-meal walk
    4. goal        two diet lines and one goal-specific workout

The rule order is observable: ``workouts`` lists entries in exactly this
order.

Hydration is linear in steps, centred at 6000 steps = 2.0 L with one
liter per 6000 steps, clamped to [1.8, 3.5] and rounded to one decimal:

    hydration = clamp(2 + (steps - 6000) / 6000, 1.8, 3.5)

Confidence starts at 0.70 and is clamped to [0.50, 0.95].  Only the
sleep rule moves it today, so the clamp is not reachable yet; it bounds
whatever future rules do.

The engine never raises for numeric input.  Implausible values
(negative calories, zero steps, extreme heart rate) go through the
arithmetic unchanged.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from fitcoach.schemas.recommendation import (
    DailyStats,
    FitnessGoal,
    Recommendation,
    UserGoals,
)

logger = logging.getLogger(__name__)

# ======================================================================
# Suggestion texts
# ======================================================================

SHORT_SLEEP_NOTE = "Sleep below 7h — prioritize recovery"
ELEVATED_HR_NOTE = "Elevated avg HR — keep intensity moderate"

RECOVERY_WORKOUT = "Low-intensity 30–40 min zone-2 cardio"
MODERATE_WORKOUT = "Moderate-intensity 45–60 min session"
BREATHING_WORKOUT = "Breathing drills + mobility 10 min"
STEP_GOAL_WORKOUT = "Walk 6–8k steps (break into short bouts)"
POST_MEAL_WALK = "Add 15 min brisk walk post-meal"


class GoalPlan(BaseModel):
    """Diet lines and workout contributed by the goal rule."""

    model_config = ConfigDict(frozen=True)

    diet: tuple[str, str]
    workout: str


GOAL_PLANS: dict[FitnessGoal, GoalPlan] = {
    FitnessGoal.LOSE_WEIGHT: GoalPlan(
        diet=(
            "High-protein (1.6–2.2g/kg), calorie deficit ~10–15%",
            "Fiber-rich veggies, limit liquid calories",
        ),
        workout="Full-body circuit x3, RPE 6–7",
    ),
    FitnessGoal.BUILD_MUSCLE: GoalPlan(
        diet=(
            "Slight surplus 5–10%, 1.8–2.2g/kg protein",
            "Carbs around training",
        ),
        workout="Compound lifts 5x5, accessory hypertrophy",
    ),
    FitnessGoal.IMPROVE_ENDURANCE: GoalPlan(
        diet=(
            "Carb periodization for long sessions",
            "Electrolytes during >60 min workouts",
        ),
        workout="Zone-2 45 min + intervals 6x2 min",
    ),
    FitnessGoal.GENERAL_HEALTH: GoalPlan(
        diet=(
            "Balanced plate: 40% carbs, 30% protein, 30% fats",
            "Whole foods first, limit ultra-processed snacks",
        ),
        workout="3× weekly strength + daily walks",
    ),
}

# Default arm of the goal rule.
DEFAULT_GOAL_PLAN = GOAL_PLANS[FitnessGoal.GENERAL_HEALTH]


# ======================================================================
# Configuration
# ======================================================================


class RecommendationConfig(BaseModel):
    """Thresholds and constants used by the rules."""

    model_config = ConfigDict(frozen=True)

    short_sleep_minutes: int = Field(default=420)
    elevated_heart_rate: float = Field(default=85.0)
    step_goal: int = Field(default=8000)

    base_confidence: float = Field(default=0.70)
    short_sleep_penalty: float = Field(default=0.05)
    confidence_floor: float = Field(default=0.50)
    confidence_ceiling: float = Field(default=0.95)

    hydration_base_liters: float = Field(default=2.0)
    hydration_reference_steps: float = Field(default=6000.0)
    hydration_steps_per_liter: float = Field(default=6000.0)
    hydration_min_liters: float = Field(default=1.8)
    hydration_max_liters: float = Field(default=3.5)


DEFAULT_RECOMMENDATION_CONFIG = RecommendationConfig()


# ======================================================================
# Draft accumulator
# ======================================================================


class RecommendationDraft(BaseModel):
    """Partial recommendation threaded through the rules."""

    model_config = ConfigDict(frozen=True)

    workouts: tuple[str, ...] = ()
    diet: tuple[str, ...] = ()
    reasoning: tuple[str, ...] = ()
    confidence: float

    def extend(
        self,
        workouts: tuple[str, ...] = (),
        diet: tuple[str, ...] = (),
        reasoning: tuple[str, ...] = (),
        confidence_delta: float = 0.0,
    ) -> RecommendationDraft:
        """Return a new draft with entries appended."""
        return self.model_copy(update={
            "workouts": self.workouts + workouts,
            "diet": self.diet + diet,
            "reasoning": self.reasoning + reasoning,
            "confidence": self.confidence + confidence_delta,
        })


Rule = Callable[
    [DailyStats, UserGoals, RecommendationDraft, RecommendationConfig],
    RecommendationDraft,
]


# ======================================================================
# Rules
# ======================================================================


def _sleep_rule(
    stats: DailyStats,
    goals: UserGoals,
    draft: RecommendationDraft,
    config: RecommendationConfig,
) -> RecommendationDraft:
    """Short sleep: recovery session and lower confidence.

    Exactly one of the recovery / moderate sessions is added.
    """
    if stats.sleep_minutes < config.short_sleep_minutes:
        return draft.extend(
            workouts=(RECOVERY_WORKOUT,),
            reasoning=(SHORT_SLEEP_NOTE,),
            confidence_delta=-config.short_sleep_penalty,
        )
    return draft.extend(workouts=(MODERATE_WORKOUT,))


def _heart_rate_rule(
    stats: DailyStats,
    goals: UserGoals,
    draft: RecommendationDraft,
    config: RecommendationConfig,
) -> RecommendationDraft:
    """Elevated average HR adds breathing work; never removes anything."""
    if stats.avg_heart_rate > config.elevated_heart_rate:
        return draft.extend(
            workouts=(BREATHING_WORKOUT,),
            reasoning=(ELEVATED_HR_NOTE,),
        )
    return draft


def _steps_rule(
    stats: DailyStats,
    goals: UserGoals,
    draft: RecommendationDraft,
    config: RecommendationConfig,
) -> RecommendationDraft:
    """Below the step goal: walk more.  At or above it: post-meal walk."""
    if stats.steps < config.step_goal:
        return draft.extend(workouts=(STEP_GOAL_WORKOUT,))
    return draft.extend(workouts=(POST_MEAL_WALK,))


def _goal_rule(
    stats: DailyStats,
    goals: UserGoals,
    draft: RecommendationDraft,
    config: RecommendationConfig,
) -> RecommendationDraft:
    """Goal-specific diet lines and workout."""
    plan = GOAL_PLANS.get(goals.goal, DEFAULT_GOAL_PLAN)
    return draft.extend(workouts=(plan.workout,), diet=plan.diet)


RULES: tuple[Rule, ...] = (
    _sleep_rule,
    _heart_rate_rule,
    _steps_rule,
    _goal_rule,
)


# ======================================================================
# Scalars
# ======================================================================


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _round_half_up(value: float, places: int = 1) -> float:
    """Round half away from zero on the exact binary value.

    ``round()`` uses banker's rounding, which would turn 2.25 into 2.2.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def compute_hydration_liters(
    steps: float,
    config: RecommendationConfig = DEFAULT_RECOMMENDATION_CONFIG,
) -> float:
    """Daily water target in liters for a step count."""
    raw = config.hydration_base_liters + (
        (steps - config.hydration_reference_steps)
        / config.hydration_steps_per_liter
    )
    clamped = _clamp(raw, config.hydration_min_liters, config.hydration_max_liters)
    return _round_half_up(clamped, 1)


def _normalise_confidence(value: float, config: RecommendationConfig) -> float:
    clamped = _clamp(value, config.confidence_floor, config.confidence_ceiling)
    # 0.70 - 0.05 is 0.6499999999999999 in binary.
    return round(clamped, 2)


# ======================================================================
# Main entry point
# ======================================================================


def generate_recommendations(
    stats: DailyStats,
    goals: UserGoals,
    config: Optional[RecommendationConfig] = None,
) -> Recommendation:
    """Generate workout, diet and hydration recommendations.

    Args:
        stats: Aggregated daily statistics.
        goals: The user's goal.
        config: Optional threshold override.

    Returns:
        A new :class:`Recommendation`.  Identical inputs always give an
        equal result; neither argument is modified.
    """
    cfg = config or DEFAULT_RECOMMENDATION_CONFIG

    draft = RecommendationDraft(confidence=cfg.base_confidence)
    for rule in RULES:
        draft = rule(stats, goals, draft, cfg)

    recommendation = Recommendation(
        workouts=draft.workouts,
        diet=draft.diet,
        hydration_liters=compute_hydration_liters(stats.steps, cfg),
        reasoning=draft.reasoning,
        confidence=_normalise_confidence(draft.confidence, cfg),
    )
    logger.debug(
        "Recommendation for goal=%s: %d workouts, %d notes, "
        "hydration=%.1fL confidence=%.2f",
        getattr(goals.goal, "value", goals.goal),
        len(recommendation.workouts),
        len(recommendation.reasoning),
        recommendation.hydration_liters,
        recommendation.confidence,
    )
    return recommendation
