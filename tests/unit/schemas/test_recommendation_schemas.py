"""Tests for the recommendation request/response schemas."""

import logging

import pytest
from pydantic import ValidationError

from fitcoach.schemas.recommendation import (
    DailyStats,
    FitnessGoal,
    RecommendationRequest,
    UserGoals,
    coerce_goal,
)


class TestGoalCoercion:
    """Unknown or missing goals resolve to general health."""

    @pytest.mark.parametrize("raw", [g.value for g in FitnessGoal])
    def test_known_values(self, raw):
        assert UserGoals(goal=raw).goal == FitnessGoal(raw)

    def test_enum_member_passes_through(self):
        assert coerce_goal(FitnessGoal.BUILD_MUSCLE) is FitnessGoal.BUILD_MUSCLE

    def test_missing_goal(self):
        assert UserGoals().goal == FitnessGoal.GENERAL_HEALTH

    def test_none_goal(self):
        assert UserGoals(goal=None).goal == FitnessGoal.GENERAL_HEALTH

    def test_unknown_goal_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="fitcoach.schemas.recommendation"):
            goals = UserGoals(goal="lose_wieght")
        assert goals.goal == FitnessGoal.GENERAL_HEALTH
        assert "lose_wieght" in caplog.text

    def test_non_string_goal(self):
        assert UserGoals(goal=42).goal == FitnessGoal.GENERAL_HEALTH


class TestDailyStats:
    """No range validation; camelCase on the wire."""

    def test_camel_case_input(self):
        stats = DailyStats.model_validate({
            "steps": 7500,
            "avgHeartRate": 90,
            "sleepMinutes": 390,
            "calories": 2100,
        })
        assert stats.avg_heart_rate == 90.0
        assert stats.sleep_minutes == 390

    def test_snake_case_input(self):
        stats = DailyStats(steps=1, avg_heart_rate=60, sleep_minutes=2, calories=3)
        assert stats.model_dump(by_alias=True) == {
            "steps": 1,
            "avgHeartRate": 60.0,
            "sleepMinutes": 2,
            "calories": 3.0,
        }

    def test_negative_values_accepted(self):
        stats = DailyStats(steps=-1, avg_heart_rate=-5, sleep_minutes=-1, calories=-100)
        assert stats.calories == -100

    def test_all_fields_required(self):
        with pytest.raises(ValidationError):
            DailyStats(steps=1000, avg_heart_rate=60, sleep_minutes=400)


class TestRecommendationRequest:

    def test_goals_default(self):
        req = RecommendationRequest.model_validate({
            "stats": {"steps": 1, "avgHeartRate": 1, "sleepMinutes": 1, "calories": 1},
        })
        assert req.goals.goal == FitnessGoal.GENERAL_HEALTH

    def test_weekly_target_alias(self):
        goals = UserGoals.model_validate({"goal": "build_muscle", "weeklyTargetMinutes": 150})
        assert goals.weekly_target_minutes == 150
