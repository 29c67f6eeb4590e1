"""
Unit tests for weekly dashboard aggregation.

Tests weekday slotting, averaging with half-up rounding, and the
conversion of weekly totals into engine input.
"""

import datetime

from fitcoach.coach.weekly_stats import (
    WEEKDAY_LABELS,
    build_week,
    format_sleep,
    summarize_week,
    to_daily_stats,
)
from fitcoach.schemas.weekly import DayPoint, WorkoutReading


# ======================================================================
# Helpers
# ======================================================================

_START = datetime.datetime(2026, 3, 2, 8, 0)


def _reading(day: int, steps: int = 7000, hr: float = 70, calories: float = 2000,
             sleep: int = 450) -> WorkoutReading:
    return WorkoutReading(
        steps=steps,
        hr=hr,
        calories=calories,
        sleep=sleep,
        created_at=_START + datetime.timedelta(days=day),
    )


def _full_week(**kwargs) -> list[WorkoutReading]:
    return [_reading(d, **kwargs) for d in range(7)]


# ======================================================================
# build_week
# ======================================================================


class TestBuildWeek:

    def test_always_seven_labelled_points(self):
        points = build_week([])
        assert [p.label for p in points] == list(WEEKDAY_LABELS)
        assert all(p.steps == 0 and p.sleep == 0 for p in points)

    def test_partial_week_padded_with_zero_days(self):
        points = build_week([_reading(0), _reading(1), _reading(2)])
        assert [p.steps for p in points] == [7000, 7000, 7000, 0, 0, 0, 0]

    def test_sorted_by_created_at(self):
        readings = [_reading(2, steps=3), _reading(0, steps=1), _reading(1, steps=2)]
        points = build_week(readings)
        assert [p.steps for p in points[:3]] == [1, 2, 3]

    def test_only_oldest_seven_used(self):
        readings = [_reading(d, steps=d) for d in range(10)]
        points = build_week(readings)
        assert [p.steps for p in points] == [0, 1, 2, 3, 4, 5, 6]

    def test_missing_metrics_are_zero(self):
        points = build_week([WorkoutReading(steps=500)])
        assert points[0].steps == 500
        assert points[0].hr == 0.0
        assert points[0].sleep == 0

    def test_mixed_timezone_awareness(self):
        aware = WorkoutReading(
            steps=2,
            created_at=datetime.datetime(2026, 3, 3, tzinfo=datetime.timezone.utc),
        )
        naive = WorkoutReading(steps=1, created_at=datetime.datetime(2026, 3, 2))
        points = build_week([aware, naive])
        assert [p.steps for p in points[:2]] == [1, 2]


# ======================================================================
# summarize_week
# ======================================================================


class TestSummarizeWeek:

    def test_full_uniform_week(self):
        summary = summarize_week(build_week(_full_week()))
        assert summary.avg_heart_rate == 70
        assert summary.total_steps == 49000
        assert summary.avg_sleep_minutes == 450
        assert summary.avg_calories == 2000
        assert summary.sleep_label == "7h 30m"

    def test_sparse_week_lowers_averages(self):
        summary = summarize_week(build_week([_reading(0, hr=70)]))
        assert summary.avg_heart_rate == 10

    def test_half_rounds_up(self):
        points = [DayPoint(label="Mon", sleep=1), DayPoint(label="Tue")]
        assert summarize_week(points).avg_sleep_minutes == 1

    def test_empty_points(self):
        summary = summarize_week([])
        assert summary.total_steps == 0
        assert summary.avg_heart_rate == 0


class TestFormatSleep:

    def test_hours_and_minutes(self):
        assert format_sleep(450) == "7h 30m"

    def test_zero(self):
        assert format_sleep(0) == "0h 0m"


# ======================================================================
# to_daily_stats
# ======================================================================


class TestToDailyStats:

    def test_steps_are_daily_average(self):
        stats = to_daily_stats(summarize_week(build_week(_full_week(steps=8400))))
        assert stats.steps == 8400
        assert stats.avg_heart_rate == 70
        assert stats.sleep_minutes == 450
        assert stats.calories == 2000

    def test_custom_window(self):
        summary = summarize_week(build_week(_full_week(steps=1000)))
        assert to_daily_stats(summary, days=14).steps == 500

    def test_zero_window_does_not_divide_by_zero(self):
        summary = summarize_week(build_week(_full_week(steps=1000)))
        assert to_daily_stats(summary, days=0).steps == 7000
