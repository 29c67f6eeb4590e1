"""
Weekly dashboard aggregation.

Lays a user's activity readings out over a Mon..Sun week and derives
the headline numbers plus the :class:`DailyStats` fed to the engine.

Slotting is positional: after sorting by ``created_at``, the oldest
reading fills Monday, the next Tuesday, and so on.  Readings beyond the
seventh are ignored and missing slots are all-zero days, so a sparse
week pulls the averages down.

Averages are rounded half-up (``2.5 -> 3``), not with ``round()``.
"""

from __future__ import annotations

import datetime
import logging
import math
from typing import Iterable, Sequence

from fitcoach.schemas.recommendation import DailyStats
from fitcoach.schemas.weekly import DayPoint, WeeklySummary, WorkoutReading

logger = logging.getLogger(__name__)

WEEKDAY_LABELS: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

_EPOCH = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _sort_key(reading: WorkoutReading) -> datetime.datetime:
    created = reading.created_at
    if created is None:
        return _EPOCH
    if created.tzinfo is None:
        return created.replace(tzinfo=datetime.timezone.utc)
    return created


def build_week(readings: Iterable[WorkoutReading]) -> list[DayPoint]:
    """Fill the seven weekday slots from the oldest readings."""
    ordered = sorted(readings, key=_sort_key)
    if len(ordered) > len(WEEKDAY_LABELS):
        logger.debug(
            "Ignoring %d readings beyond the first %d",
            len(ordered) - len(WEEKDAY_LABELS), len(WEEKDAY_LABELS),
        )

    points = []
    for idx, label in enumerate(WEEKDAY_LABELS):
        if idx >= len(ordered):
            points.append(DayPoint(label=label))
            continue
        r = ordered[idx]
        points.append(DayPoint(
            label=label,
            steps=r.steps or 0,
            hr=r.hr or 0.0,
            calories=r.calories or 0.0,
            sleep=r.sleep or 0,
        ))
    return points


def format_sleep(minutes: int) -> str:
    """Render minutes as ``"7h 30m"``."""
    hours, mins = divmod(minutes, 60)
    return f"{hours}h {mins}m"


def summarize_week(points: Sequence[DayPoint]) -> WeeklySummary:
    """Average heart rate, sleep and calories; total steps."""
    n = len(points) or 1

    avg_sleep = _round_half_up(sum(p.sleep for p in points) / n)
    return WeeklySummary(
        avg_heart_rate=_round_half_up(sum(p.hr for p in points) / n),
        total_steps=sum(p.steps for p in points),
        avg_sleep_minutes=avg_sleep,
        avg_calories=_round_half_up(sum(p.calories for p in points) / n),
        sleep_label=format_sleep(avg_sleep),
    )


def to_daily_stats(summary: WeeklySummary, days: int = 7) -> DailyStats:
    """Convert weekly totals into per-day engine input.

    Steps are the weekly total spread over *days*; the other fields are
    already daily averages.
    """
    return DailyStats(
        steps=_round_half_up(summary.total_steps / max(days, 1)),
        avg_heart_rate=summary.avg_heart_rate,
        sleep_minutes=summary.avg_sleep_minutes,
        calories=summary.avg_calories,
    )
