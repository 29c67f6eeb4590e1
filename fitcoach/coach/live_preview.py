"""
Simulated live counters for the landing page preview.

Each tick advances the counters the way a wearable would over roughly
a second of activity:

    steps     += 0..20
    calories  += 0..0.8 kcal
    hr         = 60..100 bpm (instantaneous, starts at 72)
    sleep     += 0..3 min while below 480 min (8h)

Pass a seed for reproducible output.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from fitcoach.coach.recommendations import generate_recommendations
from fitcoach.coach.weekly_stats import WEEKDAY_LABELS
from fitcoach.schemas.preview import LiveStats, WeeklyStepSample
from fitcoach.schemas.recommendation import (
    DailyStats,
    FitnessGoal,
    Recommendation,
    UserGoals,
)

logger = logging.getLogger(__name__)

SLEEP_CAP_MINUTES = 480
RESTING_HR = 72

# Sample week bars on the landing page.
_SAMPLE_STEPS_MIN = 4000
_SAMPLE_STEPS_SPAN = 7000


class LiveStatsSimulator:
    """Random-walk counters for steps, calories, heart rate and sleep."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random(seed)
        self.steps = 0
        self.calories = 0.0
        self.hr = RESTING_HR
        self.sleep = 0

    def tick(self) -> LiveStats:
        """Advance one step and return the new snapshot."""
        rng = self._rng
        self.steps += round(rng.random() * 20)
        self.calories += rng.random() * 0.8
        self.hr = 60 + round(rng.random() * 40)
        if self.sleep < SLEEP_CAP_MINUTES:
            self.sleep += round(rng.random() * 3)
        return self.snapshot()

    def run(self, ticks: int) -> LiveStats:
        """Advance *ticks* steps and return the final snapshot."""
        for _ in range(ticks):
            self.tick()
        return self.snapshot()

    def snapshot(self) -> LiveStats:
        return LiveStats(
            steps=self.steps,
            calories=round(self.calories),
            hr=self.hr,
            sleep=self.sleep,
        )


def live_to_daily_stats(live: LiveStats) -> DailyStats:
    """Map the preview counters onto engine input."""
    return DailyStats(
        steps=live.steps,
        avg_heart_rate=live.hr,
        sleep_minutes=live.sleep,
        calories=live.calories,
    )


def sample_week(rng: Optional[random.Random] = None) -> list[WeeklyStepSample]:
    """Seven illustrative daily step counts between 4000 and 11000."""
    rng = rng or random.Random()
    return [
        WeeklyStepSample(
            label=label,
            steps=round(_SAMPLE_STEPS_MIN + rng.random() * _SAMPLE_STEPS_SPAN),
        )
        for label in WEEKDAY_LABELS
    ]


def preview_recommendation(
    ticks: int,
    seed: Optional[int] = None,
    goal: FitnessGoal = FitnessGoal.GENERAL_HEALTH,
) -> tuple[LiveStats, DailyStats, Recommendation]:
    """Run the simulator for *ticks* and recommend from its snapshot."""
    live = LiveStatsSimulator(seed=seed).run(ticks)
    stats = live_to_daily_stats(live)
    logger.debug("Preview after %d ticks: %s", ticks, live)
    return live, stats, generate_recommendations(stats, UserGoals(goal=goal))
