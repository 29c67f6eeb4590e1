"""
Live preview schemas.

The landing page shows a running simulation of a wearable's counters
together with the recommendation those counters would produce.
"""

from pydantic import Field

from fitcoach.schemas.recommendation import CamelModel, DailyStats, Recommendation


class LiveStats(CamelModel):
    """Snapshot of the simulated counters."""

    steps: int = Field(..., ge=0)
    calories: int = Field(..., ge=0, description="Rounded kcal")
    hr: int = Field(..., ge=0, description="Current heart rate (bpm)")
    sleep: int = Field(..., ge=0, description="Sleep minutes, capped near 8h")


class WeeklyStepSample(CamelModel):
    """One bar of the landing page's sample week."""

    label: str
    steps: int


class PreviewResponse(CamelModel):
    """Simulated counters plus the resulting recommendation."""

    ticks: int
    seed: int | None = None
    live: LiveStats
    stats: DailyStats
    sample_week: list[WeeklyStepSample]
    recommendation: Recommendation
