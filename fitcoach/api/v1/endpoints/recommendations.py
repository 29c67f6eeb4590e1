"""
Recommendation endpoints: single-shot, weekly dashboard, live preview.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from fitcoach.api.dependencies import get_recommendation_service
from fitcoach.schemas.preview import PreviewResponse
from fitcoach.schemas.recommendation import Recommendation, RecommendationRequest
from fitcoach.schemas.weekly import WeeklyDashboard, WeeklyRequest
from fitcoach.services.recommendation_service import RecommendationService

router = APIRouter()


@router.post(
    "",
    summary="Recommend workouts, diet and hydration for daily stats.",
    response_model=Recommendation,
)
def create_recommendation(
    request: RecommendationRequest,
    service: RecommendationService = Depends(get_recommendation_service),
):
    return service.recommend(request.stats, request.goals)


@router.post(
    "/weekly",
    summary="Aggregate a week of readings and recommend from it.",
    response_model=WeeklyDashboard,
)
def create_weekly_dashboard(
    request: WeeklyRequest,
    service: RecommendationService = Depends(get_recommendation_service),
):
    return service.weekly(request.readings, request.goal)


@router.get(
    "/preview",
    summary="Simulated live counters and their recommendation.",
    response_model=PreviewResponse,
)
def get_preview(
    ticks: int = Query(60, description="Simulation steps to run"),
    seed: Optional[int] = Query(None, description="Seed for reproducible output"),
    goal: Optional[str] = Query(None, description="Fitness goal (defaults to settings)"),
    service: RecommendationService = Depends(get_recommendation_service),
):
    return service.preview(ticks, seed, goal)
