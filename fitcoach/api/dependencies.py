"""
Shared API dependencies.

Reusable FastAPI dependencies for the service layer.
"""

from fitcoach.core.config import settings
from fitcoach.services.recommendation_service import RecommendationService


def get_recommendation_service() -> RecommendationService:
    """Service wired to the global settings and default engine config."""
    return RecommendationService(settings)
