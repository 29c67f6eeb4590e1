"""Business logic services."""

from fitcoach.services.recommendation_service import RecommendationService

__all__ = [
    "RecommendationService",
]
