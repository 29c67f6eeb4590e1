"""Coaching core: rule-based recommendations and the data feeding them."""

from fitcoach.coach.recommendations import (
    DEFAULT_RECOMMENDATION_CONFIG,
    RecommendationConfig,
    generate_recommendations,
)

__all__ = [
    "DEFAULT_RECOMMENDATION_CONFIG",
    "RecommendationConfig",
    "generate_recommendations",
]
