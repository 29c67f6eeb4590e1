"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from fitcoach.api.v1.endpoints import recommendations

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    recommendations.router, prefix="/recommendations", tags=["Recommendations"]
)
