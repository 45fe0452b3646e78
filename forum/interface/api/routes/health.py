"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from forum.config import Settings
from forum.interface.api.response import ApiResponse, ok

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    environment: str
    git_sha: str


@router.get("/health", response_model=ApiResponse[HealthResponse])
async def health_check(settings: FromDishka[Settings]) -> ApiResponse[HealthResponse]:
    """Liveness check.

    Returns:
        Health status indicating the service is running
    """
    return ok(
        HealthResponse(
            status="healthy",
            timestamp=datetime.now(),
            environment=settings.environment,
            git_sha=settings.git_sha,
        )
    )
