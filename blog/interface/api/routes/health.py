"""Liveness route."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from blog.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    environment: str
    git_sha: str
    max_comment_depth: int
    checked_at: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is up and which build is serving."""
    return HealthResponse(
        status="healthy",
        environment=settings.environment,
        git_sha=settings.git_sha,
        max_comment_depth=settings.comments.max_depth,
        checked_at=datetime.now(timezone.utc),
    )
