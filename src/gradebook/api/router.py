"""Primary API router definition."""

from datetime import datetime, timezone

from fastapi import APIRouter

from ..schemas import HealthStatus
from . import courses, marks, students

api_router = APIRouter()

api_router.include_router(students.router)
api_router.include_router(courses.router)
api_router.include_router(marks.router)


@api_router.get("/health", response_model=HealthStatus, tags=["health"])
async def healthcheck() -> HealthStatus:
    """Basic health probe endpoint."""
    return HealthStatus(status="OK", timestamp=datetime.now(timezone.utc))
