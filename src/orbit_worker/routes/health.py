"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter

from orbit_worker.response_models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", timestamp=datetime.now(timezone.utc))
