"""Health check routes."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from users_api.config import Settings, get_settings
from users_api.models.health import HealthCheckResponse

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    settings: Settings = Depends(get_settings),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status, timestamp and version information
    """
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return HealthCheckResponse(
        status="healthy",
        timestamp=timestamp,
        version=settings.app_version,
        environment=settings.environment,
    )
