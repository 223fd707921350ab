"""Health check response models."""

from pydantic import BaseModel, ConfigDict


class HealthCheckResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: str
    version: str
    environment: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "timestamp": "2023-01-01T00:00:00Z",
                "version": "2.0.0",
                "environment": "development",
            }
        }
    )
