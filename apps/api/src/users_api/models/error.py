"""Error response model."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Uniform error body returned by every failing operation."""

    status: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Error message")
