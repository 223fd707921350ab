"""User models for the User Directory API."""

from pydantic import BaseModel, ConfigDict, Field


class UserInput(BaseModel):
    """Request body for creating or replacing a user.

    Every field is optional here so that missing ``name`` or ``email`` is
    reported by the service's own validation rather than by the schema.
    """

    name: str | None = Field(None, description="User's full name")
    email: str | None = Field(None, description="User's email address")
    age: int | None = Field(None, description="User's age (optional)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "John Doe",
                "email": "john.doe@example.com",
                "age": 28,
            }
        }
    )


class User(BaseModel):
    """User entity model."""

    id: int = Field(..., description="User ID", gt=0)
    name: str = Field(..., description="User's full name")
    email: str = Field(..., description="User's email address")
    age: int | None = Field(None, description="User's age (optional)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "John Doe",
                "email": "john.doe@example.com",
                "age": 28,
            }
        }
    )
