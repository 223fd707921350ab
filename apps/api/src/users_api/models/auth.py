"""Models for the mock authentication and admin endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoginRequest(BaseModel):
    """Login credentials. Accepted but never checked."""

    email: str | None = Field(None, examples=["john.doe@example.com"])
    password: str | None = Field(None, examples=["password123"])


class AuthUser(BaseModel):
    """Abbreviated user embedded in the login response."""

    id: int
    name: str


class AuthResponse(CamelModel):
    """Login response carrying a mock token."""

    token: str
    user: AuthUser
    expires_in: int

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "token": "mock-jwt-token",
                "user": {"id": 1, "name": "John Doe"},
                "expiresIn": 3600,
            }
        },
    )


class MessageResponse(BaseModel):
    """Plain acknowledgement message."""

    message: str


class Statistics(CamelModel):
    """Platform statistics returned by the admin endpoint."""

    total_users: int
    active_users: int
    new_users_today: int
