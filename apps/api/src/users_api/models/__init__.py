"""API models package."""

from users_api.models.auth import AuthResponse, AuthUser, LoginRequest, MessageResponse, Statistics
from users_api.models.error import ErrorResponse
from users_api.models.health import HealthCheckResponse
from users_api.models.user import User, UserInput

__all__ = [
    "AuthResponse",
    "AuthUser",
    "ErrorResponse",
    "HealthCheckResponse",
    "LoginRequest",
    "MessageResponse",
    "Statistics",
    "User",
    "UserInput",
]
