"""Mock authentication and admin routes.

These endpoints return fixed payloads and never touch the user store.
No credentials or tokens are checked, so the documented 401 and 403
responses are never actually produced.
"""

from fastapi import APIRouter

from users_api.models.auth import AuthResponse, AuthUser, LoginRequest, MessageResponse, Statistics
from users_api.models.error import ErrorResponse
from users_api.openapi import bearer_header, query_param

auth_router = APIRouter(prefix="/auth", tags=["Authentication"])
admin_router = APIRouter(prefix="/admin", tags=["Admin"])

MOCK_TOKEN = "mock-jwt-token"
TOKEN_TTL_SECONDS = 3600

_UNAUTHORIZED = {401: {"model": ErrorResponse, "description": "Unauthorized"}}
_FORBIDDEN = {403: {"model": ErrorResponse, "description": "Forbidden"}}


@auth_router.post(
    "/login",
    response_model=AuthResponse,
    responses={401: {"model": ErrorResponse, "description": "Invalid credentials"}},
)
async def login(credentials: LoginRequest | None = None) -> AuthResponse:
    """User login (mock). Credentials are accepted without checking."""
    return AuthResponse(
        token=MOCK_TOKEN,
        user=AuthUser(id=1, name="John Doe"),
        expires_in=TOKEN_TTL_SECONDS,
    )


@auth_router.post(
    "/logout",
    response_model=MessageResponse,
    responses=_UNAUTHORIZED,
    openapi_extra={"parameters": [bearer_header()]},
)
async def logout() -> MessageResponse:
    """User logout (mock)."""
    return MessageResponse(message="Logged out successfully")


@admin_router.get(
    "/statistics",
    response_model=Statistics,
    tags=["Analytics"],
    responses=_FORBIDDEN,
    openapi_extra={
        "parameters": [
            bearer_header("Bearer token with admin privileges"),
            query_param("period", "Statistics period", {"type": "string", "enum": ["day", "week", "month", "year"]}),
        ]
    },
)
async def statistics() -> Statistics:
    """Get platform statistics (mock)."""
    return Statistics(total_users=150, active_users=142, new_users_today=5)
