"""User API routes."""

from fastapi import APIRouter, Depends, Query, status

from users_api.models.error import ErrorResponse
from users_api.models.user import User, UserInput
from users_api.openapi import LIST_FILTER_PARAMETERS
from users_api.services import get_user_service
from users_api.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"], redirect_slashes=False)

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "User not found"}}
_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Bad request - missing required fields"}}


# The filters are documented only; FastAPI neither parses nor applies them.
@router.get(
    "",
    response_model=list[User],
    response_model_exclude_none=True,
    summary="Get all users",
    openapi_extra={"parameters": LIST_FILTER_PARAMETERS},
)
@router.get("/", response_model=list[User], response_model_exclude_none=True, include_in_schema=False)
async def list_users(service: UserService = Depends(get_user_service)) -> list[User]:
    """Retrieve the list of users in insertion order."""
    return service.list_users()


@router.get(
    "/search",
    response_model=list[User],
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse, "description": "Invalid search query"}},
)
async def search_users(
    q: str = Query(..., description="Search query", examples=["john"]),
    fields: str | None = Query(None, description="Fields to search in", examples=["name,email"]),
    limit: int | None = Query(None, description="Maximum results", examples=[20]),
) -> list[User]:
    """Search users by name, email, or other criteria (mock).

    Always returns a single canned result echoing the query.
    """
    return [User(id=1, name=f"Results for: {q}", email="search@example.com")]


@router.post(
    "",
    response_model=User,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
)
@router.post(
    "/",
    response_model=User,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_user(
    payload: UserInput | None = None,
    service: UserService = Depends(get_user_service),
) -> User:
    """Create a new user."""
    return service.create_user(payload or UserInput())


@router.get("/{user_id}", response_model=User, response_model_exclude_none=True, responses=_NOT_FOUND)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> User:
    """Get user by ID."""
    return service.get_user(user_id)


@router.put(
    "/{user_id}",
    response_model=User,
    response_model_exclude_none=True,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def update_user(
    user_id: str,
    payload: UserInput | None = None,
    service: UserService = Depends(get_user_service),
) -> User:
    """Update user by ID, replacing name, email and age."""
    return service.update_user(user_id, payload or UserInput())


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_NOT_FOUND)
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    """Delete user by ID."""
    service.delete_user(user_id)
    return None
