"""Service initialization and dependency injection."""

import logging

from fastapi import Depends

from users_api.config import Settings, get_settings
from users_api.services.user_service import InMemoryUserService, UserService, default_users

logger = logging.getLogger(__name__)

# Service instances cache
_services_cache: dict[str, UserService] = {}


def get_user_service(settings: Settings = Depends(get_settings)) -> UserService:
    """Get the process-wide in-memory user service.

    Args:
        settings: Application settings

    Returns:
        UserService instance
    """
    if "user_service" not in _services_cache:
        users = default_users() if settings.seed_users else []
        _services_cache["user_service"] = InMemoryUserService(users)
        logger.info("Initialized InMemoryUserService with %d users", len(users))

    return _services_cache["user_service"]


def reset_services() -> None:
    """Drop cached service instances so the next request builds fresh ones."""
    _services_cache.clear()
