"""Route initialization module."""

from fastapi import APIRouter

from users_api.routes.auth import admin_router, auth_router
from users_api.routes.health import router as health_router
from users_api.routes.root import router as root_router
from users_api.routes.user import router as user_router

# Create main API router
api_router = APIRouter()

# Include sub-routers
api_router.include_router(root_router)
api_router.include_router(health_router)
api_router.include_router(user_router)
api_router.include_router(auth_router)
api_router.include_router(admin_router)


__all__ = ["api_router"]
