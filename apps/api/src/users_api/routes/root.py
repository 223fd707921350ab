"""Root welcome route and the endpoint directory."""

from typing import Any

from fastapi import APIRouter, Depends

from users_api.config import Settings, get_settings

router = APIRouter(tags=["System"])

FEATURES = [
    "CRUD Operations",
    "Authentication",
    "File Upload",
    "Admin Panel",
    "Search",
    "Export",
    "Analytics",
]

# Endpoint groups listed when a route is not found.
AVAILABLE_ENDPOINTS = {
    "User Management": "/users",
    "Authentication": "/auth",
    "Admin Panel": "/admin",
    "Health Check": "/health",
    "API Documentation": "/docs",
}


@router.get("/")
async def welcome(settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    """Describe the API and its main endpoint groups."""
    return {
        "message": f"Welcome to the {settings.app_name}",
        "endpoints": {
            "users": "/users",
            "authentication": "/auth",
            "admin": "/admin",
            "documentation": "/docs",
        },
        "version": settings.app_version,
        "features": FEATURES,
    }
