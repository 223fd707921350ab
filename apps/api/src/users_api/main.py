"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from users_api.config import Settings, get_settings
from users_api.errors import ApiError, BadRequestError, handle_error
from users_api.openapi import install_openapi
from users_api.routes import api_router
from users_api.routes.root import AVAILABLE_ENDPOINTS

# Initialize settings
settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body"
INVALID_QUERY_MESSAGE = "Invalid query parameters"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Handle application lifespan events."""
    app_settings: Settings = app.state.settings
    logger.info("%s v%s started", app_settings.app_name, app_settings.app_version)
    logger.info("Environment: %s", app_settings.environment)
    logger.info("Log level: %s", app_settings.log_level)

    yield

    logger.info("%s shutting down", app_settings.app_name)


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Route every failure through ``handle_error``."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        body = handle_error(exc)
        return JSONResponse(status_code=body.status, content=body.model_dump())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
        in_body = any(tuple(error.get("loc", ()))[:1] == ("body",) for error in exc.errors())
        message = INVALID_BODY_MESSAGE if in_body else INVALID_QUERY_MESSAGE
        body = handle_error(BadRequestError(message))
        return JSONResponse(status_code=body.status, content=body.model_dump())

    @app.exception_handler(StarletteHTTPException)
    async def route_not_found_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code != status.HTTP_404_NOT_FOUND:
            return await http_exception_handler(request, exc)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": "Route not found", "availableEndpoints": AVAILABLE_ENDPOINTS},
        )

    # Runs outside the CORS middleware, so CORS headers are added here.
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception: %s", exc, exc_info=True)

        headers = {}
        origin = request.headers.get("origin")
        if origin in settings.cors_origins:
            headers = {"Access-Control-Allow-Origin": origin, "Access-Control-Allow-Credentials": "true"}

        body = handle_error(exc)
        return JSONResponse(status_code=body.status, content=body.model_dump(), headers=headers)


def create_app(settings: Settings) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Application settings

    Returns:
        Configured FastAPI instance
    """
    app = FastAPI(
        title=settings.app_name,
        description=(
            "A comprehensive REST API demonstrating various endpoint patterns, "
            "authentication, file operations, and admin features"
        ),
        version=settings.app_version,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info("CORS enabled for origins: %s", settings.cors_origins)

    register_exception_handlers(app, settings)

    app.include_router(api_router)
    install_openapi(app)
    return app


app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    logger.info("API Documentation: http://localhost:%s/docs", settings.api_port)
    uvicorn.run(
        "users_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
    )
