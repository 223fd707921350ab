"""OpenAPI description for the docs page.

The generated schema is extended with endpoints and fields that the API
describes for clients but does not serve: avatar upload, password reset,
admin user management and export. Requests to those paths get the usual
route-not-found response.
"""

import copy
from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

NOT_SERVED_NOTE = "Documented for clients; not served by this API."

ROLES = ["user", "admin", "moderator"]

_ERROR_REF = {"$ref": "#/components/schemas/ErrorResponse"}
_USER_REF = {"$ref": "#/components/schemas/User"}


def error_response(description: str) -> dict[str, Any]:
    return {"description": description, "content": {"application/json": {"schema": _ERROR_REF}}}


def bearer_header(description: str = "Bearer token") -> dict[str, Any]:
    """Authorization header parameter."""
    return {
        "in": "header",
        "name": "Authorization",
        "required": True,
        "description": description,
        "schema": {"type": "string"},
    }


def query_param(name: str, description: str, schema: dict[str, Any], example: Any = None) -> dict[str, Any]:
    param = {"in": "query", "name": name, "required": False, "description": description, "schema": schema}
    if example is not None:
        param["example"] = example
    return param


def _json_body(properties: dict[str, Any]) -> dict[str, Any]:
    return {
        "required": True,
        "content": {"application/json": {"schema": {"type": "object", "properties": properties}}},
    }


_USER_ID = {
    "in": "path",
    "name": "user_id",
    "required": True,
    "description": "User ID",
    "schema": {"type": "integer"},
    "example": 1,
}
_ADMIN_TOKEN = bearer_header("Bearer token with admin privileges")

# Filters listed on GET /users. They are described but never applied.
LIST_FILTER_PARAMETERS = [
    query_param("page", "Page number", {"type": "integer"}, 1),
    query_param("limit", "Items per page", {"type": "integer"}, 10),
    query_param("role", "Filter by role", {"type": "string", "enum": ROLES}),
    query_param("isActive", "Filter by active status", {"type": "boolean"}),
]

# Fields described on User that the store never holds.
USER_DESCRIBED_FIELDS = {
    "role": {"type": "string", "enum": ROLES, "description": "User role", "example": "user"},
    "isActive": {"type": "boolean", "description": "User status", "example": True},
    "createdAt": {
        "type": "string",
        "format": "date-time",
        "description": "Creation timestamp",
        "example": "2023-01-01T00:00:00Z",
    },
}

STATISTICS_DESCRIBED_FIELDS = {
    "topCountries": {
        "type": "array",
        "items": {"type": "string"},
        "title": "Top Countries",
        "example": ["USA", "UK", "Canada"],
    },
}

DESCRIBED_ONLY_PATHS: dict[str, dict[str, Any]] = {
    "/users/{user_id}/avatar": {
        "post": {
            "tags": ["Users", "Files"],
            "summary": "Upload user avatar",
            "description": f"Upload a profile picture for a user. {NOT_SERVED_NOTE}",
            "operationId": "upload_user_avatar",
            "parameters": [_USER_ID],
            "requestBody": {
                "required": True,
                "content": {
                    "multipart/form-data": {
                        "schema": {
                            "type": "object",
                            "required": ["avatar"],
                            "properties": {
                                "avatar": {"type": "string", "format": "binary", "description": "Avatar image file"}
                            },
                        }
                    }
                },
            },
            "responses": {
                "200": {"description": "Avatar uploaded successfully"},
                "400": error_response("Invalid file format"),
                "404": error_response("User not found"),
            },
        },
        "delete": {
            "tags": ["Users", "Files"],
            "summary": "Delete user avatar",
            "description": NOT_SERVED_NOTE,
            "operationId": "delete_user_avatar",
            "parameters": [_USER_ID],
            "responses": {
                "204": {"description": "Avatar deleted successfully"},
                "404": error_response("User not found"),
            },
        },
    },
    "/auth/forgot-password": {
        "post": {
            "tags": ["Authentication"],
            "summary": "Request password reset",
            "description": NOT_SERVED_NOTE,
            "operationId": "forgot_password",
            "requestBody": _json_body({"email": {"type": "string", "example": "user@example.com"}}),
            "responses": {
                "200": {"description": "Password reset email sent"},
                "404": error_response("Email not found"),
            },
        },
    },
    "/auth/reset-password": {
        "post": {
            "tags": ["Authentication"],
            "summary": "Reset password",
            "description": NOT_SERVED_NOTE,
            "operationId": "reset_password",
            "requestBody": _json_body(
                {
                    "token": {"type": "string", "example": "reset-token-123"},
                    "newPassword": {"type": "string", "example": "newPassword123"},
                }
            ),
            "responses": {
                "200": {"description": "Password reset successful"},
                "400": error_response("Invalid or expired token"),
            },
        },
    },
    "/admin/users": {
        "get": {
            "tags": ["Admin"],
            "summary": "Get all users (Admin only)",
            "description": f"Retrieve all users with detailed information. {NOT_SERVED_NOTE}",
            "operationId": "admin_list_users",
            "parameters": [
                _ADMIN_TOKEN,
                query_param("includeDeleted", "Include soft-deleted users", {"type": "boolean"}),
            ],
            "responses": {
                "200": {
                    "description": "All users retrieved",
                    "content": {"application/json": {"schema": {"type": "array", "items": _USER_REF}}},
                },
                "403": error_response("Forbidden - Admin access required"),
            },
        },
    },
    "/admin/users/{user_id}/ban": {
        "post": {
            "tags": ["Admin"],
            "summary": "Ban a user",
            "description": NOT_SERVED_NOTE,
            "operationId": "ban_user",
            "parameters": [_ADMIN_TOKEN, _USER_ID],
            "requestBody": _json_body({"reason": {"type": "string", "example": "Violation of terms"}}),
            "responses": {
                "200": {"description": "User banned successfully"},
                "403": error_response("Forbidden"),
                "404": error_response("User not found"),
            },
        },
    },
    "/export/users": {
        "get": {
            "tags": ["Export"],
            "summary": "Export users data",
            "description": f"Export user data in various formats. {NOT_SERVED_NOTE}",
            "operationId": "export_users",
            "parameters": [
                query_param("format", "Export format", {"type": "string", "enum": ["csv", "json", "xlsx"]}, "csv"),
                query_param("fields", "Comma-separated list of fields to include", {"type": "string"}),
            ],
            "responses": {
                "200": {
                    "description": "Data exported successfully",
                    "content": {
                        "text/csv": {},
                        "application/json": {},
                        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": {},
                    },
                },
                "400": error_response("Invalid format"),
            },
        },
    },
}


def build_openapi_schema(app: FastAPI) -> dict[str, Any]:
    """Generate the schema for ``app`` and add the described-only parts."""
    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    paths = schema.setdefault("paths", {})
    for path, operations in copy.deepcopy(DESCRIBED_ONLY_PATHS).items():
        paths.setdefault(path, {}).update(operations)

    components = schema.setdefault("components", {}).setdefault("schemas", {})
    if "User" in components:
        components["User"].setdefault("properties", {}).update(copy.deepcopy(USER_DESCRIBED_FIELDS))
    if "Statistics" in components:
        components["Statistics"].setdefault("properties", {}).update(copy.deepcopy(STATISTICS_DESCRIBED_FIELDS))

    return schema


def install_openapi(app: FastAPI) -> None:
    """Serve the extended schema from ``/openapi.json`` and ``/docs``."""

    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema is None:
            app.openapi_schema = build_openapi_schema(app)
        return app.openapi_schema

    app.openapi = custom_openapi
