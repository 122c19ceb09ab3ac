from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field

# Routes reachable without a session (OPTIONS is answered before routing)
PUBLIC_ENDPOINTS = {
    ("POST", "/api/auth/login"),
    ("GET", "/api/auth/check"),
    ("POST", "/api/auth/logout"),
    ("GET", "/health"),
}


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="BlogDesk API",
            version="0.1.0",
            summary="Password-gated article management backend",
            routes=app.routes,
        )

        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "SessionHeader": {
                "type": "apiKey",
                "in": "header",
                "name": "X-Session-Id",
                "description": "Session id returned by /api/auth/login, valid for a limited time",
            },
        }
        openapi_schema["security"] = [{"SessionHeader": []}]

        for path, path_item in openapi_schema["paths"].items():
            for method, operation in path_item.items():
                if (method.upper(), path) in PUBLIC_ENDPOINTS:
                    operation["security"] = []

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"error": "Wrong password", "type": "invalid_credentials"},
                {"error": "Please log in first", "type": "authentication_error"},
                {"error": "Database not configured. Set BLOGDESK_DATABASE_URL to enable articles.", "type": "not_configured"},
            ]
        }
    }


class SuccessResponse(BaseModel):
    success: bool = Field(True, description="Always true on success")
