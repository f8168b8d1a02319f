from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field

from dossier.core.modules.access.policy import PUBLIC_PATHS
from dossier.core.modules.session.models import SESSION_COOKIE_NAME


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="Dossier API",
            version="0.1.0",
            summary="Gated document library for a personal application site",
            routes=app.routes,
        )

        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "SessionCookie": {
                "type": "apiKey",
                "in": "cookie",
                "name": SESSION_COOKIE_NAME,
                "description": "Signed session token set by login",
            },
            "BearerAuth": {
                "type": "http",
                "scheme": "bearer",
                "description": "Same token in an Authorization header",
            },
        }

        # Apply security globally (will be overridden for public endpoints)
        openapi_schema["security"] = [
            {"SessionCookie": []},
            {"BearerAuth": []},
        ]

        for path, path_item in openapi_schema["paths"].items():
            if path in PUBLIC_PATHS:
                for operation in path_item.values():
                    operation["security"] = []

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"message": "Invalid credentials", "type": "authentication_error"},
                {"message": "Project not found: 0f8e...", "type": "not_found"},
                {"message": "Role 'owner' required for create_project", "type": "access_denied"},
            ]
        }
    }
