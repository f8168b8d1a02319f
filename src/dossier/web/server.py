from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dossier.app import App
from dossier.config import Config
from dossier.errors import StorageError, UserError
from dossier.web.error_handlers import general_exception_handler, storage_error_handler, user_error_handler
from dossier.web.middleware import AccessGateMiddleware
from dossier.web.openapi import set_custom_openapi
from dossier.web.routers import auth_router, files_router, projects_router, session_router, uploads_router


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        app.state.app = app_instance
        app.state.config = config
        async with app_instance.lifespan():
            yield

    app = FastAPI(
        title="Dossier API",
        lifespan=lifespan,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
        openapi_url="/openapi.json" if config.debug else None,
    )

    app.add_middleware(AccessGateMiddleware, app_instance=app_instance, include_docs=config.debug)

    # Added last so CORS preflight is answered before the gate
    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    app.include_router(auth_router, prefix="/api")
    app.include_router(session_router, prefix="/api")
    app.include_router(projects_router, prefix="/api")
    app.include_router(uploads_router, prefix="/api")
    app.include_router(files_router)

    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    set_custom_openapi(app)

    return app
