from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import RequestResponseEndpoint

from blogdesk.app import App
from blogdesk.config import Config
from blogdesk.errors import UserError
from blogdesk.web.cors import EchoOriginCORSMiddleware
from blogdesk.web.error_handlers import (
    general_exception_handler,
    http_exception_handler,
    request_validation_error_handler,
    user_error_handler,
)
from blogdesk.web.gate import SessionGateMiddleware
from blogdesk.web.openapi import PUBLIC_ENDPOINTS, set_custom_openapi
from blogdesk.web.routers import articles_router, auth_router, upload_router


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        app.state.app = app_instance
        async with app_instance.lifespan():
            yield

    app = FastAPI(
        title="BlogDesk API",
        lifespan=lifespan,
    )

    # Innermost: runs before routing, so unknown paths and malformed bodies are gated too
    docs_paths = [app.docs_url, app.redoc_url, app.openapi_url, app.swagger_ui_oauth2_redirect_url]
    app.add_middleware(
        SessionGateMiddleware,
        app_instance=app_instance,
        public_paths=[path for _, path in PUBLIC_ENDPOINTS] + [path for path in docs_paths if path],
    )

    # Reflects the caller's Origin on every response and answers preflight requests
    app.add_middleware(EchoOriginCORSMiddleware)

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next: RequestResponseEndpoint) -> Response:
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(method=request.method, path=request.url.path)
        return await call_next(request)

    # Health check endpoint (at root level, not under /api)
    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    app.include_router(auth_router, prefix="/api")
    app.include_router(articles_router, prefix="/api")
    app.include_router(upload_router, prefix="/api")

    # Register error handlers
    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    set_custom_openapi(app)

    return app
