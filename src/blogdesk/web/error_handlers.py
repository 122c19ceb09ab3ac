import structlog
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from blogdesk.errors import (
    AuthenticationError,
    InvalidCredentialsError,
    InvalidRequestBodyError,
    NotConfiguredError,
    NotFoundError,
    UpstreamError,
    UserError,
    ValidationError,
)
from blogdesk.web.cors import cors_headers

logger = structlog.get_logger(__name__)

# Checked in order; the first matching class wins
USER_ERROR_STATUS: list[tuple[type[UserError], int, str]] = [
    (InvalidRequestBodyError, 400, "invalid_request_body"),
    (ValidationError, 400, "validation_error"),
    (InvalidCredentialsError, 401, "invalid_credentials"),
    (AuthenticationError, 401, "authentication_error"),
    (NotFoundError, 404, "not_found"),
    (NotConfiguredError, 501, "not_configured"),
    (UpstreamError, 502, "upstream_error"),
]


def create_json_error_response(request: Request, status_code: int, message: str, error_type: str) -> JSONResponse:
    """Create JSON error response carrying CORS headers so browsers can read it."""
    return JSONResponse(
        status_code=status_code,
        content={"error": message, "type": error_type},
        headers=cors_headers(request),
    )


async def user_error_handler(request: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses with appropriate status codes."""
    status_code, error_type = 400, "bad_request"
    for error_class, code, name in USER_ERROR_STATUS:
        if isinstance(exc, error_class):
            status_code, error_type = code, name
            break
    return create_json_error_response(request, status_code, str(exc), error_type)


async def request_validation_error_handler(request: Request, exc: Exception) -> Response:
    """Map malformed JSON and body/path schema failures to 400."""
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    if any(error.get("type") == "json_invalid" for error in errors):
        message = "Invalid JSON"
    else:
        message = "Invalid request body"
    logger.debug("request_validation_failed", path=request.url.path, errors=errors)
    return create_json_error_response(request, 400, message, "invalid_request_body")


async def http_exception_handler(request: Request, exc: Exception) -> Response:
    """Framework-level HTTP errors (unmatched route, wrong method) in the common error shape."""
    status_code = exc.status_code if isinstance(exc, StarletteHTTPException) else 500
    detail = exc.detail if isinstance(exc, StarletteHTTPException) else str(exc)
    error_type = "not_found" if status_code == 404 else "http_error"
    return create_json_error_response(request, status_code, str(detail), error_type)


async def general_exception_handler(request: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500). The exception message is exposed to the caller."""
    logger.exception("unexpected_error", path=request.url.path, error=str(exc))
    return create_json_error_response(request, 500, str(exc) or "Server error", "internal_server_error")
