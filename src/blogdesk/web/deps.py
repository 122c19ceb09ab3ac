from typing import Annotated, cast

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from blogdesk.app import App
from blogdesk.errors import AuthenticationError

SESSION_HEADER = "X-Session-Id"

# Security scheme
session_header_scheme = APIKeyHeader(name=SESSION_HEADER, auto_error=False)


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_optional_session_id(
    session_id: Annotated[str | None, Depends(session_header_scheme)] = None,
) -> str | None:
    """Session id from the X-Session-Id header, if any."""
    return session_id or None


async def get_session_id(session_id: Annotated[str | None, Depends(get_optional_session_id)]) -> str:
    """Session id for protected routes. A missing header is treated as an invalid session."""
    if session_id is None:
        raise AuthenticationError
    return session_id


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
OptionalSessionIdDep = Annotated[str | None, Depends(get_optional_session_id)]
SessionIdDep = Annotated[str, Depends(get_session_id)]
