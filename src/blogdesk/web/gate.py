"""Session gate applied before routing and body parsing."""

from collections.abc import Iterable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from blogdesk.app import App
from blogdesk.errors import AuthenticationError
from blogdesk.web.deps import SESSION_HEADER
from blogdesk.web.error_handlers import user_error_handler


class SessionGateMiddleware(BaseHTTPMiddleware):
    """Reject requests without a live session unless their path is public.

    Runs for unmatched paths too, so an unauthenticated caller gets 401 rather than 404,
    and never sees a body parsing error.
    """

    def __init__(self, app: ASGIApp, app_instance: App, public_paths: Iterable[str]) -> None:
        super().__init__(app)
        self.app_instance = app_instance
        self.public_paths = frozenset(public_paths)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method == "OPTIONS" or request.url.path in self.public_paths:
            return await call_next(request)
        session_id = request.headers.get(SESSION_HEADER) or None
        if not await self.app_instance.is_session_valid(session_id):
            return await user_error_handler(request, AuthenticationError())
        return await call_next(request)
