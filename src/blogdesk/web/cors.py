"""Cross-origin headers echoing the caller's Origin.

The Origin is reflected verbatim, not checked against an allow-list.
"""

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization, X-Session-Id"


def cors_headers(request: Request) -> dict[str, str]:
    origin = request.headers.get("origin") or "*"
    headers = {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
    }
    if origin != "*":
        headers["Access-Control-Allow-Credentials"] = "true"
    return headers


class EchoOriginCORSMiddleware(BaseHTTPMiddleware):
    """Answer every OPTIONS request with 204 before routing and stamp CORS headers on all responses."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=cors_headers(request))
        response = await call_next(request)
        response.headers.update(cors_headers(request))
        return response
