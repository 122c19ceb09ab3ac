from fastapi import APIRouter
from pydantic import BaseModel, Field

from blogdesk.web.deps import AppDep, OptionalSessionIdDep
from blogdesk.web.openapi import ErrorResponse, SuccessResponse

router = APIRouter(tags=["auth"])


class LoginRequest(BaseModel):
    """Authentication request."""

    password: str | None = Field(None, description="Shared access password")


class LoginResponse(BaseModel):
    """Authentication response."""

    success: bool = Field(True, description="Always true on success")
    session_id: str = Field(..., serialization_alias="sessionId", description="Send as X-Session-Id on later requests")
    expires_at: int = Field(..., serialization_alias="expiresAt", description="Session expiry, unix seconds")


class CheckResponse(BaseModel):
    authenticated: bool = Field(..., description="Whether the X-Session-Id header holds a live session")


@router.post(
    "/auth/login",
    summary="Log in",
    description="Exchange the shared access password for a short-lived session id.",
    operation_id="login",
    responses={
        200: {"description": "Session created"},
        400: {"model": ErrorResponse, "description": "Malformed request body"},
        401: {"model": ErrorResponse, "description": "Wrong password"},
    },
)
async def login(login_data: LoginRequest, app: AppDep) -> LoginResponse:
    session = await app.login(login_data.password)
    return LoginResponse(session_id=session.id, expires_at=session.expires_at)


@router.get(
    "/auth/check",
    summary="Check session",
    description="Report whether the session in X-Session-Id is valid. Never fails.",
    operation_id="checkSession",
)
async def check_session(app: AppDep, session_id: OptionalSessionIdDep) -> CheckResponse:
    return CheckResponse(authenticated=await app.is_session_valid(session_id))


@router.post(
    "/auth/logout",
    summary="Log out",
    description="Revoke the session in X-Session-Id. Unknown or missing sessions are ignored.",
    operation_id="logout",
)
async def logout(app: AppDep, session_id: OptionalSessionIdDep) -> SuccessResponse:
    await app.logout(session_id)
    return SuccessResponse()
