from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from dossier.core.modules.session.models import SESSION_COOKIE_NAME, SESSION_TTL_SECONDS, SessionUser
from dossier.web.deps import AppDep
from dossier.web.openapi import ErrorResponse

router = APIRouter(tags=["auth"])


class LoginRequest(BaseModel):
    """Authentication request."""

    username: str = Field(..., description="Username for authentication")
    password: str = Field(..., description="Password for authentication")


class LoginResponse(BaseModel):
    """Authentication response."""

    user: SessionUser = Field(..., description="Authenticated user and granted role")
    exp: int = Field(..., description="Session expiry, milliseconds since epoch")


class LogoutResponse(BaseModel):
    ok: bool = True


@router.post(
    "/login",
    summary="Authenticate user",
    description="Check username and password against the configured owner and viewer logins and set the session cookie.",
    operation_id="login",
    responses={
        200: {"description": "Successfully authenticated"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(login_data: LoginRequest, app: AppDep, response: Response) -> LoginResponse:
    issued = await app.login(login_data.username, login_data.password)

    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=issued.token,
        httponly=True,
        samesite="lax",
        secure=app.config.is_production,
        path="/",
        max_age=SESSION_TTL_SECONDS,
    )

    payload = issued.payload
    return LoginResponse(user=SessionUser(username=payload.username, role=payload.role), exp=payload.expires_at)


@router.post(
    "/logout",
    summary="End session",
    description="Overwrite the session cookie with an expired one. Succeeds without a session.",
    operation_id="logout",
    responses={200: {"description": "Session cookie cleared"}},
)
async def logout(app: AppDep, response: Response) -> LogoutResponse:
    response.delete_cookie(
        SESSION_COOKIE_NAME,
        path="/",
        secure=app.config.is_production,
        httponly=True,
        samesite="lax",
    )
    return LogoutResponse()
