from typing import Annotated, cast

from fastapi import Depends, Request
from fastapi.security import APIKeyCookie, HTTPAuthorizationCredentials, HTTPBearer

from dossier.app import App
from dossier.core.modules.session.models import SESSION_COOKIE_NAME, AuthToken

# Security schemes
bearer_scheme = HTTPBearer(auto_error=False)
cookie_scheme = APIKeyCookie(name=SESSION_COOKIE_NAME, auto_error=False)


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_auth_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)] = None,
    token_cookie: Annotated[str | None, Depends(cookie_scheme)] = None,
) -> AuthToken | None:
    """Get raw token from Authorization Bearer header or cookie; App verifies it per operation."""
    if credentials and credentials.scheme.lower() == "bearer" and credentials.credentials:
        return AuthToken(credentials.credentials)
    if token_cookie:
        return AuthToken(token_cookie)
    return None


def read_auth_token(request: Request) -> AuthToken | None:
    """Same lookup as get_auth_token, for code running outside dependency injection."""
    scheme, _, value = request.headers.get("authorization", "").partition(" ")
    if scheme.lower() == "bearer" and value.strip():
        return AuthToken(value.strip())
    token_cookie = request.cookies.get(SESSION_COOKIE_NAME)
    return AuthToken(token_cookie) if token_cookie else None


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
AuthTokenDep = Annotated[AuthToken | None, Depends(get_auth_token)]
