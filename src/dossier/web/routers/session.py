from fastapi import APIRouter

from dossier.core.modules.session.models import SessionView
from dossier.web.deps import AppDep, AuthTokenDep
from dossier.web.openapi import ErrorResponse

router = APIRouter(tags=["auth"])


@router.get(
    "/session",
    summary="Get current session",
    description="Get username, role and expiry of the current session.",
    operation_id="getSession",
    responses={
        200: {"description": "Current session"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def get_session(app: AppDep, auth_token: AuthTokenDep) -> SessionView:
    payload = await app.get_session(auth_token)
    return SessionView.from_payload(payload)
