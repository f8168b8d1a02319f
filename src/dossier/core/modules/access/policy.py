"""Role policy: which operations a session may perform.

Pure functions of (session, operation); no state and no per-user overrides.
"""

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from dossier.core.modules.session.models import Role, SessionPayload
from dossier.errors import AccessDeniedError, AuthenticationError


class Operation(StrEnum):
    READ_SESSION = "read_session"
    LIST_PROJECTS = "list_projects"
    CREATE_PROJECT = "create_project"
    UPDATE_PROJECT = "update_project"
    DELETE_PROJECT = "delete_project"
    UPLOAD_FILE = "upload_file"
    DOWNLOAD_FILE = "download_file"


REQUIRED_ROLE: Mapping[Operation, Role] = MappingProxyType(
    {
        Operation.READ_SESSION: Role.VIEWER,
        Operation.LIST_PROJECTS: Role.VIEWER,
        Operation.DOWNLOAD_FILE: Role.VIEWER,
        Operation.CREATE_PROJECT: Role.OWNER,
        Operation.UPDATE_PROJECT: Role.OWNER,
        Operation.DELETE_PROJECT: Role.OWNER,
        Operation.UPLOAD_FILE: Role.OWNER,
    }
)

_ROLE_RANK = {Role.VIEWER: 1, Role.OWNER: 2}

# Reachable without a session
PUBLIC_PATHS = frozenset({"/api/login", "/api/logout", "/health", "/favicon.ico", "/robots.txt"})
DOCS_PATHS = frozenset({"/docs", "/docs/oauth2-redirect", "/redoc", "/openapi.json"})


def has_role(role: Role, required: Role) -> bool:
    return _ROLE_RANK[role] >= _ROLE_RANK[required]


def authorize(session: SessionPayload | None, operation: Operation) -> SessionPayload:
    """Return the session if it may perform the operation.

    Raises:
        AuthenticationError: No valid session
        AccessDeniedError: Valid session with insufficient role
    """
    if session is None:
        raise AuthenticationError("Login required")
    required = REQUIRED_ROLE[operation]
    if not has_role(session.role, required):
        raise AccessDeniedError(f"Role '{required.value}' required for {operation.value}")
    return session


def is_public_path(path: str, include_docs: bool = False) -> bool:
    if path in PUBLIC_PATHS:
        return True
    return include_docs and path in DOCS_PATHS
