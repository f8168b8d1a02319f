import structlog

from dossier.core.core import Service
from dossier.core.modules.session.codec import sign_token, verify_token
from dossier.core.modules.session.models import SESSION_TTL_SECONDS, AuthToken, IssuedToken, Role, SessionPayload
from dossier.utils import now_ms

logger = structlog.get_logger(__name__)


class SessionService(Service):
    """Issues and verifies stateless signed session tokens."""

    def issue(self, username: str, role: Role) -> IssuedToken:
        payload = SessionPayload(username=username, role=role, expires_at=now_ms() + SESSION_TTL_SECONDS * 1000)
        token = AuthToken(sign_token(payload, self.config.token_secret))
        logger.debug("session_issued", username=username, role=role.value, expires_at=payload.expires_at)
        return IssuedToken(token=token, payload=payload)

    def decode(self, auth_token: AuthToken | None) -> SessionPayload | None:
        """Return the session for a token, or None if it is missing, forged or expired."""
        if not auth_token:
            return None
        return verify_token(auth_token, self.config.token_secret)
