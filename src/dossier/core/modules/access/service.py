from dossier.core.core import Service
from dossier.core.modules.access.policy import Operation, authorize
from dossier.core.modules.session.models import AuthToken, SessionPayload


class AccessService(Service):
    def ensure(self, auth_token: AuthToken | None, operation: Operation) -> SessionPayload:
        """Ensure the token's session may perform the operation."""
        session = self.core.services.session.decode(auth_token)
        return authorize(session, operation)
