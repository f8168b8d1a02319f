import base64
import hashlib

import bcrypt
import structlog

from dossier.config import Config
from dossier.core.core import Service
from dossier.core.modules.session.models import Role
from dossier.core.modules.user.models import Account
from dossier.errors import AuthenticationError

logger = structlog.get_logger(__name__)


def _password_bytes(password: str) -> bytes:
    """SHA-256 digest, base64 encoded: 44 bytes, under bcrypt's 72-byte input limit."""
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def hash_password(password: str) -> str:
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt()).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))


class UserService(Service):
    """Holds the configured owner and viewer logins."""

    def __init__(self, config: Config) -> None:
        super().__init__(config)
        self._accounts: list[Account] = []

    def load_accounts(self) -> None:
        """Hash the configured credentials; owner first so it wins when both pairs match."""
        accounts = [
            Account(
                username=self.config.owner_username,
                password_hash=hash_password(self.config.owner_password),
                role=Role.OWNER,
            )
        ]
        if self.config.viewer_username and self.config.viewer_password:
            accounts.append(
                Account(
                    username=self.config.viewer_username,
                    password_hash=hash_password(self.config.viewer_password),
                    role=Role.VIEWER,
                )
            )
        self._accounts = accounts

    def authenticate(self, username: str, password: str) -> Account:
        """Return the first configured account matching the credentials."""
        for account in self._accounts:
            if account.username == username and check_password(password, account.password_hash):
                return account
        logger.info("login_failed", username=username)
        raise AuthenticationError("Invalid credentials")

    async def on_start(self) -> None:
        self.load_accounts()
        logger.debug("user_service_started", account_count=len(self._accounts))
