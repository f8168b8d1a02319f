from pydantic import BaseModel

from dossier.core.modules.session.models import Role


class Account(BaseModel):
    """Configured login with its granted role."""

    username: str
    password_hash: str  # bcrypt hash
    role: Role
