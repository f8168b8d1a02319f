"""Session token models."""

from enum import StrEnum
from typing import NewType

from pydantic import BaseModel, ConfigDict, Field

AuthToken = NewType("AuthToken", str)

SESSION_COOKIE_NAME = "session_token"
SESSION_TTL_SECONDS = 8 * 60 * 60


class Role(StrEnum):
    OWNER = "owner"
    VIEWER = "viewer"


class SessionPayload(BaseModel):
    """Claims carried inside a signed session token.

    Serialized with the short keys ``u``, ``r`` and ``exp`` to keep the cookie compact.
    """

    username: str = Field(alias="u")
    role: Role = Field(alias="r")
    expires_at: int = Field(alias="exp", description="Expiry, milliseconds since epoch")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def is_expired(self, now_ms: int) -> bool:
        return now_ms >= self.expires_at


class IssuedToken(BaseModel):
    token: AuthToken
    payload: SessionPayload


class SessionUser(BaseModel):
    """Authenticated principal (API representation)."""

    username: str = Field(..., description="Username")
    role: Role = Field(..., description="Authorization level")


class SessionView(BaseModel):
    """Current session (API representation)."""

    user: SessionUser
    exp: int = Field(..., description="Session expiry, milliseconds since epoch")

    @classmethod
    def from_payload(cls, payload: SessionPayload) -> "SessionView":
        return cls(user=SessionUser(username=payload.username, role=payload.role), exp=payload.expires_at)
