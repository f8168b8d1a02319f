"""Signed session tokens.

A token is ``<payload>.<signature>`` where ``payload`` is the URL-safe base64
encoding (no padding) of compact JSON claims and ``signature`` is the URL-safe
base64 HMAC-SHA256 of the payload text, keyed by a shared secret. The payload
is readable by anyone holding the token; the signature only makes it
tamper-evident.
"""

import base64
import binascii
import hashlib
import hmac
import json

import pydantic

from dossier.core.modules.session.models import SessionPayload
from dossier.utils import now_ms as current_ms


def b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(text: str) -> bytes:
    padded = text + "=" * (-len(text) % 4)
    return base64.b64decode(padded, altchars=b"-_", validate=True)


def compute_signature(b64: str, secret: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), b64.encode("utf-8"), hashlib.sha256).digest()
    return b64url_encode(digest)


def sign_token(payload: SessionPayload, secret: str) -> str:
    """Encode and sign the payload."""
    claims = payload.model_dump(mode="json", by_alias=True)
    raw = json.dumps(claims, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    b64 = b64url_encode(raw)
    return f"{b64}.{compute_signature(b64, secret)}"


def verify_token(token: str, secret: str, now_ms: int | None = None) -> SessionPayload | None:
    """Return the payload of a well-signed, unexpired token, or None."""
    b64, _, sig = token.partition(".")
    if not b64 or not sig:
        return None

    expected = compute_signature(b64, secret)
    if not hmac.compare_digest(expected.encode("ascii"), sig.encode("ascii", errors="replace")):
        return None

    try:
        claims = json.loads(b64url_decode(b64).decode("utf-8"))
        payload = SessionPayload.model_validate(claims)
    except (binascii.Error, UnicodeDecodeError, ValueError, pydantic.ValidationError):
        return None

    if payload.is_expired(current_ms() if now_ms is None else now_ms):
        return None
    return payload
