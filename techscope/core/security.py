"""Password hashing and auth token creation/verification."""

import base64
import hashlib
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

from techscope.core.config import get_settings

if TYPE_CHECKING:
    from techscope.core.config import Settings

# bcrypt only reads the first 72 bytes of its input.
BCRYPT_MAX_BYTES = 72


def _password_bytes(plain_password: str) -> bytes:
    """
    Encode a password for bcrypt.

    Passwords longer than bcrypt's limit are reduced to a base64 SHA-256 digest
    so that two long passwords sharing a 72-byte prefix still hash differently.
    Shorter passwords are passed through unchanged (plain bcrypt digests).
    """
    pw_bytes = plain_password.encode("utf-8")
    if len(pw_bytes) > BCRYPT_MAX_BYTES:
        pw_bytes = base64.b64encode(hashlib.sha256(pw_bytes).digest())
    return pw_bytes


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    if rounds is None:
        rounds = get_settings().BCRYPT_ROUNDS
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_password_bytes(plain_password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_auth_token(
    user_id: int | str,
    is_admin: bool,
    settings: "Settings | None" = None,
) -> str:
    """Create a signed token whose payload is exactly {id, isAdmin}. No exp claim."""
    settings = settings or get_settings()
    payload: dict[str, Any] = {"id": user_id, "isAdmin": bool(is_admin)}
    return jwt.encode(
        payload,
        settings.JWT_PRIVATE_KEY.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_auth_token(token: str, settings: "Settings | None" = None) -> dict[str, Any]:
    """
    Verify the token signature and return its claims (id, isAdmin).
    Raises jwt.PyJWTError on a bad signature or malformed token.
    """
    settings = settings or get_settings()
    return jwt.decode(
        token,
        settings.JWT_PRIVATE_KEY.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
    )
