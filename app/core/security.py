"""Password hashing and JWT access/refresh token creation and verification."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt
from pydantic import SecretStr

from app.core.config import settings
from app.schemas.auth import TokenPair

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

PASSWORD_MIN_LEN = 1
PASSWORD_MAX_LEN = 128


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """
    Verify a plain password against a stored hash.

    Returns False on mismatch. A malformed stored hash raises ValueError.
    """
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))


def _encode(sub: str, secret: SecretStr, expire_minutes: int) -> str:
    now = datetime.now(UTC)
    payload: dict[str, Any] = {
        "sub": str(sub),
        "exp": now + timedelta(minutes=expire_minutes),
        "iat": now,
    }
    return jwt.encode(
        payload,
        secret.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def create_access_token(sub: str) -> str:
    """Create a short-lived JWT access token carrying the user id as sub."""
    return _encode(sub, settings.JWT_ACCESS_SECRET, settings.ACCESS_TOKEN_EXPIRE_MINUTES)


def create_refresh_token(sub: str) -> str:
    """Create a longer-lived JWT refresh token, signed with the refresh secret."""
    return _encode(sub, settings.JWT_REFRESH_SECRET, settings.REFRESH_TOKEN_EXPIRE_MINUTES)


def generate_tokens(user_id: str) -> TokenPair:
    return TokenPair(
        access_token=create_access_token(user_id),
        refresh_token=create_refresh_token(user_id),
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate an access JWT; return payload (sub, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    return jwt.decode(
        token,
        settings.JWT_ACCESS_SECRET.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
    )


def decode_refresh_token(token: str) -> dict[str, Any]:
    """Decode and validate a refresh JWT. Raises jwt.PyJWTError on invalid or expired token."""
    return jwt.decode(
        token,
        settings.JWT_REFRESH_SECRET.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
    )
