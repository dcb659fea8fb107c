"""Credential store (bcrypt) and token service (JWT, HS256)."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import JWTError, jwt

from taskboard.core.config import settings
from taskboard.core.errors import ConfigurationError

TOKEN_TTL = timedelta(hours=24)

# bcrypt ne prend en compte que les 72 premiers octets
BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode()[:BCRYPT_MAX_BYTES], salt).decode()


def verify_password(password: str, password_hash: str) -> bool:
    # un mismatch n'est pas une exception, c'est à l'appelant de décider
    return bcrypt.checkpw(password.encode()[:BCRYPT_MAX_BYTES], password_hash.encode())


def _signing_key() -> str:
    if not settings.JWT_SECRET:
        raise ConfigurationError("JWT_SECRET is not configured")
    return settings.JWT_SECRET


def create_access_token(email: str, now: Optional[datetime] = None) -> str:
    """Signed token whose subject is the user's email, valid for 24 hours."""
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "sub": email,
        "iat": issued_at,
        "exp": issued_at + TOKEN_TTL,
    }
    return jwt.encode(payload, _signing_key(), algorithm=settings.JWT_ALGORITHM)


def _decode(token: str) -> dict:
    return jwt.decode(token, _signing_key(), algorithms=[settings.JWT_ALGORITHM])


def verified_subject(token: str) -> Optional[str]:
    """Subject of a well-formed, unexpired HS256 token, None otherwise.

    Never raises for a bad token: malformed input, a wrong signature, an
    expired token or another algorithm all come back as None. The token is
    decoded once, so the answer cannot change between check and read.
    """
    try:
        payload = _decode(token)
    except JWTError:
        return None
    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        return None
    return subject


def validate_token(token: str) -> bool:
    return verified_subject(token) is not None


def extract_subject(token: str) -> str:
    # toujours appeler validate_token avant
    return _decode(token)["sub"]
