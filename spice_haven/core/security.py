"""
Security utilities for password hashing and session token handling.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Optional
import hashlib
import uuid

import bcrypt
from jose import jwt, JWTError

from spice_haven.core.config import get_settings


def hash_token(token: str) -> str:
    """
    Hash a session token for storage in the revocation registry.

    Only the digest is kept so a dump of the registry can't be replayed.
    """
    return hashlib.sha256(token.encode()).hexdigest()


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    rounds = get_settings().BCRYPT_ROUNDS
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds=rounds)).decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    try:
        return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))
    except ValueError:
        # Malformed hash
        return False


def create_session_token(
    subject: str | Any,
    username: str,
    role: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed session token for the session cookie."""
    settings = get_settings()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.SESSION_EXPIRE_MINUTES)

    to_encode = {
        "sub": str(subject),
        "username": username,
        "role": role,
        "exp": expire,
        "jti": uuid.uuid4().hex,
        "type": "session",
    }
    return jwt.encode(to_encode, settings.SESSION_SECRET_KEY, algorithm=settings.SESSION_ALGORITHM)


def decode_session_token(token: str) -> Optional[dict]:
    """Decode and validate a session token. Returns payload or None if invalid."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.SESSION_SECRET_KEY, algorithms=[settings.SESSION_ALGORITHM])
    except JWTError:
        return None

    if payload.get("type") != "session":
        return None
    return payload


def token_expiry(payload: dict) -> Optional[datetime]:
    """Expiry of a decoded token as an aware datetime."""
    exp_timestamp = payload.get("exp")
    if exp_timestamp is None:
        return None
    return datetime.fromtimestamp(exp_timestamp, tz=timezone.utc)
