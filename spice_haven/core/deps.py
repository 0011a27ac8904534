"""
Request dependencies: the session-cookie authorization gate.
"""
from typing import Optional

from fastapi import Depends, HTTPException, Request, status

from spice_haven.core.config import get_settings
from spice_haven.core.security import decode_session_token
from spice_haven.db.session import get_store
from spice_haven.db.store import DataStore
from spice_haven.schemas.auth import User


def get_session_token(request: Request) -> Optional[str]:
    """Raw session token from the cookie, if any."""
    return request.cookies.get(get_settings().SESSION_COOKIE_NAME)


def get_optional_user(
    token: Optional[str] = Depends(get_session_token),
    store: DataStore = Depends(get_store),
) -> Optional[User]:
    """
    Resolve the logged-in user, or None.

    A session is valid when the token signature and expiry check out, it
    hasn't been revoked by logout, and the user still exists.
    """
    if not token:
        return None

    payload = decode_session_token(token)
    if payload is None:
        return None

    if store.revoked_sessions.is_revoked(token):
        return None

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        return None

    return store.users.get_by_id(user_id)


def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """Require an authenticated session."""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return user
