"""
Authentication router with login, logout, session check and account creation.

The session is a signed token in an HttpOnly cookie.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from spice_haven.core.config import get_settings
from spice_haven.core.deps import get_current_user, get_optional_user, get_session_token
from spice_haven.core.security import (
    create_session_token,
    decode_session_token,
    hash_password,
    token_expiry,
    verify_password,
)
from spice_haven.db.session import get_store
from spice_haven.db.store import DataStore, UsernameTakenError
from spice_haven.schemas.auth import (
    AuthCheckResponse,
    LoginResponse,
    MessageResponse,
    User,
    UserCreate,
    UserLogin,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _public_user(user: User) -> UserResponse:
    return UserResponse(id=user.id, username=user.username, role=user.role)


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: UserLogin,
    response: Response,
    store: DataStore = Depends(get_store),
) -> LoginResponse:
    """
    Authenticate a staff member and start a session.
    """
    user = store.users.get_by_username(credentials.username)
    if not user or not verify_password(credentials.password, user.password):
        logger.warning(f"Failed login attempt for username '{credentials.username}'")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    settings = get_settings()
    token = create_session_token(subject=user.id, username=user.username, role=user.role)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    logger.info(f"User '{user.username}' logged in")

    return LoginResponse(message="Login successful", user=_public_user(user))


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    store: DataStore = Depends(get_store),
) -> MessageResponse:
    """
    End the session.

    The token is revoked until it would have expired so a copied cookie can't
    be replayed.
    """
    if token:
        payload = decode_session_token(token)
        expires_at = token_expiry(payload) if payload else None
        if expires_at:
            store.revoked_sessions.revoke(token, expires_at)
        store.revoked_sessions.purge_expired()

    response.delete_cookie(get_settings().SESSION_COOKIE_NAME)
    return MessageResponse(message="Logged out successfully")


@router.get("/auth/check", response_model=AuthCheckResponse, response_model_exclude_none=True)
def check_auth(user: Optional[User] = Depends(get_optional_user)) -> AuthCheckResponse:
    """Report whether the caller has a valid session."""
    if user is None:
        return AuthCheckResponse(authenticated=False)
    return AuthCheckResponse(authenticated=True, user=_public_user(user))


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserCreate,
    current_user: User = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> UserResponse:
    """
    Create another admin console account.
    """
    try:
        user = store.users.create({
            "username": user_data.username,
            "password": hash_password(user_data.password),
            "role": user_data.role,
        })
    except UsernameTakenError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already taken",
        )

    logger.info(f"User '{current_user.username}' created account '{user.username}'")
    return _public_user(user)
