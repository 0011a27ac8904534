"""
Unit tests for security utilities.
"""
import pytest
from datetime import timedelta

from jose import jwt

from spice_haven.core.config import get_settings
from spice_haven.core.security import (
    create_session_token,
    decode_session_token,
    hash_password,
    hash_token,
    token_expiry,
    verify_password,
)


class TestPasswordHashing:
    """Tests for password hashing functions."""

    def test_hash_password(self):
        """Test that password hashing produces a hash."""
        password = "mysecretpassword"
        hashed = hash_password(password)

        assert hashed != password
        assert len(hashed) > 20  # bcrypt hashes are long

    def test_hash_password_different_each_time(self):
        """Test that hashing same password produces different hashes."""
        password = "mysecretpassword"

        assert hash_password(password) != hash_password(password)  # Different salts

    def test_verify_password_correct(self):
        hashed = hash_password("mysecretpassword")

        assert verify_password("mysecretpassword", hashed) is True

    def test_verify_password_incorrect(self):
        hashed = hash_password("mysecretpassword")

        assert verify_password("wrongpassword", hashed) is False

    def test_verify_password_malformed_hash(self):
        """A plaintext value in place of a hash never verifies."""
        assert verify_password("admin123", "admin123") is False


class TestSessionTokens:
    """Tests for session token functions."""

    def test_create_and_decode(self):
        token = create_session_token(subject=7, username="admin", role="admin")
        payload = decode_session_token(token)

        assert payload is not None
        assert payload["sub"] == "7"
        assert payload["username"] == "admin"
        assert payload["role"] == "admin"
        assert payload["type"] == "session"

    def test_tokens_are_unique(self):
        first = create_session_token(subject=1, username="admin", role="admin")
        second = create_session_token(subject=1, username="admin", role="admin")

        assert first != second

    def test_expired_token_rejected(self):
        token = create_session_token(
            subject=1, username="admin", role="admin", expires_delta=timedelta(seconds=-1)
        )

        assert decode_session_token(token) is None

    def test_garbage_token_rejected(self):
        assert decode_session_token("invalid.token.here") is None

    def test_wrong_token_type_rejected(self):
        settings = get_settings()
        token = jwt.encode(
            {"sub": "1", "type": "refresh"},
            settings.SESSION_SECRET_KEY,
            algorithm=settings.SESSION_ALGORITHM,
        )

        assert decode_session_token(token) is None

    def test_token_signed_with_other_key_rejected(self):
        token = jwt.encode({"sub": "1", "type": "session"}, "x" * 40, algorithm="HS256")

        assert decode_session_token(token) is None

    def test_token_expiry(self):
        token = create_session_token(
            subject=1, username="admin", role="admin", expires_delta=timedelta(minutes=5)
        )
        expires_at = token_expiry(decode_session_token(token))

        assert expires_at is not None
        assert expires_at.tzinfo is not None

    def test_hash_token_is_stable(self):
        assert hash_token("abc") == hash_token("abc")
        assert hash_token("abc") != hash_token("abd")
