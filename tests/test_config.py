"""
Tests for settings validation.
"""
import pytest
from pydantic import ValidationError

from spice_haven.core.config import Settings


STRONG_KEY = "k" * 40


def test_rejects_insecure_default_secret():
    with pytest.raises(ValidationError) as exc_info:
        Settings(SESSION_SECRET_KEY="spice-haven-secret")

    assert "insecure default" in str(exc_info.value)


def test_rejects_short_secret():
    with pytest.raises(ValidationError) as exc_info:
        Settings(SESSION_SECRET_KEY="short-but-not-default")

    assert "at least 32 characters" in str(exc_info.value)


def test_accepts_strong_secret():
    settings = Settings(SESSION_SECRET_KEY=STRONG_KEY)

    assert settings.SESSION_SECRET_KEY == STRONG_KEY
    assert settings.SESSION_EXPIRE_MINUTES == 24 * 60


@pytest.mark.parametrize("rounds", [3, 32])
def test_rejects_out_of_range_bcrypt_rounds(rounds):
    with pytest.raises(ValidationError):
        Settings(SESSION_SECRET_KEY=STRONG_KEY, BCRYPT_ROUNDS=rounds)
