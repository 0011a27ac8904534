"""
Application configuration using Pydantic Settings.
"""
from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings


# List of known insecure default secrets that should never be used
INSECURE_DEFAULTS = {
    "spice-haven-secret",
    "your-super-secret-key-change-in-production",
    "secret",
    "changeme",
    "test",
    "dev",
    "development",
    "password",
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Spice Haven API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Session cookie (signed JWT)
    SESSION_SECRET_KEY: str = "spice-haven-secret"
    SESSION_ALGORITHM: str = "HS256"
    SESSION_EXPIRE_MINUTES: int = 24 * 60
    SESSION_COOKIE_NAME: str = "spice_haven_session"
    SESSION_COOKIE_SECURE: bool = False

    # Password hashing
    BCRYPT_ROUNDS: int = 12

    # Seed data
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin123"
    SEED_DEFAULT_DATA: bool = True

    @field_validator("SESSION_SECRET_KEY")
    @classmethod
    def validate_session_secret(cls, v: str) -> str:
        """
        Validate the session signing key is secure.

        Requirements:
        - At least 32 characters
        - Not a known insecure default
        """
        if v.lower() in INSECURE_DEFAULTS:
            raise ValueError(
                "SESSION_SECRET_KEY is set to an insecure default value. "
                "Please set a strong secret key via environment variable. "
                "Generate one with: python -c 'import secrets; print(secrets.token_urlsafe(32))'"
            )

        if len(v) < 32:
            raise ValueError(
                f"SESSION_SECRET_KEY must be at least 32 characters long (got {len(v)}). "
                "Generate a secure key with: python -c 'import secrets; print(secrets.token_urlsafe(32))'"
            )

        return v

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        # bcrypt only accepts cost factors in this range
        if not 4 <= v <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
