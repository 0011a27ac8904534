"""
Auth-related Pydantic schemas for request/response validation.
"""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


UserRole = Literal["admin", "staff"]


class User(BaseModel):
    """Stored admin account. Never returned as-is by the API."""
    id: int
    username: str
    password: str  # bcrypt hash
    role: UserRole


class UserLogin(BaseModel):
    """Schema for login request."""
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserCreate(BaseModel):
    """Schema for creating another admin account."""
    username: str = Field(min_length=3, max_length=50)
    password: str = Field(min_length=8)
    role: UserRole = "staff"


class UserResponse(BaseModel):
    """Schema for user response (without password)."""
    id: int
    username: str
    role: str

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(BaseModel):
    message: str
    user: UserResponse


class AuthCheckResponse(BaseModel):
    authenticated: bool
    user: Optional[UserResponse] = None


class MessageResponse(BaseModel):
    message: str
