"""
Reservation Pydantic schemas for API request/response models.
"""
from datetime import date, datetime
from typing import Dict, Literal, Optional

from pydantic import EmailStr, Field, field_validator

from spice_haven.schemas.base import CamelModel


ReservationStatus = Literal["pending", "confirmed", "cancelled"]

MIN_GUESTS = 1
MAX_GUESTS = 20


class ReservationCreate(CamelModel):
    """
    Request model for the public reservation form.

    status and createdAt are not part of the payload; the store sets them.
    Unknown keys (including those two) are ignored.
    """
    name: str = Field(min_length=1)
    email: EmailStr
    phone: str = Field(min_length=1)
    date: str  # "YYYY-MM-DD"
    time: str  # "HH:MM", 24h
    guests: int = Field(ge=MIN_GUESTS, le=MAX_GUESTS)
    occasion: Optional[str] = None
    message: Optional[str] = None

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        try:
            parsed = date.fromisoformat(v)
        except ValueError:
            raise ValueError("date must be a calendar date in YYYY-MM-DD format")
        # fromisoformat also accepts compact forms like 20240601
        if parsed.isoformat() != v:
            raise ValueError("date must be a calendar date in YYYY-MM-DD format")
        return v

    @field_validator("time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        parts = v.split(":")
        if len(parts) != 2 or not all(len(p) == 2 and p.isascii() and p.isdigit() for p in parts):
            raise ValueError("time must be in HH:MM format")
        h, m = int(parts[0]), int(parts[1])
        if not (0 <= h <= 23 and 0 <= m <= 59):
            raise ValueError("time must be in HH:MM format. Hours must be 0-23, minutes 0-59.")
        return v


class Reservation(ReservationCreate):
    """A stored reservation."""
    id: int
    status: ReservationStatus = "pending"
    created_at: datetime


class ReservationStatusUpdate(CamelModel):
    """Request model for PUT /reservations/{id}/status."""
    status: ReservationStatus


class ReservationSummary(CamelModel):
    """Counts backing the admin dashboard."""
    total: int
    by_status: Dict[str, int]
    today: int
    upcoming: int
