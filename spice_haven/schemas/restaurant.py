"""
Restaurant profile schemas: restaurant info and the about section.

Both are singletons written with full-replace upserts.
"""
import json
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from spice_haven.schemas.base import CamelModel


def _validate_string_map(value: str, field_name: str) -> str:
    """Ensure a serialized field holds a JSON object of strings."""
    try:
        parsed = json.loads(value)
    except ValueError:
        raise ValueError(f"{field_name} must be a JSON-encoded object")

    if not isinstance(parsed, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in parsed.items()
    ):
        raise ValueError(f"{field_name} must map names to strings")
    return value


class RestaurantInfoIn(CamelModel):
    """Request body for PUT /restaurant-info."""
    name: str = Field(min_length=1)
    tagline: str = Field(min_length=1)
    description: str = Field(min_length=1)
    address: str = Field(min_length=1)
    city: str = Field(min_length=1)
    state: str = Field(min_length=1)
    zip: str = Field(min_length=1)
    country: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    email: EmailStr
    hours: str  # JSON: {"monday": "11:30 AM - 9:30 PM", ...}
    social_links: str  # JSON: {"facebook": "https://...", ...}

    @field_validator("hours")
    @classmethod
    def validate_hours(cls, v: str) -> str:
        return _validate_string_map(v, "hours")

    @field_validator("social_links")
    @classmethod
    def validate_social_links(cls, v: str) -> str:
        return _validate_string_map(v, "socialLinks")


class RestaurantInfo(RestaurantInfoIn):
    id: int


class AboutSectionIn(CamelModel):
    """Request body for PUT /about."""
    heading: str = Field(min_length=1)
    paragraph1: str = Field(min_length=1)
    paragraph2: str = Field(min_length=1)
    paragraph3: Optional[str] = None
    chef_name: str = Field(min_length=1)
    chef_title: str = Field(min_length=1)
    chef_image: Optional[str] = None


class AboutSection(AboutSectionIn):
    id: int
