"""
Gallery image and testimonial schemas.
"""
from typing import Optional

from pydantic import Field, field_validator

from spice_haven.schemas.base import CamelModel, PartialUpdate


class GalleryImageCreate(CamelModel):
    title: str = Field(min_length=1)
    image: str = Field(min_length=1)  # URL
    alt_text: str = Field(min_length=1)
    category: str = Field(min_length=1)  # free-text tag: food, ambience, ...
    display_order: int = Field(ge=0)


class GalleryImageUpdate(PartialUpdate):
    title: Optional[str] = Field(default=None, min_length=1)
    image: Optional[str] = Field(default=None, min_length=1)
    alt_text: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, min_length=1)
    display_order: Optional[int] = Field(default=None, ge=0)


class GalleryImage(GalleryImageCreate):
    id: int


def _check_rating(v: Optional[float]) -> Optional[float]:
    # Stars are rendered in halves
    if v is not None and (v * 2) != int(v * 2):
        raise ValueError("rating must be a multiple of 0.5")
    return v


class TestimonialCreate(CamelModel):
    name: str = Field(min_length=1)
    text: str = Field(min_length=1)
    rating: float = Field(ge=0, le=5)
    date: str = Field(min_length=1)  # display string, e.g. "March 15, 2023"
    image: Optional[str] = None

    @field_validator("rating")
    @classmethod
    def validate_rating(cls, v: float) -> float:
        return _check_rating(v)


class TestimonialUpdate(PartialUpdate):
    NULLABLE = ("image",)

    name: Optional[str] = Field(default=None, min_length=1)
    text: Optional[str] = Field(default=None, min_length=1)
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    date: Optional[str] = Field(default=None, min_length=1)
    image: Optional[str] = None

    @field_validator("rating")
    @classmethod
    def validate_rating(cls, v: Optional[float]) -> Optional[float]:
        return _check_rating(v)


class Testimonial(TestimonialCreate):
    id: int
