"""
Menu category and menu item Pydantic schemas for API request/response models.
"""
from typing import Literal, Optional

from pydantic import Field

from spice_haven.schemas.base import CamelModel, PartialUpdate


SpiceLevel = Literal["None", "Mild", "Medium", "Hot", "Extra Hot"]


class MenuCategoryCreate(CamelModel):
    """Request model for creating a menu category."""
    name: str = Field(min_length=1)
    description: Optional[str] = None
    display_order: int = Field(ge=0)


class MenuCategoryUpdate(PartialUpdate):
    """Request model for updating a menu category."""
    NULLABLE = ("description",)

    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    display_order: Optional[int] = Field(default=None, ge=0)


class MenuCategory(MenuCategoryCreate):
    """A menu section (appetizers, mains, desserts, etc.)."""
    id: int


class MenuItemCreate(CamelModel):
    """Request model for creating a menu item."""
    # Not checked against existing categories; readers tolerate orphans
    category_id: int
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    price: str = Field(min_length=1)  # display string, e.g. "$16.99"
    image: Optional[str] = None
    spice_level: Optional[SpiceLevel] = None
    is_vegetarian: bool = False
    is_vegan: bool = False
    is_gluten_free: bool = False
    display_order: int = Field(ge=0)
    featured: bool = False


class MenuItemUpdate(PartialUpdate):
    """Request model for updating a menu item."""
    NULLABLE = ("image", "spice_level")

    category_id: Optional[int] = None
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    price: Optional[str] = Field(default=None, min_length=1)
    image: Optional[str] = None
    spice_level: Optional[SpiceLevel] = None
    is_vegetarian: Optional[bool] = None
    is_vegan: Optional[bool] = None
    is_gluten_free: Optional[bool] = None
    display_order: Optional[int] = Field(default=None, ge=0)
    featured: Optional[bool] = None


class MenuItem(MenuItemCreate):
    """A dish or drink on the menu."""
    id: int
