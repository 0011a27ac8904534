"""
Restaurant profile endpoints: contact details, opening hours and the about section.
"""
from typing import Optional

from fastapi import APIRouter, Depends

from spice_haven.core.deps import get_current_user
from spice_haven.db.session import get_store
from spice_haven.db.store import DataStore
from spice_haven.schemas.auth import User
from spice_haven.schemas.restaurant import (
    AboutSection,
    AboutSectionIn,
    RestaurantInfo,
    RestaurantInfoIn,
)

router = APIRouter(tags=["restaurant"])


@router.get("/restaurant-info", response_model=Optional[RestaurantInfo])
def get_restaurant_info(store: DataStore = Depends(get_store)):
    """Get the restaurant profile, or null if none has been saved."""
    return store.restaurant_info.get()


@router.put("/restaurant-info", response_model=RestaurantInfo)
def update_restaurant_info(
    info: RestaurantInfoIn,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    """
    Save the restaurant profile.

    Every field is required; the stored profile is replaced as a whole.
    """
    return store.restaurant_info.upsert(info)


@router.get("/about", response_model=Optional[AboutSection])
def get_about_section(store: DataStore = Depends(get_store)):
    return store.about.get()


@router.put("/about", response_model=AboutSection)
def update_about_section(
    about: AboutSectionIn,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    """Save the about section (full replace)."""
    return store.about.upsert(about)
