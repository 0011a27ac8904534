"""
Menu routers: categories and items.

Reads are public; writes require a staff session.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from spice_haven.core.deps import get_current_user
from spice_haven.db.session import get_store
from spice_haven.db.store import DataStore
from spice_haven.schemas.auth import MessageResponse, User
from spice_haven.schemas.menu import (
    MenuCategory,
    MenuCategoryCreate,
    MenuCategoryUpdate,
    MenuItem,
    MenuItemCreate,
    MenuItemUpdate,
)

logger = logging.getLogger(__name__)

categories_router = APIRouter(prefix="/menu-categories", tags=["menu-categories"])
items_router = APIRouter(prefix="/menu-items", tags=["menu-items"])


def category_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")


def item_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Menu item not found")


# ============ Categories ============

@categories_router.get("", response_model=List[MenuCategory])
def list_categories(store: DataStore = Depends(get_store)):
    """List menu categories in display order."""
    return store.menu_categories.get_all()


@categories_router.get("/{category_id}", response_model=MenuCategory)
def get_category(category_id: int, store: DataStore = Depends(get_store)):
    category = store.menu_categories.get_by_id(category_id)
    if not category:
        raise category_not_found()
    return category


@categories_router.post("", response_model=MenuCategory, status_code=status.HTTP_201_CREATED)
def create_category(
    category: MenuCategoryCreate,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    return store.menu_categories.create(category)


@categories_router.put("/{category_id}", response_model=MenuCategory)
def update_category(
    category_id: int,
    update_data: MenuCategoryUpdate,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    """Update the supplied fields of a category."""
    category = store.menu_categories.update(category_id, update_data)
    if not category:
        raise category_not_found()
    return category


@categories_router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(
    category_id: int,
    cascade: bool = Query(False, description="Also delete the category's menu items"),
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    """
    Delete a category.

    By default its menu items are left in place, still pointing at the old
    category id. Pass cascade=true to delete them too.
    """
    if not store.menu_categories.delete(category_id):
        raise category_not_found()

    if cascade:
        removed = store.menu_items.delete_by_category(category_id)
        logger.info(f"Deleted category {category_id} and {removed} menu item(s)")
        return MessageResponse(message=f"Category and {removed} menu item(s) deleted successfully")

    return MessageResponse(message="Category deleted successfully")


# ============ Items ============

@items_router.get("", response_model=List[MenuItem])
def list_menu_items(store: DataStore = Depends(get_store)):
    return store.menu_items.get_all()


@items_router.get("/featured", response_model=List[MenuItem])
def list_featured_items(store: DataStore = Depends(get_store)):
    """Items flagged for the home page."""
    return store.menu_items.featured()


@items_router.get("/category/{category_id}", response_model=List[MenuItem])
def list_items_by_category(category_id: int, store: DataStore = Depends(get_store)):
    """Items in one category. Unknown categories give an empty list."""
    return store.menu_items.by_category(category_id)


@items_router.get("/{item_id}", response_model=MenuItem)
def get_menu_item(item_id: int, store: DataStore = Depends(get_store)):
    item = store.menu_items.get_by_id(item_id)
    if not item:
        raise item_not_found()
    return item


@items_router.post("", response_model=MenuItem, status_code=status.HTTP_201_CREATED)
def create_menu_item(
    item: MenuItemCreate,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    return store.menu_items.create(item)


@items_router.put("/{item_id}", response_model=MenuItem)
def update_menu_item(
    item_id: int,
    update_data: MenuItemUpdate,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    """
    Update a menu item's properties.

    Only fields present in the body change; image and spiceLevel may be
    cleared with null.
    """
    item = store.menu_items.update(item_id, update_data)
    if not item:
        raise item_not_found()
    return item


@items_router.delete("/{item_id}", response_model=MessageResponse)
def delete_menu_item(
    item_id: int,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    if not store.menu_items.delete(item_id):
        raise item_not_found()
    return MessageResponse(message="Menu item deleted successfully")
