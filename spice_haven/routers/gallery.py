"""
Gallery images and customer testimonials.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from spice_haven.core.deps import get_current_user
from spice_haven.db.session import get_store
from spice_haven.db.store import DataStore
from spice_haven.schemas.auth import MessageResponse, User
from spice_haven.schemas.gallery import (
    GalleryImage,
    GalleryImageCreate,
    GalleryImageUpdate,
    Testimonial,
    TestimonialCreate,
    TestimonialUpdate,
)

gallery_router = APIRouter(prefix="/gallery", tags=["gallery"])
testimonials_router = APIRouter(prefix="/testimonials", tags=["testimonials"])


# ============ Gallery ============

@gallery_router.get("", response_model=List[GalleryImage])
def list_gallery_images(store: DataStore = Depends(get_store)):
    return store.gallery.get_all()


@gallery_router.get("/category/{category}", response_model=List[GalleryImage])
def list_gallery_by_category(category: str, store: DataStore = Depends(get_store)):
    """Images with the given tag (food, ambience, ...)."""
    return store.gallery.by_category(category)


@gallery_router.get("/{image_id}", response_model=GalleryImage)
def get_gallery_image(image_id: int, store: DataStore = Depends(get_store)):
    image = store.gallery.get_by_id(image_id)
    if not image:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gallery image not found")
    return image


@gallery_router.post("", response_model=GalleryImage, status_code=status.HTTP_201_CREATED)
def create_gallery_image(
    image: GalleryImageCreate,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    return store.gallery.create(image)


@gallery_router.put("/{image_id}", response_model=GalleryImage)
def update_gallery_image(
    image_id: int,
    update_data: GalleryImageUpdate,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    image = store.gallery.update(image_id, update_data)
    if not image:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gallery image not found")
    return image


@gallery_router.delete("/{image_id}", response_model=MessageResponse)
def delete_gallery_image(
    image_id: int,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    if not store.gallery.delete(image_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gallery image not found")
    return MessageResponse(message="Gallery image deleted successfully")


# ============ Testimonials ============

@testimonials_router.get("", response_model=List[Testimonial])
def list_testimonials(store: DataStore = Depends(get_store)):
    return store.testimonials.get_all()


@testimonials_router.get("/{testimonial_id}", response_model=Testimonial)
def get_testimonial(testimonial_id: int, store: DataStore = Depends(get_store)):
    testimonial = store.testimonials.get_by_id(testimonial_id)
    if not testimonial:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Testimonial not found")
    return testimonial


@testimonials_router.post("", response_model=Testimonial, status_code=status.HTTP_201_CREATED)
def create_testimonial(
    testimonial: TestimonialCreate,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    return store.testimonials.create(testimonial)


@testimonials_router.put("/{testimonial_id}", response_model=Testimonial)
def update_testimonial(
    testimonial_id: int,
    update_data: TestimonialUpdate,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    testimonial = store.testimonials.update(testimonial_id, update_data)
    if not testimonial:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Testimonial not found")
    return testimonial


@testimonials_router.delete("/{testimonial_id}", response_model=MessageResponse)
def delete_testimonial(
    testimonial_id: int,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    if not store.testimonials.delete(testimonial_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Testimonial not found")
    return MessageResponse(message="Testimonial deleted successfully")
