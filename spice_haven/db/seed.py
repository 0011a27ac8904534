"""
Default content loaded into a fresh store.

The store is volatile, so this runs on every startup: one admin account, the
restaurant profile, the about section, five menu categories, six menu items,
eight gallery images and three testimonials.
"""
import json
import logging

from spice_haven.core.config import Settings, get_settings
from spice_haven.core.security import hash_password
from spice_haven.db.store import DataStore

logger = logging.getLogger(__name__)

UNSPLASH = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&w={}&q=80"

OPENING_HOURS = {
    "monday": "11:30 AM - 9:30 PM",
    "tuesday": "11:30 AM - 9:30 PM",
    "wednesday": "11:30 AM - 9:30 PM",
    "thursday": "11:30 AM - 9:30 PM",
    "friday": "11:30 AM - 10:30 PM",
    "saturday": "11:30 AM - 10:30 PM",
    "sunday": "12:00 PM - 9:00 PM",
}

SOCIAL_LINKS = {
    "facebook": "https://facebook.com/spicehaven",
    "instagram": "https://instagram.com/spicehaven",
    "twitter": "https://twitter.com/spicehaven",
    "yelp": "https://yelp.com/spicehaven",
}

CATEGORIES = [
    ("Appetizers", "Start your meal with these delicious starters"),
    ("Main Course", "Signature dishes full of flavor and aroma"),
    ("Breads", "Traditional Indian breads, baked fresh"),
    ("Desserts", "Sweet treats to end your meal"),
    ("Beverages", "Refreshing drinks and traditional favorites"),
]

# (category name, name, description, price, image, spice level, vegetarian, gluten free, display order)
MENU_ITEMS = [
    ("Appetizers", "Vegetable Samosas",
     "Crispy pastry filled with spiced potatoes, peas, and aromatic spices. Served with tamarind chutney.",
     "$7.99", "1567188040759-fb8a883dc6d8", "Medium", True, False, 1),
    ("Main Course", "Butter Chicken",
     "Tender chicken cooked in a rich tomato and butter sauce with aromatic spices. Served with basmati rice.",
     "$16.99", "1585937421612-70a008356a82", "Mild", False, True, 1),
    ("Main Course", "Palak Paneer",
     "Fresh cottage cheese cubes in a creamy spinach sauce with aromatic spices. Served with basmati rice.",
     "$14.99", "1565557623262-b51c2513a641", "Mild", True, True, 2),
    ("Breads", "Garlic Naan",
     "Traditional leavened flatbread baked in a tandoor oven, topped with garlic and fresh cilantro.",
     "$3.99", "1605653411309-11cc3c87a86b", "None", True, False, 1),
    ("Desserts", "Gulab Jamun",
     "Soft milk solids dumplings soaked in rose-flavored sugar syrup. Served warm with a touch of cardamom.",
     "$5.99", "1593250186288-c82cb5d6a1a0", "None", True, False, 1),
    ("Beverages", "Masala Chai",
     "Traditional Indian spiced tea prepared with a blend of aromatic spices, milk, and sweetener.",
     "$3.49", "1572097662444-9c6a7d8d0544", "None", True, True, 1),
]

# (title, image, alt text, category, display order)
GALLERY_IMAGES = [
    ("Restaurant Interior", "1505253758473-96b7015fcd40", "Restaurant interior with elegant seating", "ambience", 1),
    ("Restaurant Ambience", "1517248135467-4c7edcad34c4", "Warm restaurant ambience with mood lighting", "ambience", 2),
    ("Butter Chicken", "1585937421612-70a008356a82", "Creamy butter chicken in a bowl", "food", 1),
    ("Palak Paneer", "1565557623262-b51c2513a641", "Palak paneer with cheese cubes", "food", 2),
    ("Restaurant Seating", "1414235077428-338989a2e8c0", "Elegant restaurant seating arrangement", "ambience", 3),
    ("Tandoori Dishes", "1506368249639-73a05d6f6488", "Assortment of tandoori dishes", "food", 3),
    ("Dessert Platter", "1532634922-8fe0b757fb13", "Traditional Indian desserts on a platter", "food", 4),
    ("Restaurant Bar", "1555396273-367ea4eb4db5", "Well-stocked bar at the restaurant", "ambience", 4),
]

TESTIMONIALS = [
    {
        "name": "Sarah Johnson",
        "text": "The butter chicken was absolutely divine! Perfectly spiced and the flavors were authentic. "
                "The service was excellent and the ambiance was perfect for our anniversary dinner.",
        "rating": 5,
        "date": "March 15, 2023",
        "image": "https://randomuser.me/api/portraits/women/45.jpg",
    },
    {
        "name": "David Chen",
        "text": "As a vegetarian, I was impressed by the range of options. The palak paneer was creamy and "
                "flavorful, and the garlic naan was the perfect accompaniment. Will definitely be back!",
        "rating": 5,
        "date": "February 8, 2023",
        "image": "https://randomuser.me/api/portraits/men/32.jpg",
    },
    {
        "name": "Maria Rodriguez",
        "text": "First time trying Indian cuisine and I couldn't have picked a better place! The staff was "
                "patient in explaining the menu and recommending dishes based on my preferences. "
                "A memorable experience!",
        "rating": 4.5,
        "date": "January 22, 2023",
        "image": "https://randomuser.me/api/portraits/women/68.jpg",
    },
]


def seed_admin(store: DataStore, settings: Settings) -> None:
    """Create the default admin account if it doesn't exist."""
    if store.users.get_by_username(settings.ADMIN_USERNAME):
        return
    store.users.create({
        "username": settings.ADMIN_USERNAME,
        "password": hash_password(settings.ADMIN_PASSWORD),
        "role": "admin",
    })


def seed_content(store: DataStore) -> None:
    """Load the restaurant's default website content."""
    store.restaurant_info.upsert({
        "name": "Spice Haven",
        "tagline": "Authentic Indian Cuisine",
        "description": "Experience the rich flavors and aromatic spices of traditional Indian cooking "
                       "in a modern, elegant setting.",
        "address": "123 Spice Avenue",
        "city": "Vancouver",
        "state": "BC",
        "zip": "V6B 1A9",
        "country": "Canada",
        "phone": "(604) 123-4567",
        "email": "info@spicehaven.ca",
        "hours": json.dumps(OPENING_HOURS),
        "social_links": json.dumps(SOCIAL_LINKS),
    })

    store.about.upsert({
        "heading": "Our Story",
        "paragraph1": "At Spice Haven, we bring the authentic flavors of India to your table. Established in "
                      "2005 by Chef Raj Sharma, our restaurant combines traditional cooking techniques with "
                      "locally sourced ingredients to create dishes that honor India's rich culinary heritage.",
        "paragraph2": "Our recipes have been passed down through generations, preserving the authentic tastes "
                      "and aromas that make Indian cuisine so beloved around the world. Each dish is carefully "
                      "prepared with hand-ground spices and fresh ingredients.",
        "paragraph3": "Whether you're familiar with Indian cuisine or trying it for the first time, our friendly "
                      "staff will guide you through our menu to ensure a memorable dining experience.",
        "chef_name": "Chef Raj Sharma",
        "chef_title": "Executive Chef & Founder",
        "chef_image": UNSPLASH.format("1566554273541-37a9ca77b91f", 128),
    })

    category_ids = {}
    for order, (name, description) in enumerate(CATEGORIES, start=1):
        category = store.menu_categories.create({
            "name": name,
            "description": description,
            "display_order": order,
        })
        category_ids[name] = category.id

    for category, name, description, price, photo, spice, vegetarian, gluten_free, order in MENU_ITEMS:
        store.menu_items.create({
            "category_id": category_ids[category],
            "name": name,
            "description": description,
            "price": price,
            "image": UNSPLASH.format(photo, 500),
            "spice_level": spice,
            "is_vegetarian": vegetarian,
            "is_vegan": False,
            "is_gluten_free": gluten_free,
            "display_order": order,
            "featured": True,
        })

    for title, photo, alt_text, category, order in GALLERY_IMAGES:
        store.gallery.create({
            "title": title,
            "image": UNSPLASH.format(photo, 1000),
            "alt_text": alt_text,
            "category": category,
            "display_order": order,
        })

    for testimonial in TESTIMONIALS:
        store.testimonials.create(testimonial)


def create_store(settings: Settings | None = None) -> DataStore:
    """Build a new store, seeded according to settings."""
    settings = settings or get_settings()
    store = DataStore()
    seed_admin(store, settings)
    if settings.SEED_DEFAULT_DATA:
        seed_content(store)
        logger.info(f"Seeded default content: {store.counts()}")
    return store
