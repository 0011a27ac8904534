"""
Tests for the default seed content.
"""
from spice_haven.core.config import Settings, get_settings
from spice_haven.core.security import verify_password
from spice_haven.db.seed import create_store


def test_seed_counts(store):
    assert store.counts() == {
        "restaurant_info": 1,
        "about": 1,
        "menu_categories": 5,
        "menu_items": 6,
        "gallery": 8,
        "testimonials": 3,
        "reservations": 0,
        "users": 1,
    }


def test_seed_admin_password_is_hashed(store):
    admin = store.users.get_by_username("admin")

    assert admin.password != "admin123"
    assert verify_password("admin123", admin.password)


def test_seeded_items_reference_seeded_categories(store):
    category_ids = {c.id for c in store.menu_categories.get_all()}

    assert all(item.category_id in category_ids for item in store.menu_items.get_all())


def test_seed_can_be_disabled():
    settings = Settings(
        SESSION_SECRET_KEY=get_settings().SESSION_SECRET_KEY,
        BCRYPT_ROUNDS=4,
        SEED_DEFAULT_DATA=False,
    )

    store = create_store(settings)

    assert store.counts()["users"] == 1
    assert store.menu_items.get_all() == []
    assert store.restaurant_info.get() is None
