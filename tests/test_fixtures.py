"""
Shared test utilities for the Menufy test suite.

This module contains the test client, auth helpers and builders that create
realistic restaurants and menus so each test file does not repeat the setup.
"""

from fastapi.testclient import TestClient

from app.config import settings
from app.security import create_access_token
from main import app
from repositories.store import CATEGORIES, ITEMS, RESTAURANTS, MenuStore

OWNER_ID = "owner-priya"
OTHER_OWNER_ID = "owner-arjun"

# Create TestClient without running the lifespan (no backend to initialise)
client = TestClient(app)


def auth_headers(user_id: str = OWNER_ID) -> dict:
    """Bearer header for ``user_id``"""
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


def backend_settings(url: str = "sqlite://"):
    """Settings copy that treats ``url`` as a configured hosted backend"""
    return settings.model_copy(update={"database_url": url, "demo_mode": False})


# =============================================================================
# DATA BUILDERS
# =============================================================================


def make_restaurant(store: MenuStore, name="Spice Garden", slug="spice-garden", owner_id=OWNER_ID, **fields):
    return store.create(
        RESTAURANTS,
        {
            "name": name,
            "slug": slug,
            "owner_id": owner_id,
            "color_scheme": "#ea580c",
            "is_active": True,
            **fields,
        },
    )


def make_category(store: MenuStore, restaurant, name="Main Course", display_order=0, **fields):
    return store.create(
        CATEGORIES,
        {
            "restaurant_id": restaurant["id"],
            "name": name,
            "display_order": display_order,
            "is_active": True,
            **fields,
        },
    )


def make_item(store: MenuStore, category, name="Fish Curry", price=350, display_order=0, **fields):
    return store.create(
        ITEMS,
        {
            "restaurant_id": category["restaurant_id"],
            "category_id": category["id"],
            "name": name,
            "price": price,
            "is_veg": False,
            "is_spicy": True,
            "is_featured": False,
            "is_available": True,
            "display_order": display_order,
            **fields,
        },
    )


def make_spice_garden(store: MenuStore) -> dict:
    """Spice Garden with Main Course (Fish Curry 350) and an empty Desserts"""
    restaurant = make_restaurant(store)
    main_course = make_category(store, restaurant, "Main Course", 0)
    desserts = make_category(store, restaurant, "Desserts", 1)
    fish = make_item(store, main_course, "Fish Curry", 350)
    return {
        "restaurant": restaurant,
        "main_course": main_course,
        "desserts": desserts,
        "fish_curry": fish,
    }


