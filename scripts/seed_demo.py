#!/usr/bin/env python3
"""
Seed demo-mode local storage with the "Spice Garden" sample restaurant.

Usage:
    python scripts/seed_demo.py            # into LOCAL_STORAGE_DIR
    python scripts/seed_demo.py ./data     # into another directory
"""

import sys
import logging
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from adapters.local_storage import JsonFileStorage
from app.config import settings
from repositories.local_store import LocalMenuStore
from repositories.store import CATEGORIES, ITEMS, RESTAURANTS

logging.basicConfig(level=logging.INFO, format=settings.log_format)
logger = logging.getLogger("menufy.seed_demo")

SAMPLE_MENU = {
    "Starters": [
        {"name": "Gobi 65", "price": 180, "is_veg": True, "is_spicy": True},
        {"name": "Chicken Lollipop", "price": 240, "is_spicy": True},
    ],
    "Main Course": [
        {"name": "Fish Curry", "price": 350, "is_spicy": True, "is_featured": True,
         "description": "Kerala style fish in tangy coconut gravy"},
        {"name": "Paneer Butter Masala", "price": 280, "is_veg": True},
    ],
    "Desserts": [
        {"name": "Payasam", "price": 100, "is_veg": True},
    ],
}


def seed(store: LocalMenuStore, owner_id: str) -> dict:
    existing = store.list(RESTAURANTS, slug="spice-garden")
    if existing:
        logger.info("Spice Garden already present (%s)", existing[0]["id"])
        return existing[0]

    restaurant = store.create(
        RESTAURANTS,
        {
            "name": "Spice Garden",
            "slug": "spice-garden",
            "description": "Home-style South Indian cooking",
            "phone": "+91 98470 00000",
            "owner_id": owner_id,
        },
    )
    for order, (category_name, items) in enumerate(SAMPLE_MENU.items()):
        category = store.create(
            CATEGORIES,
            {"restaurant_id": restaurant["id"], "name": category_name, "display_order": order},
        )
        for item_order, item in enumerate(items):
            store.create(
                ITEMS,
                {
                    **item,
                    "restaurant_id": restaurant["id"],
                    "category_id": category["id"],
                    "display_order": item_order,
                },
            )
    logger.info("Seeded Spice Garden (%s)", restaurant["id"])
    return restaurant


if __name__ == "__main__":
    directory = sys.argv[1] if len(sys.argv) > 1 else settings.local_storage_dir
    seed(LocalMenuStore(JsonFileStorage(directory)), settings.demo_owner_id)
