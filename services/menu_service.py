"""
Public menu assembly.

A restaurant's menu is its active categories in display order, each holding
the restaurant's available items that point at it. The same lookup runs on
whichever store the mode selector picks, so backend and demo mode produce
identical shapes.
"""

from typing import Any, Dict, List, Optional
import logging

from core.utils.helpers import text_matches
from domain.demo_menu import ALL_CATEGORIES, DEMO_MENU_ITEMS, DEMO_RESTAURANT_NAME
from repositories.store import MenuStore
from services.category_service import CategoryService
from services.item_service import ItemService
from services.mode_selector import ModeSelector
from services.restaurant_service import RestaurantService

logger = logging.getLogger("menufy.menu")


class MenuService:
    @staticmethod
    def build_menu(store: MenuStore, slug: str) -> Dict[str, Any]:
        """
        Restaurant-with-menu structure for ``slug`` from a single store.

        Categories without items are kept with an empty list.

        Raises:
            NotFoundError: no active restaurant has this slug
        """
        restaurant = RestaurantService.get_active_by_slug(store, slug)
        categories = CategoryService.active_categories(store, restaurant["id"])
        items = ItemService.available_items(store, restaurant["id"])

        grouped: Dict[str, List[Dict[str, Any]]] = {c["id"]: [] for c in categories}
        for item in items:
            bucket = grouped.get(item.get("category_id"))
            if bucket is not None:
                bucket.append(item)

        return {
            **restaurant,
            "categories": [{**c, "items": grouped[c["id"]]} for c in categories],
        }

    @staticmethod
    def get_menu_for_slug(selector: ModeSelector, slug: str) -> Dict[str, Any]:
        """Menu for ``slug``; backend failures are served from local storage"""
        menu = selector.run(lambda store: MenuService.build_menu(store, slug), "menu lookup")
        logger.debug(
            "Menu %s: %d categories", slug, len(menu["categories"])
        )
        return menu

    @staticmethod
    def filter_menu(menu: Dict[str, Any], term: Optional[str]) -> Dict[str, Any]:
        """
        Keep items whose name or description contains ``term``.

        Categories left without items are dropped. A blank term returns the
        menu unchanged.
        """
        if not term or not term.strip():
            return menu
        categories = []
        for category in menu["categories"]:
            items = [
                i
                for i in category["items"]
                if text_matches(term, i.get("name"), i.get("description"))
            ]
            if items:
                categories.append({**category, "items": items})
        return {**menu, "categories": categories}

    @staticmethod
    def get_demo_menu(search: Optional[str] = None, category: Optional[str] = None) -> Dict[str, Any]:
        """Static demo menu grouped by category, filtered like the demo page"""
        categories = [ALL_CATEGORIES]
        for item in DEMO_MENU_ITEMS:
            if item["category"] not in categories:
                categories.append(item["category"])

        selected = category or ALL_CATEGORIES
        matching = [
            item
            for item in DEMO_MENU_ITEMS
            if text_matches(search or "", item["name"], item["description"])
            and (selected == ALL_CATEGORIES or item["category"] == selected)
        ]

        groups: Dict[str, List[Dict[str, Any]]] = {}
        for item in matching:
            groups.setdefault(item["category"], []).append(item)

        return {
            "restaurant_name": DEMO_RESTAURANT_NAME,
            "categories": categories,
            "selected_category": selected,
            "groups": [{"category": name, "items": items} for name, items in groups.items()],
        }
