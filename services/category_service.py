from typing import List, Dict, Any
import logging

from app.exceptions import NotFoundError, ServiceValidationError
from domain.schemas.menu_schemas import MenuCategoryCreate, MenuCategoryUpdate
from repositories.store import CATEGORIES, ITEMS, MenuStore
from services.mode_selector import ModeSelector
from services.restaurant_service import RestaurantService

logger = logging.getLogger("menufy.categories")


def by_display_order(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Ascending display order; equal values keep insertion order"""
    return sorted(records, key=lambda r: r.get("display_order") or 0)


class CategoryService:
    @staticmethod
    def active_categories(store: MenuStore, restaurant_id: str) -> List[Dict[str, Any]]:
        return by_display_order(
            store.list(CATEGORIES, restaurant_id=restaurant_id, is_active=True)
        )

    @staticmethod
    def list_categories(selector: ModeSelector, restaurant_id: str) -> List[Dict[str, Any]]:
        if not restaurant_id:
            raise ServiceValidationError("Restaurant ID is required")
        return selector.run(
            lambda store: CategoryService.active_categories(store, restaurant_id),
            "list categories",
        )

    @staticmethod
    def _owned_category(store: MenuStore, category_id: str, owner_id: str) -> Dict[str, Any]:
        category = store.get(CATEGORIES, category_id)
        if category is None:
            raise NotFoundError("Menu category not found")
        RestaurantService.ensure_owner(store, category["restaurant_id"], owner_id)
        return category

    @staticmethod
    def create_category(
        selector: ModeSelector, payload: MenuCategoryCreate, owner_id: str
    ) -> Dict[str, Any]:
        """
        Add a category to a restaurant owned by ``owner_id``.

        Without an explicit display order the category goes last.

        Raises:
            ForbiddenError: caller does not own the restaurant
            ServiceValidationError: restaurant is deactivated
        """

        def _create(store: MenuStore):
            restaurant = RestaurantService.ensure_owner(store, payload.restaurant_id, owner_id)
            if not restaurant.get("is_active", True):
                raise ServiceValidationError("Cannot add categories to an inactive restaurant")
            fields = payload.model_dump(exclude_none=True)
            if "display_order" not in fields:
                fields["display_order"] = len(
                    store.list(CATEGORIES, restaurant_id=payload.restaurant_id)
                )
            created = store.create(CATEGORIES, fields)
            logger.info("Created category %s for restaurant %s", created["id"], payload.restaurant_id)
            return created

        return selector.run(_create, "create category")

    @staticmethod
    def update_category(
        selector: ModeSelector, category_id: str, payload: MenuCategoryUpdate, owner_id: str
    ) -> Dict[str, Any]:
        changes = payload.model_dump(exclude_unset=True)
        for field in ("name", "display_order", "is_active"):
            if field in changes and changes[field] is None:
                raise ServiceValidationError(f"{field} cannot be null")

        def _update(store: MenuStore):
            CategoryService._owned_category(store, category_id, owner_id)
            return store.update(CATEGORIES, category_id, changes)

        return selector.run(_update, "update category")

    @staticmethod
    def delete_category(selector: ModeSelector, category_id: str, owner_id: str) -> int:
        """Delete a category and its items; returns how many items went with it"""

        def _delete(store: MenuStore):
            CategoryService._owned_category(store, category_id, owner_id)
            items = store.list(ITEMS, category_id=category_id)
            for item in items:
                store.delete(ITEMS, item["id"])
            store.delete(CATEGORIES, category_id)
            logger.info("Deleted category %s and %d items", category_id, len(items))
            return len(items)

        return selector.run(_delete, "delete category")
