from typing import List, Dict, Any, Optional
import logging

from app.exceptions import NotFoundError, ServiceValidationError
from domain.schemas.menu_schemas import MenuItemCreate, MenuItemUpdate
from repositories.store import CATEGORIES, ITEMS, MenuStore
from services.category_service import by_display_order
from services.mode_selector import ModeSelector
from services.restaurant_service import RestaurantService

logger = logging.getLogger("menufy.items")


class ItemService:
    @staticmethod
    def available_items(
        store: MenuStore, restaurant_id: str, category_id: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        filters: Dict[str, Any] = {"restaurant_id": restaurant_id, "is_available": True}
        if category_id:
            filters["category_id"] = category_id
        return by_display_order(store.list(ITEMS, **filters))

    @staticmethod
    def list_items(
        selector: ModeSelector, restaurant_id: str, category_id: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        if not restaurant_id:
            raise ServiceValidationError("Restaurant ID is required")
        return selector.run(
            lambda store: ItemService.available_items(store, restaurant_id, category_id),
            "list items",
        )

    @staticmethod
    def _check_category(store: MenuStore, category_id: str, restaurant_id: str) -> None:
        category = store.get(CATEGORIES, category_id)
        if category is None or category.get("restaurant_id") != restaurant_id:
            raise ServiceValidationError(
                f"Category {category_id} does not belong to restaurant {restaurant_id}"
            )

    @staticmethod
    def create_item(selector: ModeSelector, payload: MenuItemCreate, owner_id: str) -> Dict[str, Any]:
        """
        Add an item to a category of a restaurant owned by ``owner_id``.

        Without an explicit display order the item goes last in its category.

        Raises:
            ForbiddenError: caller does not own the restaurant
            ServiceValidationError: category belongs to another restaurant
        """

        def _create(store: MenuStore):
            restaurant = RestaurantService.ensure_owner(store, payload.restaurant_id, owner_id)
            if not restaurant.get("is_active", True):
                raise ServiceValidationError("Cannot add items to an inactive restaurant")
            ItemService._check_category(store, payload.category_id, payload.restaurant_id)
            fields = payload.model_dump(exclude_none=True)
            if "display_order" not in fields:
                fields["display_order"] = len(store.list(ITEMS, category_id=payload.category_id))
            created = store.create(ITEMS, fields)
            logger.info("Created item %s in category %s", created["id"], payload.category_id)
            return created

        return selector.run(_create, "create item")

    @staticmethod
    def update_item(
        selector: ModeSelector, item_id: str, payload: MenuItemUpdate, owner_id: str
    ) -> Dict[str, Any]:
        changes = payload.model_dump(exclude_unset=True)
        for field, value in list(changes.items()):
            if value is None and field not in ("description", "image_url"):
                raise ServiceValidationError(f"{field} cannot be null")

        def _update(store: MenuStore):
            item = store.get(ITEMS, item_id)
            if item is None:
                raise NotFoundError("Menu item not found")
            RestaurantService.ensure_owner(store, item["restaurant_id"], owner_id)
            if "category_id" in changes and changes["category_id"] != item["category_id"]:
                ItemService._check_category(store, changes["category_id"], item["restaurant_id"])
            return store.update(ITEMS, item_id, changes)

        return selector.run(_update, "update item")

    @staticmethod
    def delete_item(selector: ModeSelector, item_id: str, owner_id: str) -> bool:
        def _delete(store: MenuStore):
            item = store.get(ITEMS, item_id)
            if item is None:
                raise NotFoundError("Menu item not found")
            RestaurantService.ensure_owner(store, item["restaurant_id"], owner_id)
            return store.delete(ITEMS, item_id)

        return selector.run(_delete, "delete item")
