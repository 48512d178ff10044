from typing import List, Optional, Dict, Any, Tuple
import logging

from app.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServiceValidationError,
    UnauthorizedError,
)
from core.utils.helpers import generate_slug
from core.utils.qr import render_qr
from domain.enums import QrImageFormat
from domain.schemas.menu_schemas import RestaurantCreate, RestaurantUpdate
from repositories.store import CATEGORIES, ITEMS, RESTAURANTS, MenuStore
from services.mode_selector import ModeSelector

logger = logging.getLogger("menufy.restaurants")


class RestaurantService:
    @staticmethod
    def resolve_caller(selector: ModeSelector, user_id: Optional[str]) -> str:
        """
        Identity used for owner-scoped writes.

        Authenticated callers act as themselves. Anonymous callers are only
        accepted in demo mode, where there is no identity provider, and act as
        the configured demo owner.

        Raises:
            UnauthorizedError: anonymous caller while a backend is configured
        """
        if user_id:
            return user_id
        if not selector.backend_configured():
            return selector.settings.demo_owner_id
        raise UnauthorizedError("Unauthorized")

    @staticmethod
    def ensure_owner(store: MenuStore, restaurant_id: str, owner_id: str) -> Dict[str, Any]:
        """Return the restaurant when ``owner_id`` owns it.

        Raises:
            ForbiddenError: restaurant missing or owned by someone else
        """
        restaurant = store.get(RESTAURANTS, restaurant_id)
        if restaurant is None or restaurant.get("owner_id") != owner_id:
            logger.warning(
                "Caller %s denied access to restaurant %s", owner_id, restaurant_id
            )
            raise ForbiddenError("You do not own this restaurant")
        return restaurant

    @staticmethod
    def _ensure_slug_free(store: MenuStore, slug: str, restaurant_id: Optional[str] = None):
        for existing in store.list(RESTAURANTS, slug=slug):
            if existing.get("id") != restaurant_id:
                raise ConflictError(f"Slug '{slug}' is already taken")

    @staticmethod
    def list_restaurants(
        selector: ModeSelector, slug: Optional[str] = None, owner_id: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        filters: Dict[str, Any] = {"is_active": True}
        if slug:
            filters["slug"] = slug
        if owner_id:
            filters["owner_id"] = owner_id
        return selector.run(lambda store: store.list(RESTAURANTS, **filters), "list restaurants")

    @staticmethod
    def get_active_by_slug(store: MenuStore, slug: str) -> Dict[str, Any]:
        matches = store.list(RESTAURANTS, slug=slug, is_active=True)
        if not matches:
            raise NotFoundError("Restaurant not found")
        return matches[0]

    @staticmethod
    def create_restaurant(
        selector: ModeSelector, payload: RestaurantCreate, owner_id: str
    ) -> Dict[str, Any]:
        """
        Create a restaurant owned by ``owner_id``.

        The slug defaults to one generated from the name and must be unique.

        Raises:
            ServiceValidationError: no usable slug could be derived
            ConflictError: slug already used by another restaurant
        """
        fields = payload.model_dump(exclude_none=True)
        slug = fields.get("slug") or generate_slug(payload.name)
        if not slug:
            raise ServiceValidationError("A slug could not be derived from the name")
        fields["slug"] = slug
        fields["color_scheme"] = payload.color_scheme or selector.settings.default_color_scheme
        fields["owner_id"] = owner_id

        def _create(store: MenuStore):
            RestaurantService._ensure_slug_free(store, slug)
            created = store.create(RESTAURANTS, fields)
            logger.info("Created restaurant %s (%s) for %s", created["id"], slug, owner_id)
            return created

        return selector.run(_create, "create restaurant")

    @staticmethod
    def update_restaurant(
        selector: ModeSelector, restaurant_id: str, payload: RestaurantUpdate, owner_id: str
    ) -> Dict[str, Any]:
        changes = payload.model_dump(exclude_unset=True)
        if changes.get("slug") is None:
            changes.pop("slug", None)
        for field in ("name", "color_scheme", "is_active"):
            if field in changes and changes[field] is None:
                raise ServiceValidationError(f"{field} cannot be null")

        def _update(store: MenuStore):
            RestaurantService.ensure_owner(store, restaurant_id, owner_id)
            if "slug" in changes:
                RestaurantService._ensure_slug_free(store, changes["slug"], restaurant_id)
            return store.update(RESTAURANTS, restaurant_id, changes)

        return selector.run(_update, "update restaurant")

    @staticmethod
    def delete_restaurant(selector: ModeSelector, restaurant_id: str, owner_id: str) -> Dict[str, int]:
        """
        Delete a restaurant with its categories and items.

        The store never cascades, so children are removed here first.
        """

        def _delete(store: MenuStore):
            RestaurantService.ensure_owner(store, restaurant_id, owner_id)
            items = store.list(ITEMS, restaurant_id=restaurant_id)
            categories = store.list(CATEGORIES, restaurant_id=restaurant_id)
            for item in items:
                store.delete(ITEMS, item["id"])
            for category in categories:
                store.delete(CATEGORIES, category["id"])
            store.delete(RESTAURANTS, restaurant_id)
            logger.info(
                "Deleted restaurant %s with %d categories and %d items",
                restaurant_id,
                len(categories),
                len(items),
            )
            return {"categories": len(categories), "items": len(items)}

        return selector.run(_delete, "delete restaurant")

    @staticmethod
    def menu_link(selector: ModeSelector, slug: str) -> Dict[str, str]:
        """Public menu URL for a restaurant, the payload of its QR code"""
        restaurant = selector.run(
            lambda store: RestaurantService.get_active_by_slug(store, slug), "menu link"
        )
        base = selector.settings.public_base_url.rstrip("/")
        return {"slug": restaurant["slug"], "menu_url": f"{base}/menu/{restaurant['slug']}"}

    @staticmethod
    def menu_qr_code(
        selector: ModeSelector, slug: str, image_format: QrImageFormat = QrImageFormat.SVG
    ) -> Tuple[bytes, Dict[str, str]]:
        """
        QR code image encoding the restaurant's public menu URL.

        Returns the image bytes together with the menu link they encode.

        Raises:
            NotFoundError: no active restaurant has this slug
        """
        link = RestaurantService.menu_link(selector, slug)
        image = render_qr(link["menu_url"], image_format)
        logger.debug("Rendered %s QR code for %s", image_format.value, link["menu_url"])
        return image, link
