"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.menu_schemas import (
    RestaurantCreate,
    RestaurantUpdate,
    RestaurantResponse,
    MenuLinkResponse,
    MenuCategoryCreate,
    MenuCategoryUpdate,
    MenuCategoryResponse,
    MenuItemCreate,
    MenuItemUpdate,
    MenuItemResponse,
    MenuCategoryWithItems,
    RestaurantWithMenu,
    DemoMenuItem,
    DemoMenuGroup,
    DemoMenuResponse,
)
from domain.schemas.cart_schemas import (
    CartCreate,
    CartItemPayload,
    CartQuantityUpdate,
    CartLineResponse,
    CartResponse,
    CheckoutResponse,
)

__all__ = [
    # Restaurant schemas
    "RestaurantCreate",
    "RestaurantUpdate",
    "RestaurantResponse",
    "MenuLinkResponse",
    # Category schemas
    "MenuCategoryCreate",
    "MenuCategoryUpdate",
    "MenuCategoryResponse",
    # Item schemas
    "MenuItemCreate",
    "MenuItemUpdate",
    "MenuItemResponse",
    # Public menu schemas
    "MenuCategoryWithItems",
    "RestaurantWithMenu",
    "DemoMenuItem",
    "DemoMenuGroup",
    "DemoMenuResponse",
    # Cart schemas
    "CartCreate",
    "CartItemPayload",
    "CartQuantityUpdate",
    "CartLineResponse",
    "CartResponse",
    "CheckoutResponse",
]
