"""Services package - Business logic layer"""

from services.mode_selector import ModeSelector
from services.restaurant_service import RestaurantService
from services.category_service import CategoryService
from services.item_service import ItemService
from services.menu_service import MenuService
from services.cart_service import CartService

__all__ = [
    "ModeSelector",
    "RestaurantService",
    "CategoryService",
    "ItemService",
    "MenuService",
    "CartService",
]
