"""API routes package"""

from . import restaurants, categories, items, menu, carts, health

__all__ = ["restaurants", "categories", "items", "menu", "carts", "health"]
