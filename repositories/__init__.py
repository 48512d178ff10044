"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.restaurant_repository import (
    RestaurantRepository,
    MenuCategoryRepository,
    MenuItemRepository,
)
from repositories.store import MenuStore, RESTAURANTS, CATEGORIES, ITEMS
from repositories.sql_store import SqlMenuStore
from repositories.local_store import LocalMenuStore, TimeOrderedIdGenerator, STORAGE_KEYS

__all__ = [
    "BaseRepository",
    "RestaurantRepository",
    "MenuCategoryRepository",
    "MenuItemRepository",
    "MenuStore",
    "RESTAURANTS",
    "CATEGORIES",
    "ITEMS",
    "SqlMenuStore",
    "LocalMenuStore",
    "TimeOrderedIdGenerator",
    "STORAGE_KEYS",
]
