"""
Restaurant Repository - Data access layer for restaurants and their menus
"""

from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Restaurant, MenuCategory, MenuItem


class RestaurantRepository(BaseRepository[Restaurant]):
    """Repository for restaurant data access"""

    def __init__(self, db: Session):
        super().__init__(db, Restaurant)


class MenuCategoryRepository(BaseRepository[MenuCategory]):
    """Repository for menu category data access"""

    def __init__(self, db: Session):
        super().__init__(db, MenuCategory)


class MenuItemRepository(BaseRepository[MenuItem]):
    """Repository for menu item data access"""

    def __init__(self, db: Session):
        super().__init__(db, MenuItem)
