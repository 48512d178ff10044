"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    build_engine,
    init_database,
)
from domain.models.restaurant import Restaurant, MenuCategory, MenuItem

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "build_engine",
    "init_database",
    # Menu models
    "Restaurant",
    "MenuCategory",
    "MenuItem",
]
