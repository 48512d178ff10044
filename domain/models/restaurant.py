"""
Restaurant and menu models.
"""

from datetime import datetime, timezone
import uuid

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
)

from domain.models.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Restaurant(Base):
    """Restaurant owned by a dashboard user"""

    __tablename__ = "restaurants"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(Text, nullable=False)
    slug = Column(String(120), unique=True, nullable=False)
    description = Column(Text)
    phone = Column(Text)
    email = Column(Text)
    address = Column(Text)
    logo_url = Column(Text)
    banner_url = Column(Text)
    color_scheme = Column(String(32), nullable=False, default="#ea580c")
    is_active = Column(Boolean, nullable=False, default=True)
    owner_id = Column(String(64), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)


class MenuCategory(Base):
    """Menu section such as "Starters" or "Main Course" """

    __tablename__ = "menu_categories"

    id = Column(String(36), primary_key=True, default=_new_id)
    restaurant_id = Column(
        String(36),
        ForeignKey("restaurants.id", ondelete="CASCADE"),
        nullable=False,
    )
    name = Column(Text, nullable=False)
    description = Column(Text)
    display_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    __table_args__ = (
        Index("ix_menu_categories_restaurant_order", "restaurant_id", "display_order"),
    )


class MenuItem(Base):
    """Dish listed under a category"""

    __tablename__ = "menu_items"

    id = Column(String(36), primary_key=True, default=_new_id)
    restaurant_id = Column(
        String(36),
        ForeignKey("restaurants.id", ondelete="CASCADE"),
        nullable=False,
    )
    category_id = Column(
        String(36),
        ForeignKey("menu_categories.id", ondelete="CASCADE"),
        nullable=False,
    )
    name = Column(Text, nullable=False)
    description = Column(Text)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    image_url = Column(Text)
    is_veg = Column(Boolean, nullable=False, default=False)
    is_spicy = Column(Boolean, nullable=False, default=False)
    is_featured = Column(Boolean, nullable=False, default=False)
    is_available = Column(Boolean, nullable=False, default=True)
    display_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_menu_item_price_nonneg"),
        Index("ix_menu_items_restaurant_category", "restaurant_id", "category_id"),
    )
