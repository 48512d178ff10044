"""
Domain enums for Menufy application.
Contains all enumeration types used across the domain layer.
"""

import enum


class StoreMode(str, enum.Enum):
    """Where menu data is read from and written to"""

    BACKEND = "backend"
    DEMO = "demo"


class CartVariant(str, enum.Enum):
    """How a cart identifies items and reads their prices"""

    MENU = "menu"  # item id + numeric price
    DEMO = "demo"  # item name + currency string price


class OrderStatus(str, enum.Enum):
    """Outcome of the Place Order action"""

    PLACED = "placed"


class QrImageFormat(str, enum.Enum):
    """Image formats the menu QR code can be rendered in"""

    SVG = "svg"
    PNG = "png"
