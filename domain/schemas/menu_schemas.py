from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from decimal import Decimal

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


# =============================================================================
# RESTAURANTS
# =============================================================================


class RestaurantCreate(BaseModel):
    """Schema for creating a restaurant from the dashboard form"""

    name: str = Field(..., min_length=1, max_length=200)
    slug: Optional[str] = Field(
        None,
        max_length=120,
        pattern=SLUG_PATTERN,
        description="Public menu path; generated from the name when omitted",
    )
    description: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    logo_url: Optional[str] = None
    banner_url: Optional[str] = None
    color_scheme: Optional[str] = Field(None, description="Brand colour, e.g. '#ea580c'")


class RestaurantUpdate(BaseModel):
    """Partial restaurant update; omitted fields are left untouched"""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    slug: Optional[str] = Field(None, max_length=120, pattern=SLUG_PATTERN)
    description: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    logo_url: Optional[str] = None
    banner_url: Optional[str] = None
    color_scheme: Optional[str] = None
    is_active: Optional[bool] = None


class RestaurantResponse(BaseModel):
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    logo_url: Optional[str] = None
    banner_url: Optional[str] = None
    color_scheme: str
    is_active: bool
    owner_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class MenuLinkResponse(BaseModel):
    """Public menu URL encoded into a restaurant's QR code"""

    slug: str
    menu_url: str


# =============================================================================
# CATEGORIES
# =============================================================================


class MenuCategoryCreate(BaseModel):
    restaurant_id: str
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    display_order: Optional[int] = Field(
        None, ge=0, description="Defaults to the end of the restaurant's list"
    )


class MenuCategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    display_order: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None


class MenuCategoryResponse(BaseModel):
    id: str
    restaurant_id: str
    name: str
    description: Optional[str] = None
    display_order: int
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


# =============================================================================
# ITEMS
# =============================================================================


class MenuItemCreate(BaseModel):
    restaurant_id: str
    category_id: str
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    price: Decimal = Field(..., ge=0, description="Unit price in the display currency")
    image_url: Optional[str] = None
    is_veg: bool = False
    is_spicy: bool = False
    is_featured: bool = False
    display_order: Optional[int] = Field(
        None, ge=0, description="Defaults to the end of the category's list"
    )


class MenuItemUpdate(BaseModel):
    category_id: Optional[str] = None
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0)
    image_url: Optional[str] = None
    is_veg: Optional[bool] = None
    is_spicy: Optional[bool] = None
    is_featured: Optional[bool] = None
    is_available: Optional[bool] = None
    display_order: Optional[int] = Field(None, ge=0)


class MenuItemResponse(BaseModel):
    id: str
    restaurant_id: str
    category_id: str
    name: str
    description: Optional[str] = None
    price: float
    image_url: Optional[str] = None
    is_veg: bool
    is_spicy: bool
    is_featured: bool
    is_available: bool
    display_order: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


# =============================================================================
# PUBLIC MENU
# =============================================================================


class MenuCategoryWithItems(MenuCategoryResponse):
    items: List[MenuItemResponse] = Field(default_factory=list)


class RestaurantWithMenu(RestaurantResponse):
    """Restaurant with its active categories and their available items"""

    categories: List[MenuCategoryWithItems] = Field(default_factory=list)


class DemoMenuItem(BaseModel):
    name: str
    description: str
    price: str
    image: str
    veg: bool
    category: str


class DemoMenuGroup(BaseModel):
    category: str
    items: List[DemoMenuItem]


class DemoMenuResponse(BaseModel):
    """Static demo menu grouped by category"""

    restaurant_name: str
    categories: List[str]
    selected_category: str
    groups: List[DemoMenuGroup]
