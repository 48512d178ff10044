"""Menu item routes"""

from fastapi import APIRouter, Depends, Query, status
import logging
from typing import List, Optional

from api.dependencies import get_current_user_id, get_mode_selector
from api.responses import DeleteResponse, ERROR_RESPONSES
from domain.schemas.menu_schemas import MenuItemCreate, MenuItemResponse, MenuItemUpdate
from services.item_service import ItemService
from services.mode_selector import ModeSelector
from services.restaurant_service import RestaurantService

router = APIRouter(prefix="/menu-items", tags=["Menu Items"], responses=ERROR_RESPONSES)
logger = logging.getLogger("menufy.api.items")


@router.get("", response_model=List[MenuItemResponse])
def list_items(
    restaurant_id: Optional[str] = Query(None, description="Restaurant to list"),
    category_id: Optional[str] = Query(None, description="Only items of this category"),
    selector: ModeSelector = Depends(get_mode_selector),
):
    """Available items of a restaurant in display order"""
    return ItemService.list_items(selector, restaurant_id, category_id)


@router.post("", response_model=MenuItemResponse, status_code=status.HTTP_201_CREATED)
def create_item(
    payload: MenuItemCreate,
    user_id: Optional[str] = Depends(get_current_user_id),
    selector: ModeSelector = Depends(get_mode_selector),
):
    """Add an item to one of the caller's categories"""
    owner_id = RestaurantService.resolve_caller(selector, user_id)
    return ItemService.create_item(selector, payload, owner_id)


@router.patch("/{item_id}", response_model=MenuItemResponse)
def update_item(
    item_id: str,
    payload: MenuItemUpdate,
    user_id: Optional[str] = Depends(get_current_user_id),
    selector: ModeSelector = Depends(get_mode_selector),
):
    """
    Update an item.

    Use is_available=false to hide an item from the public menu without
    deleting it.
    """
    owner_id = RestaurantService.resolve_caller(selector, user_id)
    return ItemService.update_item(selector, item_id, payload, owner_id)


@router.delete("/{item_id}", response_model=DeleteResponse)
def delete_item(
    item_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    selector: ModeSelector = Depends(get_mode_selector),
):
    owner_id = RestaurantService.resolve_caller(selector, user_id)
    ItemService.delete_item(selector, item_id, owner_id)
    return DeleteResponse(deleted=item_id)
