"""Menu category routes"""

from fastapi import APIRouter, Depends, Query, status
import logging
from typing import List, Optional

from api.dependencies import get_current_user_id, get_mode_selector
from api.responses import DeleteResponse, ERROR_RESPONSES
from domain.schemas.menu_schemas import (
    MenuCategoryCreate,
    MenuCategoryResponse,
    MenuCategoryUpdate,
)
from services.category_service import CategoryService
from services.mode_selector import ModeSelector
from services.restaurant_service import RestaurantService

router = APIRouter(prefix="/menu-categories", tags=["Menu Categories"], responses=ERROR_RESPONSES)
logger = logging.getLogger("menufy.api.categories")


@router.get("", response_model=List[MenuCategoryResponse])
def list_categories(
    restaurant_id: Optional[str] = Query(None, description="Restaurant to list"),
    selector: ModeSelector = Depends(get_mode_selector),
):
    """Active categories of a restaurant in display order"""
    return CategoryService.list_categories(selector, restaurant_id)


@router.post("", response_model=MenuCategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    payload: MenuCategoryCreate,
    user_id: Optional[str] = Depends(get_current_user_id),
    selector: ModeSelector = Depends(get_mode_selector),
):
    """Add a category; only the restaurant owner may do this"""
    owner_id = RestaurantService.resolve_caller(selector, user_id)
    return CategoryService.create_category(selector, payload, owner_id)


@router.patch("/{category_id}", response_model=MenuCategoryResponse)
def update_category(
    category_id: str,
    payload: MenuCategoryUpdate,
    user_id: Optional[str] = Depends(get_current_user_id),
    selector: ModeSelector = Depends(get_mode_selector),
):
    owner_id = RestaurantService.resolve_caller(selector, user_id)
    return CategoryService.update_category(selector, category_id, payload, owner_id)


@router.delete("/{category_id}", response_model=DeleteResponse)
def delete_category(
    category_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    selector: ModeSelector = Depends(get_mode_selector),
):
    """Delete a category and every item in it"""
    owner_id = RestaurantService.resolve_caller(selector, user_id)
    removed_items = CategoryService.delete_category(selector, category_id, owner_id)
    return DeleteResponse(deleted=category_id, cascaded_items=removed_items)
