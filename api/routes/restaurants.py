"""Restaurant management and public menu routes"""

from fastapi import APIRouter, Depends, Query, Response, status
import logging
from typing import List, Optional

from api.dependencies import get_current_user_id, get_mode_selector
from api.responses import DeleteResponse, ERROR_RESPONSES
from core.utils.qr import MEDIA_TYPES
from domain.enums import QrImageFormat
from domain.schemas.menu_schemas import (
    MenuLinkResponse,
    RestaurantCreate,
    RestaurantResponse,
    RestaurantUpdate,
    RestaurantWithMenu,
)
from services.menu_service import MenuService
from services.mode_selector import ModeSelector
from services.restaurant_service import RestaurantService

router = APIRouter(prefix="/restaurants", tags=["Restaurants"], responses=ERROR_RESPONSES)
logger = logging.getLogger("menufy.api.restaurants")


@router.get("", response_model=List[RestaurantResponse])
def list_restaurants(
    slug: Optional[str] = Query(None, description="Exact slug to match"),
    owner_id: Optional[str] = Query(None, description="Only restaurants of this owner"),
    selector: ModeSelector = Depends(get_mode_selector),
):
    """List active restaurants"""
    return RestaurantService.list_restaurants(selector, slug=slug, owner_id=owner_id)


@router.post("", response_model=RestaurantResponse, status_code=status.HTTP_201_CREATED)
def create_restaurant(
    payload: RestaurantCreate,
    user_id: Optional[str] = Depends(get_current_user_id),
    selector: ModeSelector = Depends(get_mode_selector),
):
    """
    Create a restaurant owned by the caller.

    In demo mode anonymous callers are accepted and the restaurant is owned
    by the demo owner.
    """
    owner_id = RestaurantService.resolve_caller(selector, user_id)
    return RestaurantService.create_restaurant(selector, payload, owner_id)


@router.patch("/{restaurant_id}", response_model=RestaurantResponse)
def update_restaurant(
    restaurant_id: str,
    payload: RestaurantUpdate,
    user_id: Optional[str] = Depends(get_current_user_id),
    selector: ModeSelector = Depends(get_mode_selector),
):
    """Update restaurant details; set is_active=false to deactivate"""
    owner_id = RestaurantService.resolve_caller(selector, user_id)
    return RestaurantService.update_restaurant(selector, restaurant_id, payload, owner_id)


@router.delete("/{restaurant_id}", response_model=DeleteResponse)
def delete_restaurant(
    restaurant_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    selector: ModeSelector = Depends(get_mode_selector),
):
    """Delete a restaurant together with its categories and items"""
    owner_id = RestaurantService.resolve_caller(selector, user_id)
    removed = RestaurantService.delete_restaurant(selector, restaurant_id, owner_id)
    return DeleteResponse(
        deleted=restaurant_id,
        cascaded_categories=removed["categories"],
        cascaded_items=removed["items"],
    )


@router.get("/{slug}/menu", response_model=RestaurantWithMenu)
def get_restaurant_menu(
    slug: str,
    search: Optional[str] = Query(
        None, description="Only items whose name or description contains this text"
    ),
    selector: ModeSelector = Depends(get_mode_selector),
):
    """
    Public menu of a restaurant.

    Returns the restaurant with its active categories in display order, each
    with its available items. Empty categories are included unless a search
    term filters them out.
    """
    menu = MenuService.get_menu_for_slug(selector, slug)
    return MenuService.filter_menu(menu, search)


@router.get("/{slug}/menu-link", response_model=MenuLinkResponse)
def get_menu_link(slug: str, selector: ModeSelector = Depends(get_mode_selector)):
    """Public menu URL to encode into the restaurant's QR code"""
    return RestaurantService.menu_link(selector, slug)


@router.get(
    "/{slug}/qr-code",
    response_class=Response,
    responses={
        200: {
            "content": {media_type: {} for media_type in MEDIA_TYPES.values()},
            "description": "QR code encoding the public menu URL",
        }
    },
)
def get_menu_qr_code(
    slug: str,
    image_format: QrImageFormat = Query(
        QrImageFormat.SVG, alias="format", description="'svg' or 'png'"
    ),
    download: bool = Query(False, description="Serve as a file attachment"),
    selector: ModeSelector = Depends(get_mode_selector),
):
    """QR code for the restaurant's public menu, ready to print on table cards"""
    image, link = RestaurantService.menu_qr_code(selector, slug, image_format)
    headers = {}
    if download:
        headers["Content-Disposition"] = (
            f'attachment; filename="menufy-qr-{link["slug"]}.{image_format.value}"'
        )
    return Response(content=image, media_type=MEDIA_TYPES[image_format], headers=headers)
