"""Diner cart routes"""

from fastapi import APIRouter, Depends, status
import logging

from api.dependencies import get_cart_service
from api.responses import DeleteResponse, ERROR_RESPONSES
from domain.schemas.cart_schemas import (
    CartCreate,
    CartItemPayload,
    CartQuantityUpdate,
    CartResponse,
    CheckoutResponse,
)
from services.cart_service import CartService

router = APIRouter(prefix="/carts", tags=["Carts"], responses=ERROR_RESPONSES)
logger = logging.getLogger("menufy.api.carts")


def _item_dict(item: CartItemPayload) -> dict:
    return item.model_dump(exclude_none=True)


@router.post("", response_model=CartResponse, status_code=status.HTTP_201_CREATED)
def create_cart(
    payload: CartCreate = CartCreate(),
    carts: CartService = Depends(get_cart_service),
):
    """Open an empty cart for one menu page session"""
    return carts.create_cart(payload.variant)


@router.get("/{cart_id}", response_model=CartResponse)
def get_cart(cart_id: str, carts: CartService = Depends(get_cart_service)):
    return carts.summary(cart_id)


@router.post("/{cart_id}/items", response_model=CartResponse)
def add_cart_item(
    cart_id: str,
    item: CartItemPayload,
    carts: CartService = Depends(get_cart_service),
):
    """Add one unit of an item"""
    return carts.add_item(cart_id, _item_dict(item))


@router.delete("/{cart_id}/items/{item_key}", response_model=CartResponse)
def remove_cart_item(
    cart_id: str, item_key: str, carts: CartService = Depends(get_cart_service)
):
    """Take one unit away; the line disappears when it reaches zero"""
    return carts.remove_item(cart_id, item_key)


@router.put("/{cart_id}/items/{item_key}", response_model=CartResponse)
def set_cart_item_quantity(
    cart_id: str,
    item_key: str,
    update: CartQuantityUpdate,
    carts: CartService = Depends(get_cart_service),
):
    """Set a line's quantity directly; zero or less removes it"""
    item = _item_dict(update.item) if update.item is not None else None
    return carts.set_quantity(cart_id, item_key, update.quantity, item)


@router.post("/{cart_id}/checkout", response_model=CheckoutResponse)
def checkout(cart_id: str, carts: CartService = Depends(get_cart_service)):
    """Place Order. The cart is summarised and discarded; nothing is stored."""
    return carts.checkout(cart_id)


@router.delete("/{cart_id}", response_model=DeleteResponse)
def discard_cart(cart_id: str, carts: CartService = Depends(get_cart_service)):
    if not carts.discard(cart_id):
        logger.debug("Discard of unknown cart %s", cart_id)
    return DeleteResponse(deleted=cart_id)
