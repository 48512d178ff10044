from pydantic import BaseModel, Field
from typing import Optional, List, Union

from domain.enums import CartVariant, OrderStatus


class CartCreate(BaseModel):
    variant: CartVariant = Field(
        default=CartVariant.MENU,
        description="'menu' keys items by id with numeric prices; 'demo' by name with '₹40' prices",
    )


class CartItemPayload(BaseModel):
    """Menu item as shown to the diner; extra fields are kept on the line"""

    id: Optional[str] = None
    name: str
    price: Union[float, str]
    description: Optional[str] = None

    model_config = {"extra": "allow"}


class CartQuantityUpdate(BaseModel):
    quantity: int = Field(..., description="Zero or less removes the line")
    item: Optional[CartItemPayload] = Field(
        None, description="Required when the item is not in the cart yet"
    )


class CartLineResponse(BaseModel):
    key: str
    name: str
    unit_price: float
    quantity: int
    line_total: float


class CartResponse(BaseModel):
    cart_id: str
    variant: CartVariant
    lines: List[CartLineResponse]
    item_count: int
    total: int
    total_display: str


class CheckoutResponse(BaseModel):
    """Summary returned by Place Order; nothing is persisted"""

    cart_id: str
    status: OrderStatus
    lines: List[CartLineResponse]
    item_count: int
    total: int
    total_display: str
    message: str
