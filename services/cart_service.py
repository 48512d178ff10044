"""
Page-session carts.

Carts live in process memory only: they disappear on checkout, on explicit
discard, after sitting idle longer than the configured TTL and on restart.
Place Order is a terminal action with no backend effect.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional
import logging
import threading
import time
import uuid

from app.exceptions import NotFoundError, ServiceValidationError
from core.utils.helpers import format_currency
from domain.cart import Cart
from domain.enums import CartVariant, OrderStatus

logger = logging.getLogger("menufy.cart")

DEFAULT_CART_TTL_SEC = 3 * 60 * 60


@dataclass
class CartSession:
    variant: CartVariant
    cart: Cart
    touched_at: float


class CartService:
    """Registry of open carts keyed by a random cart id.

    Every read and mutation runs under one lock, so concurrent requests on
    the same cart never interleave.
    """

    def __init__(
        self,
        currency_symbol: str = "₹",
        ttl_seconds: float = DEFAULT_CART_TTL_SEC,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.currency_symbol = currency_symbol
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._carts: Dict[str, CartSession] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._carts)

    # ------------------ Internals (caller holds the lock) ------------------
    def _evict_idle(self, now: float) -> None:
        expired = [
            cart_id
            for cart_id, session in self._carts.items()
            if now - session.touched_at > self.ttl_seconds
        ]
        for cart_id in expired:
            del self._carts[cart_id]
        if expired:
            logger.info("Discarded %d idle carts", len(expired))

    def _get(self, cart_id: str) -> CartSession:
        now = self._clock()
        self._evict_idle(now)
        session = self._carts.get(cart_id)
        if session is None:
            raise NotFoundError("Cart not found")
        session.touched_at = now
        return session

    def _summary(self, cart_id: str, session: CartSession) -> Dict[str, Any]:
        cart = session.cart
        total = cart.total()
        return {
            "cart_id": cart_id,
            "variant": session.variant,
            "lines": [
                {
                    "key": line.key,
                    "name": line.item.get("name", line.key),
                    "unit_price": float(line.unit_price),
                    "quantity": line.quantity,
                    "line_total": float(line.line_total),
                }
                for line in cart.lines
            ],
            "item_count": cart.item_count(),
            "total": total,
            "total_display": format_currency(total, self.currency_symbol),
        }

    # ------------------ Operations ------------------
    def summary(self, cart_id: str) -> Dict[str, Any]:
        with self._lock:
            return self._summary(cart_id, self._get(cart_id))

    def create_cart(self, variant: CartVariant = CartVariant.MENU) -> Dict[str, Any]:
        cart_id = uuid.uuid4().hex
        with self._lock:
            now = self._clock()
            self._evict_idle(now)
            session = CartSession(variant, Cart.for_variant(variant), now)
            self._carts[cart_id] = session
            logger.debug("Opened %s cart %s", variant.value, cart_id)
            return self._summary(cart_id, session)

    def add_item(self, cart_id: str, item: Mapping[str, Any]) -> Dict[str, Any]:
        with self._lock:
            session = self._get(cart_id)
            try:
                session.cart.add(item)
            except (KeyError, ValueError) as exc:
                raise ServiceValidationError(f"Cannot add item to cart: {exc}")
            return self._summary(cart_id, session)

    def remove_item(self, cart_id: str, key: str) -> Dict[str, Any]:
        with self._lock:
            session = self._get(cart_id)
            session.cart.remove(key)
            return self._summary(cart_id, session)

    def set_quantity(
        self, cart_id: str, key: str, quantity: int, item: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        with self._lock:
            session = self._get(cart_id)
            try:
                session.cart.set_quantity(key, quantity, item)
            except KeyError:
                raise NotFoundError(f"Item '{key}' is not in the cart")
            except ValueError as exc:
                raise ServiceValidationError(f"Cannot update cart: {exc}")
            return self._summary(cart_id, session)

    def checkout(self, cart_id: str) -> Dict[str, Any]:
        """
        Place Order: summarise the cart and discard it.

        Raises:
            NotFoundError: unknown or expired cart
            ServiceValidationError: the cart is empty
        """
        with self._lock:
            session = self._get(cart_id)
            if not len(session.cart):
                raise ServiceValidationError("Cannot place an order with an empty cart")
            summary = self._summary(cart_id, session)
            del self._carts[cart_id]
        logger.info(
            "Order placed from cart %s: %d items, total %s",
            cart_id,
            summary["item_count"],
            summary["total_display"],
        )
        return {
            **summary,
            "status": OrderStatus.PLACED,
            "message": "Order placed! Please show this summary to your server.",
        }

    def discard(self, cart_id: str) -> bool:
        with self._lock:
            return self._carts.pop(cart_id, None) is not None
