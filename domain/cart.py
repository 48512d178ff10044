"""
Cart state model shared by the restaurant menu and the static demo menu.

A cart is an ordered mapping from item key to a line holding the item, its
unit price and a positive quantity. How the key and the unit price are read
from an item is pluggable, so the same add/remove/total rules serve both
numeric-priced menu items and demo items priced as "₹40" strings.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

from core.utils.helpers import parse_currency
from domain.enums import CartVariant

Item = Mapping[str, Any]
KeyExtractor = Callable[[Item], str]
PriceExtractor = Callable[[Item], Decimal]


def item_id_key(item: Item) -> str:
    return str(item["id"])


def item_name_key(item: Item) -> str:
    return str(item["name"])


def numeric_price(item: Item) -> Decimal:
    price = item["price"]
    if isinstance(price, bool) or not isinstance(price, (int, float, Decimal)):
        raise ValueError(f"Expected a numeric price, got {price!r}")
    return Decimal(str(price))


def currency_price(item: Item) -> Decimal:
    return parse_currency(item["price"])


@dataclass
class CartLine:
    key: str
    item: Dict[str, Any]
    unit_price: Decimal
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


class Cart:
    """In-memory cart for a single page session."""

    def __init__(
        self,
        key_of: KeyExtractor = item_id_key,
        price_of: PriceExtractor = numeric_price,
    ):
        self._key_of = key_of
        self._price_of = price_of
        self._lines: Dict[str, CartLine] = {}

    @classmethod
    def for_variant(cls, variant: CartVariant) -> "Cart":
        if variant == CartVariant.DEMO:
            return cls(key_of=item_name_key, price_of=currency_price)
        return cls(key_of=item_id_key, price_of=numeric_price)

    def _new_line(self, item: Item, quantity: int) -> CartLine:
        unit_price = self._price_of(item)
        if unit_price < 0:
            raise ValueError("Price must not be negative")
        return CartLine(
            key=self._key_of(item),
            item=dict(item),
            unit_price=unit_price,
            quantity=quantity,
        )

    def add(self, item: Item) -> CartLine:
        """Add one unit; new keys are appended after existing lines."""
        key = self._key_of(item)
        line = self._lines.get(key)
        if line is not None:
            line.quantity += 1
            return line
        line = self._new_line(item, 1)
        self._lines[key] = line
        return line

    def remove(self, key: str) -> Optional[CartLine]:
        """Take away one unit. Returns the line, or None once it is gone."""
        line = self._lines.get(key)
        if line is None:
            return None
        if line.quantity > 1:
            line.quantity -= 1
            return line
        del self._lines[key]
        return None

    def set_quantity(
        self, key: str, quantity: int, item: Optional[Item] = None
    ) -> Optional[CartLine]:
        """Set the quantity directly; zero or less drops the line.

        A key not yet in the cart needs ``item`` to build its line.
        """
        if quantity <= 0:
            self._lines.pop(key, None)
            return None
        line = self._lines.get(key)
        if line is None:
            if item is None:
                raise KeyError(key)
            line = self._new_line(item, quantity)
            if line.key != key:
                raise ValueError(f"Item key {line.key!r} does not match {key!r}")
            self._lines[key] = line
            return line
        line.quantity = quantity
        return line

    def quantity_of(self, key: str) -> int:
        line = self._lines.get(key)
        return line.quantity if line else 0

    def subtotal(self) -> Decimal:
        return sum((line.line_total for line in self._lines.values()), Decimal("0"))

    def total(self) -> int:
        """Sum of unit price × quantity, rounded to whole currency units."""
        return int(self.subtotal().quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    @property
    def lines(self) -> List[CartLine]:
        return list(self._lines.values())

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, key: object) -> bool:
        return key in self._lines

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self.lines)
