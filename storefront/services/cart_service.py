# storefront/services/cart_service.py
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Optional

from pydantic import TypeAdapter

from storefront.domain.models import CartLineItem, to_cents
from storefront.utils.settings import SHIPPING_FLAT_RATE, TAX_RATE
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_lines_adapter = TypeAdapter(List[CartLineItem])


@dataclass(frozen=True)
class CartTotals:
    subtotal: Decimal
    tax: Decimal
    shipping: Decimal
    total: Decimal


def cart_totals(items: Iterable[CartLineItem]) -> CartTotals:
    """
    Derive subtotal, tax, shipping and total from the given lines.

    Always computed from the lines passed in; nothing is cached.
    """
    items = list(items)
    subtotal = sum((i.line_total for i in items), Decimal("0.00"))
    tax = to_cents(subtotal * TAX_RATE)
    shipping = SHIPPING_FLAT_RATE if items else Decimal("0.00")

    return CartTotals(
        subtotal=to_cents(subtotal),
        tax=tax,
        shipping=to_cents(shipping),
        total=to_cents(subtotal + tax + shipping),
    )


class CartService:
    """
    Per-session cart: at most one line per product_id.
    """

    def __init__(self, items: Iterable[CartLineItem] = ()):
        self._items: List[CartLineItem] = []
        for item in items:
            self.add_item(item)

    #query
    def items(self) -> List[CartLineItem]:
        return list(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def subtotal(self) -> Decimal:
        return cart_totals(self._items).subtotal

    def totals(self) -> CartTotals:
        return cart_totals(self._items)

    def _find(self, product_id: int) -> Optional[CartLineItem]:
        return next((i for i in self._items if i.product_id == product_id), None)

    #commands
    def add_item(self, item: CartLineItem) -> CartLineItem:
        existing = self._find(item.product_id)
        if existing:
            logger.info(
                f"Product {item.product_id} already in cart, quantity "
                f"{existing.quantity} -> {existing.quantity + item.quantity}"
            )
            existing.quantity += item.quantity
            return existing

        line = item.model_copy()
        self._items.append(line)
        logger.info(f"Added product {item.product_id} x{item.quantity} to cart")
        return line

    def update_quantity(self, product_id: int, quantity: int) -> Optional[CartLineItem]:
        if quantity <= 0:
            self.remove_item(product_id)
            return None

        existing = self._find(product_id)
        if not existing:
            return None
        existing.quantity = quantity
        return existing

    def remove_item(self, product_id: int) -> None:
        self._items = [i for i in self._items if i.product_id != product_id]

    def clear(self) -> None:
        self._items = []

    #serialization for session storage
    def to_json(self) -> str:
        return _lines_adapter.dump_json(self._items).decode()

    @classmethod
    def from_json(cls, raw: str) -> "CartService":
        return cls(_lines_adapter.validate_json(raw))
