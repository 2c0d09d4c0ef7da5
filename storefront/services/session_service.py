# storefront/services/session_service.py
"""
Client-session blobs.

The UI keeps the logged-in user, the cart and the last placed order as JSON
strings under fixed keys. SessionStorage models that key/value store so the
records can be saved and restored without a browser.
"""
from typing import MutableMapping, Optional

import pydantic

from storefront.domain.models import Order, User
from storefront.services.cart_service import CartService
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

USER_KEY = "user"
CART_KEY = "cart"
LAST_ORDER_KEY = "lastOrder"


class SessionStorage:
    def __init__(self, backend: Optional[MutableMapping[str, str]] = None):
        self.backend: MutableMapping[str, str] = backend if backend is not None else {}

    def _load(self, key: str, parse):
        raw = self.backend.get(key)
        if raw is None:
            return None
        try:
            return parse(raw)
        except pydantic.ValidationError:
            #broken blob is dropped, same as a missing one
            logger.warning(f"Discarding unreadable session value under '{key}'")
            del self.backend[key]
            return None

    def save_user(self, user: User) -> None:
        self.backend[USER_KEY] = user.model_dump_json()

    def load_user(self) -> Optional[User]:
        return self._load(USER_KEY, User.model_validate_json)

    def save_cart(self, cart: CartService) -> None:
        self.backend[CART_KEY] = cart.to_json()

    def load_cart(self) -> CartService:
        return self._load(CART_KEY, CartService.from_json) or CartService()

    def save_last_order(self, order: Order) -> None:
        self.backend[LAST_ORDER_KEY] = order.model_dump_json()

    def load_last_order(self) -> Optional[Order]:
        return self._load(LAST_ORDER_KEY, Order.model_validate_json)

    def logout(self) -> None:
        self.backend.pop(USER_KEY, None)

    def clear(self) -> None:
        self.backend.clear()
