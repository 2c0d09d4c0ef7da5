# storefront/data/context.py
import threading
from dataclasses import dataclass, field
from typing import Dict

from fastapi import Request

from storefront.data import seed
from storefront.repos.order_repo import OrderRepo
from storefront.repos.product_repo import ProductRepo
from storefront.repos.receipt_repo import ReceiptRepo
from storefront.repos.shipment_repo import ShipmentRepo
from storefront.repos.user_repo import UserRepo
from storefront.services.cart_service import CartService


@dataclass
class StoreContext:
    """
    Owns every in-memory store for one application lifetime.

    Facades receive the context instead of building their own repositories,
    so an edit made through one facade is seen by every other one.
    """

    products: ProductRepo = field(default_factory=ProductRepo)
    orders: OrderRepo = field(default_factory=OrderRepo)
    receipts: ReceiptRepo = field(default_factory=ReceiptRepo)
    shipments: ShipmentRepo = field(default_factory=ShipmentRepo)
    users: UserRepo = field(default_factory=UserRepo)
    carts: Dict[int, CartService] = field(default_factory=dict)
    lock: threading.RLock = field(default_factory=threading.RLock)

    @classmethod
    def seeded(cls) -> "StoreContext":
        return cls(
            products=ProductRepo(seed.seed_products()),
            orders=OrderRepo(seed.seed_orders()),
            receipts=ReceiptRepo(seed.seed_receipts()),
            shipments=ShipmentRepo(seed.seed_shipments()),
            users=UserRepo(seed.seed_users()),
        )

    def cart_for(self, user_id: int) -> CartService:
        with self.lock:
            if user_id not in self.carts:
                self.carts[user_id] = CartService()
            return self.carts[user_id]


def get_context(request: Request) -> StoreContext:
    return request.app.state.context
