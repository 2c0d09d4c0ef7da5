# storefront/services/employee_service.py
from collections import Counter
from decimal import Decimal
from typing import Dict, List, Optional

from storefront.data.context import StoreContext
from storefront.domain.models import Order, Product, Statistics, TopSellingProduct, to_cents
from storefront.domain.schemas import DashboardOut, InventoryItem, PendingShipment, ProductIn
from storefront.utils.settings import LOW_STOCK_THRESHOLD, RECENT_ORDERS_LIMIT
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def stock_status(stock: int) -> str:
    if stock > LOW_STOCK_THRESHOLD:
        return "In Stock"
    if stock > 0:
        return "Low Stock"
    return "Out of Stock"


def compute_statistics(orders: List[Order], top_n: int = 3) -> Statistics:
    revenue = sum((o.total for o in orders), Decimal("0.00"))
    average = to_cents(revenue / len(orders)) if orders else Decimal("0.00")

    sold: Counter = Counter()
    names: Dict[int, str] = {}
    for order in orders:
        for item in order.items:
            sold[item.product_id] += item.quantity
            names[item.product_id] = item.name

    #ties broken by product id so the ranking is stable
    ranked = sorted(sold.items(), key=lambda kv: (-kv[1], kv[0]))[:top_n]

    return Statistics(
        orders_count=len(orders),
        total_revenue=to_cents(revenue),
        average_order_value=average,
        top_selling_products=[
            TopSellingProduct(id=pid, name=names[pid], quantity=qty) for pid, qty in ranked
        ],
    )


class EmployeeFacade:
    """
    Back-office entry point: catalogue maintenance, order status and the
    dashboard. The dashboard is rebuilt from the stores on every call.
    """

    def __init__(self, context: StoreContext):
        self.context = context

    #catalogue
    def get_all_products(self) -> List[Product]:
        return self.context.products.get_all()

    def get_product(self, product_id: int) -> Optional[Product]:
        return self.context.products.get_by_id(product_id)

    def update_product_description(self, product_id: int, description: str) -> Product:
        product = self.context.products.update_description(product_id, description)
        logger.info(f"Description of product {product_id} updated")
        return product

    def update_product(self, product: Product) -> Product:
        updated = self.context.products.update(product)
        logger.info(f"Product {product.id} replaced")
        return updated

    def add_product(self, payload: ProductIn) -> Product:
        product = self.context.products.add(Product(**payload.model_dump()))
        logger.info(f"Product {product.id} ({product.name}) added")
        return product

    def delete_product(self, product_id: int) -> None:
        self.context.products.delete(product_id)
        logger.info(f"Product {product_id} deleted")

    #orders
    def update_order_status(self, order_id: int, status: str) -> Order:
        order = self.context.orders.update_status(order_id, status)
        logger.info(f"Order {order_id} status -> {status}")
        return order

    def get_dashboard_data(self) -> DashboardOut:
        orders = self.context.orders.get_all()
        users = {u.id: u for u in self.context.users.get_all()}

        recent = sorted(orders, key=lambda o: o.created_at, reverse=True)[:RECENT_ORDERS_LIMIT]

        inventory = [
            InventoryItem(**p.model_dump(), status=stock_status(p.stock))
            for p in self.context.products.get_all()
        ]

        shipments = [
            PendingShipment(
                order_id=o.id,
                customer_name=users[o.user_id].name if o.user_id in users else "Unknown",
                date=o.created_at,
                status=o.status,
            )
            for o in orders
        ]

        return DashboardOut(
            statistics=compute_statistics(orders),
            recent_orders=recent,
            inventory_items=inventory,
            pending_shipments=shipments,
        )
