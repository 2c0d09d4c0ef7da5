# storefront/services/customer_service.py
from typing import Any, Iterable, List, Optional

import pydantic
from pydantic import TypeAdapter

from storefront.data.context import StoreContext
from storefront.domain.errors import NotFoundError, PaymentError, ValidationError
from storefront.domain.models import CartLineItem, Order, Product, Receipt, Shipment
from storefront.services.cart_service import CartService, cart_totals
from storefront.services.notification_service import PaymentEvent, PostPaymentProcessor
from storefront.services.payment_service import PaymentProcessor
from storefront.utils.identifiers import generate_order_number
from storefront.utils.settings import DEMO_CUSTOMER_ID
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_lines_adapter = TypeAdapter(List[CartLineItem])


class CustomerFacade:
    """
    Customer-facing entry point: browsing, checkout and order lookup.

    Use case process_purchase:
    1. validates the items, address and payment method
    2. prices every line from the catalogue
    3. charges the checkout total (subtotal + tax + shipping)
    4. stores the order with status "Processing"
    5. notifies the post-payment handlers (receipt, inventory, shipment)

    Steps 1-3 fail before anything is stored.
    """

    def __init__(
        self,
        context: StoreContext,
        user_id: int = DEMO_CUSTOMER_ID,
        payment_processor: Optional[PaymentProcessor] = None,
        notifier: Optional[PostPaymentProcessor] = None,
    ):
        self.context = context
        self.user_id = user_id
        self.payment_processor = payment_processor or PaymentProcessor()
        self.notifier = notifier or PostPaymentProcessor.with_defaults(
            products=context.products,
            receipts=context.receipts,
            shipments=context.shipments,
        )

    #query
    def get_all_products(self) -> List[Product]:
        return self.context.products.get_all()

    def get_payment_methods(self) -> List[str]:
        return self.payment_processor.get_available_methods()

    def get_order(self, order_id: int) -> Optional[Order]:
        return self.context.orders.get_by_id(order_id)

    def get_orders(self) -> List[Order]:
        return self.context.orders.get_by_user_id(self.user_id)

    def get_receipt(self, order_id: int) -> Optional[Receipt]:
        return self.context.receipts.get_by_order_id(order_id)

    def get_shipment(self, order_id: int) -> Optional[Shipment]:
        return self.context.shipments.get_by_order_id(order_id)

    #commands
    def process_purchase(
        self,
        items: Iterable[Any],
        payment_method: str,
        shipping_address: str,
    ) -> Order:
        lines = self._validate(items, payment_method, shipping_address)

        with self.context.lock:
            lines = self._price_lines(lines)
            totals = cart_totals(lines)

            logger.info(
                f"Charging {totals.total} via {payment_method} for user {self.user_id} "
                f"({len(lines)} lines)"
            )
            result = self.payment_processor.process_payment(payment_method, totals.total)

            if not result.success:
                logger.warning(f"Payment rejected for user {self.user_id}: {result.message}")
                raise PaymentError(result.message, method=payment_method)

            order = self.context.orders.create(
                Order(
                    user_id=self.user_id,
                    order_number=generate_order_number(),
                    status="Processing",
                    items=lines,
                    shipping_address=shipping_address.strip(),
                    payment_method=payment_method,
                    subtotal=totals.subtotal,
                    total=totals.total,
                    transaction_id=result.transaction_id,
                )
            )
            logger.info(f"Order {order.id} ({order.order_number}) created, transaction {result.transaction_id}")

            failures = self.notifier.notify(
                PaymentEvent(order=order, payment_method=payment_method, payment_amount=totals.total)
            )
            if failures:
                logger.warning(
                    f"Order {order.id} stored with {len(failures)} failed post-payment handler(s): "
                    f"{', '.join(f.handler for f in failures)}"
                )

            return order

    def add_to_cart(self, cart: CartService, product_id: int, quantity: int) -> CartLineItem:
        if quantity <= 0:
            raise ValidationError("Quantity must be positive")
        product = self.context.products.get_by_id(product_id)
        if not product:
            raise NotFoundError("Product", product_id)

        #price and name as of now
        return cart.add_item(
            CartLineItem(
                product_id=product.id,
                name=product.name,
                price=product.price,
                quantity=quantity,
                image=product.image,
            )
        )

    def checkout(self, cart: CartService, payment_method: str, shipping_address: str) -> Order:
        #cart is cleared only after a successful purchase
        order = self.process_purchase(cart.items(), payment_method, shipping_address)
        cart.clear()
        return order

    def _validate(
        self,
        items: Iterable[Any],
        payment_method: str,
        shipping_address: str,
    ) -> List[CartLineItem]:
        try:
            lines = _lines_adapter.validate_python(list(items))
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid line items: {e.error_count()} error(s)") from e

        if not lines:
            raise ValidationError("Cannot check out an empty cart")
        if not shipping_address or not shipping_address.strip():
            raise ValidationError("Please enter a shipping address")
        if not payment_method or not payment_method.strip():
            raise ValidationError("Please select a payment method")

        return lines

    def _price_lines(self, lines: List[CartLineItem]) -> List[CartLineItem]:
        """Rebuild each line from the stored product; unknown ids raise NotFoundError."""
        priced = []
        for line in lines:
            product = self.context.products.get_by_id(line.product_id)
            if not product:
                raise NotFoundError("Product", line.product_id)
            if line.price != product.price:
                logger.info(
                    f"Line for product {product.id} repriced from {line.price} to {product.price}"
                )
            priced.append(
                CartLineItem(
                    product_id=product.id,
                    name=product.name,
                    price=product.price,
                    quantity=line.quantity,
                    image=product.image,
                )
            )
        return priced
