# storefront/services/notification_service.py
"""
Post-purchase fan-out.

PostPaymentProcessor keeps an ordered list of handlers and calls each one
synchronously, in attachment order, once a payment has been approved and the
order stored. A handler that raises is logged and recorded as a
HandlerFailure; the handlers after it still run and nothing already done
(payment, order, earlier handlers) is rolled back.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Protocol

from storefront.domain.models import Order, Receipt, Shipment
from storefront.repos.product_repo import ProductRepo
from storefront.repos.receipt_repo import ReceiptRepo
from storefront.repos.shipment_repo import ShipmentRepo
from storefront.utils.identifiers import generate_receipt_number, generate_tracking_number
from storefront.utils.settings import DEFAULT_CARRIER, ENABLE_EMAIL_NOTIFIER
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PaymentEvent:
    order: Order
    payment_method: str
    payment_amount: Decimal


@dataclass(frozen=True)
class HandlerFailure:
    handler: str
    error: Exception


class PaymentObserver(Protocol):
    def handle(self, event: PaymentEvent) -> Optional[object]: ...


class ReceiptGenerator:
    def __init__(self, receipts: ReceiptRepo):
        self.receipts = receipts

    def handle(self, event: PaymentEvent) -> Receipt:
        receipt = self.receipts.create(
            Receipt(
                order_id=event.order.id,
                receipt_number=generate_receipt_number(),
                amount=event.payment_amount,
                payment_method=event.payment_method,
            )
        )
        logger.info(f"Receipt {receipt.receipt_number} generated for order {event.order.order_number}")
        return receipt


class InventoryAdjuster:
    """Takes the purchased quantities out of catalogue stock."""

    def __init__(self, products: ProductRepo):
        self.products = products

    def handle(self, event: PaymentEvent) -> None:
        for item in event.order.items:
            before = self.products.get_by_id(item.product_id)
            if before and before.stock < item.quantity:
                logger.warning(
                    f"Product {item.product_id} oversold: stock {before.stock}, "
                    f"ordered {item.quantity}"
                )
            after = self.products.adjust_stock(item.product_id, -item.quantity)
            logger.info(f"Stock for product {item.product_id} reduced by {item.quantity} to {after.stock}")


class ShipmentCreator:
    def __init__(self, shipments: ShipmentRepo, carrier: str = DEFAULT_CARRIER):
        self.shipments = shipments
        self.carrier = carrier

    def handle(self, event: PaymentEvent) -> Shipment:
        shipment = self.shipments.create(
            Shipment(
                order_id=event.order.id,
                status="Pending",
                tracking_number=generate_tracking_number(),
                carrier=self.carrier,
            )
        )
        logger.info(
            f"Shipment {shipment.tracking_number} created for order {event.order.order_number} "
            f"to {event.order.shipping_address}"
        )
        return shipment


class EmailNotifier:
    def handle(self, event: PaymentEvent) -> None:
        #no mail transport, log only
        logger.info(f"Order confirmation email queued for order {event.order.order_number}")


class PostPaymentProcessor:
    def __init__(self, handlers: Optional[List[PaymentObserver]] = None):
        self._handlers: List[PaymentObserver] = []
        for handler in handlers or []:
            self.attach(handler)

    @classmethod
    def with_defaults(
        cls,
        products: ProductRepo,
        receipts: ReceiptRepo,
        shipments: ShipmentRepo,
    ) -> "PostPaymentProcessor":
        handlers: List[PaymentObserver] = [
            ReceiptGenerator(receipts),
            InventoryAdjuster(products),
            ShipmentCreator(shipments),
        ]
        if ENABLE_EMAIL_NOTIFIER:
            handlers.append(EmailNotifier())
        return cls(handlers)

    @property
    def handlers(self) -> List[PaymentObserver]:
        return list(self._handlers)

    def attach(self, handler: PaymentObserver) -> None:
        #identity, not equality
        if any(h is handler for h in self._handlers):
            logger.debug(f"{type(handler).__name__} already attached")
            return
        self._handlers.append(handler)

    def detach(self, handler: PaymentObserver) -> None:
        for index, h in enumerate(self._handlers):
            if h is handler:
                del self._handlers[index]
                return
        logger.debug(f"{type(handler).__name__} was not attached")

    def notify(self, event: PaymentEvent) -> List[HandlerFailure]:
        logger.info(f"Notifying {len(self._handlers)} handlers for order {event.order.order_number}")

        failures: List[HandlerFailure] = []
        for handler in list(self._handlers):
            name = type(handler).__name__
            try:
                handler.handle(event)
            except Exception as e:
                logger.exception(f"{name} failed for order {event.order.order_number}")
                failures.append(HandlerFailure(handler=name, error=e))
        return failures
