# storefront/services/payment_service.py
"""
Mock payment methods and the processor that selects one by name.

The method set is closed: each PaymentMethod member maps to a handler in
PAYMENT_HANDLERS, and a handler always approves with a synthetic
"<PREFIX>-<epoch millis>" transaction id. No real gateway is called.
"""
import time
from decimal import Decimal
from enum import Enum
from typing import Callable, Dict, Iterable, List

from storefront.domain.models import PaymentResult, to_cents
from storefront.utils.settings import ENABLE_APPLE_PAY
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class PaymentMethod(str, Enum):
    CREDIT_CARD = "Credit Card"
    PAYPAL = "PayPal"
    BANK_TRANSFER = "Bank Transfer"
    APPLE_PAY = "Apple Pay"
    IN_STORE = "Pay in Store"


TRANSACTION_PREFIXES: Dict[PaymentMethod, str] = {
    PaymentMethod.CREDIT_CARD: "CC",
    PaymentMethod.PAYPAL: "PP",
    PaymentMethod.BANK_TRANSFER: "BT",
    PaymentMethod.APPLE_PAY: "AP",
    PaymentMethod.IN_STORE: "SHOP",
}

SUCCESS_MESSAGES: Dict[PaymentMethod, str] = {
    PaymentMethod.CREDIT_CARD: "Credit card payment successful",
    PaymentMethod.PAYPAL: "PayPal payment successful",
    PaymentMethod.BANK_TRANSFER: "Bank transfer initiated successfully",
    PaymentMethod.APPLE_PAY: "Apple Pay payment successful",
    PaymentMethod.IN_STORE: "Payment will be collected in store",
}

PaymentHandler = Callable[[Decimal], PaymentResult]


def _transaction_id(method: PaymentMethod) -> str:
    return f"{TRANSACTION_PREFIXES[method]}-{int(time.time() * 1000)}"


def _make_handler(method: PaymentMethod) -> PaymentHandler:
    def pay(amount: Decimal) -> PaymentResult:
        if amount is None or amount < 0:
            return PaymentResult(
                success=False,
                method_name=method.value,
                message="Invalid payment amount",
            )

        logger.info(f"Processing {method.value} payment of ${to_cents(amount)}")
        return PaymentResult(
            success=True,
            method_name=method.value,
            transaction_id=_transaction_id(method),
            message=SUCCESS_MESSAGES[method],
        )

    pay.__name__ = f"pay_{method.name.lower()}"
    return pay


PAYMENT_HANDLERS: Dict[PaymentMethod, PaymentHandler] = {
    method: _make_handler(method) for method in PaymentMethod
}


def default_methods() -> List[PaymentMethod]:
    methods = [PaymentMethod.CREDIT_CARD, PaymentMethod.PAYPAL, PaymentMethod.BANK_TRANSFER]
    if ENABLE_APPLE_PAY:
        methods.append(PaymentMethod.APPLE_PAY)
    return methods


class PaymentProcessor:
    """
    Selects a registered payment method by its display name.

    Registration order is the order reported by get_available_methods().
    """

    def __init__(self, methods: Iterable[PaymentMethod] | None = None):
        self._handlers: Dict[str, PaymentHandler] = {}
        for method in default_methods() if methods is None else methods:
            self.register(method)

    def register(self, method: PaymentMethod, handler: PaymentHandler | None = None) -> None:
        self._handlers[method.value] = handler or PAYMENT_HANDLERS[method]

    def get_available_methods(self) -> List[str]:
        return list(self._handlers)

    def is_supported(self, method_name: str) -> bool:
        return method_name in self._handlers

    def process_payment(self, method_name: str, amount: Decimal) -> PaymentResult:
        handler = self._handlers.get(method_name)

        if handler is None:
            logger.warning(f"Rejected payment with unsupported method '{method_name}'")
            return PaymentResult(
                success=False,
                method_name=method_name,
                message=f"Payment method '{method_name}' is not supported",
            )

        try:
            return handler(amount)
        except Exception as e:
            logger.exception(f"{method_name} payment handler raised")
            return PaymentResult(
                success=False,
                method_name=method_name,
                message=f"Payment failed: {e}",
            )
