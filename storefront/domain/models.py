# storefront/domain/models.py
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

CENTS = Decimal("0.01")


def to_cents(amount: Decimal) -> Decimal:
    return Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(BaseModel):
    """Catalogue record, replaced wholesale on update."""

    id: Optional[int] = None
    name: str = Field(..., min_length=1)
    description: str = ""
    price: Decimal = Field(..., ge=0)
    stock: int = Field(0, ge=0)
    category: str = ""
    image: str = ""

    model_config = ConfigDict(validate_assignment=True)


class CartLineItem(BaseModel):
    """Cart or order entry with a price snapshot taken when it was added."""

    product_id: int = Field(..., gt=0)
    name: str
    price: Decimal = Field(..., ge=0)
    quantity: int = Field(..., gt=0)
    image: str = ""

    model_config = ConfigDict(validate_assignment=True)

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


class Order(BaseModel):
    id: Optional[int] = None
    user_id: int
    order_number: str
    status: str = "Processing"
    items: List[CartLineItem]
    shipping_address: str
    payment_method: str
    subtotal: Decimal
    total: Decimal
    transaction_id: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Receipt(BaseModel):
    id: Optional[int] = None
    order_id: int
    receipt_number: str
    amount: Decimal
    payment_method: str
    created_at: datetime = Field(default_factory=utcnow)


class Shipment(BaseModel):
    id: Optional[int] = None
    order_id: int
    status: str = "Pending"
    tracking_number: Optional[str] = None
    carrier: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class User(BaseModel):
    """Demo account; the password is compared in plaintext."""

    id: int
    username: str
    password: str
    name: str
    role: Literal["customer", "employee"]


class PaymentResult(BaseModel):
    success: bool
    message: str
    method_name: Optional[str] = None
    transaction_id: Optional[str] = None


class TopSellingProduct(BaseModel):
    id: int
    name: str
    quantity: int


class Statistics(BaseModel):
    orders_count: int
    total_revenue: Decimal
    average_order_value: Decimal
    top_selling_products: List[TopSellingProduct]
    updated_at: datetime = Field(default_factory=utcnow)
