# storefront/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from storefront.domain.models import CartLineItem, Order, Product, Statistics


class ProductIn(BaseModel):
    """Schema for creating a product; the id is assigned by the catalogue."""

    name: str = Field(..., min_length=1, description="Product name")
    description: str = ""
    price: Decimal = Field(..., ge=0, description="Unit price (>= 0)")
    stock: int = Field(0, ge=0, description="Units in stock (>= 0)")
    category: str = ""
    image: str = ""


class DescriptionIn(BaseModel):
    description: str


class StatusIn(BaseModel):
    status: str = Field(..., min_length=1, description="e.g. Processing, Shipped, Delivered")


class ItemIn(BaseModel):
    """Schema for adding a catalogue product to a cart."""

    product_id: int = Field(..., gt=0, description="Product id (> 0)")
    quantity: int = Field(..., gt=0, description="Quantity (> 0)")


class QuantityIn(BaseModel):
    """Zero or a negative quantity removes the line."""

    quantity: int


class CheckoutIn(BaseModel):
    payment_method: str
    shipping_address: str


class PurchaseIn(BaseModel):
    """Schema for POST /orders."""

    items: List[CartLineItem]
    payment_method: str
    shipping_address: str
    user_id: Optional[int] = Field(None, gt=0, description="Defaults to the demo customer")


class CartOut(BaseModel):
    user_id: int
    items: List[CartLineItem]
    subtotal: Decimal
    tax: Decimal
    shipping: Decimal
    total: Decimal


class LoginIn(BaseModel):
    username: str
    password: str


class UserRead(BaseModel):
    """User without the password."""

    id: int
    username: str
    name: str
    role: Literal["customer", "employee"]

    model_config = ConfigDict(from_attributes=True)


class InventoryItem(Product):
    status: Literal["In Stock", "Low Stock", "Out of Stock"]


class PendingShipment(BaseModel):
    order_id: int
    customer_name: str
    date: datetime
    status: str


class DashboardOut(BaseModel):
    statistics: Statistics
    recent_orders: List[Order]
    inventory_items: List[InventoryItem]
    pending_shipments: List[PendingShipment]
