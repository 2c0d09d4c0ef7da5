# storefront/data/seed.py
"""
Demo dataset loaded into every new StoreContext.

Each function builds fresh model instances, so two contexts never share
records by reference.
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import List

from storefront.domain.models import CartLineItem, Order, Product, Receipt, Shipment, User
from storefront.services.cart_service import cart_totals

FALLBACK_IMAGE = "/images/fallback.png"


def _day(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


def seed_users() -> List[User]:
    return [
        User(id=1, username="customer1", password="pass123", name="Alice Customer", role="customer"),
        User(id=2, username="employee1", password="pass456", name="Bob Manager", role="employee"),
    ]


def seed_products() -> List[Product]:
    return [
        Product(
            id=1,
            name="Soldering Station Kit",
            description="60W adjustable soldering iron kit for electronics work.",
            price=Decimal("89.95"),
            image=FALLBACK_IMAGE,
            category="Tools",
            stock=12,
        ),
        Product(
            id=2,
            name="Arduino-Compatible UNO Board",
            description="ATmega328-based microcontroller board for prototyping projects.",
            price=Decimal("39.95"),
            image=FALLBACK_IMAGE,
            category="Components",
            stock=25,
        ),
        Product(
            id=3,
            name="Digital Multimeter",
            description="Auto-ranging digital multimeter with voltage, current, and continuity functions.",
            price=Decimal("59.99"),
            image=FALLBACK_IMAGE,
            category="Tools",
            stock=18,
        ),
        Product(
            id=4,
            name="Raspberry Pi 4 Model B (4GB)",
            description="Single-board computer with 4GB RAM and dual micro-HDMI.",
            price=Decimal("129.00"),
            image=FALLBACK_IMAGE,
            category="Components",
            stock=10,
        ),
        Product(
            id=5,
            name="Jumper Wire Set",
            description="120-piece jumper wire kit (male/male, male/female, female/female).",
            price=Decimal("9.95"),
            image=FALLBACK_IMAGE,
            category="Components",
            stock=50,
        ),
    ]


def _line(product: Product, quantity: int) -> CartLineItem:
    return CartLineItem(
        product_id=product.id,
        name=product.name,
        price=product.price,
        quantity=quantity,
        image=product.image,
    )


def seed_orders() -> List[Order]:
    products = {p.id: p for p in seed_products()}
    address = "123 Maker Street, Melbourne, VIC 3000"

    first = [_line(products[1], 1), _line(products[2], 2)]
    second = [_line(products[5], 3), _line(products[3], 1)]
    first_totals, second_totals = cart_totals(first), cart_totals(second)

    return [
        Order(
            id=1,
            user_id=1,
            order_number="ORD-70001",
            status="Delivered",
            items=first,
            shipping_address=address,
            payment_method="Credit Card",
            subtotal=first_totals.subtotal,
            total=first_totals.total,
            created_at=_day("2024-10-01"),
            updated_at=_day("2024-10-02"),
        ),
        Order(
            id=2,
            user_id=1,
            order_number="ORD-70002",
            status="Shipped",
            items=second,
            shipping_address=address,
            payment_method="PayPal",
            subtotal=second_totals.subtotal,
            total=second_totals.total,
            created_at=_day("2024-10-03"),
            updated_at=_day("2024-10-04"),
        ),
    ]


def seed_receipts() -> List[Receipt]:
    orders = {o.id: o for o in seed_orders()}
    return [
        Receipt(
            id=1,
            order_id=1,
            receipt_number="RCT-70001",
            amount=orders[1].total,
            payment_method="Credit Card",
            created_at=_day("2024-10-01"),
        ),
        Receipt(
            id=2,
            order_id=2,
            receipt_number="RCT-70002",
            amount=orders[2].total,
            payment_method="PayPal",
            created_at=_day("2024-10-03"),
        ),
    ]


def seed_shipments() -> List[Shipment]:
    return [
        Shipment(
            id=1,
            order_id=1,
            status="Delivered",
            tracking_number="TRK482913305",
            carrier="Australia Post",
            created_at=_day("2024-10-02"),
            updated_at=_day("2024-10-04"),
        ),
        Shipment(
            id=2,
            order_id=2,
            status="In Transit",
            tracking_number="TRK517266094",
            carrier="StarTrack",
            created_at=_day("2024-10-04"),
            updated_at=_day("2024-10-05"),
        ),
    ]
