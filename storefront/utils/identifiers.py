# storefront/utils/identifiers.py
import random


def generate_order_number() -> str:
    return f"ORD-{random.randint(10000, 99999)}"


def generate_receipt_number() -> str:
    return f"RCT-{random.randint(10000, 99999)}"


def generate_tracking_number() -> str:
    return f"TRK{random.randint(100000000, 999999999)}"
