# storefront/utils/settings.py
import os
from decimal import Decimal
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


TAX_RATE = Decimal(os.getenv("TAX_RATE", "0.08"))
SHIPPING_FLAT_RATE = Decimal(os.getenv("SHIPPING_FLAT_RATE", "5.00"))
LOW_STOCK_THRESHOLD = int(os.getenv("LOW_STOCK_THRESHOLD", 10))

ENABLE_APPLE_PAY = _flag("ENABLE_APPLE_PAY")
ENABLE_EMAIL_NOTIFIER = _flag("ENABLE_EMAIL_NOTIFIER")
DEFAULT_CARRIER = os.getenv("DEFAULT_CARRIER", "Australia Post")

DEMO_CUSTOMER_ID = int(os.getenv("DEMO_CUSTOMER_ID", 1))
RECENT_ORDERS_LIMIT = int(os.getenv("RECENT_ORDERS_LIMIT", 5))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "text").lower()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))
