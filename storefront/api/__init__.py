# storefront/api/__init__.py
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from storefront.api.routers import carts, dashboard, health, orders, products, receipts, users
from storefront.data.context import StoreContext
from storefront.domain.errors import NotFoundError, PaymentError, StorefrontError, ValidationError

ERROR_STATUS_CODES = {
    NotFoundError: 404,
    PaymentError: 402,
    ValidationError: 422,
}


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    """Map StorefrontError subclasses to HTTP responses."""
    status_code = ERROR_STATUS_CODES.get(type(exc), 400)
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error_type": type(exc).__name__},
    )


def create_app(context: Optional[StoreContext] = None) -> FastAPI:
    app = FastAPI(
        title="Storefront",
        version="1.0.0",
    )
    #one context per application, shared by every request
    app.state.context = context or StoreContext.seeded()

    app.add_exception_handler(StorefrontError, storefront_error_handler)

    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(products.router)
    app.include_router(carts.router)
    app.include_router(orders.router)
    app.include_router(receipts.router)
    app.include_router(dashboard.router)

    return app
