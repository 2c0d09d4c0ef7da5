# storefront/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from storefront.data.context import StoreContext, get_context
from storefront.domain.models import Order, Shipment
from storefront.domain.schemas import PurchaseIn, StatusIn
from storefront.services.customer_service import CustomerFacade
from storefront.services.employee_service import EmployeeFacade
from storefront.utils.settings import DEMO_CUSTOMER_ID

router = APIRouter(tags=["orders"])


def get_service(ctx: StoreContext, user_id: int = DEMO_CUSTOMER_ID):
    return CustomerFacade(ctx, user_id=user_id)


@router.get("/payment-methods", response_model=List[str])
def payment_methods(ctx: StoreContext = Depends(get_context)):
    return get_service(ctx).get_payment_methods()


@router.post("/orders", response_model=Order, status_code=201)
def create_order(payload: PurchaseIn, ctx: StoreContext = Depends(get_context)):
    """
    Charges the checkout total and stores the order.
    402 when the payment method is not accepted, 422 on incomplete input.
    """
    svc = get_service(ctx, payload.user_id or DEMO_CUSTOMER_ID)
    return svc.process_purchase(payload.items, payload.payment_method, payload.shipping_address)


@router.get("/orders", response_model=List[Order])
def list_orders(
    user_id: int = Query(DEMO_CUSTOMER_ID, gt=0),
    ctx: StoreContext = Depends(get_context),
):
    return get_service(ctx, user_id).get_orders()


@router.get("/orders/{order_id}", response_model=Order)
def get_order(order_id: int, ctx: StoreContext = Depends(get_context)):
    order = get_service(ctx).get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.patch("/orders/{order_id}/status", response_model=Order)
def update_status(order_id: int, payload: StatusIn, ctx: StoreContext = Depends(get_context)):
    return EmployeeFacade(ctx).update_order_status(order_id, payload.status)


@router.get("/orders/{order_id}/shipment", response_model=Shipment)
def get_shipment(order_id: int, ctx: StoreContext = Depends(get_context)):
    shipment = get_service(ctx).get_shipment(order_id)
    if not shipment:
        raise HTTPException(status_code=404, detail="Shipment not found")
    return shipment
