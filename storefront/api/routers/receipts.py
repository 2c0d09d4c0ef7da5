# storefront/api/routers/receipts.py
from fastapi import APIRouter, Depends, HTTPException

from storefront.data.context import StoreContext, get_context
from storefront.domain.models import Receipt
from storefront.services.customer_service import CustomerFacade

router = APIRouter(prefix="/receipts", tags=["receipts"])


@router.get("/{order_id}", response_model=Receipt)
def get_receipt(order_id: int, ctx: StoreContext = Depends(get_context)):
    receipt = CustomerFacade(ctx).get_receipt(order_id)
    if not receipt:
        raise HTTPException(status_code=404, detail="Receipt not found")
    return receipt
