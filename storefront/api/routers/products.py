# storefront/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from storefront.data.context import StoreContext, get_context
from storefront.domain.models import Product
from storefront.domain.schemas import DescriptionIn, ProductIn
from storefront.services.employee_service import EmployeeFacade

router = APIRouter(prefix="/products", tags=["products"])


def get_service(ctx: StoreContext):
    return EmployeeFacade(ctx)


@router.get("", response_model=List[Product])
def list_products(ctx: StoreContext = Depends(get_context)):
    return get_service(ctx).get_all_products()


@router.get("/{product_id}", response_model=Product)
def get_product(product_id: int, ctx: StoreContext = Depends(get_context)):
    product = get_service(ctx).get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.post("", response_model=Product, status_code=201)
def add_product(payload: ProductIn, ctx: StoreContext = Depends(get_context)):
    return get_service(ctx).add_product(payload)


@router.put("/{product_id}", response_model=Product)
def replace_product(product_id: int, payload: ProductIn, ctx: StoreContext = Depends(get_context)):
    """
    Full replacement: fields missing from the body fall back to their
    defaults, they are not merged with the stored record.
    """
    product = Product(id=product_id, **payload.model_dump())
    return get_service(ctx).update_product(product)


@router.patch("/{product_id}/description", response_model=Product)
def update_description(product_id: int, payload: DescriptionIn, ctx: StoreContext = Depends(get_context)):
    return get_service(ctx).update_product_description(product_id, payload.description)


@router.delete("/{product_id}", status_code=204)
def delete_product(product_id: int, ctx: StoreContext = Depends(get_context)):
    get_service(ctx).delete_product(product_id)
    return Response(status_code=204)
