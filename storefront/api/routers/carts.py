# storefront/api/routers/carts.py
from fastapi import APIRouter, Depends

from storefront.data.context import StoreContext, get_context
from storefront.domain.models import Order
from storefront.domain.schemas import CartOut, CheckoutIn, ItemIn, QuantityIn
from storefront.services.cart_service import CartService
from storefront.services.customer_service import CustomerFacade

router = APIRouter(prefix="/carts", tags=["carts"])


def cart_out(user_id: int, cart: CartService) -> CartOut:
    totals = cart.totals()
    return CartOut(
        user_id=user_id,
        items=cart.items(),
        subtotal=totals.subtotal,
        tax=totals.tax,
        shipping=totals.shipping,
        total=totals.total,
    )


@router.get("/{user_id}", response_model=CartOut)
def get_cart(user_id: int, ctx: StoreContext = Depends(get_context)):
    with ctx.lock:
        return cart_out(user_id, ctx.cart_for(user_id))


@router.post("/{user_id}/items", response_model=CartOut)
def add_item(user_id: int, payload: ItemIn, ctx: StoreContext = Depends(get_context)):
    with ctx.lock:
        cart = ctx.cart_for(user_id)
        CustomerFacade(ctx, user_id=user_id).add_to_cart(cart, payload.product_id, payload.quantity)
        return cart_out(user_id, cart)


@router.put("/{user_id}/items/{product_id}", response_model=CartOut)
def update_item(user_id: int, product_id: int, payload: QuantityIn, ctx: StoreContext = Depends(get_context)):
    with ctx.lock:
        cart = ctx.cart_for(user_id)
        cart.update_quantity(product_id, payload.quantity)
        return cart_out(user_id, cart)


@router.delete("/{user_id}/items/{product_id}", response_model=CartOut)
def remove_item(user_id: int, product_id: int, ctx: StoreContext = Depends(get_context)):
    with ctx.lock:
        cart = ctx.cart_for(user_id)
        cart.remove_item(product_id)
        return cart_out(user_id, cart)


@router.delete("/{user_id}", response_model=CartOut)
def clear_cart(user_id: int, ctx: StoreContext = Depends(get_context)):
    with ctx.lock:
        cart = ctx.cart_for(user_id)
        cart.clear()
        return cart_out(user_id, cart)


@router.post("/{user_id}/checkout", response_model=Order, status_code=201)
def checkout(user_id: int, payload: CheckoutIn, ctx: StoreContext = Depends(get_context)):
    with ctx.lock:
        cart = ctx.cart_for(user_id)
        return CustomerFacade(ctx, user_id=user_id).checkout(
            cart, payload.payment_method, payload.shipping_address
        )
