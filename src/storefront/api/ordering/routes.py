"""FastAPI routes for the caller's cart and orders."""

from fastapi import APIRouter, Depends

from storefront import services
from storefront.api.concurrency import run_in_domain_thread
from storefront.api.dependencies import current_identity, get_cart_guard
from storefront.api.ordering.schemas import (
    AddToCartRequest,
    CartResponse,
    CartSchema,
    OrderListResponse,
    OrderResponse,
    OrderSchema,
    PlaceOrderRequest,
)
from storefront.api.schemas import SuccessResponse
from storefront.cart.guard import CartGuard
from storefront.cart.view import price_cart
from storefront.order.history import list_orders
from storefront.user.tokens import UserIdentity

# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=CartResponse)
async def view_cart(identity: UserIdentity = Depends(current_identity)) -> CartResponse:
    cart = services.get_cart(identity.user_id)
    return CartResponse(data=CartSchema.from_view(price_cart(cart)))


@cart_router.post("/items", response_model=CartResponse)
async def add_cart_item(
    body: AddToCartRequest,
    identity: UserIdentity = Depends(current_identity),
    guard: CartGuard = Depends(get_cart_guard),
) -> CartResponse:
    cart = await run_in_domain_thread(services.add_item, guard, identity.user_id, body.product_id, body.quantity)
    return CartResponse(data=CartSchema.from_view(price_cart(cart)))


@cart_router.delete("/items/{product_id}", response_model=SuccessResponse)
async def remove_cart_item(
    product_id: str,
    identity: UserIdentity = Depends(current_identity),
    guard: CartGuard = Depends(get_cart_guard),
) -> SuccessResponse:
    await run_in_domain_thread(services.remove_item, guard, identity.user_id, product_id)
    return SuccessResponse()


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderResponse)
async def place_order(
    body: PlaceOrderRequest,
    identity: UserIdentity = Depends(current_identity),
    guard: CartGuard = Depends(get_cart_guard),
) -> OrderResponse:
    order = await run_in_domain_thread(
        services.place_order,
        guard,
        identity.user_id,
        shipping_address=body.shipping_address.model_dump(),
        payment_method=body.payment_method,
    )
    return OrderResponse(data=OrderSchema.from_order(order))


@order_router.get("", response_model=OrderListResponse)
async def order_history(identity: UserIdentity = Depends(current_identity)) -> OrderListResponse:
    return OrderListResponse(data=[OrderSchema.from_order(o) for o in list_orders(identity.user_id)])
