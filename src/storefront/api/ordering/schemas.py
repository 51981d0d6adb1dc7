"""Pydantic request/response schemas for the cart and order API.

These are external contracts, separate from the internal protean commands.
"""

from datetime import datetime

from pydantic import Field

from storefront.api.catalogue.schemas import ProductSchema
from storefront.api.schemas import CamelModel
from storefront.shared.money import from_cents


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class AddressSchema(CamelModel):
    street: str = Field(min_length=1)
    city: str = Field(min_length=1)
    state: str | None = None
    country: str = Field(min_length=1)
    zip_code: str = Field(min_length=1)


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddToCartRequest(CamelModel):
    product_id: str
    quantity: int = Field(default=1, ge=1)


class CartItemSchema(CamelModel):
    product_id: str
    quantity: int
    product: ProductSchema | None = None


class CartSchema(CamelModel):
    items: list[CartItemSchema] = []
    subtotal: float = 0.0

    @classmethod
    def from_view(cls, view) -> "CartSchema":
        return cls(
            items=[
                CartItemSchema(
                    product_id=line.product_id,
                    quantity=line.quantity,
                    product=ProductSchema.from_product(line.product) if line.product else None,
                )
                for line in view.lines
            ],
            subtotal=float(from_cents(view.subtotal_cents)),
        )


class CartResponse(CamelModel):
    success: bool = True
    data: CartSchema


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class PlaceOrderRequest(CamelModel):
    shipping_address: AddressSchema
    payment_method: str = Field(min_length=1, max_length=50)


class OrderItemSchema(CamelModel):
    product_id: str
    name: str
    price: float
    quantity: int


class OrderSchema(CamelModel):
    id: str
    order_number: str
    user_id: str
    items: list[OrderItemSchema]
    shipping_address: AddressSchema
    payment_method: str
    status: str
    subtotal: float
    total: float
    created_at: datetime | None = None

    @classmethod
    def from_order(cls, order) -> "OrderSchema":
        address = order.shipping_address
        return cls(
            id=str(order.id),
            order_number=order.order_number,
            user_id=str(order.user_id),
            items=[
                OrderItemSchema(
                    product_id=str(item.product_id),
                    name=item.name,
                    price=float(item.price),
                    quantity=item.quantity,
                )
                for item in order.items
            ],
            shipping_address=AddressSchema(
                street=address.street,
                city=address.city,
                state=address.state,
                country=address.country,
                zip_code=address.zip_code,
            ),
            payment_method=order.payment_method,
            status=order.status,
            subtotal=float(order.subtotal),
            total=float(order.total),
            created_at=order.created_at,
        )


class OrderResponse(CamelModel):
    success: bool = True
    data: OrderSchema


class OrderListResponse(CamelModel):
    success: bool = True
    data: list[OrderSchema]
