"""Order aggregate — an immutable snapshot of a cart at checkout.

Names and prices are copied from the catalogue when the order is placed and
never re-read afterwards. The status field exists for display only; no status
transitions are implemented.
"""

from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum
from uuid import uuid4

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import (
    DateTime,
    HasMany,
    Identifier,
    Integer,
    String,
    ValueObject,
)

from storefront.domain import storefront
from storefront.order.events import OrderPlaced
from storefront.shared.money import from_cents, line_total


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


def generate_order_number(now: datetime | None = None) -> str:
    """``ORD-YYYYMMDD-XXXXXXXXXX``: the placement date plus 10 hex chars of a uuid4."""
    now = now or datetime.now(UTC)
    return f"ORD-{now:%Y%m%d}-{uuid4().hex[:10].upper()}"


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@storefront.value_object(part_of="Order")
class ShippingAddress:
    """Where the order ships. Captured at checkout and never updated."""

    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(max_length=100)
    country = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=20)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@storefront.entity(part_of="Order")
class OrderItem:
    """A product line frozen at checkout time."""

    product_id = Identifier(required=True)
    name = String(required=True, max_length=200)
    price_cents = Integer(required=True, min_value=0)
    quantity = Integer(required=True, min_value=1)

    @property
    def price(self) -> Decimal:
        return from_cents(self.price_cents)

    @property
    def line_total_cents(self) -> int:
        return line_total(self.price_cents, self.quantity)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@storefront.aggregate
class Order:
    user_id = Identifier(required=True)
    order_number = String(required=True, max_length=30, unique=True)
    items = HasMany(OrderItem)
    shipping_address = ValueObject(ShippingAddress, required=True)
    payment_method = String(required=True, max_length=50)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    subtotal_cents = Integer(required=True, min_value=0)
    total_cents = Integer(required=True, min_value=0)
    created_at = DateTime()

    @invariant.post
    def must_have_at_least_one_item(self):
        if not self.items:
            raise ValidationError({"items": ["An order must contain at least one item"]})

    @invariant.post
    def totals_must_match_items(self):
        expected = sum(item.line_total_cents for item in self.items)
        if self.subtotal_cents != expected:
            raise ValidationError({"subtotal": ["Subtotal does not match the order items"]})
        if self.total_cents != self.subtotal_cents:
            raise ValidationError({"total": ["Total must equal the subtotal"]})

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, user_id, lines, shipping_address, payment_method):
        """Create a pending order from resolved cart lines.

        Args:
            user_id: The user placing the order.
            lines: List of dicts with product_id, name, price_cents, quantity.
            shipping_address: Dict with street, city, state, country, zip_code.
            payment_method: Free-form payment method label.
        """
        if not lines:
            raise ValidationError({"cart": ["Cart is empty"]})

        now = datetime.now(UTC)
        items = [
            OrderItem(
                product_id=line["product_id"],
                name=line["name"],
                price_cents=line["price_cents"],
                quantity=line["quantity"],
            )
            for line in lines
        ]
        subtotal = sum(item.line_total_cents for item in items)

        order = cls(
            user_id=user_id,
            order_number=generate_order_number(now),
            items=items,
            shipping_address=ShippingAddress(**shipping_address),
            payment_method=payment_method,
            status=OrderStatus.PENDING.value,
            subtotal_cents=subtotal,
            total_cents=subtotal,
            created_at=now,
        )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                order_number=order.order_number,
                user_id=str(user_id),
                item_count=len(items),
                total_cents=subtotal,
                payment_method=payment_method,
                placed_at=now,
            )
        )
        return order

    @property
    def subtotal(self) -> Decimal:
        return from_cents(self.subtotal_cents)

    @property
    def total(self) -> Decimal:
        return from_cents(self.total_cents)
