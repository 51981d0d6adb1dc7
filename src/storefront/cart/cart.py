"""Cart aggregate — one per user, cleared (not deleted) at checkout.

Line items reference products by id only. Prices are resolved against the
catalogue whenever the cart is rendered or checked out.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from storefront.cart.events import CartCleared, CartItemAdded, CartItemRemoved
from storefront.domain import storefront


@storefront.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@storefront.aggregate
class Cart:
    user_id = Identifier(required=True, unique=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_line_per_product(self):
        product_ids = [str(item.product_id) for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A product may appear only once in a cart"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def open(cls, user_id):
        now = datetime.now(UTC)
        return cls(user_id=user_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def line_for(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def add_item(self, product_id, quantity):
        """Add a product to the cart, or increase its quantity if already present."""
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be a positive integer"]})

        now = datetime.now(UTC)
        existing = self.line_for(product_id)

        if existing:
            existing.quantity += quantity
            new_quantity = existing.quantity
        else:
            self.add_items(CartItem(product_id=product_id, quantity=quantity, added_at=now))
            new_quantity = quantity

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                product_id=str(product_id),
                quantity=quantity,
                line_quantity=new_quantity,
            )
        )

    def remove_item(self, product_id):
        """Remove a product's line. Removing an absent product is a no-op."""
        item = self.line_for(product_id)
        if item is None:
            return False

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                product_id=str(product_id),
            )
        )
        return True

    def clear(self):
        """Empty the cart after checkout. The cart itself is kept."""
        for item in list(self.items):
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(CartCleared(cart_id=str(self.id), user_id=str(self.user_id)))

    @property
    def is_empty(self):
        return not self.items

    def snapshot(self):
        """The (product_id, quantity) pairs currently in the cart, in insertion order."""
        return [(str(item.product_id), item.quantity) for item in self.items]
