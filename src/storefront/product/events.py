"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    sku: String(required=True)
    name: String(required=True)
    category: String(required=True)
    price_cents: Integer(required=True)
    added_at: DateTime(required=True)
