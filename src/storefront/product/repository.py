"""Repository for the Product aggregate."""

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.shared.queries import fetch_all


@storefront.repository(part_of=Product)
class ProductRepository:
    def find_by_sku(self, sku: str) -> Product | None:
        products = self._dao.query.filter(sku=sku).all().items
        return products[0] if products else None

    def listing(self, category: str | None = None, featured: bool | None = None) -> list[Product]:
        """All products matching the optional filters, ordered by name."""
        filters = {}
        if category is not None:
            filters["category"] = category
        if featured is not None:
            filters["featured"] = featured

        query = self._dao.query
        if filters:
            query = query.filter(**filters)
        return fetch_all(query.order_by("name"))

    def is_empty(self) -> bool:
        return self._dao.query.all().total == 0
