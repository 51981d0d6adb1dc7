"""Response schemas for the product API."""

from datetime import datetime

from storefront.api.schemas import CamelModel


class ProductSchema(CamelModel):
    id: str
    name: str
    description: str
    price: float
    category: str
    stock: int
    sku: str
    rating: float
    num_reviews: int
    featured: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_product(cls, product) -> "ProductSchema":
        return cls(
            id=str(product.id),
            name=product.name,
            description=product.description,
            price=float(product.price),
            category=product.category,
            stock=product.stock or 0,
            sku=product.sku,
            rating=product.rating or 0.0,
            num_reviews=product.num_reviews or 0,
            featured=bool(product.featured),
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class ProductListResponse(CamelModel):
    success: bool = True
    data: list[ProductSchema]


class ProductResponse(CamelModel):
    success: bool = True
    data: ProductSchema
