"""FastAPI endpoints for browsing the catalogue."""

from fastapi import APIRouter

from storefront.api.catalogue.schemas import ProductListResponse, ProductResponse, ProductSchema
from storefront.product.lookup import get_product, list_products

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=ProductListResponse)
async def browse_products(category: str | None = None, featured: bool | None = None) -> ProductListResponse:
    products = list_products(category=category, featured=featured)
    return ProductListResponse(data=[ProductSchema.from_product(p) for p in products])


@router.get("/{product_id}", response_model=ProductResponse)
async def product_detail(product_id: str) -> ProductResponse:
    return ProductResponse(data=ProductSchema.from_product(get_product(product_id)))
