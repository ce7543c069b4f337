# This file defines product-service schemas for catalog records, admin writes, and listing facets.
# It exists so catalog responses are typed and admin write payloads only carry the fields callers set.
# Optional request fields stay unset rather than defaulting to empty lists or zero prices.

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from src.schemas.common import RequestModel, ResponseModel

ProductSortField = Literal["name", "price", "created_at", "updated_at"]
SortOrder = Literal["asc", "desc"]


class Product(ResponseModel):
    id: int
    name: str
    description: str | None = None
    price: float
    category: str | None = None
    brand: str | None = None
    sku: str | None = None
    stock_quantity: int
    is_active: bool
    is_featured: bool
    images: list[str] | None = None
    specifications: dict[str, Any] | None = None
    created_at: datetime
    updated_at: datetime


class ProductVariant(ResponseModel):
    id: int
    product_id: int
    name: str
    value: str
    price_adjustment: float
    stock_quantity: int
    is_active: bool
    created_at: datetime
    updated_at: datetime


class Category(ResponseModel):
    id: int
    name: str
    description: str | None = None
    parent_id: int | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class VariantInput(RequestModel):
    name: str
    value: str
    price_adjustment: float = 0.0
    stock_quantity: int = 0
    is_active: bool = True


class CreateProductRequest(RequestModel):
    name: str
    description: str
    price: float
    category: str
    brand: str
    sku: str
    stock_quantity: int
    images: list[str] | None = None
    specifications: dict[str, Any] | None = None
    variants: list[VariantInput] | None = None


class UpdateProductRequest(RequestModel):
    name: str | None = None
    description: str | None = None
    price: float | None = None
    category: str | None = None
    brand: str | None = None
    sku: str | None = None
    stock_quantity: int | None = None
    images: list[str] | None = None
    specifications: dict[str, Any] | None = None
    is_active: bool | None = None
    is_featured: bool | None = None


class UpdateStockRequest(RequestModel):
    stock_quantity: int


class SearchProductsRequest(RequestModel):
    query: str | None = None
    category: str | None = None
    brand: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    is_featured: bool | None = None
    is_active: bool | None = None
    offset: int | None = None
    limit: int | None = None
    sort_by: ProductSortField | None = None
    sort_order: SortOrder | None = None


class ViewProductRequest(RequestModel):
    user_id: int | None = None
    ip_address: str | None = None
    user_agent: str | None = None


class PriceRange(ResponseModel):
    min: float
    max: float


class ListingFilters(ResponseModel):
    categories: list[str]
    brands: list[str]
    price_range: PriceRange


class ListProductsResponse(ResponseModel):
    products: list[Product]
    total: int
    offset: int
    limit: int
    filters: ListingFilters | None = None


class ProductDetailResponse(ResponseModel):
    product: Product
    variants: list[ProductVariant]
    related_products: list[Product]
    view_count: int


class SearchProductsResponse(ResponseModel):
    products: list[Product]
    total: int
    offset: int
    limit: int
    search_query: str | None = None
    filters_applied: dict[str, Any] | None = None


class CategoryListResponse(ResponseModel):
    categories: list[Category]
    total: int


class StockUpdateResponse(ResponseModel):
    product_id: int
    old_stock: int
    new_stock: int
    updated_at: datetime


class ProductActivationResponse(ResponseModel):
    product_id: int
    is_active: bool
    message: str | None = None


class ProductFeaturedResponse(ResponseModel):
    product_id: int
    is_featured: bool
    message: str | None = None


class ProductStatsResponse(ResponseModel):
    total_products: int
    active_products: int
    inactive_products: int
    featured_products: int
    low_stock_products: int
    total_categories: int
    total_brands: int
