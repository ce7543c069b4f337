# This file implements the product service facade over the catalog and admin product endpoints.
# It exists so catalog filters are passed to the backend verbatim and unset filters never reach the query string.
# A few utility operations have no backend endpoint yet; they are registered in PLACEHOLDER_OPERATIONS.
# Placeholders answer with fixed empty payloads, or raise in strict mode, and never touch the network.

from __future__ import annotations

import logging
from typing import Any

from src.client.errors import BackendCapabilityMissingError
from src.client.http_client import ApiClient
from src.schemas.common import ApiResponse, parse_envelope
from src.schemas.product_schemas import (
    CategoryListResponse,
    CreateProductRequest,
    ListingFilters,
    ListProductsResponse,
    PriceRange,
    Product,
    ProductActivationResponse,
    ProductDetailResponse,
    ProductFeaturedResponse,
    ProductSortField,
    ProductStatsResponse,
    SearchProductsRequest,
    SearchProductsResponse,
    SortOrder,
    StockUpdateResponse,
    UpdateProductRequest,
    UpdateStockRequest,
    ViewProductRequest,
)

LOGGER = logging.getLogger("storefront.products")

PLACEHOLDER_OPERATIONS: frozenset[str] = frozenset(
    {"get_categories", "get_low_stock_products", "get_product_stats"}
)

DEFAULT_LOW_STOCK_LIMIT = 20


class ProductService:
    def __init__(self, *, api_client: ApiClient, strict_placeholders: bool = False) -> None:
        self.api_client = api_client
        self.strict_placeholders = strict_placeholders

    # Public endpoints

    def get_products(
        self,
        *,
        offset: int | None = None,
        limit: int | None = None,
        category: str | None = None,
        brand: str | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
        is_featured: bool | None = None,
        sort_by: ProductSortField | None = None,
        sort_order: SortOrder | None = None,
    ) -> ApiResponse[ListProductsResponse]:
        params: dict[str, Any] = {
            "offset": offset,
            "limit": limit,
            "category": category,
            "brand": brand,
            "min_price": min_price,
            "max_price": max_price,
            "is_featured": is_featured,
            "sort_by": sort_by,
            "sort_order": sort_order,
        }
        payload = self.api_client.get("/products", params=params)
        return parse_envelope(payload, ListProductsResponse)

    def search_products(self, request: SearchProductsRequest) -> ApiResponse[SearchProductsResponse]:
        payload = self.api_client.get("/products/search", params=request.model_dump())
        return parse_envelope(payload, SearchProductsResponse)

    def get_products_by_category(
        self,
        category: str,
        *,
        offset: int | None = None,
        limit: int | None = None,
        sort_by: ProductSortField | None = None,
        sort_order: SortOrder | None = None,
    ) -> ApiResponse[ListProductsResponse]:
        params = {"offset": offset, "limit": limit, "sort_by": sort_by, "sort_order": sort_order}
        payload = self.api_client.get(f"/products/category/{category}", params=params)
        return parse_envelope(payload, ListProductsResponse)

    def get_product_by_id(self, product_id: int) -> ApiResponse[ProductDetailResponse]:
        return parse_envelope(self.api_client.get(f"/products/{product_id}"), ProductDetailResponse)

    def view_product(
        self, product_id: int, request: ViewProductRequest | None = None
    ) -> ApiResponse[Any]:
        body = request.to_payload() if request is not None else None
        return parse_envelope(self.api_client.post(f"/products/{product_id}/view", body), Any)

    # Admin endpoints

    def create_product(self, request: CreateProductRequest) -> ApiResponse[Product]:
        payload = self.api_client.post("/admin/products", request.to_payload())
        return parse_envelope(payload, Product)

    def update_product(self, product_id: int, request: UpdateProductRequest) -> ApiResponse[Product]:
        payload = self.api_client.put(f"/admin/products/{product_id}", request.to_payload())
        return parse_envelope(payload, Product)

    def delete_product(self, product_id: int) -> ApiResponse[Any]:
        return parse_envelope(self.api_client.delete(f"/admin/products/{product_id}"), Any)

    def update_stock(self, product_id: int, stock_quantity: int) -> ApiResponse[StockUpdateResponse]:
        request = UpdateStockRequest(stock_quantity=stock_quantity)
        payload = self.api_client.put(f"/admin/products/{product_id}/stock", request.to_payload())
        return parse_envelope(payload, StockUpdateResponse)

    def activate_product(self, product_id: int) -> ApiResponse[ProductActivationResponse]:
        payload = self.api_client.post(f"/admin/products/{product_id}/activate")
        return parse_envelope(payload, ProductActivationResponse)

    def set_featured(self, product_id: int) -> ApiResponse[ProductFeaturedResponse]:
        payload = self.api_client.post(f"/admin/products/{product_id}/featured")
        return parse_envelope(payload, ProductFeaturedResponse)

    # Convenience filters over get_products

    def get_featured_products(self, limit: int = 10) -> ApiResponse[ListProductsResponse]:
        return self.get_products(is_featured=True, limit=limit)

    def get_products_by_brand(
        self,
        brand: str,
        *,
        offset: int | None = None,
        limit: int | None = None,
        sort_by: ProductSortField | None = None,
        sort_order: SortOrder | None = None,
    ) -> ApiResponse[ListProductsResponse]:
        return self.get_products(
            brand=brand, offset=offset, limit=limit, sort_by=sort_by, sort_order=sort_order
        )

    def get_products_in_price_range(
        self,
        min_price: float,
        max_price: float,
        *,
        offset: int | None = None,
        limit: int | None = None,
        sort_by: ProductSortField | None = None,
        sort_order: SortOrder | None = None,
    ) -> ApiResponse[ListProductsResponse]:
        return self.get_products(
            min_price=min_price,
            max_price=max_price,
            offset=offset,
            limit=limit,
            sort_by=sort_by,
            sort_order=sort_order,
        )

    # Placeholders: no backend endpoint exists for these yet

    def get_categories(self) -> ApiResponse[CategoryListResponse]:
        self._placeholder("get_categories")
        return ApiResponse[CategoryListResponse](
            success=True,
            message="Categories retrieved successfully",
            data=CategoryListResponse(categories=[], total=0),
        )

    def get_low_stock_products(
        self,
        threshold: int = 10,
        *,
        offset: int | None = None,
        limit: int | None = None,
    ) -> ApiResponse[ListProductsResponse]:
        self._placeholder("get_low_stock_products")
        return ApiResponse[ListProductsResponse](
            success=True,
            message="Low stock products retrieved successfully",
            data=ListProductsResponse(
                products=[],
                total=0,
                offset=offset or 0,
                limit=limit or DEFAULT_LOW_STOCK_LIMIT,
                filters=ListingFilters(
                    categories=[], brands=[], price_range=PriceRange(min=0, max=0)
                ),
            ),
        )

    def get_product_stats(self) -> ApiResponse[ProductStatsResponse]:
        self._placeholder("get_product_stats")
        return ApiResponse[ProductStatsResponse](
            success=True,
            message="Product statistics retrieved successfully",
            data=ProductStatsResponse(
                total_products=0,
                active_products=0,
                inactive_products=0,
                featured_products=0,
                low_stock_products=0,
                total_categories=0,
                total_brands=0,
            ),
        )

    def _placeholder(self, operation: str) -> None:
        if self.strict_placeholders:
            raise BackendCapabilityMissingError(operation)
        LOGGER.info("%s has no backend endpoint yet; returning an empty payload", operation)
