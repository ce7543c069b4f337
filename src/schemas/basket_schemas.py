# This file defines basket-service schemas for carts, line items, and admin maintenance results.
# Totals and counts are computed by the backend; the client only carries them.

from __future__ import annotations

from datetime import datetime

from src.schemas.common import RequestModel, ResponseModel


class BasketItem(ResponseModel):
    id: int
    product_id: int
    quantity: int
    unit_price: float
    total_price: float
    created_at: datetime
    updated_at: datetime


class Basket(ResponseModel):
    id: str
    user_id: int
    items: list[BasketItem]
    total: float
    item_count: int
    created_at: datetime
    updated_at: datetime
    expires_at: datetime
    is_expired: bool


class CreateBasketRequest(RequestModel):
    user_id: int


class AddItemRequest(RequestModel):
    user_id: int
    product_id: int
    quantity: int
    unit_price: float


class UpdateItemRequest(RequestModel):
    user_id: int
    quantity: int


class ClearBasketResponse(ResponseModel):
    success: bool
    message: str


class DeleteBasketResponse(ResponseModel):
    success: bool
    message: str


class CleanupExpiredBasketsResponse(ResponseModel):
    success: bool
    message: str
    cleaned_count: int
