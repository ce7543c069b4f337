# This file implements the basket service facade over the cart and admin basket endpoints.
# It exists so every cart mutation is tied to the user identity held in the session snapshot.
# Shopper operations fail fast with NotAuthenticatedError before any request when no snapshot is cached.
# Bulk helpers submit one request per item in order and stop at the first failure without rollback.

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from src.client.errors import ApiError, ApiUnavailableError, NotAuthenticatedError
from src.client.http_client import ApiClient
from src.client.session_store import SessionStore
from src.schemas.basket_schemas import (
    AddItemRequest,
    Basket,
    CleanupExpiredBasketsResponse,
    ClearBasketResponse,
    CreateBasketRequest,
    DeleteBasketResponse,
    UpdateItemRequest,
)
from src.schemas.common import ApiResponse, failure_envelope, parse_envelope

LOGGER = logging.getLogger("storefront.basket")


@dataclass(frozen=True)
class BasketLine:
    product_id: int
    quantity: int
    unit_price: float


@dataclass(frozen=True)
class QuantityChange:
    product_id: int
    quantity: int


@dataclass(frozen=True)
class BulkItemOutcome:
    product_id: int
    ok: bool
    response: ApiResponse[Basket] | None = None
    error: Exception | None = None


@dataclass
class BulkOperationReport:
    outcomes: list[BulkItemOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> list[BulkItemOutcome]:
        return [outcome for outcome in self.outcomes if outcome.ok]

    @property
    def failed(self) -> list[BulkItemOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]

    @property
    def all_succeeded(self) -> bool:
        return bool(self.outcomes) and not self.failed

    @property
    def last_response(self) -> ApiResponse[Basket] | None:
        for outcome in reversed(self.outcomes):
            if outcome.ok:
                return outcome.response
        return None


class BasketService:
    def __init__(self, *, api_client: ApiClient, session_store: SessionStore) -> None:
        self.api_client = api_client
        self.session_store = session_store

    # Shopper endpoints

    def create_basket(self) -> ApiResponse[Basket]:
        user_id = self._require_user_id()
        request = CreateBasketRequest(user_id=user_id)
        return parse_envelope(self.api_client.post("/basket", request.to_payload()), Basket)

    def get_basket(self) -> ApiResponse[Basket]:
        self._require_user_id()
        return parse_envelope(self.api_client.get("/basket"), Basket)

    def add_item(self, product_id: int, quantity: int, unit_price: float) -> ApiResponse[Basket]:
        user_id = self._require_user_id()
        return self._post_item(user_id, BasketLine(product_id, quantity, unit_price))

    def update_item(self, product_id: int, quantity: int) -> ApiResponse[Basket]:
        user_id = self._require_user_id()
        return self._put_item(user_id, QuantityChange(product_id, quantity))

    def remove_item(self, product_id: int) -> ApiResponse[Basket]:
        self._require_user_id()
        return self._delete_item(product_id)

    def clear_basket(self) -> ApiResponse[ClearBasketResponse]:
        self._require_user_id()
        return parse_envelope(self.api_client.delete("/basket/clear"), ClearBasketResponse)

    # Admin endpoints

    def get_user_basket(self, user_id: int) -> ApiResponse[Basket]:
        return parse_envelope(self.api_client.get(f"/admin/baskets/{user_id}"), Basket)

    def delete_user_basket(self, user_id: int) -> ApiResponse[DeleteBasketResponse]:
        payload = self.api_client.delete(f"/admin/baskets/{user_id}")
        return parse_envelope(payload, DeleteBasketResponse)

    def cleanup_expired_baskets(self) -> ApiResponse[CleanupExpiredBasketsResponse]:
        payload = self.api_client.post("/admin/baskets/cleanup")
        return parse_envelope(payload, CleanupExpiredBasketsResponse)

    # Derived summaries; API failures read as an empty basket

    def get_basket_item_count(self) -> int:
        basket = self._basket_or_none()
        return basket.item_count if basket is not None else 0

    def is_basket_empty(self) -> bool:
        basket = self._basket_or_none()
        return basket is None or len(basket.items) == 0

    def get_basket_total(self) -> float:
        basket = self._basket_or_none()
        return basket.total if basket is not None else 0.0

    # Bulk helpers

    def add_multiple_items(self, items: Sequence[BasketLine]) -> ApiResponse[Basket]:
        """Add items one request at a time, in order.

        The first failing request aborts the remaining items and its exception
        propagates; items added before it stay in the basket. Returns the
        response of the last request, or a failure envelope for an empty list.
        """

        user_id = self._require_user_id()
        return self._run_sequential(
            items, lambda item: self._post_item(user_id, item), "Failed to add items"
        )

    def update_multiple_items(self, items: Sequence[QuantityChange]) -> ApiResponse[Basket]:
        user_id = self._require_user_id()
        return self._run_sequential(
            items, lambda item: self._put_item(user_id, item), "Failed to update items"
        )

    def remove_multiple_items(self, product_ids: Sequence[int]) -> ApiResponse[Basket]:
        self._require_user_id()
        return self._run_sequential(product_ids, self._delete_item, "Failed to remove items")

    def add_items_best_effort(self, items: Sequence[BasketLine]) -> BulkOperationReport:
        """Add every item in order, recording failures instead of stopping at them.

        Precondition and transport failures still abort: only HTTP rejections
        of individual items are collected in the report.
        """

        user_id = self._require_user_id()
        report = BulkOperationReport()
        for item in items:
            try:
                response = self._post_item(user_id, item)
            except ApiError as exc:
                LOGGER.warning(
                    "Bulk add: product_id=%s rejected with status %s", item.product_id, exc.status_code
                )
                report.outcomes.append(BulkItemOutcome(product_id=item.product_id, ok=False, error=exc))
                continue
            report.outcomes.append(
                BulkItemOutcome(product_id=item.product_id, ok=True, response=response)
            )
        return report

    def _run_sequential(
        self,
        items: Iterable[Any],
        submit: Callable[[Any], ApiResponse[Basket]],
        empty_message: str,
    ) -> ApiResponse[Basket]:
        last_response: ApiResponse[Basket] | None = None
        for position, item in enumerate(items):
            try:
                last_response = submit(item)
            except Exception:
                LOGGER.warning("Bulk basket operation aborted at item %s", position)
                raise
        return last_response if last_response is not None else failure_envelope(empty_message)

    def _post_item(self, user_id: int, item: BasketLine) -> ApiResponse[Basket]:
        request = AddItemRequest(
            user_id=user_id,
            product_id=item.product_id,
            quantity=item.quantity,
            unit_price=item.unit_price,
        )
        return parse_envelope(self.api_client.post("/basket/items", request.to_payload()), Basket)

    def _put_item(self, user_id: int, change: QuantityChange) -> ApiResponse[Basket]:
        request = UpdateItemRequest(user_id=user_id, quantity=change.quantity)
        payload = self.api_client.put(
            "/basket/items",
            request.to_payload(),
            params={"product_id": change.product_id},
        )
        return parse_envelope(payload, Basket)

    def _delete_item(self, product_id: int) -> ApiResponse[Basket]:
        return parse_envelope(self.api_client.delete(f"/basket/items/{product_id}"), Basket)

    def _basket_or_none(self) -> Basket | None:
        try:
            response = self.get_basket()
        except (ApiError, ApiUnavailableError, NotAuthenticatedError) as exc:
            LOGGER.debug("Basket summary unavailable: %s", exc)
            return None
        return response.data if response.success else None

    def _require_user_id(self) -> int:
        snapshot = self.session_store.get_user_snapshot()
        if snapshot is None:
            raise NotAuthenticatedError()
        user_id = snapshot.get("id")
        if isinstance(user_id, bool) or not isinstance(user_id, int):
            raise NotAuthenticatedError("Cached user snapshot has no usable id")
        return user_id
