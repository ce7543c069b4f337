# This file implements the payment service facade over the payment backend.
# It exists so payments, refunds, stored payment methods, and admin analytics share one contract.
# The service talks to the payment base URL, which may live on a different host than the main API.
# Checkout redirects and client secrets are passed through untouched for external payment flows.

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from src.client.http_client import ApiClient
from src.schemas.common import ApiResponse, parse_envelope
from src.schemas.payment_schemas import (
    AddPaymentMethodRequest,
    CreatePaymentRequest,
    CreateRefundRequest,
    ListPaymentMethodsResponse,
    ListPaymentsResponse,
    ListRefundsResponse,
    Payment,
    PaymentMethodKind,
    PaymentMethodResponse,
    PaymentResponse,
    PaymentStatsResponse,
    PaymentStatus,
    ProcessPaymentRequest,
    Refund,
    RefundResponse,
    RefundStatus,
    StatsPeriod,
    UpdatePaymentMethodRequest,
    UpdatePaymentStatusRequest,
)

def _date_param(value: date | datetime | str | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return value.isoformat()


class PaymentService:
    def __init__(self, *, api_client: ApiClient) -> None:
        self.api_client = api_client

    # Payments

    def create_payment(self, request: CreatePaymentRequest) -> ApiResponse[PaymentResponse]:
        payload = self.api_client.post("/payments", request.to_payload())
        return parse_envelope(payload, PaymentResponse)

    def process_payment(self, request: ProcessPaymentRequest) -> ApiResponse[PaymentResponse]:
        payload = self.api_client.post("/payments/process", request.to_payload())
        return parse_envelope(payload, PaymentResponse)

    def get_payment(self, payment_id: str) -> ApiResponse[Payment]:
        return parse_envelope(self.api_client.get(f"/payments/{payment_id}"), Payment)

    def list_payments(
        self,
        *,
        offset: int | None = None,
        limit: int | None = None,
        status: PaymentStatus | None = None,
        payment_method: PaymentMethodKind | None = None,
    ) -> ApiResponse[ListPaymentsResponse]:
        params = {
            "offset": offset,
            "limit": limit,
            "status": status,
            "payment_method": payment_method,
        }
        return parse_envelope(self.api_client.get("/payments", params=params), ListPaymentsResponse)

    def cancel_payment(self, payment_id: str) -> ApiResponse[Payment]:
        return parse_envelope(self.api_client.post(f"/payments/{payment_id}/cancel"), Payment)

    # Refunds

    def create_refund(self, request: CreateRefundRequest) -> ApiResponse[RefundResponse]:
        payload = self.api_client.post("/refunds", request.to_payload())
        return parse_envelope(payload, RefundResponse)

    def get_refund(self, refund_id: str) -> ApiResponse[Refund]:
        return parse_envelope(self.api_client.get(f"/refunds/{refund_id}"), Refund)

    def list_refunds(
        self,
        *,
        offset: int | None = None,
        limit: int | None = None,
        status: RefundStatus | None = None,
    ) -> ApiResponse[ListRefundsResponse]:
        params = {"offset": offset, "limit": limit, "status": status}
        return parse_envelope(self.api_client.get("/refunds", params=params), ListRefundsResponse)

    # Stored payment methods

    def add_payment_method(
        self, request: AddPaymentMethodRequest
    ) -> ApiResponse[PaymentMethodResponse]:
        payload = self.api_client.post("/payment-methods", request.to_payload())
        return parse_envelope(payload, PaymentMethodResponse)

    def list_payment_methods(self) -> ApiResponse[ListPaymentMethodsResponse]:
        return parse_envelope(self.api_client.get("/payment-methods"), ListPaymentMethodsResponse)

    def update_payment_method(
        self, method_id: str, request: UpdatePaymentMethodRequest
    ) -> ApiResponse[PaymentMethodResponse]:
        payload = self.api_client.put(f"/payment-methods/{method_id}", request.to_payload())
        return parse_envelope(payload, PaymentMethodResponse)

    def delete_payment_method(self, method_id: str) -> ApiResponse[Any]:
        return parse_envelope(self.api_client.delete(f"/payment-methods/{method_id}"), Any)

    def set_default_payment_method(self, method_id: str) -> ApiResponse[PaymentMethodResponse]:
        payload = self.api_client.post(f"/payment-methods/{method_id}/set-default")
        return parse_envelope(payload, PaymentMethodResponse)

    # Admin

    def admin_list_payments(
        self,
        *,
        offset: int | None = None,
        limit: int | None = None,
        status: PaymentStatus | None = None,
        user_id: int | None = None,
        payment_method: PaymentMethodKind | None = None,
        start_date: date | datetime | str | None = None,
        end_date: date | datetime | str | None = None,
    ) -> ApiResponse[ListPaymentsResponse]:
        params = {
            "offset": offset,
            "limit": limit,
            "status": status,
            "user_id": user_id,
            "payment_method": payment_method,
            "start_date": _date_param(start_date),
            "end_date": _date_param(end_date),
        }
        payload = self.api_client.get("/admin/payments", params=params)
        return parse_envelope(payload, ListPaymentsResponse)

    def admin_get_payment(self, payment_id: str) -> ApiResponse[Payment]:
        return parse_envelope(self.api_client.get(f"/admin/payments/{payment_id}"), Payment)

    def admin_update_payment_status(
        self, payment_id: str, status: PaymentStatus, reason: str | None = None
    ) -> ApiResponse[Payment]:
        request = UpdatePaymentStatusRequest(status=status, reason=reason)
        payload = self.api_client.put(f"/admin/payments/{payment_id}/status", request.to_payload())
        return parse_envelope(payload, Payment)

    def admin_list_refunds(
        self,
        *,
        offset: int | None = None,
        limit: int | None = None,
        status: RefundStatus | None = None,
        user_id: int | None = None,
        payment_id: str | None = None,
        start_date: date | datetime | str | None = None,
        end_date: date | datetime | str | None = None,
    ) -> ApiResponse[ListRefundsResponse]:
        params = {
            "offset": offset,
            "limit": limit,
            "status": status,
            "user_id": user_id,
            "payment_id": payment_id,
            "start_date": _date_param(start_date),
            "end_date": _date_param(end_date),
        }
        payload = self.api_client.get("/admin/refunds", params=params)
        return parse_envelope(payload, ListRefundsResponse)

    def admin_process_refund(self, refund_id: str) -> ApiResponse[Refund]:
        return parse_envelope(self.api_client.post(f"/admin/refunds/{refund_id}/process"), Refund)

    def get_payment_stats(
        self,
        period: StatsPeriod = "monthly",
        *,
        start_date: date | datetime | str | None = None,
        end_date: date | datetime | str | None = None,
    ) -> ApiResponse[PaymentStatsResponse]:
        params = {
            "period": period,
            "start_date": _date_param(start_date),
            "end_date": _date_param(end_date),
        }
        payload = self.api_client.get("/admin/payments/stats", params=params)
        return parse_envelope(payload, PaymentStatsResponse)
