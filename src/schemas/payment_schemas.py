# This file defines payment-service schemas for payments, refunds, stored payment methods, and analytics.
# It exists so both the shopper-facing and admin payment flows share one typed contract.
# Status and method literals match the values the payment backend emits.

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from src.schemas.common import RequestModel, ResponseModel

PaymentStatus = Literal["pending", "processing", "completed", "failed", "cancelled", "refunded"]
PaymentMethodKind = Literal["credit_card", "debit_card", "bank_transfer", "paypal", "stripe"]
StoredMethodType = Literal["credit_card", "debit_card", "bank_account"]
RefundStatus = Literal["pending", "processing", "completed", "failed"]
StatsPeriod = Literal["daily", "weekly", "monthly", "yearly"]


class Payment(ResponseModel):
    id: str
    user_id: int
    order_id: str
    amount: float
    currency: str
    status: PaymentStatus
    payment_method: PaymentMethodKind
    payment_provider: str
    transaction_id: str | None = None
    gateway_response: dict[str, Any] | None = None
    created_at: datetime
    updated_at: datetime
    completed_at: datetime | None = None


class PaymentMethod(ResponseModel):
    id: str
    user_id: int
    type: StoredMethodType
    provider: str
    last_four_digits: str | None = None
    expiry_month: int | None = None
    expiry_year: int | None = None
    is_default: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime


class Refund(ResponseModel):
    id: str
    payment_id: str
    amount: float
    reason: str
    status: RefundStatus
    created_at: datetime
    updated_at: datetime
    completed_at: datetime | None = None


class CreatePaymentRequest(RequestModel):
    order_id: str
    amount: float
    currency: str
    payment_method: PaymentMethodKind
    payment_method_id: str | None = None
    return_url: str | None = None
    cancel_url: str | None = None


class ProcessPaymentRequest(RequestModel):
    payment_id: str
    payment_method_id: str
    confirmation_data: dict[str, Any] | None = None


class CreateRefundRequest(RequestModel):
    payment_id: str
    amount: float
    reason: str


class AddPaymentMethodRequest(RequestModel):
    type: StoredMethodType
    provider: str
    token: str
    is_default: bool | None = None


class UpdatePaymentMethodRequest(RequestModel):
    is_default: bool | None = None
    is_active: bool | None = None


class UpdatePaymentStatusRequest(RequestModel):
    status: PaymentStatus
    reason: str | None = None


class PaymentResponse(ResponseModel):
    payment: Payment
    payment_url: str | None = None
    client_secret: str | None = None


class PaymentMethodResponse(ResponseModel):
    payment_method: PaymentMethod


class RefundResponse(ResponseModel):
    refund: Refund


class ListPaymentsResponse(ResponseModel):
    payments: list[Payment]
    total: int
    offset: int
    limit: int


class ListPaymentMethodsResponse(ResponseModel):
    payment_methods: list[PaymentMethod]
    total: int


class ListRefundsResponse(ResponseModel):
    refunds: list[Refund]
    total: int
    offset: int
    limit: int


class PaymentStatsResponse(ResponseModel):
    total_payments: int
    total_amount: float
    successful_payments: int
    failed_payments: int
    pending_payments: int
    refunded_amount: float
    average_payment_amount: float
