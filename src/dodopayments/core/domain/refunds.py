"""Refunds, full or per line item."""

from __future__ import annotations

from datetime import datetime

from dodopayments.core.domain.base import Omittable, SdkModel, SdkParams
from dodopayments.core.domain.enums import Currency, RefundStatus
from dodopayments.core.domain.shared import CustomerLimitedDetails


class PaymentRefund(SdkModel):
    """Refund summary embedded in a payment."""

    business_id: str
    created_at: datetime
    is_partial: bool
    payment_id: str
    refund_id: str
    status: RefundStatus
    amount: int | None = None
    currency: Currency | None = None
    reason: str | None = None


class Refund(PaymentRefund):
    customer: CustomerLimitedDetails
    metadata: dict[str, str] | None = None


class RefundItem(SdkModel):
    item_id: str
    amount: int | None = None
    tax_inclusive: Omittable[bool] = None


class RefundCreateParams(SdkParams):
    payment_id: str
    items: list[RefundItem] | None = None
    metadata: Omittable[dict[str, str]] = None
    reason: str | None = None


class RefundListParams(SdkParams):
    created_at_gte: Omittable[datetime] = None
    created_at_lte: Omittable[datetime] = None
    customer_id: Omittable[str] = None
    page_number: Omittable[int] = None
    page_size: Omittable[int] = None
    status: Omittable[RefundStatus] = None
