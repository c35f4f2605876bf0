"""Payouts to the merchant's bank account."""

from __future__ import annotations

from datetime import datetime

from dodopayments.core.domain.base import Omittable, SdkModel, SdkParams
from dodopayments.core.domain.enums import Currency, PayoutStatus


class PayoutListResponse(SdkModel):
    amount: int
    business_id: str
    chargebacks: int
    created_at: datetime
    currency: Currency
    fee: int
    payment_method: str
    payout_id: str
    refunds: int
    status: PayoutStatus
    tax: int
    updated_at: datetime
    name: str | None = None
    payout_document_url: str | None = None
    remarks: str | None = None


class PayoutListParams(SdkParams):
    created_at_gte: Omittable[datetime] = None
    created_at_lte: Omittable[datetime] = None
    page_number: Omittable[int] = None
    page_size: Omittable[int] = None
