"""Business balance ledger."""

from __future__ import annotations

from datetime import datetime

from dodopayments.core.domain.base import ApiEnum, Omittable, SdkModel, SdkParams
from dodopayments.core.domain.enums import Currency


class LedgerEventType(ApiEnum):
    PAYMENT = "payment"
    REFUND = "refund"
    REFUND_REVERSAL = "refund_reversal"
    DISPUTE = "dispute"
    DISPUTE_REVERSAL = "dispute_reversal"
    TAX = "tax"
    TAX_REVERSAL = "tax_reversal"
    PAYMENT_FEES = "payment_fees"
    REFUND_FEES = "refund_fees"
    REFUND_FEES_REVERSAL = "refund_fees_reversal"
    DISPUTE_FEES = "dispute_fees"
    PAYOUT = "payout"
    PAYOUT_FEES = "payout_fees"
    PAYOUT_REVERSAL = "payout_reversal"
    PAYOUT_FEES_REVERSAL = "payout_fees_reversal"
    DODO_CREDITS = "dodo_credits"
    ADJUSTMENT = "adjustment"
    CURRENCY_CONVERSION = "currency_conversion"


class BalanceLedgerEntry(SdkModel):
    id: str
    amount: int
    business_id: str
    created_at: datetime
    currency: Currency
    event_type: LedgerEventType
    is_credit: bool
    usd_equivalent_amount: int
    after_balance: int | None = None
    before_balance: int | None = None
    description: str | None = None
    reference_object_id: str | None = None


class BalanceRetrieveLedgerParams(SdkParams):
    created_at_gte: Omittable[datetime] = None
    created_at_lte: Omittable[datetime] = None
    currency: Omittable[Currency] = None
    event_type: Omittable[LedgerEventType] = None
    limit: Omittable[int] = None
    page_number: Omittable[int] = None
    page_size: Omittable[int] = None
    reference_object_id: Omittable[str] = None
