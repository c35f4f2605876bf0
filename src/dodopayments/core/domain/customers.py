"""Customers, their saved payment methods, portal sessions and credit wallets."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from dodopayments.core.domain.base import ApiEnum, Omittable, SdkModel, SdkParams
from dodopayments.core.domain.enums import CountryCode, Currency, PaymentMethodTypes


class Customer(SdkModel):
    business_id: str
    created_at: datetime
    customer_id: str
    email: str
    name: str
    metadata: dict[str, str] | None = None
    phone_number: str | None = None


class CustomerCreateParams(SdkParams):
    email: str
    name: str
    metadata: Omittable[dict[str, str]] = None
    phone_number: str | None = None


class CustomerUpdateParams(SdkParams):
    metadata: dict[str, str] | None = None
    name: str | None = None
    phone_number: str | None = None


class CustomerListParams(SdkParams):
    created_at_gte: Omittable[datetime] = None
    created_at_lte: Omittable[datetime] = None
    email: Omittable[str] = None
    page_number: Omittable[int] = None
    page_size: Omittable[int] = None


class PaymentMethodKind(ApiEnum):
    CARD = "card"
    CARD_REDIRECT = "card_redirect"
    PAY_LATER = "pay_later"
    WALLET = "wallet"
    BANK_REDIRECT = "bank_redirect"
    BANK_TRANSFER = "bank_transfer"
    CRYPTO = "crypto"
    BANK_DEBIT = "bank_debit"
    REWARD = "reward"
    REAL_TIME_PAYMENT = "real_time_payment"
    UPI = "upi"
    VOUCHER = "voucher"
    GIFT_CARD = "gift_card"
    OPEN_BANKING = "open_banking"
    MOBILE_PAYMENT = "mobile_payment"


class SavedCard(SdkModel):
    card_issuing_country: CountryCode | None = None
    card_network: str | None = None
    card_type: str | None = None
    expiry_month: str | None = None
    expiry_year: str | None = None
    last4_digits: str | None = None


class ConnectorPaymentMethod(SdkModel):
    connector_mandate_id: str
    original_payment_authorized_amount: int
    original_payment_authorized_currency: Currency
    payment_method_type: PaymentMethodTypes | None = None


class CustomerPaymentMethod(SdkModel):
    connector_payment_methods: dict[str, ConnectorPaymentMethod]
    payment_method: PaymentMethodKind
    payment_method_id: str
    profile_map: dict[str, str]
    card: SavedCard | None = None
    last_used_at: datetime | None = None
    recurring_enabled: bool | None = None


class CustomerGetPaymentMethodsResponse(SdkModel):
    items: list[CustomerPaymentMethod]


class CustomerPortalCreateParams(SdkParams):
    send_email: Omittable[bool] = Field(
        default=None,
        description="Also e-mail the portal link to the customer.",
    )


class CustomerPortalSession(SdkModel):
    link: str


class CustomerWallet(SdkModel):
    balance: int
    created_at: datetime
    currency: Currency
    customer_id: str
    updated_at: datetime


class WalletListResponse(SdkModel):
    items: list[CustomerWallet]
    total_balance_usd: int = Field(..., description="Sum of all wallets, in US cents.")


class WalletEventType(ApiEnum):
    PAYMENT = "payment"
    PAYMENT_REVERSAL = "payment_reversal"
    REFUND = "refund"
    REFUND_REVERSAL = "refund_reversal"
    DISPUTE = "dispute"
    DISPUTE_REVERSAL = "dispute_reversal"
    MERCHANT_ADJUSTMENT = "merchant_adjustment"


class CustomerWalletTransaction(SdkModel):
    id: str
    after_balance: int
    amount: int
    before_balance: int
    business_id: str
    created_at: datetime
    currency: Currency
    customer_id: str
    event_type: WalletEventType
    is_credit: bool
    reason: str | None = None
    reference_object_id: str | None = None


class LedgerEntryType(ApiEnum):
    CREDIT = "credit"
    DEBIT = "debit"


class LedgerEntryCreateParams(SdkParams):
    amount: int
    currency: Currency
    entry_type: LedgerEntryType
    idempotency_key: str | None = None
    reason: str | None = None


class LedgerEntryListParams(SdkParams):
    currency: Omittable[Currency] = None
    page_number: Omittable[int] = None
    page_size: Omittable[int] = None
