"""One-time payments."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from dodopayments.core.domain.base import Omittable, SdkModel, SdkParams
from dodopayments.core.domain.disputes import Dispute
from dodopayments.core.domain.enums import CountryCode, Currency, IntentStatus, PaymentMethodTypes
from dodopayments.core.domain.refunds import PaymentRefund
from dodopayments.core.domain.shared import (
    BillingAddress,
    CustomerLimitedDetails,
    CustomerRequest,
    OneTimeProductCartItem,
)


class PaymentProductCartItem(SdkModel):
    product_id: str
    quantity: int


class CustomFieldResponse(SdkModel):
    key: str
    value: str


class Payment(SdkModel):
    billing: BillingAddress
    brand_id: str
    business_id: str
    created_at: datetime
    currency: Currency
    customer: CustomerLimitedDetails
    digital_products_delivered: bool
    disputes: list[Dispute]
    metadata: dict[str, str]
    payment_id: str
    refunds: list[PaymentRefund]
    settlement_amount: int = Field(
        ...,
        description="Amount in the settlement currency, after conversion.",
    )
    settlement_currency: Currency
    total_amount: int = Field(
        ...,
        description="Total charged, including tax, in the lowest denomination of `currency`.",
    )
    card_issuing_country: CountryCode | None = None
    card_last_four: str | None = None
    card_network: str | None = None
    card_type: str | None = None
    checkout_session_id: str | None = None
    custom_field_responses: list[CustomFieldResponse] | None = None
    discount_id: str | None = None
    error_code: str | None = None
    error_message: str | None = None
    payment_link: str | None = None
    payment_method: str | None = None
    payment_method_type: str | None = None
    product_cart: list[PaymentProductCartItem] | None = None
    settlement_tax: int | None = None
    status: IntentStatus | None = None
    subscription_id: str | None = None
    tax: int | None = None
    updated_at: datetime | None = None


class PaymentCreateParams(SdkParams):
    billing: BillingAddress
    customer: CustomerRequest
    product_cart: list[OneTimeProductCartItem]
    allowed_payment_method_types: list[PaymentMethodTypes] | None = None
    billing_currency: Currency | None = None
    discount_code: str | None = None
    force_3ds: bool | None = None
    metadata: Omittable[dict[str, str]] = None
    payment_link: bool | None = Field(
        default=None,
        description="Return a hosted payment link instead of only a client secret.",
    )
    return_url: str | None = None
    show_saved_payment_methods: Omittable[bool] = None
    tax_id: str | None = None


class PaymentNewResponse(SdkModel):
    client_secret: str
    customer: CustomerLimitedDetails
    metadata: dict[str, str]
    payment_id: str
    total_amount: int
    discount_id: str | None = None
    expires_on: datetime | None = None
    payment_link: str | None = None
    product_cart: list[OneTimeProductCartItem] | None = None


class PaymentListParams(SdkParams):
    brand_id: Omittable[str] = None
    created_at_gte: Omittable[datetime] = None
    created_at_lte: Omittable[datetime] = None
    customer_id: Omittable[str] = None
    page_number: Omittable[int] = None
    page_size: Omittable[int] = None
    product_id: Omittable[str] = None
    status: Omittable[IntentStatus] = None
    subscription_id: Omittable[str] = None


class PaymentListResponse(SdkModel):
    brand_id: str
    created_at: datetime
    currency: Currency
    customer: CustomerLimitedDetails
    digital_products_delivered: bool
    metadata: dict[str, str]
    payment_id: str
    total_amount: int
    payment_method: str | None = None
    payment_method_type: str | None = None
    status: IntentStatus | None = None
    subscription_id: str | None = None


class PaymentLineItem(SdkModel):
    amount: int
    items_id: str
    refundable_amount: int
    tax: int
    description: str | None = None
    name: str | None = None


class PaymentGetLineItemsResponse(SdkModel):
    currency: Currency
    items: list[PaymentLineItem]
