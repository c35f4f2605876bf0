"""Subscriptions: recurring billing of a product, with optional addons and meters."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import Field

from dodopayments.core.domain.base import ApiEnum, Omittable, SdkModel, SdkParams
from dodopayments.core.domain.enums import (
    Currency,
    PaymentMethodTypes,
    ProrationBillingMode,
    SubscriptionStatus,
    TaxCategory,
    TimeInterval,
)
from dodopayments.core.domain.shared import (
    AddonCartResponseItem,
    AttachAddon,
    BillingAddress,
    CustomerLimitedDetails,
    CustomerRequest,
    OnDemandSubscription,
)


class SubscriptionMeter(SdkModel):
    currency: Currency
    free_threshold: int
    measurement_unit: str
    meter_id: str
    name: str
    price_per_unit: str
    description: str | None = None


class _SubscriptionBase(SdkModel):
    billing: BillingAddress
    cancel_at_next_billing_date: bool
    created_at: datetime
    currency: Currency
    customer: CustomerLimitedDetails
    metadata: dict[str, str]
    next_billing_date: datetime
    on_demand: bool
    payment_frequency_count: int
    payment_frequency_interval: TimeInterval
    previous_billing_date: datetime
    product_id: str
    quantity: int
    recurring_pre_tax_amount: int = Field(
        ...,
        description="Amount charged each cycle before tax, in the lowest denomination.",
    )
    status: SubscriptionStatus
    subscription_id: str
    subscription_period_count: int
    subscription_period_interval: TimeInterval
    tax_inclusive: bool
    trial_period_days: int
    cancelled_at: datetime | None = None
    discount_cycles_remaining: int | None = None
    discount_id: str | None = None
    payment_method_id: str | None = None
    tax_id: str | None = None


class Subscription(_SubscriptionBase):
    addons: list[AddonCartResponseItem] = []
    meters: list[SubscriptionMeter] = []
    expires_at: datetime | None = None


class SubscriptionListResponse(_SubscriptionBase):
    pass


class SubscriptionCreateParams(SdkParams):
    billing: BillingAddress
    customer: CustomerRequest
    product_id: str
    quantity: int
    addons: list[AttachAddon] | None = None
    allowed_payment_method_types: list[PaymentMethodTypes] | None = None
    billing_currency: Currency | None = None
    discount_code: str | None = None
    force_3ds: bool | None = None
    metadata: Omittable[dict[str, str]] = None
    on_demand: OnDemandSubscription | None = None
    payment_link: bool | None = None
    return_url: str | None = None
    show_saved_payment_methods: Omittable[bool] = None
    tax_id: str | None = None
    trial_period_days: int | None = Field(
        default=None,
        description="Overrides the product's trial period when set.",
    )


class SubscriptionNewResponse(SdkModel):
    addons: list[AddonCartResponseItem]
    customer: CustomerLimitedDetails
    metadata: dict[str, str]
    payment_id: str
    recurring_pre_tax_amount: int
    subscription_id: str
    client_secret: str | None = None
    discount_id: str | None = None
    expires_on: datetime | None = None
    payment_link: str | None = None


class DisableOnDemand(SdkModel):
    next_billing_date: datetime


class SubscriptionUpdateParams(SdkParams):
    billing: BillingAddress | None = None
    cancel_at_next_billing_date: bool | None = None
    customer_name: str | None = None
    disable_on_demand: DisableOnDemand | None = None
    metadata: dict[str, str] | None = None
    next_billing_date: datetime | None = None
    status: SubscriptionStatus | None = None
    tax_id: str | None = None


class SubscriptionListParams(SdkParams):
    brand_id: Omittable[str] = None
    created_at_gte: Omittable[datetime] = None
    created_at_lte: Omittable[datetime] = None
    customer_id: Omittable[str] = None
    page_number: Omittable[int] = None
    page_size: Omittable[int] = None
    status: Omittable[SubscriptionStatus] = None


class SubscriptionChangePlanParams(SdkParams):
    product_id: str
    proration_billing_mode: ProrationBillingMode
    quantity: int
    addons: list[AttachAddon] | None = None


class SubscriptionPreviewChangePlanParams(SubscriptionChangePlanParams):
    pass


class ProductLineItem(SdkModel):
    type: Literal["subscription"] = "subscription"
    id: str
    currency: Currency
    product_id: str
    proration_factor: float
    quantity: int
    tax_inclusive: bool
    unit_price: int
    description: str | None = None
    name: str | None = None
    tax: int | None = None
    tax_rate: float | None = None


class AddonLineItem(SdkModel):
    type: Literal["addon"] = "addon"
    id: str
    currency: Currency
    name: str
    proration_factor: float
    quantity: int
    tax_category: TaxCategory
    tax_inclusive: bool
    tax_rate: float
    unit_price: int
    description: str | None = None
    tax: int | None = None


class MeterLineItem(SdkModel):
    type: Literal["meter"] = "meter"
    id: str
    chargeable_units: str
    currency: Currency
    free_threshold: int
    name: str
    price_per_unit: str
    subtotal: int
    tax_inclusive: bool
    tax_rate: float
    units_consumed: str
    description: str | None = None
    tax: int | None = None


ChangePlanLineItem = Annotated[
    Union[ProductLineItem, AddonLineItem, MeterLineItem],
    Field(discriminator="type"),
]


class ChargeSummary(SdkModel):
    currency: Currency
    customer_credits: int
    settlement_amount: int
    settlement_currency: Currency
    total_amount: int
    settlement_tax: int | None = None
    tax: int | None = None


class ImmediateCharge(SdkModel):
    line_items: list[ChangePlanLineItem]
    summary: ChargeSummary


class SubscriptionPreviewChangePlanResponse(SdkModel):
    immediate_charge: ImmediateCharge
    new_plan: Subscription


class CustomerBalanceConfig(SdkModel):
    allow_customer_credits_purchase: bool | None = None
    allow_customer_credits_usage: bool | None = None


class SubscriptionChargeParams(SdkParams):
    product_price: int = Field(
        ...,
        description="Amount to charge, in the lowest denomination of the currency.",
    )
    adaptive_currency_fees_inclusive: bool | None = None
    customer_balance_config: CustomerBalanceConfig | None = None
    metadata: dict[str, str] | None = None
    product_currency: Currency | None = None
    product_description: str | None = None


class SubscriptionChargeResponse(SdkModel):
    payment_id: str


class SubscriptionRetrieveUsageHistoryParams(SdkParams):
    end_date: datetime | None = None
    meter_id: str | None = None
    page_number: int | None = None
    page_size: int | None = None
    start_date: datetime | None = None


class UsageHistoryMeter(SdkModel):
    id: str
    chargeable_units: str
    consumed_units: str
    currency: Currency
    free_threshold: int
    name: str
    price_per_unit: str
    total_price: int


class SubscriptionRetrieveUsageHistoryResponse(SdkModel):
    end_date: datetime
    meters: list[UsageHistoryMeter]
    start_date: datetime


class PaymentMethodChoice(ApiEnum):
    NEW = "new"
    EXISTING = "existing"


class SubscriptionUpdatePaymentMethodParams(SdkParams):
    type: PaymentMethodChoice
    payment_method_id: str | None = Field(
        default=None,
        description="Required when `type` is `existing`.",
    )
    return_url: str | None = None


class SubscriptionUpdatePaymentMethodResponse(SdkModel):
    client_secret: str | None = None
    expires_on: datetime | None = None
    payment_id: str | None = None
    payment_link: str | None = None
