"""Hosted checkout sessions.

A checkout session is created server-side and the customer is redirected to
`checkout_url`. `preview` prices the same cart without creating a session.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from dodopayments.core.domain.base import ApiEnum, Omittable, SdkModel, SdkParams
from dodopayments.core.domain.enums import (
    CountryCode,
    Currency,
    IntentStatus,
    PaymentMethodTypes,
    TaxCategory,
)
from dodopayments.core.domain.shared import (
    AttachAddon,
    CheckoutBillingAddress,
    CustomerRequest,
    OnDemandSubscription,
)


class Theme(ApiEnum):
    DARK = "dark"
    LIGHT = "light"
    SYSTEM = "system"


class FontSize(ApiEnum):
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "2xl"


class FontWeight(ApiEnum):
    NORMAL = "normal"
    MEDIUM = "medium"
    BOLD = "bold"
    EXTRA_BOLD = "extraBold"


class ThemeModeConfig(SdkModel):
    """Colour overrides for one theme mode. Values are CSS colour strings."""

    bg_primary: str | None = None
    bg_secondary: str | None = None
    border_primary: str | None = None
    border_secondary: str | None = None
    button_primary: str | None = None
    button_primary_hover: str | None = None
    button_secondary: str | None = None
    button_secondary_hover: str | None = None
    button_text_primary: str | None = None
    button_text_secondary: str | None = None
    input_focus_border: str | None = None
    text_error: str | None = None
    text_placeholder: str | None = None
    text_primary: str | None = None
    text_secondary: str | None = None
    text_success: str | None = None


class ThemeConfig(SdkModel):
    dark: ThemeModeConfig | None = None
    light: ThemeModeConfig | None = None
    font_primary_url: str | None = None
    font_secondary_url: str | None = None
    font_size: FontSize | None = None
    font_weight: FontWeight | None = None
    pay_button_text: str | None = None
    radius: str | None = None


class Customization(SdkModel):
    force_language: str | None = Field(
        default=None,
        description="ISO language code forced on the checkout page.",
    )
    show_on_demand_tag: Omittable[bool] = None
    show_order_details: Omittable[bool] = None
    theme: Omittable[Theme] = None
    theme_config: ThemeConfig | None = None


class FeatureFlags(SdkModel):
    allow_currency_selection: Omittable[bool] = None
    allow_customer_editing_city: Omittable[bool] = None
    allow_customer_editing_country: Omittable[bool] = None
    allow_customer_editing_email: Omittable[bool] = None
    allow_customer_editing_name: Omittable[bool] = None
    allow_customer_editing_state: Omittable[bool] = None
    allow_customer_editing_street: Omittable[bool] = None
    allow_customer_editing_zipcode: Omittable[bool] = None
    allow_discount_code: Omittable[bool] = None
    allow_phone_number_collection: Omittable[bool] = None
    allow_tax_id: Omittable[bool] = None
    always_create_new_customer: Omittable[bool] = None


class SubscriptionData(SdkModel):
    on_demand: OnDemandSubscription | None = None
    trial_period_days: int | None = None


class CheckoutProductCartItem(SdkModel):
    product_id: str
    quantity: int
    addons: list[AttachAddon] | None = None
    amount: int | None = Field(
        default=None,
        description="Price override for pay-what-you-want products.",
    )


class FieldType(ApiEnum):
    TEXT = "text"
    NUMBER = "number"
    EMAIL = "email"
    URL = "url"
    PHONE = "phone"
    DATE = "date"
    DATETIME = "datetime"
    DROPDOWN = "dropdown"
    BOOLEAN = "boolean"


class CustomField(SdkModel):
    """Extra input rendered on the checkout page."""

    field_type: FieldType
    key: str
    label: str
    options: list[str] | None = None
    placeholder: str | None = None
    required: Omittable[bool] = None


class CheckoutSessionRequest(SdkParams):
    """Body shared by `checkouts` and `checkouts/preview`."""

    product_cart: list[CheckoutProductCartItem]
    allowed_payment_method_types: list[PaymentMethodTypes] | None = None
    billing_address: CheckoutBillingAddress | None = None
    billing_currency: Currency | None = None
    confirm: Omittable[bool] = None
    custom_fields: list[CustomField] | None = None
    customer: CustomerRequest | None = None
    customization: Omittable[Customization] = None
    discount_code: str | None = None
    feature_flags: Omittable[FeatureFlags] = None
    force_3ds: bool | None = None
    metadata: dict[str, str] | None = None
    minimal_address: Omittable[bool] = None
    return_url: str | None = None
    show_saved_payment_methods: Omittable[bool] = None
    subscription_data: SubscriptionData | None = None


class CheckoutSessionCreateParams(CheckoutSessionRequest):
    pass


class CheckoutSessionPreviewParams(CheckoutSessionRequest):
    pass


class CheckoutSessionResponse(SdkModel):
    checkout_url: str
    session_id: str


class CheckoutSessionStatus(SdkModel):
    id: str
    created_at: datetime
    customer_email: str | None = None
    customer_name: str | None = None
    payment_id: str | None = None
    payment_status: IntentStatus | None = None


class PriceBreakup(SdkModel):
    discount: int
    subtotal: int
    total_amount: int
    tax: int | None = None


class PreviewAddon(SdkModel):
    addon_id: str
    currency: Currency
    discounted_price: int
    name: str
    og_currency: Currency
    og_price: int
    quantity: int
    tax_category: TaxCategory
    tax_inclusive: bool
    tax_rate: int
    description: str | None = None
    discount_amount: int | None = None
    tax: int | None = None


class PreviewMeter(SdkModel):
    measurement_unit: str
    name: str
    price_per_unit: str = Field(..., description="Decimal string, per unit.")
    description: str | None = None
    free_threshold: int | None = None


class PreviewProductCartItem(SdkModel):
    currency: Currency
    discounted_price: int
    is_subscription: bool
    is_usage_based: bool
    meters: list[PreviewMeter]
    og_currency: Currency
    og_price: int
    product_id: str
    quantity: int
    tax_category: TaxCategory
    tax_inclusive: bool
    tax_rate: int
    addons: list[PreviewAddon] | None = None
    description: str | None = None
    discount_amount: int | None = None
    discount_cycle: int | None = None
    name: str | None = None
    tax: int | None = None


class CheckoutSessionPreviewResponse(SdkModel):
    billing_country: CountryCode
    currency: Currency
    current_breakup: PriceBreakup
    product_cart: list[PreviewProductCartItem]
    total_price: int
    recurring_breakup: PriceBreakup | None = None
    tax_id_err_msg: str | None = None
    total_tax: int | None = None
