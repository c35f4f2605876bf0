"""Products and their prices, images, files and short links.

A product carries exactly one price. The `type` key on the price selects its
shape: one-time, recurring, or usage based.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, ClassVar, Literal, Union

from pydantic import Field

from dodopayments.core.domain.base import Omittable, SdkModel, SdkParams
from dodopayments.core.domain.enums import Currency, TaxCategory, TimeInterval


class AddMeterToPrice(SdkModel):
    meter_id: str
    price_per_unit: str = Field(..., description="Decimal string, per unit of the meter.")
    description: str | None = None
    free_threshold: int | None = None
    measurement_unit: str | None = None
    name: str | None = None


class OneTimePrice(SdkModel):
    _always_sent: ClassVar[tuple[str, ...]] = ("type",)

    type: Literal["one_time_price"] = "one_time_price"
    currency: Currency
    discount: int
    price: int = Field(..., description="Lowest currency denomination, e.g. cents.")
    purchasing_power_parity: bool
    pay_what_you_want: Omittable[bool] = None
    suggested_price: int | None = None
    tax_inclusive: bool | None = None


class RecurringPrice(SdkModel):
    _always_sent: ClassVar[tuple[str, ...]] = ("type",)

    type: Literal["recurring_price"] = "recurring_price"
    currency: Currency
    discount: int
    payment_frequency_count: int
    payment_frequency_interval: TimeInterval
    price: int
    purchasing_power_parity: bool
    subscription_period_count: int
    subscription_period_interval: TimeInterval
    tax_inclusive: bool | None = None
    trial_period_days: Omittable[int] = None


class UsageBasedPrice(SdkModel):
    _always_sent: ClassVar[tuple[str, ...]] = ("type",)

    type: Literal["usage_based_price"] = "usage_based_price"
    currency: Currency
    discount: int
    fixed_price: int
    payment_frequency_count: int
    payment_frequency_interval: TimeInterval
    purchasing_power_parity: bool
    subscription_period_count: int
    subscription_period_interval: TimeInterval
    meters: list[AddMeterToPrice] | None = None
    tax_inclusive: bool | None = None


Price = Annotated[
    Union[OneTimePrice, RecurringPrice, UsageBasedPrice],
    Field(discriminator="type"),
]


class LicenseKeyDuration(SdkModel):
    count: int
    interval: TimeInterval


class DeliveryFile(SdkModel):
    file_id: str
    file_name: str
    url: str


class DigitalProductDelivery(SdkModel):
    external_url: str | None = None
    files: list[DeliveryFile] | None = None
    instructions: str | None = None


class DigitalProductDeliveryParams(SdkModel):
    external_url: str | None = None
    files: list[str] | None = Field(default=None, description="Ids of uploaded files to deliver.")
    instructions: str | None = None


class Product(SdkModel):
    brand_id: str
    business_id: str
    created_at: datetime
    is_recurring: bool
    license_key_enabled: bool
    metadata: dict[str, str]
    price: Price
    product_id: str
    tax_category: TaxCategory
    updated_at: datetime
    addons: list[str] | None = None
    description: str | None = None
    digital_product_delivery: DigitalProductDelivery | None = None
    image: str | None = None
    license_key_activation_message: str | None = None
    license_key_activations_limit: int | None = None
    license_key_duration: LicenseKeyDuration | None = None
    name: str | None = None


class ProductCreateParams(SdkParams):
    name: str
    price: Price
    tax_category: TaxCategory
    addons: list[str] | None = None
    brand_id: str | None = None
    description: str | None = None
    digital_product_delivery: DigitalProductDeliveryParams | None = None
    license_key_activation_message: str | None = None
    license_key_activations_limit: int | None = None
    license_key_duration: LicenseKeyDuration | None = None
    license_key_enabled: bool | None = None
    metadata: Omittable[dict[str, str]] = None


class ProductUpdateParams(SdkParams):
    addons: list[str] | None = None
    brand_id: str | None = None
    description: str | None = None
    digital_product_delivery: DigitalProductDeliveryParams | None = None
    image_id: str | None = None
    license_key_activation_message: str | None = None
    license_key_activations_limit: int | None = None
    license_key_duration: LicenseKeyDuration | None = None
    license_key_enabled: bool | None = None
    metadata: dict[str, str] | None = None
    name: str | None = None
    price: Price | None = None
    tax_category: TaxCategory | None = None


class ProductListParams(SdkParams):
    archived: Omittable[bool] = None
    brand_id: Omittable[str] = None
    page_number: Omittable[int] = None
    page_size: Omittable[int] = None
    recurring: Omittable[bool] = Field(
        default=None,
        description="True lists only subscription products, False only one-time ones.",
    )


class ProductListResponse(SdkModel):
    business_id: str
    created_at: datetime
    is_recurring: bool
    metadata: dict[str, str]
    product_id: str
    tax_category: TaxCategory
    updated_at: datetime
    currency: Currency | None = None
    description: str | None = None
    image: str | None = None
    name: str | None = None
    price: int | None = None
    price_detail: Price | None = None
    tax_inclusive: bool | None = None


class ProductUpdateFilesParams(SdkParams):
    file_name: str


class ProductUpdateFilesResponse(SdkModel):
    file_id: str
    url: str


class ImageUpdateParams(SdkParams):
    force_update: Omittable[bool] = None


class ImageUpdateResponse(SdkModel):
    url: str
    image_id: str | None = None


class ShortLinkCreateParams(SdkParams):
    slug: str
    static_checkout_params: dict[str, str] | None = None


class ShortLinkNewResponse(SdkModel):
    full_url: str
    short_url: str


class ShortLinkListParams(SdkParams):
    page_number: Omittable[int] = None
    page_size: Omittable[int] = None
    product_id: Omittable[str] = None


class ShortLinkListResponse(SdkModel):
    created_at: datetime
    full_url: str
    product_id: str
    short_url: str
