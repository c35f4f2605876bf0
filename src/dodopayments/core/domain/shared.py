"""Shapes reused by several resources (customers, addresses, carts)."""

from __future__ import annotations

from pydantic import Field

from dodopayments.core.domain.base import Omittable, SdkModel
from dodopayments.core.domain.enums import CountryCode, Currency


class BillingAddress(SdkModel):
    """Full postal address required for direct payments and subscriptions."""

    city: str
    country: CountryCode = Field(..., description="ISO 3166-1 alpha-2 country code.")
    state: str
    street: str
    zipcode: str


class CheckoutBillingAddress(SdkModel):
    """Partial address for checkout sessions; only the country is mandatory."""

    country: CountryCode
    city: str | None = None
    state: str | None = None
    street: str | None = None
    zipcode: str | None = None


class CustomerLimitedDetails(SdkModel):
    customer_id: str
    email: str
    name: str
    metadata: Omittable[dict[str, str]] = None
    phone_number: str | None = None


class AttachExistingCustomer(SdkModel):
    """Reference an existing customer by id."""

    customer_id: str


class NewCustomer(SdkModel):
    """Create (or reuse by email) a customer inline with the request."""

    email: str
    name: str | None = None
    phone_number: str | None = None


CustomerRequest = AttachExistingCustomer | NewCustomer


class AttachAddon(SdkModel):
    addon_id: str
    quantity: int


class AddonCartResponseItem(SdkModel):
    addon_id: str
    quantity: int


class OneTimeProductCartItem(SdkModel):
    product_id: str
    quantity: int
    amount: int | None = Field(
        default=None,
        description="Amount for pay-what-you-want products, in the lowest currency denomination.",
    )


class OnDemandSubscription(SdkModel):
    mandate_only: bool = Field(
        ...,
        description="When true only a mandate is authorised and no charge is made at creation.",
    )
    adaptive_currency_fees_inclusive: bool | None = None
    product_currency: Currency | None = None
    product_description: str | None = None
    product_price: int | None = None


class ImageUploadResponse(SdkModel):
    """Presigned upload target returned by the `.../images` endpoints."""

    image_id: str
    url: str
