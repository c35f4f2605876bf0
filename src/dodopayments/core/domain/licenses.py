"""License keys issued for digital products, and their activation instances."""

from __future__ import annotations

from datetime import datetime

from dodopayments.core.domain.base import Omittable, SdkModel, SdkParams
from dodopayments.core.domain.enums import LicenseKeyStatus
from dodopayments.core.domain.shared import CustomerLimitedDetails


class LicenseKey(SdkModel):
    id: str
    business_id: str
    created_at: datetime
    customer_id: str
    instances_count: int
    key: str
    payment_id: str
    product_id: str
    status: LicenseKeyStatus
    activations_limit: int | None = None
    expires_at: datetime | None = None
    subscription_id: str | None = None


class LicenseKeyListParams(SdkParams):
    created_at_gte: Omittable[datetime] = None
    created_at_lte: Omittable[datetime] = None
    customer_id: Omittable[str] = None
    page_number: Omittable[int] = None
    page_size: Omittable[int] = None
    product_id: Omittable[str] = None
    status: Omittable[LicenseKeyStatus] = None


class LicenseKeyUpdateParams(SdkParams):
    activations_limit: int | None = None
    disabled: bool | None = None
    expires_at: datetime | None = None


class LicenseKeyInstance(SdkModel):
    id: str
    business_id: str
    created_at: datetime
    license_key_id: str
    name: str


class LicenseKeyInstanceListParams(SdkParams):
    license_key_id: str | None = None
    page_number: int | None = None
    page_size: int | None = None


class LicenseKeyInstanceUpdateParams(SdkParams):
    name: str


class LicenseActivateParams(SdkParams):
    license_key: str
    name: str


class LicensedProduct(SdkModel):
    product_id: str
    name: str | None = None


class LicenseActivateResponse(SdkModel):
    id: str
    business_id: str
    created_at: datetime
    customer: CustomerLimitedDetails
    license_key_id: str
    name: str
    product: LicensedProduct


class LicenseDeactivateParams(SdkParams):
    license_key: str
    license_key_instance_id: str


class LicenseValidateParams(SdkParams):
    license_key: str
    license_key_instance_id: str | None = None


class LicenseValidateResponse(SdkModel):
    valid: bool
