"""Addons: extra line items that can be attached to subscription products."""

from __future__ import annotations

from datetime import datetime

from dodopayments.core.domain.base import Omittable, SdkModel, SdkParams
from dodopayments.core.domain.enums import Currency, TaxCategory
from dodopayments.core.domain.shared import ImageUploadResponse


class AddonResponse(SdkModel):
    id: str
    business_id: str
    created_at: datetime
    currency: Currency
    name: str
    price: int
    tax_category: TaxCategory
    updated_at: datetime
    description: str | None = None
    image: str | None = None


class AddonCreateParams(SdkParams):
    currency: Currency
    name: str
    price: int
    tax_category: TaxCategory
    description: str | None = None


class AddonUpdateParams(SdkParams):
    currency: Currency | None = None
    description: str | None = None
    image_id: str | None = None
    name: str | None = None
    price: int | None = None
    tax_category: TaxCategory | None = None


class AddonListParams(SdkParams):
    page_number: Omittable[int] = None
    page_size: Omittable[int] = None


class AddonUpdateImagesResponse(ImageUploadResponse):
    pass
