"""Brands: customer-facing identities (descriptor, support email, logo)."""

from __future__ import annotations

from dodopayments.core.domain.base import ApiEnum, SdkModel, SdkParams
from dodopayments.core.domain.shared import ImageUploadResponse


class BrandVerificationStatus(ApiEnum):
    SUCCESS = "Success"
    FAIL = "Fail"
    REVIEW = "Review"
    HOLD = "Hold"


class Brand(SdkModel):
    brand_id: str
    business_id: str
    enabled: bool
    statement_descriptor: str
    verification_enabled: bool
    verification_status: BrandVerificationStatus
    description: str | None = None
    image: str | None = None
    name: str | None = None
    reason_for_hold: str | None = None
    support_email: str | None = None
    url: str | None = None


class BrandCreateParams(SdkParams):
    description: str | None = None
    name: str | None = None
    statement_descriptor: str | None = None
    support_email: str | None = None
    url: str | None = None


class BrandUpdateParams(SdkParams):
    image_id: str | None = None
    name: str | None = None
    statement_descriptor: str | None = None
    support_email: str | None = None


class BrandListResponse(SdkModel):
    items: list[Brand]


class BrandUpdateImagesResponse(ImageUploadResponse):
    pass
