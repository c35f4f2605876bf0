"""Discount codes."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from dodopayments.core.domain.base import Omittable, SdkModel, SdkParams
from dodopayments.core.domain.enums import DiscountType


class Discount(SdkModel):
    amount: int = Field(
        ...,
        description="Basis points for percentage discounts (540 means 5.4%).",
    )
    business_id: str
    code: str
    created_at: datetime
    discount_id: str
    restricted_to: list[str]
    times_used: int
    type: DiscountType
    expires_at: datetime | None = None
    name: str | None = None
    subscription_cycles: int | None = None
    usage_limit: int | None = None


class DiscountCreateParams(SdkParams):
    amount: int
    type: DiscountType
    code: str | None = None
    expires_at: datetime | None = None
    name: str | None = None
    restricted_to: list[str] | None = None
    subscription_cycles: int | None = None
    usage_limit: int | None = None


class DiscountUpdateParams(SdkParams):
    amount: int | None = None
    code: str | None = None
    expires_at: datetime | None = None
    name: str | None = None
    restricted_to: list[str] | None = None
    subscription_cycles: int | None = None
    type: DiscountType | None = None
    usage_limit: int | None = None


class DiscountListParams(SdkParams):
    discount_type: Omittable[DiscountType] = None
    product_id: Omittable[str] = None
    page_number: Omittable[int] = None
    page_size: Omittable[int] = None
