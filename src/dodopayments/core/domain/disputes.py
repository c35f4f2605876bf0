"""Payment disputes (chargebacks and pre-arbitration)."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from dodopayments.core.domain.base import Omittable, SdkModel, SdkParams
from dodopayments.core.domain.enums import DisputeStage, DisputeStatus
from dodopayments.core.domain.shared import CustomerLimitedDetails


class Dispute(SdkModel):
    amount: str = Field(..., description="Disputed amount as a decimal string.")
    business_id: str
    created_at: datetime
    currency: str
    dispute_id: str
    dispute_stage: DisputeStage
    dispute_status: DisputeStatus
    payment_id: str
    remarks: str | None = None


class DisputeListResponse(Dispute):
    pass


class GetDispute(Dispute):
    customer: CustomerLimitedDetails
    reason: str | None = None


class DisputeListParams(SdkParams):
    created_at_gte: Omittable[datetime] = None
    created_at_lte: Omittable[datetime] = None
    customer_id: Omittable[str] = None
    dispute_stage: Omittable[DisputeStage] = None
    dispute_status: Omittable[DisputeStatus] = None
    page_number: Omittable[int] = None
    page_size: Omittable[int] = None
