"""Usage events ingested for metered billing."""

from __future__ import annotations

from datetime import datetime
from typing import Union

from pydantic import Field

from dodopayments.core.domain.base import Omittable, SdkModel, SdkParams

EventMetadataValue = Union[str, float, bool]


class Event(SdkModel):
    business_id: str
    customer_id: str
    event_id: str
    event_name: str
    timestamp: datetime
    metadata: dict[str, EventMetadataValue] | None = None


class EventInput(SdkModel):
    customer_id: str
    event_id: str = Field(..., description="Caller-chosen id; duplicates are ignored.")
    event_name: str
    metadata: dict[str, EventMetadataValue] | None = None
    timestamp: datetime | None = None


class UsageEventIngestParams(SdkParams):
    events: list[EventInput]


class UsageEventIngestResponse(SdkModel):
    ingested_count: int


class UsageEventListParams(SdkParams):
    customer_id: Omittable[str] = None
    end: Omittable[datetime] = None
    event_name: Omittable[str] = None
    meter_id: Omittable[str] = None
    page_number: Omittable[int] = None
    page_size: Omittable[int] = None
    start: Omittable[datetime] = None
