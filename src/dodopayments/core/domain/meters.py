"""Usage meters: aggregate ingested events into billable quantities.

A filter is a tree: each `MeterFilter` joins its clauses with one
conjunction, and a clause list holds either plain conditions or further
nested filters.
"""

from __future__ import annotations

from datetime import datetime
from typing import Union

from dodopayments.core.domain.base import ApiEnum, Omittable, SdkModel, SdkParams


class AggregationType(ApiEnum):
    COUNT = "count"
    SUM = "sum"
    MAX = "max"
    LAST = "last"


class Conjunction(ApiEnum):
    AND = "and"
    OR = "or"


class FilterOperator(ApiEnum):
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUALS = "greater_than_or_equals"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUALS = "less_than_or_equals"
    CONTAINS = "contains"
    DOES_NOT_CONTAIN = "does_not_contain"


class MeterAggregation(SdkModel):
    type: AggregationType
    key: str | None = None


class FilterCondition(SdkModel):
    key: str
    operator: FilterOperator
    value: Union[str, float, bool]


class MeterFilter(SdkModel):
    clauses: Union[list[FilterCondition], list[MeterFilter]]
    conjunction: Conjunction


MeterFilter.model_rebuild()


class Meter(SdkModel):
    id: str
    aggregation: MeterAggregation
    business_id: str
    created_at: datetime
    event_name: str
    measurement_unit: str
    name: str
    updated_at: datetime
    description: str | None = None
    filter: MeterFilter | None = None


class MeterCreateParams(SdkParams):
    aggregation: MeterAggregation
    event_name: str
    measurement_unit: str
    name: str
    description: str | None = None
    filter: MeterFilter | None = None


class MeterListParams(SdkParams):
    archived: Omittable[bool] = None
    page_number: Omittable[int] = None
    page_size: Omittable[int] = None
