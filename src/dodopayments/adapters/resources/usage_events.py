"""Usage event ingestion and lookup."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dodopayments.adapters.resources._base import SyncAPIResource, build_params, path_param
from dodopayments.core.domain.usage_events import (
    Event,
    UsageEventIngestParams,
    UsageEventIngestResponse,
    UsageEventListParams,
)
from dodopayments.core.interfaces.contracts import UsageEventsContract
from dodopayments.core.pagination import DefaultPageNumberPagination
from dodopayments.core.request_options import RequestOptions


class UsageEventsResource(SyncAPIResource, UsageEventsContract):
    def retrieve(
        self,
        event_id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> Event:
        return self._get(
            f"events/{path_param('event_id', event_id)}",
            cast_to=Event,
            options=request_options,
        )

    def list(
        self,
        params: UsageEventListParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **filters: Any,
    ) -> DefaultPageNumberPagination[Event]:
        query = build_params(UsageEventListParams, params, filters)
        return self._get_page(
            DefaultPageNumberPagination[Event],
            "events",
            query=query,
            options=request_options,
        )

    def ingest(
        self,
        params: UsageEventIngestParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> UsageEventIngestResponse:
        """Send a batch of usage events. Events whose `event_id` was seen before are ignored."""

        body = build_params(UsageEventIngestParams, params, fields)
        return self._post(
            "events/ingest",
            body=body,
            cast_to=UsageEventIngestResponse,
            options=request_options,
        )
