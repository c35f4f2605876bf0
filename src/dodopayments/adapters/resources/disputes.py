"""Read-only access to payment disputes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dodopayments.adapters.resources._base import SyncAPIResource, build_params, path_param
from dodopayments.core.domain.disputes import DisputeListParams, DisputeListResponse, GetDispute
from dodopayments.core.interfaces.contracts import DisputesContract
from dodopayments.core.pagination import DefaultPageNumberPagination
from dodopayments.core.request_options import RequestOptions


class DisputesResource(SyncAPIResource, DisputesContract):
    def retrieve(
        self,
        dispute_id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> GetDispute:
        return self._get(
            f"disputes/{path_param('dispute_id', dispute_id)}",
            cast_to=GetDispute,
            options=request_options,
        )

    def list(
        self,
        params: DisputeListParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **filters: Any,
    ) -> DefaultPageNumberPagination[DisputeListResponse]:
        query = build_params(DisputeListParams, params, filters)
        return self._get_page(
            DefaultPageNumberPagination[DisputeListResponse],
            "disputes",
            query=query,
            options=request_options,
        )
