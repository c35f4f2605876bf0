"""Payouts to the business bank account."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dodopayments.adapters.resources._base import SyncAPIResource, build_params
from dodopayments.core.domain.payouts import PayoutListParams, PayoutListResponse
from dodopayments.core.interfaces.contracts import PayoutsContract
from dodopayments.core.pagination import DefaultPageNumberPagination
from dodopayments.core.request_options import RequestOptions


class PayoutsResource(SyncAPIResource, PayoutsContract):
    def list(
        self,
        params: PayoutListParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **filters: Any,
    ) -> DefaultPageNumberPagination[PayoutListResponse]:
        query = build_params(PayoutListParams, params, filters)
        return self._get_page(
            DefaultPageNumberPagination[PayoutListResponse],
            "payouts",
            query=query,
            options=request_options,
        )
