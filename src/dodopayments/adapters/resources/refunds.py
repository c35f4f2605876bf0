"""Refunds against succeeded payments."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dodopayments.adapters.resources._base import SyncAPIResource, build_params, path_param
from dodopayments.core.domain.refunds import Refund, RefundCreateParams, RefundListParams
from dodopayments.core.interfaces.contracts import RefundsContract
from dodopayments.core.pagination import DefaultPageNumberPagination
from dodopayments.core.request_options import RequestOptions


class RefundsResource(SyncAPIResource, RefundsContract):
    def create(
        self,
        params: RefundCreateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> Refund:
        """Refund a payment, fully or item by item."""

        body = build_params(RefundCreateParams, params, fields)
        return self._post("refunds", body=body, cast_to=Refund, options=request_options)

    def retrieve(
        self,
        refund_id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> Refund:
        return self._get(
            f"refunds/{path_param('refund_id', refund_id)}",
            cast_to=Refund,
            options=request_options,
        )

    def list(
        self,
        params: RefundListParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **filters: Any,
    ) -> DefaultPageNumberPagination[Refund]:
        query = build_params(RefundListParams, params, filters)
        return self._get_page(
            DefaultPageNumberPagination[Refund],
            "refunds",
            query=query,
            options=request_options,
        )
