"""One-time payments and their line items."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dodopayments.adapters.resources._base import SyncAPIResource, build_params, path_param
from dodopayments.core.domain.payments import (
    Payment,
    PaymentCreateParams,
    PaymentGetLineItemsResponse,
    PaymentListParams,
    PaymentListResponse,
    PaymentNewResponse,
)
from dodopayments.core.interfaces.contracts import PaymentsContract
from dodopayments.core.pagination import DefaultPageNumberPagination
from dodopayments.core.request_options import RequestOptions


class PaymentsResource(SyncAPIResource, PaymentsContract):
    def create(
        self,
        params: PaymentCreateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> PaymentNewResponse:
        body = build_params(PaymentCreateParams, params, fields)
        return self._post("payments", body=body, cast_to=PaymentNewResponse, options=request_options)

    def retrieve(
        self,
        payment_id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> Payment:
        return self._get(
            f"payments/{path_param('payment_id', payment_id)}",
            cast_to=Payment,
            options=request_options,
        )

    def list(
        self,
        params: PaymentListParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **filters: Any,
    ) -> DefaultPageNumberPagination[PaymentListResponse]:
        query = build_params(PaymentListParams, params, filters)
        return self._get_page(
            DefaultPageNumberPagination[PaymentListResponse],
            "payments",
            query=query,
            options=request_options,
        )

    def retrieve_line_items(
        self,
        payment_id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> PaymentGetLineItemsResponse:
        return self._get(
            f"payments/{path_param('payment_id', payment_id)}/line-items",
            cast_to=PaymentGetLineItemsResponse,
            options=request_options,
        )
