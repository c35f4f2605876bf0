"""Discount codes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dodopayments.adapters.resources._base import SyncAPIResource, build_params, path_param
from dodopayments.core.domain.discounts import (
    Discount,
    DiscountCreateParams,
    DiscountListParams,
    DiscountUpdateParams,
)
from dodopayments.core.interfaces.contracts import DiscountsContract
from dodopayments.core.pagination import DefaultPageNumberPagination
from dodopayments.core.request_options import RequestOptions


class DiscountsResource(SyncAPIResource, DiscountsContract):
    def create(
        self,
        params: DiscountCreateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> Discount:
        """Create a discount. Without `code` the API generates a random one."""

        body = build_params(DiscountCreateParams, params, fields)
        return self._post("discounts", body=body, cast_to=Discount, options=request_options)

    def retrieve(
        self,
        discount_id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> Discount:
        return self._get(
            f"discounts/{path_param('discount_id', discount_id)}",
            cast_to=Discount,
            options=request_options,
        )

    def update(
        self,
        discount_id: str,
        params: DiscountUpdateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> Discount:
        body = build_params(DiscountUpdateParams, params, fields)
        return self._patch(
            f"discounts/{path_param('discount_id', discount_id)}",
            body=body,
            cast_to=Discount,
            options=request_options,
        )

    def list(
        self,
        params: DiscountListParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **filters: Any,
    ) -> DefaultPageNumberPagination[Discount]:
        query = build_params(DiscountListParams, params, filters)
        return self._get_page(
            DefaultPageNumberPagination[Discount],
            "discounts",
            query=query,
            options=request_options,
        )

    def delete(
        self,
        discount_id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> None:
        return self._delete(f"discounts/{path_param('discount_id', discount_id)}", options=request_options)

    def retrieve_by_code(
        self,
        code: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> Discount:
        return self._get(
            f"discounts/code/{path_param('code', code)}",
            cast_to=Discount,
            options=request_options,
        )
