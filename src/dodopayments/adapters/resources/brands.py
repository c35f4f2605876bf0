"""Brands: the storefront identities products are sold under."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dodopayments.adapters.resources._base import SyncAPIResource, build_params, path_param
from dodopayments.core.domain.brands import (
    Brand,
    BrandCreateParams,
    BrandListResponse,
    BrandUpdateImagesResponse,
    BrandUpdateParams,
)
from dodopayments.core.interfaces.contracts import BrandsContract
from dodopayments.core.request_options import RequestOptions


class BrandsResource(SyncAPIResource, BrandsContract):
    def create(
        self,
        params: BrandCreateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> Brand:
        body = build_params(BrandCreateParams, params, fields)
        return self._post("brands", body=body, cast_to=Brand, options=request_options)

    def retrieve(
        self,
        id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> Brand:
        return self._get(f"brands/{path_param('id', id)}", cast_to=Brand, options=request_options)

    def update(
        self,
        id: str,
        params: BrandUpdateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> Brand:
        body = build_params(BrandUpdateParams, params, fields)
        return self._patch(
            f"brands/{path_param('id', id)}",
            body=body,
            cast_to=Brand,
            options=request_options,
        )

    def list(self, *, request_options: RequestOptions | None = None) -> BrandListResponse:
        """All brands of the business in one response; this endpoint is not paginated."""

        return self._get("brands", cast_to=BrandListResponse, options=request_options)

    def update_images(
        self,
        id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> BrandUpdateImagesResponse:
        return self._put(
            f"brands/{path_param('id', id)}/images",
            cast_to=BrandUpdateImagesResponse,
            options=request_options,
        )
