"""Add-ons sold alongside subscription products."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dodopayments.adapters.resources._base import SyncAPIResource, build_params, path_param
from dodopayments.core.domain.addons import (
    AddonCreateParams,
    AddonListParams,
    AddonResponse,
    AddonUpdateImagesResponse,
    AddonUpdateParams,
)
from dodopayments.core.interfaces.contracts import AddonsContract
from dodopayments.core.pagination import DefaultPageNumberPagination
from dodopayments.core.request_options import RequestOptions


class AddonsResource(SyncAPIResource, AddonsContract):
    def create(
        self,
        params: AddonCreateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> AddonResponse:
        body = build_params(AddonCreateParams, params, fields)
        return self._post("addons", body=body, cast_to=AddonResponse, options=request_options)

    def retrieve(
        self,
        id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> AddonResponse:
        return self._get(f"addons/{path_param('id', id)}", cast_to=AddonResponse, options=request_options)

    def update(
        self,
        id: str,
        params: AddonUpdateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> AddonResponse:
        body = build_params(AddonUpdateParams, params, fields)
        return self._patch(
            f"addons/{path_param('id', id)}",
            body=body,
            cast_to=AddonResponse,
            options=request_options,
        )

    def list(
        self,
        params: AddonListParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **filters: Any,
    ) -> DefaultPageNumberPagination[AddonResponse]:
        query = build_params(AddonListParams, params, filters)
        return self._get_page(
            DefaultPageNumberPagination[AddonResponse],
            "addons",
            query=query,
            options=request_options,
        )

    def update_images(
        self,
        id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> AddonUpdateImagesResponse:
        return self._put(
            f"addons/{path_param('id', id)}/images",
            cast_to=AddonUpdateImagesResponse,
            options=request_options,
        )
