"""Usage meters that aggregate ingested events."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dodopayments.adapters.resources._base import SyncAPIResource, build_params, path_param
from dodopayments.core.domain.meters import Meter, MeterCreateParams, MeterListParams
from dodopayments.core.interfaces.contracts import MetersContract
from dodopayments.core.pagination import DefaultPageNumberPagination
from dodopayments.core.request_options import RequestOptions


class MetersResource(SyncAPIResource, MetersContract):
    def create(
        self,
        params: MeterCreateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> Meter:
        body = build_params(MeterCreateParams, params, fields)
        return self._post("meters", body=body, cast_to=Meter, options=request_options)

    def retrieve(
        self,
        id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> Meter:
        return self._get(f"meters/{path_param('id', id)}", cast_to=Meter, options=request_options)

    def list(
        self,
        params: MeterListParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **filters: Any,
    ) -> DefaultPageNumberPagination[Meter]:
        query = build_params(MeterListParams, params, filters)
        return self._get_page(
            DefaultPageNumberPagination[Meter],
            "meters",
            query=query,
            options=request_options,
        )

    def archive(self, id: str, /, *, request_options: RequestOptions | None = None) -> None:
        return self._delete(f"meters/{path_param('id', id)}", options=request_options)

    def unarchive(self, id: str, /, *, request_options: RequestOptions | None = None) -> None:
        return self._post(f"meters/{path_param('id', id)}/unarchive", cast_to=None, options=request_options)
