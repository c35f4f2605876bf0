"""License activation (public endpoints) and license key management."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dodopayments.adapters.resources._base import SyncAPIResource, build_params, path_param
from dodopayments.core.domain.licenses import (
    LicenseActivateParams,
    LicenseActivateResponse,
    LicenseDeactivateParams,
    LicenseKey,
    LicenseKeyInstance,
    LicenseKeyInstanceListParams,
    LicenseKeyInstanceUpdateParams,
    LicenseKeyListParams,
    LicenseKeyUpdateParams,
    LicenseValidateParams,
    LicenseValidateResponse,
)
from dodopayments.core.interfaces.contracts import (
    LicenseKeyInstancesContract,
    LicenseKeysContract,
    LicensesContract,
)
from dodopayments.core.pagination import DefaultPageNumberPagination
from dodopayments.core.request_options import RequestOptions


class LicensesResource(SyncAPIResource, LicensesContract):
    """Called from end-user software; these endpoints need no API key."""

    def activate(
        self,
        params: LicenseActivateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> LicenseActivateResponse:
        body = build_params(LicenseActivateParams, params, fields)
        return self._post(
            "licenses/activate",
            body=body,
            cast_to=LicenseActivateResponse,
            options=request_options,
        )

    def deactivate(
        self,
        params: LicenseDeactivateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> None:
        body = build_params(LicenseDeactivateParams, params, fields)
        return self._post("licenses/deactivate", body=body, cast_to=None, options=request_options)

    def validate(
        self,
        params: LicenseValidateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> LicenseValidateResponse:
        body = build_params(LicenseValidateParams, params, fields)
        return self._post(
            "licenses/validate",
            body=body,
            cast_to=LicenseValidateResponse,
            options=request_options,
        )


class LicenseKeysResource(SyncAPIResource, LicenseKeysContract):
    def retrieve(
        self,
        id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> LicenseKey:
        return self._get(f"license_keys/{path_param('id', id)}", cast_to=LicenseKey, options=request_options)

    def update(
        self,
        id: str,
        params: LicenseKeyUpdateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> LicenseKey:
        body = build_params(LicenseKeyUpdateParams, params, fields)
        return self._patch(
            f"license_keys/{path_param('id', id)}",
            body=body,
            cast_to=LicenseKey,
            options=request_options,
        )

    def list(
        self,
        params: LicenseKeyListParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **filters: Any,
    ) -> DefaultPageNumberPagination[LicenseKey]:
        query = build_params(LicenseKeyListParams, params, filters)
        return self._get_page(
            DefaultPageNumberPagination[LicenseKey],
            "license_keys",
            query=query,
            options=request_options,
        )


class LicenseKeyInstancesResource(SyncAPIResource, LicenseKeyInstancesContract):
    def retrieve(
        self,
        id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> LicenseKeyInstance:
        return self._get(
            f"license_key_instances/{path_param('id', id)}",
            cast_to=LicenseKeyInstance,
            options=request_options,
        )

    def update(
        self,
        id: str,
        params: LicenseKeyInstanceUpdateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> LicenseKeyInstance:
        """Rename an activation instance."""

        body = build_params(LicenseKeyInstanceUpdateParams, params, fields)
        return self._patch(
            f"license_key_instances/{path_param('id', id)}",
            body=body,
            cast_to=LicenseKeyInstance,
            options=request_options,
        )

    def list(
        self,
        params: LicenseKeyInstanceListParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **filters: Any,
    ) -> DefaultPageNumberPagination[LicenseKeyInstance]:
        query = build_params(LicenseKeyInstanceListParams, params, filters)
        return self._get_page(
            DefaultPageNumberPagination[LicenseKeyInstance],
            "license_key_instances",
            query=query,
            options=request_options,
        )
