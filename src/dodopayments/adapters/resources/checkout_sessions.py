"""Hosted checkout sessions and their price previews."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dodopayments.adapters.resources._base import SyncAPIResource, build_params, path_param
from dodopayments.core.domain.checkout_sessions import (
    CheckoutSessionCreateParams,
    CheckoutSessionPreviewParams,
    CheckoutSessionPreviewResponse,
    CheckoutSessionResponse,
    CheckoutSessionStatus,
)
from dodopayments.core.interfaces.contracts import CheckoutSessionsContract
from dodopayments.core.request_options import RequestOptions


class CheckoutSessionsResource(SyncAPIResource, CheckoutSessionsContract):
    def create(
        self,
        params: CheckoutSessionCreateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> CheckoutSessionResponse:
        """Create a hosted checkout session and return its URL."""

        body = build_params(CheckoutSessionCreateParams, params, fields)
        return self._post(
            "checkouts",
            body=body,
            cast_to=CheckoutSessionResponse,
            options=request_options,
        )

    def retrieve(
        self,
        id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> CheckoutSessionStatus:
        return self._get(
            f"checkouts/{path_param('id', id)}",
            cast_to=CheckoutSessionStatus,
            options=request_options,
        )

    def preview(
        self,
        params: CheckoutSessionPreviewParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> CheckoutSessionPreviewResponse:
        """Price a cart (taxes, discounts, currency) without creating a session."""

        body = build_params(CheckoutSessionPreviewParams, params, fields)
        return self._post(
            "checkouts/preview",
            body=body,
            cast_to=CheckoutSessionPreviewResponse,
            options=request_options,
        )
