"""Webhook endpoint management and incoming delivery verification."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from dodopayments.adapters.resources._base import SyncAPIResource, build_params, path_param
from dodopayments.adapters.webhook_signature import WebhookVerifier
from dodopayments.core.domain.webhooks import (
    HeaderRetrieveResponse,
    HeaderUpdateParams,
    UnwrapWebhookEvent,
    WebhookCreateParams,
    WebhookDetails,
    WebhookGetSecretResponse,
    WebhookListParams,
    WebhookPayload,
    WebhookUpdateParams,
    parse_webhook_event,
)
from dodopayments.core.errors import WebhookVerificationError
from dodopayments.core.interfaces.contracts import WebhookHeadersContract, WebhooksContract
from dodopayments.core.interfaces.requester import Requester
from dodopayments.core.pagination import CursorPagePagination
from dodopayments.core.request_options import RequestOptions


def _webhook_path(webhook_id: str, suffix: str = "") -> str:
    return f"webhooks/{path_param('webhook_id', webhook_id)}{suffix}"


def _decode_body(payload: str | bytes) -> Any:
    try:
        return json.loads(payload)
    except ValueError as exc:
        raise WebhookVerificationError("Webhook body is not valid JSON.") from exc


class WebhookHeadersResource(SyncAPIResource, WebhookHeadersContract):
    def retrieve(
        self,
        webhook_id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> HeaderRetrieveResponse:
        return self._get(
            _webhook_path(webhook_id, "/headers"),
            cast_to=HeaderRetrieveResponse,
            options=request_options,
        )

    def update(
        self,
        webhook_id: str,
        params: HeaderUpdateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> None:
        """Replace the custom headers sent with every delivery."""

        body = build_params(HeaderUpdateParams, params, fields)
        return self._patch(_webhook_path(webhook_id, "/headers"), body=body, cast_to=None, options=request_options)


class WebhooksResource(SyncAPIResource, WebhooksContract):
    def __init__(self, requester: Requester, *, webhook_key: str | None = None) -> None:
        super().__init__(requester)
        self._webhook_key = webhook_key
        self.headers = WebhookHeadersResource(requester)

    def _with_requester(self, requester: Requester) -> WebhooksResource:
        return WebhooksResource(requester, webhook_key=self._webhook_key)

    def create(
        self,
        params: WebhookCreateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> WebhookDetails:
        body = build_params(WebhookCreateParams, params, fields)
        return self._post("webhooks", body=body, cast_to=WebhookDetails, options=request_options)

    def retrieve(
        self,
        webhook_id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> WebhookDetails:
        return self._get(_webhook_path(webhook_id), cast_to=WebhookDetails, options=request_options)

    def update(
        self,
        webhook_id: str,
        params: WebhookUpdateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> WebhookDetails:
        body = build_params(WebhookUpdateParams, params, fields)
        return self._patch(
            _webhook_path(webhook_id),
            body=body,
            cast_to=WebhookDetails,
            options=request_options,
        )

    def list(
        self,
        params: WebhookListParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **filters: Any,
    ) -> CursorPagePagination[WebhookDetails]:
        query = build_params(WebhookListParams, params, filters)
        return self._get_page(
            CursorPagePagination[WebhookDetails],
            "webhooks",
            query=query,
            options=request_options,
        )

    def delete(
        self,
        webhook_id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> None:
        return self._delete(_webhook_path(webhook_id), options=request_options)

    def retrieve_secret(
        self,
        webhook_id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> WebhookGetSecretResponse:
        return self._get(
            _webhook_path(webhook_id, "/secret"),
            cast_to=WebhookGetSecretResponse,
            options=request_options,
        )

    def unwrap(
        self,
        payload: str | bytes,
        headers: Mapping[str, str],
        *,
        key: str | None = None,
    ) -> UnwrapWebhookEvent | WebhookPayload:
        """Verify a delivery and parse its body.

        `key` falls back to the client's `webhook_key`. Raises
        `WebhookVerificationError` when no key is available, the signature
        does not match or the timestamp is outside the tolerance window.
        """

        secret = key if key is not None else self._webhook_key
        if not secret:
            raise WebhookVerificationError(
                "No webhook key: pass `key=` or configure `webhook_key` / DODO_PAYMENTS_WEBHOOK_KEY."
            )
        WebhookVerifier(secret).verify(payload, headers)
        return parse_webhook_event(_decode_body(payload))

    def unsafe_unwrap(self, payload: str | bytes) -> UnwrapWebhookEvent | WebhookPayload:
        """Parse a delivery body without checking its signature."""

        return parse_webhook_event(_decode_body(payload))
