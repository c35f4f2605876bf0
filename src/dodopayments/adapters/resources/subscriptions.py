"""Subscriptions, plan changes, on-demand charges and usage history."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dodopayments.adapters.resources._base import SyncAPIResource, build_params, path_param
from dodopayments.core.domain.subscriptions import (
    Subscription,
    SubscriptionChangePlanParams,
    SubscriptionChargeParams,
    SubscriptionChargeResponse,
    SubscriptionCreateParams,
    SubscriptionListParams,
    SubscriptionListResponse,
    SubscriptionNewResponse,
    SubscriptionPreviewChangePlanParams,
    SubscriptionPreviewChangePlanResponse,
    SubscriptionRetrieveUsageHistoryParams,
    SubscriptionRetrieveUsageHistoryResponse,
    SubscriptionUpdateParams,
    SubscriptionUpdatePaymentMethodParams,
    SubscriptionUpdatePaymentMethodResponse,
)
from dodopayments.core.interfaces.contracts import SubscriptionsContract
from dodopayments.core.pagination import DefaultPageNumberPagination
from dodopayments.core.request_options import RequestOptions


class SubscriptionsResource(SyncAPIResource, SubscriptionsContract):
    def create(
        self,
        params: SubscriptionCreateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> SubscriptionNewResponse:
        body = build_params(SubscriptionCreateParams, params, fields)
        return self._post(
            "subscriptions",
            body=body,
            cast_to=SubscriptionNewResponse,
            options=request_options,
        )

    def retrieve(
        self,
        subscription_id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> Subscription:
        return self._get(
            f"subscriptions/{path_param('subscription_id', subscription_id)}",
            cast_to=Subscription,
            options=request_options,
        )

    def update(
        self,
        subscription_id: str,
        params: SubscriptionUpdateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> Subscription:
        path = f"subscriptions/{path_param('subscription_id', subscription_id)}"
        body = build_params(SubscriptionUpdateParams, params, fields)
        return self._patch(path, body=body, cast_to=Subscription, options=request_options)

    def list(
        self,
        params: SubscriptionListParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **filters: Any,
    ) -> DefaultPageNumberPagination[SubscriptionListResponse]:
        query = build_params(SubscriptionListParams, params, filters)
        return self._get_page(
            DefaultPageNumberPagination[SubscriptionListResponse],
            "subscriptions",
            query=query,
            options=request_options,
        )

    def change_plan(
        self,
        subscription_id: str,
        params: SubscriptionChangePlanParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> None:
        """Move the subscription to another product. The API answers with no body."""

        path = f"subscriptions/{path_param('subscription_id', subscription_id)}/change-plan"
        body = build_params(SubscriptionChangePlanParams, params, fields)
        return self._post(path, body=body, cast_to=None, options=request_options)

    def preview_change_plan(
        self,
        subscription_id: str,
        params: SubscriptionPreviewChangePlanParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> SubscriptionPreviewChangePlanResponse:
        """What `change_plan` would charge right now, and the resulting plan."""

        sid = path_param("subscription_id", subscription_id)
        body = build_params(SubscriptionPreviewChangePlanParams, params, fields)
        return self._post(
            f"subscriptions/{sid}/change-plan/preview",
            body=body,
            cast_to=SubscriptionPreviewChangePlanResponse,
            options=request_options,
        )

    def charge(
        self,
        subscription_id: str,
        params: SubscriptionChargeParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> SubscriptionChargeResponse:
        """Charge an on-demand subscription."""

        path = f"subscriptions/{path_param('subscription_id', subscription_id)}/charge"
        body = build_params(SubscriptionChargeParams, params, fields)
        return self._post(path, body=body, cast_to=SubscriptionChargeResponse, options=request_options)

    def retrieve_usage_history(
        self,
        subscription_id: str,
        params: SubscriptionRetrieveUsageHistoryParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **filters: Any,
    ) -> DefaultPageNumberPagination[SubscriptionRetrieveUsageHistoryResponse]:
        """Metered usage per billing period, newest first."""

        path = f"subscriptions/{path_param('subscription_id', subscription_id)}/usage-history"
        query = build_params(SubscriptionRetrieveUsageHistoryParams, params, filters)
        return self._get_page(
            DefaultPageNumberPagination[SubscriptionRetrieveUsageHistoryResponse],
            path,
            query=query,
            options=request_options,
        )

    def update_payment_method(
        self,
        subscription_id: str,
        params: SubscriptionUpdatePaymentMethodParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> SubscriptionUpdatePaymentMethodResponse:
        sid = path_param("subscription_id", subscription_id)
        body = build_params(SubscriptionUpdatePaymentMethodParams, params, fields)
        return self._post(
            f"subscriptions/{sid}/update-payment-method",
            body=body,
            cast_to=SubscriptionUpdatePaymentMethodResponse,
            options=request_options,
        )
