"""`DodoPayments`: the entry point that wires settings, transport and services."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from dodopayments.adapters.http_client import APIRequester, build_http_client
from dodopayments.adapters.resources.addons import AddonsResource
from dodopayments.adapters.resources.balances import BalancesResource
from dodopayments.adapters.resources.brands import BrandsResource
from dodopayments.adapters.resources.checkout_sessions import CheckoutSessionsResource
from dodopayments.adapters.resources.customers import CustomersResource
from dodopayments.adapters.resources.discounts import DiscountsResource
from dodopayments.adapters.resources.disputes import DisputesResource
from dodopayments.adapters.resources.invoices import InvoicesResource
from dodopayments.adapters.resources.licenses import (
    LicenseKeyInstancesResource,
    LicenseKeysResource,
    LicensesResource,
)
from dodopayments.adapters.resources.meters import MetersResource
from dodopayments.adapters.resources.misc import MiscResource
from dodopayments.adapters.resources.payments import PaymentsResource
from dodopayments.adapters.resources.payouts import PayoutsResource
from dodopayments.adapters.resources.products import ProductsResource
from dodopayments.adapters.resources.refunds import RefundsResource
from dodopayments.adapters.resources.subscriptions import SubscriptionsResource
from dodopayments.adapters.resources.usage_events import UsageEventsResource
from dodopayments.adapters.resources.webhooks import WebhooksResource
from dodopayments.core.config import ClientSettings
from dodopayments.core.domain.environment import Environment
from dodopayments.core.logs import setup_logging

logger = logging.getLogger(__name__)

_UNSET: Any = object()


class DodoPayments:
    """Synchronous DodoPayments API client.

    Every argument left out falls back to `ClientSettings` (environment
    variables prefixed `DODO_PAYMENTS_` and the `.env` files). The base URL is
    resolved in this order: `base_url`, `environment`, the `BASE_URL`
    setting, the `ENVIRONMENT` setting.

    Usage:

        with DodoPayments(environment="test_mode") as client:
            for payment in client.payments.list(status="succeeded"):
                ...
    """

    def __init__(
        self,
        bearer_token: str | None = _UNSET,
        *,
        base_url: str | None = None,
        environment: Environment | str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        webhook_key: str | None = None,
        default_headers: Mapping[str, str] | None = None,
        http_client: httpx.Client | None = None,
        settings: ClientSettings | None = None,
    ) -> None:
        self._settings = settings or ClientSettings()
        setup_logging(self._settings.log_level)

        # Explicit None: no Authorization header.
        self.bearer_token = self._settings.api_key if bearer_token is _UNSET else bearer_token
        self.environment = Environment(environment) if environment is not None else self._settings.environment
        if base_url is not None:
            self.base_url = base_url
        elif environment is not None:
            self.base_url = self.environment.base_url()
        else:
            self.base_url = self._settings.resolved_base_url()

        self.timeout = timeout if timeout is not None else self._settings.timeout_seconds
        self.max_retries = max_retries if max_retries is not None else self._settings.max_retries
        self.webhook_key = webhook_key if webhook_key is not None else self._settings.webhook_key
        self._default_headers = dict(default_headers or {})

        self._owns_http_client = http_client is None
        self._http_client = http_client or build_http_client(self._settings, timeout=self.timeout)

        self._requester = APIRequester(
            self._http_client,
            base_url=self.base_url,
            bearer_token=self.bearer_token,
            max_retries=self.max_retries,
            timeout=self.timeout,
            default_headers=self._default_headers,
        )
        logger.debug("DodoPayments client for %s (retries=%s)", self.base_url, self.max_retries)

        requester = self._requester
        self.checkout_sessions = CheckoutSessionsResource(requester)
        self.payments = PaymentsResource(requester)
        self.subscriptions = SubscriptionsResource(requester)
        self.invoices = InvoicesResource(requester)
        self.licenses = LicensesResource(requester)
        self.license_keys = LicenseKeysResource(requester)
        self.license_key_instances = LicenseKeyInstancesResource(requester)
        self.customers = CustomersResource(requester)
        self.refunds = RefundsResource(requester)
        self.disputes = DisputesResource(requester)
        self.payouts = PayoutsResource(requester)
        self.products = ProductsResource(requester)
        self.misc = MiscResource(requester)
        self.discounts = DiscountsResource(requester)
        self.addons = AddonsResource(requester)
        self.brands = BrandsResource(requester)
        self.webhooks = WebhooksResource(requester, webhook_key=self.webhook_key)
        self.usage_events = UsageEventsResource(requester)
        self.meters = MetersResource(requester)
        self.balances = BalancesResource(requester)

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def is_closed(self) -> bool:
        return self._http_client.is_closed

    def with_options(
        self,
        *,
        bearer_token: str | None = _UNSET,
        base_url: str | None = _UNSET,
        environment: Environment | str | None = _UNSET,
        timeout: float | None = _UNSET,
        max_retries: int | None = _UNSET,
        webhook_key: str | None = _UNSET,
        default_headers: Mapping[str, str] | None = _UNSET,
    ) -> DodoPayments:
        """Copy of this client with some options replaced.

        The copy shares the underlying HTTP connection pool; closing the copy
        leaves it open.
        """

        if environment is not _UNSET and base_url is _UNSET:
            base_url = None
        return DodoPayments(
            self.bearer_token if bearer_token is _UNSET else bearer_token,
            base_url=self.base_url if base_url is _UNSET else base_url,
            environment=self.environment if environment is _UNSET else environment,
            timeout=self.timeout if timeout is _UNSET else timeout,
            max_retries=self.max_retries if max_retries is _UNSET else max_retries,
            webhook_key=self.webhook_key if webhook_key is _UNSET else webhook_key,
            default_headers={**self._default_headers, **(default_headers or {})}
            if default_headers is not _UNSET
            else self._default_headers,
            http_client=self._http_client,
            settings=self._settings,
        )

    def close(self) -> None:
        """Close the HTTP client when this instance created it."""

        if self._owns_http_client and not self._http_client.is_closed:
            self._http_client.close()

    def __enter__(self) -> DodoPayments:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"DodoPayments(base_url={self.base_url!r}, environment={self.environment.value!r})"
