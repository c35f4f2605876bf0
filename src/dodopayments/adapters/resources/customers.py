"""Customers, their portal sessions, wallets and wallet ledger entries."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dodopayments.adapters.resources._base import SyncAPIResource, build_params, path_param
from dodopayments.core.domain.customers import (
    Customer,
    CustomerCreateParams,
    CustomerGetPaymentMethodsResponse,
    CustomerListParams,
    CustomerPortalCreateParams,
    CustomerPortalSession,
    CustomerUpdateParams,
    CustomerWallet,
    CustomerWalletTransaction,
    LedgerEntryCreateParams,
    LedgerEntryListParams,
    WalletListResponse,
)
from dodopayments.core.interfaces.contracts import (
    CustomerPortalContract,
    CustomersContract,
    LedgerEntriesContract,
    WalletsContract,
)
from dodopayments.core.interfaces.requester import Requester
from dodopayments.core.pagination import DefaultPageNumberPagination
from dodopayments.core.request_options import RequestOptions


def _customer_path(customer_id: str, suffix: str = "") -> str:
    return f"customers/{path_param('customer_id', customer_id)}{suffix}"


class CustomerPortalResource(SyncAPIResource, CustomerPortalContract):
    def create(
        self,
        customer_id: str,
        params: CustomerPortalCreateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> CustomerPortalSession:
        """Open a self-service portal session; `send_email` travels in the query string."""

        query = build_params(CustomerPortalCreateParams, params, fields)
        return self._post(
            _customer_path(customer_id, "/customer-portal/session"),
            query=query,
            cast_to=CustomerPortalSession,
            options=request_options,
        )


class LedgerEntriesResource(SyncAPIResource, LedgerEntriesContract):
    def create(
        self,
        customer_id: str,
        params: LedgerEntryCreateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> CustomerWallet:
        """Credit or debit a wallet. Returns the wallet with its new balance."""

        body = build_params(LedgerEntryCreateParams, params, fields)
        return self._post(
            _customer_path(customer_id, "/wallets/ledger-entries"),
            body=body,
            cast_to=CustomerWallet,
            options=request_options,
        )

    def list(
        self,
        customer_id: str,
        params: LedgerEntryListParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **filters: Any,
    ) -> DefaultPageNumberPagination[CustomerWalletTransaction]:
        query = build_params(LedgerEntryListParams, params, filters)
        return self._get_page(
            DefaultPageNumberPagination[CustomerWalletTransaction],
            _customer_path(customer_id, "/wallets/ledger-entries"),
            query=query,
            options=request_options,
        )


class WalletsResource(SyncAPIResource, WalletsContract):
    def __init__(self, requester: Requester) -> None:
        super().__init__(requester)
        self.ledger_entries = LedgerEntriesResource(requester)

    def list(
        self,
        customer_id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> WalletListResponse:
        return self._get(
            _customer_path(customer_id, "/wallets"),
            cast_to=WalletListResponse,
            options=request_options,
        )


class CustomersResource(SyncAPIResource, CustomersContract):
    def __init__(self, requester: Requester) -> None:
        super().__init__(requester)
        self.customer_portal = CustomerPortalResource(requester)
        self.wallets = WalletsResource(requester)

    def create(
        self,
        params: CustomerCreateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> Customer:
        body = build_params(CustomerCreateParams, params, fields)
        return self._post("customers", body=body, cast_to=Customer, options=request_options)

    def retrieve(
        self,
        customer_id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> Customer:
        return self._get(_customer_path(customer_id), cast_to=Customer, options=request_options)

    def update(
        self,
        customer_id: str,
        params: CustomerUpdateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> Customer:
        body = build_params(CustomerUpdateParams, params, fields)
        return self._patch(
            _customer_path(customer_id),
            body=body,
            cast_to=Customer,
            options=request_options,
        )

    def list(
        self,
        params: CustomerListParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **filters: Any,
    ) -> DefaultPageNumberPagination[Customer]:
        query = build_params(CustomerListParams, params, filters)
        return self._get_page(
            DefaultPageNumberPagination[Customer],
            "customers",
            query=query,
            options=request_options,
        )

    def retrieve_payment_methods(
        self,
        customer_id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> CustomerGetPaymentMethodsResponse:
        return self._get(
            _customer_path(customer_id, "/payment-methods"),
            cast_to=CustomerGetPaymentMethodsResponse,
            options=request_options,
        )
