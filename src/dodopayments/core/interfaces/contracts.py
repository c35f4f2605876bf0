"""Service contracts.

One `Protocol` per API resource. The concrete services in
`dodopayments.adapters.resources` implement them; code that only needs a
resource (the CLI, tests, application code) can depend on the contract and
accept any object with the same shape, such as a fake.

Params-taking methods accept a params model, a mapping, keyword fields, or a
combination; see `dodopayments.adapters.resources._base.build_params`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from dodopayments.core.domain.addons import AddonResponse, AddonUpdateImagesResponse
from dodopayments.core.domain.balances import BalanceLedgerEntry
from dodopayments.core.domain.brands import Brand, BrandListResponse, BrandUpdateImagesResponse
from dodopayments.core.domain.checkout_sessions import (
    CheckoutSessionPreviewResponse,
    CheckoutSessionResponse,
    CheckoutSessionStatus,
)
from dodopayments.core.domain.customers import (
    Customer,
    CustomerGetPaymentMethodsResponse,
    CustomerPortalSession,
    CustomerWallet,
    CustomerWalletTransaction,
    WalletListResponse,
)
from dodopayments.core.domain.discounts import Discount
from dodopayments.core.domain.disputes import DisputeListResponse, GetDispute
from dodopayments.core.domain.enums import CountryCode
from dodopayments.core.domain.licenses import (
    LicenseActivateResponse,
    LicenseKey,
    LicenseKeyInstance,
    LicenseValidateResponse,
)
from dodopayments.core.domain.meters import Meter
from dodopayments.core.domain.payments import (
    Payment,
    PaymentGetLineItemsResponse,
    PaymentListResponse,
    PaymentNewResponse,
)
from dodopayments.core.domain.payouts import PayoutListResponse
from dodopayments.core.domain.products import (
    ImageUpdateResponse,
    Product,
    ProductListResponse,
    ProductUpdateFilesResponse,
    ShortLinkListResponse,
    ShortLinkNewResponse,
)
from dodopayments.core.domain.refunds import Refund
from dodopayments.core.domain.subscriptions import (
    Subscription,
    SubscriptionChargeResponse,
    SubscriptionListResponse,
    SubscriptionNewResponse,
    SubscriptionPreviewChangePlanResponse,
    SubscriptionRetrieveUsageHistoryResponse,
    SubscriptionUpdatePaymentMethodResponse,
)
from dodopayments.core.domain.usage_events import Event, UsageEventIngestResponse
from dodopayments.core.domain.webhooks import (
    HeaderRetrieveResponse,
    UnwrapWebhookEvent,
    WebhookDetails,
    WebhookGetSecretResponse,
    WebhookPayload,
)
from dodopayments.core.pagination import CursorPagePagination, DefaultPageNumberPagination
from dodopayments.core.request_options import RequestOptions

# A params model, a mapping of its fields, or None.
Params = Any


@runtime_checkable
class CheckoutSessionsContract(Protocol):
    def create(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> CheckoutSessionResponse: ...

    def retrieve(self, id: str, /, *, request_options: RequestOptions | None = None) -> CheckoutSessionStatus: ...

    def preview(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> CheckoutSessionPreviewResponse: ...


@runtime_checkable
class PaymentsContract(Protocol):
    def create(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> PaymentNewResponse: ...

    def retrieve(self, payment_id: str, /, *, request_options: RequestOptions | None = None) -> Payment: ...

    def list(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **filters: Any
    ) -> DefaultPageNumberPagination[PaymentListResponse]: ...

    def retrieve_line_items(
        self, payment_id: str, /, *, request_options: RequestOptions | None = None
    ) -> PaymentGetLineItemsResponse: ...


@runtime_checkable
class SubscriptionsContract(Protocol):
    def create(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> SubscriptionNewResponse: ...

    def retrieve(
        self, subscription_id: str, /, *, request_options: RequestOptions | None = None
    ) -> Subscription: ...

    def update(
        self,
        subscription_id: str,
        params: Params = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> Subscription: ...

    def list(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **filters: Any
    ) -> DefaultPageNumberPagination[SubscriptionListResponse]: ...

    def change_plan(
        self,
        subscription_id: str,
        params: Params = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> None: ...

    def preview_change_plan(
        self,
        subscription_id: str,
        params: Params = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> SubscriptionPreviewChangePlanResponse: ...

    def charge(
        self,
        subscription_id: str,
        params: Params = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> SubscriptionChargeResponse: ...

    def retrieve_usage_history(
        self,
        subscription_id: str,
        params: Params = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **filters: Any,
    ) -> DefaultPageNumberPagination[SubscriptionRetrieveUsageHistoryResponse]: ...

    def update_payment_method(
        self,
        subscription_id: str,
        params: Params = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> SubscriptionUpdatePaymentMethodResponse: ...


@runtime_checkable
class InvoicePaymentsContract(Protocol):
    def retrieve(self, payment_id: str, /, *, request_options: RequestOptions | None = None) -> bytes: ...

    def retrieve_refund(self, refund_id: str, /, *, request_options: RequestOptions | None = None) -> bytes: ...


@runtime_checkable
class InvoicesContract(Protocol):
    payments: InvoicePaymentsContract


@runtime_checkable
class LicensesContract(Protocol):
    def activate(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> LicenseActivateResponse: ...

    def deactivate(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> None: ...

    def validate(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> LicenseValidateResponse: ...


@runtime_checkable
class LicenseKeysContract(Protocol):
    def retrieve(self, id: str, /, *, request_options: RequestOptions | None = None) -> LicenseKey: ...

    def update(
        self, id: str, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> LicenseKey: ...

    def list(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **filters: Any
    ) -> DefaultPageNumberPagination[LicenseKey]: ...


@runtime_checkable
class LicenseKeyInstancesContract(Protocol):
    def retrieve(self, id: str, /, *, request_options: RequestOptions | None = None) -> LicenseKeyInstance: ...

    def update(
        self, id: str, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> LicenseKeyInstance: ...

    def list(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **filters: Any
    ) -> DefaultPageNumberPagination[LicenseKeyInstance]: ...


@runtime_checkable
class CustomerPortalContract(Protocol):
    def create(
        self,
        customer_id: str,
        params: Params = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> CustomerPortalSession: ...


@runtime_checkable
class LedgerEntriesContract(Protocol):
    def create(
        self,
        customer_id: str,
        params: Params = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> CustomerWallet: ...

    def list(
        self,
        customer_id: str,
        params: Params = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **filters: Any,
    ) -> DefaultPageNumberPagination[CustomerWalletTransaction]: ...


@runtime_checkable
class WalletsContract(Protocol):
    ledger_entries: LedgerEntriesContract

    def list(self, customer_id: str, /, *, request_options: RequestOptions | None = None) -> WalletListResponse: ...


@runtime_checkable
class CustomersContract(Protocol):
    customer_portal: CustomerPortalContract
    wallets: WalletsContract

    def create(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> Customer: ...

    def retrieve(self, customer_id: str, /, *, request_options: RequestOptions | None = None) -> Customer: ...

    def update(
        self,
        customer_id: str,
        params: Params = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> Customer: ...

    def list(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **filters: Any
    ) -> DefaultPageNumberPagination[Customer]: ...

    def retrieve_payment_methods(
        self, customer_id: str, /, *, request_options: RequestOptions | None = None
    ) -> CustomerGetPaymentMethodsResponse: ...


@runtime_checkable
class RefundsContract(Protocol):
    def create(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> Refund: ...

    def retrieve(self, refund_id: str, /, *, request_options: RequestOptions | None = None) -> Refund: ...

    def list(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **filters: Any
    ) -> DefaultPageNumberPagination[Refund]: ...


@runtime_checkable
class DisputesContract(Protocol):
    def retrieve(self, dispute_id: str, /, *, request_options: RequestOptions | None = None) -> GetDispute: ...

    def list(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **filters: Any
    ) -> DefaultPageNumberPagination[DisputeListResponse]: ...


@runtime_checkable
class PayoutsContract(Protocol):
    def list(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **filters: Any
    ) -> DefaultPageNumberPagination[PayoutListResponse]: ...


@runtime_checkable
class ProductImagesContract(Protocol):
    def update(
        self, id: str, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> ImageUpdateResponse: ...


@runtime_checkable
class ShortLinksContract(Protocol):
    def create(
        self, id: str, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> ShortLinkNewResponse: ...

    def list(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **filters: Any
    ) -> DefaultPageNumberPagination[ShortLinkListResponse]: ...


@runtime_checkable
class ProductsContract(Protocol):
    images: ProductImagesContract
    short_links: ShortLinksContract

    def create(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> Product: ...

    def retrieve(self, id: str, /, *, request_options: RequestOptions | None = None) -> Product: ...

    def update(
        self, id: str, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> None: ...

    def list(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **filters: Any
    ) -> DefaultPageNumberPagination[ProductListResponse]: ...

    def archive(self, id: str, /, *, request_options: RequestOptions | None = None) -> None: ...

    def unarchive(self, id: str, /, *, request_options: RequestOptions | None = None) -> None: ...

    def update_files(
        self, id: str, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> ProductUpdateFilesResponse: ...


@runtime_checkable
class MiscContract(Protocol):
    def list_supported_countries(self, *, request_options: RequestOptions | None = None) -> list[CountryCode]: ...


@runtime_checkable
class DiscountsContract(Protocol):
    def create(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> Discount: ...

    def retrieve(self, discount_id: str, /, *, request_options: RequestOptions | None = None) -> Discount: ...

    def update(
        self,
        discount_id: str,
        params: Params = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> Discount: ...

    def list(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **filters: Any
    ) -> DefaultPageNumberPagination[Discount]: ...

    def delete(self, discount_id: str, /, *, request_options: RequestOptions | None = None) -> None: ...

    def retrieve_by_code(self, code: str, /, *, request_options: RequestOptions | None = None) -> Discount: ...


@runtime_checkable
class AddonsContract(Protocol):
    def create(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> AddonResponse: ...

    def retrieve(self, id: str, /, *, request_options: RequestOptions | None = None) -> AddonResponse: ...

    def update(
        self, id: str, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> AddonResponse: ...

    def list(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **filters: Any
    ) -> DefaultPageNumberPagination[AddonResponse]: ...

    def update_images(
        self, id: str, /, *, request_options: RequestOptions | None = None
    ) -> AddonUpdateImagesResponse: ...


@runtime_checkable
class BrandsContract(Protocol):
    def create(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> Brand: ...

    def retrieve(self, id: str, /, *, request_options: RequestOptions | None = None) -> Brand: ...

    def update(
        self, id: str, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> Brand: ...

    def list(self, *, request_options: RequestOptions | None = None) -> BrandListResponse: ...

    def update_images(
        self, id: str, /, *, request_options: RequestOptions | None = None
    ) -> BrandUpdateImagesResponse: ...


@runtime_checkable
class WebhookHeadersContract(Protocol):
    def retrieve(
        self, webhook_id: str, /, *, request_options: RequestOptions | None = None
    ) -> HeaderRetrieveResponse: ...

    def update(
        self,
        webhook_id: str,
        params: Params = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> None: ...


@runtime_checkable
class WebhooksContract(Protocol):
    headers: WebhookHeadersContract

    def create(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> WebhookDetails: ...

    def retrieve(self, webhook_id: str, /, *, request_options: RequestOptions | None = None) -> WebhookDetails: ...

    def update(
        self,
        webhook_id: str,
        params: Params = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> WebhookDetails: ...

    def list(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **filters: Any
    ) -> CursorPagePagination[WebhookDetails]: ...

    def delete(self, webhook_id: str, /, *, request_options: RequestOptions | None = None) -> None: ...

    def retrieve_secret(
        self, webhook_id: str, /, *, request_options: RequestOptions | None = None
    ) -> WebhookGetSecretResponse: ...

    def unwrap(
        self, payload: str | bytes, headers: Mapping[str, str], *, key: str | None = None
    ) -> UnwrapWebhookEvent | WebhookPayload: ...

    def unsafe_unwrap(self, payload: str | bytes) -> UnwrapWebhookEvent | WebhookPayload: ...


@runtime_checkable
class UsageEventsContract(Protocol):
    def retrieve(self, event_id: str, /, *, request_options: RequestOptions | None = None) -> Event: ...

    def list(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **filters: Any
    ) -> DefaultPageNumberPagination[Event]: ...

    def ingest(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> UsageEventIngestResponse: ...


@runtime_checkable
class MetersContract(Protocol):
    def create(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **fields: Any
    ) -> Meter: ...

    def retrieve(self, id: str, /, *, request_options: RequestOptions | None = None) -> Meter: ...

    def list(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **filters: Any
    ) -> DefaultPageNumberPagination[Meter]: ...

    def archive(self, id: str, /, *, request_options: RequestOptions | None = None) -> None: ...

    def unarchive(self, id: str, /, *, request_options: RequestOptions | None = None) -> None: ...


@runtime_checkable
class BalancesContract(Protocol):
    def retrieve_ledger(
        self, params: Params = None, /, *, request_options: RequestOptions | None = None, **filters: Any
    ) -> DefaultPageNumberPagination[BalanceLedgerEntry]: ...
