"""Invoice PDFs for payments and refunds."""

from __future__ import annotations

from dodopayments.adapters.resources._base import SyncAPIResource, path_param
from dodopayments.core.interfaces.contracts import InvoicePaymentsContract, InvoicesContract
from dodopayments.core.interfaces.requester import Requester
from dodopayments.core.request_options import RequestOptions


class InvoicePaymentsResource(SyncAPIResource, InvoicePaymentsContract):
    """Invoice documents. Both endpoints return the raw PDF bytes."""

    def retrieve(
        self,
        payment_id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> bytes:
        return self._get(
            f"invoices/payments/{path_param('payment_id', payment_id)}",
            cast_to=bytes,
            options=request_options,
        )

    def retrieve_refund(
        self,
        refund_id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> bytes:
        return self._get(
            f"invoices/refunds/{path_param('refund_id', refund_id)}",
            cast_to=bytes,
            options=request_options,
        )


class InvoicesResource(SyncAPIResource, InvoicesContract):
    def __init__(self, requester: Requester) -> None:
        super().__init__(requester)
        self.payments = InvoicePaymentsResource(requester)
