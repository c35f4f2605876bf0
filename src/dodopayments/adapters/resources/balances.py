"""Business balance ledger."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dodopayments.adapters.resources._base import SyncAPIResource, build_params
from dodopayments.core.domain.balances import BalanceLedgerEntry, BalanceRetrieveLedgerParams
from dodopayments.core.interfaces.contracts import BalancesContract
from dodopayments.core.pagination import DefaultPageNumberPagination
from dodopayments.core.request_options import RequestOptions


class BalancesResource(SyncAPIResource, BalancesContract):
    def retrieve_ledger(
        self,
        params: BalanceRetrieveLedgerParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **filters: Any,
    ) -> DefaultPageNumberPagination[BalanceLedgerEntry]:
        """Movements of the business balance (payments, refunds, fees, payouts...)."""

        query = build_params(BalanceRetrieveLedgerParams, params, filters)
        return self._get_page(
            DefaultPageNumberPagination[BalanceLedgerEntry],
            "balances/ledger",
            query=query,
            options=request_options,
        )
