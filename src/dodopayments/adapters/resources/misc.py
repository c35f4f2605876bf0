"""Supported countries, the one endpoint outside a resource family."""

from __future__ import annotations

from dodopayments.adapters.resources._base import SyncAPIResource
from dodopayments.core.domain.enums import CountryCode
from dodopayments.core.interfaces.contracts import MiscContract
from dodopayments.core.request_options import RequestOptions


class MiscResource(SyncAPIResource, MiscContract):
    def list_supported_countries(
        self,
        *,
        request_options: RequestOptions | None = None,
    ) -> list[CountryCode]:
        """ISO 3166 alpha-2 codes of the countries checkout can sell to."""

        return self._get(
            "checkout/supported_countries",
            cast_to=list[CountryCode],
            options=request_options,
        )
