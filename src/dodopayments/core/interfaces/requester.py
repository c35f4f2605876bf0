"""Transport contract used by the resource services and by pages."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

from dodopayments.core.request_options import RequestOptions

PageT = TypeVar("PageT")


@runtime_checkable
class Requester(Protocol):
    """Issues one API call and converts the response.

    `cast_to` selects the return value: a model class, any type pydantic can
    validate, `bytes` for the raw body, or `None` to discard it.
    """

    def request(
        self,
        method: str,
        path: str,
        *,
        cast_to: Any,
        body: Any = None,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any: ...

    def with_raw_response(self) -> Requester:
        """Requester whose calls return an `APIResponse` instead of the parsed value."""
        ...

    def get_page(
        self,
        page_cls: type[PageT],
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> PageT: ...
