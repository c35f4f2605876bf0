"""List endpoint pages.

A page is a pydantic model of one response body that also remembers the
request that produced it, so it can fetch the following page. Iterating a
page yields the items of that page and of every page after it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Generic, Self, TypeVar

from pydantic import PrivateAttr

from dodopayments.core.domain.base import SdkModel
from dodopayments.core.errors import DodoPaymentsError
from dodopayments.core.request_options import RequestOptions

if TYPE_CHECKING:
    from dodopayments.core.interfaces.requester import Requester

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    path: str
    query: dict[str, Any] = field(default_factory=dict)
    options: RequestOptions | None = None


class BasePage(SdkModel, Generic[T]):
    _requester: Any = PrivateAttr(default=None)
    _request: PageRequest | None = PrivateAttr(default=None)

    def _bind(self, requester: Requester, request: PageRequest) -> Self:
        self._requester = requester
        self._request = request
        return self

    def _page_items(self) -> list[T]:
        raise NotImplementedError

    def _next_page_query(self) -> dict[str, Any] | None:
        """Query overrides for the following page, or None on the last one."""

        raise NotImplementedError

    def has_next_page(self) -> bool:
        return self._next_page_query() is not None

    def next_page(self) -> Self:
        changes = self._next_page_query()
        if changes is None:
            raise DodoPaymentsError(
                "No next page expected; check `.has_next_page()` before calling `.next_page()`."
            )
        if self._requester is None or self._request is None:
            raise DodoPaymentsError("This page was not fetched through a client and cannot paginate.")

        request = replace(self._request, query={**self._request.query, **changes})
        return self._requester.get_page(
            type(self),
            request.path,
            query=request.query,
            options=request.options,
        )

    def iter_pages(self) -> Iterator[Self]:
        page = self
        while True:
            yield page
            if not page.has_next_page():
                return
            page = page.next_page()

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        for page in self.iter_pages():
            yield from page._page_items()


class DefaultPageNumberPagination(BasePage[T]):
    """`{"items": [...]}` pages addressed by `page_number` (0-based)."""

    items: list[T] = []

    def _page_items(self) -> list[T]:
        return self.items

    def _next_page_query(self) -> dict[str, Any] | None:
        if not self.items:
            return None
        current = 0
        if self._request is not None:
            current = int(self._request.query.get("page_number") or 0)
        return {"page_number": current + 1}


class CursorPagePagination(BasePage[T]):
    """`{"data": [...], "iterator": ..., "done": ...}` pages addressed by cursor."""

    data: list[T] = []
    iterator: str | None = None
    done: bool | None = None

    @property
    def items(self) -> list[T]:
        return self.data

    def _page_items(self) -> list[T]:
        return self.data

    def _next_page_query(self) -> dict[str, Any] | None:
        if self.done or not self.iterator:
            return None
        return {"iterator": self.iterator}
