"""HTTP response wrapper returned by `with_raw_response` calls."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

import httpx

T = TypeVar("T")

_MISSING: Any = object()


class APIResponse(Generic[T]):
    """A successful response plus a deferred, cached `parse()`.

    Usage:

        raw = client.payments.with_raw_response.retrieve("pay_123")
        print(raw.status_code, raw.request_id)
        payment = raw.parse()
    """

    def __init__(self, response: httpx.Response, parser: Callable[[], T]) -> None:
        self.http_response = response
        self._parser = parser
        self._parsed: Any = _MISSING

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http_response.headers

    @property
    def request_id(self) -> str | None:
        return self.http_response.headers.get("x-request-id")

    @property
    def url(self) -> httpx.URL:
        return self.http_response.request.url

    @property
    def method(self) -> str:
        return self.http_response.request.method

    @property
    def content(self) -> bytes:
        return self.http_response.content

    @property
    def text(self) -> str:
        return self.http_response.text

    def json(self) -> Any:
        return self.http_response.json()

    def parse(self) -> T:
        """Value the regular service method would have returned."""

        if self._parsed is _MISSING:
            self._parsed = self._parser()
        return self._parsed

    def __repr__(self) -> str:
        return f"<APIResponse [{self.status_code}] {self.method} {self.url}>"
