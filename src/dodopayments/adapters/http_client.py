"""httpx transport.

`build_http_client` standardizes timeouts, redirects and headers for the
underlying `httpx.Client`. `APIRequester` turns one service call into one or
more HTTP attempts:

- adds auth, retry-count and idempotency headers;
- retries connection errors, timeouts, 408/409/429 and 5xx with exponential
  backoff (or the server's `Retry-After`);
- maps non-2xx responses to `APIStatusError` subclasses;
- parses the body into the requested type.

`RawResponseRequester` runs the same calls but hands back an `APIResponse`
so callers can read the status and headers before parsing.
"""

from __future__ import annotations

import email.utils
import logging
import random
import time
from collections.abc import Mapping
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from dodopayments.core.config import ClientSettings
from dodopayments.core.domain.base import LENIENT, SdkModel, SdkParams
from dodopayments.core.errors import (
    APIConnectionError,
    APIResponseValidationError,
    APITimeoutError,
    make_status_error,
)
from dodopayments.core.interfaces.requester import Requester
from dodopayments.core.pagination import BasePage, PageRequest
from dodopayments.core.request_options import RequestOptions
from dodopayments.core.response import APIResponse
from dodopayments.version import __version__

logger = logging.getLogger(__name__)

PageT = TypeVar("PageT", bound=BasePage[Any])

INITIAL_RETRY_DELAY = 0.5
MAX_RETRY_DELAY = 8.0
MAX_RETRY_AFTER = 60.0
RETRYABLE_STATUS = frozenset({408, 409, 429})


def default_api_headers() -> dict[str, str]:
    return {
        "Accept": "application/json",
        "Content-Type": "application/json",
        "User-Agent": f"dodopayments-python/{__version__}",
    }


def build_http_client(
    settings: ClientSettings | None = None,
    *,
    timeout: float | None = None,
    extra_headers: Mapping[str, str] | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with the API's defaults."""

    settings = settings or ClientSettings()
    headers = default_api_headers()
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(timeout or settings.timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )


@lru_cache(maxsize=None)
def _type_adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


def _parse_retry_after(headers: httpx.Headers) -> float | None:
    """Seconds requested by `retry-after-ms` or `retry-after` (delta or HTTP date)."""

    raw_ms = headers.get("retry-after-ms")
    if raw_ms:
        try:
            return float(raw_ms) / 1000
        except ValueError:
            pass

    raw = headers.get("retry-after")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        pass
    try:
        when = email.utils.parsedate_to_datetime(raw)
    except (TypeError, ValueError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return (when - datetime.now(timezone.utc)).total_seconds()


def _error_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None


class APIRequester(Requester):
    """Sends API requests through an `httpx.Client` it does not own."""

    def __init__(
        self,
        http_client: httpx.Client,
        *,
        base_url: str,
        bearer_token: str | None = None,
        max_retries: int = 2,
        timeout: float | None = None,
        default_headers: Mapping[str, str] | None = None,
    ) -> None:
        self._http = http_client
        self.base_url = base_url.rstrip("/")
        self.bearer_token = bearer_token
        self.max_retries = max_retries
        self.timeout = timeout
        self.default_headers: dict[str, str] = {**default_api_headers(), **(default_headers or {})}

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self, options: RequestOptions | None, retries_taken: int) -> dict[str, str]:
        headers = dict(self.default_headers)
        if self.bearer_token:
            headers["Authorization"] = f"Bearer {self.bearer_token}"
        headers["x-stainless-retry-count"] = str(retries_taken)
        if options is not None:
            if options.idempotency_key:
                headers["Idempotency-Key"] = options.idempotency_key
            if options.extra_headers:
                headers.update(options.extra_headers)
        return headers

    @staticmethod
    def _query(query: Any, options: RequestOptions | None) -> dict[str, Any]:
        if isinstance(query, SdkParams):
            params = query.to_query()
        else:
            params = {k: v for k, v in (query or {}).items() if v is not None}
        if options is not None and options.extra_query:
            params.update(options.extra_query)
        return params

    @staticmethod
    def _body(body: Any, options: RequestOptions | None) -> Any:
        data = body.to_wire() if isinstance(body, SdkModel) else body
        if options is not None and options.extra_body:
            data = {**(data or {}), **options.extra_body}
        return data

    def _build_request(
        self,
        method: str,
        path: str,
        *,
        body: Any,
        query: Any,
        options: RequestOptions | None,
        retries_taken: int,
    ) -> httpx.Request:
        kwargs: dict[str, Any] = {
            "params": self._query(query, options),
            "headers": self._headers(options, retries_taken),
        }
        data = self._body(body, options)
        if data is not None:
            kwargs["json"] = data
        timeout = options.timeout if options is not None and options.timeout is not None else self.timeout
        if timeout is not None:
            kwargs["timeout"] = httpx.Timeout(timeout)
        return self._http.build_request(method, self._url(path), **kwargs)

    @staticmethod
    def _should_retry(response: httpx.Response) -> bool:
        should_retry = response.headers.get("x-should-retry")
        if should_retry == "true":
            return True
        if should_retry == "false":
            return False
        return response.status_code in RETRYABLE_STATUS or response.status_code >= 500

    @staticmethod
    def _retry_delay(retries_taken: int, response: httpx.Response | None) -> float:
        if response is not None:
            retry_after = _parse_retry_after(response.headers)
            if retry_after is not None and 0 <= retry_after <= MAX_RETRY_AFTER:
                return retry_after
        delay = min(MAX_RETRY_DELAY, INITIAL_RETRY_DELAY * (2**retries_taken))
        return delay * random.uniform(0.75, 1.25)  # nosec B311

    def _sleep_before_retry(
        self,
        request: httpx.Request,
        retries_taken: int,
        response: httpx.Response | None,
        reason: str,
    ) -> None:
        delay = self._retry_delay(retries_taken, response)
        logger.warning(
            "Retrying %s %s in %.2fs (%s, attempt %d)",
            request.method,
            request.url,
            delay,
            reason,
            retries_taken + 1,
        )
        time.sleep(delay)

    def request(
        self,
        method: str,
        path: str,
        *,
        cast_to: Any,
        body: Any = None,
        query: Any = None,
        options: RequestOptions | None = None,
    ) -> Any:
        response = self.send(method, path, body=body, query=query, options=options)
        return self.process_response(response, cast_to)

    def with_raw_response(self) -> RawResponseRequester:
        return RawResponseRequester(self)

    def send(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        query: Any = None,
        options: RequestOptions | None = None,
    ) -> httpx.Response:
        """Run the retry loop and return the first successful response, unparsed."""

        max_retries = self.max_retries
        if options is not None and options.max_retries is not None:
            max_retries = options.max_retries

        retries_taken = 0
        while True:
            request = self._build_request(
                method,
                path,
                body=body,
                query=query,
                options=options,
                retries_taken=retries_taken,
            )
            logger.debug("Request: %s %s", request.method, request.url)

            try:
                response = self._http.send(request)
            except httpx.TimeoutException as exc:
                if retries_taken < max_retries:
                    self._sleep_before_retry(request, retries_taken, None, "timeout")
                    retries_taken += 1
                    continue
                raise APITimeoutError(request=request) from exc
            except httpx.TransportError as exc:
                if retries_taken < max_retries:
                    self._sleep_before_retry(request, retries_taken, None, type(exc).__name__)
                    retries_taken += 1
                    continue
                raise APIConnectionError(request=request) from exc

            logger.debug(
                'HTTP Response: %s %s "%d %s" request_id=%s',
                request.method,
                request.url,
                response.status_code,
                response.reason_phrase,
                response.headers.get("x-request-id"),
            )

            if response.is_success:
                return response

            if retries_taken < max_retries and self._should_retry(response):
                response.close()
                self._sleep_before_retry(request, retries_taken, response, f"HTTP {response.status_code}")
                retries_taken += 1
                continue

            response.read()
            raise make_status_error(response, _error_body(response))

    def process_response(self, response: httpx.Response, cast_to: Any) -> Any:
        if cast_to is None:
            return None
        if cast_to is bytes:
            return response.content

        try:
            data = response.json()
        except ValueError as exc:
            raise APIResponseValidationError(
                response=response,
                body=response.text,
                message="Response body is not valid JSON.",
            ) from exc

        try:
            if isinstance(cast_to, type) and issubclass(cast_to, SdkModel):
                return cast_to.from_wire(data)
            return _type_adapter(cast_to).validate_python(data, context=LENIENT)
        except ValidationError as exc:
            raise APIResponseValidationError(response=response, body=data, message=str(exc)) from exc

    def get_page(
        self,
        page_cls: type[PageT],
        path: str,
        *,
        query: Any = None,
        options: RequestOptions | None = None,
    ) -> PageT:
        params = self._query(query, None)
        page = self.request("GET", path, cast_to=page_cls, query=params, options=options)
        return page._bind(self, PageRequest(path=path, query=params, options=options))


class RawResponseRequester(Requester):
    """Same calls as `APIRequester`, but every result is an `APIResponse`.

    Parsing is deferred to `APIResponse.parse()`. Pages parsed from a raw
    response fetch their following pages through the regular requester.
    """

    def __init__(self, requester: APIRequester) -> None:
        self._inner = requester

    def with_raw_response(self) -> RawResponseRequester:
        return self

    def request(
        self,
        method: str,
        path: str,
        *,
        cast_to: Any,
        body: Any = None,
        query: Any = None,
        options: RequestOptions | None = None,
    ) -> APIResponse[Any]:
        response = self._inner.send(method, path, body=body, query=query, options=options)
        return APIResponse(response, lambda: self._inner.process_response(response, cast_to))

    def get_page(
        self,
        page_cls: type[PageT],
        path: str,
        *,
        query: Any = None,
        options: RequestOptions | None = None,
    ) -> APIResponse[PageT]:
        inner = self._inner
        params = inner._query(query, None)
        response = inner.send("GET", path, query=params, options=options)

        def parse() -> PageT:
            page = inner.process_response(response, page_cls)
            return page._bind(inner, PageRequest(path=path, query=params, options=options))

        return APIResponse(response, parse)
