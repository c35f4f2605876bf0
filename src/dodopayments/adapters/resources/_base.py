"""Shared plumbing for the resource services."""

from __future__ import annotations

from collections.abc import Mapping
from functools import cached_property
from typing import Any, Self, TypeVar
from urllib.parse import quote

from dodopayments.core.domain.base import SdkParams
from dodopayments.core.interfaces.requester import Requester
from dodopayments.core.request_options import RequestOptions

ParamsT = TypeVar("ParamsT", bound=SdkParams)
PageT = TypeVar("PageT")


def build_params(
    cls: type[ParamsT],
    params: ParamsT | Mapping[str, Any] | None,
    fields: Mapping[str, Any],
) -> ParamsT:
    """Accept a params model, a mapping, keyword fields, or a mix of them.

    Keyword fields override the same keys in `params`. Validation errors
    surface as pydantic's `ValidationError` before anything is sent.
    """

    if isinstance(params, cls):
        return params.with_(**fields) if fields else params
    if params is None:
        return cls.model_validate(dict(fields))
    if isinstance(params, Mapping):
        return cls.model_validate({**params, **fields})
    raise TypeError(f"Expected {cls.__name__} or a mapping, got {type(params).__name__}")


def path_param(name: str, value: Any) -> str:
    """URL-quoted path segment; empty values are rejected."""

    if value is None or str(value) == "":
        raise ValueError(f"Expected a non-empty value for `{name}` but received {value!r}")
    return quote(str(value), safe="")


class SyncAPIResource:
    """Base class of every service: holds the requester and the HTTP verbs."""

    def __init__(self, requester: Requester) -> None:
        self._requester = requester

    @cached_property
    def with_raw_response(self) -> Self:
        """The same service, returning `APIResponse` wrappers.

        Call `.parse()` on the result for the value the plain method returns.
        Sub-services are reachable too: `client.customers.with_raw_response.wallets.list(...)`.
        """

        return self._with_requester(self._requester.with_raw_response())

    def _with_requester(self, requester: Requester) -> Self:
        return type(self)(requester)

    def _get(
        self,
        path: str,
        *,
        cast_to: Any,
        query: Any = None,
        options: RequestOptions | None = None,
    ) -> Any:
        return self._requester.request("GET", path, cast_to=cast_to, query=query, options=options)

    def _post(
        self,
        path: str,
        *,
        cast_to: Any,
        body: Any = None,
        query: Any = None,
        options: RequestOptions | None = None,
    ) -> Any:
        return self._requester.request(
            "POST", path, cast_to=cast_to, body=body, query=query, options=options
        )

    def _put(
        self,
        path: str,
        *,
        cast_to: Any,
        body: Any = None,
        query: Any = None,
        options: RequestOptions | None = None,
    ) -> Any:
        return self._requester.request(
            "PUT", path, cast_to=cast_to, body=body, query=query, options=options
        )

    def _patch(
        self,
        path: str,
        *,
        cast_to: Any,
        body: Any = None,
        options: RequestOptions | None = None,
    ) -> Any:
        return self._requester.request("PATCH", path, cast_to=cast_to, body=body, options=options)

    def _delete(self, path: str, *, options: RequestOptions | None = None) -> Any:
        return self._requester.request("DELETE", path, cast_to=None, options=options)

    def _get_page(
        self,
        page_cls: type[PageT],
        path: str,
        *,
        query: Any = None,
        options: RequestOptions | None = None,
    ) -> PageT:
        return self._requester.get_page(page_cls, path, query=query, options=options)
