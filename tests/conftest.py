"""Shared fixtures: a DodoPayments client whose HTTP layer is an in-memory router."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest

from dodopayments import DodoPayments
from dodopayments.core.config import ClientSettings

BASE_URL = "https://api.test"
API_KEY = "sk_test_123"

Responder = httpx.Response | Callable[[httpx.Request], httpx.Response]


class Router:
    """Maps `(method, path)` to queued responses and records every request.

    Each route answers with its queued responses in order; the last one is
    repeated once the queue is exhausted.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], list[Responder]] = {}
        self.calls: list[httpx.Request] = []

    def add(self, method: str, path: str, *responses: Responder) -> None:
        self.routes[(method.upper(), "/" + path.lstrip("/"))] = list(responses)

    def json(self, method: str, path: str, body: Any, status_code: int = 200) -> None:
        self.add(method, path, httpx.Response(status_code, json=body))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        # Raw path, so quoted segments (`A%2FB`) stay distinguishable.
        path = request.url.raw_path.split(b"?", 1)[0].decode("ascii")
        key = (request.method, path)
        queue = self.routes.get(key)
        if not queue:
            return httpx.Response(404, json={"message": f"no route for {key}"})
        responder = queue.pop(0) if len(queue) > 1 else queue[0]
        if callable(responder) and not isinstance(responder, httpx.Response):
            return responder(request)
        return responder

    @property
    def last(self) -> httpx.Request:
        return self.calls[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DODO_PAYMENTS_API_KEY",
        "DODO_PAYMENTS_BASE_URL",
        "DODO_PAYMENTS_ENVIRONMENT",
        "DODO_PAYMENTS_WEBHOOK_KEY",
        "DODO_PAYMENTS_TIMEOUT_SECONDS",
        "DODO_PAYMENTS_MAX_RETRIES",
        "DODO_PAYMENTS_LOG",
        "DODO_PAYMENTS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def sleeps(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Retry sleeps are recorded instead of slept."""

    recorded: list[float] = []
    monkeypatch.setattr("dodopayments.adapters.http_client.time.sleep", recorded.append)
    return recorded


@pytest.fixture()
def settings() -> ClientSettings:
    return ClientSettings(_env_file=None)


@pytest.fixture()
def router() -> Router:
    return Router()


@pytest.fixture()
def http_client(router: Router) -> Iterator[httpx.Client]:
    with httpx.Client(transport=httpx.MockTransport(router)) as client:
        yield client


@pytest.fixture()
def client(http_client: httpx.Client, settings: ClientSettings) -> DodoPayments:
    return DodoPayments(
        API_KEY,
        base_url=BASE_URL,
        http_client=http_client,
        settings=settings,
    )
