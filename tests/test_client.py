"""Client construction, headers, retries and error mapping."""

from __future__ import annotations

import logging

import httpx
import pytest

from dodopayments import (
    APIConnectionError,
    APIResponseValidationError,
    APIStatusError,
    APITimeoutError,
    AuthenticationError,
    BadRequestError,
    ConflictError,
    DodoPayments,
    Environment,
    InternalServerError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    RequestOptions,
    UnprocessableEntityError,
)
from dodopayments.core.config import ClientSettings
from dodopayments.core.interfaces.contracts import (
    CustomersContract,
    PaymentsContract,
    ProductsContract,
    WebhooksContract,
)
from tests import factories
from tests.conftest import API_KEY, BASE_URL, Router


def _ok_payment(router: Router) -> None:
    router.json("GET", "payments/pay_1", factories.payment())


# Construction


def test_base_url_defaults_to_live_environment(settings):
    client = DodoPayments(settings=settings)

    assert client.base_url == "https://live.dodopayments.com"
    assert client.environment is Environment.LIVE_MODE
    client.close()


def test_environment_argument_selects_test_url(settings):
    with DodoPayments(environment="test_mode", settings=settings) as client:
        assert client.base_url == "https://test.dodopayments.com"


def test_explicit_base_url_wins_over_environment(settings):
    with DodoPayments(base_url="http://localhost:4010", environment="test_mode", settings=settings) as client:
        assert client.base_url == "http://localhost:4010"


def test_settings_provide_defaults(monkeypatch):
    monkeypatch.setenv("DODO_PAYMENTS_API_KEY", "env-key")
    monkeypatch.setenv("DODO_PAYMENTS_ENVIRONMENT", "test_mode")
    monkeypatch.setenv("DODO_PAYMENTS_MAX_RETRIES", "5")

    with DodoPayments(settings=ClientSettings(_env_file=None)) as client:
        assert client.bearer_token == "env-key"
        assert client.base_url == "https://test.dodopayments.com"
        assert client.max_retries == 5


def test_constructor_arguments_beat_settings(monkeypatch):
    monkeypatch.setenv("DODO_PAYMENTS_API_KEY", "env-key")
    monkeypatch.setenv("DODO_PAYMENTS_BASE_URL", "https://proxy.example.com")

    with DodoPayments("arg-key", max_retries=0, settings=ClientSettings(_env_file=None)) as client:
        assert client.bearer_token == "arg-key"
        assert client.base_url == "https://proxy.example.com"
        assert client.max_retries == 0


def test_services_implement_their_contracts(client):
    assert isinstance(client.payments, PaymentsContract)
    assert isinstance(client.customers, CustomersContract)
    assert isinstance(client.products, ProductsContract)
    assert isinstance(client.webhooks, WebhooksContract)


def test_close_leaves_caller_supplied_http_client_open(client, http_client):
    client.close()

    assert not http_client.is_closed


def test_close_closes_owned_http_client(settings):
    client = DodoPayments(settings=settings)
    with client:
        assert not client.is_closed
    assert client.is_closed


def test_with_options_returns_configured_copy(client, router):
    _ok_payment(router)

    copy = client.with_options(bearer_token="other", max_retries=0, default_headers={"X-Trace": "1"})
    copy.payments.retrieve("pay_1")

    assert copy is not client
    assert copy.max_retries == 0
    assert client.max_retries == 2
    assert router.last.headers["Authorization"] == "Bearer other"
    assert router.last.headers["X-Trace"] == "1"
    copy.close()
    assert not client.is_closed


def test_with_options_environment_replaces_base_url(client):
    copy = client.with_options(environment=Environment.TEST_MODE)

    assert copy.base_url == "https://test.dodopayments.com"


def test_with_options_can_drop_the_token(monkeypatch, http_client, router):
    monkeypatch.setenv("DODO_PAYMENTS_API_KEY", "env-key")
    _ok_payment(router)
    client = DodoPayments(base_url=BASE_URL, http_client=http_client, settings=ClientSettings(_env_file=None))

    anonymous = client.with_options(bearer_token=None)
    anonymous.payments.retrieve("pay_1")

    assert client.bearer_token == "env-key"
    assert anonymous.bearer_token is None
    assert "Authorization" not in router.last.headers


def test_explicit_none_token_ignores_settings(monkeypatch):
    monkeypatch.setenv("DODO_PAYMENTS_API_KEY", "env-key")

    with DodoPayments(None, settings=ClientSettings(_env_file=None)) as client:
        assert client.bearer_token is None


# Headers


def test_default_headers(client, router):
    _ok_payment(router)

    client.payments.retrieve("pay_1")

    headers = router.last.headers
    assert headers["Accept"] == "application/json"
    assert headers["Content-Type"] == "application/json"
    assert headers["User-Agent"].startswith("dodopayments-python/")
    assert headers["Authorization"] == f"Bearer {API_KEY}"
    assert headers["x-stainless-retry-count"] == "0"
    assert str(router.last.url) == f"{BASE_URL}/payments/pay_1"


def test_no_authorization_header_without_token(http_client, router, settings):
    router.json("POST", "licenses/validate", {"valid": True})
    client = DodoPayments(base_url=BASE_URL, http_client=http_client, settings=settings)

    result = client.licenses.validate(license_key="KEY-123")

    assert result.valid is True
    assert "Authorization" not in router.last.headers


def test_request_options_are_merged(client, router):
    router.json("POST", "customers", factories.customer())

    client.customers.create(
        email="ada@example.com",
        name="Ada",
        request_options=RequestOptions(
            extra_headers={"X-Custom": "yes"},
            extra_query={"debug": "1"},
            extra_body={"tag": "beta"},
            idempotency_key="idem-1",
        ),
    )

    request = router.last
    assert request.headers["X-Custom"] == "yes"
    assert request.headers["Idempotency-Key"] == "idem-1"
    assert request.url.params["debug"] == "1"
    assert router.last_json() == {"email": "ada@example.com", "name": "Ada", "tag": "beta"}


# Errors


@pytest.mark.parametrize(
    ("status_code", "error_cls"),
    [
        (400, BadRequestError),
        (401, AuthenticationError),
        (403, PermissionDeniedError),
        (404, NotFoundError),
        (422, UnprocessableEntityError),
        (418, APIStatusError),
    ],
)
def test_status_errors_are_mapped(client, router, status_code, error_cls):
    router.add(
        "GET",
        "payments/pay_1",
        httpx.Response(status_code, json={"message": "nope"}, headers={"x-request-id": "req_9"}),
    )

    with pytest.raises(error_cls) as excinfo:
        client.payments.retrieve("pay_1")

    error = excinfo.value
    assert type(error) is error_cls
    assert error.status_code == status_code
    assert error.request_id == "req_9"
    assert error.body == {"message": "nope"}
    assert "nope" in str(error)
    assert len(router.calls) == 1


def test_client_errors_are_not_retried(client, router, sleeps):
    router.add("GET", "payments/pay_1", httpx.Response(400, json={"message": "bad"}))

    with pytest.raises(BadRequestError):
        client.payments.retrieve("pay_1")

    assert len(router.calls) == 1
    assert sleeps == []


def test_invalid_response_body_raises_validation_error(client, router):
    router.json("GET", "payments/pay_1", {"payment_id": "pay_1"})

    with pytest.raises(APIResponseValidationError):
        client.payments.retrieve("pay_1")


def test_non_json_success_body_raises_validation_error(client, router):
    router.add("GET", "payments/pay_1", httpx.Response(200, text="<html>"))

    with pytest.raises(APIResponseValidationError):
        client.payments.retrieve("pay_1")


def test_empty_path_parameter_is_rejected_before_sending(client, router):
    with pytest.raises(ValueError):
        client.payments.retrieve("")

    assert router.calls == []


def test_path_parameters_are_quoted(client, router):
    router.json("GET", "discounts/code/A%2FB", factories.discount(code="A/B"))

    discount = client.discounts.retrieve_by_code("A/B")

    assert discount.code == "A/B"
    assert router.last.url.raw_path == b"/discounts/code/A%2FB"


# Retries


@pytest.mark.parametrize(
    ("status_code", "error_cls"),
    [
        (408, APIStatusError),
        (409, ConflictError),
        (429, RateLimitError),
        (500, InternalServerError),
        (503, InternalServerError),
    ],
)
def test_retryable_statuses_are_retried_then_raised(client, router, sleeps, status_code, error_cls):
    router.add("GET", "payments/pay_1", httpx.Response(status_code, json={"message": "busy"}))

    with pytest.raises(error_cls):
        client.payments.retrieve("pay_1")

    assert len(router.calls) == 3
    assert [request.headers["x-stainless-retry-count"] for request in router.calls] == ["0", "1", "2"]
    assert len(sleeps) == 2


def test_retry_succeeds_after_server_error(client, router, sleeps):
    router.add(
        "GET",
        "payments/pay_1",
        httpx.Response(500, json={"message": "boom"}),
        httpx.Response(200, json=factories.payment()),
    )

    payment = client.payments.retrieve("pay_1")

    assert payment.payment_id == "pay_1"
    assert len(router.calls) == 2
    assert 0.375 <= sleeps[0] <= 0.625


def test_backoff_grows_exponentially(client, router, sleeps):
    router.add("GET", "payments/pay_1", httpx.Response(503))

    with pytest.raises(InternalServerError):
        client.payments.retrieve("pay_1", request_options=RequestOptions(max_retries=4))

    assert len(router.calls) == 5
    for attempt, delay in enumerate(sleeps):
        base = min(8.0, 0.5 * 2**attempt)
        assert base * 0.75 <= delay <= base * 1.25


def test_retry_after_header_takes_precedence(client, router, sleeps):
    router.add(
        "GET",
        "payments/pay_1",
        httpx.Response(429, headers={"retry-after": "3"}),
        httpx.Response(200, json=factories.payment()),
    )

    client.payments.retrieve("pay_1")

    assert sleeps == [3.0]


def test_retry_after_ms_header(client, router, sleeps):
    router.add(
        "GET",
        "payments/pay_1",
        httpx.Response(429, headers={"retry-after-ms": "1500"}),
        httpx.Response(200, json=factories.payment()),
    )

    client.payments.retrieve("pay_1")

    assert sleeps == [1.5]


def test_retry_after_over_a_minute_is_ignored(client, router, sleeps):
    router.add(
        "GET",
        "payments/pay_1",
        httpx.Response(429, headers={"retry-after": "600"}),
        httpx.Response(200, json=factories.payment()),
    )

    client.payments.retrieve("pay_1")

    assert 0.375 <= sleeps[0] <= 0.625


def test_should_retry_header_overrides_status(client, router):
    router.add("GET", "payments/pay_1", httpx.Response(500, headers={"x-should-retry": "false"}))

    with pytest.raises(InternalServerError):
        client.payments.retrieve("pay_1")
    assert len(router.calls) == 1

    router.add(
        "GET",
        "payments/pay_2",
        httpx.Response(400, headers={"x-should-retry": "true"}),
        httpx.Response(200, json=factories.payment("pay_2")),
    )
    assert client.payments.retrieve("pay_2").payment_id == "pay_2"


def test_max_retries_zero_disables_retries(client, router):
    router.add("GET", "payments/pay_1", httpx.Response(500))

    with pytest.raises(InternalServerError):
        client.payments.retrieve("pay_1", request_options=RequestOptions(max_retries=0))

    assert len(router.calls) == 1


def test_connection_errors_are_retried_and_wrapped(client, router, sleeps):
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    router.add("GET", "payments/pay_1", refuse)

    with pytest.raises(APIConnectionError) as excinfo:
        client.payments.retrieve("pay_1")

    assert not isinstance(excinfo.value, APITimeoutError)
    assert len(router.calls) == 3
    assert len(sleeps) == 2


def test_timeouts_raise_api_timeout_error(client, router):
    def slow(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    router.add("GET", "payments/pay_1", slow)

    with pytest.raises(APITimeoutError):
        client.payments.retrieve("pay_1", request_options=RequestOptions(max_retries=1))

    assert len(router.calls) == 2


# Logging


def test_retries_are_logged_as_warnings(client, router, caplog):
    router.add(
        "GET",
        "payments/pay_1",
        httpx.Response(502),
        httpx.Response(200, json=factories.payment()),
    )

    with caplog.at_level(logging.DEBUG, logger="dodopayments"):
        client.payments.retrieve("pay_1")

    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "Retrying GET" in warnings[0].getMessage()
    assert all(API_KEY not in record.getMessage() for record in caplog.records)
