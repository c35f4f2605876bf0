"""`with_raw_response`: status, headers and deferred parsing."""

from __future__ import annotations

import base64
import json
import time

import httpx
import pytest

from dodopayments import APIResponse, DefaultPageNumberPagination, NotFoundError
from dodopayments.adapters.webhook_signature import WebhookVerifier
from dodopayments.core.domain.payments import Payment
from tests import factories


def test_retrieve_exposes_response_and_parses_on_demand(client, router):
    router.add(
        "GET",
        "payments/pay_1",
        httpx.Response(200, json=factories.payment(), headers={"x-request-id": "req_1", "x-ratelimit-remaining": "9"}),
    )

    raw = client.payments.with_raw_response.retrieve("pay_1")

    assert isinstance(raw, APIResponse)
    assert raw.status_code == 200
    assert raw.request_id == "req_1"
    assert raw.headers["x-ratelimit-remaining"] == "9"
    assert raw.method == "GET"
    assert raw.json()["payment_id"] == "pay_1"
    payment = raw.parse()
    assert isinstance(payment, Payment)
    assert raw.parse() is payment


def test_methods_without_a_result_still_return_the_response(client, router):
    router.add("DELETE", "products/pdt_1", httpx.Response(204))

    raw = client.products.with_raw_response.archive("pdt_1")

    assert raw.status_code == 204
    assert raw.parse() is None


def test_binary_bodies(client, router):
    router.add("GET", "invoices/payments/pay_1", httpx.Response(200, content=b"%PDF-1.7", headers={"content-type": "application/pdf"}))

    raw = client.invoices.with_raw_response.payments.retrieve("pay_1")

    assert raw.headers["content-type"] == "application/pdf"
    assert raw.parse() == b"%PDF-1.7"


def test_parsed_page_keeps_paginating(client, router):
    def respond(request: httpx.Request) -> httpx.Response:
        page_number = int(request.url.params.get("page_number", "0"))
        items = [factories.payment_list_item(f"pay_{page_number}")] if page_number < 2 else []
        return httpx.Response(200, json={"items": items})

    router.add("GET", "payments", respond)

    raw = client.payments.with_raw_response.list(page_size=1)
    page = raw.parse()

    assert isinstance(page, DefaultPageNumberPagination)
    assert [payment.payment_id for payment in page] == ["pay_0", "pay_1"]
    assert router.calls[0].url.params["page_size"] == "1"


def test_sub_services_are_reachable(client, router):
    router.json("GET", "customers/cus_1/wallets", {"items": [], "total_balance_usd": 0})

    raw = client.customers.with_raw_response.wallets.list("cus_1")

    assert raw.status_code == 200
    assert raw.parse().total_balance_usd == 0


def test_errors_are_raised_before_a_response_is_returned(client, router):
    router.add("GET", "payments/pay_404", httpx.Response(404, json={"message": "missing"}))

    with pytest.raises(NotFoundError):
        client.payments.with_raw_response.retrieve("pay_404")


def test_raw_view_is_cached_per_service(client):
    assert client.payments.with_raw_response is client.payments.with_raw_response


def test_webhooks_raw_view_keeps_the_webhook_key(client):
    secret = "whsec_" + base64.b64encode(b"raw-view-key").decode()
    body = json.dumps({"business_id": "bus_1", "timestamp": factories.TS, "type": "payment.succeeded", "data": {**factories.payment(), "payload_type": "Payment"}})
    ts = int(time.time())
    headers = {"webhook-id": "msg_1", "webhook-timestamp": str(ts), "webhook-signature": WebhookVerifier(secret).sign("msg_1", ts, body)}

    hooks = client.with_options(webhook_key=secret).webhooks.with_raw_response

    assert hooks.unwrap(body, headers).data.payment_id == "pay_1"
