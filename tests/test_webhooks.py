"""Webhook signature verification and event parsing."""

from __future__ import annotations

import base64
import json
import time

import pytest

from dodopayments import DodoPayments, WebhookVerificationError
from dodopayments.adapters.webhook_signature import WebhookVerifier
from dodopayments.core.domain.webhooks import (
    CreditBalanceLowEventData,
    PaymentSucceededWebhookEvent,
    SubscriptionRenewedWebhookEvent,
    WebhookPayload,
    parse_webhook_event,
)
from tests import factories
from tests.conftest import BASE_URL

SECRET = "whsec_" + base64.b64encode(b"super-secret-signing-key").decode()


def _event_body(event_type: str = "payment.succeeded", data: dict | None = None) -> str:
    return json.dumps(
        {
            "business_id": "bus_1",
            "timestamp": "2025-01-01T00:00:00Z",
            "type": event_type,
            "data": data if data is not None else {**factories.payment(), "payload_type": "Payment"},
        }
    )


def _headers(body: str, *, msg_id: str = "msg_1", timestamp: int | None = None, secret: str = SECRET) -> dict:
    ts = int(time.time()) if timestamp is None else timestamp
    return {
        "webhook-id": msg_id,
        "webhook-timestamp": str(ts),
        "webhook-signature": WebhookVerifier(secret).sign(msg_id, ts, body),
    }


@pytest.fixture()
def hooks_client(http_client, settings) -> DodoPayments:
    return DodoPayments("key", base_url=BASE_URL, webhook_key=SECRET, http_client=http_client, settings=settings)


def test_unwrap_returns_typed_event(hooks_client):
    body = _event_body()

    event = hooks_client.webhooks.unwrap(body, _headers(body))

    assert isinstance(event, PaymentSucceededWebhookEvent)
    assert event.data.payment_id == "pay_1"
    assert event.data.total_amount == 1000


def test_unwrap_accepts_bytes_and_explicit_key(client):
    body = _event_body(
        "subscription.renewed",
        {**factories.subscription(), "payload_type": "Subscription"},
    )

    event = client.webhooks.unwrap(body.encode(), _headers(body), key=SECRET)

    assert isinstance(event, SubscriptionRenewedWebhookEvent)
    assert event.data.subscription_id == "sub_1"


def test_unwrap_rejects_tampered_body(hooks_client):
    body = _event_body()
    headers = _headers(body)

    with pytest.raises(WebhookVerificationError):
        hooks_client.webhooks.unwrap(body.replace("1000", "1"), headers)


def test_unwrap_rejects_body_that_is_not_utf8(hooks_client):
    headers = {
        "webhook-id": "msg_1",
        "webhook-timestamp": str(int(time.time())),
        "webhook-signature": "v1,AAAA",
    }

    with pytest.raises(WebhookVerificationError, match="No matching signature"):
        hooks_client.webhooks.unwrap(b'{"a": "\xff"}', headers)


def test_signature_covers_raw_bytes():
    verifier = WebhookVerifier(SECRET)
    body = b'{"a": "\xff"}'
    ts = int(time.time())
    headers = {"webhook-id": "msg_3", "webhook-timestamp": str(ts), "webhook-signature": verifier.sign("msg_3", ts, body)}

    verifier.verify(body, headers)


def test_signed_body_that_is_not_utf8_fails_as_invalid_json(hooks_client):
    body = b'{"a": "\xff"}'
    ts = int(time.time())
    signature = WebhookVerifier(SECRET).sign("msg_4", ts, body)
    headers = {"webhook-id": "msg_4", "webhook-timestamp": str(ts), "webhook-signature": signature}

    with pytest.raises(WebhookVerificationError, match="not valid JSON"):
        hooks_client.webhooks.unwrap(body, headers)


def test_unwrap_rejects_wrong_secret(hooks_client):
    body = _event_body()
    other = "whsec_" + base64.b64encode(b"another-key").decode()

    with pytest.raises(WebhookVerificationError):
        hooks_client.webhooks.unwrap(body, _headers(body, secret=other))


@pytest.mark.parametrize("offset", [-301, 301])
def test_unwrap_rejects_timestamps_outside_tolerance(hooks_client, offset):
    body = _event_body()

    with pytest.raises(WebhookVerificationError):
        hooks_client.webhooks.unwrap(body, _headers(body, timestamp=int(time.time()) + offset))


@pytest.mark.parametrize("missing", ["webhook-id", "webhook-timestamp", "webhook-signature"])
def test_unwrap_rejects_missing_headers(hooks_client, missing):
    body = _event_body()
    headers = _headers(body)
    del headers[missing]

    with pytest.raises(WebhookVerificationError):
        hooks_client.webhooks.unwrap(body, headers)


def test_unwrap_without_any_key_fails(client):
    body = _event_body()

    with pytest.raises(WebhookVerificationError):
        client.webhooks.unwrap(body, _headers(body))


def test_signature_list_may_hold_several_versions():
    verifier = WebhookVerifier(SECRET)
    body = "{}"
    ts = int(time.time())
    good = verifier.sign("msg_2", ts, body)
    headers = {
        "Webhook-Id": "msg_2",
        "Webhook-Timestamp": str(ts),
        "Webhook-Signature": f"v2,ignored v1,bm90LWl0 {good}",
    }

    verifier.verify(body, headers)


def test_secret_must_be_base64():
    with pytest.raises(WebhookVerificationError):
        WebhookVerifier("whsec_***not base64***")


def test_unsafe_unwrap_skips_verification(client):
    event = client.webhooks.unsafe_unwrap(_event_body())

    assert isinstance(event, PaymentSucceededWebhookEvent)


def test_unsafe_unwrap_rejects_invalid_json(client):
    with pytest.raises(WebhookVerificationError):
        client.webhooks.unsafe_unwrap("not json")


def test_untyped_event_falls_back_to_generic_payload():
    event = parse_webhook_event(
        {
            "business_id": "bus_1",
            "timestamp": "2025-01-01T00:00:00Z",
            "type": "credit.balance_low",
            "data": {
                "payload_type": "CreditBalanceLow",
                "available_balance": "5",
                "credit_entitlement_id": "ce_1",
                "credit_entitlement_name": "API credits",
                "customer_id": "cus_1",
                "subscription_credits_amount": "100",
                "subscription_id": "sub_1",
                "threshold_amount": "10",
                "threshold_percent": 10,
            },
        }
    )

    assert isinstance(event, WebhookPayload)
    assert isinstance(event.data, CreditBalanceLowEventData)


def test_event_types_newer_than_the_client_still_parse():
    event = parse_webhook_event(
        {
            "business_id": "bus_1",
            "timestamp": "2025-01-01T00:00:00Z",
            "type": "invoice.finalized",
            "data": {"payload_type": "Invoice", "invoice_id": "inv_1"},
        }
    )

    assert isinstance(event, WebhookPayload)
    assert event.type.value == "invoice.finalized"
    assert not event.type.is_known()
    assert event.data == {"payload_type": "Invoice", "invoice_id": "inv_1"}
