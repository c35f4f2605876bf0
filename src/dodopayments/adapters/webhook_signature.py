"""Standard Webhooks signature verification.

A delivery carries three headers:

- `webhook-id`: unique message id;
- `webhook-timestamp`: unix seconds when it was signed;
- `webhook-signature`: space separated `v1,<base64 HMAC-SHA256>` entries.

The signed content is `"{id}.{timestamp}.{body}"` and the key is the
base64 part of a `whsec_...` secret.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import logging
import time
from collections.abc import Mapping

from dodopayments.core.errors import WebhookVerificationError

logger = logging.getLogger(__name__)

SECRET_PREFIX = "whsec_"
TIMESTAMP_TOLERANCE_SECONDS = 5 * 60


class WebhookVerifier:
    def __init__(self, secret: str) -> None:
        if not secret:
            raise WebhookVerificationError("A webhook secret is required to verify signatures.")
        if secret.startswith(SECRET_PREFIX):
            secret = secret[len(SECRET_PREFIX) :]
        try:
            self._key = base64.b64decode(secret, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise WebhookVerificationError("Webhook secret is not valid base64.") from exc

    def sign(self, msg_id: str, timestamp: int, payload: str | bytes) -> str:
        """Signature header entry (`v1,<base64>`) for the given message."""

        body = payload if isinstance(payload, bytes) else payload.encode("utf-8")
        to_sign = f"{msg_id}.{timestamp}.".encode("utf-8") + body
        digest = hmac.new(self._key, to_sign, hashlib.sha256).digest()
        return "v1," + base64.b64encode(digest).decode("ascii")

    def verify(
        self,
        payload: str | bytes,
        headers: Mapping[str, str],
        *,
        now: float | None = None,
    ) -> None:
        """Raise `WebhookVerificationError` unless `payload` was signed with this key."""

        lowered = {key.lower(): value for key, value in headers.items()}
        msg_id = lowered.get("webhook-id")
        raw_timestamp = lowered.get("webhook-timestamp")
        signatures = lowered.get("webhook-signature")
        if not msg_id or not raw_timestamp or not signatures:
            raise WebhookVerificationError("Missing required webhook headers.")

        timestamp = self._check_timestamp(raw_timestamp, time.time() if now is None else now)
        expected = self.sign(msg_id, timestamp, payload).split(",", 1)[1]

        for entry in signatures.split(" "):
            version, _, candidate = entry.partition(",")
            if version != "v1":
                continue
            if hmac.compare_digest(expected.encode("ascii"), candidate.encode("ascii", "ignore")):
                return

        logger.debug("Webhook %s: no matching v1 signature", msg_id)
        raise WebhookVerificationError("No matching signature found.")

    @staticmethod
    def _check_timestamp(raw: str, now: float) -> int:
        try:
            timestamp = int(raw)
        except ValueError as exc:
            raise WebhookVerificationError("Invalid webhook-timestamp header.") from exc
        if timestamp < now - TIMESTAMP_TOLERANCE_SECONDS:
            raise WebhookVerificationError("Message timestamp too old.")
        if timestamp > now + TIMESTAMP_TOLERANCE_SECONDS:
            raise WebhookVerificationError("Message timestamp too new.")
        return timestamp
