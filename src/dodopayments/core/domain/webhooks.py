"""Webhook endpoints and the events delivered to them.

Two parsed shapes exist for an incoming delivery:

- `UnwrapWebhookEvent`: one typed class per event, selected by `type`.
- `WebhookPayload`: the generic envelope, with `data` selected by its
  `payload_type`. Event types without a dedicated class parse into it.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import Discriminator, Field, Tag, TypeAdapter

from dodopayments.core.domain.base import LENIENT, ApiEnum, Omittable, SdkModel, SdkParams
from dodopayments.core.domain.disputes import Dispute
from dodopayments.core.domain.enums import WebhookEventType
from dodopayments.core.domain.licenses import LicenseKey
from dodopayments.core.domain.payments import Payment
from dodopayments.core.domain.refunds import Refund
from dodopayments.core.domain.subscriptions import Subscription


class WebhookDetails(SdkModel):
    id: str
    created_at: str
    description: str
    metadata: dict[str, str]
    updated_at: str
    url: str
    disabled: bool | None = None
    filter_types: list[str] | None = Field(
        default=None,
        description="Event types delivered to this endpoint. Empty or missing means all.",
    )
    rate_limit: int | None = None


class WebhookCreateParams(SdkParams):
    url: str
    description: str | None = None
    disabled: bool | None = None
    filter_types: Omittable[list[WebhookEventType]] = None
    headers: dict[str, str] | None = None
    idempotency_key: str | None = None
    metadata: dict[str, str] | None = None
    rate_limit: int | None = None


class WebhookUpdateParams(SdkParams):
    description: str | None = None
    disabled: bool | None = None
    filter_types: list[WebhookEventType] | None = None
    metadata: dict[str, str] | None = None
    rate_limit: int | None = None
    url: str | None = None


class WebhookListParams(SdkParams):
    iterator: str | None = None
    limit: int | None = None


class WebhookGetSecretResponse(SdkModel):
    secret: str


class HeaderRetrieveResponse(SdkModel):
    headers: dict[str, str]
    sensitive: list[str] = Field(..., description="Header names whose values are masked.")


class HeaderUpdateParams(SdkParams):
    headers: dict[str, str]


# Event payloads


class PayloadType(ApiEnum):
    PAYMENT = "Payment"
    SUBSCRIPTION = "Subscription"
    REFUND = "Refund"
    DISPUTE = "Dispute"
    LICENSE_KEY = "LicenseKey"
    CREDIT_LEDGER_ENTRY = "CreditLedgerEntry"
    CREDIT_BALANCE_LOW = "CreditBalanceLow"


class PaymentEventData(Payment):
    payload_type: PayloadType | None = None


class SubscriptionEventData(Subscription):
    payload_type: PayloadType | None = None


class RefundEventData(Refund):
    payload_type: PayloadType | None = None


class DisputeEventData(Dispute):
    payload_type: PayloadType | None = None


class LicenseKeyEventData(LicenseKey):
    payload_type: PayloadType | None = None


class CreditLedgerEntryEventData(SdkModel):
    id: str
    amount: str
    balance_after: str
    balance_before: str
    business_id: str
    created_at: datetime
    credit_entitlement_id: str
    customer_id: str
    is_credit: bool
    overage_after: str
    overage_before: str
    payload_type: PayloadType
    transaction_type: str
    description: str | None = None
    grant_id: str | None = None
    reference_id: str | None = None
    reference_type: str | None = None


class CreditBalanceLowEventData(SdkModel):
    available_balance: str
    credit_entitlement_id: str
    credit_entitlement_name: str
    customer_id: str
    payload_type: PayloadType
    subscription_credits_amount: str
    subscription_id: str
    threshold_amount: str
    threshold_percent: int


_PAYLOAD_TAGS = frozenset(member.value for member in PayloadType)


def _payload_tag(value: Any) -> str:
    if isinstance(value, Mapping):
        tag = value.get("payload_type")
    else:
        tag = getattr(value, "payload_type", None)
    if isinstance(tag, Enum):
        tag = tag.value
    return tag if tag in _PAYLOAD_TAGS else "unknown"


WebhookPayloadData = Annotated[
    Union[
        Annotated[PaymentEventData, Tag("Payment")],
        Annotated[SubscriptionEventData, Tag("Subscription")],
        Annotated[RefundEventData, Tag("Refund")],
        Annotated[DisputeEventData, Tag("Dispute")],
        Annotated[LicenseKeyEventData, Tag("LicenseKey")],
        Annotated[CreditLedgerEntryEventData, Tag("CreditLedgerEntry")],
        Annotated[CreditBalanceLowEventData, Tag("CreditBalanceLow")],
        Annotated[dict[str, Any], Tag("unknown")],
    ],
    Discriminator(_payload_tag),
]


class WebhookPayload(SdkModel):
    business_id: str
    data: WebhookPayloadData
    timestamp: datetime
    type: WebhookEventType


# Typed events


class _WebhookEvent(SdkModel):
    business_id: str
    timestamp: datetime = Field(..., description="When the event was raised.")


class DisputeAcceptedWebhookEvent(_WebhookEvent):
    type: Literal["dispute.accepted"] = "dispute.accepted"
    data: DisputeEventData


class DisputeCancelledWebhookEvent(_WebhookEvent):
    type: Literal["dispute.cancelled"] = "dispute.cancelled"
    data: DisputeEventData


class DisputeChallengedWebhookEvent(_WebhookEvent):
    type: Literal["dispute.challenged"] = "dispute.challenged"
    data: DisputeEventData


class DisputeExpiredWebhookEvent(_WebhookEvent):
    type: Literal["dispute.expired"] = "dispute.expired"
    data: DisputeEventData


class DisputeLostWebhookEvent(_WebhookEvent):
    type: Literal["dispute.lost"] = "dispute.lost"
    data: DisputeEventData


class DisputeOpenedWebhookEvent(_WebhookEvent):
    type: Literal["dispute.opened"] = "dispute.opened"
    data: DisputeEventData


class DisputeWonWebhookEvent(_WebhookEvent):
    type: Literal["dispute.won"] = "dispute.won"
    data: DisputeEventData


class LicenseKeyCreatedWebhookEvent(_WebhookEvent):
    type: Literal["license_key.created"] = "license_key.created"
    data: LicenseKeyEventData


class PaymentCancelledWebhookEvent(_WebhookEvent):
    type: Literal["payment.cancelled"] = "payment.cancelled"
    data: PaymentEventData


class PaymentFailedWebhookEvent(_WebhookEvent):
    type: Literal["payment.failed"] = "payment.failed"
    data: PaymentEventData


class PaymentProcessingWebhookEvent(_WebhookEvent):
    type: Literal["payment.processing"] = "payment.processing"
    data: PaymentEventData


class PaymentSucceededWebhookEvent(_WebhookEvent):
    type: Literal["payment.succeeded"] = "payment.succeeded"
    data: PaymentEventData


class RefundFailedWebhookEvent(_WebhookEvent):
    type: Literal["refund.failed"] = "refund.failed"
    data: RefundEventData


class RefundSucceededWebhookEvent(_WebhookEvent):
    type: Literal["refund.succeeded"] = "refund.succeeded"
    data: RefundEventData


class SubscriptionActiveWebhookEvent(_WebhookEvent):
    type: Literal["subscription.active"] = "subscription.active"
    data: SubscriptionEventData


class SubscriptionCancelledWebhookEvent(_WebhookEvent):
    type: Literal["subscription.cancelled"] = "subscription.cancelled"
    data: SubscriptionEventData


class SubscriptionExpiredWebhookEvent(_WebhookEvent):
    type: Literal["subscription.expired"] = "subscription.expired"
    data: SubscriptionEventData


class SubscriptionFailedWebhookEvent(_WebhookEvent):
    type: Literal["subscription.failed"] = "subscription.failed"
    data: SubscriptionEventData


class SubscriptionOnHoldWebhookEvent(_WebhookEvent):
    type: Literal["subscription.on_hold"] = "subscription.on_hold"
    data: SubscriptionEventData


class SubscriptionPlanChangedWebhookEvent(_WebhookEvent):
    type: Literal["subscription.plan_changed"] = "subscription.plan_changed"
    data: SubscriptionEventData


class SubscriptionRenewedWebhookEvent(_WebhookEvent):
    type: Literal["subscription.renewed"] = "subscription.renewed"
    data: SubscriptionEventData


class SubscriptionUpdatedWebhookEvent(_WebhookEvent):
    type: Literal["subscription.updated"] = "subscription.updated"
    data: SubscriptionEventData


_EVENT_CLASSES = (
    DisputeAcceptedWebhookEvent,
    DisputeCancelledWebhookEvent,
    DisputeChallengedWebhookEvent,
    DisputeExpiredWebhookEvent,
    DisputeLostWebhookEvent,
    DisputeOpenedWebhookEvent,
    DisputeWonWebhookEvent,
    LicenseKeyCreatedWebhookEvent,
    PaymentCancelledWebhookEvent,
    PaymentFailedWebhookEvent,
    PaymentProcessingWebhookEvent,
    PaymentSucceededWebhookEvent,
    RefundFailedWebhookEvent,
    RefundSucceededWebhookEvent,
    SubscriptionActiveWebhookEvent,
    SubscriptionCancelledWebhookEvent,
    SubscriptionExpiredWebhookEvent,
    SubscriptionFailedWebhookEvent,
    SubscriptionOnHoldWebhookEvent,
    SubscriptionPlanChangedWebhookEvent,
    SubscriptionRenewedWebhookEvent,
    SubscriptionUpdatedWebhookEvent,
)

UnwrapWebhookEvent = Annotated[
    Union[
        DisputeAcceptedWebhookEvent,
        DisputeCancelledWebhookEvent,
        DisputeChallengedWebhookEvent,
        DisputeExpiredWebhookEvent,
        DisputeLostWebhookEvent,
        DisputeOpenedWebhookEvent,
        DisputeWonWebhookEvent,
        LicenseKeyCreatedWebhookEvent,
        PaymentCancelledWebhookEvent,
        PaymentFailedWebhookEvent,
        PaymentProcessingWebhookEvent,
        PaymentSucceededWebhookEvent,
        RefundFailedWebhookEvent,
        RefundSucceededWebhookEvent,
        SubscriptionActiveWebhookEvent,
        SubscriptionCancelledWebhookEvent,
        SubscriptionExpiredWebhookEvent,
        SubscriptionFailedWebhookEvent,
        SubscriptionOnHoldWebhookEvent,
        SubscriptionPlanChangedWebhookEvent,
        SubscriptionRenewedWebhookEvent,
        SubscriptionUpdatedWebhookEvent,
    ],
    Field(discriminator="type"),
]

TYPED_EVENT_TYPES: frozenset[str] = frozenset(
    cls.model_fields["type"].default for cls in _EVENT_CLASSES
)

_EVENT_ADAPTER: TypeAdapter[Any] = TypeAdapter(UnwrapWebhookEvent)


def parse_webhook_event(data: Any) -> UnwrapWebhookEvent | WebhookPayload:
    """Parse a decoded webhook body.

    Event types with a dedicated class parse into it; anything else (credit
    events, payout events, types newer than this client) parses into the
    generic `WebhookPayload`.
    """

    if isinstance(data, Mapping) and data.get("type") in TYPED_EVENT_TYPES:
        return _EVENT_ADAPTER.validate_python(data, context=LENIENT)
    return WebhookPayload.from_wire(data)
