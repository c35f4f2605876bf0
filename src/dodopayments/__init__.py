"""DodoPayments Python SDK.

Usage:

    from dodopayments import DodoPayments

    client = DodoPayments(bearer_token="...", environment="test_mode")
    session = client.checkout_sessions.create(
        product_cart=[{"product_id": "pdt_123", "quantity": 1}],
    )
    print(session.checkout_url)
"""

from dodopayments.client import DodoPayments
from dodopayments.core.config import ClientSettings
from dodopayments.core.domain.environment import Environment
from dodopayments.core.errors import (
    APIConnectionError,
    APIError,
    APIResponseValidationError,
    APIStatusError,
    APITimeoutError,
    AuthenticationError,
    BadRequestError,
    ConflictError,
    DodoPaymentsError,
    InternalServerError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    UnprocessableEntityError,
    WebhookVerificationError,
)
from dodopayments.core.pagination import CursorPagePagination, DefaultPageNumberPagination
from dodopayments.core.request_options import RequestOptions
from dodopayments.core.response import APIResponse
from dodopayments.version import __title__, __version__

__all__ = [
    "APIConnectionError",
    "APIError",
    "APIResponse",
    "APIResponseValidationError",
    "APIStatusError",
    "APITimeoutError",
    "AuthenticationError",
    "BadRequestError",
    "ClientSettings",
    "ConflictError",
    "CursorPagePagination",
    "DefaultPageNumberPagination",
    "DodoPayments",
    "DodoPaymentsError",
    "Environment",
    "InternalServerError",
    "NotFoundError",
    "PermissionDeniedError",
    "RateLimitError",
    "RequestOptions",
    "UnprocessableEntityError",
    "WebhookVerificationError",
    "__title__",
    "__version__",
]
