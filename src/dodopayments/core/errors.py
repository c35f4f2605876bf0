"""Exception hierarchy.

Every error raised by the client derives from `DodoPaymentsError`:

- `APIConnectionError` / `APITimeoutError`: no response was received.
- `APIStatusError` and its subclasses: the API answered with a non-2xx status.
- `APIResponseValidationError`: a 2xx body did not match the expected model.
- `WebhookVerificationError`: an incoming webhook failed verification.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx


class DodoPaymentsError(Exception):
    """Base class for every error raised by this package."""


class APIError(DodoPaymentsError):
    message: str
    request: httpx.Request
    body: object | None

    def __init__(self, message: str, *, request: httpx.Request, body: object | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.request = request
        self.body = body


class APIConnectionError(APIError):
    def __init__(self, *, request: httpx.Request, message: str = "Connection error.") -> None:
        super().__init__(message, request=request)


class APITimeoutError(APIConnectionError):
    def __init__(self, *, request: httpx.Request) -> None:
        super().__init__(request=request, message="Request timed out.")


class APIResponseValidationError(APIError):
    response: httpx.Response
    status_code: int

    def __init__(
        self,
        *,
        response: httpx.Response,
        body: object | None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            message or "Data returned by API invalid for expected schema.",
            request=response.request,
            body=body,
        )
        self.response = response
        self.status_code = response.status_code


class APIStatusError(APIError):
    """The API returned a 4xx or 5xx response."""

    response: httpx.Response
    status_code: int
    request_id: str | None

    def __init__(self, message: str, *, response: httpx.Response, body: object | None) -> None:
        super().__init__(message, request=response.request, body=body)
        self.response = response
        self.status_code = response.status_code
        self.request_id = response.headers.get("x-request-id")


class BadRequestError(APIStatusError):
    pass


class AuthenticationError(APIStatusError):
    pass


class PermissionDeniedError(APIStatusError):
    pass


class NotFoundError(APIStatusError):
    pass


class ConflictError(APIStatusError):
    pass


class UnprocessableEntityError(APIStatusError):
    pass


class RateLimitError(APIStatusError):
    pass


class InternalServerError(APIStatusError):
    pass


_STATUS_ERRORS: dict[int, type[APIStatusError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


def status_error_class(status_code: int) -> type[APIStatusError]:
    """Exception class for a non-2xx status code."""

    if status_code >= 500:
        return InternalServerError
    return _STATUS_ERRORS.get(status_code, APIStatusError)


def make_status_error(response: httpx.Response, body: Any) -> APIStatusError:
    """Build the mapped exception, preferring the API's own `message` field."""

    message = None
    if isinstance(body, dict):
        raw = body.get("message") or body.get("error")
        if isinstance(raw, str) and raw:
            message = raw
    if message is None:
        message = f"Error code: {response.status_code}"
        if isinstance(body, str) and body:
            message = f"{message} - {body}"
    err_cls = status_error_class(response.status_code)
    return err_cls(message, response=response, body=body)


class WebhookVerificationError(DodoPaymentsError):
    """Signature, header or timestamp check failed for an incoming webhook."""
