"""Custom exception hierarchy for roli.

Every public operation raises one of these instead of returning a
partially decoded value. The ``retryable`` class attribute tells callers
whether waiting and trying again can help.
"""

from __future__ import annotations


class RoliError(Exception):
    """Base exception for all roli errors."""

    retryable: bool = False


class ConfigurationError(RoliError):
    """Exception raised for configuration-related errors."""

    pass


class RoliVerificationError(RoliError):
    """Base exception for problems with the ``_RoliVerification`` cookie."""

    pass


class RoliVerificationNotSetError(RoliVerificationError):
    """Exception raised when an authenticated endpoint is called without a token."""

    def __init__(self) -> None:
        super().__init__("Roli verification not set")


class RoliVerificationContainsInvalidCharactersError(RoliVerificationError):
    """Exception raised when the token cannot be sent as a cookie header.

    Only printable ASCII (32-126) is accepted.
    """

    def __init__(self) -> None:
        super().__init__("Roli verification contains invalid characters")


class NetworkError(RoliError):
    """Exception raised when the request never produced a response.

    Covers refused connections, timeouts and TLS failures. The underlying
    ``httpx`` error is available as ``__cause__``.
    """

    retryable = True


class HTTPStatusError(RoliError):
    """Base exception for non-success HTTP status codes."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"Unexpected status code {status_code}")


class TooManyRequestsError(HTTPStatusError):
    """Exception raised when Rolimons rate limit is hit (429)."""

    retryable = True

    def __init__(self, status_code: int = 429) -> None:
        super().__init__(status_code, "Too many requests")


class InternalServerError(HTTPStatusError):
    """Exception raised for Rolimons server errors (500)."""

    retryable = True

    def __init__(self, status_code: int = 500) -> None:
        super().__init__(status_code, "Internal server error")


class CooldownNotExpiredError(HTTPStatusError):
    """Exception raised when a cooldown, such as the trade ad one, is still running."""

    retryable = True

    def __init__(self, status_code: int = 400) -> None:
        super().__init__(status_code, "Cooldown not expired")


class RoliVerificationInvalidOrExpiredError(HTTPStatusError):
    """Exception raised when Rolimons rejects the verification token (422)."""

    def __init__(self, status_code: int = 422) -> None:
        super().__init__(status_code, "Roli verification invalid or expired")


class UnidentifiedStatusCodeError(HTTPStatusError):
    """Exception raised for status codes no endpoint table knows about."""

    def __init__(self, status_code: int) -> None:
        super().__init__(status_code, f"Unidentified status code {status_code}")


class RequestUnsuccessfulError(RoliError):
    """Exception raised when a 2xx response body reports ``success: false``.

    ``code`` and ``message`` are copied from the body when present.
    """

    def __init__(
        self, code: int | str | None = None, message: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        detail = message or "Request returned unsuccessful"
        if code is not None:
            detail = f"{detail} (code {code})"
        super().__init__(detail)


class InvalidItemIdError(RequestUnsuccessfulError):
    """Exception raised when the service rejects one of the given item ids."""

    pass


class RateLimitExceededError(RequestUnsuccessfulError):
    """Exception raised when the body reports an exceeded request or ad limit."""

    retryable = True


class MalformedResponseError(RoliError):
    """Exception raised when a response body does not match its schema."""

    def __init__(self, message: str = "Malformed response") -> None:
        super().__init__(message)
