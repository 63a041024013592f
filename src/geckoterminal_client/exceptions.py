"""
GeckoTerminal Client Exception Hierarchy

Provides specific exception types for the failure modes of a single call:
upstream HTTP errors, response shape mismatches, transport failures and
strict-mode parameter rejections.
"""


class GeckoTerminalError(Exception):
    """Base exception for everything raised by this package."""


class GeckoTerminalAPIError(GeckoTerminalError):
    """Base exception for non-2xx responses from the GeckoTerminal API."""

    def __init__(
        self, message: str, status_code: int | None = None, endpoint: str | None = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.endpoint = endpoint


class BadRequestError(GeckoTerminalAPIError):
    """400 - Bad parameter(s) in the request."""

    pass


class NotFoundError(GeckoTerminalAPIError):
    """404 - Network, pool, token or endpoint not found."""

    pass


class RateLimitError(GeckoTerminalAPIError):
    """429 - Too many requests, rate limit exceeded."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(GeckoTerminalAPIError):
    """500+ - Server-side error."""

    pass


class ResponseValidationError(GeckoTerminalAPIError):
    """Response body did not match the expected model."""

    pass


class TransportError(GeckoTerminalError):
    """Connection or timeout failure before an HTTP status was received."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class ParameterValidationError(GeckoTerminalError, ValueError):
    """Strict-mode rejection of caller-supplied parameters."""

    def __init__(self, issues):
        self.issues = list(issues)
        details = "; ".join(issue.message for issue in self.issues)
        super().__init__(f"Invalid request parameters: {details}")
