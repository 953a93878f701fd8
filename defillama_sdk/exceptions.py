"""Public exceptions for the DefiLlama SDK.

Every error raised by the SDK derives from DefiLlamaError. The four classified
kinds produced by the request dispatcher are ApiKeyRequiredError,
NotFoundError, RateLimitError and ApiError. Transport failures (timeouts,
DNS, connection resets) are not wrapped and surface as TimeoutError or
httpx.RequestError.
"""

from typing import Any


class DefiLlamaError(Exception):
    """Base exception for all DefiLlama SDK errors."""


class ApiKeyRequiredError(DefiLlamaError):
    """A Pro endpoint was called without an API key configured."""

    def __init__(self, endpoint: str) -> None:
        super().__init__(f"API key required for endpoint: {endpoint}")
        self.endpoint = endpoint


class NotFoundError(DefiLlamaError):
    """The requested resource (protocol, chain, pool, ...) does not exist."""

    def __init__(self, resource: str) -> None:
        super().__init__(f"Resource not found: {resource}")
        self.resource = resource


class RateLimitError(DefiLlamaError):
    """The API rate limit was exceeded.

    Attributes:
        retry_after: Seconds to wait before retrying, if the API sent a
            Retry-After header.
    """

    def __init__(self, retry_after: int | None = None) -> None:
        super().__init__("Rate limit exceeded")
        self.retry_after = retry_after


class ApiError(DefiLlamaError):
    """Any other non-2xx response from the API.

    Attributes:
        status_code: HTTP status code.
        response: Response body, parsed as JSON when possible, else raw text.
    """

    def __init__(self, status_code: int, message: str, response: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class DefiLlamaConfigError(DefiLlamaError):
    """Configuration error (missing API key, invalid settings)."""


class DefiLlamaValidationError(DefiLlamaError):
    """A response payload did not have the expected structure."""
