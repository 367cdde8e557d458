"""Language model gateway exceptions."""


class GatewayError(Exception):
    """Base exception for language model gateway errors."""


class GatewayAuthError(GatewayError):
    """No credential configured, or the credential was rejected."""


class GatewayUpstreamError(GatewayError):
    """The remote completion API did not succeed.

    Attributes:
        status_code: HTTP status returned by the API, if known.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class GatewayRateLimitError(GatewayUpstreamError):
    """Rate limit exceeded error."""
