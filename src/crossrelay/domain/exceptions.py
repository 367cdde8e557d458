"""Domain exceptions."""


class AdapterError(Exception):
    """A platform adapter could not deliver or route a message.

    Raised when a platform API rejects a call, when a message lacks the
    field required to route a reply, or when the platform is unknown.
    """

    def __init__(
        self,
        platform: str,
        message: str = "",
        status_code: int | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            platform: Platform the failure happened on.
            message: Error message (optional).
            status_code: HTTP status returned by the platform, if any.
        """
        self.platform = platform
        self.status_code = status_code
        super().__init__(message or f"{platform} adapter error")


class MessageValidationError(Exception):
    """An inbound payload cannot be turned into a canonical Message."""

    def __init__(self, platform: str, message: str = "") -> None:
        self.platform = platform
        super().__init__(message or f"Invalid {platform} payload")


class ActionError(Exception):
    """An action could not produce its result (data source failure)."""

    def __init__(self, action: str, message: str = "") -> None:
        self.action = action
        super().__init__(message or f"Action {action} failed")
