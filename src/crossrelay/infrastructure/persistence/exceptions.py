"""Memory store exceptions."""


class PersistenceError(Exception):
    """Base class for memory store failures."""


class DatabaseError(PersistenceError):
    """A memory store read or write failed.

    Attributes:
        operation: "read" or "write".
        key: Conversation id or username the operation was for.
    """

    def __init__(self, operation: str, key: str, message: str = "") -> None:
        self.operation = operation
        self.key = key
        super().__init__(message or f"Memory store {operation} failed for {key}")
