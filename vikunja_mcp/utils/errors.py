"""Error types for the Vikunja MCP server."""


class ReminderBridgeError(Exception):
    """Base exception for reminder bridge errors."""

    pass


class NetworkError(ReminderBridgeError):
    """Raised when a request never reached Vikunja or the response was unreadable."""

    pass


class RemoteError(ReminderBridgeError):
    """Raised when Vikunja answers with a non-success HTTP status."""

    def __init__(self, status: int, message: str = ""):
        super().__init__(f"HTTP error! status: {status}, message: {message}")
        self.status = status
        self.message = message


class DecodeError(ReminderBridgeError):
    """Raised when a success response body does not have the expected shape."""

    pass
