"""
Custom exceptions for the movie store client.

Every failure raised by the store client derives from MovieStoreError so the
sync controller can collapse them into a single error string.
"""

FETCH_FAILED_MESSAGE = "Failed to fetch data"
APPEND_FAILED_MESSAGE = "Failed to add movie"


class MovieStoreError(Exception):
    """Base exception for all movie store errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class StoreTransportError(MovieStoreError):
    """Raised when the store could not be reached or no status was obtained."""

    def __init__(self, endpoint: str, cause: Exception | None = None):
        details = {"endpoint": endpoint}
        if cause:
            details["cause"] = str(cause)
        super().__init__(f"Connection failed to {endpoint}", details)
        self.endpoint = endpoint
        self.cause = cause


class FetchError(MovieStoreError):
    """Raised when listing the collection returns a non-success status.

    The status code is kept for diagnostics only; the message is fixed.
    """

    def __init__(self, status: int, endpoint: str | None = None):
        details: dict = {"status": status}
        if endpoint:
            details["endpoint"] = endpoint
        super().__init__(FETCH_FAILED_MESSAGE, details)
        self.status = status
        self.endpoint = endpoint


class AppendError(MovieStoreError):
    """Raised when adding a movie returns a non-success status."""

    def __init__(self, status: int, endpoint: str | None = None):
        details: dict = {"status": status}
        if endpoint:
            details["endpoint"] = endpoint
        super().__init__(APPEND_FAILED_MESSAGE, details)
        self.status = status
        self.endpoint = endpoint


class StoreParseError(MovieStoreError):
    """Raised when a response body is not valid JSON or has the wrong shape."""

    def __init__(self, endpoint: str, reason: str):
        super().__init__(
            f"Invalid response from {endpoint}: {reason}",
            {"endpoint": endpoint, "reason": reason},
        )
        self.endpoint = endpoint
        self.reason = reason


class ConfigError(MovieStoreError):
    """Raised when store configuration is missing or invalid."""

    def __init__(self, message: str, field: str | None = None):
        details = {}
        if field:
            details["field"] = field
        super().__init__(message, details)
        self.field = field
