"""Errors raised by the InfluxDB client."""
from typing import Union


class Error(Exception):
    pass


class WriteError(Error):
    """Raised when the server answers a write with a non-empty body."""

    def __init__(self, body: str):
        self.body = body
        super().__init__(body)


class DecodeError(Error):
    """Raised when a query response cannot be turned into a result."""

    def __init__(self, query: str, body: Union[bytes, str], reason: str = ""):
        self.query = query
        self.body = body
        self.reason = reason

        text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else str(body)
        message = f"{query}: {text}"
        if reason:
            message = f"{message} ({reason})"

        super().__init__(message)


class SerializationError(Error):
    pass
