from typing import Any, Dict, Optional


class TransportError(RuntimeError):
    """Base error for everything that can go wrong during a Qdrant HTTP call."""

    def __init__(self, message: str, status_code: int = 0, response: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response


class NetworkError(TransportError):
    """The request never produced a usable HTTP response (connection, DNS, timeout)."""


class SerializationError(TransportError):
    """The request body could not be encoded or the response body could not be decoded."""


class HttpError(TransportError):
    """The server answered with a 4xx/5xx status."""
