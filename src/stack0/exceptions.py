"""
Custom exceptions for the Stack0 SDK.
"""

from typing import Any, Dict, Optional


class Stack0Error(Exception):
    """Base exception for all SDK errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(Stack0Error):
    """Raised when the client is missing required configuration."""

    pass


class TransportError(Stack0Error):
    """Base class for failures talking to the remote API."""

    pass


class APIError(TransportError):
    """Raised when the API answers with an HTTP status of 400 or above."""

    def __init__(
        self,
        status_code: int,
        message: str,
        code: Optional[str] = None,
        response: Optional[Any] = None,
    ):
        super().__init__(message, {"status_code": status_code, "code": code})
        self.status_code = status_code
        self.code = code
        self.response = response

    def __str__(self) -> str:
        if self.code:
            return f"stack0: {self.message} (code: {self.code}, status: {self.status_code})"
        return f"stack0: {self.message} (status: {self.status_code})"


class NetworkError(TransportError):
    """Raised when the request never produced an HTTP response."""

    pass


class InvalidResponseError(Stack0Error):
    """Raised when a successful response body cannot be decoded."""

    pass


class JobFailedError(Stack0Error):
    """Raised when a polled job reports a failed terminal status."""

    def __init__(self, message: str, job: Any = None):
        super().__init__(message)
        self.job = job


class JobTimeoutError(Stack0Error):
    """Raised when a polled job does not finish before the deadline."""

    def __str__(self) -> str:
        return f"stack0: timeout: {self.message}"
