"""
Stack0 SDK

Async Python client for the Stack0 API: mail, CDN, screenshots and extraction.
"""

from .client import Stack0
from .config import Settings
from .exceptions import (
    APIError,
    ConfigurationError,
    InvalidResponseError,
    JobFailedError,
    JobTimeoutError,
    NetworkError,
    Stack0Error,
    TransportError,
)
from .models import BatchJob, BatchJobStatus, Environment, Schedule, ScheduleFrequency

__version__ = "1.0.0"

__all__ = [
    "Stack0",
    "Settings",
    "Stack0Error",
    "ConfigurationError",
    "TransportError",
    "APIError",
    "NetworkError",
    "InvalidResponseError",
    "JobFailedError",
    "JobTimeoutError",
    "BatchJob",
    "BatchJobStatus",
    "Environment",
    "Schedule",
    "ScheduleFrequency",
]
