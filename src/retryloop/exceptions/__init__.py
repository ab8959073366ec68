"""
retryloop - Exception Hierarchy.

Errors raised by the library itself, never by the retried operation.
"""

from .base import (
    RetryLoopError,
    ConfigurationError,
    Canceled,
    DeadlineExceeded,
)

__all__ = [
    "RetryLoopError",
    "ConfigurationError",
    "Canceled",
    "DeadlineExceeded",
]
