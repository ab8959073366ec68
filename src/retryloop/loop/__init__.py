"""
retryloop - Retry Loop.

The loop that ties an operation, a limiter and a timer together, plus a
config-driven decorator layer on top of it.
"""

from .config import RetryConfig, BackoffStrategy
from .runner import retry, async_retry, with_retry, async_with_retry

__all__ = [
    "RetryConfig",
    "BackoffStrategy",
    "retry",
    "async_retry",
    "with_retry",
    "async_with_retry",
]
