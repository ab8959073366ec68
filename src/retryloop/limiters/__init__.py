"""
retryloop - Limiters.

Stop-conditions consulted by the retry loop after each failed attempt.
"""

from .base import (
    Limiter,
    Once,
    Forever,
    MaxAttempts,
    CancelableLimiter,
    UntilCanceled,
)

__all__ = [
    "Limiter",
    "Once",
    "Forever",
    "MaxAttempts",
    "CancelableLimiter",
    "UntilCanceled",
]
