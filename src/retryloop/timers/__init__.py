"""
retryloop - Timers.

Delay policies run between a failed attempt and the next one.
"""

from .sleep import (
    Timer,
    AsyncTimer,
    Duration,
    to_seconds,
    Sleep,
    CancelableSleep,
    AsyncSleep,
    AsyncCancelableSleep,
)
from .backoff import (
    MultiplicativeBackoff,
    CancelableMultiplicativeBackoff,
    CMB,
    AsyncMultiplicativeBackoff,
    AsyncCancelableMultiplicativeBackoff,
)

__all__ = [
    # Types
    "Timer",
    "AsyncTimer",
    "Duration",
    "to_seconds",
    # Fixed delay
    "Sleep",
    "CancelableSleep",
    "AsyncSleep",
    "AsyncCancelableSleep",
    # Backoff
    "MultiplicativeBackoff",
    "CancelableMultiplicativeBackoff",
    "CMB",
    "AsyncMultiplicativeBackoff",
    "AsyncCancelableMultiplicativeBackoff",
]
