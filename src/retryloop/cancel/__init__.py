"""
retryloop - Cancellation.

Signal protocols observed by cancelable limiters and timers, plus ready-made
tokens for threaded and asyncio callers.
"""

from .protocol import CancellationSignal, AsyncCancellationSignal
from .token import CancelToken, AsyncCancelToken

__all__ = [
    "CancellationSignal",
    "AsyncCancellationSignal",
    "CancelToken",
    "AsyncCancelToken",
]
