"""
retryloop - Composable Retry Loops.

Run a fallible operation until it succeeds, a limiter gives up, or a
cancellation signal fires. Limiters and timers are small pluggable policies
that compose with cancellation.
"""

from .cancel import (
    CancellationSignal,
    AsyncCancellationSignal,
    CancelToken,
    AsyncCancelToken,
)
from .exceptions import (
    RetryLoopError,
    ConfigurationError,
    Canceled,
    DeadlineExceeded,
)
from .limiters import (
    Limiter,
    Once,
    Forever,
    MaxAttempts,
    CancelableLimiter,
    UntilCanceled,
)
from .loop import (
    RetryConfig,
    BackoffStrategy,
    retry,
    async_retry,
    with_retry,
    async_with_retry,
)
from .timers import (
    Timer,
    AsyncTimer,
    Sleep,
    CancelableSleep,
    MultiplicativeBackoff,
    CancelableMultiplicativeBackoff,
    CMB,
    AsyncSleep,
    AsyncCancelableSleep,
    AsyncMultiplicativeBackoff,
    AsyncCancelableMultiplicativeBackoff,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Loop
    "retry",
    "async_retry",
    "with_retry",
    "async_with_retry",
    "RetryConfig",
    "BackoffStrategy",
    # Limiters
    "Limiter",
    "Once",
    "Forever",
    "MaxAttempts",
    "CancelableLimiter",
    "UntilCanceled",
    # Timers
    "Timer",
    "AsyncTimer",
    "Sleep",
    "CancelableSleep",
    "MultiplicativeBackoff",
    "CancelableMultiplicativeBackoff",
    "CMB",
    "AsyncSleep",
    "AsyncCancelableSleep",
    "AsyncMultiplicativeBackoff",
    "AsyncCancelableMultiplicativeBackoff",
    # Cancellation
    "CancellationSignal",
    "AsyncCancellationSignal",
    "CancelToken",
    "AsyncCancelToken",
    # Exceptions
    "RetryLoopError",
    "ConfigurationError",
    "Canceled",
    "DeadlineExceeded",
]
