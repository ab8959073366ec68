"""
Limiters: the stop-conditions of the retry loop.

A limiter is called once after every failed attempt with the attempt's
error. It returns True to make another attempt and False to stop. Any
`Callable[[Exception], bool]` is a limiter; the classes here are the
ready-made ones.

Stateful limiters (`MaxAttempts`) belong to a single loop invocation.
Build a fresh instance for every call to `retry`.
"""

import logging
from typing import Callable, TypeAlias

from ..cancel import AsyncCancellationSignal, CancellationSignal

logger = logging.getLogger(__name__)

Limiter: TypeAlias = Callable[[Exception], bool]


class Once:
    """Stop after the first failure. The operation always runs once."""

    def __call__(self, error: Exception) -> bool:
        return False

    def __repr__(self) -> str:
        return "Once()"


class Forever:
    """
    Never stop.

    Pair it with cancellation (`UntilCanceled`) or an operation that
    eventually succeeds, otherwise the loop never ends.
    """

    def __call__(self, error: Exception) -> bool:
        return True

    def __repr__(self) -> str:
        return "Forever()"


class MaxAttempts:
    """
    Stop once `max_attempts` attempts have been made.

    The first attempt, which always happens before the limiter is consulted,
    counts. Values of one or less mean no retries at all.
    """

    def __init__(self, max_attempts: int):
        self.max_attempts = max_attempts
        self._attempts = 1

    @property
    def attempts(self) -> int:
        """Attempts made so far, as far as this limiter knows."""
        return self._attempts

    def __call__(self, error: Exception) -> bool:
        if self._attempts < self.max_attempts:
            self._attempts += 1
            return True
        return False

    def __repr__(self) -> str:
        return f"MaxAttempts({self.max_attempts}, attempts={self._attempts})"


class CancelableLimiter:
    """
    Wrap another limiter so that cancellation stops the loop.

    The signal is checked first, without blocking. Once it reports
    cancellation the inner limiter is no longer consulted.
    """

    def __init__(self, signal: CancellationSignal | AsyncCancellationSignal, limiter: Limiter):
        self.signal = signal
        self.limiter = limiter

    def __call__(self, error: Exception) -> bool:
        if self.signal.is_canceled():
            logger.debug(f"Cancellation observed, stopping after: {error!r}")
            return False
        return self.limiter(error)

    def __repr__(self) -> str:
        return f"CancelableLimiter({self.limiter!r})"


def UntilCanceled(signal: CancellationSignal | AsyncCancellationSignal) -> CancelableLimiter:
    """Limiter that retries until `signal` is canceled."""
    return CancelableLimiter(signal, Forever())
