"""
Multiplicative backoff timers.

Each call waits for the current delay, then doubles it for the next call,
clamped to the ceiling. Once the ceiling is reached the delay stays there:

    base=1, ceiling=4  ->  1, 2, 4, 4, 4, ...

Instances hold the current delay and belong to a single loop invocation.
"""

import asyncio
import time
from typing import Awaitable, Callable

from ..cancel import AsyncCancellationSignal, CancellationSignal
from .sleep import Duration, race_cancellation, to_seconds


class MultiplicativeBackoff:
    """Sleep for a doubling delay, capped at `ceiling`. Cannot be interrupted."""

    def __init__(
        self,
        base: Duration,
        ceiling: Duration,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.base = to_seconds(base, "base")
        self.ceiling = to_seconds(ceiling, "ceiling")
        self._current = self.base
        self._sleep = sleep

    @property
    def current(self) -> float:
        """Delay the next call will wait for."""
        return self._current

    def _escalate(self) -> None:
        # Only affects the next call; the ceiling is absorbing.
        if self._current != self.ceiling:
            self._current = min(self._current * 2, self.ceiling)

    def __call__(self) -> None:
        self._sleep(self._current)
        self._escalate()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base={self.base:g}, ceiling={self.ceiling:g}, "
            f"current={self._current:g})"
        )


class CancelableMultiplicativeBackoff(MultiplicativeBackoff):
    """
    Same schedule as `MultiplicativeBackoff`, but each wait returns early if
    `signal` is canceled. The delay escalates after every call either way.
    """

    def __init__(self, signal: CancellationSignal, base: Duration, ceiling: Duration):
        super().__init__(base, ceiling)
        self.signal = signal

    def __call__(self) -> None:
        self.signal.wait(self._current)
        self._escalate()


# Short alias for the long-named CancelableMultiplicativeBackoff.
CMB = CancelableMultiplicativeBackoff


class AsyncMultiplicativeBackoff(MultiplicativeBackoff):
    """Asyncio variant of `MultiplicativeBackoff`."""

    def __init__(
        self,
        base: Duration,
        ceiling: Duration,
        *,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        super().__init__(base, ceiling, sleep=sleep)

    async def __call__(self) -> None:
        await self._sleep(self._current)
        self._escalate()


class AsyncCancelableMultiplicativeBackoff(MultiplicativeBackoff):
    """Asyncio variant of `CancelableMultiplicativeBackoff`."""

    def __init__(self, signal: AsyncCancellationSignal, base: Duration, ceiling: Duration):
        super().__init__(base, ceiling)
        self.signal = signal

    async def __call__(self) -> None:
        await race_cancellation(self.signal, self._current)
        self._escalate()
