"""
Fixed-delay timers.

A timer runs between a failed attempt and the next one, once the limiter has
decided to continue. Cancelable timers return early when their signal fires
but never report it: the loop learns about cancellation from a
`CancelableLimiter` on the next failure.
"""

import asyncio
import time
from datetime import timedelta
from typing import Awaitable, Callable, TypeAlias

from ..cancel import AsyncCancellationSignal, CancellationSignal
from ..exceptions import ConfigurationError

Timer: TypeAlias = Callable[[], None]
AsyncTimer: TypeAlias = Callable[[], Awaitable[None]]
Duration: TypeAlias = float | int | timedelta


def to_seconds(duration: Duration, name: str = "duration") -> float:
    """
    Normalize a duration to seconds.

    Args:
        duration: Seconds as a number, or a timedelta
        name: Field name used in the error message

    Returns:
        Duration in seconds

    Raises:
        ConfigurationError: If the duration is negative
    """
    if isinstance(duration, timedelta):
        seconds = duration.total_seconds()
    else:
        seconds = float(duration)
    if seconds < 0:
        raise ConfigurationError(f"{name} must be non-negative, got {seconds}", field=name)
    return seconds


async def race_cancellation(signal: AsyncCancellationSignal, seconds: float) -> None:
    """
    Sleep for `seconds` or until `signal` is canceled, whichever comes first.

    The losing task is cancelled and awaited before returning, so no pending
    sleep or wait is left behind on the event loop.
    """
    if signal.is_canceled():
        return
    sleeper = asyncio.ensure_future(asyncio.sleep(seconds))
    waiter = asyncio.ensure_future(signal.wait())
    pending = {sleeper, waiter}
    try:
        _, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
    finally:
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)


class Sleep:
    """Sleep for a fixed duration. Cannot be interrupted."""

    def __init__(self, duration: Duration, *, sleep: Callable[[float], None] = time.sleep):
        self.duration = to_seconds(duration)
        self._sleep = sleep

    def __call__(self) -> None:
        self._sleep(self.duration)

    def __repr__(self) -> str:
        return f"Sleep({self.duration:g})"


class CancelableSleep:
    """Sleep for a fixed duration, returning early if `signal` is canceled."""

    def __init__(self, signal: CancellationSignal, duration: Duration):
        self.signal = signal
        self.duration = to_seconds(duration)

    def __call__(self) -> None:
        # wait() returns on whichever comes first: timeout or cancellation
        self.signal.wait(self.duration)

    def __repr__(self) -> str:
        return f"CancelableSleep({self.duration:g})"


class AsyncSleep:
    """Asyncio variant of `Sleep`."""

    def __init__(
        self,
        duration: Duration,
        *,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.duration = to_seconds(duration)
        self._sleep = sleep

    async def __call__(self) -> None:
        await self._sleep(self.duration)

    def __repr__(self) -> str:
        return f"AsyncSleep({self.duration:g})"


class AsyncCancelableSleep:
    """Asyncio variant of `CancelableSleep`."""

    def __init__(self, signal: AsyncCancellationSignal, duration: Duration):
        self.signal = signal
        self.duration = to_seconds(duration)

    async def __call__(self) -> None:
        await race_cancellation(self.signal, self.duration)

    def __repr__(self) -> str:
        return f"AsyncCancelableSleep({self.duration:g})"
