"""
The retry loop and retry decorators.
"""

import functools
import logging
from typing import Awaitable, Callable, ParamSpec, TypeVar

from ..cancel import AsyncCancellationSignal, CancellationSignal
from ..limiters import Limiter
from ..timers import AsyncTimer, Timer
from .config import RetryConfig

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

OnRetry = Callable[[int, Exception], None]


def _name(operation: Callable) -> str:
    if isinstance(operation, functools.partial):
        operation = operation.func
    return getattr(operation, "__qualname__", None) or repr(operation)


def retry(
    operation: Callable[[], T],
    limiter: Limiter,
    timer: Timer,
    *,
    on_retry: OnRetry | None = None,
) -> T:
    """
    Run `operation` until it succeeds or `limiter` stops the loop.

    The operation always runs once. After each failure the limiter is asked
    whether to continue; if it agrees, the timer runs and the operation is
    tried again. Neither the limiter nor the timer is touched when an attempt
    succeeds.

    Args:
        operation: Callable that raises on failure
        limiter: Called with each failure's exception; True means retry
        timer: Called between a failure and the next attempt
        on_retry: Optional callback(attempt, exception) called before each
            delay; attempt is the 1-based number of the failed attempt

    Returns:
        The operation's return value from the first successful attempt

    Raises:
        Exception: The last attempt's exception, unchanged
    """
    attempt = 1
    while True:
        try:
            return operation()
        except Exception as e:
            if not limiter(e):
                logger.warning(f"Giving up on {_name(operation)} after {attempt} attempt(s): {e}")
                raise
            if on_retry:
                on_retry(attempt, e)
            else:
                logger.warning(f"Attempt {attempt} of {_name(operation)} failed: {e}, retrying")
        timer()
        attempt += 1


async def async_retry(
    operation: Callable[[], Awaitable[T]],
    limiter: Limiter,
    timer: AsyncTimer,
    *,
    on_retry: OnRetry | None = None,
) -> T:
    """
    Asyncio variant of `retry`.

    `operation` and `timer` are awaited; `limiter` is a plain callable.
    """
    attempt = 1
    while True:
        try:
            return await operation()
        except Exception as e:
            if not limiter(e):
                logger.warning(f"Giving up on {_name(operation)} after {attempt} attempt(s): {e}")
                raise
            if on_retry:
                on_retry(attempt, e)
            else:
                logger.warning(f"Attempt {attempt} of {_name(operation)} failed: {e}, retrying")
        await timer()
        attempt += 1


def with_retry(
    config: RetryConfig | None = None,
    *,
    signal: CancellationSignal | None = None,
    on_retry: OnRetry | None = None,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Decorator for synchronous functions with retry logic.

    Every call of the decorated function gets its own limiter and timer.

    Args:
        config: Retry configuration (default: RetryConfig())
        signal: Optional cancellation signal stopping retries and delays
        on_retry: Optional callback(attempt, exception) called before each retry

    Returns:
        Decorated function with retry behavior
    """
    if config is None:
        config = RetryConfig()

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            return retry(
                functools.partial(func, *args, **kwargs),
                config.build_limiter(signal),
                config.build_timer(signal),
                on_retry=on_retry,
            )

        return wrapper

    return decorator


def async_with_retry(
    config: RetryConfig | None = None,
    *,
    signal: AsyncCancellationSignal | None = None,
    on_retry: OnRetry | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Decorator for async functions with retry logic.

    Args:
        config: Retry configuration (default: RetryConfig())
        signal: Optional cancellation signal stopping retries and delays
        on_retry: Optional callback(attempt, exception) called before each retry

    Returns:
        Decorated async function with retry behavior
    """
    if config is None:
        config = RetryConfig()

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            return await async_retry(
                functools.partial(func, *args, **kwargs),
                config.build_limiter(signal),
                config.build_async_timer(signal),
                on_retry=on_retry,
            )

        return wrapper

    return decorator
