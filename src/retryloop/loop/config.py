"""
Retry configuration and policy factories.
"""

from dataclasses import dataclass
from enum import Enum

from ..cancel import AsyncCancellationSignal, CancellationSignal
from ..exceptions import ConfigurationError
from ..limiters import CancelableLimiter, Forever, Limiter, MaxAttempts
from ..timers import (
    AsyncCancelableMultiplicativeBackoff,
    AsyncCancelableSleep,
    AsyncMultiplicativeBackoff,
    AsyncSleep,
    AsyncTimer,
    CancelableMultiplicativeBackoff,
    CancelableSleep,
    MultiplicativeBackoff,
    Sleep,
    Timer,
)


class BackoffStrategy(str, Enum):
    """Available delay strategies."""

    CONSTANT = "constant"  # delay = base
    MULTIPLICATIVE = "multiplicative"  # delay = min(base * 2**retry, max)


@dataclass
class RetryConfig:
    """
    Configuration for retry behavior.

    A config is a recipe, not a policy: every `build_*` call returns fresh
    limiter and timer instances, so one config can serve any number of
    concurrent loops.

    Attributes:
        max_attempts: Total attempts including the first; None retries until
            canceled or successful (default: 5)
        base_delay: Delay before the first retry in seconds (default: 1.0)
        max_delay: Ceiling for multiplicative backoff in seconds (default: 60.0)
        strategy: Delay strategy to use (default: multiplicative)
    """

    max_attempts: int | None = 5
    base_delay: float = 1.0
    max_delay: float = 60.0
    strategy: BackoffStrategy = BackoffStrategy.MULTIPLICATIVE

    def __post_init__(self):
        if self.base_delay < 0:
            raise ConfigurationError(
                f"base_delay must be non-negative, got {self.base_delay}",
                field="base_delay",
            )
        if self.max_delay < 0:
            raise ConfigurationError(
                f"max_delay must be non-negative, got {self.max_delay}",
                field="max_delay",
            )
        self.strategy = BackoffStrategy(self.strategy)

    def build_limiter(
        self, signal: CancellationSignal | AsyncCancellationSignal | None = None
    ) -> Limiter:
        """Build a fresh limiter, cancelable when a signal is given."""
        if self.max_attempts is None:
            limiter: Limiter = Forever()
        else:
            limiter = MaxAttempts(self.max_attempts)
        if signal is not None:
            limiter = CancelableLimiter(signal, limiter)
        return limiter

    def build_timer(self, signal: CancellationSignal | None = None) -> Timer:
        """Build a fresh blocking timer, cancelable when a signal is given."""
        if self.strategy == BackoffStrategy.CONSTANT:
            if signal is not None:
                return CancelableSleep(signal, self.base_delay)
            return Sleep(self.base_delay)
        if signal is not None:
            return CancelableMultiplicativeBackoff(signal, self.base_delay, self.max_delay)
        return MultiplicativeBackoff(self.base_delay, self.max_delay)

    def build_async_timer(self, signal: AsyncCancellationSignal | None = None) -> AsyncTimer:
        """Build a fresh asyncio timer, cancelable when a signal is given."""
        if self.strategy == BackoffStrategy.CONSTANT:
            if signal is not None:
                return AsyncCancelableSleep(signal, self.base_delay)
            return AsyncSleep(self.base_delay)
        if signal is not None:
            return AsyncCancelableMultiplicativeBackoff(signal, self.base_delay, self.max_delay)
        return AsyncMultiplicativeBackoff(self.base_delay, self.max_delay)

    @classmethod
    def aggressive(cls) -> "RetryConfig":
        """Preset for aggressive retry (more attempts, longer delays)."""
        return cls(
            max_attempts=10,
            base_delay=2.0,
            max_delay=120.0,
        )

    @classmethod
    def conservative(cls) -> "RetryConfig":
        """Preset for conservative retry (fewer attempts, shorter delays)."""
        return cls(
            max_attempts=3,
            base_delay=0.5,
            max_delay=10.0,
        )

    @classmethod
    def no_retry(cls) -> "RetryConfig":
        """Preset for no retry (single attempt only)."""
        return cls(max_attempts=1)

    @classmethod
    def forever(cls) -> "RetryConfig":
        """Preset that retries until success or cancellation."""
        return cls(max_attempts=None)
