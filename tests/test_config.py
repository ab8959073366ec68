"""Tests for retry configuration and decorators - behavior focused."""

import pytest

from retryloop import (
    AsyncCancelableMultiplicativeBackoff,
    AsyncCancelableSleep,
    AsyncCancelToken,
    AsyncMultiplicativeBackoff,
    AsyncSleep,
    BackoffStrategy,
    CancelableLimiter,
    CancelableMultiplicativeBackoff,
    CancelableSleep,
    CancelToken,
    ConfigurationError,
    Forever,
    MaxAttempts,
    MultiplicativeBackoff,
    RetryConfig,
    Sleep,
    async_with_retry,
    with_retry,
)

FAST = RetryConfig(max_attempts=3, base_delay=0.0, strategy=BackoffStrategy.CONSTANT)


class TestRetryConfig:
    """Test RetryConfig behavior."""

    def test_defaults(self):
        """Default config bounds attempts and backs off multiplicatively."""
        config = RetryConfig()

        assert config.max_attempts == 5
        assert config.strategy == BackoffStrategy.MULTIPLICATIVE

    def test_strategy_accepts_string(self):
        """Strategy may be given by its string value."""
        config = RetryConfig(strategy="constant")

        assert config.strategy is BackoffStrategy.CONSTANT

    @pytest.mark.parametrize("field", ["base_delay", "max_delay"])
    def test_rejects_negative_delays(self, field):
        """Negative delays raise ConfigurationError naming the field."""
        with pytest.raises(ConfigurationError) as excinfo:
            RetryConfig(**{field: -1.0})

        assert excinfo.value.field == field

    def test_aggressive_preset_has_more_attempts(self):
        """Aggressive preset should have more attempts than default."""
        assert RetryConfig.aggressive().max_attempts > RetryConfig().max_attempts

    def test_conservative_preset_has_fewer_attempts(self):
        """Conservative preset should have fewer attempts than default."""
        assert RetryConfig.conservative().max_attempts < RetryConfig().max_attempts

    def test_no_retry_preset_is_single_attempt(self):
        """No retry preset allows exactly one attempt."""
        assert RetryConfig.no_retry().max_attempts == 1

    def test_forever_preset_is_unbounded(self):
        """Forever preset has no attempt bound."""
        assert RetryConfig.forever().max_attempts is None


class TestPolicyFactories:
    """Test limiter and timer construction from config."""

    def test_bounded_limiter(self):
        """max_attempts builds a MaxAttempts limiter."""
        limiter = RetryConfig(max_attempts=4).build_limiter()

        assert isinstance(limiter, MaxAttempts)
        assert limiter.max_attempts == 4

    def test_unbounded_limiter(self):
        """max_attempts=None builds Forever."""
        assert isinstance(RetryConfig.forever().build_limiter(), Forever)

    def test_signal_makes_limiter_cancelable(self):
        """A signal wraps the limiter in CancelableLimiter."""
        limiter = RetryConfig().build_limiter(CancelToken())

        assert isinstance(limiter, CancelableLimiter)
        assert isinstance(limiter.limiter, MaxAttempts)

    def test_builds_fresh_instances(self):
        """Every build returns independent policies."""
        config = RetryConfig()

        assert config.build_limiter() is not config.build_limiter()
        assert config.build_timer() is not config.build_timer()

    @pytest.mark.parametrize(
        "strategy,cancelable,expected",
        [
            (BackoffStrategy.CONSTANT, False, Sleep),
            (BackoffStrategy.CONSTANT, True, CancelableSleep),
            (BackoffStrategy.MULTIPLICATIVE, False, MultiplicativeBackoff),
            (BackoffStrategy.MULTIPLICATIVE, True, CancelableMultiplicativeBackoff),
        ],
    )
    def test_build_timer(self, strategy, cancelable, expected):
        """Timer type follows strategy and cancelability."""
        signal = CancelToken() if cancelable else None

        timer = RetryConfig(strategy=strategy).build_timer(signal)

        assert type(timer) is expected

    @pytest.mark.parametrize(
        "strategy,cancelable,expected",
        [
            (BackoffStrategy.CONSTANT, False, AsyncSleep),
            (BackoffStrategy.CONSTANT, True, AsyncCancelableSleep),
            (BackoffStrategy.MULTIPLICATIVE, False, AsyncMultiplicativeBackoff),
            (BackoffStrategy.MULTIPLICATIVE, True, AsyncCancelableMultiplicativeBackoff),
        ],
    )
    def test_build_async_timer(self, strategy, cancelable, expected):
        """Async timer type follows strategy and cancelability."""
        signal = AsyncCancelToken() if cancelable else None

        timer = RetryConfig(strategy=strategy).build_async_timer(signal)

        assert type(timer) is expected

    def test_backoff_uses_delays(self):
        """Multiplicative timer is built from base_delay and max_delay."""
        timer = RetryConfig(base_delay=0.5, max_delay=8.0).build_timer()

        assert timer.base == 0.5
        assert timer.ceiling == 8.0


class TestWithRetry:
    """Test the synchronous decorator."""

    def test_retries_until_success(self):
        """Given two failures then success, returns the result."""
        calls = {"count": 0}

        @with_retry(FAST)
        def flaky(value):
            calls["count"] += 1
            if calls["count"] < 3:
                raise ConnectionError("temporary")
            return value * 2

        assert flaky(21) == 42
        assert calls["count"] == 3

    def test_raises_last_error_when_exhausted(self):
        """After max_attempts the last error propagates."""
        calls = {"count": 0}

        @with_retry(FAST)
        def broken():
            calls["count"] += 1
            raise ValueError(f"attempt {calls['count']}")

        with pytest.raises(ValueError, match="attempt 3"):
            broken()

    def test_each_call_gets_fresh_policies(self):
        """Attempt budgets are not shared between calls."""
        calls = {"count": 0}

        @with_retry(FAST)
        def broken():
            calls["count"] += 1
            raise RuntimeError("nope")

        for _ in range(2):
            with pytest.raises(RuntimeError):
                broken()

        assert calls["count"] == 6

    def test_canceled_signal_prevents_retries(self):
        """A canceled signal limits the call to its first attempt."""
        token = CancelToken()
        token.cancel()
        calls = {"count": 0}

        @with_retry(RetryConfig.forever(), signal=token)
        def broken():
            calls["count"] += 1
            raise RuntimeError("nope")

        with pytest.raises(RuntimeError):
            broken()

        assert calls["count"] == 1

    def test_on_retry_callback(self):
        """on_retry receives attempt numbers and errors."""
        seen = []

        @with_retry(FAST, on_retry=lambda attempt, error: seen.append(attempt))
        def broken():
            raise RuntimeError("nope")

        with pytest.raises(RuntimeError):
            broken()

        assert seen == [1, 2]

    def test_preserves_function_metadata(self):
        """The wrapper keeps the wrapped function's name and docstring."""

        @with_retry()
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."


class TestAsyncWithRetry:
    """Test the async decorator."""

    @pytest.mark.asyncio
    async def test_retries_until_success(self):
        """Given one failure then success, returns the result."""
        calls = {"count": 0}

        @async_with_retry(FAST)
        async def flaky(prefix):
            calls["count"] += 1
            if calls["count"] < 2:
                raise TimeoutError("slow")
            return f"{prefix}-ok"

        assert await flaky("run") == "run-ok"
        assert calls["count"] == 2

    @pytest.mark.asyncio
    async def test_raises_last_error_when_exhausted(self):
        """After max_attempts the last error propagates."""
        calls = {"count": 0}

        @async_with_retry(FAST)
        async def broken():
            calls["count"] += 1
            raise RuntimeError("nope")

        with pytest.raises(RuntimeError):
            await broken()

        assert calls["count"] == 3

    @pytest.mark.asyncio
    async def test_canceled_signal_prevents_retries(self):
        """A canceled asyncio token stops after the first attempt."""
        token = AsyncCancelToken()
        token.cancel()
        calls = {"count": 0}

        @async_with_retry(RetryConfig.forever(), signal=token)
        async def broken():
            calls["count"] += 1
            raise RuntimeError("nope")

        with pytest.raises(RuntimeError):
            await broken()

        assert calls["count"] == 1
