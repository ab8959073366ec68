"""Shared fixtures and helpers for retryloop tests."""

import pytest


class FlakyOperation:
    """
    Operation that fails a given number of times before succeeding.

    failures=None fails forever. Every raised error is kept in `errors` and
    every call is appended to `log` when one is given.
    """

    def __init__(self, failures: int | None, result: str = "ok", log: list | None = None):
        self.failures = failures
        self.result = result
        self.log = log
        self.calls = 0
        self.errors: list[Exception] = []

    def _attempt(self) -> str:
        self.calls += 1
        if self.log is not None:
            self.log.append("attempt")
        if self.failures is None or self.calls <= self.failures:
            error = RuntimeError(f"failure {self.calls}")
            self.errors.append(error)
            raise error
        return self.result

    def __call__(self) -> str:
        return self._attempt()


class AsyncFlakyOperation(FlakyOperation):
    """Async variant of FlakyOperation."""

    async def __call__(self) -> str:
        return self._attempt()


@pytest.fixture
def always_failing():
    return FlakyOperation(failures=None)


@pytest.fixture
def no_sleep():
    """Injectable sleep that records requested delays instead of sleeping."""
    delays: list[float] = []

    def sleep(seconds: float) -> None:
        delays.append(seconds)

    sleep.delays = delays
    return sleep
