"""
Concrete cancellation tokens.

A token is owned and driven by the caller (signal handlers, deadlines,
shutdown hooks); the retry loop only observes it.
"""

import asyncio
import logging
import threading

from ..exceptions import Canceled, ConfigurationError, DeadlineExceeded

logger = logging.getLogger(__name__)


class CancelToken:
    """
    Thread-safe cancellation token backed by `threading.Event`.

    Implements `CancellationSignal`. The first call to `cancel` wins and
    fixes the associated error; later calls are no-ops.
    """

    def __init__(self):
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._error: BaseException | None = None
        self._deadline_timer: threading.Timer | None = None

    @classmethod
    def after(cls, seconds: float) -> "CancelToken":
        """
        Create a token that cancels itself once `seconds` have elapsed.

        The associated error is `DeadlineExceeded`. Call `close()` (or use
        the token as a context manager) to stop the pending deadline timer.
        """
        if seconds < 0:
            raise ConfigurationError(f"Deadline must be non-negative, got {seconds}", field="seconds")
        token = cls()
        timer = threading.Timer(seconds, token.cancel, args=(DeadlineExceeded(deadline=seconds),))
        timer.daemon = True
        token._deadline_timer = timer
        timer.start()
        return token

    def cancel(self, error: BaseException | None = None) -> bool:
        """
        Cancel the token.

        Args:
            error: Error associated with the cancellation (default: Canceled())

        Returns:
            True if this call canceled the token, False if it already was
        """
        with self._lock:
            if self._event.is_set():
                return False
            self._error = error if error is not None else Canceled()
            self._event.set()
        logger.debug(f"Cancel token canceled: {self._error}")
        return True

    def is_canceled(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        return self._event.wait(timeout)

    @property
    def error(self) -> BaseException | None:
        """Error associated with the cancellation, or None while active."""
        return self._error

    def raise_if_canceled(self) -> None:
        """Raise the associated error if the token has been canceled."""
        if self._event.is_set():
            raise self._error

    def close(self) -> None:
        """Stop a pending deadline timer. Does not cancel the token."""
        if self._deadline_timer is not None:
            self._deadline_timer.cancel()
            self._deadline_timer = None

    def __enter__(self) -> "CancelToken":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "canceled" if self.is_canceled() else "active"
        return f"<CancelToken {state}>"


class AsyncCancelToken:
    """
    Cancellation token for asyncio code, backed by `asyncio.Event`.

    Implements `AsyncCancellationSignal`. Not thread-safe: cancel it from
    the event loop that awaits it (use `loop.call_soon_threadsafe` from
    other threads).
    """

    def __init__(self):
        self._event = asyncio.Event()
        self._error: BaseException | None = None

    def cancel(self, error: BaseException | None = None) -> bool:
        """Cancel the token. Returns False if it was already canceled."""
        if self._event.is_set():
            return False
        self._error = error if error is not None else Canceled()
        self._event.set()
        logger.debug(f"Async cancel token canceled: {self._error}")
        return True

    def is_canceled(self) -> bool:
        return self._event.is_set()

    async def wait(self) -> None:
        await self._event.wait()

    @property
    def error(self) -> BaseException | None:
        return self._error

    def raise_if_canceled(self) -> None:
        if self._event.is_set():
            raise self._error

    def __repr__(self) -> str:
        state = "canceled" if self.is_canceled() else "active"
        return f"<AsyncCancelToken {state}>"
