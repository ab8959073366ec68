"""
Cancellation signal protocols.

Limiters only need the non-blocking check; cancelable timers also need a
wait that returns as soon as cancellation occurs.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CancellationSignal(Protocol):
    """Signal observed by limiters and blocking timers."""

    def is_canceled(self) -> bool:
        """Return True once cancellation has occurred. Never blocks."""
        ...

    def wait(self, timeout: float | None = None) -> bool:
        """
        Block until cancellation or until `timeout` seconds have elapsed.

        Returns immediately if already canceled.

        Returns:
            True if cancellation occurred, False on timeout
        """
        ...


@runtime_checkable
class AsyncCancellationSignal(Protocol):
    """Signal observed by limiters and asyncio timers."""

    def is_canceled(self) -> bool:
        """Return True once cancellation has occurred. Never blocks."""
        ...

    async def wait(self) -> None:
        """Suspend until cancellation. Returns immediately if already canceled."""
        ...
