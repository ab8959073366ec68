"""
Base exception classes for the retry loop.

The loop itself never raises these for a failed operation: the operation's
own exception is re-raised unchanged. These cover misconfiguration and the
errors associated with cancellation tokens.
"""


class RetryLoopError(Exception):
    """Base exception for all retryloop errors."""

    def __init__(self, message: str = "Retry loop error"):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigurationError(RetryLoopError, ValueError):
    """Raised when a policy or config is built with invalid values."""

    def __init__(self, message: str = "Invalid configuration", *, field: str | None = None):
        super().__init__(message)
        self.field = field

    def __str__(self) -> str:
        if self.field:
            return f"{self.message} (field: {self.field})"
        return self.message


class Canceled(RetryLoopError):
    """Error associated with a token that was canceled explicitly."""

    def __init__(self, message: str = "Operation canceled"):
        super().__init__(message)


class DeadlineExceeded(Canceled):
    """Error associated with a token whose deadline passed."""

    def __init__(self, message: str = "Deadline exceeded", *, deadline: float | None = None):
        super().__init__(message)
        self.deadline = deadline

    def __str__(self) -> str:
        if self.deadline is not None:
            return f"{self.message} (after {self.deadline:g}s)"
        return self.message
