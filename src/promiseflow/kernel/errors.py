"""Error types raised by promiseflow."""

from __future__ import annotations


class FlowError(Exception):
    """Base class for errors raised by promiseflow itself.

    Failures raised by user callbacks are never wrapped in a FlowError;
    they travel through the promise's rejection channel unchanged.
    """


class ArgumentError(FlowError, TypeError):
    """Raised synchronously when a combinator receives bad arguments.

    This error preserves the operation name so callers can tell which
    link of a chain was built incorrectly.
    """

    def __init__(self, message: str, operation: str) -> None:
        self.operation = operation
        super().__init__(message)

    def __repr__(self) -> str:
        return f"ArgumentError({super().__repr__()}, operation={self.operation!r})"


class NoPromiseImplementationError(FlowError, RuntimeError):
    """Raised when a chain is started but no promise type is configured."""
