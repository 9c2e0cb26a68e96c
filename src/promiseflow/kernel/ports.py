"""Port protocols for promiseflow - the promise capability combinators rely on."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T", covariant=True)


@runtime_checkable
class Thenable(Protocol[T]):
    """Single-value asynchronous result with continuation support.

    Continuations may return a plain value or an awaitable; the returned
    thenable settles with the unwrapped result. An exception raised inside a
    continuation rejects the returned thenable.
    """

    def then(
        self,
        on_fulfilled: Callable[[Any], Any] | None = None,
        on_rejected: Callable[[Exception], Any] | None = None,
    ) -> Thenable[Any]:
        """Attach success and/or failure continuations."""
        ...


class PromiseType(Protocol):
    """Promise implementation: a class producing thenables."""

    def __call__(self, executor: Callable[[Callable[[Any], None], Callable[[Exception], None]], None]) -> Thenable[Any]: ...

    def resolve(self, value: Any = None) -> Thenable[Any]: ...

    def reject(self, error: Exception) -> Thenable[Any]: ...
