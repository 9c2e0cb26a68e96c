"""Promise - default single-value promise implementation over asyncio."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Generator
from typing import Any, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")

Resolve = Callable[[Any], None]
Reject = Callable[[Exception], None]
Executor = Callable[[Resolve, Reject], None]


class Promise(Generic[T]):
    """Awaitable promise with `then`/`catch` continuations.

    Scheduling and settlement are delegated to the running asyncio loop:
    every promise wraps an `asyncio.Future`, and every continuation runs in
    its own task. A promise settles exactly once.

    Continuations may return plain values or awaitables. An `Exception`
    raised inside a continuation rejects the promise returned by `then`;
    `BaseException` (cancellation, interrupts) is never converted.

    Note: constructing a promise requires a running event loop.
    """

    _future: asyncio.Future[T]
    _locked: bool

    def __init__(self, executor: Executor) -> None:
        """Create a promise and run `executor(resolve, reject)` synchronously.

        Args:
            executor: Function receiving the resolve and reject callables.
                An exception raised by the executor rejects the promise.
        """
        self._future = asyncio.get_running_loop().create_future()
        self._locked = False
        try:
            executor(self._fulfill, self._reject)
        except Exception as exc:
            self._reject(exc)

    def _fulfill(self, value: Any) -> None:
        if self._locked:
            return
        self._locked = True
        if inspect.isawaitable(value):
            # Adopt the outcome of the awaitable instead of nesting it
            asyncio.ensure_future(value).add_done_callback(self._adopt)
            return
        self._future.set_result(value)

    def _reject(self, error: Exception) -> None:
        if self._locked:
            return
        self._locked = True
        self._future.set_exception(error)

    def _adopt(self, source: asyncio.Future[Any]) -> None:
        if self._future.done():
            return
        if source.cancelled():
            self._future.cancel()
            return
        error = source.exception()
        if error is not None:
            self._future.set_exception(error)
        else:
            self._future.set_result(source.result())

    @classmethod
    def _from_coroutine(cls, coro: Awaitable[R]) -> Promise[R]:
        """Create a promise of this class settled by a coroutine."""
        promise = cls.__new__(cls)
        promise._future = asyncio.get_running_loop().create_task(coro)  # type: ignore[arg-type]
        promise._locked = True
        return promise  # type: ignore[return-value]

    @classmethod
    def resolve(cls, value: R = None) -> Promise[R]:  # type: ignore[assignment]
        """Create a promise fulfilled with value (or adopting it if awaitable)."""
        return cls(lambda resolve, _: resolve(value))  # type: ignore[return-value]

    @classmethod
    def reject(cls, error: Exception) -> Promise[Any]:
        """Create a promise rejected with error."""
        return cls(lambda _, reject: reject(error))

    def then(
        self,
        on_fulfilled: Callable[[T], Any] | None = None,
        on_rejected: Callable[[Exception], Any] | None = None,
    ) -> Promise[Any]:
        """Chain continuations onto this promise.

        Args:
            on_fulfilled: Called with the value when this promise fulfils.
                Omitted means the value passes through unchanged.
            on_rejected: Called with the error when this promise rejects.
                Omitted means the rejection passes through unchanged.

        Returns:
            New promise of the same class, settled with the continuation's
            (unwrapped) result or failure.
        """
        return type(self)._from_coroutine(self._continue(on_fulfilled, on_rejected))

    def catch(self, on_rejected: Callable[[Exception], Any]) -> Promise[Any]:
        """Recover from a rejection with on_rejected."""
        return self.then(None, on_rejected)

    async def _continue(
        self,
        on_fulfilled: Callable[[T], Any] | None,
        on_rejected: Callable[[Exception], Any] | None,
    ) -> Any:
        try:
            value = await self._future
        except Exception as exc:
            if on_rejected is None:
                raise
            result = on_rejected(exc)
        else:
            if on_fulfilled is None:
                return value
            result = on_fulfilled(value)
        if inspect.isawaitable(result):
            return await result
        return result

    def done(self) -> bool:
        """Whether the promise has settled."""
        return self._future.done()

    def __await__(self) -> Generator[Any, None, T]:
        return self._future.__await__()

    def __repr__(self) -> str:
        if not self._future.done():
            state = "pending"
        elif self._future.cancelled():
            state = "cancelled"
        elif self._future.exception() is not None:
            state = f"rejected {self._future.exception()!r}"
        else:
            state = f"fulfilled {self._future.result()!r}"
        return f"<{type(self).__name__} {state}>"
