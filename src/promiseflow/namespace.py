"""Chain entry points that start from an already-resolved promise."""

from __future__ import annotations

from typing import Any

from promiseflow.config import configure, promise_type


def start(value: Any = None) -> Any:
    """Create a promise of the configured class fulfilled with value.

    The returned promise passes value through unchanged, so any combinator
    can be chained straight onto it.

    Raises:
        NoPromiseImplementationError: If no promise class is configured.
    """
    return promise_type().resolve(value)


class Flow:
    """Namespace for starting chains without a receiver.

    Each entry point forwards its arguments onto `start()`:

        Flow.then_if(lambda _: ready(), warm_cache).then(serve)

    The class only holds static entry points and cannot be instantiated.
    """

    def __new__(cls, *args: Any, **kwargs: Any) -> Flow:
        raise TypeError("There is no need to instantiate Flow directly.")

    @staticmethod
    def use(promise_cls: type) -> type:
        """Make promise_cls the implementation chains start from.

        Returns:
            promise_cls extended with the combinators.
        """
        return configure(promise_type=promise_cls).promise_type  # type: ignore[return-value]

    @staticmethod
    def then(*args: Any) -> Any:
        return start().then(*args)

    @staticmethod
    def then_ignore(*args: Any) -> Any:
        return start().then_ignore(*args)

    @staticmethod
    def then_if(*args: Any) -> Any:
        return start().then_if(*args)

    @staticmethod
    def then_while(*args: Any) -> Any:
        return start().then_while(*args)
