"""Promise extensions - attach the combinators to a promise class."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, TypeVar

from promiseflow.combinators.ops import then_if, then_ignore, then_while
from promiseflow.kernel.errors import ArgumentError

P = TypeVar("P", bound=type)

logger = logging.getLogger(__name__)

# Operations copied onto every extended promise class
OPERATIONS: Mapping[str, Callable[..., Any]] = MappingProxyType({
    "then_ignore": then_ignore,
    "then_if": then_if,
    "then_while": then_while,
})

# Extended subclasses keyed by their base class
_extended: dict[type, type] = {}


def _as_method(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Bind a combinator so the instance is passed as the receiver."""

    @functools.wraps(fn)
    def method(self: Any, *args: Any) -> Any:
        return fn(self, *args)

    return method


def is_extended(promise_type: type) -> bool:
    """Whether promise_type already exposes every combinator as a method."""
    return all(callable(getattr(promise_type, name, None)) for name in OPERATIONS)


def extend(promise_type: P) -> P:
    """Return a subclass of promise_type carrying the combinator methods.

    The given class is never modified. Chains keep the methods only as far
    as the class's `then` returns instances of the subclass, which holds for
    `promiseflow.kernel.Promise`.

    Args:
        promise_type: A class whose instances have a `then` method.

    Returns:
        The extended subclass; promise_type itself if it is already extended.

    Raises:
        ArgumentError: If promise_type is not a class with a `then` method.

    Example:
        >>> from promiseflow.kernel import Promise
        >>> Flowing = extend(Promise)
        >>> Flowing.resolve(1).then_if(lambda v: v > 0, notify)
    """
    if not isinstance(promise_type, type):
        raise ArgumentError("#extend requires a promise class.", "extend")
    if not callable(getattr(promise_type, "then", None)):
        raise ArgumentError("#extend requires a class whose instances have a then method.", "extend")
    if is_extended(promise_type):
        return promise_type

    extended = _extended.get(promise_type)
    if extended is None:
        namespace: dict[str, Any] = {name: _as_method(fn) for name, fn in OPERATIONS.items()}
        namespace["__doc__"] = promise_type.__doc__
        extended = type(promise_type.__name__, (promise_type,), namespace)
        _extended[promise_type] = extended
        logger.debug("Extended %s with %s", promise_type.__qualname__, ", ".join(OPERATIONS))
    return extended  # type: ignore[return-value]
