"""Combinator primitives: then_ignore, then_if, then_while."""

# Combinators satisfy the following laws (p fulfils with v):
#
# 1. Carry: then_ignore(p, f) fulfils with v whatever f returns
#    The callback's value is awaited, then discarded
#
# 2. Skip: then_if(p, lambda _: False, f) == then_ignore(p, lambda _: None)
#    A false condition never calls f
#
# 3. Branch: then_if(p, lambda _: True, f) == then_ignore(p, f)
#    A true condition is a plain side-step
#
# 4. Unfold: then_while(p, c, f) == then_if(p, c, lambda _: then_while(then_ignore(p, f), c, f))
#    The condition is re-evaluated against v, never against f's result
#
# 5. Short-circuit: a failure in c or f rejects the whole chain with that failure


from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from promiseflow.kernel.errors import ArgumentError
from promiseflow.kernel.ports import Thenable

T = TypeVar("T")

logger = logging.getLogger(__name__)

Condition = Callable[[Any], bool]
Callback = Callable[[Any], Any]


def _require_callables(operation: str, args: Sequence[Any], count: int, message: str) -> None:
    """Raise ArgumentError unless args holds exactly count callables."""
    if len(args) != count:
        raise ArgumentError(f"#{operation} {message}", operation)
    for arg in args:
        if not callable(arg):
            raise ArgumentError(f"#{operation} {message}", operation)


def then_ignore(promise: Thenable[T], *callbacks: Callback) -> Thenable[T]:
    """Run a side-step and carry the receiver's value past it.

    Semantics:
        - Record the receiver's value once it fulfils
        - Call the callback with that value and await its result
        - Discard the callback's result and fulfil with the recorded value
        - A raising callback or failing awaitable rejects the result

    Args:
        promise: The receiver.
        callbacks: Exactly one callable, the side-step.

    Returns:
        Thenable[T]: Fulfils with the receiver's value.

    Raises:
        ArgumentError: Synchronously, unless given exactly one callable.
    """
    _require_callables("then_ignore", callbacks, 1, "requires exactly one argument of type function.")
    (callback,) = callbacks

    carry: Any = None

    def run_callback(value: T) -> Any:
        nonlocal carry
        carry = value
        return callback(value)

    def restore(_: Any) -> T:
        return carry

    return promise.then(run_callback).then(restore)


def then_if(promise: Thenable[T], *callbacks: Callable[[Any], Any]) -> Thenable[T]:
    """Conditionally run a side-step, carrying the receiver's value.

    The condition is synchronous and receives the receiver's value. When it
    is truthy the callback runs and holds up the chain until it settles;
    either way the result fulfils with the receiver's value.

    Example:
        >>> then_if(get_user(), lambda user: user.age > 18, make_adult)
        # fulfils with the user from get_user()

    Args:
        promise: The receiver.
        callbacks: The condition and the callback, in that order.

    Raises:
        ArgumentError: Synchronously, unless given exactly two callables.
    """
    _require_callables(
        "then_if", callbacks, 2,
        "requires one callback for the condition and another for the callback.",
    )
    condition, callback = callbacks

    def branch(value: T) -> Any:
        if condition(value):
            logger.debug("then_if condition held, running callback")
            return callback(value)
        logger.debug("then_if condition failed, skipping callback")
        return None

    return then_ignore(promise, branch)


def then_while(promise: Thenable[T], *callbacks: Callable[[Any], Any]) -> Thenable[T]:
    """Run a side-step repeatedly while a condition holds.

    The condition is evaluated against the receiver's value on every
    iteration, not against the callback's result, so the loop only advances
    when the callback mutates the receiver or state it closes over. Each
    iteration is one more promise hop; there is no iteration limit.

    Example:
        >>> pages = []
        >>> def body(value):
        ...     pages.append(value)
        ...     return fetch_more()
        >>> then_while(p, lambda _: len(pages) < 10, body)

    Raises:
        ArgumentError: Synchronously, unless given exactly two callables.
    """
    _require_callables(
        "then_while", callbacks, 2,
        "requires one callback for the condition and another for the callback.",
    )
    condition, callback = callbacks

    def iterate(_: T) -> Thenable[T]:
        logger.debug("then_while iterating")
        return then_while(then_ignore(promise, callback), condition, callback)

    return then_if(promise, condition, iterate)
