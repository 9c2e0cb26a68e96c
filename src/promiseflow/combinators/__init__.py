"""Combinators - conditional and looping composition over promises."""

from .ops import Callback, Condition, then_if, then_ignore, then_while

__all__ = [
    "then_ignore",
    "then_if",
    "then_while",
    "Callback",
    "Condition",
]
