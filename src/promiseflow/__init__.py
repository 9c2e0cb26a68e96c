import logging

from .combinators import then_if, then_ignore, then_while
from .config import FlowSettings, configure, get_settings, promise_type
from .extension import OPERATIONS, extend, is_extended
from .kernel import (
    ArgumentError,
    NoPromiseImplementationError,
    FlowError,
    PromiseType,
    Thenable,
)
from .kernel import Promise as _KernelPromise
from .namespace import Flow, start

logging.getLogger(__name__).addHandler(logging.NullHandler())

Promise = extend(_KernelPromise)

__all__ = [
    # Combinators
    "then_ignore",
    "then_if",
    "then_while",
    # Promise
    "Promise",
    "Thenable",
    "PromiseType",
    # Extension
    "OPERATIONS",
    "extend",
    "is_extended",
    # Entry points
    "Flow",
    "start",
    # Settings
    "FlowSettings",
    "configure",
    "get_settings",
    "promise_type",
    # Errors
    "FlowError",
    "ArgumentError",
    "NoPromiseImplementationError",
]
