"""Kernel layer - promise primitive, ports and errors."""

from promiseflow.kernel.errors import ArgumentError, NoPromiseImplementationError, FlowError
from promiseflow.kernel.ports import PromiseType, Thenable
from promiseflow.kernel.promise import Executor, Promise, Reject, Resolve

__all__ = [
    "Promise",
    "Executor",
    "Resolve",
    "Reject",
    # Ports
    "Thenable",
    "PromiseType",
    # Errors
    "FlowError",
    "ArgumentError",
    "NoPromiseImplementationError",
]
