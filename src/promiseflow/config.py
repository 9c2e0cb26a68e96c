"""Settings - which promise implementation chains start from."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from promiseflow.extension import extend
from promiseflow.kernel.errors import NoPromiseImplementationError
from promiseflow.kernel.ports import PromiseType
from promiseflow.kernel.promise import Promise

logger = logging.getLogger(__name__)

_REQUIRED_CAPABILITIES = ("then", "resolve")


class FlowSettings(BaseModel):
    """Library settings.

    Attributes:
        promise_type: Promise class used by `start()` and the `Flow`
            namespace. None leaves the library without an implementation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    promise_type: type | None = Field(default_factory=lambda: extend(Promise))

    @field_validator("promise_type")
    @classmethod
    def check_capabilities(cls, v: type | None) -> type | None:
        """Promise classes must offer `then` and a `resolve` constructor."""
        if v is None:
            return v
        missing = [name for name in _REQUIRED_CAPABILITIES if not callable(getattr(v, name, None))]
        if missing:
            raise ValueError(f"{v.__qualname__} is missing {', '.join(missing)}")
        return v


_settings = FlowSettings()


def get_settings() -> FlowSettings:
    """Get the active settings."""
    return _settings


def configure(**overrides: Any) -> FlowSettings:
    """Replace the active settings.

    A configured promise class is extended with the combinators first.

    Raises:
        pydantic.ValidationError: If an override is invalid.
    """
    global _settings
    values = {"promise_type": _settings.promise_type, **overrides}
    promise_cls = values["promise_type"]
    if isinstance(promise_cls, type) and callable(getattr(promise_cls, "then", None)):
        values["promise_type"] = extend(promise_cls)
    _settings = FlowSettings(**values)
    logger.debug("Configured promise implementation: %r", _settings.promise_type)
    return _settings


def promise_type() -> PromiseType:
    """Get the configured promise class.

    Raises:
        NoPromiseImplementationError: If none is configured.
    """
    cls = _settings.promise_type
    if cls is None:
        raise NoPromiseImplementationError(
            "No promise implementation configured. Use `Flow.use(MyPromise)` or `configure(promise_type=...)`."
        )
    return cls  # type: ignore[return-value]
