"""Tests for FlowSettings and configure."""

import pytest
from pydantic import ValidationError

from promiseflow import FlowSettings, Promise, configure, extend, get_settings, promise_type
from fakes import TaskPromise


@pytest.fixture
def restore_settings():
    saved = get_settings()
    yield
    configure(promise_type=saved.promise_type)


def test_default_settings_use_extended_promise() -> None:
    assert FlowSettings().promise_type is Promise


def test_settings_reject_type_without_capabilities() -> None:
    class NotAPromise:
        def then(self, on_fulfilled=None, on_rejected=None):
            return self

    with pytest.raises(ValidationError, match="missing resolve"):
        FlowSettings(promise_type=NotAPromise)


def test_settings_reject_non_type() -> None:
    with pytest.raises(ValidationError):
        FlowSettings(promise_type=42)


def test_settings_reject_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        FlowSettings(promise_factory=Promise)


def test_settings_are_frozen() -> None:
    settings = FlowSettings()
    with pytest.raises(ValidationError):
        settings.promise_type = None


@pytest.mark.usefixtures("restore_settings")
def test_configure_extends_promise_type() -> None:
    settings = configure(promise_type=TaskPromise)
    assert settings is get_settings()
    assert settings.promise_type is extend(TaskPromise)
    assert promise_type() is extend(TaskPromise)


@pytest.mark.usefixtures("restore_settings")
def test_configure_keeps_current_values() -> None:
    configure(promise_type=TaskPromise)
    assert configure().promise_type is extend(TaskPromise)
