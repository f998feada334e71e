"""Fixtures for the offline unit suite (fake clock + in-memory login form)."""

from typing import Callable, List

import pytest
from allure_commons import hookimpl, plugin_manager
from loguru import logger

from login_regression.ui_testing.framework.config_loader import ConfigLoader, HarnessSettings
from login_regression.unit.fakes import FakeClock, FakeLoginSession


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings() -> HarnessSettings:
    return HarnessSettings(
        base_url="http://app.test",
        precondition_timeout=10.0,
        result_timeout=5.0,
        poll_interval=0.25,
    )


@pytest.fixture
def make_session(clock: FakeClock) -> Callable[..., FakeLoginSession]:
    """Factory for FakeLoginSession bound to the shared fake clock."""
    def _make(**options) -> FakeLoginSession:
        return FakeLoginSession(clock, base_url="http://app.test", **options)
    return _make


@pytest.fixture
def log_messages() -> List[str]:
    """Every loguru message emitted during the test, DEBUG and up."""
    messages: List[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def fresh_config():
    """Reset the ConfigLoader singleton around a test."""
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()


class _StepRecorder:
    """allure_commons plugin that keeps (title, params) of every started step."""

    def __init__(self):
        self.steps = []

    @hookimpl
    def start_step(self, uuid, title, params):
        self.steps.append((title, dict(params or {})))


@pytest.fixture
def allure_steps():
    """Every allure step opened during the test, as (title, params) pairs."""
    recorder = _StepRecorder()
    plugin_manager.register(recorder)
    yield recorder.steps
    plugin_manager.unregister(recorder)
