"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for the live browser scenarios.

Key Features:
- One browser + session per test (scenarios never share a session)
- Guaranteed session release, including on assertion failure
- Screenshot capture on failure

================================================================================
"""

import os
from typing import Generator

import pytest
from loguru import logger

from login_regression.ui_testing.framework.browser_manager import (
    BrowserManager,
    session_scope,
)
from login_regression.ui_testing.framework.config_loader import ConfigLoader, HarnessSettings
from login_regression.ui_testing.framework.outcomes import Credentials
from login_regression.ui_testing.framework.session import AutomationSession
from login_regression.ui_testing.pages.login_page import LoginPage


# ================================================================================
# Settings and Session Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def settings() -> HarnessSettings:
    """Harness settings from config/config.yaml and the environment."""
    return ConfigLoader().settings()


@pytest.fixture(scope="function")
def session(settings: HarnessSettings) -> Generator[AutomationSession, None, None]:
    """
    Function-scoped automation session.

    Acquired through ``session_scope`` so the browser is released on every
    exit path.
    """
    with session_scope(BrowserManager.from_settings(settings)) as session:
        yield session


@pytest.fixture
def login_page(session: AutomationSession, settings: HarnessSettings) -> LoginPage:
    """Provides LoginPage bound to this test's session."""
    return LoginPage(session, settings)


# ================================================================================
# Test Data
# ================================================================================

@pytest.fixture
def test_data():
    """Common credentials for the login scenarios."""
    username = os.getenv("UI_USERNAME", "testuser@example.com")
    return {
        "valid_user": Credentials(username, os.getenv("UI_PASSWORD", "ValidPass123!")),
        "invalid_user": Credentials(username, "WrongPassword"),
    }


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Attach a screenshot and the current URL to Allure when a UI test fails."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = item.funcargs.get("login_page") if hasattr(item, "funcargs") else None
        if page is None and hasattr(item, "funcargs") and "session" in item.funcargs:
            page = LoginPage(item.funcargs["session"], item.funcargs.get("settings"))
        if page is not None:
            logger.info(f"Capturing failure details for {item.name}")
            page.capture_failure(item.name)
