"""
================================================================================
Login Scenarios
================================================================================

End-to-end login cases, runnable from pytest or programmatically.

Each scenario receives the session it drives, builds its own LoginPage,
runs the workflow and asserts the observable result. Session ownership
stays with the caller; ``run_scenario`` acquires and releases one session
around a single scenario.

    - valid_login:       valid credentials -> welcome message
    - invalid_password:  wrong secret      -> error message
    - empty_submission:  empty form        -> still on /login

================================================================================
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

import allure
from loguru import logger

from login_regression.ui_testing.framework.assertions import (
    assert_contains,
    assert_outcome,
)
from login_regression.ui_testing.framework.browser_manager import with_session
from login_regression.ui_testing.framework.config_loader import HarnessSettings
from login_regression.ui_testing.framework.outcomes import (
    Credentials,
    Failed,
    LoginOutcome,
    Succeeded,
)
from login_regression.ui_testing.framework.session import AutomationSession
from login_regression.ui_testing.pages.login_page import LoginPage


T = TypeVar("T")

EXPECTED_WELCOME = "Welcome back"
EXPECTED_INVALID_CREDENTIALS = "Invalid email or password"


def valid_login(
    session: AutomationSession,
    settings: HarnessSettings,
    credentials: Credentials,
    expected_welcome: str = EXPECTED_WELCOME,
) -> LoginOutcome:
    """Valid credentials must produce the welcome message."""
    login_page = LoginPage(session, settings).open()

    with allure.step("Login with valid credentials"):
        login_page.login_with(credentials)

    with allure.step("Verify welcome message"):
        outcome = login_page.classify_login_result()
        assert_outcome(outcome, Succeeded, expected_welcome)
    return outcome


def invalid_password(
    session: AutomationSession,
    settings: HarnessSettings,
    credentials: Credentials,
    expected_error: str = EXPECTED_INVALID_CREDENTIALS,
) -> LoginOutcome:
    """A wrong secret must produce the credentials error message."""
    login_page = LoginPage(session, settings).open()

    with allure.step("Login with wrong password"):
        login_page.login_with(credentials)

    with allure.step("Verify error message"):
        outcome = login_page.classify_login_result()
        assert_outcome(outcome, Failed, expected_error)
    return outcome


def empty_submission(session: AutomationSession, settings: HarnessSettings) -> str:
    """
    Submitting an empty form must not navigate away from the login page.

    Only the URL is checked; inline validation messages are not asserted.
    """
    login_page = LoginPage(session, settings).open()

    with allure.step("Submit empty form"):
        login_page.click_login()

    url = login_page.current_url
    assert_contains("current location", LoginPage.URL_PATH, url)
    return url


def run_scenario(
    scenario: Callable[..., T],
    provider: Any,
    *args: Any,
    settings: Optional[HarnessSettings] = None,
    **kwargs: Any,
) -> T:
    """
    Run one scenario in its own session.

    Args:
        scenario: Scenario function taking ``(session, settings, ...)``
        provider: Session provider (BrowserManager or compatible)
        settings: Harness settings. Defaults to configuration.

    The session is released whether the scenario passes, fails an
    assertion or errors.
    """
    settings = settings or HarnessSettings.from_config()
    logger.info(f"Running scenario: {scenario.__name__}")
    return with_session(
        lambda session: scenario(session, settings, *args, **kwargs),
        provider,
    )


__all__ = [
    "valid_login",
    "invalid_password",
    "empty_submission",
    "run_scenario",
    "EXPECTED_WELCOME",
    "EXPECTED_INVALID_CREDENTIALS",
]
