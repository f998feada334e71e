"""
================================================================================
Login Page Object
================================================================================

Semantic actions for the login form.

Design goals:
  - All selectors live in ``LOCATORS``; a UI change is a one-line update here
  - Every action waits for its own precondition; composites add no waits
  - Login results are classified into Succeeded / Failed / Indeterminate
    instead of a boolean that hides why it is False

================================================================================
"""

from __future__ import annotations

from typing import Union

import allure
from loguru import logger

from login_regression.ui_testing.framework.locators import By, Locator, LocatorRegistry
from login_regression.ui_testing.framework.outcomes import (
    Credentials,
    Failed,
    Indeterminate,
    LoginOutcome,
    LoginState,
    StatusAbsent,
    Succeeded,
)
from login_regression.ui_testing.framework.page_base import BasePage


class LoginPage(BasePage):
    """Login page object."""

    URL_PATH = "/login"
    PAGE_TITLE = "Login"

    LOCATORS = LocatorRegistry({
        "email": Locator(By.ID, "email"),
        "password": Locator(By.ID, "password"),
        "submit": Locator(By.ID, "login-btn"),
        "error": Locator(By.ID, "error-message"),
        "welcome": Locator(By.ID, "welcome-msg"),
    })

    def __init__(self, session, settings=None):
        super().__init__(session, settings)
        self.state = LoginState.IDLE

    def open(self) -> "LoginPage":
        super().open()
        self.state = LoginState.IDLE
        return self

    def enter_email(self, email: str) -> None:
        self.set_field("email", email)

    def enter_password(self, password: str) -> None:
        self.set_field("password", password)

    def click_login(self) -> None:
        self.invoke_action("submit")
        self.state = LoginState.SUBMITTING

    def login(self, identifier: str, secret: str) -> None:
        """
        Fill both credentials and submit the form.

        The report step is titled with the identifier only; the secret is
        never recorded as a step parameter.
        """
        with allure.step(f"Login (identifier={identifier})"):
            self.enter_email(identifier)
            self.enter_password(secret)
            self.click_login()
        logger.info(f"Login submitted for {identifier}")

    def login_with(self, credentials: Credentials) -> None:
        self.login(credentials.identifier, credentials.secret)

    def read_welcome_message(self) -> Union[str, StatusAbsent]:
        return self.read_status("welcome")

    def read_error_message(self) -> Union[str, StatusAbsent]:
        return self.read_status("error")

    @allure.step("Classify login result")
    def classify_login_result(self) -> LoginOutcome:
        """
        Classify the outcome of the last submission.

        The welcome indicator is checked first; only when it stays absent is
        the error indicator read. Exactly one outcome is returned.
        """
        welcome = self.read_welcome_message()
        if not isinstance(welcome, StatusAbsent):
            outcome: LoginOutcome = Succeeded(welcome)
        else:
            error = self.read_error_message()
            if not isinstance(error, StatusAbsent):
                outcome = Failed(error)
            else:
                outcome = Indeterminate(welcome=welcome, error=error)

        self.state = outcome.state
        logger.info(f"Login result: {outcome}")
        return outcome

    def is_on_login_page(self) -> bool:
        return self.URL_PATH in self.current_url


__all__ = [
    "LoginPage",
]
