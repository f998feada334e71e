"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Semantic element interactions by registered name
    - Explicit waits before every remote action
    - Navigation and URL state
    - Failure capture for the Allure report

Page objects are the only layer that combines locators with waits and issues
mutating remote calls. Tests and scenarios talk to them in element names.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import ClassVar, FrozenSet, Optional, Union

import allure
from loguru import logger

from .conditions import element_to_be_clickable, visibility_of_element_located
from .config_loader import HarnessSettings
from .exceptions import ElementNotReady
from .locators import LocatorRegistry
from .log_config import mask
from .outcomes import StatusAbsent
from .session import AutomationSession


class BasePage:
    """
    Base class for all page objects.

    Subclasses declare ``URL_PATH`` and a ``LOCATORS`` registry.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/login"
            LOCATORS = LocatorRegistry({"email": Locator(By.ID, "email"), ...})

            def login(self, identifier, secret):
                self.set_field("email", identifier)
                self.set_field("password", secret)
                self.invoke_action("submit")
    """

    # Override in subclasses
    URL_PATH: ClassVar[str] = "/"
    PAGE_TITLE: ClassVar[str] = ""
    LOCATORS: ClassVar[LocatorRegistry] = LocatorRegistry({})

    # Field values never written to logs or report steps
    SENSITIVE_FIELDS: ClassVar[FrozenSet[str]] = frozenset({"password"})

    def __init__(
        self,
        session: AutomationSession,
        settings: Optional[HarnessSettings] = None,
    ):
        """
        Initialize page object.

        Args:
            session: Automation session this page drives
            settings: Base URL and wait timings. Defaults to configuration.
        """
        self.session = session
        self.settings = settings or HarnessSettings.from_config()

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.settings.base_url}{self.URL_PATH}"

    @property
    def current_url(self) -> str:
        return self.session.current_url()

    def open(self) -> "BasePage":
        """Navigate to this page."""
        with allure.step(f"Navigate to {self.URL_PATH}"):
            self.session.navigate(self.url)
        return self

    # =========================================================================
    # Semantic Element Interactions
    # =========================================================================

    def set_field(self, name: str, value: str) -> None:
        """
        Wait for a field to be visible, clear it and type ``value``.

        Raises:
            ConfigurationError: If ``name`` is not registered
            ElementNotReady: If the field is not visible within the
                precondition timeout
        """
        shown = mask(value) if name in self.SENSITIVE_FIELDS else value
        with allure.step(f"Fill {name}: {shown}"):
            locator = self.LOCATORS.resolve(name)
            condition = visibility_of_element_located(locator)
            outcome = self.session.waits.until(
                condition,
                self.settings.precondition_timeout,
                self.settings.poll_interval,
                description=f"'{name}' ({locator}) visible",
            )
            if not outcome:
                raise ElementNotReady(
                    action="set_field",
                    element=name,
                    locator=str(locator),
                    condition=condition.description,
                    timeout=self.settings.precondition_timeout,
                    elapsed=outcome.elapsed,
                    last_error=outcome.last_error,
                )
            self.session.clear(outcome.handle)
            self.session.send_text(outcome.handle, value)
            logger.debug(f"Filled '{name}' with {shown!r}")

    def invoke_action(self, name: str) -> None:
        """
        Wait for a control to be clickable and click it.

        Raises:
            ConfigurationError: If ``name`` is not registered
            ElementNotReady: If the control is not clickable within the
                precondition timeout
        """
        with allure.step(f"Click: {name}"):
            locator = self.LOCATORS.resolve(name)
            condition = element_to_be_clickable(locator)
            outcome = self.session.waits.until(
                condition,
                self.settings.precondition_timeout,
                self.settings.poll_interval,
                description=f"'{name}' ({locator}) clickable",
            )
            if not outcome:
                raise ElementNotReady(
                    action="invoke_action",
                    element=name,
                    locator=str(locator),
                    condition=condition.description,
                    timeout=self.settings.precondition_timeout,
                    elapsed=outcome.elapsed,
                    last_error=outcome.last_error,
                )
            self.session.click(outcome.handle)
            logger.debug(f"Clicked '{name}'")

    def read_status(self, name: str) -> Union[str, StatusAbsent]:
        """
        Read the text of a status indicator.

        Waits up to the result timeout. An indicator that never shows is a
        valid observation, so this returns ``StatusAbsent`` instead of raising.
        """
        with allure.step(f"Read status: {name}"):
            locator = self.LOCATORS.resolve(name)
            outcome = self.session.waits.until(
                visibility_of_element_located(locator),
                self.settings.result_timeout,
                self.settings.poll_interval,
                description=f"'{name}' ({locator}) visible",
            )
            if not outcome:
                logger.debug(f"Status '{name}' absent after {outcome.elapsed:.2f}s")
                return StatusAbsent(
                    element=name,
                    elapsed=outcome.elapsed,
                    last_error=outcome.last_error,
                )
            text = self.session.get_text(outcome.handle)
            logger.debug(f"Status '{name}': {text!r}")
            return text

    # =========================================================================
    # Debug Utilities
    # =========================================================================

    def capture_failure(self, test_name: str) -> None:
        """
        Attach a screenshot and the current URL to the Allure report.

        Best effort: a page that is already gone must not mask the original
        test failure.
        """
        with allure.step("Capture failure details"):
            try:
                allure.attach(
                    self.session.screenshot(),
                    name=f"failure_{test_name}",
                    attachment_type=allure.attachment_type.PNG,
                )
                allure.attach(
                    self.current_url,
                    name="Current URL",
                    attachment_type=allure.attachment_type.TEXT,
                )
            except Exception as e:
                logger.warning(f"Failed to capture failure details: {e}")


__all__ = [
    "BasePage",
]
