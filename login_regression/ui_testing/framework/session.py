"""
================================================================================
Automation Session
================================================================================

The automation transport as consumed by the harness.

``AutomationSession`` lists the operations page objects and conditions need
from the remote browser. ``PlaywrightSession`` implements them over a
Playwright (sync API) ``Page``. Element handles are only valid for the page
they were found on and must not be cached across navigations.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple, Type

from loguru import logger
from playwright.sync_api import ElementHandle, Error as PlaywrightError, Page

from .locators import Locator
from .wait_engine import WaitEngine


class AutomationSession(ABC):
    """
    A live connection to one browser page.

    Subclasses declare ``transient_errors``: transport exceptions that may
    occur while the DOM re-renders and that a wait should poll through.
    """

    transient_errors: Tuple[Type[BaseException], ...] = ()

    _waits: Optional[WaitEngine] = None

    @property
    def waits(self) -> WaitEngine:
        """The session's WaitEngine, built on first use."""
        if self._waits is None:
            self._waits = self._build_wait_engine()
        return self._waits

    def _build_wait_engine(self) -> WaitEngine:
        return WaitEngine(self)

    @abstractmethod
    def navigate(self, url: str) -> None: ...

    @abstractmethod
    def find_element(self, locator: Locator) -> Optional[Any]:
        """Return a handle for the first match, or None when nothing matches."""

    @abstractmethod
    def is_visible(self, handle: Any) -> bool: ...

    @abstractmethod
    def is_enabled(self, handle: Any) -> bool: ...

    @abstractmethod
    def clear(self, handle: Any) -> None: ...

    @abstractmethod
    def send_text(self, handle: Any, text: str) -> None: ...

    @abstractmethod
    def click(self, handle: Any) -> None: ...

    @abstractmethod
    def get_text(self, handle: Any) -> str: ...

    @abstractmethod
    def current_url(self) -> str: ...

    @abstractmethod
    def screenshot(self) -> bytes: ...

    @abstractmethod
    def close(self) -> None:
        """Release the session. Must be safe to call more than once."""


class PlaywrightSession(AutomationSession):
    """
    AutomationSession backed by a Playwright sync ``Page``.

    Usage:
        session = PlaywrightSession(page)
        session.navigate("http://localhost:3000/login")
        handle = session.find_element(Locator(By.ID, "email"))
    """

    transient_errors = (PlaywrightError,)

    def __init__(self, page: Page):
        self.page = page
        self._closed = False

    def navigate(self, url: str) -> None:
        self.page.goto(url)
        logger.debug(f"Navigated to: {url}")

    def find_element(self, locator: Locator) -> Optional[ElementHandle]:
        return self.page.query_selector(locator.selector)

    def is_visible(self, handle: ElementHandle) -> bool:
        return handle.is_visible()

    def is_enabled(self, handle: ElementHandle) -> bool:
        return handle.is_enabled()

    def clear(self, handle: ElementHandle) -> None:
        handle.fill("")

    def send_text(self, handle: ElementHandle, text: str) -> None:
        handle.fill(text)

    def click(self, handle: ElementHandle) -> None:
        handle.click()

    def get_text(self, handle: ElementHandle) -> str:
        return handle.inner_text()

    def current_url(self) -> str:
        return self.page.url

    def screenshot(self) -> bytes:
        return self.page.screenshot(full_page=True)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.page.close()
        logger.debug("Page closed")

    @property
    def closed(self) -> bool:
        return self._closed


__all__ = [
    "AutomationSession",
    "PlaywrightSession",
]
