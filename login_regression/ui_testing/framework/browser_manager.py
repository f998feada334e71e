"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle and scoped session acquisition for UI scenarios.

Features:
    - One isolated browser context per session
    - Best-effort, idempotent release of every acquired resource
    - ``session_scope`` / ``with_session``: release on every exit path

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional, TypeVar

from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    Playwright,
    sync_playwright,
)

from .exceptions import SessionError
from .session import AutomationSession, PlaywrightSession


T = TypeVar("T")


class BrowserManager:
    """
    Launches a browser and hands out isolated sessions.

    Usage:
        with session_scope(BrowserManager()) as session:
            LoginPage(session, settings).open()

    ``close()`` may be called any number of times, including after a failed
    or partial ``start()``; only what was actually acquired is released.
    """

    # Default browser launch options
    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
        "args": [
            "--ignore-certificate-errors",
        ],
    }

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: bool = True,
        browser_type: str = "chromium",
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode
            browser_type: Browser to use - 'chromium', 'firefox', 'webkit'
        """
        self.headless = headless
        self.browser_type = browser_type

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    @classmethod
    def from_settings(cls, settings) -> "BrowserManager":
        return cls(headless=settings.headless, browser_type=settings.browser)

    def __enter__(self) -> "BrowserManager":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = sync_playwright().start()

        # Select browser type
        if self.browser_type == "firefox":
            browser_launcher = self._playwright.firefox
        elif self.browser_type == "webkit":
            browser_launcher = self._playwright.webkit
        else:
            browser_launcher = self._playwright.chromium

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
        }

        self._browser = browser_launcher.launch(**launch_options)
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless})"
        )

    def new_session(self, **options: Any) -> PlaywrightSession:
        """
        Open a page in a fresh, isolated browser context.

        Args:
            **options: Additional context options

        Raises:
            SessionError: If the browser has not been started
        """
        if not self._browser:
            raise SessionError("Browser not started. Call start() first.")

        context = self._browser.new_context(
            **{**self.DEFAULT_CONTEXT_OPTIONS, **options}
        )
        self._contexts.append(context)
        return PlaywrightSession(context.new_page())

    def close(self) -> None:
        """
        Close all contexts, the browser and Playwright.

        Every step is attempted even if an earlier one fails; the first
        failure is re-raised once all steps have run.
        """
        errors: List[Exception] = []

        contexts, self._contexts = self._contexts, []
        for context in contexts:
            try:
                context.close()
            except Exception as e:
                logger.warning(f"Failed to close browser context: {e}")
                errors.append(e)

        browser, self._browser = self._browser, None
        if browser:
            try:
                browser.close()
            except Exception as e:
                logger.warning(f"Failed to close browser: {e}")
                errors.append(e)

        playwright, self._playwright = self._playwright, None
        if playwright:
            try:
                playwright.stop()
            except Exception as e:
                logger.warning(f"Failed to stop Playwright: {e}")
                errors.append(e)

        if browser or playwright:
            logger.debug("Browser closed")

        if errors:
            raise errors[0]

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser


# =============================================================================
# Scoped Acquisition
# =============================================================================

@contextmanager
def session_scope(provider) -> Iterator[AutomationSession]:
    """
    Acquire one session from ``provider`` and release it on every exit path.

    ``provider`` is anything with ``start()``, ``new_session()`` and
    ``close()`` (normally a BrowserManager). The session is closed first,
    then the provider; ``provider.close()`` runs even when ``start()``,
    ``new_session()`` or ``session.close()`` fails.
    """
    session = None
    try:
        provider.start()
        session = provider.new_session()
        logger.debug("Automation session acquired")
        yield session
    finally:
        logger.debug("Releasing automation session")
        try:
            if session is not None:
                session.close()
        finally:
            provider.close()


def with_session(fn: Callable[[AutomationSession], T], provider) -> T:
    """Run ``fn(session)`` inside ``session_scope(provider)`` and return its result."""
    with session_scope(provider) as session:
        return fn(session)


__all__ = [
    "BrowserManager",
    "session_scope",
    "with_session",
]
