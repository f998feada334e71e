"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based (sync API) harness core for the login workflow.

Components:
    - locators: symbolic element name -> locator strategy + selector
    - conditions / wait_engine: explicit waits against the live page
    - session / browser_manager: automation transport and scoped sessions
    - page_base: base page object with semantic actions
    - outcomes / exceptions / assertions: results and error taxonomy

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager, session_scope, with_session
from .config_loader import ConfigLoader, HarnessSettings
from .exceptions import (
    ConfigurationError,
    ElementNotReady,
    HarnessError,
    ScenarioAssertionError,
    SessionError,
)
from .locators import By, Locator, LocatorRegistry
from .outcomes import (
    Credentials,
    Failed,
    Indeterminate,
    LoginState,
    StatusAbsent,
    Succeeded,
    WaitSuccess,
    WaitTimedOut,
)
from .page_base import BasePage
from .session import AutomationSession, PlaywrightSession
from .wait_engine import WaitEngine

__all__ = [
    "AutomationSession",
    "BasePage",
    "BrowserManager",
    "By",
    "ConfigLoader",
    "ConfigurationError",
    "Credentials",
    "ElementNotReady",
    "Failed",
    "HarnessError",
    "HarnessSettings",
    "Indeterminate",
    "Locator",
    "LocatorRegistry",
    "LoginState",
    "PlaywrightSession",
    "ScenarioAssertionError",
    "SessionError",
    "StatusAbsent",
    "Succeeded",
    "WaitEngine",
    "WaitSuccess",
    "WaitTimedOut",
    "session_scope",
    "with_session",
]
