"""
Element conditions evaluated by the WaitEngine.

A condition is a callable ``condition(session) -> handle``. It returns the
located element handle when it holds and raises ``ConditionNotMet`` with a
short reason otherwise. Conditions are stateless: every poll re-resolves the
element, so a re-rendered DOM never leaves a stale handle behind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from .locators import Locator

if TYPE_CHECKING:
    from .session import AutomationSession


class ConditionNotMet(Exception):
    """A condition did not hold on this poll. Never escapes the WaitEngine."""
    pass


class Condition:
    """Base class for locator-parameterized conditions."""

    description = "condition"

    def __init__(self, locator: Locator):
        self.locator = locator

    def __call__(self, session: "AutomationSession") -> Any:
        handle = session.find_element(self.locator)
        if handle is None:
            raise ConditionNotMet("element not found")
        self.check(session, handle)
        return handle

    def check(self, session: "AutomationSession", handle: Any) -> None:
        """Raise ConditionNotMet when the located element is not acceptable."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.locator})"


class VisibilityOfElementLocated(Condition):
    description = "visible"

    def check(self, session, handle):
        if not session.is_visible(handle):
            raise ConditionNotMet("element not visible")


class ElementToBeClickable(Condition):
    description = "clickable"

    def check(self, session, handle):
        if not session.is_visible(handle):
            raise ConditionNotMet("element not visible")
        if not session.is_enabled(handle):
            raise ConditionNotMet("element not enabled")


# Selenium-style factory aliases
visibility_of_element_located: Callable[[Locator], Condition] = VisibilityOfElementLocated
element_to_be_clickable: Callable[[Locator], Condition] = ElementToBeClickable


__all__ = [
    "Condition",
    "ConditionNotMet",
    "VisibilityOfElementLocated",
    "ElementToBeClickable",
    "visibility_of_element_located",
    "element_to_be_clickable",
]
