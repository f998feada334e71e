"""
================================================================================
Harness Exceptions
================================================================================

Error taxonomy for the login regression harness.

    - ConfigurationError: programmer/configuration defect, fail fast
    - ElementNotReady:    a required precondition never held before timeout
    - SessionError:       automation session could not be acquired/used
    - ScenarioAssertionError: scenario expectation violated

A result-observing read that finds nothing is NOT an error; see
``outcomes.StatusAbsent``.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Optional


class HarnessError(Exception):
    """Base exception for the harness."""
    pass


class ConfigurationError(HarnessError):
    """Raised for unknown locator names, bad registries or invalid settings."""
    pass


class SessionError(HarnessError):
    """Raised when an automation session cannot be acquired or is not usable."""
    pass


class ElementNotReady(HarnessError):
    """
    Raised when a page action's precondition never became true.

    Attributes:
        action: Page action that failed (e.g. ``set_field``)
        element: Symbolic element name
        locator: Rendered locator (``id=email``)
        condition: Condition that was awaited (``visible``, ``clickable``)
        timeout: Configured timeout in seconds
        elapsed: Time actually spent waiting, in seconds
        last_error: Last observed failure reason
    """

    def __init__(
        self,
        action: str,
        element: str,
        locator: str,
        condition: str,
        timeout: float,
        elapsed: float,
        last_error: Optional[str] = None,
    ):
        self.action = action
        self.element = element
        self.locator = locator
        self.condition = condition
        self.timeout = timeout
        self.elapsed = elapsed
        self.last_error = last_error
        super().__init__(
            f"{action}('{element}'): expected {locator} to be {condition} "
            f"within {timeout:.2f}s, gave up after {elapsed:.2f}s "
            f"(last observed: {last_error or 'condition not met'})"
        )


class ScenarioAssertionError(AssertionError):
    """
    Scenario-level expectation violated.

    Subclasses ``AssertionError`` so pytest reports it as a test failure,
    not an error.
    """

    def __init__(self, description: str, expected: Any, actual: Any):
        self.description = description
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{description}: expected {expected!r}, observed {actual!r}"
        )


__all__ = [
    "HarnessError",
    "ConfigurationError",
    "SessionError",
    "ElementNotReady",
    "ScenarioAssertionError",
]
