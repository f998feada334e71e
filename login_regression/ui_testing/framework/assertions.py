"""
Scenario assertions.

Each helper raises ``ScenarioAssertionError`` carrying both the expected and
the observed value, wrapped in an Allure step so the report shows which
check failed.
"""

from __future__ import annotations

from typing import Any, Type

import allure
from loguru import logger

from .exceptions import ScenarioAssertionError
from .outcomes import LoginOutcome, Succeeded


def assert_equal(description: str, expected: Any, actual: Any) -> None:
    with allure.step(f"Check {description}"):
        if expected != actual:
            logger.error(f"❌ {description}: expected {expected!r}, observed {actual!r}")
            raise ScenarioAssertionError(description, expected, actual)


def assert_contains(description: str, expected_fragment: str, actual: str) -> None:
    with allure.step(f"Check {description}"):
        if expected_fragment not in (actual or ""):
            logger.error(
                f"❌ {description}: expected to contain {expected_fragment!r}, "
                f"observed {actual!r}"
            )
            raise ScenarioAssertionError(
                description, f"contains {expected_fragment!r}", actual
            )


def assert_outcome(
    outcome: LoginOutcome,
    expected_type: Type[LoginOutcome],
    expected_text: str,
) -> None:
    """
    Check a login classification against the expected variant and text.

    A wrong variant is reported with the whole outcome, so "no indicator
    appeared" (Indeterminate) is distinguishable from "the other indicator
    appeared".
    """
    if not isinstance(outcome, expected_type):
        raise ScenarioAssertionError(
            "login outcome", f"{expected_type.__name__}({expected_text!r})", outcome
        )
    text = outcome.welcome_text if isinstance(outcome, Succeeded) else outcome.error_text
    assert_equal(f"{expected_type.__name__.lower()} message", expected_text, text)


__all__ = [
    "assert_equal",
    "assert_contains",
    "assert_outcome",
]
