"""
================================================================================
Outcome Types
================================================================================

Value types returned (never raised) by the wait and page layers.

    - WaitSuccess / WaitTimedOut: result of ``WaitEngine.until``
    - StatusAbsent: a status indicator did not appear in time
    - Succeeded / Failed / Indeterminate: classification of a login attempt
    - Credentials: login input, secret masked in repr

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


# =============================================================================
# Wait Outcomes
# =============================================================================

@dataclass(frozen=True)
class WaitSuccess:
    """
    Condition held.

    Attributes:
        handle: Element handle returned by the condition (current page only)
        elapsed: Seconds spent waiting
        attempts: Number of condition evaluations
    """
    handle: Any
    elapsed: float
    attempts: int

    succeeded = True

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class WaitTimedOut:
    """
    Deadline elapsed before the condition held.

    Attributes:
        elapsed: Seconds spent waiting
        last_error: Last observed failure reason
        attempts: Number of condition evaluations
    """
    elapsed: float
    last_error: Optional[str]
    attempts: int

    succeeded = False

    def __bool__(self) -> bool:
        return False


WaitOutcome = Union[WaitSuccess, WaitTimedOut]


@dataclass(frozen=True)
class StatusAbsent:
    """
    A result indicator was not visible within the result timeout.

    Falsy, so ``if page.read_status("error"):`` reads naturally.
    """
    element: str
    elapsed: float
    last_error: Optional[str] = None

    def __bool__(self) -> bool:
        return False


# =============================================================================
# Login Outcomes
# =============================================================================

class LoginState(str, Enum):
    """States of one login attempt."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    INDETERMINATE = "indeterminate"


@dataclass(frozen=True)
class Succeeded:
    """Welcome indicator was shown."""
    welcome_text: str

    state = LoginState.SUCCEEDED


@dataclass(frozen=True)
class Failed:
    """Error indicator was shown."""
    error_text: str

    state = LoginState.FAILED


@dataclass(frozen=True)
class Indeterminate:
    """Neither indicator was shown; both absence observations are kept."""
    welcome: Optional[StatusAbsent] = None
    error: Optional[StatusAbsent] = None

    state = LoginState.INDETERMINATE


LoginOutcome = Union[Succeeded, Failed, Indeterminate]


@dataclass(frozen=True)
class Credentials:
    """Login input. The secret is kept out of repr and logs."""
    identifier: str
    secret: str = field(repr=False)

    def __repr__(self) -> str:
        return f"Credentials(identifier={self.identifier!r}, secret='***')"


__all__ = [
    "WaitSuccess",
    "WaitTimedOut",
    "WaitOutcome",
    "StatusAbsent",
    "LoginState",
    "Succeeded",
    "Failed",
    "Indeterminate",
    "LoginOutcome",
    "Credentials",
]
