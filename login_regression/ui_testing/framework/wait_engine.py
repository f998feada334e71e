# ================================================================================
# Wait Engine
# ================================================================================
#
# Explicit-wait primitive bridging synchronous test code with an asynchronously
# rendering page. Every higher layer synchronizes through ``WaitEngine.until``.
#
# Key Features:
#   - Finite deadline on every wait (no unbounded blocking)
#   - Bounded overshoot: total time never exceeds timeout + poll_interval
#   - Timeout is a return value (WaitTimedOut), never an exception
#   - Last failure reason preserved for diagnostics
#
# Usage:
#   waits = WaitEngine(session)
#   outcome = waits.until(visibility_of_element_located(locator), 10, 0.25)
#   if outcome:
#       session.click(outcome.handle)
#
# ================================================================================

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Callable, Optional

from loguru import logger

from .conditions import ConditionNotMet
from .outcomes import WaitOutcome, WaitSuccess, WaitTimedOut

if TYPE_CHECKING:
    from .session import AutomationSession


# Floor for the gap between two polls when evaluation ate the whole interval
MIN_POLL_GAP = 0.01


class WaitEngine:
    """
    Polls a condition against one automation session.

    Built once per session and stateless between calls; each ``until`` call is
    independent.

    Args:
        session: Session the conditions are evaluated against
        clock: Monotonic time source in seconds
        sleep: Blocking sleep function in seconds
    """

    def __init__(
        self,
        session: "AutomationSession",
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.session = session
        self._clock = clock
        self._sleep = sleep

    def until(
        self,
        condition: Callable[["AutomationSession"], object],
        timeout: float,
        poll_interval: float,
        description: Optional[str] = None,
    ) -> WaitOutcome:
        """
        Evaluate ``condition`` until it holds or ``timeout`` elapses.

        Args:
            condition: Callable returning an element handle, raising
                ConditionNotMet while the condition does not hold
            timeout: Deadline in seconds (> 0)
            poll_interval: Spacing between polls in seconds (0 < p <= timeout)
            description: Human-readable description for logging

        Returns:
            WaitSuccess with the handle, or WaitTimedOut with the last reason

        Raises:
            ValueError: On non-positive timeout or out-of-range poll_interval
        """
        if timeout <= 0:
            raise ValueError(f"timeout must be > 0, got {timeout}")
        if poll_interval <= 0 or poll_interval > timeout:
            raise ValueError(
                f"poll_interval must be in (0, timeout={timeout}], got {poll_interval}"
            )

        description = description or repr(condition)
        transient = tuple(getattr(self.session, "transient_errors", ()))
        min_gap = min(MIN_POLL_GAP, poll_interval)

        start = self._clock()
        attempts = 0
        last_error: Optional[str] = None

        logger.debug(
            f"Waiting for {description} "
            f"(timeout={timeout}s, poll_interval={poll_interval}s)"
        )

        while True:
            attempts += 1
            poll_started = self._clock()

            try:
                handle = condition(self.session)
                elapsed = self._clock() - start
                logger.debug(
                    f"✅ {description} after {attempts} attempt(s) ({elapsed:.2f}s)"
                )
                return WaitSuccess(handle=handle, elapsed=elapsed, attempts=attempts)
            except ConditionNotMet as e:
                last_error = str(e)
            except transient as e:
                # Playwright errors carry a multi-line call log; keep the headline
                last_error = f"{type(e).__name__}: {e}".splitlines()[0]

            now = self._clock()
            elapsed = now - start
            if elapsed >= timeout:
                logger.warning(
                    f"⏱️ Timed out after {elapsed:.2f}s waiting for {description} "
                    f"({attempts} attempts, last: {last_error})"
                )
                return WaitTimedOut(
                    elapsed=elapsed, last_error=last_error, attempts=attempts
                )

            gap = poll_interval - (now - poll_started)
            gap = min(gap, timeout - elapsed)
            self._sleep(max(gap, min_gap))


__all__ = [
    "WaitEngine",
    "MIN_POLL_GAP",
]
