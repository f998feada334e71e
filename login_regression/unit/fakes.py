"""
In-memory stand-ins for the browser, used by the offline unit suite.

    - FakeClock: monotonic clock whose sleep() advances time instantly
    - FakeLoginSession: an AutomationSession rendering a scripted login form
    - FakeProvider: a session provider with failure injection
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from login_regression.ui_testing.framework.locators import By, Locator
from login_regression.ui_testing.framework.session import AutomationSession
from login_regression.ui_testing.framework.wait_engine import WaitEngine


INF = float("inf")

VALID_EMAIL = "testuser@example.com"
VALID_PASSWORD = "ValidPass123!"


class FakeClock:
    """Deterministic clock; ``sleep`` advances ``now`` and records the gap."""

    def __init__(self, start: float = 0.0):
        self.now = start
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass
class FakeElement:
    """One DOM node: attached from ``present_at``, shown from ``visible_at``."""
    element_id: str
    present_at: float = 0.0
    visible_at: float = 0.0
    enabled: bool = True
    text: str = ""
    value: str = ""


class FakeLoginSession(AutomationSession):
    """
    Scripted login form.

    ``render_delay`` is how long after loading the page the form becomes
    visible, ``result_delay`` how long after submit the status indicator
    shows. A valid submission navigates to /dashboard and shows the welcome
    message; a wrong password shows the error message; an empty form does
    nothing.
    """

    def __init__(
        self,
        clock: FakeClock,
        base_url: str = "http://app.test",
        render_delay: float = 0.0,
        result_delay: float = 0.5,
        welcome_renders: bool = True,
        error_renders: bool = True,
        submit_enabled: bool = True,
        welcome_text: str = "Welcome back",
        error_text: str = "Invalid email or password",
    ):
        self.clock = clock
        self.base_url = base_url
        self.render_delay = render_delay
        self.result_delay = result_delay
        self.welcome_renders = welcome_renders
        self.error_renders = error_renders
        self.submit_enabled = submit_enabled
        self.welcome_text = welcome_text
        self.error_text = error_text

        self.url = "about:blank"
        self.elements: Dict[str, FakeElement] = {}
        self.calls: List[Tuple[Any, ...]] = []
        self.closed = 0

    def _build_wait_engine(self) -> WaitEngine:
        return WaitEngine(self, clock=self.clock, sleep=self.clock.sleep)

    # -- page script ---------------------------------------------------------

    def _load_login_form(self) -> None:
        shown = self.clock.now + self.render_delay
        self.elements = {
            "email": FakeElement("email", present_at=shown, visible_at=shown),
            "password": FakeElement("password", present_at=shown, visible_at=shown),
            "login-btn": FakeElement(
                "login-btn", present_at=shown, visible_at=shown,
                enabled=self.submit_enabled, text="Log in",
            ),
        }

    def _submit(self) -> None:
        email = self.elements["email"].value
        password = self.elements["password"].value
        if not email or not password:
            return

        shown = self.clock.now + self.result_delay
        if email == VALID_EMAIL and password == VALID_PASSWORD:
            self.url = f"{self.base_url}/dashboard"
            self.elements = {
                "welcome-msg": FakeElement(
                    "welcome-msg", present_at=shown,
                    visible_at=shown if self.welcome_renders else INF,
                    text=self.welcome_text,
                ),
            }
        else:
            self.elements["error-message"] = FakeElement(
                "error-message", present_at=shown,
                visible_at=shown if self.error_renders else INF,
                text=self.error_text,
            )

    # -- AutomationSession ---------------------------------------------------

    def navigate(self, url: str) -> None:
        self.calls.append(("navigate", url))
        self.url = url
        if url.endswith("/login"):
            self._load_login_form()
        else:
            self.elements = {}

    def find_element(self, locator: Locator) -> Optional[FakeElement]:
        self.calls.append(("find", str(locator)))
        if locator.strategy is not By.ID:
            return None
        element = self.elements.get(locator.value)
        if element is None or element.present_at > self.clock.now:
            return None
        return element

    def is_visible(self, handle: FakeElement) -> bool:
        return handle.visible_at <= self.clock.now

    def is_enabled(self, handle: FakeElement) -> bool:
        return handle.enabled

    def clear(self, handle: FakeElement) -> None:
        self.calls.append(("clear", handle.element_id))
        handle.value = ""

    def send_text(self, handle: FakeElement, text: str) -> None:
        self.calls.append(("send_text", handle.element_id, text))
        handle.value += text

    def click(self, handle: FakeElement) -> None:
        self.calls.append(("click", handle.element_id))
        if handle.element_id == "login-btn":
            self._submit()

    def get_text(self, handle: FakeElement) -> str:
        return handle.text

    def current_url(self) -> str:
        return self.url

    def screenshot(self) -> bytes:
        return b"\x89PNG fake"

    def close(self) -> None:
        self.closed += 1

    def actions(self) -> List[Tuple[Any, ...]]:
        """Mutating calls only, in order."""
        return [c for c in self.calls if c[0] in ("navigate", "clear", "send_text", "click")]


class FakeProvider:
    """Session provider recording start/close, with optional failures."""

    def __init__(
        self,
        session: Optional[AutomationSession] = None,
        fail_on_start: bool = False,
        fail_on_new_session: bool = False,
        fail_on_close: bool = False,
    ):
        self.session = session
        self.fail_on_start = fail_on_start
        self.fail_on_new_session = fail_on_new_session
        self.fail_on_close = fail_on_close
        self.started = False
        self.close_calls = 0

    def start(self) -> None:
        if self.fail_on_start:
            raise RuntimeError("browser failed to launch")
        self.started = True

    def new_session(self) -> AutomationSession:
        if self.fail_on_new_session:
            raise RuntimeError("could not open page")
        return self.session

    def close(self) -> None:
        self.close_calls += 1
        if self.fail_on_close:
            raise RuntimeError("browser did not exit")
