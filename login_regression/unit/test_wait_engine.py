import pytest

from login_regression.ui_testing.framework.conditions import ConditionNotMet
from login_regression.ui_testing.framework.outcomes import WaitSuccess, WaitTimedOut
from login_regression.ui_testing.framework.wait_engine import MIN_POLL_GAP, WaitEngine


class DummySession:
    transient_errors = ()


class FlakyTransportError(Exception):
    pass


def appears_after(clock, delay, handle="handle"):
    """Condition that holds once ``delay`` seconds have passed on ``clock``."""
    ready_at = clock.now + delay

    def condition(session):
        if clock.now < ready_at:
            raise ConditionNotMet("element not found")
        return handle
    return condition


def never(reason="element not visible"):
    def condition(session):
        raise ConditionNotMet(reason)
    return condition


def engine(clock, session=None):
    return WaitEngine(session or DummySession(), clock=clock, sleep=clock.sleep)


def test_returns_immediately_when_condition_holds(clock):
    outcome = engine(clock).until(appears_after(clock, 0), timeout=5, poll_interval=0.5)

    assert isinstance(outcome, WaitSuccess)
    assert outcome.handle == "handle"
    assert outcome.attempts == 1
    assert outcome.elapsed == 0
    assert clock.sleeps == []


@pytest.mark.parametrize(
    "timeout, poll_interval, ready_after",
    [
        (2.0, 0.25, 1.1),
        (2.0, 0.25, 2.0),
        (1.0, 0.3, 0.95),
        (1.0, 1.0, 0.4),
        (5.0, 0.5, 0.0),
    ],
)
def test_success_within_one_poll_of_condition_becoming_true(
    clock, timeout, poll_interval, ready_after
):
    outcome = engine(clock).until(
        appears_after(clock, ready_after), timeout=timeout, poll_interval=poll_interval
    )

    assert isinstance(outcome, WaitSuccess)
    assert ready_after <= outcome.elapsed + 1e-9
    assert outcome.elapsed <= ready_after + poll_interval + 1e-9


@pytest.mark.parametrize(
    "timeout, poll_interval",
    [(1.0, 0.3), (2.0, 0.25), (0.5, 0.5), (3.0, 0.7)],
)
def test_timeout_elapsed_is_bounded(clock, timeout, poll_interval):
    outcome = engine(clock).until(never(), timeout=timeout, poll_interval=poll_interval)

    assert isinstance(outcome, WaitTimedOut)
    assert timeout <= outcome.elapsed <= timeout + poll_interval
    assert outcome.last_error == "element not visible"
    assert outcome.attempts >= 2


def test_timeout_is_falsy_and_success_truthy(clock):
    waits = engine(clock)
    assert not waits.until(never(), timeout=1, poll_interval=0.5)
    assert waits.until(appears_after(clock, 0), timeout=1, poll_interval=0.5)


def test_keeps_last_failure_reason(clock):
    reasons = iter(["element not found", "element not found", "element not visible"])

    def condition(session):
        raise ConditionNotMet(next(reasons, "element not enabled"))

    outcome = engine(clock).until(condition, timeout=1.0, poll_interval=0.25)
    assert outcome.last_error == "element not enabled"


def test_poll_spacing_subtracts_evaluation_cost(clock):
    def slow_failing(session):
        clock.advance(0.05)
        raise ConditionNotMet("element not found")

    outcome = engine(clock).until(slow_failing, timeout=1.0, poll_interval=0.25)

    assert isinstance(outcome, WaitTimedOut)
    assert clock.sleeps[:3] == [pytest.approx(0.2)] * 3
    assert outcome.elapsed <= 1.0 + 0.25


def test_no_busy_spin_when_evaluation_exceeds_interval(clock):
    def very_slow(session):
        clock.advance(0.4)
        raise ConditionNotMet("element not found")

    engine(clock).until(very_slow, timeout=1.0, poll_interval=0.25)

    assert clock.sleeps
    assert all(s == pytest.approx(MIN_POLL_GAP) for s in clock.sleeps)


def test_last_sleep_is_clipped_to_deadline(clock):
    engine(clock).until(never(), timeout=1.0, poll_interval=0.4)

    # polls at 0, 0.4, 0.8 then one clipped poll at the deadline
    assert clock.sleeps == [pytest.approx(0.4), pytest.approx(0.4), pytest.approx(0.2)]


@pytest.mark.parametrize(
    "timeout, poll_interval",
    [(0, 0.1), (-1, 0.1), (1, 0), (1, -0.5), (1, 2)],
)
def test_rejects_invalid_timing(clock, timeout, poll_interval):
    with pytest.raises(ValueError):
        engine(clock).until(never(), timeout=timeout, poll_interval=poll_interval)


def test_polls_through_declared_transient_errors(clock):
    class Session:
        transient_errors = (FlakyTransportError,)

    attempts = {"n": 0}

    def condition(session):
        attempts["n"] += 1
        if attempts["n"] < 3:
            raise FlakyTransportError("Element is not attached to the DOM\nCall log: ...")
        return "handle"

    outcome = engine(clock, Session()).until(condition, timeout=2, poll_interval=0.1)
    assert isinstance(outcome, WaitSuccess)
    assert outcome.attempts == 3


def test_transient_error_headline_is_reported_on_timeout(clock):
    class Session:
        transient_errors = (FlakyTransportError,)

    def condition(session):
        raise FlakyTransportError("Element is not attached to the DOM\nCall log: ...")

    outcome = engine(clock, Session()).until(condition, timeout=0.5, poll_interval=0.1)
    assert outcome.last_error == "FlakyTransportError: Element is not attached to the DOM"


def test_unexpected_errors_propagate(clock):
    def broken(session):
        raise RuntimeError("browser crashed")

    with pytest.raises(RuntimeError, match="browser crashed"):
        engine(clock).until(broken, timeout=1, poll_interval=0.1)


def test_calls_are_independent(clock):
    waits = engine(clock)
    first = waits.until(never(), timeout=0.5, poll_interval=0.25)
    second = waits.until(appears_after(clock, 0.3), timeout=1, poll_interval=0.25)

    assert isinstance(first, WaitTimedOut)
    assert isinstance(second, WaitSuccess)
    assert second.elapsed <= 0.3 + 0.25
    assert second.attempts == 3
