from __future__ import annotations

import threading
from typing import Any, Callable, List

import pytest

from handykit import Debounced, Throttled, debounce, throttle


class ManualClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_debounce_runs_once_with_last_arguments(timer_factory: Callable[..., Any],
                                                timers: List[Any]) -> None:
    calls: List[Any] = []
    wrapped = debounce(calls.append, 250, timer_factory=timer_factory)

    wrapped("first")
    wrapped("second")
    wrapped("third")

    assert len(timers) == 3
    assert timers[0].cancelled and timers[1].cancelled
    assert timers[2].interval == pytest.approx(0.25)
    assert calls == []
    assert wrapped.pending

    for timer in timers:
        timer.fire()

    assert calls == ["third"]
    assert not wrapped.pending


def test_debounce_ignores_stale_timer(timer_factory: Callable[..., Any],
                                      timers: List[Any]) -> None:
    calls: List[Any] = []
    wrapped = debounce(calls.append, 10, timer_factory=timer_factory)

    wrapped(1)
    stale = timers[0]
    wrapped(2)
    stale.function(*stale.args)

    assert calls == []
    timers[1].fire()
    assert calls == [2]


def test_debounce_cancel_and_flush(timer_factory: Callable[..., Any],
                                   timers: List[Any]) -> None:
    calls: List[Any] = []
    wrapped = debounce(lambda value: calls.append(value) or value, 10,
                       timer_factory=timer_factory)

    wrapped("dropped")
    wrapped.cancel()
    timers[0].fire()
    assert calls == []
    assert wrapped.flush() is None

    wrapped("now")
    assert wrapped.flush() == "now"
    timers[1].fire()
    assert calls == ["now"]


def test_debounce_with_real_timer() -> None:
    done = threading.Event()
    calls: List[int] = []

    def record(value: int) -> None:
        calls.append(value)
        done.set()

    wrapped = debounce(record, 20)
    for value in range(5):
        wrapped(value)

    assert done.wait(timeout=2)
    assert calls == [4]


def test_throttle_lets_one_call_per_window() -> None:
    clock = ManualClock()
    calls: List[int] = []
    wrapped = throttle(lambda value: calls.append(value) or value, 100, clock=clock)

    assert wrapped(1) == 1
    clock.now = 0.05
    assert wrapped(2) is None
    clock.now = 0.1
    assert wrapped(3) == 3
    clock.now = 0.15
    assert wrapped(4) is None
    clock.now = 0.25
    assert wrapped(5) == 5

    assert calls == [1, 3, 5]


def test_throttle_reset_reopens_window() -> None:
    clock = ManualClock()
    calls: List[int] = []
    wrapped = throttle(calls.append, 1000, clock=clock)

    wrapped(1)
    wrapped(2)
    wrapped.reset()
    wrapped(3)

    assert calls == [1, 3]


def test_wrappers_keep_metadata() -> None:
    def handler() -> None:
        """Handle things."""

    assert isinstance(debounce(handler, 1), Debounced)
    assert isinstance(throttle(handler, 1), Throttled)
    assert throttle(handler, 1).__name__ == "handler"
    assert debounce(handler, 1).__doc__ == "Handle things."


def test_negative_delays_are_rejected() -> None:
    with pytest.raises(ValueError):
        debounce(print, -1)
    with pytest.raises(ValueError):
        throttle(print, -5)
