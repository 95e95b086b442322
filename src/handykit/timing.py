"""Call-rate wrappers: debounce and throttle."""
from __future__ import annotations

import logging
import threading
import time
from functools import update_wrapper
from typing import Any, Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

TimerFactory = Callable[..., Any]


def _seconds(milliseconds: float, name: str) -> float:
    if milliseconds < 0:
        raise ValueError(f"{name} must not be negative, got {milliseconds!r}")
    return milliseconds / 1000.0


class Debounced:
    """
    Wrapper that runs ``func`` once, ``delay_ms`` after the most recent call.

    Every call restarts the countdown and replaces the stored arguments, so
    the wrapped function sees the arguments of the last call in a burst. The
    call happens on the timer thread.
    """

    def __init__(self,
                 func: Callable[..., Any],
                 delay_ms: float,
                 *,
                 timer_factory: TimerFactory = threading.Timer) -> None:
        self._func = func
        self._delay = _seconds(delay_ms, "delay_ms")
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer: Optional[Any] = None
        self._generation = 0
        self._pending: Optional[Tuple[Tuple[Any, ...], Dict[str, Any]]] = None
        update_wrapper(self, func)

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._pending = (args, kwargs)
            self._timer = self._timer_factory(self._delay, self._fire, args=(self._generation,))
            self._timer.start()
        logger.debug("Scheduled %s in %.3fs", self._name, self._delay)

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        with self._lock:
            self._drop_timer()
            self._pending = None

    def flush(self) -> Any:
        """Run the pending call now and return its result."""
        with self._lock:
            self._drop_timer()
            pending, self._pending = self._pending, None
        if pending is None:
            return None
        args, kwargs = pending
        return self._func(*args, **kwargs)

    def _drop_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._generation += 1

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._pending is None:
                return
            args, kwargs = self._pending
            self._pending = None
            self._timer = None
        logger.debug("Running debounced %s", self._name)
        self._func(*args, **kwargs)

    @property
    def _name(self) -> str:
        return getattr(self._func, "__qualname__", repr(self._func))


class Throttled:
    """Wrapper that lets one call through per ``interval_ms`` window."""

    def __init__(self,
                 func: Callable[..., Any],
                 interval_ms: float,
                 *,
                 clock: Callable[[], float] = time.monotonic) -> None:
        self._func = func
        self._interval = _seconds(interval_ms, "interval_ms")
        self._clock = clock
        self._lock = threading.Lock()
        self._window_start: Optional[float] = None
        update_wrapper(self, func)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        with self._lock:
            now = self._clock()
            if self._window_start is not None and now - self._window_start < self._interval:
                logger.debug("Suppressed call to %s", getattr(self._func, "__qualname__", self._func))
                return None
            self._window_start = now
        return self._func(*args, **kwargs)

    def reset(self) -> None:
        """Reopen the window so the next call goes through."""
        with self._lock:
            self._window_start = None


def debounce(func: Callable[..., Any], delay_ms: float, **options: Any) -> Debounced:
    return Debounced(func, delay_ms, **options)


def throttle(func: Callable[..., Any], interval_ms: float, **options: Any) -> Throttled:
    return Throttled(func, interval_ms, **options)
