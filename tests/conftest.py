from pathlib import Path
from typing import Any, Callable, List, Tuple

import pytest
import yaml


class FakeTimer:
    """Stands in for threading.Timer; fires only when the test says so."""

    def __init__(self, interval: float, function: Callable[..., Any],
                 args: Tuple[Any, ...] = ()) -> None:
        self.interval = interval
        self.function = function
        self.args = args
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        if not self.cancelled:
            self.function(*self.args)


@pytest.fixture
def timers() -> List[FakeTimer]:
    return []


@pytest.fixture
def timer_factory(timers: List[FakeTimer]) -> Callable[..., FakeTimer]:
    def build(interval: float, function: Callable[..., Any],
              args: Tuple[Any, ...] = ()) -> FakeTimer:
        timer = FakeTimer(interval, function, args)
        timers.append(timer)
        return timer

    return build


@pytest.fixture
def policy_file(tmp_path: Path) -> Path:
    path = tmp_path / "security.yml"
    with path.open("w", encoding="utf-8") as fh:
        yaml.safe_dump(
            {"security": {"password": {"minLength": 4, "requireSymbol": False}}},
            fh,
            sort_keys=False,
        )
    return path
