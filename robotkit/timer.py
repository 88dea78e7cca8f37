"""Millisecond stopwatch built on a monotonic clock."""

from __future__ import annotations

import operator
import random
import time
from typing import Callable

__all__ = ["Timer", "sleep", "cpu_time"]


def cpu_time() -> int:
    """Return the current monotonic time in whole milliseconds."""
    return time.monotonic_ns() // 1_000_000


def _random_in_range(minimum: int, maximum: int) -> int:
    """Pick a value in [minimum, maximum), or minimum when the range is empty."""
    if maximum <= minimum:
        return minimum
    return random.randrange(minimum, maximum)


def sleep(minimum: int, maximum: int | None = None) -> None:
    """Sleep for a random number of milliseconds in [minimum, maximum).

    With only ``minimum`` given, or with ``maximum`` not above ``minimum``,
    sleeps exactly ``minimum`` milliseconds. Negative durations do nothing.
    """
    if maximum is None:
        maximum = minimum
    duration = _random_in_range(minimum, maximum)
    if duration < 0:
        return
    time.sleep(duration / 1000)


class Timer:
    """A stopwatch measuring elapsed milliseconds.

    Timers compare by elapsed time: a timer that has run longer is greater.
    A timer that has not been started ranks below every running timer.
    """

    __slots__ = ("_started",)

    def __init__(self) -> None:
        self._started: int | None = None

    def start(self) -> None:
        """Start, or start again, from the current time."""
        self._started = cpu_time()

    def reset(self) -> int:
        """Stop the timer and return the milliseconds it had been running."""
        if self._started is None:
            return 0
        old, self._started = self._started, None
        return cpu_time() - old

    def restart(self) -> int:
        """Start again from now and return the milliseconds run before."""
        now = cpu_time()
        old, self._started = self._started, now
        return 0 if old is None else now - old

    def elapsed(self) -> int:
        """Return the milliseconds since the timer started, or 0 if stopped."""
        if self._started is None:
            return 0
        return cpu_time() - self._started

    def has_started(self) -> bool:
        """Return whether the timer is running."""
        return self._started is not None

    def has_expired(self, time: int) -> bool:
        """Return whether more than ``time`` milliseconds have elapsed.

        A timer that is not running has always expired.
        """
        if self._started is None:
            return True
        return self.elapsed() > time

    def __call__(self) -> int:
        return self.elapsed()

    def _rank(self) -> tuple[int, int]:
        # Stopped timers rank lowest; among running ones, earlier starts rank higher.
        if self._started is None:
            return (0, 0)
        return (1, -self._started)

    def _compare(self, other: object, op: Callable[[object, object], bool]) -> bool:
        if not isinstance(other, Timer):
            return NotImplemented
        return op(self._rank(), other._rank())

    def __eq__(self, other: object) -> bool:
        return self._compare(other, operator.eq)

    def __ne__(self, other: object) -> bool:
        return self._compare(other, operator.ne)

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Timer) -> bool:
        return self._compare(other, operator.lt)

    def __gt__(self, other: Timer) -> bool:
        return self._compare(other, operator.gt)

    def __le__(self, other: Timer) -> bool:
        return self._compare(other, operator.le)

    def __ge__(self, other: Timer) -> bool:
        return self._compare(other, operator.ge)

    def __repr__(self) -> str:
        state = f"elapsed={self.elapsed()}ms" if self.has_started() else "stopped"
        return f"Timer({state})"