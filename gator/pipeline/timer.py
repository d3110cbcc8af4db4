"""Interval timer driving the polling loop."""

import re
import time
from datetime import timedelta
from typing import Callable, Optional

from ..errors import ValidationError

_UNIT_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_PART_RE = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(text: str) -> timedelta:
    """Parse duration text such as ``30s``, ``1m`` or ``1h30m``."""
    value = text.strip()
    if not value:
        raise ValidationError("Duration is empty; use a value like 30s, 1m or 1h")

    seconds = 0.0
    pos = 0
    for match in _PART_RE.finditer(value):
        if match.start() != pos:
            break
        number, unit = match.groups()
        seconds += float(number) * _UNIT_SECONDS[unit]
        pos = match.end()

    if pos != len(value):
        raise ValidationError(f"Invalid duration '{text}'; use a value like 30s, 1m or 1h")
    if seconds <= 0:
        raise ValidationError(f"Duration must be positive, got '{text}'")

    return timedelta(seconds=seconds)


class IntervalTimer:
    """Fire once immediately, then on every interval boundary.

    Waits never overlap the work done between them: when the caller
    overruns an interval, the next ``wait`` returns at once and the
    schedule restarts from that moment.
    """

    def __init__(
        self,
        interval: timedelta,
        sleep: Callable[[float], None] = time.sleep,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        if interval.total_seconds() <= 0:
            raise ValidationError("Interval must be positive")
        self.interval = interval.total_seconds()
        self._sleep = sleep
        self._monotonic = monotonic
        self._next_fire: Optional[float] = None

    def wait(self) -> None:
        """Block until the next firing."""
        now = self._monotonic()
        if self._next_fire is None:
            self._next_fire = now + self.interval
            return

        delay = self._next_fire - now
        if delay > 0:
            self._sleep(delay)
            self._next_fire += self.interval
        else:
            self._next_fire = now + self.interval
