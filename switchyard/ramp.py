"""Command-delay and slew-rate primitives for components that respond gradually."""

from __future__ import annotations

import logging
import math
import threading
from datetime import datetime, timedelta
from typing import Optional, Union

logger = logging.getLogger(__name__)

Seconds = Union[timedelta, float, int]


def _as_timedelta(value: Seconds) -> timedelta:
    if isinstance(value, timedelta):
        return value
    return timedelta(seconds=value)


def _as_seconds(value: Seconds) -> float:
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)


class CommandDelay:
    """A pending set-point that becomes armed once ``delay`` has elapsed."""

    def __init__(self, delay: Seconds):
        self._delay = _as_timedelta(delay)
        self._lock = threading.Lock()
        self._pending: Optional[tuple[datetime, float]] = None
        self._armed: Optional[float] = None

    @property
    def delay(self) -> timedelta:
        return self._delay

    @property
    def armed(self) -> Optional[float]:
        """The armed value, without advancing the delay clock."""
        with self._lock:
            return self._armed

    def set_target(self, now: datetime, value: float) -> None:
        with self._lock:
            if not self._delay:
                self._armed = value
                self._pending = None
            else:
                self._pending = (now, value)

    def poll(self, now: datetime) -> Optional[float]:
        """Promote the pending value if due; return the armed value."""
        with self._lock:
            if self._pending is not None:
                set_at, value = self._pending
                if now >= set_at + max(self._delay, timedelta(0)):
                    self._armed = value
                    self._pending = None
            return self._armed

    def reset(self) -> None:
        with self._lock:
            self._armed = None
            self._pending = None


class Ramp:
    """Moves ``actual`` toward ``target`` by at most ``rate_w_per_s`` per second.

    A non-finite rate makes the ramp pass-through.
    """

    def __init__(self, rate_w_per_s: float, initial: float):
        self._rate = rate_w_per_s
        self._lock = threading.Lock()
        self._actual = initial
        self._target = initial

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def actual(self) -> float:
        with self._lock:
            return self._actual

    @property
    def target(self) -> float:
        with self._lock:
            return self._target

    def set_target(self, target: float) -> None:
        if math.isnan(target):
            logger.warning("Ramp.set_target ignored NaN")
            return
        with self._lock:
            self._target = target

    def snap_to(self, value: float) -> None:
        with self._lock:
            self._target = value
            self._actual = value

    def advance(self, dt: Seconds) -> float:
        """Step ``actual`` as far as allowed in ``dt`` and return it."""
        with self._lock:
            if not math.isfinite(self._rate):
                self._actual = self._target
                return self._actual
            max_step = self._rate * _as_seconds(dt)
            diff = self._target - self._actual
            if abs(diff) <= max_step:
                self._actual = self._target
            else:
                self._actual += math.copysign(max_step, diff)
            return self._actual