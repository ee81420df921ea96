"""Power-bound containers.

Two layers:

* :class:`VecBounds` is a sorted list of :class:`Bounds` intervals.
* :class:`ComponentBounds` holds the rated bounds plus a queue of
  time-limited augmentations; :meth:`ComponentBounds.effective`
  intersects them down to the effective envelope.
"""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Iterator, Optional, Union

Seconds = Union[timedelta, float, int]


def _as_timedelta(value: Seconds) -> timedelta:
    if isinstance(value, timedelta):
        return value
    return timedelta(seconds=value)


def _format_value(value: Optional[float]) -> str:
    if value is None:
        return "*"
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True)
class Bounds:
    """A closed interval; ``None`` on a side means unbounded."""

    lower: Optional[float] = None
    upper: Optional[float] = None

    def contains(self, value: float) -> bool:
        if self.lower is not None and value < self.lower:
            return False
        if self.upper is not None and value > self.upper:
            return False
        return True

    def is_empty(self) -> bool:
        """True when neither side carries a value."""
        return self.lower is None and self.upper is None

    def intersect(self, other: Bounds) -> Bounds:
        lower = _pick(self.lower, other.lower, max)
        upper = _pick(self.upper, other.upper, min)
        if lower is not None and upper is not None and lower > upper:
            return Bounds()
        return Bounds(lower, upper)

    def __str__(self) -> str:
        return f"[{_format_value(self.lower)}, {_format_value(self.upper)}]"


def _pick(a: Optional[float], b: Optional[float], op) -> Optional[float]:
    if a is not None and b is not None:
        return op(a, b)
    return a if a is not None else b


def _sort_key(b: Bounds) -> float:
    return b.lower if b.lower is not None else -math.inf


def _merge_if_overlapping(a: Bounds, b: Bounds) -> Optional[Bounds]:
    if a.intersect(b).is_empty():
        return None
    lower = min(a.lower, b.lower) if a.lower is not None and b.lower is not None else None
    upper = max(a.upper, b.upper) if a.upper is not None and b.upper is not None else None
    return Bounds(lower, upper)


def _squash(items: list[Bounds]) -> VecBounds:
    ordered = sorted(items, key=_sort_key)
    if not ordered:
        return VecBounds([])
    squashed: list[Bounds] = []
    current = ordered[0]
    for nxt in ordered[1:]:
        merged = _merge_if_overlapping(current, nxt)
        if merged is not None:
            current = merged
        else:
            squashed.append(current)
            current = nxt
    squashed.append(current)
    return VecBounds(squashed)


class VecBounds:
    """Sorted list of disjoint power bounds."""

    def __init__(self, bounds: Iterable[Bounds] = ()):
        self.bounds: list[Bounds] = sorted(bounds, key=_sort_key)

    @classmethod
    def single(cls, lower: float, upper: float) -> VecBounds:
        return cls([Bounds(lower, upper)])

    def __iter__(self) -> Iterator[Bounds]:
        return iter(self.bounds)

    def __len__(self) -> int:
        return len(self.bounds)

    def __getitem__(self, index: int) -> Bounds:
        return self.bounds[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VecBounds):
            return NotImplemented
        return self.bounds == other.bounds

    def __repr__(self) -> str:
        return f"VecBounds({self.bounds!r})"

    def __str__(self) -> str:
        if not self.bounds:
            return "[]"
        return ", ".join(str(b) for b in self.bounds)

    def contains(self, value: float) -> bool:
        return any(b.contains(value) for b in self.bounds)

    def clamp(self, value: float) -> float:
        """Pull ``value`` to the closest edge of the union when outside it."""
        if not self.bounds or self.contains(value):
            return value
        prev_upper: Optional[float] = None
        for b in self.bounds:
            if b.lower is not None and value < b.lower:
                # Equidistant ties go to the previous upper edge.
                if prev_upper is not None and abs(value - prev_upper) <= abs(b.lower - value):
                    return prev_upper
                return b.lower
            if b.upper is not None:
                prev_upper = b.upper
        return prev_upper if prev_upper is not None else value

    @staticmethod
    def sum_single(items: Iterable[VecBounds]) -> VecBounds:
        """Sum the first bucket of each container edge-wise.

        Empty containers are skipped; if nothing remains the result is empty.
        """
        lower = 0.0
        upper = 0.0
        seen = False
        for vb in items:
            if not vb.bounds:
                continue
            seen = True
            first = vb.bounds[0]
            if first.lower is not None:
                lower += first.lower
            if first.upper is not None:
                upper += first.upper
        if not seen:
            return VecBounds([])
        return VecBounds.single(lower, upper)

    def intersect(self, other: VecBounds) -> VecBounds:
        pieces = [
            piece
            for a in self.bounds
            for b in other.bounds
            if not (piece := a.intersect(b)).is_empty()
        ]
        return _squash(pieces)


@dataclass(frozen=True)
class _Augmentation:
    create_ts: datetime
    bounds: VecBounds
    lifetime: timedelta


class ComponentBounds:
    """Rated bounds with a queue of time-limited augmentations."""

    def __init__(self, rated: VecBounds):
        self._rated = rated
        self._augmented: deque[_Augmentation] = deque()

    @classmethod
    def from_rated(cls, lower: float, upper: float) -> ComponentBounds:
        return cls(VecBounds.single(lower, upper))

    def set_rated(self, lower: float, upper: float) -> None:
        self._rated = VecBounds.single(lower, upper)

    def rated_lower(self) -> float:
        if self._rated.bounds and self._rated.bounds[0].lower is not None:
            return self._rated.bounds[0].lower
        return 0.0

    def rated_upper(self) -> float:
        if self._rated.bounds and self._rated.bounds[0].upper is not None:
            return self._rated.bounds[0].upper
        return 0.0

    def add_augmentation(self, create_ts: datetime, bounds: VecBounds, lifetime: Seconds) -> None:
        self._augmented.append(_Augmentation(create_ts, bounds, _as_timedelta(lifetime)))

    def drop_expired(self, now: datetime) -> None:
        while self._augmented:
            front = self._augmented[0]
            ttl = max(front.lifetime, timedelta(0))
            if front.create_ts + ttl < now:
                self._augmented.popleft()
            else:
                break

    def effective(self) -> VecBounds:
        """Rated bounds intersected with every live augmentation."""
        out = VecBounds(self._rated.bounds)
        for aug in self._augmented:
            out = out.intersect(aug.bounds)
        return out

    def contains(self, value: float) -> bool:
        return self.effective().contains(value)

    def clamp(self, value: float) -> float:
        return self.effective().clamp(value)