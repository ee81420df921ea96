"""Scalar component inputs that are either a constant or computed on demand.

A meter's power or a solar inverter's sunlight percentage may be driven
by a callable. The callable is only invoked by :meth:`DynamicScalar.refresh`,
which the scheduler calls before each tick; ``tick`` itself just reads the
cached value.
"""

from __future__ import annotations

import logging
import math
import numbers
import threading
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

Source = Callable[[], Any]


class DynamicScalar:
    """A cached float, optionally re-resolved from a zero-argument callable."""

    def __init__(self, value: float, source: Optional[Source] = None):
        self._lock = threading.Lock()
        self._value = float(value)
        self._source = source

    @classmethod
    def constant(cls, value: float) -> DynamicScalar:
        """A pure constant; :meth:`refresh` does nothing."""
        return cls(value)

    @classmethod
    def from_callable(cls, source: Source, fallback: float) -> DynamicScalar:
        """A value computed by ``source`` on every refresh, ``fallback`` until then."""
        return cls(fallback, source)

    def get(self) -> float:
        with self._lock:
            return self._value

    def set(self, value: float) -> None:
        with self._lock:
            self._value = float(value)

    def is_dynamic(self) -> bool:
        return self._source is not None

    def refresh(self) -> None:
        """Re-resolve the source and update the cached value.

        Errors, non-numeric and non-finite results are logged and the
        previous value is kept.
        """
        if self._source is None:
            return
        try:
            result = self._source()
        except Exception as exc:  # a faulty curve must not break the tick loop
            logger.warning("DynamicScalar refresh error in %r: %s", self._source, exc)
            return
        if isinstance(result, bool) or not isinstance(result, numbers.Real):
            logger.warning(
                "DynamicScalar refresh: non-numeric result %r from %r", result, self._source
            )
            return
        value = float(result)
        if not math.isfinite(value):
            logger.warning(
                "DynamicScalar refresh: non-finite result %s from %r; keeping prior value",
                value,
                self._source,
            )
            return
        self.set(value)