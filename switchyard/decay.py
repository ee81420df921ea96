"""Smooth bound-decay curve used for SoC-protective derating."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SocProtect:
    """SoC limits and the width of the taper band (0 disables it)."""

    soc_lower_pct: float
    soc_upper_pct: float
    margin_pct: float


def soc_protected_bounds(
    rated_lower: float, rated_upper: float, soc: float, protect: SocProtect
) -> tuple[float, float]:
    """Taper the rated pair near both SoC limits.

    Charge (upper) tapers near ``soc_upper_pct``; discharge (lower)
    tapers near ``soc_lower_pct``.
    """
    if protect.margin_pct <= 0.0:
        return rated_lower, rated_upper

    upper = rated_upper
    if protect.soc_upper_pct - soc < protect.margin_pct:
        upper = rated_upper * bounded_exp_decay(
            protect.soc_upper_pct - protect.margin_pct, protect.soc_upper_pct, soc, 1.2, 0.3
        )

    lower = rated_lower
    if soc - protect.soc_lower_pct < protect.margin_pct:
        lower = rated_lower * bounded_exp_decay(
            protect.soc_lower_pct + protect.margin_pct, protect.soc_lower_pct, soc, 1.2, 0.3
        )

    return lower, upper


def bounded_exp_decay(
    start: float, stop: float, val: float, base: float = 1.2, min_val: float = 0.3
) -> float:
    """Multiplier tapering from 1 at ``start`` to about ``min_val`` near ``stop``, 0 beyond."""
    if start == stop:
        return 1.0 if val < start else 0.0
    base = max(base, 1.1)
    factor = 10.0 / (stop - start)
    stop_s = start + (stop - start) * factor
    val_s = start + (val - start) * factor
    shift = min_val - base ** (start - stop_s - 1.0)

    if val_s >= stop_s:
        return 0.0
    if val_s < start:
        return 1.0
    return shift + (1.0 - shift) * base ** (start - val_s)