"""Three-phase helpers used by meters and inverters to split totals per phase."""

from __future__ import annotations

import math

PhaseTriple = tuple[float, float, float]


def split_per_phase(total_w: float, voltage: PhaseTriple) -> PhaseTriple:
    """Voltage-weighted split of a total across three phases.

    Phase ``i`` gets ``total * V_i / (V1 + V2 + V3)``; all zeros when the
    voltages sum to zero.
    """
    v_sum = sum(voltage)
    if v_sum == 0.0:
        return (0.0, 0.0, 0.0)
    v1, v2, v3 = voltage
    return (total_w * v1 / v_sum, total_w * v2 / v_sum, total_w * v3 / v_sum)


def _apparent_current(p: float, q: float, v: float) -> float:
    if v == 0.0:
        return 0.0
    return math.hypot(p, q) / v


def per_phase_apparent_current(p: PhaseTriple, q: PhaseTriple, v: PhaseTriple) -> PhaseTriple:
    """Per-phase apparent current ``sqrt(P^2 + Q^2) / V``; zero where ``V`` is zero."""
    a, b, c = (_apparent_current(pi, qi, vi) for pi, qi, vi in zip(p, q, v))
    return (a, b, c)