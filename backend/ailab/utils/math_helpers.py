"""Math helpers — rounding, angle normalisation, clamping. No engine imports."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 → 3, -2.5 → -2).

    Python's round() uses banker's rounding; scores shown to players must not
    flip between neighbouring integers depending on parity.
    """
    return int(math.floor(value + 0.5))


def normalize_angle(angle: float) -> float:
    """Wrap an angle in radians into (-π, π]."""
    wrapped = math.fmod(angle + math.pi, 2 * math.pi)
    if wrapped <= 0:
        wrapped += 2 * math.pi
    return wrapped - math.pi


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
