"""T1.03 — Corner Detection.

Slide a 4-point window along the outline list. The two turn angles inside
the window are summed; above 60° with enough positions since the previous
corner → corner. The list is in scan order, so "turns" include the jumps
between row ends; counts are only meaningful relative to each other.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from ailab.engine.context import ShapeContext
from ailab.engine.registry import Layer, transform
from ailab.engine.thresholds import (
    CORNER_ANGLE,
    CORNER_COOLDOWN,
    CORNER_FALLBACK_DIVISOR,
    CORNER_FALLBACK_MIN_POINTS,
)
from ailab.utils.math_helpers import normalize_angle, round_half_up


def _heading(a: NDArray[np.float64], b: NDArray[np.float64]) -> float:
    return math.atan2(b[1] - a[1], b[0] - a[0])


def count_corners(points: NDArray[np.float64]) -> int:
    n = len(points)
    corners = 0
    last_corner = 0

    # The window never ends on the final point
    for i in range(3, n - 1):
        h1 = _heading(points[i - 3], points[i - 2])
        h2 = _heading(points[i - 2], points[i - 1])
        h3 = _heading(points[i - 1], points[i])

        turn = abs(normalize_angle(h2 - h1)) + abs(normalize_angle(h3 - h2))
        if turn > CORNER_ANGLE and i - last_corner > CORNER_COOLDOWN:
            corners += 1
            last_corner = i

    # Approximate: smooth-looking outline of some length still gets a corner estimate
    if corners == 0 and n > CORNER_FALLBACK_MIN_POINTS:
        corners = max(1, round_half_up(n / CORNER_FALLBACK_DIVISOR))

    return corners


@transform(
    id="T1.03",
    layer=Layer.DESCRIPTORS,
    dependencies=["T0.02"],
    description="Count direction changes along the outline list",
)
def corner_detection(ctx: ShapeContext) -> None:
    if not ctx.has_enough_outline:
        ctx.features["corners"] = 0
        return
    ctx.features["corners"] = count_corners(ctx.outline)
