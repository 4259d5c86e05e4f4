"""T1.04 — Closedness.

Closed if the first and last outline points are near each other relative to
the shape size, or if the point three-quarters through the list comes back
near the start (hand-drawn loops rarely end on their first pixel).
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from ailab.engine.context import ShapeContext
from ailab.engine.registry import Layer, transform
from ailab.engine.thresholds import (
    CLOSURE_MIN_DISTANCE,
    CLOSURE_SIZE_FRACTION,
    LOOP_MIN_POINTS,
    LOOP_POSITION,
    LOOP_SIZE_FRACTION,
)
from ailab.utils.geometry import distance, span


def is_closed(points: NDArray[np.float64]) -> bool:
    n = len(points)
    if n == 0:
        return False

    start = points[0]
    size = span(points)
    end_distance = distance(start, points[-1])
    if end_distance < max(CLOSURE_MIN_DISTANCE, size * CLOSURE_SIZE_FRACTION):
        return True

    if n > LOOP_MIN_POINTS:
        loop_point = points[math.floor(n * LOOP_POSITION)]
        return distance(loop_point, start) < size * LOOP_SIZE_FRACTION

    return False


@transform(
    id="T1.04",
    layer=Layer.DESCRIPTORS,
    dependencies=["T0.02"],
    description="Decide whether the outline forms a closed loop",
)
def closedness(ctx: ShapeContext) -> None:
    if not ctx.has_enough_outline:
        ctx.features["closed"] = False
        return
    ctx.features["closed"] = is_closed(ctx.outline)
