"""T1.01 — Roundness.

1 - variance/mean² of outline-to-centroid distances. A perfect circle scores
1.0; a straight stroke settles near 2/3 (uniform distances on [0, L/2]).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from ailab.engine.context import ShapeContext
from ailab.engine.registry import Layer, transform
from ailab.utils.geometry import centroid_distances


def compute_roundness(points: NDArray[np.float64]) -> float:
    if len(points) == 0:
        return 0.0
    dists = centroid_distances(points)
    avg = float(np.mean(dists))
    if avg == 0:
        return 0.0
    variance = float(np.mean((dists - avg) ** 2))
    return max(0.0, 1.0 - variance / (avg * avg))


@transform(
    id="T1.01",
    layer=Layer.DESCRIPTORS,
    dependencies=["T0.02"],
    description="Compute roundness from centroid distance spread",
)
def roundness(ctx: ShapeContext) -> None:
    if not ctx.has_enough_outline:
        ctx.features["roundness"] = 0.0
        return
    ctx.features["roundness"] = compute_roundness(ctx.outline)
