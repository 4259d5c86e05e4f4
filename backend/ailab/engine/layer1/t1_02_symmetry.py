"""T1.02 — Mirror Symmetry.

Count equal ink/blank pairs mirrored across the vertical and the horizontal
midline of the sampled grid, half a point each, normalised by grid area.
A perfectly symmetric grid scores about 0.5, not 1.0.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from ailab.engine.context import ShapeContext
from ailab.engine.registry import Layer, transform

_PAIR_WEIGHT = 0.5


def compute_symmetry(grid: NDArray[np.bool_]) -> float:
    height, width = grid.shape
    if width == 0 or height == 0:
        return 0.0

    # Columns x < W/2 against W-1-x; an odd middle column meets itself
    half_w = math.ceil(width / 2)
    left_right = np.count_nonzero(grid[:, :half_w] == grid[:, ::-1][:, :half_w])

    half_h = math.ceil(height / 2)
    top_bottom = np.count_nonzero(grid[:half_h, :] == grid[::-1, :][:half_h, :])

    score = _PAIR_WEIGHT * (left_right + top_bottom)
    return float(score / (width * height))


@transform(
    id="T1.02",
    layer=Layer.DESCRIPTORS,
    dependencies=["T0.01", "T0.02"],
    description="Score horizontal + vertical mirror symmetry of the ink grid",
)
def symmetry(ctx: ShapeContext) -> None:
    if not ctx.has_enough_outline:
        ctx.features["symmetry"] = 0.0
        return
    ctx.features["symmetry"] = compute_symmetry(ctx.grid)
