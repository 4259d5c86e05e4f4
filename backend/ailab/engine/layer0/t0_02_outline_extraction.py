"""T0.02 — Outline Extraction.

Ink cells with at least one blank 4-neighbour, in row-major scan order.
Out-of-bounds neighbours do not count as blank. The list is NOT walked along
the boundary; corner detection downstream sees scan order.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from ailab.engine.context import ShapeContext
from ailab.engine.registry import Layer, transform
from ailab.engine.thresholds import SAMPLE_STRIDE


def extract_outline(grid: NDArray[np.bool_], stride: int = SAMPLE_STRIDE) -> NDArray[np.float64]:
    """Return Nx2 (x, y) outline points scaled back to bitmap coordinates."""
    if grid.size == 0:
        return np.empty((0, 2))

    # Pad with ink so the canvas edge never reads as a blank neighbour
    padded = np.pad(grid, 1, mode="constant", constant_values=True)
    blank_neighbour = (
        ~padded[:-2, 1:-1]  # up
        | ~padded[2:, 1:-1]  # down
        | ~padded[1:-1, :-2]  # left
        | ~padded[1:-1, 2:]  # right
    )
    rows, cols = np.nonzero(grid & blank_neighbour)
    return np.column_stack([cols * stride, rows * stride]).astype(np.float64)


@transform(
    id="T0.02",
    layer=Layer.SAMPLING,
    dependencies=["T0.01"],
    description="Extract outline points (ink cells bordering blank)",
)
def outline_extraction(ctx: ShapeContext) -> None:
    ctx.outline = extract_outline(ctx.grid)
