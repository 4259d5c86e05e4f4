"""T0.01 — Pixel Sampling.

Walk the bitmap at a fixed stride and threshold the unweighted RGB mean:
dark = ink. Alpha is ignored (the drawing canvas is pre-filled white).
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from ailab.engine.context import ShapeContext
from ailab.engine.registry import Layer, transform
from ailab.engine.thresholds import LUMINANCE_THRESHOLD, SAMPLE_STRIDE
from ailab.utils.bitmap import Bitmap


def sample_grid(
    bitmap: Bitmap,
    stride: int = SAMPLE_STRIDE,
    threshold: int = LUMINANCE_THRESHOLD,
) -> NDArray[np.bool_]:
    """Return a ceil(h/stride) x ceil(w/stride) boolean ink mask."""
    rows = math.ceil(bitmap.height / stride)
    cols = math.ceil(bitmap.width / stride)
    if bitmap.pixel_count == 0:
        return np.zeros((rows, cols), dtype=bool)

    rgb = bitmap.as_array()[::stride, ::stride, :3].astype(np.uint16)
    # (r + g + b) / 3 < threshold, kept in integers
    return rgb.sum(axis=2) < 3 * threshold


@transform(
    id="T0.01",
    layer=Layer.SAMPLING,
    description="Sample bitmap into a boolean ink grid",
)
def pixel_sampling(ctx: ShapeContext) -> None:
    if ctx.bitmap is None:
        return
    ctx.grid = sample_grid(ctx.bitmap)
