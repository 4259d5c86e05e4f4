"""Doodle shape classifier — public entry points.

    result = classify(bitmap)
    result.shape_name, result.confidence, result.descriptor

Pure: the same bitmap always yields the same result, and nothing is kept
between calls. Never raises for a valid Bitmap; anything that goes wrong
inside a stage degrades to the unknown result.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from ailab.engine.context import ShapeContext
from ailab.engine.layer1.t1_01_roundness import compute_roundness
from ailab.engine.layer1.t1_02_symmetry import compute_symmetry
from ailab.engine.layer1.t1_03_corner_detection import count_corners
from ailab.engine.layer1.t1_04_closedness import is_closed
from ailab.engine.pipeline import create_pipeline
from ailab.engine.results import ZERO_DESCRIPTOR, ClassificationResult, ShapeDescriptor
from ailab.engine.thresholds import MIN_OUTLINE_POINTS
from ailab.utils.bitmap import Bitmap

logger = logging.getLogger(__name__)

_INK_CHAR = "#"
_BLANK_CHAR = "."


def analyze(bitmap: Bitmap) -> ShapeContext:
    """Run the full pipeline and return the context (grid, outline, features)."""
    ctx = ShapeContext(bitmap=bitmap)
    return create_pipeline().run(ctx)


def classify(bitmap: Bitmap) -> ClassificationResult:
    return result_from_context(analyze(bitmap))


def result_from_context(ctx: ShapeContext) -> ClassificationResult:
    if ctx.errors or ctx.result is None:
        logger.warning("Classification degraded to unknown: %s", ctx.errors or "no result")
        return ClassificationResult.unknown()
    logger.info(
        "Classified %dx%d bitmap as %s (%d%%) from %d outline points",
        ctx.bitmap.width if ctx.bitmap else 0,
        ctx.bitmap.height if ctx.bitmap else 0,
        ctx.result.shape_name,
        ctx.result.confidence,
        len(ctx.outline),
    )
    return ctx.result


def describe(outline: NDArray[np.float64], grid: NDArray[np.bool_]) -> ShapeDescriptor:
    """Compute the descriptor for an outline list and its sampled grid directly."""
    points = np.asarray(outline, dtype=np.float64).reshape(-1, 2)
    if len(points) < MIN_OUTLINE_POINTS:
        return ZERO_DESCRIPTOR
    return ShapeDescriptor(
        roundness=compute_roundness(points),
        symmetry=compute_symmetry(np.asarray(grid, dtype=bool)),
        corners=count_corners(points),
        closed=is_closed(points),
    )


def grid_to_text(grid: NDArray[np.bool_]) -> str:
    """Render the sampled grid one row per line: # ink, . blank."""
    return "\n".join(
        "".join(_INK_CHAR if cell else _BLANK_CHAR for cell in row) for row in grid
    )
