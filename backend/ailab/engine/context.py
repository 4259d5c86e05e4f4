"""ShapeContext — the single mutable state object flowing through all transforms.

Layer 0 fills grid/outline, Layer 1 fills features, Layer 2 sets result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from ailab.engine.results import ClassificationResult, ShapeDescriptor
from ailab.engine.thresholds import MIN_OUTLINE_POINTS
from ailab.utils.bitmap import Bitmap


@dataclass
class ShapeContext:
    """Shared state for one classification request."""

    bitmap: Bitmap | None = None
    # Sampled ink mask: rows x cols, True = ink
    grid: NDArray[np.bool_] = field(default_factory=lambda: np.zeros((0, 0), dtype=bool))
    # Outline points in bitmap coordinates, Nx2 (x, y), row-major scan order
    outline: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))
    # Descriptor values keyed by name (roundness, symmetry, corners, closed, ...)
    features: dict[str, Any] = field(default_factory=dict)
    result: ClassificationResult | None = None

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def has_enough_outline(self) -> bool:
        return len(self.outline) >= MIN_OUTLINE_POINTS

    def descriptor(self) -> ShapeDescriptor:
        return ShapeDescriptor(
            roundness=float(self.features.get("roundness", 0.0)),
            symmetry=float(self.features.get("symmetry", 0.0)),
            corners=int(self.features.get("corners", 0)),
            closed=bool(self.features.get("closed", False)),
        )
