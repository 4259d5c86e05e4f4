"""Immutable classifier outputs."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ShapeName(str, enum.Enum):
    TRIANGLE = "Triangle"
    SQUARE = "Square"
    RECTANGLE = "Rectangle"
    CIRCLE = "Circle"
    LINE = "Line"
    COMPLEX_POLYGON = "Complex Polygon"
    ROUNDED_CIRCLE = "Circle (rounded)"
    RECTANGULAR = "Rectangular Shape"
    APPROXIMATE_TRIANGLE = "Triangle (approximate)"
    GEOMETRIC = "Geometric Shape"
    UNKNOWN = "Unknown Shape"


@dataclass(frozen=True)
class ShapeDescriptor:
    roundness: float = 0.0
    # Heuristic magnitude, not a calibrated probability.
    symmetry: float = 0.0
    corners: int = 0
    closed: bool = False


ZERO_DESCRIPTOR = ShapeDescriptor()


@dataclass(frozen=True)
class ClassificationResult:
    shape_name: str
    confidence: int
    descriptor: ShapeDescriptor

    @classmethod
    def unknown(cls) -> ClassificationResult:
        return cls(shape_name=ShapeName.UNKNOWN.value, confidence=0, descriptor=ZERO_DESCRIPTOR)
