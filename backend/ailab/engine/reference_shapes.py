"""Pre-selected reference shapes.

Picking one of these skips pixel analysis entirely: the stored descriptor is
reported at full confidence. A teaching shortcut, not a classification.
"""

from __future__ import annotations

from dataclasses import dataclass

from ailab.engine.results import ClassificationResult, ShapeDescriptor

_REFERENCE_CONFIDENCE = 100


@dataclass(frozen=True)
class ReferenceShape:
    key: str
    name: str
    emoji: str
    color: str
    descriptor: ShapeDescriptor


REFERENCE_SHAPES: dict[str, ReferenceShape] = {
    shape.key: shape
    for shape in (
        ReferenceShape(
            key="star",
            name="Star",
            emoji="⭐",
            color="#fbbf24",
            descriptor=ShapeDescriptor(roundness=0.2, symmetry=1.0, corners=10, closed=True),
        ),
        ReferenceShape(
            key="heart",
            name="Heart",
            emoji="❤️",
            color="#ef4444",
            descriptor=ShapeDescriptor(roundness=0.6, symmetry=1.0, corners=0, closed=True),
        ),
        ReferenceShape(
            key="diamond",
            name="Diamond",
            emoji="\U0001f48e",
            color="#a855f7",
            descriptor=ShapeDescriptor(roundness=0.0, symmetry=1.0, corners=4, closed=True),
        ),
        ReferenceShape(
            key="crescent",
            name="Crescent",
            emoji="\U0001f319",
            color="#f97316",
            descriptor=ShapeDescriptor(roundness=0.7, symmetry=0.3, corners=0, closed=True),
        ),
    )
}


def get_reference_shape(key: str) -> ReferenceShape:
    """Look up a reference shape by key (case-insensitive). Raises KeyError."""
    return REFERENCE_SHAPES[key.strip().lower()]


def reference_result(key: str) -> ClassificationResult:
    shape = get_reference_shape(key)
    return ClassificationResult(
        shape_name=shape.name,
        confidence=_REFERENCE_CONFIDENCE,
        descriptor=shape.descriptor,
    )
