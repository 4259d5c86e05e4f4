"""T2.01 — Shape Determination.

Ordered rules over the descriptor, first match wins:
  2 <= corners <= 6 AND roundness < 0.8                    → Triangle
  symmetry > 0.4 AND 3 <= corners <= 8 AND roundness < 0.7 → Square / Rectangle
  roundness > 0.75 AND corners < 3                         → Circle
  corners < 2 AND roundness < 0.5                          → Line
  corners > 6 AND roundness < 0.6                          → Complex Polygon
then a looser fallback cascade. The Triangle rule shadows Square for
3-5 corners; the order is kept as tuned.
"""

from __future__ import annotations

from ailab.engine.context import ShapeContext
from ailab.engine.registry import Layer, transform
from ailab.engine.results import ClassificationResult, ShapeDescriptor, ShapeName
from ailab.utils.math_helpers import clamp, round_half_up

# Triangle
_TRI_CORNERS = (2, 6)
_TRI_MAX_ROUNDNESS = 0.8
_TRI_BASE_FLOOR = 70
_TRI_IDEAL_CORNERS = 3
_TRI_PENALTY_PER_CORNER = 15
_TRI_CLOSED_BONUS = 10
_TRI_SYMMETRY_MIN = 0.3
_TRI_SYMMETRY_BONUS = 5

# Square / Rectangle
_QUAD_MIN_SYMMETRY = 0.4
_QUAD_CORNERS = (3, 8)
_QUAD_MAX_ROUNDNESS = 0.7
_SQUARE_MAX_CORNERS = 5
_QUAD_CLOSED_BONUS = 15
_QUAD_EXACT_CORNERS = 4
_QUAD_EXACT_BONUS = 10

# Circle
_CIRCLE_MIN_ROUNDNESS = 0.75
_CIRCLE_MAX_CORNERS = 3  # exclusive
_CIRCLE_CLOSED_BONUS = 10
_CIRCLE_SYMMETRY_MIN = 0.5
_CIRCLE_SYMMETRY_BONUS = 5

# Line
_LINE_MAX_CORNERS = 2  # exclusive
_LINE_MAX_ROUNDNESS = 0.5
_LINE_CONFIDENCE = 80

# Complex polygon
_POLY_MIN_CORNERS = 6  # exclusive
_POLY_MAX_ROUNDNESS = 0.6
_POLY_POINTS_PER_CORNER = 8
_POLY_MAX_CONFIDENCE = 80

# Fallback cascade
_FALLBACK_ROUND_MIN = 0.7
_FALLBACK_ROUND_CORNER_PENALTY = 5
_FALLBACK_RECT_MIN_SYMMETRY = 0.5
_FALLBACK_TRI_CORNERS = (2, 5)
_FALLBACK_TRI_BASE = 80
_FALLBACK_TRI_FLOOR = 50
_FALLBACK_TRI_PENALTY_PER_CORNER = 10
_GENERIC_FLOOR = 40
_GENERIC_SCALE = 60


def _match_rules(d: ShapeDescriptor) -> tuple[ShapeName, float] | None:
    if _TRI_CORNERS[0] <= d.corners <= _TRI_CORNERS[1] and d.roundness < _TRI_MAX_ROUNDNESS:
        confidence = max(
            _TRI_BASE_FLOOR,
            100 - abs(d.corners - _TRI_IDEAL_CORNERS) * _TRI_PENALTY_PER_CORNER,
        )
        if d.closed:
            confidence += _TRI_CLOSED_BONUS
        if d.symmetry > _TRI_SYMMETRY_MIN:
            confidence += _TRI_SYMMETRY_BONUS
        return ShapeName.TRIANGLE, confidence

    if (
        d.symmetry > _QUAD_MIN_SYMMETRY
        and _QUAD_CORNERS[0] <= d.corners <= _QUAD_CORNERS[1]
        and d.roundness < _QUAD_MAX_ROUNDNESS
    ):
        name = ShapeName.SQUARE if d.corners <= _SQUARE_MAX_CORNERS else ShapeName.RECTANGLE
        confidence = round_half_up(d.symmetry * 100)
        if d.closed:
            confidence += _QUAD_CLOSED_BONUS
        if d.corners == _QUAD_EXACT_CORNERS:
            confidence += _QUAD_EXACT_BONUS
        return name, confidence

    if d.roundness > _CIRCLE_MIN_ROUNDNESS and d.corners < _CIRCLE_MAX_CORNERS:
        confidence = round_half_up(d.roundness * 100)
        if d.closed:
            confidence += _CIRCLE_CLOSED_BONUS
        if d.symmetry > _CIRCLE_SYMMETRY_MIN:
            confidence += _CIRCLE_SYMMETRY_BONUS
        return ShapeName.CIRCLE, confidence

    if d.corners < _LINE_MAX_CORNERS and d.roundness < _LINE_MAX_ROUNDNESS:
        return ShapeName.LINE, _LINE_CONFIDENCE

    if d.corners > _POLY_MIN_CORNERS and d.roundness < _POLY_MAX_ROUNDNESS:
        return ShapeName.COMPLEX_POLYGON, min(_POLY_MAX_CONFIDENCE, d.corners * _POLY_POINTS_PER_CORNER)

    return None


def _fallback(d: ShapeDescriptor) -> tuple[ShapeName, float]:
    if d.roundness > _FALLBACK_ROUND_MIN:
        return (
            ShapeName.ROUNDED_CIRCLE,
            round_half_up(d.roundness * 100 - d.corners * _FALLBACK_ROUND_CORNER_PENALTY),
        )
    if d.symmetry > _FALLBACK_RECT_MIN_SYMMETRY:
        return ShapeName.RECTANGULAR, round_half_up(d.symmetry * 100)
    if _FALLBACK_TRI_CORNERS[0] <= d.corners <= _FALLBACK_TRI_CORNERS[1]:
        return (
            ShapeName.APPROXIMATE_TRIANGLE,
            max(
                _FALLBACK_TRI_FLOOR,
                _FALLBACK_TRI_BASE - abs(d.corners - _TRI_IDEAL_CORNERS) * _FALLBACK_TRI_PENALTY_PER_CORNER,
            ),
        )
    return ShapeName.GEOMETRIC, max(_GENERIC_FLOOR, (d.roundness + d.symmetry) * _GENERIC_SCALE)


def determine_shape(descriptor: ShapeDescriptor) -> ClassificationResult:
    """Map a descriptor to a named shape with a 0-100 confidence."""
    name, confidence = _match_rules(descriptor) or _fallback(descriptor)
    return ClassificationResult(
        shape_name=name.value,
        confidence=round_half_up(clamp(confidence, 0, 100)),
        descriptor=descriptor,
    )


@transform(
    id="T2.01",
    layer=Layer.CLASSIFICATION,
    dependencies=["T1.01", "T1.02", "T1.03", "T1.04"],
    description="Apply ordered shape rules to the descriptor",
)
def shape_determination(ctx: ShapeContext) -> None:
    if not ctx.has_enough_outline:
        ctx.result = ClassificationResult.unknown()
        return
    ctx.result = determine_shape(ctx.descriptor())
