"""Bounding-box game — score a player's box against detector boxes by IoU.

Boxes are (x, y, width, height) in image pixels, the format object detectors
return for the webcam frame.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from shapely.geometry import box as shapely_box

from ailab.utils.math_helpers import round_half_up

logger = logging.getLogger(__name__)

# IoU above this = a proper match, scored by overlap.
_IOU_EXCELLENT = 0.5
# IoU above this = close enough for consolation points.
_IOU_CLOSE = 0.3
_CLOSE_POINTS = 10


@dataclass(frozen=True)
class Box:
    x: float
    y: float
    width: float
    height: float
    label: str = ""

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Detection:
    bbox: tuple[float, float, float, float]
    label: str
    score: float = 0.0

    def as_box(self) -> Box:
        x, y, w, h = self.bbox
        return Box(x=x, y=y, width=w, height=h, label=self.label)


@dataclass(frozen=True)
class BoxScore:
    points: int
    iou: float
    verdict: str  # excellent, close, miss
    matched_label: str | None = None


def iou(a: Box, b: Box) -> float:
    """Intersection over union of two axis-aligned boxes. 0.0 if either box is empty."""
    if min(a.width, a.height, b.width, b.height) <= 0:
        return 0.0
    pa = shapely_box(a.x, a.y, a.x + a.width, a.y + a.height)
    pb = shapely_box(b.x, b.y, b.x + b.width, b.y + b.height)
    intersection = pa.intersection(pb).area
    union = a.area + b.area - intersection
    return float(intersection / union)


def score_box(user_box: Box, detections: list[Detection]) -> BoxScore:
    """Find the detection the player's box overlaps most and award points."""
    best_iou = 0.0
    best: Detection | None = None
    for detection in detections:
        value = iou(user_box, detection.as_box())
        if value > best_iou:
            best_iou = value
            best = detection

    if best is not None and best_iou > _IOU_EXCELLENT:
        result = BoxScore(round_half_up(best_iou * 100), best_iou, "excellent", best.label)
    elif best is not None and best_iou > _IOU_CLOSE:
        result = BoxScore(_CLOSE_POINTS, best_iou, "close", best.label)
    else:
        result = BoxScore(0, best_iou, "miss", None)

    logger.debug("Box %r scored %s (IoU %.3f)", user_box.label, result.verdict, best_iou)
    return result
