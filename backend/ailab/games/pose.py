"""Magic-mirror helpers over pose keypoints (PoseNet part names).

The pose estimator itself runs in the browser; these functions only read the
keypoints it reports.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Wrist within 60px of the nose = touching it.
NOSE_TOUCH_DISTANCE = 60.0
# Nose must be detected with more than this confidence.
NOSE_MIN_SCORE = 0.5
# Keypoints at or below this confidence are not drawn.
DRAW_MIN_SCORE = 0.3

SKELETON: list[tuple[str, str]] = [
    ("nose", "leftEye"),
    ("leftEye", "leftEar"),
    ("nose", "rightEye"),
    ("rightEye", "rightEar"),
    ("nose", "leftShoulder"),
    ("leftShoulder", "leftElbow"),
    ("leftElbow", "leftWrist"),
    ("nose", "rightShoulder"),
    ("rightShoulder", "rightElbow"),
    ("rightElbow", "rightWrist"),
    ("leftShoulder", "rightShoulder"),
    ("leftShoulder", "leftHip"),
    ("rightShoulder", "rightHip"),
    ("leftHip", "rightHip"),
    ("leftHip", "leftKnee"),
    ("leftKnee", "leftAnkle"),
    ("rightHip", "rightKnee"),
    ("rightKnee", "rightAnkle"),
]


@dataclass(frozen=True)
class Keypoint:
    part: str
    x: float
    y: float
    score: float


def _by_part(keypoints: list[Keypoint]) -> dict[str, Keypoint]:
    # First occurrence wins, like Array.find on the estimator output
    found: dict[str, Keypoint] = {}
    for kp in keypoints:
        found.setdefault(kp.part, kp)
    return found


def detect_nose_touch(
    keypoints: list[Keypoint],
    threshold: float = NOSE_TOUCH_DISTANCE,
) -> bool:
    """True when either wrist is within ``threshold`` pixels of a confident nose.

    Nose and both wrists must be present, whatever their scores.
    """
    parts = _by_part(keypoints)
    nose = parts.get("nose")
    left = parts.get("leftWrist")
    right = parts.get("rightWrist")
    if nose is None or left is None or right is None:
        return False

    left_distance = math.hypot(nose.x - left.x, nose.y - left.y)
    right_distance = math.hypot(nose.x - right.x, nose.y - right.y)
    return (left_distance < threshold or right_distance < threshold) and nose.score > NOSE_MIN_SCORE


def skeleton_segments(keypoints: list[Keypoint]) -> list[tuple[Keypoint, Keypoint]]:
    """Skeleton bones whose two endpoints are both confident enough to draw."""
    parts = _by_part(keypoints)
    segments = []
    for start_part, end_part in SKELETON:
        start = parts.get(start_part)
        end = parts.get(end_part)
        if start and end and start.score > DRAW_MIN_SCORE and end.score > DRAW_MIN_SCORE:
            segments.append((start, end))
    return segments
