"""POST /api/games/* — bounding-box game and magic mirror."""

from __future__ import annotations

from fastapi import APIRouter

from ailab.games.bounding_box import Box, Detection, score_box
from ailab.games.pose import Keypoint, detect_nose_touch, skeleton_segments
from ailab.models.requests import BoxScoreRequest, KeypointModel, NoseTouchRequest
from ailab.models.responses import BoxScoreResponse, NoseTouchResponse, SegmentModel

router = APIRouter(prefix="/games")


@router.post("/box-score", response_model=BoxScoreResponse)
async def box_score(req: BoxScoreRequest) -> BoxScoreResponse:
    user_box = Box(**req.box.model_dump())
    detections = [Detection(bbox=d.bbox, label=d.label, score=d.score) for d in req.detections]
    result = score_box(user_box, detections)
    return BoxScoreResponse(
        points=result.points,
        iou=round(result.iou, 4),
        verdict=result.verdict,
        matched_label=result.matched_label,
    )


def _keypoint_model(kp: Keypoint) -> KeypointModel:
    return KeypointModel(part=kp.part, x=kp.x, y=kp.y, score=kp.score)


@router.post("/nose-touch", response_model=NoseTouchResponse)
async def nose_touch(req: NoseTouchRequest) -> NoseTouchResponse:
    keypoints = [Keypoint(part=k.part, x=k.x, y=k.y, score=k.score) for k in req.keypoints]
    return NoseTouchResponse(
        touched=detect_nose_touch(keypoints),
        segments=[
            SegmentModel(start=_keypoint_model(start), end=_keypoint_model(end))
            for start, end in skeleton_segments(keypoints)
        ],
    )
