"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ailab.models.requests import KeypointModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class DescriptorModel(BaseModel):
    roundness: float = 0.0
    symmetry: float = 0.0
    corners: int = 0
    closed: bool = False


class GridDebug(BaseModel):
    rows: int = 0
    cols: int = 0
    ascii_grid: str = ""
    outline: list[tuple[float, float]] = Field(default_factory=list)


class ClassificationResponse(BaseModel):
    shape_name: str
    confidence: int = Field(..., ge=0, le=100)
    descriptor: DescriptorModel
    grid: GridDebug | None = None
    processing_time_ms: float = 0.0
    errors: dict[str, str] = Field(default_factory=dict)


class ReferenceShapeResponse(BaseModel):
    key: str
    name: str
    emoji: str
    color: str
    descriptor: DescriptorModel


class BoxScoreResponse(BaseModel):
    points: int = 0
    iou: float = 0.0
    verdict: str = "miss"
    matched_label: str | None = None


class SegmentModel(BaseModel):
    start: KeypointModel
    end: KeypointModel


class NoseTouchResponse(BaseModel):
    touched: bool = False
    segments: list[SegmentModel] = Field(default_factory=list)


class ContrastResponse(BaseModel):
    image: str
    width: int
    height: int
