"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class ImagePayload(BaseModel):
    """Either a data URL (canvas.toDataURL()) or a raw RGBA buffer (getImageData())."""

    image: str | None = Field(default=None, description="base64 image data URL (PNG, JPEG, ...)")
    width: int | None = Field(default=None, ge=0, description="Raw buffer width in pixels")
    height: int | None = Field(default=None, ge=0, description="Raw buffer height in pixels")
    rgba: str | None = Field(default=None, description="base64 of the raw RGBA buffer")

    @model_validator(mode="after")
    def _one_source(self) -> ImagePayload:
        has_raw = self.rgba is not None
        if (self.image is None) == (not has_raw):
            raise ValueError("Provide exactly one of 'image' or 'rgba'")
        if has_raw and (self.width is None or self.height is None):
            raise ValueError("'rgba' requires 'width' and 'height'")
        return self


class ClassifyRequest(ImagePayload):
    include_grid: bool = Field(default=False, description="Also return the sampled grid and outline")


class ContrastRequest(ImagePayload):
    gain: float = Field(default=1.5, ge=0.0, le=10.0, description="Brightness multiplier")


class BoxModel(BaseModel):
    x: float
    y: float
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)
    label: str = ""


class DetectionModel(BaseModel):
    bbox: tuple[float, float, float, float] = Field(..., description="(x, y, width, height)")
    label: str = Field(..., description="Detected class name")
    score: float = Field(default=0.0, ge=0.0, le=1.0)


class BoxScoreRequest(BaseModel):
    box: BoxModel
    detections: list[DetectionModel] = Field(default_factory=list)


class KeypointModel(BaseModel):
    part: str = Field(..., description="PoseNet part name, e.g. 'nose', 'leftWrist'")
    x: float
    y: float
    score: float = Field(default=0.0, ge=0.0, le=1.0)


class NoseTouchRequest(BaseModel):
    keypoints: list[KeypointModel] = Field(default_factory=list)
