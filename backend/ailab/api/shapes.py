"""POST /api/shapes/classify, GET /api/shapes/reference — doodle shape game."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends, HTTPException
from PIL import Image

from ailab.config import Settings
from ailab.dependencies import get_settings
from ailab.engine.classifier import analyze, grid_to_text, result_from_context
from ailab.engine.reference_shapes import REFERENCE_SHAPES, get_reference_shape, reference_result
from ailab.engine.results import ClassificationResult, ShapeDescriptor
from ailab.models.requests import ClassifyRequest, ImagePayload
from ailab.models.responses import (
    ClassificationResponse,
    DescriptorModel,
    GridDebug,
    ReferenceShapeResponse,
)
from ailab.utils.bitmap import Bitmap, decode_rgba, image_to_bitmap, open_data_url

router = APIRouter(prefix="/shapes")


def _too_large(pixels: int) -> HTTPException:
    return HTTPException(status_code=413, detail=f"Bitmap too large: {pixels} pixels")


def payload_to_bitmap(payload: ImagePayload, settings: Settings) -> Bitmap:
    """Decode a request image, mapping bad input to 422 and oversize to 413.

    Size is checked before any pixel is decoded: from the declared dimensions
    for raw RGBA, from the image header for data URLs.
    """
    limit = settings.max_bitmap_pixels
    try:
        if payload.rgba is not None:
            declared = payload.width * payload.height
            if declared > limit:
                raise _too_large(declared)
            return decode_rgba(payload.width, payload.height, payload.rgba)

        with open_data_url(payload.image) as image:
            pixels = image.width * image.height
            if pixels > limit:
                raise _too_large(pixels)
            return image_to_bitmap(image)
    except Image.DecompressionBombError as e:
        raise HTTPException(status_code=413, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


def _descriptor_model(descriptor: ShapeDescriptor) -> DescriptorModel:
    return DescriptorModel(
        roundness=round(descriptor.roundness, 4),
        symmetry=round(descriptor.symmetry, 4),
        corners=descriptor.corners,
        closed=descriptor.closed,
    )


def _classification_response(result: ClassificationResult, **extra) -> ClassificationResponse:
    return ClassificationResponse(
        shape_name=result.shape_name,
        confidence=result.confidence,
        descriptor=_descriptor_model(result.descriptor),
        **extra,
    )


@router.post("/classify", response_model=ClassificationResponse)
async def classify_drawing(
    req: ClassifyRequest,
    settings: Settings = Depends(get_settings),
) -> ClassificationResponse:
    start = time.perf_counter()
    bitmap = payload_to_bitmap(req, settings)

    ctx = analyze(bitmap)
    result = result_from_context(ctx)

    grid = None
    if req.include_grid:
        rows, cols = ctx.grid.shape
        grid = GridDebug(
            rows=rows,
            cols=cols,
            ascii_grid=grid_to_text(ctx.grid),
            outline=[(float(x), float(y)) for x, y in ctx.outline],
        )

    elapsed = (time.perf_counter() - start) * 1000
    return _classification_response(
        result,
        grid=grid,
        processing_time_ms=round(elapsed, 1),
        errors=ctx.errors,
    )


@router.get("/reference", response_model=list[ReferenceShapeResponse])
async def list_reference_shapes() -> list[ReferenceShapeResponse]:
    return [
        ReferenceShapeResponse(
            key=shape.key,
            name=shape.name,
            emoji=shape.emoji,
            color=shape.color,
            descriptor=_descriptor_model(shape.descriptor),
        )
        for shape in REFERENCE_SHAPES.values()
    ]


@router.get("/reference/{key}", response_model=ClassificationResponse)
async def classify_reference_shape(key: str) -> ClassificationResponse:
    try:
        get_reference_shape(key)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=f"Unknown reference shape: {key}") from e
    return _classification_response(reference_result(key))
