"""POST /api/vision/contrast — grayscale + contrast view of a webcam frame."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ailab.api.shapes import payload_to_bitmap
from ailab.config import Settings
from ailab.dependencies import get_settings
from ailab.models.requests import ContrastRequest
from ailab.models.responses import ContrastResponse
from ailab.utils.bitmap import encode_data_url
from ailab.vision.filters import contrast_filter

router = APIRouter(prefix="/vision")


@router.post("/contrast", response_model=ContrastResponse)
async def contrast(
    req: ContrastRequest,
    settings: Settings = Depends(get_settings),
) -> ContrastResponse:
    bitmap = payload_to_bitmap(req, settings)
    if bitmap.pixel_count == 0:
        raise HTTPException(status_code=422, detail="Image is empty")
    filtered = contrast_filter(bitmap, gain=req.gain)
    return ContrastResponse(
        image=encode_data_url(filtered),
        width=filtered.width,
        height=filtered.height,
    )
