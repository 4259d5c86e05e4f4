"""RGBA bitmap container and decoders (data URL, raw base64 RGBA).

A bitmap is what a browser canvas hands back from getImageData(): 4 bytes per
pixel, row-major, no padding.
"""

from __future__ import annotations

import base64
import binascii
import io
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from PIL import Image, UnidentifiedImageError

_CHANNELS = 4
_DATA_URL_PREFIX = "data:"


@dataclass(frozen=True)
class Bitmap:
    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Bitmap dimensions must be non-negative, got {self.width}x{self.height}")
        expected = self.width * self.height * _CHANNELS
        if len(self.data) != expected:
            raise ValueError(
                f"RGBA buffer has {len(self.data)} bytes, expected {expected} "
                f"for {self.width}x{self.height}"
            )

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def as_array(self) -> NDArray[np.uint8]:
        """View the buffer as an (height, width, 4) uint8 array."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(self.height, self.width, _CHANNELS)

    @classmethod
    def from_array(cls, array: NDArray[np.uint8]) -> Bitmap:
        if array.ndim != 3 or array.shape[2] != _CHANNELS:
            raise ValueError(f"Expected an (h, w, 4) array, got shape {array.shape}")
        height, width = array.shape[:2]
        return cls(width=width, height=height, data=np.ascontiguousarray(array, dtype=np.uint8).tobytes())

    @classmethod
    def from_image(cls, image: Image.Image) -> Bitmap:
        rgba = image.convert("RGBA")
        return cls(width=rgba.width, height=rgba.height, data=rgba.tobytes())

    def to_image(self) -> Image.Image:
        return Image.frombytes("RGBA", (self.width, self.height), self.data)


def _b64decode(payload: str) -> bytes:
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e


def open_data_url(data_url: str) -> Image.Image:
    """Open a ``data:image/...;base64,`` URL (canvas.toDataURL()) without decoding pixels.

    Only the header is read, so ``image.size`` is cheap to check before
    :func:`image_to_bitmap`. A bare base64 string without the ``data:`` header
    is accepted too. Raises ValueError for malformed input and lets
    PIL.Image.DecompressionBombError through for images past Pillow's limit.
    """
    payload = data_url.strip()
    if payload.startswith(_DATA_URL_PREFIX):
        header, sep, payload = payload.partition(",")
        if not sep or ";base64" not in header:
            raise ValueError("Only base64-encoded data URLs are supported")

    raw = _b64decode(payload)
    try:
        return Image.open(io.BytesIO(raw))
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Could not decode image: {e}") from e


def image_to_bitmap(image: Image.Image) -> Bitmap:
    try:
        return Bitmap.from_image(image)
    except OSError as e:
        raise ValueError(f"Could not decode image: {e}") from e


def decode_data_url(data_url: str) -> Bitmap:
    """Decode a data URL (or bare base64 image) into a bitmap."""
    with open_data_url(data_url) as image:
        return image_to_bitmap(image)


def decode_rgba(width: int, height: int, rgba_b64: str) -> Bitmap:
    """Build a bitmap from base64 of a raw RGBA buffer (ImageData.data)."""
    return Bitmap(width=width, height=height, data=_b64decode(rgba_b64))


def encode_data_url(bitmap: Bitmap) -> str:
    """Encode a bitmap as a PNG data URL."""
    buf = io.BytesIO()
    bitmap.to_image().save(buf, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buf.getvalue()).decode("ascii")
