"""Image filters for the "what the AI sees" panel."""

from __future__ import annotations

import numpy as np

from ailab.utils.bitmap import Bitmap

DEFAULT_CONTRAST_GAIN = 1.5


def contrast_filter(bitmap: Bitmap, gain: float = DEFAULT_CONTRAST_GAIN) -> Bitmap:
    """Grayscale (unweighted RGB mean) boosted by ``gain`` and clipped at 255.

    Alpha is passed through unchanged.
    """
    if bitmap.pixel_count == 0:
        return bitmap

    pixels = bitmap.as_array()
    gray = pixels[..., :3].astype(np.float64).mean(axis=2)
    boosted = np.clip(gray * gain, 0.0, 255.0)

    out = pixels.copy()
    # Canvas ImageData stores into a Uint8ClampedArray, which rounds
    out[..., :3] = np.rint(boosted)[..., np.newaxis].astype(np.uint8)
    return Bitmap.from_array(out)
