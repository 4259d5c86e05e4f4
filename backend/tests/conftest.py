"""Shared test fixtures."""

from __future__ import annotations

import base64
import io
import math

import numpy as np
import pytest
from PIL import Image, ImageDraw

from ailab.utils.bitmap import Bitmap

# Drawing canvas size used by the shape game
CANVAS_W = 400
CANVAS_H = 300
STROKE = 6


def blank_canvas() -> Image.Image:
    return Image.new("RGBA", (CANVAS_W, CANVAS_H), "white")


def to_bitmap(image: Image.Image) -> Bitmap:
    return Bitmap.from_image(image)


def to_data_url(image: Image.Image) -> str:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buf.getvalue()).decode("ascii")


def solid_bitmap(width: int, height: int, rgba: tuple[int, int, int, int]) -> Bitmap:
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[...] = rgba
    return Bitmap.from_array(pixels)


def circle_outline(n: int = 64, radius: float = 50.0, cx: float = 100.0, cy: float = 100.0) -> np.ndarray:
    """Points on a circle, walked around the boundary."""
    angles = np.arange(n) * 2 * math.pi / n
    return np.column_stack([cx + radius * np.cos(angles), cy + radius * np.sin(angles)])


def square_outline() -> np.ndarray:
    """100x100 axis-aligned square walked clockwise from the middle of the top edge.

    Points every 10px; vertices at indices 5, 15, 25, 35.
    """
    pts = [(x, 0) for x in range(50, 101, 10)]
    pts += [(100, y) for y in range(10, 101, 10)]
    pts += [(x, 100) for x in range(90, -1, -10)]
    pts += [(0, y) for y in range(90, -1, -10)]
    pts += [(x, 0) for x in range(10, 50, 10)]
    return np.array(pts, dtype=np.float64)


def square_ring_grid(size: int = 21, lo: int = 5, hi: int = 15) -> np.ndarray:
    """Mirror-symmetric grid holding a square ring."""
    grid = np.zeros((size, size), dtype=bool)
    grid[lo, lo : hi + 1] = True
    grid[hi, lo : hi + 1] = True
    grid[lo : hi + 1, lo] = True
    grid[lo : hi + 1, hi] = True
    return grid


@pytest.fixture
def blank_bitmap() -> Bitmap:
    return to_bitmap(blank_canvas())


@pytest.fixture
def ink_bitmap() -> Bitmap:
    return solid_bitmap(CANVAS_W, CANVAS_H, (0, 0, 0, 255))


@pytest.fixture
def circle_image() -> Image.Image:
    image = blank_canvas()
    ImageDraw.Draw(image).ellipse([100, 50, 300, 250], outline="black", width=STROKE)
    return image


@pytest.fixture
def circle_bitmap(circle_image) -> Bitmap:
    return to_bitmap(circle_image)


@pytest.fixture
def square_bitmap() -> Bitmap:
    image = blank_canvas()
    ImageDraw.Draw(image).rectangle([120, 70, 280, 230], outline="black", width=STROKE)
    return to_bitmap(image)


@pytest.fixture
def triangle_bitmap() -> Bitmap:
    image = blank_canvas()
    ImageDraw.Draw(image).polygon([(200, 40), (320, 250), (80, 250)], outline="black", width=STROKE)
    return to_bitmap(image)


@pytest.fixture
def line_bitmap() -> Bitmap:
    image = blank_canvas()
    ImageDraw.Draw(image).line([(50, 50), (350, 250)], fill="black", width=STROKE)
    return to_bitmap(image)


@pytest.fixture
def dot_bitmap() -> Bitmap:
    image = blank_canvas()
    ImageDraw.Draw(image).rectangle([199, 149, 201, 151], fill="black")
    return to_bitmap(image)


@pytest.fixture
def circle_points() -> np.ndarray:
    return circle_outline()


@pytest.fixture
def square_points() -> np.ndarray:
    return square_outline()


@pytest.fixture
def square_grid() -> np.ndarray:
    return square_ring_grid()


@pytest.fixture
def make_solid():
    return solid_bitmap


@pytest.fixture
def make_data_url():
    return to_data_url
