"""Tests for API endpoints."""

from __future__ import annotations

import base64

from fastapi.testclient import TestClient
from PIL import Image

from ailab.main import app
from ailab.utils.bitmap import decode_data_url

client = TestClient(app)


def _rgba(width: int, height: int, pixel: bytes) -> dict:
    return {
        "width": width,
        "height": height,
        "rgba": base64.b64encode(pixel * (width * height)).decode("ascii"),
    }


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["transforms_registered"] == 7


def test_classify_blank_rgba():
    response = client.post("/api/shapes/classify", json=_rgba(40, 30, b"\xff\xff\xff\xff"))
    assert response.status_code == 200
    data = response.json()
    assert data["shape_name"] == "Unknown Shape"
    assert data["confidence"] == 0
    assert data["descriptor"] == {"roundness": 0.0, "symmetry": 0.0, "corners": 0, "closed": False}
    assert data["grid"] is None
    assert data["errors"] == {}


def test_classify_circle_data_url(circle_image, make_data_url):
    response = client.post("/api/shapes/classify", json={"image": make_data_url(circle_image)})
    assert response.status_code == 200
    data = response.json()
    assert 0 <= data["confidence"] <= 100
    assert data["descriptor"]["roundness"] > 0.9
    assert data["processing_time_ms"] >= 0


def test_classify_include_grid(circle_image, make_data_url):
    response = client.post(
        "/api/shapes/classify",
        json={"image": make_data_url(circle_image), "include_grid": True},
    )
    assert response.status_code == 200
    grid = response.json()["grid"]
    assert (grid["rows"], grid["cols"]) == (60, 80)
    assert len(grid["ascii_grid"].split("\n")) == 60
    assert len(grid["outline"]) > 0


def test_classify_is_deterministic(circle_image, make_data_url):
    payload = {"image": make_data_url(circle_image)}
    first = client.post("/api/shapes/classify", json=payload).json()
    second = client.post("/api/shapes/classify", json=payload).json()
    assert first["shape_name"] == second["shape_name"]
    assert first["confidence"] == second["confidence"]
    assert first["descriptor"] == second["descriptor"]


def test_classify_needs_an_image():
    response = client.post("/api/shapes/classify", json={})
    assert response.status_code == 422


def test_classify_rejects_both_sources(circle_image, make_data_url):
    payload = {"image": make_data_url(circle_image), **_rgba(1, 1, b"\x00\x00\x00\xff")}
    response = client.post("/api/shapes/classify", json=payload)
    assert response.status_code == 422


def test_classify_rgba_needs_dimensions():
    response = client.post("/api/shapes/classify", json={"rgba": "AAAAAA=="})
    assert response.status_code == 422


def test_classify_invalid_base64():
    response = client.post("/api/shapes/classify", json={"image": "data:image/png;base64,###"})
    assert response.status_code == 422


def test_classify_buffer_size_mismatch():
    payload = _rgba(4, 4, b"\x00\x00\x00\xff")
    payload["width"] = 5
    response = client.post("/api/shapes/classify", json=payload)
    assert response.status_code == 422
    assert "expected" in response.json()["detail"]


def test_classify_too_large():
    response = client.post(
        "/api/shapes/classify",
        json={"width": 10000, "height": 10000, "rgba": "AAAA"},
    )
    assert response.status_code == 413


def test_classify_image_over_pixel_limit(make_data_url):
    # 4,002,000 pixels, just over the default limit
    image = Image.new("1", (2001, 2000), 1)
    response = client.post("/api/shapes/classify", json={"image": make_data_url(image)})
    assert response.status_code == 413
    assert "4002000" in response.json()["detail"]


def test_classify_decompression_bomb(make_data_url, monkeypatch):
    image = Image.new("1", (300, 300), 1)
    data_url = make_data_url(image)
    # 90,000 pixels is more than twice this ceiling
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10_000)
    response = client.post("/api/shapes/classify", json={"image": data_url})
    assert response.status_code == 413


def test_classify_data_url_ignores_width_and_height(circle_image, make_data_url):
    payload = {"image": make_data_url(circle_image), "width": 10000, "height": 10000}
    response = client.post("/api/shapes/classify", json=payload)
    assert response.status_code == 200
    assert response.json()["descriptor"]["roundness"] > 0.9


def test_list_reference_shapes():
    response = client.get("/api/shapes/reference")
    assert response.status_code == 200
    keys = {s["key"] for s in response.json()}
    assert keys == {"star", "heart", "diamond", "crescent"}


def test_reference_shape_star():
    response = client.get("/api/shapes/reference/star")
    assert response.status_code == 200
    data = response.json()
    assert data["shape_name"] == "Star"
    assert data["confidence"] == 100
    assert data["descriptor"]["corners"] == 10
    assert data["descriptor"]["closed"] is True


def test_reference_shape_unknown():
    response = client.get("/api/shapes/reference/hexagon")
    assert response.status_code == 404


def test_box_score():
    response = client.post(
        "/api/games/box-score",
        json={
            "box": {"x": 10, "y": 10, "width": 100, "height": 80},
            "detections": [{"bbox": [10, 10, 100, 80], "label": "cat", "score": 0.92}],
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["points"] == 100
    assert data["iou"] == 1.0
    assert data["verdict"] == "excellent"
    assert data["matched_label"] == "cat"


def test_box_score_no_detections():
    response = client.post("/api/games/box-score", json={"box": {"x": 0, "y": 0, "width": 5, "height": 5}})
    assert response.status_code == 200
    assert response.json()["verdict"] == "miss"


def test_nose_touch():
    keypoints = [
        {"part": "nose", "x": 100, "y": 100, "score": 0.9},
        {"part": "leftWrist", "x": 120, "y": 110, "score": 0.2},
        {"part": "rightWrist", "x": 400, "y": 300, "score": 0.2},
    ]
    response = client.post("/api/games/nose-touch", json={"keypoints": keypoints})
    assert response.status_code == 200
    data = response.json()
    assert data["touched"] is True
    assert data["segments"] == []


def test_contrast():
    response = client.post("/api/vision/contrast", json=_rgba(3, 2, b"\x64\x64\x64\xff"))
    assert response.status_code == 200
    data = response.json()
    assert (data["width"], data["height"]) == (3, 2)
    assert data["image"].startswith("data:image/png;base64,")
    pixels = decode_data_url(data["image"]).as_array()
    assert (pixels[..., :3] == 150).all()
    assert (pixels[..., 3] == 255).all()


def test_contrast_empty_image():
    response = client.post("/api/vision/contrast", json={"width": 0, "height": 0, "rgba": ""})
    assert response.status_code == 422
