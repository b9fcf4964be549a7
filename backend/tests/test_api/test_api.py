"""Tests for API endpoints (images travel as PNG data URLs)."""

from __future__ import annotations

import numpy as np
from fastapi.testclient import TestClient

from app.config import Settings
from app.dependencies import get_settings
from app.engine.errors import RenderContextUnavailable
from app.main import app
from app.utils.codec import decode_data_url, encode_data_url
from tests.conftest import block_image, half_transparent_image, solid


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "magic-wand" in data["operations"]


def test_aspect_ratios_listed():
    response = client.get("/api/aspect-ratios")
    assert response.json() == ["1:1", "4:3", "3:4", "16:9", "9:16"]


def test_aspect_ratio():
    response = client.post("/api/aspect-ratio", json={"width": 1920, "height": 1080})
    assert response.status_code == 200
    assert response.json()["aspect_ratio"] == "16:9"


def test_aspect_ratio_rejects_zero():
    response = client.post("/api/aspect-ratio", json={"width": 0, "height": 1080})
    assert response.status_code == 422


def test_composite():
    original = solid(6, 4, (10, 20, 30, 255))
    mask = solid(3, 2, (0, 0, 0, 255))
    mask.pixels[:, 2] = (255, 255, 255, 255)

    response = client.post("/api/background/composite", json={
        "image": encode_data_url(original),
        "mask": encode_data_url(mask).split(",", 1)[1],
    })
    assert response.status_code == 200
    data = response.json()
    assert (data["width"], data["height"]) == (6, 4)
    result = decode_data_url(data["image"])
    assert np.all(result.alpha[:, :3] == 0)
    assert np.all(result.alpha[:, 5] == 255)
    assert np.array_equal(result.pixels[:, :, :3], original.pixels[:, :, :3])


class TestMagicWand:
    def test_clears_center_block(self):
        response = client.post("/api/magic-wand", json={
            "image": encode_data_url(block_image()), "x": 2, "y": 2, "tolerance": 0,
        })
        assert response.status_code == 200
        data = response.json()
        assert data["pixels_cleared"] == 9
        result = decode_data_url(data["image"])
        assert int((result.alpha == 0).sum()) == 9

    def test_default_tolerance_from_settings(self):
        app.dependency_overrides[get_settings] = lambda: Settings(default_tolerance=100)
        try:
            response = client.post("/api/magic-wand", json={
                "image": encode_data_url(block_image()), "x": 2, "y": 2,
            })
        finally:
            app.dependency_overrides.clear()
        assert response.json()["pixels_cleared"] == 25

    def test_seed_out_of_bounds(self):
        response = client.post("/api/magic-wand", json={
            "image": encode_data_url(block_image()), "x": 10, "y": 2, "tolerance": 30,
        })
        assert response.status_code == 400
        assert response.json()["error"] == "SeedOutOfBounds"

    def test_tolerance_out_of_range(self):
        response = client.post("/api/magic-wand", json={
            "image": encode_data_url(block_image()), "x": 2, "y": 2, "tolerance": 101,
        })
        assert response.status_code == 422


class TestMagicWandPreviewClick:
    def test_click_maps_to_natural_seed(self):
        # 5×5 image fills a 50×50 preview: (25, 25) → pixel (3, 3), inside the block
        response = client.post("/api/magic-wand", json={
            "image": encode_data_url(block_image()),
            "click_x": 25, "click_y": 25, "view_w": 50, "view_h": 50, "tolerance": 0,
        })
        assert response.status_code == 200
        data = response.json()
        assert (data["seed_x"], data["seed_y"]) == (3, 3)
        assert data["pixels_cleared"] == 9

    def test_click_on_margin_is_ignored(self):
        # 5×5 image in a 100×50 preview is pillarboxed by 25 px on each side
        response = client.post("/api/magic-wand", json={
            "image": encode_data_url(block_image()),
            "click_x": 5, "click_y": 25, "view_w": 100, "view_h": 50,
        })
        assert response.status_code == 200
        data = response.json()
        assert data["pixels_cleared"] == 0
        assert data["seed_x"] is None
        assert np.all(decode_data_url(data["image"]).alpha == 255)

    def test_both_seed_forms_rejected(self):
        response = client.post("/api/magic-wand", json={
            "image": encode_data_url(block_image()), "x": 1, "y": 1,
            "click_x": 25, "click_y": 25, "view_w": 50, "view_h": 50,
        })
        assert response.status_code == 422

    def test_partial_click_rejected(self):
        response = client.post("/api/magic-wand", json={
            "image": encode_data_url(block_image()), "click_x": 25, "click_y": 25,
        })
        assert response.status_code == 422


class TestResize:
    def test_explicit_size(self):
        response = client.post("/api/resize", json={
            "image": encode_data_url(solid(8, 6, (1, 2, 3, 255))), "width": 5, "height": 9,
        })
        assert response.status_code == 200
        data = response.json()
        assert (data["width"], data["height"]) == (5, 9)
        assert decode_data_url(data["image"]).shape == (5, 9)

    def test_scale_preset(self):
        response = client.post("/api/resize", json={
            "image": encode_data_url(solid(8, 6, (1, 2, 3, 255))), "scale": 0.5,
        })
        assert (response.json()["width"], response.json()["height"]) == (4, 3)

    def test_locked_ratio_from_width(self):
        response = client.post("/api/resize", json={
            "image": encode_data_url(solid(40, 20, (1, 2, 3, 255))), "width": 10,
        })
        assert (response.json()["width"], response.json()["height"]) == (10, 5)

    def test_unlocked_keeps_source_height(self):
        response = client.post("/api/resize", json={
            "image": encode_data_url(solid(40, 20, (1, 2, 3, 255))), "width": 10, "lock_aspect": False,
        })
        assert (response.json()["width"], response.json()["height"]) == (10, 20)

    def test_scale_and_width_conflict(self):
        response = client.post("/api/resize", json={
            "image": encode_data_url(solid(4, 4, (1, 2, 3, 255))), "scale": 2, "width": 3,
        })
        assert response.status_code == 422

    def test_target_over_pixel_limit(self):
        response = client.post("/api/resize", json={
            "image": encode_data_url(solid(4, 4, (1, 2, 3, 255))), "scale": 1e5,
        })
        assert response.status_code == 400
        data = response.json()
        assert set(data) == {"error", "detail"}
        assert data["error"] == "InvalidDimensions"
        assert "pixel limit" in data["detail"]

    def test_allocation_failure_maps_to_500(self, monkeypatch):
        def _fail(*args, **kwargs):
            raise RenderContextUnavailable("no room")

        monkeypatch.setattr("app.api.resize.resample", _fail)
        response = client.post("/api/resize", json={
            "image": encode_data_url(solid(4, 4, (1, 2, 3, 255))), "width": 8, "height": 8,
        })
        assert response.status_code == 500
        assert response.json() == {"error": "RenderContextUnavailable", "detail": "no room"}


class TestPalette:
    def test_solid_colour(self):
        response = client.post("/api/palette", json={
            "image": encode_data_url(solid(10, 10, (123, 45, 200, 255))), "max_colors": 3,
        })
        assert response.status_code == 200
        assert response.json()["colors"] == [{"r": 120, "g": 50, "b": 200, "hex": "#7832c8"}]

    def test_transparent_half_ignored(self):
        response = client.post("/api/palette", json={"image": encode_data_url(half_transparent_image())})
        assert [c["hex"] for c in response.json()["colors"]] == ["#c81e28"]


def test_undecodable_image():
    response = client.post("/api/palette", json={"image": "data:image/png;base64,aGVsbG8="})
    assert response.status_code == 422
    assert response.json()["error"] == "DecodeFailure"
