"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from app.engine.raster import RasterBuffer

BLACK = (0, 0, 0, 255)
GREY = (100, 100, 100, 255)
RED = (200, 30, 40, 255)
GREEN = (10, 200, 90, 255)


def solid(width: int, height: int, rgba: tuple[int, int, int, int]) -> RasterBuffer:
    return RasterBuffer.blank(width, height, fill=rgba)


def block_image() -> RasterBuffer:
    """5×5 black image with a solid 3×3 grey block in the centre."""
    img = solid(5, 5, BLACK)
    img.pixels[1:4, 1:4] = GREY
    return img


def diagonal_image() -> RasterBuffer:
    """4×4 black image with two grey 2×2 squares touching only at a corner."""
    img = solid(4, 4, BLACK)
    img.pixels[0:2, 0:2] = GREY
    img.pixels[2:4, 2:4] = GREY
    return img


def half_transparent_image() -> RasterBuffer:
    """10×10: left half opaque RED, right half fully transparent GREEN."""
    img = solid(10, 10, RED)
    img.pixels[:, 5:] = GREEN[:3] + (0,)
    return img


def random_image(seed: int, width: int = 16, height: int = 12) -> RasterBuffer:
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
    return RasterBuffer(width, height, pixels)


@pytest.fixture
def block() -> RasterBuffer:
    return block_image()


@pytest.fixture
def diagonal() -> RasterBuffer:
    return diagonal_image()


@pytest.fixture
def half_transparent() -> RasterBuffer:
    return half_transparent_image()
