"""Magic-wand region selection — 4-connected flood fill with a colour tolerance.

A pixel matches when each of its R, G, B channels is within `tolerance` of
the seed's (per-channel bound, not Euclidean). Exploration uses an explicit
stack and a width*height visited bitmap, so every pixel is evaluated at
most once and call depth stays flat on large images.

The operand is always the unedited original: selections never accumulate
across calls, each one produces a fresh result from the source image.
"""

from __future__ import annotations

import logging
import threading
import time

import numpy as np
from numpy.typing import NDArray

from app.engine.errors import InvalidParameter, SeedOutOfBounds, SelectionCancelled
from app.engine.raster import RasterBuffer

logger = logging.getLogger(__name__)

MIN_TOLERANCE = 0
MAX_TOLERANCE = 100

# Pops between cancellation checks.
_CANCEL_CHECK_INTERVAL = 4096


def _check_tolerance(tolerance: int) -> None:
    if int(tolerance) != tolerance or not MIN_TOLERANCE <= tolerance <= MAX_TOLERANCE:
        raise InvalidParameter(
            f"Tolerance must be an integer in {MIN_TOLERANCE}..{MAX_TOLERANCE}, got {tolerance}"
        )


def color_matches(image: RasterBuffer, seed: tuple[int, int, int], tolerance: int) -> NDArray[np.bool_]:
    """Per-pixel similarity predicate against the seed colour (HxW bool)."""
    rgb = image.pixels[:, :, :3].astype(np.int16)
    diff = np.abs(rgb - np.array(seed, dtype=np.int16))
    return np.all(diff <= tolerance, axis=2)


def region_mask(
    image: RasterBuffer,
    x: int,
    y: int,
    tolerance: int,
    cancel: threading.Event | None = None,
) -> NDArray[np.bool_]:
    """HxW bool array of the pixels selected from seed (x, y).

    Raises:
        SeedOutOfBounds: seed outside the image.
        InvalidParameter: tolerance outside 0..100.
        SelectionCancelled: cancel was set during traversal.
    """
    width, height = image.width, image.height
    if not (0 <= x < width and 0 <= y < height):
        raise SeedOutOfBounds(x, y, width, height)
    _check_tolerance(tolerance)

    r0, g0, b0, _ = image.pixel(x, y)
    matches = color_matches(image, (r0, g0, b0), tolerance).ravel().tolist()

    visited = bytearray(width * height)
    selected = bytearray(width * height)
    stack = [(x, y)]
    pops = 0

    while stack:
        if cancel is not None and pops % _CANCEL_CHECK_INTERVAL == 0 and cancel.is_set():
            raise SelectionCancelled(f"Selection from ({x}, {y}) cancelled after {pops} pops")
        cx, cy = stack.pop()
        pops += 1

        idx = cy * width + cx
        if visited[idx]:
            continue
        visited[idx] = 1

        # Non-matching pixels are marked but stop exploration
        if not matches[idx]:
            continue
        selected[idx] = 1

        if cx > 0:
            stack.append((cx - 1, cy))
        if cx < width - 1:
            stack.append((cx + 1, cy))
        if cy > 0:
            stack.append((cx, cy - 1))
        if cy < height - 1:
            stack.append((cx, cy + 1))

    return np.frombuffer(bytes(selected), dtype=np.uint8).reshape(height, width).astype(bool)


def select_region(
    image: RasterBuffer,
    x: int,
    y: int,
    tolerance: int,
    cancel: threading.Event | None = None,
) -> RasterBuffer:
    """Erase (alpha = 0) the region connected to (x, y) in a copy of image."""
    start = time.perf_counter()
    mask = region_mask(image, x, y, tolerance, cancel=cancel)

    result = image.copy()
    result.pixels[:, :, 3][mask] = 0

    logger.debug(
        "Magic wand at (%d, %d) tol=%d selected %d px in %.1fms",
        x, y, tolerance, int(mask.sum()), (time.perf_counter() - start) * 1000,
    )
    return result
