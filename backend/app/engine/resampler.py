"""Full-frame resampling to an exact target size.

Filter: bilinear (scipy.ndimage.zoom, order=1) with half-pixel grid
alignment and edge clamping, on premultiplied alpha. Premultiplying keeps
the colour of fully transparent pixels from bleeding into their
neighbours, which is how browser canvases scale RGBA images. No aspect
ratio preservation: the source is stretched to fill the target.
"""

from __future__ import annotations

import logging
import time

import numpy as np
from scipy.ndimage import zoom

from app.engine.errors import RenderContextUnavailable
from app.engine.raster import RasterBuffer, check_dimensions
from app.utils.math_helpers import round_half_up_array

logger = logging.getLogger(__name__)


def resample(image: RasterBuffer, target_width: int, target_height: int) -> RasterBuffer:
    """Return a new target_width × target_height buffer.

    Raises:
        InvalidDimensions: a target side is not positive.
        RenderContextUnavailable: the output buffer could not be allocated.
    """
    check_dimensions(target_width, target_height)
    if (target_width, target_height) == image.shape:
        return image.copy()

    start = time.perf_counter()
    try:
        src = image.pixels.astype(np.float64)

        alpha = src[:, :, 3:4]
        src[:, :, :3] *= alpha / 255.0

        factors = (target_height / image.height, target_width / image.width, 1.0)
        out = zoom(src, factors, order=1, mode="nearest", grid_mode=True)
        # zoom derives the output shape by rounding; pin it to the requested size.
        out = out[:target_height, :target_width]

        out_alpha = out[:, :, 3:4]
        rgb = np.divide(
            out[:, :, :3] * 255.0,
            out_alpha,
            out=np.zeros_like(out[:, :, :3]),
            where=out_alpha > 0,
        )
        out[:, :, :3] = rgb

        pixels = np.clip(round_half_up_array(out), 0, 255).astype(np.uint8)
    except MemoryError as e:
        raise RenderContextUnavailable(
            f"Could not allocate resampling workspace for {target_width}x{target_height}"
        ) from e
    result = RasterBuffer(target_width, target_height, pixels)

    logger.debug(
        "Resampled %dx%d → %dx%d in %.1fms",
        image.width, image.height, target_width, target_height,
        (time.perf_counter() - start) * 1000,
    )
    return result
