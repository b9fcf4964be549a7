"""Mask → alpha compositing for background removal.

The segmentation service returns a grayscale mask (white = subject,
black = background). Its red channel becomes the alpha channel of the
original image; near-black values below MASK_NOISE_THRESHOLD are forced
to full transparency.
"""

from __future__ import annotations

import logging

import numpy as np

from app.engine.raster import RasterBuffer
from app.engine.resampler import resample

logger = logging.getLogger(__name__)

MASK_NOISE_THRESHOLD = 10


def mask_to_alpha(mask_red: np.ndarray) -> np.ndarray:
    """0 where m < MASK_NOISE_THRESHOLD, otherwise m."""
    return np.where(mask_red < MASK_NOISE_THRESHOLD, 0, mask_red).astype(np.uint8)


def mask_red_channel(mask: RasterBuffer) -> np.ndarray:
    """Red channel of mask, zeroed where the mask is fully transparent.

    Matches what drawing the mask onto a canvas yields, so a same-size
    mask and a resampled one read the same value for alpha-0 pixels.
    """
    return np.where(mask.alpha == 0, 0, mask.pixels[:, :, 0])


def composite_mask(original: RasterBuffer, mask: RasterBuffer) -> RasterBuffer:
    """Return a copy of original whose alpha comes from mask.

    The mask is resampled to the original's size first; only its red
    channel is read, and fully transparent mask pixels count as black.
    RGB of the original is carried over unchanged.
    """
    if mask.shape != original.shape:
        logger.debug(
            "Resampling mask %dx%d to %dx%d",
            mask.width, mask.height, original.width, original.height,
        )
        mask = resample(mask, original.width, original.height)

    result = original.copy()
    result.pixels[:, :, 3] = mask_to_alpha(mask_red_channel(mask))

    logger.debug(
        "Composited mask: %d of %d pixels transparent",
        int(np.count_nonzero(result.alpha == 0)), result.size,
    )
    return result
