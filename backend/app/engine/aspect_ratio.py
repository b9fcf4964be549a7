"""Nearest supported aspect ratio for segmentation requests.

The segmentation service rejects any ratio string outside this list, so the
declared order is part of the contract: ties go to the earlier entry.
"""

from __future__ import annotations

import logging

from app.engine.raster import check_dimensions

logger = logging.getLogger(__name__)

SUPPORTED_ASPECT_RATIOS: tuple[tuple[str, float], ...] = (
    ("1:1", 1.0),
    ("4:3", 4 / 3),
    ("3:4", 3 / 4),
    ("16:9", 16 / 9),
    ("9:16", 9 / 16),
)


def supported_ids() -> list[str]:
    return [ratio_id for ratio_id, _ in SUPPORTED_ASPECT_RATIOS]


def match_aspect_ratio(width: int, height: int) -> str:
    """Return the supported ratio id closest to width/height.

    Raises:
        InvalidDimensions: width or height is not positive.
    """
    check_dimensions(width, height)
    ratio = width / height

    best_id, best_value = SUPPORTED_ASPECT_RATIOS[0]
    best_diff = abs(best_value - ratio)
    for ratio_id, value in SUPPORTED_ASPECT_RATIOS[1:]:
        diff = abs(value - ratio)
        # Strictly smaller only
        if diff < best_diff:
            best_id, best_diff = ratio_id, diff

    logger.debug("Aspect %dx%d (%.4f) → %s", width, height, ratio, best_id)
    return best_id
