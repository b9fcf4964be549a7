"""Dominant-colour extraction by fixed-width bucket quantization.

Pipeline: downsample to a SAMPLE_SIZE × SAMPLE_SIZE working buffer, drop
pixels with alpha < OPACITY_CUTOFF, round each channel to the nearest
multiple of BUCKET_WIDTH (half-up), count buckets in first-seen order, then
stable-sort by descending count.

Channel 255 rounds to 260. That bucket is kept as is and its hex code is
three digits wide for that channel ("#104...").
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

import numpy as np

from app.engine.errors import InvalidParameter
from app.engine.raster import RasterBuffer
from app.engine.resampler import resample
from app.utils.math_helpers import round_half_up_array

logger = logging.getLogger(__name__)

SAMPLE_SIZE = 100
OPACITY_CUTOFF = 128
BUCKET_WIDTH = 10


@dataclass(frozen=True)
class ColorSample:
    r: int
    g: int
    b: int
    hex: str

    def as_dict(self) -> dict[str, int | str]:
        return asdict(self)


def to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def quantize_channel_values(values: np.ndarray) -> np.ndarray:
    """round(v / BUCKET_WIDTH) * BUCKET_WIDTH with .5 rounding up."""
    return round_half_up_array(np.asarray(values) / BUCKET_WIDTH) * BUCKET_WIDTH


def count_buckets(image: RasterBuffer) -> dict[tuple[int, int, int], int]:
    """Bucket frequencies of the opaque-enough pixels of image, as given.

    The returned dict preserves first-encountered (row-major) order.
    """
    flat = image.pixels.reshape(-1, 4)
    opaque = flat[flat[:, 3] >= OPACITY_CUTOFF]
    if len(opaque) == 0:
        return {}

    buckets = quantize_channel_values(opaque[:, :3])
    counts: dict[tuple[int, int, int], int] = {}
    for r, g, b in buckets.tolist():
        key = (r, g, b)
        counts[key] = counts.get(key, 0) + 1
    return counts


def rank_buckets(counts: dict[tuple[int, int, int], int]) -> list[tuple[tuple[int, int, int], int]]:
    """Descending by count; ties keep insertion order (sorted() is stable)."""
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)


def extract_palette(image: RasterBuffer, max_colors: int) -> list[ColorSample]:
    """Up to max_colors dominant colours, most frequent first.

    An image with no pixel at alpha >= OPACITY_CUTOFF yields [].

    Raises:
        InvalidParameter: max_colors < 1.
    """
    if int(max_colors) != max_colors or max_colors < 1:
        raise InvalidParameter(f"max_colors must be a positive integer, got {max_colors}")

    working = resample(image, SAMPLE_SIZE, SAMPLE_SIZE)
    ranked = rank_buckets(count_buckets(working))

    palette = [
        ColorSample(r=r, g=g, b=b, hex=to_hex(r, g, b))
        for (r, g, b), _count in ranked[:max_colors]
    ]
    logger.debug(
        "Palette: %d distinct buckets, returning %d", len(ranked), len(palette),
    )
    return palette
