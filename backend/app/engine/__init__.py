"""Raster pixel-editing engine."""

from app.engine.aspect_ratio import SUPPORTED_ASPECT_RATIOS, match_aspect_ratio
from app.engine.compositor import composite_mask
from app.engine.errors import (
    DecodeFailure,
    InvalidDimensions,
    InvalidParameter,
    RasterError,
    RenderContextUnavailable,
    SeedOutOfBounds,
    SelectionCancelled,
)
from app.engine.quantizer import ColorSample, extract_palette
from app.engine.raster import RasterBuffer
from app.engine.region_selector import select_region
from app.engine.resampler import resample

__all__ = [
    "RasterBuffer",
    "SUPPORTED_ASPECT_RATIOS",
    "match_aspect_ratio",
    "composite_mask",
    "select_region",
    "resample",
    "ColorSample",
    "extract_palette",
    "RasterError",
    "InvalidDimensions",
    "InvalidParameter",
    "SeedOutOfBounds",
    "RenderContextUnavailable",
    "DecodeFailure",
    "SelectionCancelled",
]
