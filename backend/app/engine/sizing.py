"""Target-size negotiation for the resizer: preset scales and locked ratios."""

from __future__ import annotations

from app.engine.errors import InvalidDimensions, InvalidParameter
from app.engine.raster import check_dimensions
from app.utils.math_helpers import round_half_up

# Scale presets offered next to the width/height inputs.
PRESET_SCALES = (0.25, 0.5, 0.75, 2.0)


def scale_dimensions(width: int, height: int, scale: float) -> tuple[int, int]:
    """(round(width * scale), round(height * scale))."""
    check_dimensions(width, height)
    if scale <= 0:
        raise InvalidParameter(f"Scale must be positive, got {scale}")
    new_w = round_half_up(width * scale)
    new_h = round_half_up(height * scale)
    if new_w < 1 or new_h < 1:
        raise InvalidDimensions(
            f"Scaling {width}x{height} by {scale} gives {new_w}x{new_h}"
        )
    return new_w, new_h


def lock_aspect(
    orig_width: int,
    orig_height: int,
    width: int | None = None,
    height: int | None = None,
) -> tuple[int, int]:
    """Derive the missing side so the original ratio is kept.

    Exactly one of width / height must be given.
    """
    check_dimensions(orig_width, orig_height)
    if (width is None) == (height is None):
        raise InvalidParameter("Give exactly one of width or height")

    if width is not None:
        new_w, new_h = width, round_half_up(width * orig_height / orig_width)
    else:
        new_w, new_h = round_half_up(height * orig_width / orig_height), height

    check_dimensions(new_w, new_h)
    return new_w, new_h
