"""Error kinds raised by the raster engine.

Each error also subclasses the closest built-in so callers that only know
about ValueError / IndexError keep working.
"""

from __future__ import annotations


class RasterError(Exception):
    """Base class for every raster engine failure."""

    kind = "RasterError"


class InvalidDimensions(RasterError, ValueError):
    """Non-positive or inconsistent width/height."""

    kind = "InvalidDimensions"


class InvalidParameter(RasterError, ValueError):
    """An operation argument outside its accepted range."""

    kind = "InvalidParameter"


class SeedOutOfBounds(RasterError, IndexError):
    """Flood-fill seed outside the buffer extent."""

    kind = "SeedOutOfBounds"

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Seed ({x}, {y}) outside {width}x{height} buffer")
        self.x = x
        self.y = y


class RenderContextUnavailable(RasterError, RuntimeError):
    """The pixel backing store could not be allocated."""

    kind = "RenderContextUnavailable"


class DecodeFailure(RasterError, ValueError):
    """Image bytes could not be interpreted as a raster."""

    kind = "DecodeFailure"


class SelectionCancelled(RasterError):
    """A region selection was cancelled between stack pops."""

    kind = "SelectionCancelled"
