"""RasterBuffer — the RGBA pixel grid every engine operation reads and writes.

Pixels live in a C-contiguous uint8 array of shape (height, width, 4):
row-major, top-left origin, channels R, G, B, A.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from app.engine.errors import InvalidDimensions, RenderContextUnavailable

CHANNELS = 4


def _allocate(height: int, width: int) -> NDArray[np.uint8]:
    try:
        return np.zeros((height, width, CHANNELS), dtype=np.uint8)
    except MemoryError as e:
        raise RenderContextUnavailable(
            f"Could not allocate {width}x{height} pixel buffer"
        ) from e


def check_dimensions(width: int, height: int) -> None:
    """Reject non-positive sizes (shared by every sizing operation)."""
    if int(width) != width or int(height) != height:
        raise InvalidDimensions(f"Dimensions must be integers, got {width}x{height}")
    if width <= 0 or height <= 0:
        raise InvalidDimensions(f"Dimensions must be positive, got {width}x{height}")


@dataclass
class RasterBuffer:
    width: int
    height: int
    pixels: NDArray[np.uint8]

    def __post_init__(self) -> None:
        check_dimensions(self.width, self.height)
        pixels = np.asarray(self.pixels)
        if pixels.dtype != np.uint8:
            raise InvalidDimensions(f"Pixel dtype must be uint8, got {pixels.dtype}")
        if pixels.size != self.width * self.height * CHANNELS:
            raise InvalidDimensions(
                f"Expected {self.width * self.height * CHANNELS} channel values "
                f"for {self.width}x{self.height}, got {pixels.size}"
            )
        self.pixels = np.ascontiguousarray(
            pixels.reshape(self.height, self.width, CHANNELS)
        )

    # ── Constructors ──

    @classmethod
    def blank(
        cls,
        width: int,
        height: int,
        fill: tuple[int, int, int, int] = (0, 0, 0, 0),
    ) -> RasterBuffer:
        check_dimensions(width, height)
        pixels = _allocate(height, width)
        pixels[:, :] = fill
        return cls(width, height, pixels)

    @classmethod
    def from_array(cls, array: NDArray) -> RasterBuffer:
        """Wrap an HxW (grey), HxWx3 (RGB) or HxWx4 (RGBA) array.

        Grey and RGB inputs are expanded to RGBA with alpha 255.
        The input is always copied.
        """
        arr = np.asarray(array)
        if arr.ndim == 2:
            arr = np.repeat(arr[:, :, None], 3, axis=2)
        if arr.ndim != 3 or arr.shape[2] not in (3, CHANNELS):
            raise InvalidDimensions(f"Unsupported array shape {arr.shape}")
        height, width = arr.shape[:2]
        check_dimensions(width, height)

        pixels = _allocate(height, width)
        pixels[:, :, :3] = np.clip(arr[:, :, :3], 0, 255)
        pixels[:, :, 3] = np.clip(arr[:, :, 3], 0, 255) if arr.shape[2] == CHANNELS else 255
        return cls(width, height, pixels)

    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes) -> RasterBuffer:
        """Build from flat row-major RGBA bytes."""
        check_dimensions(width, height)
        flat = np.frombuffer(data, dtype=np.uint8)
        return cls(width, height, flat.copy())

    # ── Accessors ──

    @property
    def shape(self) -> tuple[int, int]:
        """(width, height)."""
        return (self.width, self.height)

    @property
    def size(self) -> int:
        """Pixel count."""
        return self.width * self.height

    @property
    def alpha(self) -> NDArray[np.uint8]:
        return self.pixels[:, :, 3]

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        r, g, b, a = self.pixels[y, x]
        return (int(r), int(g), int(b), int(a))

    def copy(self) -> RasterBuffer:
        try:
            return RasterBuffer(self.width, self.height, self.pixels.copy())
        except MemoryError as e:
            raise RenderContextUnavailable(
                f"Could not copy {self.width}x{self.height} pixel buffer"
            ) from e

    def to_bytes(self) -> bytes:
        return self.pixels.tobytes()
