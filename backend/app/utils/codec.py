"""Image container codec — Pillow facade between bytes / data URLs and RasterBuffer.

The engine never imports this module; only the API layer does.
"""

from __future__ import annotations

import base64
import binascii
import io
import logging
import re

import numpy as np
from PIL import Image, UnidentifiedImageError

from app.engine.errors import DecodeFailure, InvalidDimensions
from app.engine.raster import RasterBuffer

logger = logging.getLogger(__name__)

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w/+.-]+)?(?:;[\w=-]+)*;base64,(?P<data>.*)$", re.DOTALL)


def decode_image(data: bytes, max_pixels: int | None = None) -> RasterBuffer:
    """Decode any Pillow-readable image into an RGBA buffer.

    Raises:
        DecodeFailure: bytes are not a readable image.
        InvalidDimensions: the image exceeds max_pixels.
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            width, height = img.size
            if max_pixels is not None and width * height > max_pixels:
                raise InvalidDimensions(
                    f"Image {width}x{height} exceeds the {max_pixels} pixel limit"
                )
            rgba = img.convert("RGBA")
    except (UnidentifiedImageError, OSError, Image.DecompressionBombError) as e:
        raise DecodeFailure(f"Could not decode image: {e}") from e

    pixels = np.array(rgba, dtype=np.uint8)
    logger.debug("Decoded %dx%d image", width, height)
    return RasterBuffer(width, height, pixels)


def split_data_url(value: str) -> tuple[str | None, str]:
    """(mime type or None, base64 payload) of a data URL or bare base64 string."""
    match = _DATA_URL_RE.match(value.strip())
    if match:
        return match.group("mime"), match.group("data")
    return None, value.strip()


def decode_data_url(value: str, max_pixels: int | None = None) -> RasterBuffer:
    """Decode `data:<mime>;base64,<payload>` or bare base64."""
    _, payload = split_data_url(value)
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeFailure(f"Invalid base64 image payload: {e}") from e
    return decode_image(raw, max_pixels=max_pixels)


def encode_png(image: RasterBuffer) -> bytes:
    buf = io.BytesIO()
    Image.fromarray(image.pixels).save(buf, format="PNG")
    return buf.getvalue()


def encode_data_url(image: RasterBuffer) -> str:
    encoded = base64.b64encode(encode_png(image)).decode("ascii")
    return f"data:image/png;base64,{encoded}"
