"""POST /api/resize — stretch an image to a target size."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends

from app.config import Settings
from app.dependencies import get_settings
from app.engine.errors import InvalidDimensions
from app.engine.raster import RasterBuffer
from app.engine.resampler import resample
from app.engine.sizing import lock_aspect, scale_dimensions
from app.models.requests import ResizeRequest
from app.models.responses import ImageResponse
from app.utils.codec import decode_data_url, encode_data_url

logger = logging.getLogger(__name__)

router = APIRouter()


def _target_size(req: ResizeRequest, source: RasterBuffer) -> tuple[int, int]:
    if req.scale is not None:
        return scale_dimensions(source.width, source.height, req.scale)
    if req.width is not None and req.height is not None:
        return req.width, req.height
    if req.lock_aspect:
        return lock_aspect(source.width, source.height, width=req.width, height=req.height)
    return req.width or source.width, req.height or source.height


@router.post("/resize", response_model=ImageResponse)
async def resize(
    req: ResizeRequest, settings: Settings = Depends(get_settings)
) -> ImageResponse:
    source = decode_data_url(req.image, max_pixels=settings.max_image_pixels)
    width, height = _target_size(req, source)
    if width * height > settings.max_image_pixels:
        raise InvalidDimensions(
            f"Target {width}x{height} exceeds the {settings.max_image_pixels} pixel limit"
        )
    logger.info("Resizing %dx%d → %dx%d", source.width, source.height, width, height)

    loop = asyncio.get_running_loop()
    result = await loop.run_in_executor(None, resample, source, width, height)
    return ImageResponse(image=encode_data_url(result), width=result.width, height=result.height)
