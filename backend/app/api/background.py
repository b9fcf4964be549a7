"""POST /api/background/* — background removal from a segmentation mask."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends

from app.config import Settings
from app.dependencies import get_settings
from app.engine.compositor import composite_mask
from app.models.requests import CompositeRequest
from app.models.responses import ImageResponse
from app.utils.codec import decode_data_url, encode_data_url

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/background")


@router.post("/composite", response_model=ImageResponse)
async def composite(
    req: CompositeRequest, settings: Settings = Depends(get_settings)
) -> ImageResponse:
    original = decode_data_url(req.image, max_pixels=settings.max_image_pixels)
    mask = decode_data_url(req.mask, max_pixels=settings.max_image_pixels)
    logger.info(
        "Compositing %dx%d mask onto %dx%d image",
        mask.width, mask.height, original.width, original.height,
    )

    loop = asyncio.get_running_loop()
    result = await loop.run_in_executor(None, composite_mask, original, mask)
    return ImageResponse(
        image=encode_data_url(result),
        width=result.width,
        height=result.height,
    )
