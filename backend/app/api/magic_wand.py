"""POST /api/magic-wand — flood-fill erase from a clicked seed.

The client always sends the unedited original, so each click is an
independent selection rather than an accumulation of earlier ones. The
seed is either given in natural pixels (x, y) or as a click on the
"contain"-fitted preview (click_x, click_y inside a view_w × view_h box).
"""

from __future__ import annotations

import asyncio
import logging

import numpy as np
from fastapi import APIRouter, Depends

from app.config import Settings
from app.dependencies import get_settings
from app.engine.raster import RasterBuffer
from app.engine.region_selector import select_region
from app.engine.viewport import viewport_to_pixel
from app.models.requests import MagicWandRequest
from app.models.responses import MagicWandResponse
from app.utils.codec import decode_data_url, encode_data_url

logger = logging.getLogger(__name__)

router = APIRouter()


def _resolve_seed(req: MagicWandRequest, image: RasterBuffer) -> tuple[int, int] | None:
    if req.x is not None and req.y is not None:
        return req.x, req.y
    return viewport_to_pixel(
        req.click_x, req.click_y, req.view_w, req.view_h, image.width, image.height,
    )


@router.post("/magic-wand", response_model=MagicWandResponse)
async def magic_wand(
    req: MagicWandRequest, settings: Settings = Depends(get_settings)
) -> MagicWandResponse:
    image = decode_data_url(req.image, max_pixels=settings.max_image_pixels)
    tolerance = settings.default_tolerance if req.tolerance is None else req.tolerance

    seed = _resolve_seed(req, image)
    if seed is None:
        # Click landed on the letterbox margin: nothing selected
        logger.info("Magic wand click outside the %dx%d image, ignored", image.width, image.height)
        return MagicWandResponse(
            image=encode_data_url(image), width=image.width, height=image.height,
        )

    x, y = seed
    logger.info(
        "Magic wand on %dx%d image at (%d, %d), tolerance %d",
        image.width, image.height, x, y, tolerance,
    )

    # Flood fill is O(pixels) in pure Python; keep it off the event loop
    loop = asyncio.get_running_loop()
    result = await loop.run_in_executor(None, select_region, image, x, y, tolerance)

    cleared = int(np.count_nonzero(result.alpha == 0) - np.count_nonzero(image.alpha == 0))
    return MagicWandResponse(
        image=encode_data_url(result),
        width=result.width,
        height=result.height,
        pixels_cleared=cleared,
        seed_x=x,
        seed_y=y,
    )
