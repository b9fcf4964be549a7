"""POST /api/palette — dominant colour extraction."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends

from app.config import Settings
from app.dependencies import get_settings
from app.engine.quantizer import extract_palette
from app.models.requests import PaletteRequest
from app.models.responses import ColorSampleModel, PaletteResponse
from app.utils.codec import decode_data_url

router = APIRouter()


@router.post("/palette", response_model=PaletteResponse)
async def palette(
    req: PaletteRequest, settings: Settings = Depends(get_settings)
) -> PaletteResponse:
    image = decode_data_url(req.image, max_pixels=settings.max_image_pixels)
    max_colors = req.max_colors or settings.default_palette_size

    loop = asyncio.get_running_loop()
    colors = await loop.run_in_executor(None, extract_palette, image, max_colors)
    return PaletteResponse(colors=[ColorSampleModel(**c.as_dict()) for c in colors])
