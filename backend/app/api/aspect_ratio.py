"""POST /api/aspect-ratio — nearest supported ratio for a segmentation request."""

from __future__ import annotations

from fastapi import APIRouter

from app.engine.aspect_ratio import match_aspect_ratio
from app.models.requests import AspectRatioRequest
from app.models.responses import AspectRatioResponse

router = APIRouter()


@router.post("/aspect-ratio", response_model=AspectRatioResponse)
async def aspect_ratio(req: AspectRatioRequest) -> AspectRatioResponse:
    return AspectRatioResponse(aspect_ratio=match_aspect_ratio(req.width, req.height))
