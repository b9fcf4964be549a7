"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from app.engine.aspect_ratio import supported_ids
from app.models.responses import HealthResponse

router = APIRouter()

_OPERATIONS = ["aspect-ratio", "background/composite", "magic-wand", "resize", "palette"]


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version="0.1.0", operations=_OPERATIONS)


@router.get("/aspect-ratios")
async def aspect_ratios() -> list[str]:
    return supported_ids()
