"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from app.api import aspect_ratio, background, health, magic_wand, palette, resize

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(aspect_ratio.router)
api_router.include_router(background.router)
api_router.include_router(magic_wand.router)
api_router.include_router(resize.router)
api_router.include_router(palette.router)
