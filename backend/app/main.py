"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.engine.errors import (
    DecodeFailure,
    RasterError,
    RenderContextUnavailable,
    SelectionCancelled,
)
from app.models.responses import ErrorResponse

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.pixelkit_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def _status_for(exc: RasterError) -> int:
    if isinstance(exc, DecodeFailure):
        return 422
    if isinstance(exc, SelectionCancelled):
        return 409
    if isinstance(exc, RenderContextUnavailable):
        return 500
    return 400


async def raster_error_handler(request: Request, exc: RasterError) -> JSONResponse:
    status = _status_for(exc)
    logger.warning("%s %s failed: %s: %s", request.method, request.url.path, exc.kind, exc)
    body = ErrorResponse(error=exc.kind, detail=str(exc))
    return JSONResponse(status_code=status, content=body.model_dump())


def create_app() -> FastAPI:
    app = FastAPI(
        title="PixelKit",
        description="Raster editing engine — background removal, magic wand, resize, palettes",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RasterError, raster_error_handler)

    from app.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
