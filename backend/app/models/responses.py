"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    operations: list[str] = Field(default_factory=list)


class AspectRatioResponse(BaseModel):
    aspect_ratio: str


class ImageResponse(BaseModel):
    image: str = Field(..., description="Result as a PNG data URL")
    width: int
    height: int


class MagicWandResponse(ImageResponse):
    pixels_cleared: int = 0
    seed_x: int | None = None
    seed_y: int | None = None


class ColorSampleModel(BaseModel):
    r: int
    g: int
    b: int
    hex: str


class PaletteResponse(BaseModel):
    colors: list[ColorSampleModel] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
    detail: str
