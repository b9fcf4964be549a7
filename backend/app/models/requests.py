"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class AspectRatioRequest(BaseModel):
    width: int = Field(..., gt=0, description="Source image width in pixels")
    height: int = Field(..., gt=0, description="Source image height in pixels")


class CompositeRequest(BaseModel):
    image: str = Field(..., description="Original image as a data URL")
    mask: str = Field(..., description="Subject mask as a data URL or bare base64 (white = subject)")


class MagicWandRequest(BaseModel):
    image: str = Field(..., description="Unedited original image as a data URL")
    x: int | None = Field(default=None, ge=0, description="Seed column in natural pixels")
    y: int | None = Field(default=None, ge=0, description="Seed row in natural pixels")
    click_x: float | None = Field(default=None, description="Click x within the preview box")
    click_y: float | None = Field(default=None, description="Click y within the preview box")
    view_w: float | None = Field(default=None, gt=0, description="Preview box width")
    view_h: float | None = Field(default=None, gt=0, description="Preview box height")
    tolerance: int | None = Field(
        default=None, ge=0, le=100, description="Per-channel tolerance (server default if omitted)"
    )

    @model_validator(mode="after")
    def _one_seed_mode(self) -> MagicWandRequest:
        natural = [v is not None for v in (self.x, self.y)]
        click = [v is not None for v in (self.click_x, self.click_y, self.view_w, self.view_h)]
        if any(natural) == any(click) or not (all(natural) or all(click)):
            raise ValueError("Give either x/y or click_x/click_y/view_w/view_h")
        return self


class ResizeRequest(BaseModel):
    image: str = Field(..., description="Source image as a data URL")
    width: int | None = Field(default=None, gt=0, description="Target width")
    height: int | None = Field(default=None, gt=0, description="Target height")
    scale: float | None = Field(default=None, gt=0, description="Preset scale factor (e.g. 0.5)")
    lock_aspect: bool = Field(default=True, description="Derive a missing side from the source ratio")

    @model_validator(mode="after")
    def _one_sizing_mode(self) -> ResizeRequest:
        if self.scale is not None and (self.width is not None or self.height is not None):
            raise ValueError("Give either scale or width/height, not both")
        if self.scale is None and self.width is None and self.height is None:
            raise ValueError("Give scale, width or height")
        return self


class PaletteRequest(BaseModel):
    image: str = Field(..., description="Source image as a data URL")
    max_colors: int | None = Field(default=None, gt=0, le=64, description="Palette size")
