"""Click → pixel mapping for an image shown with "contain" fit.

The preview scales the image to fit its box and centres it, leaving
letterbox margins on one axis. Clicks on the margins select nothing.
"""

from __future__ import annotations

from app.engine.raster import check_dimensions
from app.utils.math_helpers import clamp, round_half_up


def contain_rect(
    view_w: float, view_h: float, image_w: int, image_h: int
) -> tuple[float, float, float, float]:
    """(offset_x, offset_y, draw_w, draw_h) of the fitted image inside the view."""
    image_ratio = image_w / image_h
    view_ratio = view_w / view_h

    draw_w, draw_h = view_w, view_h
    off_x = off_y = 0.0
    if image_ratio > view_ratio:
        draw_h = view_w / image_ratio
        off_y = (view_h - draw_h) / 2
    else:
        draw_w = view_h * image_ratio
        off_x = (view_w - draw_w) / 2
    return off_x, off_y, draw_w, draw_h


def viewport_to_pixel(
    click_x: float,
    click_y: float,
    view_w: float,
    view_h: float,
    image_w: int,
    image_h: int,
) -> tuple[int, int] | None:
    """Natural-pixel seed for a click, or None outside the drawn image."""
    check_dimensions(image_w, image_h)
    if view_w <= 0 or view_h <= 0:
        return None

    off_x, off_y, draw_w, draw_h = contain_rect(view_w, view_h, image_w, image_h)
    if not (off_x <= click_x <= off_x + draw_w and off_y <= click_y <= off_y + draw_h):
        return None

    px = round_half_up((click_x - off_x) / draw_w * image_w)
    py = round_half_up((click_y - off_y) / draw_h * image_h)
    return clamp(px, 0, image_w - 1), clamp(py, 0, image_h - 1)
