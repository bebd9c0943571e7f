"""Bilinear resize with optional fit-within aspect preservation."""

import math

import cv2
import numpy as np

from config import CONFIG
from engines.errors import InvalidDimensions
from models.params import ResizeParams
from models.raster import RasterBuffer


def compute_fit(w: int, h: int, tw: int, th: int) -> tuple[int, int]:
    """Largest size with the aspect of (w, h) that fits inside (tw, th).

    Halves round up and each side is at least 1 pixel.
    """
    scale = min(tw / w, th / h)
    return (max(1, math.floor(w * scale + 0.5)), max(1, math.floor(h * scale + 0.5)))


def target_size(raster: RasterBuffer, params: ResizeParams,
                max_pixels: int = CONFIG.codec.max_image_pixels) -> tuple[int, int]:
    """Validate the requested box and return the output (width, height).

    With ``maintain_aspect_ratio`` the result fits inside the box and differs
    from it on at most one axis; otherwise it is the box itself.
    """
    tw, th = params.width, params.height
    for name, value in (('width', tw), ('height', th)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidDimensions(f"Target {name} must be an integer, got {value!r}",
                                    width=tw, height=th)
    if tw < 1 or th < 1:
        raise InvalidDimensions(f"Target size {tw}x{th} must be at least 1x1", width=tw, height=th)

    if params.maintain_aspect_ratio:
        out_w, out_h = compute_fit(raster.width, raster.height, int(tw), int(th))
    else:
        out_w, out_h = int(tw), int(th)

    if out_w * out_h > max_pixels:
        raise InvalidDimensions(
            f"Target size {out_w}x{out_h} exceeds the {max_pixels} pixel limit",
            width=out_w, height=out_h,
        )
    return out_w, out_h


def resize_exact(raster: RasterBuffer, width: int, height: int) -> RasterBuffer:
    """Stretch to exactly (width, height) with bilinear interpolation.

    Every output sample is the weighted average of the four nearest source
    pixels (pixel-center aligned); samples past the border repeat the edge.
    """
    if (width, height) == raster.size:
        return RasterBuffer(raster.pixels.copy())
    out = cv2.resize(
        raster.pixels, (width, height),
        interpolation=cv2.INTER_LINEAR,
    )
    return RasterBuffer(np.ascontiguousarray(out, dtype=np.uint8))


def resize(raster: RasterBuffer, params: ResizeParams,
           max_pixels: int = CONFIG.codec.max_image_pixels) -> RasterBuffer:
    """Resize to the requested box; see target_size for the sizing policy."""
    out_w, out_h = target_size(raster, params, max_pixels)
    return resize_exact(raster, out_w, out_h)
