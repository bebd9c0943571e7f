"""Rectangular crop."""

import numpy as np

from engines.errors import InvalidCropRegion
from models.params import CropParams
from models.raster import RasterBuffer


def validate_crop_region(raster: RasterBuffer, params: CropParams) -> None:
    """Raise InvalidCropRegion unless the rectangle lies fully inside ``raster``.

    Out-of-range rectangles are rejected, never clamped.
    """
    x, y, w, h = params.x, params.y, params.width, params.height
    details = dict(x=x, y=y, width=w, height=h,
                   source_width=raster.width, source_height=raster.height)
    for name, value in (('x', x), ('y', y), ('width', w), ('height', h)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidCropRegion(f"Crop {name} must be an integer, got {value!r}", **details)
    if x < 0 or y < 0:
        raise InvalidCropRegion(f"Crop origin ({x}, {y}) is negative", **details)
    if w < 1 or h < 1:
        raise InvalidCropRegion(f"Crop size {w}x{h} must be at least 1x1", **details)
    if x + w > raster.width or y + h > raster.height:
        raise InvalidCropRegion(
            f"Crop region {w}x{h}+{x}+{y} exceeds image bounds {raster.width}x{raster.height}",
            **details,
        )


def crop(raster: RasterBuffer, params: CropParams) -> RasterBuffer:
    """Copy the sub-rectangle described by ``params`` into a new buffer."""
    validate_crop_region(raster, params)
    x, y = int(params.x), int(params.y)
    region = raster.pixels[y:y + int(params.height), x:x + int(params.width)]
    return RasterBuffer(region.copy())
