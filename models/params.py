"""Operation parameters."""

from dataclasses import dataclass
from typing import Optional, Union

from models.image_format import ImageFormat


@dataclass(frozen=True)
class CropParams:
    """Rectangle to extract. Validity is checked against a concrete raster."""

    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class ResizeParams:
    """Target box for resizing."""

    width: int
    height: int
    maintain_aspect_ratio: bool = False


@dataclass(frozen=True)
class ConvertParams:
    """Target encoding.

    ``format`` is kept as given (enum or tag string) so an unknown tag is
    reported by the convert operation instead of at construction. ``quality``
    is only used for JPEG and WEBP and is clamped to 0-100.
    """

    format: Union[ImageFormat, str]
    quality: Optional[int] = None
