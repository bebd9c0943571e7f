"""Operation outputs."""

import base64
import math
from dataclasses import dataclass
from typing import Optional

from models.image_format import ImageFormat


@dataclass(frozen=True)
class EncodedImage:
    """Encoded bytes plus the format they are encoded in."""

    data: bytes
    format: ImageFormat

    @property
    def size_bytes(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class ImageInfo:
    """Basic facts about an encoded input."""

    width: int
    height: int
    format: ImageFormat
    size_bytes: int

    def to_dict(self) -> dict:
        return {
            'width': self.width,
            'height': self.height,
            'format': self.format.value,
            'size_bytes': self.size_bytes,
        }


@dataclass(frozen=True)
class DiffMetrics:
    """Similarity statistics of two aligned rasters."""

    changed_pixels: int
    changed_ratio: float
    max_delta: int
    psnr: float
    ssim: float

    def to_dict(self) -> dict:
        return {
            'changed_pixels': self.changed_pixels,
            'changed_ratio': self.changed_ratio,
            'max_delta': self.max_delta,
            # JSON has no infinity; identical images report null PSNR
            'psnr': None if math.isinf(self.psnr) else self.psnr,
            'ssim': self.ssim,
        }


@dataclass(frozen=True)
class ProcessedImage:
    """Result of crop/resize/convert/compare as returned to the caller."""

    data: bytes
    format: ImageFormat
    width: int
    height: int
    size_bytes: int
    metrics: Optional[DiffMetrics] = None

    @classmethod
    def from_encoded(cls, encoded: EncodedImage, width: int, height: int,
                     metrics: Optional[DiffMetrics] = None) -> 'ProcessedImage':
        return cls(
            data=encoded.data,
            format=encoded.format,
            width=width,
            height=height,
            size_bytes=encoded.size_bytes,
            metrics=metrics,
        )

    def to_dict(self, base64_data: bool = True) -> dict:
        """Wire shape; ``data`` is base64 text unless ``base64_data`` is False."""
        out = {
            'data': base64.b64encode(self.data).decode('ascii') if base64_data else self.data,
            'format': self.format.value,
            'width': self.width,
            'height': self.height,
            'size_bytes': self.size_bytes,
        }
        if self.metrics is not None:
            out['metrics'] = self.metrics.to_dict()
        return out
