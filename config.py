"""Engine configuration.

Defaults for codec behaviour, diff sensitivity and the worker pool. Build a
new ``EngineConfig`` and hand it to ``ImageCommandService`` (or use the CLI
flags in ``main.py``) to override them; ``CONFIG`` is the default instance.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class CodecSettings:
    """Encoding and decoding defaults.

    Attributes
    ----------
    default_jpeg_quality
        JPEG quality used when a request does not give one.
    default_webp_quality
        Lossy WEBP quality, used only when a caller asks for lossy WEBP
        without a quality (e.g. via ``encode(..., lossless=False)``).
    flatten_background
        RGB color transparent pixels are composited onto for formats
        without alpha (JPEG, BMP).
    gif_alpha_threshold
        Pixels with alpha below this value become transparent in GIF output.
    max_image_pixels
        Largest width * height accepted by the decoder.
    png_compress_level
        zlib level for PNG output (0-9).
    """

    default_jpeg_quality: int = 90
    default_webp_quality: int = 90
    flatten_background: Tuple[int, int, int] = (255, 255, 255)
    gif_alpha_threshold: int = 128
    max_image_pixels: int = 64_000_000
    png_compress_level: int = 6


@dataclass(frozen=True)
class DiffSettings:
    """Visual diff tuning.

    Attributes
    ----------
    threshold
        Pixels whose largest channel delta is below this value render as
        "no difference" (white).
    compare_alpha
        Whether alpha deltas count toward the per-pixel difference.
    metrics_max_pixels
        PSNR/SSIM run on a copy downsampled to at most this many pixels,
        keeping their memory use independent of the input size.
    """

    threshold: int = 10
    compare_alpha: bool = False
    metrics_max_pixels: int = 1_000_000


def _default_workers() -> int:
    return max(1, min(4, os.cpu_count() or 1))


@dataclass(frozen=True)
class ExecutionSettings:
    """Worker pool sizing for asynchronous command execution."""

    max_workers: int = field(default_factory=_default_workers)


@dataclass(frozen=True)
class EngineConfig:
    """Top-level configuration container."""

    codec: CodecSettings = field(default_factory=CodecSettings)
    diff: DiffSettings = field(default_factory=DiffSettings)
    execution: ExecutionSettings = field(default_factory=ExecutionSettings)


CONFIG = EngineConfig()
