"""Visual difference of two rasters.

Inputs of different size are aligned first: the smaller one (by area, then by
width) is stretched bilinearly to the larger one's exact size. Per pixel the
largest absolute channel delta decides the output color:

- below ``DiffSettings.threshold``: white, absorbing lossy re-encoding noise;
- otherwise a red ramp that gets darker and more saturated as the delta grows,
  from light pink just above the threshold to (160, 0, 0) at 255.

Alpha is ignored unless ``DiffSettings.compare_alpha`` is set, in which case the
alpha delta takes part in the per-pixel maximum like any color channel. The
output is always fully opaque.

PSNR and SSIM are computed on a copy area-averaged down to at most
``DiffSettings.metrics_max_pixels`` pixels; the diff image and the changed
pixel counts always use the full frame.
"""

import math
from typing import Tuple

import cv2
import numpy as np

from config import CONFIG, DiffSettings
from engines.resize import resize_exact
from models.raster import RasterBuffer
from models.results import DiffMetrics
from utils.metrics import compute_psnr_ssim

# Ramp endpoints: green/blue fall from RAMP_LIGHT to 0, red from 255 to RAMP_DARK_RED
RAMP_LIGHT = 220
RAMP_DARK_RED = 160


def align_pair(a: RasterBuffer, b: RasterBuffer) -> Tuple[RasterBuffer, RasterBuffer]:
    """Return both buffers at the larger buffer's size."""
    if a.size == b.size:
        return a, b
    if (a.area, a.width) < (b.area, b.width):
        return resize_exact(a, b.width, b.height), b
    return a, resize_exact(b, a.width, a.height)


def channel_delta(a: RasterBuffer, b: RasterBuffer, compare_alpha: bool = False) -> np.ndarray:
    """Largest absolute per-channel difference of two same-size buffers, (H, W) uint8."""
    channels = 4 if compare_alpha else 3
    pa = a.pixels[:, :, :channels].astype(np.int16)
    pb = b.pixels[:, :, :channels].astype(np.int16)
    return np.abs(pa - pb).max(axis=2).astype(np.uint8)


def render_delta(delta: np.ndarray, threshold: int) -> np.ndarray:
    """Map a delta map to RGBA: white below threshold, red ramp above."""
    h, w = delta.shape
    out = np.full((h, w, 4), 255, dtype=np.uint8)
    changed = delta >= threshold
    if not changed.any():
        return out
    t = delta[changed].astype(np.float32) / 255.0
    out[changed, 0] = np.rint(255.0 - (255.0 - RAMP_DARK_RED) * t).astype(np.uint8)
    gb = np.rint(RAMP_LIGHT * (1.0 - t)).astype(np.uint8)
    out[changed, 1] = gb
    out[changed, 2] = gb
    return out


def metrics_sample(a: RasterBuffer, b: RasterBuffer, max_pixels: int) -> Tuple[np.ndarray, np.ndarray]:
    """RGB arrays of both aligned buffers, shrunk with INTER_AREA to at most ``max_pixels``."""
    if a.area <= max_pixels:
        return np.ascontiguousarray(a.rgb), np.ascontiguousarray(b.rgb)
    scale = math.sqrt(max_pixels / a.area)
    size = (max(1, int(a.width * scale)), max(1, int(a.height * scale)))
    # Shrink the contiguous RGBA buffers; only the small result is copied to RGB
    small_a = cv2.resize(a.pixels, size, interpolation=cv2.INTER_AREA)
    small_b = cv2.resize(b.pixels, size, interpolation=cv2.INTER_AREA)
    return np.ascontiguousarray(small_a[:, :, :3]), np.ascontiguousarray(small_b[:, :, :3])


def _render(a: RasterBuffer, b: RasterBuffer, settings: DiffSettings):
    a, b = align_pair(a, b)
    delta = channel_delta(a, b, settings.compare_alpha)
    return a, b, delta, RasterBuffer(render_delta(delta, settings.threshold))


def diff_with_metrics(a: RasterBuffer, b: RasterBuffer,
                      settings: DiffSettings = CONFIG.diff) -> Tuple[RasterBuffer, DiffMetrics]:
    """Diff image plus similarity statistics of the aligned pair."""
    a, b, delta, image = _render(a, b, settings)

    changed = int(np.count_nonzero(delta >= settings.threshold))
    scores = compute_psnr_ssim(*metrics_sample(a, b, settings.metrics_max_pixels))
    metrics = DiffMetrics(
        changed_pixels=changed,
        changed_ratio=changed / delta.size,
        max_delta=int(delta.max()),
        psnr=scores['psnr'],
        ssim=scores['ssim'],
    )
    return image, metrics


def diff(a: RasterBuffer, b: RasterBuffer, settings: DiffSettings = CONFIG.diff) -> RasterBuffer:
    """Visual difference image at the larger input's size."""
    return _render(a, b, settings)[3]
