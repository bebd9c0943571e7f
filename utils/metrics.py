"""Metrics: PSNR, SSIM, timing."""

import time
import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity
from typing import Dict

# scikit-image default window side
SSIM_WINDOW = 7


def _ssim_window(h: int, w: int) -> int:
    win = min(SSIM_WINDOW, h, w)
    return win if win % 2 == 1 else win - 1


def _global_ssim(a: np.ndarray, b: np.ndarray, data_range: float = 255.0) -> float:
    """Single-window SSIM over the whole array, for inputs too small to slide a window."""
    a = a.astype(np.float64)
    b = b.astype(np.float64)
    c1 = (0.01 * data_range) ** 2
    c2 = (0.03 * data_range) ** 2
    mu_a, mu_b = a.mean(), b.mean()
    var_a, var_b = a.var(), b.var()
    cov = ((a - mu_a) * (b - mu_b)).mean()
    num = (2 * mu_a * mu_b + c1) * (2 * cov + c2)
    den = (mu_a ** 2 + mu_b ** 2 + c1) * (var_a + var_b + c2)
    return float(num / den)


def compute_psnr(original: np.ndarray, other: np.ndarray) -> float:
    """PSNR in dB; identical inputs give +inf."""
    if np.array_equal(original, other):
        return float('inf')
    return float(peak_signal_noise_ratio(original, other, data_range=255))


def compute_ssim(original: np.ndarray, other: np.ndarray) -> float:
    """SSIM of two (H, W) or (H, W, C) uint8 arrays."""
    h, w = original.shape[:2]
    win = _ssim_window(h, w)
    if win < 3:
        return _global_ssim(original, other)
    channel_axis = 2 if original.ndim == 3 else None
    return float(structural_similarity(
        original, other, win_size=win, channel_axis=channel_axis, data_range=255
    ))


def compute_psnr_ssim(original_rgb: np.ndarray, other_rgb: np.ndarray) -> Dict[str, float]:
    """Compute PSNR and SSIM on RGB."""
    return {
        'psnr': compute_psnr(original_rgb, other_rgb),
        'ssim': compute_ssim(original_rgb, other_rgb),
    }


class Timer:
    """Collects wall-clock durations of named pipeline stages."""

    def __init__(self):
        self.stages_ms: Dict[str, float] = {}

    def measure(self, stage: str, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.stages_ms[stage] = (time.perf_counter() - start) * 1000.0
        return result

    @property
    def total_ms(self) -> float:
        return sum(self.stages_ms.values())

    def summary(self) -> str:
        return ' '.join(f"{k}={v:.1f}ms" for k, v in self.stages_ms.items())
