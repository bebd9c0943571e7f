"""Channel-model conversions for formats without full alpha."""

import numpy as np
from typing import Tuple


def flatten_alpha(rgba: np.ndarray, background: Tuple[int, int, int] = (255, 255, 255)) -> np.ndarray:
    """Composite RGBA over an opaque background color, returning RGB uint8."""
    if not (rgba[:, :, 3] < 255).any():
        return np.ascontiguousarray(rgba[:, :, :3])
    alpha = rgba[:, :, 3:4].astype(np.float32) / 255.0
    rgb = rgba[:, :, :3].astype(np.float32)
    bg = np.asarray(background, dtype=np.float32).reshape(1, 1, 3)
    out = rgb * alpha + bg * (1.0 - alpha)
    return np.clip(np.rint(out), 0, 255).astype(np.uint8)


def transparent_mask(alpha: np.ndarray, threshold: int = 128) -> np.ndarray:
    """Boolean mask of pixels treated as fully transparent in binary-alpha formats."""
    return alpha < threshold
