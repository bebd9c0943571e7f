"""Canonical decoded raster."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class RasterBuffer:
    """Decoded image as an (height, width, 4) uint8 RGBA array, row-major.

    The pixel array is made read-only on construction; operations always
    build a new buffer instead of writing into an existing one.
    """

    pixels: np.ndarray

    def __post_init__(self):
        pixels = self.pixels
        if not isinstance(pixels, np.ndarray):
            raise TypeError(f"Pixels must be a numpy array, got {type(pixels).__name__}")
        if pixels.dtype != np.uint8:
            raise ValueError(f"Pixels must be uint8, got {pixels.dtype}")
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(f"Pixels must have shape (H, W, 4), got {pixels.shape}")
        if pixels.shape[0] < 1 or pixels.shape[1] < 1:
            raise ValueError(f"Raster must be at least 1x1, got {pixels.shape[1]}x{pixels.shape[0]}")
        view = np.ascontiguousarray(pixels).view()
        view.flags.writeable = False
        object.__setattr__(self, 'pixels', view)

    @classmethod
    def from_rgba_bytes(cls, data: bytes, width: int, height: int) -> 'RasterBuffer':
        """Build a buffer from flat RGBA bytes (len == width * height * 4)."""
        expected = width * height * 4
        if len(data) != expected:
            raise ValueError(f"Expected {expected} bytes for {width}x{height} RGBA, got {len(data)}")
        arr = np.frombuffer(data, dtype=np.uint8).reshape(height, width, 4).copy()
        return cls(arr)

    @classmethod
    def from_rgb(cls, rgb: np.ndarray, alpha: int = 255) -> 'RasterBuffer':
        """Build an opaque buffer from an (H, W, 3) uint8 array."""
        h, w = rgb.shape[:2]
        a = np.full((h, w, 1), alpha, dtype=np.uint8)
        return cls(np.concatenate([rgb.astype(np.uint8), a], axis=2))

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> tuple:
        return (self.width, self.height)

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def rgb(self) -> np.ndarray:
        return self.pixels[:, :, :3]

    @property
    def alpha(self) -> np.ndarray:
        return self.pixels[:, :, 3]

    @property
    def has_transparency(self) -> bool:
        return bool((self.alpha < 255).any())

    def tobytes(self) -> bytes:
        """Flat RGBA bytes, len == width * height * 4."""
        return self.pixels.tobytes()
