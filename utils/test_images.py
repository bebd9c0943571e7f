"""Synthetic RGBA rasters for tests and the CLI demo mode."""

import io

import numpy as np
from PIL import Image

from models.raster import RasterBuffer


def generate_checkerboard(width: int = 64, height: int = 64, block_size: int = 8) -> RasterBuffer:
    """High-contrast opaque checkerboard."""
    ys, xs = np.indices((height, width))
    dark = ((ys // block_size + xs // block_size) % 2) == 0
    img = np.empty((height, width, 4), dtype=np.uint8)
    img[dark] = [30, 30, 30, 255]
    img[~dark] = [220, 220, 220, 255]
    return RasterBuffer(img)


def generate_gradient(width: int = 64, height: int = 64) -> RasterBuffer:
    """Smooth diagonal gradient, opaque."""
    ys, xs = np.indices((height, width), dtype=np.float32)
    t = (xs + ys) / max(width + height - 2, 1)
    img = np.empty((height, width, 4), dtype=np.uint8)
    img[:, :, 0] = np.rint(40 + t * 180)
    img[:, :, 1] = np.rint(60 + t * 140)
    img[:, :, 2] = np.rint(120 + t * 100)
    img[:, :, 3] = 255
    return RasterBuffer(img)


def generate_transparent_square(width: int = 32, height: int = 32,
                                color=(200, 40, 40)) -> RasterBuffer:
    """Opaque colored square in the middle, fully transparent border."""
    img = np.zeros((height, width, 4), dtype=np.uint8)
    y0, y1 = height // 4, height - height // 4
    x0, x1 = width // 4, width - width // 4
    img[y0:y1, x0:x1, :3] = color
    img[y0:y1, x0:x1, 3] = 255
    return RasterBuffer(img)


def generate_solid(width: int, height: int, rgba=(0, 0, 0, 255)) -> RasterBuffer:
    img = np.empty((height, width, 4), dtype=np.uint8)
    img[:, :] = rgba
    return RasterBuffer(img)


def encode_png(raster: RasterBuffer) -> bytes:
    """PNG bytes of ``raster`` written directly with Pillow."""
    buf = io.BytesIO()
    Image.fromarray(raster.pixels).save(buf, format='PNG')
    return buf.getvalue()


def generate_demo_image(key: str) -> RasterBuffer | None:
    """Generate demo image by key."""
    generators = {
        "checkerboard": lambda: generate_checkerboard(256, 256, 32),
        "gradient": lambda: generate_gradient(320, 240),
        "transparent": lambda: generate_transparent_square(128, 128),
    }

    if key in generators:
        return generators[key]()

    return None
