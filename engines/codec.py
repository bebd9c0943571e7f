"""Codec layer: encoded bytes <-> RasterBuffer.

Decoding detects the format from the leading signature and only lets the
matching Pillow plugin parse the payload. Encoding applies whatever the
target format's channel model needs (alpha flattening for JPEG/BMP, palette
quantization with binary transparency for GIF) and nothing else.
"""

import io
from typing import Optional, Tuple

import numpy as np
from PIL import Image

from config import CONFIG, CodecSettings
from engines.color_space import flatten_alpha, transparent_mask
from engines.errors import CorruptData, EncodeFailure, ImageEngineError, ImageTooLarge
from engines.signatures import detect_format
from models.image_format import ImageFormat
from models.raster import RasterBuffer
from models.results import EncodedImage
from utils.logger import get_logger

_logger = get_logger("codec")

# Largest side each encoder accepts
MAX_DIMENSION = {
    ImageFormat.JPEG: 65535,
    ImageFormat.WEBP: 16383,
    ImageFormat.GIF: 65535,
}

GIF_TRANSPARENT_INDEX = 255

_SIXTEEN_BIT_MODES = ('I', 'I;16', 'I;16L', 'I;16B', 'I;16N')


def clamp_quality(quality: int) -> int:
    """Clamp a 0-100 quality value instead of rejecting it."""
    return int(np.clip(int(quality), 0, 100))


def _to_rgba_array(img: Image.Image) -> np.ndarray:
    """Normalise any Pillow mode to an (H, W, 4) uint8 array."""
    if img.mode in _SIXTEEN_BIT_MODES:
        gray = np.asarray(img).astype(np.int64)
        gray = (np.clip(gray, 0, 65535) >> 8).astype(np.uint8)
        alpha = np.full(gray.shape, 255, dtype=np.uint8)
        return np.stack([gray, gray, gray, alpha], axis=-1)
    if img.mode != 'RGBA':
        img = img.convert('RGBA')
    return np.asarray(img, dtype=np.uint8)


def decode_with_format(data: bytes, settings: CodecSettings = CONFIG.codec) -> Tuple[RasterBuffer, ImageFormat]:
    """Decode bytes into a RasterBuffer, also returning the detected format.

    Raises UnsupportedFormat when no signature matches, ImageTooLarge when the
    header announces more than ``settings.max_image_pixels`` pixels and
    CorruptData when the matching decoder fails on the payload.
    """
    fmt = detect_format(data)
    try:
        with Image.open(io.BytesIO(data), formats=[fmt.pil_name]) as img:
            width, height = img.size
            if width * height > settings.max_image_pixels:
                raise ImageTooLarge(
                    f"{width}x{height} exceeds the {settings.max_image_pixels} pixel limit",
                    width=width,
                    height=height,
                    max_pixels=settings.max_image_pixels,
                )
            if width < 1 or height < 1:
                raise CorruptData(f"Invalid {fmt.value} dimensions {width}x{height}")
            img.load()
            pixels = _to_rgba_array(img)
    except ImageEngineError:
        raise
    except Image.DecompressionBombError as e:
        raise ImageTooLarge(str(e)) from e
    except Exception as e:
        raise CorruptData(f"Failed to decode {fmt.value} data: {e}", format=fmt.value) from e

    raster = RasterBuffer(pixels)
    _logger.debug("decoded %s %dx%d from %d bytes", fmt.value, raster.width, raster.height, len(data))
    return raster, fmt


def decode(data: bytes, settings: CodecSettings = CONFIG.codec) -> RasterBuffer:
    """Decode bytes of any supported format into a RasterBuffer."""
    raster, _ = decode_with_format(data, settings)
    return raster


def _gif_image(raster: RasterBuffer, settings: CodecSettings) -> Tuple[Image.Image, dict]:
    rgb = Image.fromarray(np.ascontiguousarray(raster.rgb))
    mask = transparent_mask(raster.alpha, settings.gif_alpha_threshold)
    if not mask.any():
        return rgb.quantize(colors=256, method=Image.Quantize.MEDIANCUT, dither=Image.Dither.NONE), {}

    # Reserve the last palette slot for transparent pixels
    paletted = rgb.quantize(colors=255, method=Image.Quantize.MEDIANCUT, dither=Image.Dither.NONE)
    palette = (paletted.getpalette() or [])[:GIF_TRANSPARENT_INDEX * 3]
    palette += [0] * (768 - len(palette))
    paletted.putpalette(palette)
    paletted.paste(GIF_TRANSPARENT_INDEX, mask=Image.fromarray(mask.astype(np.uint8) * 255))
    return paletted, {'transparency': GIF_TRANSPARENT_INDEX}


def _prepare(raster: RasterBuffer, fmt: ImageFormat, quality: Optional[int],
             lossless: Optional[bool], settings: CodecSettings) -> Tuple[Image.Image, dict]:
    if fmt == ImageFormat.PNG:
        return Image.fromarray(raster.pixels), {'compress_level': settings.png_compress_level}

    if fmt == ImageFormat.JPEG:
        q = settings.default_jpeg_quality if quality is None else clamp_quality(quality)
        rgb = flatten_alpha(raster.pixels, settings.flatten_background)
        return Image.fromarray(rgb), {'quality': q}

    if fmt == ImageFormat.WEBP:
        if lossless is None:
            lossless = quality is None
        if lossless:
            return Image.fromarray(raster.pixels), {'lossless': True, 'exact': True}
        q = settings.default_webp_quality if quality is None else clamp_quality(quality)
        return Image.fromarray(raster.pixels), {'quality': q}

    if fmt == ImageFormat.BMP:
        return Image.fromarray(flatten_alpha(raster.pixels, settings.flatten_background)), {}

    if fmt == ImageFormat.GIF:
        img, params = _gif_image(raster, settings)
        params['optimize'] = False
        return img, params

    raise EncodeFailure(f"No encoder registered for {fmt!r}")


def encode(
    raster: RasterBuffer,
    fmt: ImageFormat,
    quality: Optional[int] = None,
    lossless: Optional[bool] = None,
    settings: CodecSettings = CONFIG.codec,
) -> EncodedImage:
    """Encode a RasterBuffer into ``fmt``.

    ``quality`` only affects JPEG and WEBP and is clamped to 0-100. WEBP is
    written lossless unless a quality is given or ``lossless=False``.
    Raises EncodeFailure if the encoder rejects the buffer.
    """
    limit = MAX_DIMENSION.get(fmt)
    if limit is not None and (raster.width > limit or raster.height > limit):
        raise EncodeFailure(
            f"{fmt.value} cannot store {raster.width}x{raster.height} (max {limit} per side)",
            width=raster.width,
            height=raster.height,
            max_dimension=limit,
        )

    try:
        img, params = _prepare(raster, fmt, quality, lossless, settings)
        buf = io.BytesIO()
        img.save(buf, format=fmt.pil_name, **params)
    except ImageEngineError:
        raise
    except Exception as e:
        raise EncodeFailure(f"Failed to encode {fmt.value}: {e}", format=fmt.value) from e

    data = buf.getvalue()
    _logger.debug("encoded %s %dx%d to %d bytes", fmt.value, raster.width, raster.height, len(data))
    return EncodedImage(data=data, format=fmt)
