"""Metadata inspection of encoded input."""

from config import CONFIG, CodecSettings
from engines.codec import decode_with_format
from models.results import ImageInfo


def inspect(data: bytes, settings: CodecSettings = CONFIG.codec) -> ImageInfo:
    """Report width, height, format and input size of encoded ``data``.

    The payload is fully decoded so that inspection fails exactly when
    decoding would, with the same error kinds.
    """
    raster, fmt = decode_with_format(data, settings)
    return ImageInfo(
        width=raster.width,
        height=raster.height,
        format=fmt,
        size_bytes=len(data),
    )
