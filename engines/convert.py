"""Format conversion: a pure re-encode into the requested format."""

import numpy as np

from config import CONFIG, CodecSettings
from engines.codec import encode
from engines.errors import InvalidFormat
from models.image_format import ImageFormat
from models.params import ConvertParams
from models.raster import RasterBuffer
from models.results import EncodedImage


def resolve_format(value) -> ImageFormat:
    """Map a user format tag to ImageFormat, raising InvalidFormat otherwise."""
    try:
        return ImageFormat.parse(value)
    except ValueError as e:
        supported = ', '.join(f.value for f in ImageFormat)
        raise InvalidFormat(f"{e}. Supported formats: {supported}", format=str(value)) from e


def validate_quality(quality) -> None:
    """Reject a quality that is neither None nor an integer."""
    if quality is None:
        return
    if isinstance(quality, bool) or not isinstance(quality, (int, np.integer)):
        raise InvalidFormat(f"Quality must be an integer from 0 to 100, got {quality!r}",
                            quality=repr(quality))


def convert(raster: RasterBuffer, params: ConvertParams,
            settings: CodecSettings = CONFIG.codec) -> EncodedImage:
    """Encode ``raster`` into ``params.format``.

    Pixels are only touched where the target codec requires it (alpha
    flattening, palette quantization).
    """
    fmt = resolve_format(params.format)
    validate_quality(params.quality)
    return encode(raster, fmt, quality=params.quality, settings=settings)
