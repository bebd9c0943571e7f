"""Format detection from leading magic bytes."""

from engines.errors import UnsupportedFormat
from models.image_format import ImageFormat

# Longest prefix we need to look at (RIFF....WEBP)
SIGNATURE_LENGTH = 12

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'
JPEG_SIGNATURE = b'\xff\xd8\xff'
GIF_SIGNATURES = (b'GIF87a', b'GIF89a')
BMP_SIGNATURE = b'BM'


def sniff_format(data):
    """Return the ImageFormat whose signature ``data`` starts with, or None."""
    head = bytes(data[:SIGNATURE_LENGTH])
    if head.startswith(PNG_SIGNATURE):
        return ImageFormat.PNG
    if head.startswith(JPEG_SIGNATURE):
        return ImageFormat.JPEG
    if head.startswith(GIF_SIGNATURES):
        return ImageFormat.GIF
    if len(head) >= 12 and head[:4] == b'RIFF' and head[8:12] == b'WEBP':
        return ImageFormat.WEBP
    if head.startswith(BMP_SIGNATURE):
        return ImageFormat.BMP
    return None


def detect_format(data) -> ImageFormat:
    """Like sniff_format but raises UnsupportedFormat when nothing matches."""
    if data is None or len(data) == 0:
        raise UnsupportedFormat("Input is empty")
    fmt = sniff_format(data)
    if fmt is None:
        raise UnsupportedFormat(
            "Unrecognized image signature",
            signature=bytes(data[:SIGNATURE_LENGTH]).hex(),
        )
    return fmt
