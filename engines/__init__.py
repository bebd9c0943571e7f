"""Image engines - pure computation, no GUI dependencies."""

from .errors import (
    ErrorKind,
    ImageEngineError,
    DecodeError,
    UnsupportedFormat,
    CorruptData,
    ImageTooLarge,
    InvalidCropRegion,
    InvalidDimensions,
    InvalidFormat,
    EncodeFailure,
)
from .signatures import detect_format, sniff_format
from .codec import decode, decode_with_format, encode, clamp_quality
from .crop import crop
from .resize import resize, resize_exact, compute_fit
from .convert import convert
from .diff import diff, diff_with_metrics, align_pair
from .inspector import inspect
from .pipeline import crop_image, resize_image, convert_image, compare_images, get_image_info

__all__ = [
    'ErrorKind',
    'ImageEngineError',
    'DecodeError',
    'UnsupportedFormat',
    'CorruptData',
    'ImageTooLarge',
    'InvalidCropRegion',
    'InvalidDimensions',
    'InvalidFormat',
    'EncodeFailure',
    'detect_format',
    'sniff_format',
    'decode',
    'decode_with_format',
    'encode',
    'clamp_quality',
    'crop',
    'resize',
    'resize_exact',
    'compute_fit',
    'convert',
    'diff',
    'diff_with_metrics',
    'align_pair',
    'inspect',
    'crop_image',
    'resize_image',
    'convert_image',
    'compare_images',
    'get_image_info',
]
