"""Error taxonomy shared by every engine operation."""

from enum import Enum


class ErrorKind(str, Enum):
    UNSUPPORTED_FORMAT = 'UnsupportedFormat'
    CORRUPT_DATA = 'CorruptData'
    IMAGE_TOO_LARGE = 'ImageTooLarge'
    INVALID_CROP_REGION = 'InvalidCropRegion'
    INVALID_DIMENSIONS = 'InvalidDimensions'
    INVALID_FORMAT = 'InvalidFormat'
    ENCODE_FAILURE = 'EncodeFailure'
    INTERNAL = 'Internal'


class ImageEngineError(Exception):
    """Base class; ``kind`` identifies the failure for programmatic handling."""

    kind = ErrorKind.INTERNAL

    def __init__(self, message: str, **details):
        super().__init__(message)
        self.message = message
        self.details = details


class DecodeError(ImageEngineError):
    """Input bytes could not be turned into a raster."""


class UnsupportedFormat(DecodeError):
    kind = ErrorKind.UNSUPPORTED_FORMAT


class CorruptData(DecodeError):
    kind = ErrorKind.CORRUPT_DATA


class ImageTooLarge(DecodeError):
    kind = ErrorKind.IMAGE_TOO_LARGE


class InvalidCropRegion(ImageEngineError):
    kind = ErrorKind.INVALID_CROP_REGION


class InvalidDimensions(ImageEngineError):
    kind = ErrorKind.INVALID_DIMENSIONS


class InvalidFormat(ImageEngineError):
    kind = ErrorKind.INVALID_FORMAT


class EncodeFailure(ImageEngineError):
    kind = ErrorKind.ENCODE_FAILURE
