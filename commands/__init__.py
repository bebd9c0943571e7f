"""Command boundary: typed requests, handlers and asynchronous execution."""

from .boundary import (
    Command,
    CommandError,
    CommandResponse,
    CompareImagesRequest,
    ConvertImageRequest,
    CropImageRequest,
    ERROR_MESSAGES,
    GetImageInfoRequest,
    ImageCommandService,
    ResizeImageRequest,
)
from .executor import CommandExecutor
from .transport import decode_payload, encode_payload, to_data_url

__all__ = [
    'Command',
    'CommandError',
    'CommandResponse',
    'CompareImagesRequest',
    'ConvertImageRequest',
    'CropImageRequest',
    'ERROR_MESSAGES',
    'GetImageInfoRequest',
    'ImageCommandService',
    'ResizeImageRequest',
    'CommandExecutor',
    'decode_payload',
    'encode_payload',
    'to_data_url',
]
