"""Command boundary between a presentation layer and the engine.

Each of the five commands has a typed request and an explicit handler on
``ImageCommandService``. Handlers never raise for engine failures: they return
a ``CommandResponse`` holding either the result or a ``CommandError`` that
keeps the error kind for programmatic handling next to a user-facing message.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional, Union

from config import CONFIG, EngineConfig
from engines import pipeline
from engines.errors import ErrorKind, ImageEngineError
from models.params import ConvertParams, CropParams, ResizeParams
from models.results import ImageInfo, ProcessedImage
from utils.logger import get_logger

_logger = get_logger("commands")


class Command(str, Enum):
    CROP_IMAGE = 'crop_image'
    RESIZE_IMAGE = 'resize_image'
    CONVERT_IMAGE = 'convert_image'
    COMPARE_IMAGES = 'compare_images'
    GET_IMAGE_INFO = 'get_image_info'


ERROR_MESSAGES = {
    ErrorKind.UNSUPPORTED_FORMAT: "The data is not a supported image (PNG, JPEG, WEBP, BMP or GIF).",
    ErrorKind.CORRUPT_DATA: "The image data is damaged or incomplete.",
    ErrorKind.IMAGE_TOO_LARGE: "The image is too large to process.",
    ErrorKind.INVALID_CROP_REGION: "The crop area must lie inside the image and be at least 1x1.",
    ErrorKind.INVALID_DIMENSIONS: "Width and height must be positive.",
    ErrorKind.INVALID_FORMAT: "The requested output format or quality is not supported.",
    ErrorKind.ENCODE_FAILURE: "The image could not be saved in the requested format.",
    ErrorKind.INTERNAL: "An unexpected error occurred while processing the image.",
}


@dataclass(frozen=True)
class CropImageRequest:
    command: ClassVar[Command] = Command.CROP_IMAGE
    data: bytes
    params: CropParams


@dataclass(frozen=True)
class ResizeImageRequest:
    command: ClassVar[Command] = Command.RESIZE_IMAGE
    data: bytes
    params: ResizeParams


@dataclass(frozen=True)
class ConvertImageRequest:
    command: ClassVar[Command] = Command.CONVERT_IMAGE
    data: bytes
    params: ConvertParams


@dataclass(frozen=True)
class CompareImagesRequest:
    command: ClassVar[Command] = Command.COMPARE_IMAGES
    data1: bytes
    data2: bytes


@dataclass(frozen=True)
class GetImageInfoRequest:
    command: ClassVar[Command] = Command.GET_IMAGE_INFO
    data: bytes


CommandRequest = Union[
    CropImageRequest,
    ResizeImageRequest,
    ConvertImageRequest,
    CompareImagesRequest,
    GetImageInfoRequest,
]


@dataclass(frozen=True)
class CommandError:
    kind: ErrorKind
    message: str
    details: dict = field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: Exception) -> 'CommandError':
        if isinstance(exc, ImageEngineError):
            kind = exc.kind
            details = dict(exc.details)
        else:
            kind = ErrorKind.INTERNAL
            details = {'exception': type(exc).__name__}
        text = str(exc)
        message = ERROR_MESSAGES[kind] + (f" ({text})" if text else "")
        return cls(kind=kind, message=message, details=details)

    def to_dict(self) -> dict:
        return {'kind': self.kind.value, 'message': self.message, 'details': self.details}


@dataclass(frozen=True)
class CommandResponse:
    command: Command
    result: Optional[Union[ProcessedImage, ImageInfo]] = None
    error: Optional[CommandError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        if self.error is not None:
            return {'command': self.command.value, 'ok': False, 'error': self.error.to_dict()}
        return {'command': self.command.value, 'ok': True, 'result': self.result.to_dict()}


class ImageCommandService:
    """Stateless handlers for the five image commands."""

    def __init__(self, config: EngineConfig = CONFIG):
        self.config = config

    def _run(self, command: Command, func, *args: Any) -> CommandResponse:
        try:
            result = func(*args, config=self.config)
        except ImageEngineError as e:
            _logger.warning("%s failed: %s: %s", command.value, e.kind.value, e)
            return CommandResponse(command=command, error=CommandError.from_exception(e))
        except Exception as e:
            _logger.exception("%s failed unexpectedly", command.value)
            return CommandResponse(command=command, error=CommandError.from_exception(e))
        return CommandResponse(command=command, result=result)

    def crop_image(self, data: bytes, params: CropParams) -> CommandResponse:
        return self._run(Command.CROP_IMAGE, pipeline.crop_image, data, params)

    def resize_image(self, data: bytes, params: ResizeParams) -> CommandResponse:
        return self._run(Command.RESIZE_IMAGE, pipeline.resize_image, data, params)

    def convert_image(self, data: bytes, params: ConvertParams) -> CommandResponse:
        return self._run(Command.CONVERT_IMAGE, pipeline.convert_image, data, params)

    def compare_images(self, data1: bytes, data2: bytes) -> CommandResponse:
        return self._run(Command.COMPARE_IMAGES, pipeline.compare_images, data1, data2)

    def get_image_info(self, data: bytes) -> CommandResponse:
        return self._run(Command.GET_IMAGE_INFO, pipeline.get_image_info, data)

    def execute(self, request: CommandRequest) -> CommandResponse:
        """Route a typed request to its handler."""
        if isinstance(request, CropImageRequest):
            return self.crop_image(request.data, request.params)
        if isinstance(request, ResizeImageRequest):
            return self.resize_image(request.data, request.params)
        if isinstance(request, ConvertImageRequest):
            return self.convert_image(request.data, request.params)
        if isinstance(request, CompareImagesRequest):
            return self.compare_images(request.data1, request.data2)
        if isinstance(request, GetImageInfoRequest):
            return self.get_image_info(request.data)
        raise TypeError(f"Unknown command request: {type(request).__name__}")
