"""Per-command pipelines: decode -> operation -> encode."""

from config import CONFIG, EngineConfig
from engines.codec import decode, decode_with_format, encode
from engines.convert import convert, resolve_format, validate_quality
from engines.crop import crop
from engines.diff import diff_with_metrics
from engines.inspector import inspect
from engines.resize import resize
from models.image_format import ImageFormat
from models.params import ConvertParams, CropParams, ResizeParams
from models.results import ImageInfo, ProcessedImage
from utils.logger import get_logger
from utils.metrics import Timer

_logger = get_logger("pipeline")


def output_format_for_crop(source: ImageFormat) -> ImageFormat:
    """Crops keep the source format; no new colors are introduced."""
    return source


def output_format_for_resize(source: ImageFormat) -> ImageFormat:
    """Resizes keep the source format except GIF.

    Bilinear resampling creates blended colors and partial alpha that a
    256-color palette with binary transparency cannot hold, so GIF becomes PNG.
    """
    return ImageFormat.PNG if source == ImageFormat.GIF else source


def crop_image(data: bytes, params: CropParams, config: EngineConfig = CONFIG) -> ProcessedImage:
    """Crop encoded ``data`` and re-encode it in its own format."""
    timer = Timer()
    raster, source_fmt = timer.measure('decode', decode_with_format, data, config.codec)
    cropped = timer.measure('crop', crop, raster, params)
    fmt = output_format_for_crop(source_fmt)
    encoded = timer.measure('encode', encode, cropped, fmt, settings=config.codec)
    _logger.debug("crop %dx%d -> %dx%d %s (%s)", raster.width, raster.height,
                  cropped.width, cropped.height, fmt.value, timer.summary())
    return ProcessedImage.from_encoded(encoded, cropped.width, cropped.height)


def resize_image(data: bytes, params: ResizeParams, config: EngineConfig = CONFIG) -> ProcessedImage:
    """Resize encoded ``data``; the result carries the actual output size."""
    timer = Timer()
    raster, source_fmt = timer.measure('decode', decode_with_format, data, config.codec)
    resized = timer.measure('resize', resize, raster, params, config.codec.max_image_pixels)
    fmt = output_format_for_resize(source_fmt)
    encoded = timer.measure('encode', encode, resized, fmt, settings=config.codec)
    _logger.debug("resize %dx%d -> %dx%d %s (%s)", raster.width, raster.height,
                  resized.width, resized.height, fmt.value, timer.summary())
    return ProcessedImage.from_encoded(encoded, resized.width, resized.height)


def convert_image(data: bytes, params: ConvertParams, config: EngineConfig = CONFIG) -> ProcessedImage:
    """Re-encode ``data`` into ``params.format``."""
    # Reject bad parameters before paying for the decode
    resolve_format(params.format)
    validate_quality(params.quality)
    timer = Timer()
    raster = timer.measure('decode', decode, data, config.codec)
    encoded = timer.measure('encode', convert, raster, params, config.codec)
    _logger.debug("convert %dx%d -> %s %d bytes (%s)", raster.width, raster.height,
                  encoded.format.value, encoded.size_bytes, timer.summary())
    return ProcessedImage.from_encoded(encoded, raster.width, raster.height)


def compare_images(data1: bytes, data2: bytes, config: EngineConfig = CONFIG) -> ProcessedImage:
    """Visual diff of two encoded images, always emitted as PNG."""
    timer = Timer()
    first = timer.measure('decode_a', decode, data1, config.codec)
    second = timer.measure('decode_b', decode, data2, config.codec)
    image, metrics = timer.measure('diff', diff_with_metrics, first, second, config.diff)
    encoded = timer.measure('encode', encode, image, ImageFormat.PNG, settings=config.codec)
    _logger.debug("compare %dx%d vs %dx%d -> %dx%d changed=%d (%s)",
                  first.width, first.height, second.width, second.height,
                  image.width, image.height, metrics.changed_pixels, timer.summary())
    return ProcessedImage.from_encoded(encoded, image.width, image.height, metrics=metrics)


def get_image_info(data: bytes, config: EngineConfig = CONFIG) -> ImageInfo:
    """Width, height, detected format and byte size of ``data``."""
    return inspect(data, config.codec)
