"""Data models for rasters, operation parameters and results."""

from .image_format import ImageFormat
from .raster import RasterBuffer
from .params import CropParams, ResizeParams, ConvertParams
from .results import EncodedImage, ImageInfo, DiffMetrics, ProcessedImage

__all__ = [
    'ImageFormat',
    'RasterBuffer',
    'CropParams',
    'ResizeParams',
    'ConvertParams',
    'EncodedImage',
    'ImageInfo',
    'DiffMetrics',
    'ProcessedImage',
]
