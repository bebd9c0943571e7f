"""Tests for metadata inspection."""

import pytest

from config import CodecSettings
from engines.codec import encode
from engines.errors import CorruptData, ImageTooLarge, UnsupportedFormat
from engines.inspector import inspect
from models.image_format import ImageFormat
from utils.test_images import encode_png, generate_checkerboard, generate_gradient


def test_png_info():
    data = encode_png(generate_gradient(50, 80))
    info = inspect(data)
    assert info.to_dict() == {'width': 50, 'height': 80, 'format': 'png', 'size_bytes': len(data)}


@pytest.mark.parametrize("fmt", list(ImageFormat))
def test_info_for_every_format(fmt):
    data = encode(generate_checkerboard(33, 21), fmt).data
    info = inspect(data)
    assert (info.width, info.height) == (33, 21)
    assert info.format == fmt
    assert info.size_bytes == len(data)


def test_size_is_input_length_not_raster_size():
    data = encode_png(generate_checkerboard(64, 64))
    assert inspect(data).size_bytes == len(data) != 64 * 64 * 4


def test_inspect_fails_like_decode():
    with pytest.raises(UnsupportedFormat):
        inspect(b'')
    with pytest.raises(UnsupportedFormat):
        inspect(b'not an image at all')
    data = encode_png(generate_gradient(64, 64))
    with pytest.raises(CorruptData):
        inspect(data[:len(data) // 2])
    with pytest.raises(ImageTooLarge):
        inspect(data, CodecSettings(max_image_pixels=10))
