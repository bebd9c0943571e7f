"""Tests for the crop operation."""

import numpy as np
import pytest

from engines.crop import crop
from engines.errors import InvalidCropRegion
from models.params import CropParams
from utils.test_images import generate_gradient


def test_crop_output_has_requested_size():
    src = generate_gradient(100, 60)
    for params in [CropParams(0, 0, 1, 1), CropParams(10, 5, 40, 30), CropParams(99, 59, 1, 1)]:
        out = crop(src, params)
        assert out.size == (params.width, params.height)


def test_crop_copies_sub_rectangle():
    src = generate_gradient(50, 40)
    out = crop(src, CropParams(7, 3, 20, 11))
    assert np.array_equal(out.pixels, src.pixels[3:14, 7:27])


def test_full_crop_is_identity():
    src = generate_gradient(31, 17)
    out = crop(src, CropParams(0, 0, 31, 17))
    assert np.array_equal(out.pixels, src.pixels)
    assert out.pixels is not src.pixels


@pytest.mark.parametrize("params", [
    CropParams(1, 0, 100, 10),
    CropParams(0, 1, 10, 60),
    CropParams(95, 0, 10, 10),
    CropParams(100, 0, 1, 1),
])
def test_crop_past_bounds_fails(params):
    src = generate_gradient(100, 60)
    with pytest.raises(InvalidCropRegion) as exc_info:
        crop(src, params)
    details = exc_info.value.details
    assert details['source_width'] == 100
    assert details['source_height'] == 60
    assert details['x'] == params.x
    assert details['width'] == params.width


@pytest.mark.parametrize("params", [
    CropParams(0, 0, 0, 10),
    CropParams(0, 0, 10, 0),
    CropParams(-1, 0, 5, 5),
    CropParams(0, -3, 5, 5),
])
def test_crop_rejects_non_positive_or_negative(params):
    with pytest.raises(InvalidCropRegion):
        crop(generate_gradient(20, 20), params)


def test_crop_never_clamps():
    """An oversized request fails instead of returning a smaller image."""
    with pytest.raises(InvalidCropRegion):
        crop(generate_gradient(10, 10), CropParams(5, 5, 10, 10))
