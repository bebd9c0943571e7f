"""Tests for bilinear resizing."""

import numpy as np
import pytest

from engines.errors import InvalidDimensions
from engines.resize import compute_fit, resize, resize_exact, target_size
from models.params import ResizeParams
from models.raster import RasterBuffer
from utils.test_images import generate_checkerboard, generate_gradient, generate_solid


def test_exact_resize_ignores_aspect():
    src = generate_gradient(200, 100)
    out = resize(src, ResizeParams(30, 90, maintain_aspect_ratio=False))
    assert out.size == (30, 90)


def test_fit_within_box():
    assert resize(generate_gradient(200, 100), ResizeParams(50, 50, True)).size == (50, 25)
    assert resize(generate_gradient(100, 200), ResizeParams(80, 80, True)).size == (40, 80)
    assert resize(generate_gradient(64, 48), ResizeParams(640, 640, True)).size == (640, 480)


@pytest.mark.parametrize("src_size", [(200, 100), (100, 200), (37, 91), (640, 480), (1, 50)])
@pytest.mark.parametrize("box", [(50, 50), (13, 200), (300, 7), (1000, 1000)])
def test_fit_preserves_aspect_and_stays_in_box(src_size, box):
    w, h = src_size
    tw, th = box
    out_w, out_h = compute_fit(w, h, tw, th)
    assert 1 <= out_w <= tw
    assert 1 <= out_h <= th
    # at least one axis matches the box exactly
    assert out_w == tw or out_h == th
    # aspect preserved within one pixel of rounding on each axis
    assert abs(out_w - out_h * w / h) <= 1.0 or abs(out_h - out_w * h / w) <= 1.0


def test_fit_clamps_to_one_pixel():
    assert compute_fit(1000, 1, 10, 10) == (10, 1)
    assert compute_fit(1, 1000, 10, 10) == (1, 10)


def test_fit_rounds_halves_up():
    assert compute_fit(4, 2, 5, 100) == (5, 3)
    assert compute_fit(2, 4, 100, 5) == (3, 5)
    assert compute_fit(4, 2, 3, 100) == (3, 2)


@pytest.mark.parametrize("w, h", [(0, 10), (10, 0), (-5, 10), (0, 0)])
def test_non_positive_target_fails(w, h):
    with pytest.raises(InvalidDimensions):
        resize(generate_gradient(10, 10), ResizeParams(w, h))


def test_target_over_pixel_limit_fails():
    with pytest.raises(InvalidDimensions):
        target_size(generate_gradient(10, 10), ResizeParams(1000, 1000), max_pixels=10_000)


def test_solid_color_stays_solid():
    src = generate_solid(7, 5, (12, 200, 99, 255))
    for size in [(1, 1), (3, 2), (50, 40)]:
        out = resize_exact(src, *size)
        assert np.all(out.pixels == np.array([12, 200, 99, 255], dtype=np.uint8))


def test_bilinear_upscale_interpolates_between_pixels():
    pixels = np.zeros((1, 2, 4), dtype=np.uint8)
    pixels[0, 1] = 255
    pixels[:, :, 3] = 255
    out = resize_exact(RasterBuffer(pixels), 4, 1)
    row = out.pixels[0, :, 0].astype(int)
    assert row[0] == 0
    assert row[-1] == 255
    assert 0 < row[1] < row[2] < 255


def test_downscale_averages_neighbours():
    src = generate_checkerboard(64, 64, block_size=1)
    out = resize_exact(src, 32, 32)
    # 2x bilinear downscale of a 1px checkerboard lands between the two colors
    assert out.pixels[:, :, 0].min() > 30
    assert out.pixels[:, :, 0].max() < 220


def test_resize_returns_new_buffer():
    src = generate_gradient(10, 10)
    out = resize(src, ResizeParams(10, 10))
    assert np.array_equal(out.pixels, src.pixels)
    assert out.pixels is not src.pixels
