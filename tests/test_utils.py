"""Tests for logging, formatting and metric helpers."""

import logging
import math
import sys

import numpy as np

from utils import logger as engine_logger
from utils.formatting import format_file_size
from utils.metrics import Timer, compute_psnr, compute_ssim


def test_setup_logger_idempotent_handlers():
    """Calling setup_logger() repeatedly leaves exactly one stderr StreamHandler."""
    base = engine_logger.setup_logger(level=logging.DEBUG)
    _ = engine_logger.setup_logger(level=logging.DEBUG)
    handlers = [
        h for h in base.handlers
        if isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
    ]
    assert len(handlers) == 1
    assert base.propagate is False
    engine_logger.setup_logger()


def test_env_overrides_level(monkeypatch):
    monkeypatch.setenv("IMAGE_ENGINE_LOG_LEVEL", "error")
    base = engine_logger.setup_logger(level=logging.DEBUG)
    assert base.level == logging.ERROR
    monkeypatch.delenv("IMAGE_ENGINE_LOG_LEVEL")
    engine_logger.setup_logger()


def test_child_logger_name():
    assert engine_logger.get_logger("codec").name == "image_engine.codec"


def test_format_file_size():
    assert format_file_size(0) == '0 Bytes'
    assert format_file_size(512) == '512 Bytes'
    assert format_file_size(1536) == '1.5 KB'
    assert format_file_size(1024 * 1024) == '1 MB'
    assert format_file_size(3 * 1024 ** 3) == '3 GB'


def test_psnr_identical_is_infinite():
    img = np.random.randint(0, 256, (16, 16, 3), dtype=np.uint8)
    assert math.isinf(compute_psnr(img, img))


def test_ssim_drops_with_noise():
    rng = np.random.default_rng(1)
    img = rng.integers(0, 256, (32, 32, 3), dtype=np.uint8)
    noisy = np.clip(img.astype(int) + rng.integers(-40, 40, img.shape), 0, 255).astype(np.uint8)
    assert compute_ssim(img, noisy) < compute_ssim(img, img)


def test_timer_records_stages():
    timer = Timer()
    assert timer.measure('add', lambda a, b: a + b, 2, 3) == 5
    assert 'add' in timer.stages_ms
    assert timer.total_ms >= 0.0
    assert timer.summary().startswith('add=')
