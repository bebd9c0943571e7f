"""Shared utilities."""

from .formatting import format_file_size
from .logger import get_logger, setup_logger
from .metrics import compute_psnr, compute_ssim, compute_psnr_ssim, Timer

__all__ = [
    'format_file_size',
    'get_logger',
    'setup_logger',
    'compute_psnr',
    'compute_ssim',
    'compute_psnr_ssim',
    'Timer',
]
