"""
Image Tool Engine
Crop, resize, convert and compare raster images from the command line.
"""

import sys
from dataclasses import replace
from pathlib import Path

USAGE = """Usage: python main.py <command> [args]

  info <image>
  crop <image> <output> <x> <y> <width> <height>
  resize <image> <output> <width> <height> [--keep-aspect]
  convert <image> <output> <format> [quality]
  diff <image_a> <image_b> <output>
  --synthetic <output> [checkerboard|gradient|transparent]

Options (any position):
  --threshold N       diff: smallest channel delta that counts as a change
  --compare-alpha     diff: include alpha in the per-pixel delta
  --max-pixels N      largest decoded image, in pixels
  --jpeg-quality N    JPEG quality when none is given
  --webp-quality N    lossy WEBP quality when none is given
"""

# flag -> (config section, field)
VALUE_FLAGS = {
    "--threshold": ("diff", "threshold"),
    "--max-pixels": ("codec", "max_image_pixels"),
    "--jpeg-quality": ("codec", "default_jpeg_quality"),
    "--webp-quality": ("codec", "default_webp_quality"),
}


def _read(path: str) -> bytes:
    return Path(path).read_bytes()


def _ints(values):
    try:
        return [int(v) for v in values]
    except ValueError:
        print(f"Expected integers, got: {' '.join(values)}")
        sys.exit(2)


def parse_config_flags(argv):
    """Strip config flags from argv; return (remaining args, EngineConfig)."""
    from config import CONFIG

    config = CONFIG
    rest = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--compare-alpha":
            config = replace(config, diff=replace(config.diff, compare_alpha=True))
        elif arg in VALUE_FLAGS:
            if i + 1 >= len(argv):
                print(f"Missing value for {arg}")
                sys.exit(2)
            section, name = VALUE_FLAGS[arg]
            value = _ints(argv[i + 1:i + 2])[0]
            updated = replace(getattr(config, section), **{name: value})
            config = replace(config, **{section: updated})
            i += 1
        else:
            rest.append(arg)
        i += 1
    return rest, config


def run_synthetic(args):
    """Write a synthetic PNG for trying the other commands."""
    from utils.test_images import encode_png, generate_demo_image

    key = args[1] if len(args) > 1 else "checkerboard"
    raster = generate_demo_image(key)
    if raster is None:
        print(f"Unknown synthetic image: {key}")
        sys.exit(2)
    Path(args[0]).write_bytes(encode_png(raster))
    print(f"Saved: {args[0]} ({raster.width}x{raster.height})")


def build_request(command, args):
    from commands import (
        CompareImagesRequest,
        ConvertImageRequest,
        CropImageRequest,
        GetImageInfoRequest,
        ResizeImageRequest,
    )
    from models import ConvertParams, CropParams, ResizeParams

    if command == "info" and len(args) == 1:
        return GetImageInfoRequest(_read(args[0])), None
    if command == "crop" and len(args) == 6:
        x, y, w, h = _ints(args[2:6])
        return CropImageRequest(_read(args[0]), CropParams(x, y, w, h)), args[1]
    if command == "resize" and len(args) in (4, 5):
        keep = len(args) == 5 and args[4] == "--keep-aspect"
        if len(args) == 5 and not keep:
            return None, None
        w, h = _ints(args[2:4])
        return ResizeImageRequest(_read(args[0]), ResizeParams(w, h, keep)), args[1]
    if command == "convert" and len(args) in (3, 4):
        quality = _ints(args[3:4])[0] if len(args) == 4 else None
        return ConvertImageRequest(_read(args[0]), ConvertParams(args[2], quality)), args[1]
    if command == "diff" and len(args) == 3:
        return CompareImagesRequest(_read(args[0]), _read(args[1])), args[2]
    return None, None


def run_command(argv):
    from commands import ImageCommandService
    from utils.formatting import format_file_size
    from utils.logger import setup_logger

    setup_logger()
    argv, config = parse_config_flags(argv)
    if not argv:
        print(USAGE)
        sys.exit(2)
    command, args = argv[0], argv[1:]
    try:
        request, output = build_request(command, args)
    except OSError as e:
        print(f"Could not read input: {e}")
        sys.exit(1)
    if request is None:
        print(USAGE)
        sys.exit(2)

    response = ImageCommandService(config).execute(request)
    if not response.ok:
        print(f"Error [{response.error.kind.value}]: {response.error.message}")
        sys.exit(1)

    result = response.result
    if output is None:
        print(f"{result.width}x{result.height} {result.format.value.upper()} "
              f"{format_file_size(result.size_bytes)}")
        return

    Path(output).write_bytes(result.data)
    print(f"Saved: {output} ({result.width}x{result.height} {result.format.value.upper()}, "
          f"{format_file_size(result.size_bytes)})")
    if result.metrics is not None:
        m = result.metrics
        print(f"Changed: {m.changed_pixels} px ({m.changed_ratio:.2%}), "
              f"max delta {m.max_delta}, PSNR {m.psnr:.2f} dB, SSIM {m.ssim:.4f}")


def main():
    argv = sys.argv[1:]
    if not argv or argv[0] in ("-h", "--help"):
        print(USAGE)
        sys.exit(0)
    if argv[0] == "--synthetic" and len(argv) >= 2:
        run_synthetic(argv[1:])
    else:
        run_command(argv)


if __name__ == '__main__':
    main()
