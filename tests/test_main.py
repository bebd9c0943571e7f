"""Tests for the command-line front end."""

import pytest

import main
from config import CONFIG
from engines.codec import decode
from utils.test_images import encode_png, generate_gradient, generate_solid


def test_flags_without_options_keep_defaults():
    rest, config = main.parse_config_flags(['info', 'a.png'])
    assert rest == ['info', 'a.png']
    assert config == CONFIG


def test_flags_override_config_anywhere():
    argv = ['--threshold', '3', 'diff', 'a.png', '--compare-alpha', 'b.png', 'out.png',
            '--max-pixels', '5000', '--jpeg-quality', '40', '--webp-quality', '70']
    rest, config = main.parse_config_flags(argv)
    assert rest == ['diff', 'a.png', 'b.png', 'out.png']
    assert config.diff.threshold == 3
    assert config.diff.compare_alpha is True
    assert config.codec.max_image_pixels == 5000
    assert config.codec.default_jpeg_quality == 40
    assert config.codec.default_webp_quality == 70
    # the shared default is untouched
    assert CONFIG.diff.threshold == 10


def test_keep_aspect_is_not_a_config_flag():
    rest, _ = main.parse_config_flags(['resize', 'a', 'b', '5', '5', '--keep-aspect'])
    assert rest[-1] == '--keep-aspect'


@pytest.mark.parametrize("argv", [['info', '--threshold'], ['info', '--max-pixels', 'big']])
def test_bad_flag_value_exits_with_usage_status(argv):
    with pytest.raises(SystemExit) as exc:
        main.parse_config_flags(argv)
    assert exc.value.code == 2


def test_threshold_flag_changes_diff_output(tmp_path, capsys):
    a = tmp_path / 'a.png'
    b = tmp_path / 'b.png'
    a.write_bytes(encode_png(generate_solid(8, 8, (100, 100, 100, 255))))
    b.write_bytes(encode_png(generate_solid(8, 8, (105, 100, 100, 255))))

    default_out = tmp_path / 'default.png'
    main.run_command(['diff', str(a), str(b), str(default_out)])
    assert (decode(default_out.read_bytes()).rgb == 255).all()

    strict_out = tmp_path / 'strict.png'
    main.run_command(['diff', str(a), str(b), str(strict_out), '--threshold', '1'])
    assert not (decode(strict_out.read_bytes()).rgb == 255).all()
    assert 'Saved:' in capsys.readouterr().out


def test_max_pixels_flag_rejects_large_input(tmp_path, capsys):
    src = tmp_path / 'src.png'
    src.write_bytes(encode_png(generate_gradient(40, 40)))
    with pytest.raises(SystemExit) as exc:
        main.run_command(['--max-pixels', '100', 'info', str(src)])
    assert exc.value.code == 1
    assert 'ImageTooLarge' in capsys.readouterr().out
