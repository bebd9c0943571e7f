"""Tests for the Qt command worker."""

import pytest

pytest.importorskip("PySide6")

from commands.boundary import CropImageRequest, GetImageInfoRequest  # noqa: E402
from engines.errors import ErrorKind  # noqa: E402
from models.params import CropParams  # noqa: E402
from utils.test_images import encode_png, generate_gradient  # noqa: E402
from workers.command_worker import CommandWorker  # noqa: E402


def _collect(worker):
    finished, errors, progress = [], [], []
    worker.finished.connect(finished.append)
    worker.error.connect(errors.append)
    worker.progress.connect(progress.append)
    return finished, errors, progress


def test_worker_emits_finished():
    data = encode_png(generate_gradient(30, 20))
    worker = CommandWorker(CropImageRequest(data, CropParams(0, 0, 10, 10)))
    finished, errors, progress = _collect(worker)
    worker.run()
    assert len(finished) == 1 and not errors
    assert finished[0].result.width == 10
    assert progress[0] == "Running crop_image..."


def test_worker_emits_error():
    worker = CommandWorker(GetImageInfoRequest(b'garbage'))
    finished, errors, _ = _collect(worker)
    worker.run()
    assert not finished
    assert errors[0].error.kind == ErrorKind.UNSUPPORTED_FORMAT
