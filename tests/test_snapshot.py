"""Tests for snapshot export."""

import os
import re

import pytest

from ascii_webcam.errors import EmptyFrameError, SnapshotError
from ascii_webcam.snapshot import render_snapshot, snapshot_filename, write_snapshot
from conftest import solid_image


def test_filename_pattern():
    name = snapshot_filename()
    assert re.fullmatch(r"screenshot-[0-9a-f-]{36}\.txt", name)


def test_filenames_are_unique():
    assert len({snapshot_filename() for _ in range(50)}) == 50


def test_missing_frame_raises_before_io(tmp_path, ramp):
    with pytest.raises(EmptyFrameError, match="empty input"):
        write_snapshot(None, ramp, str(tmp_path))
    assert os.listdir(tmp_path) == []


def test_line_count_and_width(tmp_path, ramp):
    image = solid_image(9, 4, (128, 64, 200))
    path = write_snapshot(image, ramp, str(tmp_path))

    with open(path, encoding="utf-8") as f:
        lines = f.read().split("\n")

    # Trailing newline leaves an empty final element
    assert lines[-1] == ""
    assert len(lines[:-1]) == 4
    assert all(len(line) == 9 for line in lines[:-1])


def test_content_uses_current_ramp(tmp_path, ramp):
    image = solid_image(3, 2, (255, 255, 255))
    image.putpixel((0, 0), (0, 0, 0))
    path = write_snapshot(image, ramp, str(tmp_path))

    with open(path, encoding="utf-8") as f:
        assert f.read() == " @@\n@@@\n"


def test_written_to_requested_directory(tmp_path, ramp):
    path = write_snapshot(solid_image(1, 1, (0, 0, 0)), ramp, str(tmp_path))
    assert os.path.dirname(path) == str(tmp_path)
    assert os.path.basename(path).startswith("screenshot-")


def test_unwritable_directory_raises_snapshot_error(tmp_path, ramp):
    missing = tmp_path / "does-not-exist"
    with pytest.raises(SnapshotError):
        write_snapshot(solid_image(2, 2, (0, 0, 0)), ramp, str(missing))


def test_render_snapshot_ends_each_row_with_newline(ramp):
    text = render_snapshot(solid_image(2, 3, (0, 0, 0)), ramp)
    assert text == "  \n  \n  \n"
