"""
Snapshot export for the live ASCII feed.

Writes the most recent frame as plain text using the current glyph ramp:
one line per pixel row, one glyph per column, no header.
"""

import logging
import os
import uuid
from typing import Optional
from PIL import Image

from .converter import GlyphRamp, glyph_rows
from .errors import EmptyFrameError, SnapshotError

logger = logging.getLogger(__name__)

FILENAME_TEMPLATE = "screenshot-{id}.txt"


def snapshot_filename() -> str:
    """Generate a collision-resistant snapshot file name."""
    return FILENAME_TEMPLATE.format(id=uuid.uuid4())


def render_snapshot(image: Image.Image, ramp: GlyphRamp) -> str:
    """Render a frame to snapshot text, each row newline-terminated."""
    return "".join(row + "\n" for row in glyph_rows(image, ramp))


def write_snapshot(
    image: Optional[Image.Image],
    ramp: GlyphRamp,
    directory: str = "."
) -> str:
    """
    Save a frame as ASCII art.

    Args:
        image: Last received frame, or None if none arrived yet
        ramp: Glyph ramp to render with
        directory: Output directory

    Returns:
        Path of the written file

    Raises:
        EmptyFrameError: If there is no frame; no file is created
        SnapshotError: If the file cannot be written
    """
    if image is None:
        raise EmptyFrameError()

    content = render_snapshot(image, ramp)
    filepath = os.path.join(directory, snapshot_filename())

    try:
        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(content)
    except OSError as e:
        raise SnapshotError(f"Could not write {filepath}: {e}") from e

    logger.info("Wrote %dx%d snapshot to %s", image.width, image.height, filepath)
    return filepath
