"""
Frame producer for the live ASCII feed.

Captures frames from the camera, resizes them to the terminal cell grid
and hands them to the render loop one at a time.
"""

import logging
import threading
import time
from typing import Callable, Optional, Tuple
import cv2
import numpy as np
from PIL import Image

from .camera import Camera
from .channels import Channel

logger = logging.getLogger(__name__)


def fit_to_cells(frame: np.ndarray, width: int, height: int) -> Image.Image:
    """
    Resize a BGR camera frame to exactly ``width`` x ``height`` cells.

    Uses linear interpolation; one pixel maps to one terminal cell.

    Raises:
        ValueError: If the target size is not positive
        cv2.error: If OpenCV cannot resize the frame
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid target size {width}x{height}")

    small = cv2.resize(frame, (width, height), interpolation=cv2.INTER_LINEAR)

    # OpenCV uses BGR, convert to RGB
    return Image.fromarray(np.ascontiguousarray(small[:, :, ::-1]), "RGB")


class FrameProducer(threading.Thread):
    """
    Thread that captures, resizes and publishes frames.

    A frame that cannot be read or converted is dropped and the next
    capture is tried. Sending blocks until the render loop takes the
    frame, which paces capture to the display rate.
    """

    def __init__(
        self,
        camera: Camera,
        frames: Channel,
        terminal_size: Callable[[], Tuple[int, int]],
        status_rows: int = 1
    ):
        """
        Initialize the producer.

        Args:
            camera: Opened camera to read from
            frames: Channel to send frames on
            terminal_size: Callable returning (columns, rows)
            status_rows: Rows reserved below the frame for status messages
        """
        super().__init__(name="frame-producer", daemon=True)
        self.camera = camera
        self.frames = frames
        self.terminal_size = terminal_size
        self.status_rows = status_rows
        self._stopped = threading.Event()
        self.dropped = 0

    def stop(self):
        """Ask the producer to stop after its current iteration."""
        self._stopped.set()

    def shutdown(self, timeout: float = 1.0) -> bool:
        """
        Stop the producer and wait for it to exit.

        Pending frames are discarded so a blocked send can return.

        Returns:
            True if the thread has exited
        """
        self.stop()
        deadline = time.monotonic() + timeout
        while self.is_alive() and time.monotonic() < deadline:
            self.frames.try_receive()
            self.join(timeout=0.05)
        return not self.is_alive()

    def capture(self) -> Optional[Image.Image]:
        """
        Read and convert one frame.

        Returns:
            The resized frame, or None if it was dropped
        """
        frame = self.camera.read()
        if frame is None:
            logger.debug("Camera read failed, dropping frame")
            self.dropped += 1
            return None

        width, height = self.terminal_size()
        try:
            return fit_to_cells(frame, width, height - self.status_rows)
        except (cv2.error, ValueError, TypeError) as e:
            logger.debug("Frame conversion failed, dropping frame: %s", e)
            self.dropped += 1
            return None

    def run(self):
        while not self._stopped.is_set():
            image = self.capture()
            if image is not None:
                self.frames.send(image)
