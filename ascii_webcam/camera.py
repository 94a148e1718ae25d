"""
Camera capture module for the live ASCII feed.

Provides a simple interface for reading frames from a webcam with
OpenCV, plus a mock camera that generates test patterns.
"""

import logging
from typing import Optional, Tuple
import cv2
import numpy as np

from .errors import CameraError

logger = logging.getLogger(__name__)


class Camera:
    """
    Webcam capture device opened by index.

    ``open`` raises CameraError when the device is unavailable.
    """

    def __init__(self, source: int = 0):
        """
        Initialize the camera.

        Args:
            source: Camera index (0 for default)
        """
        self.source = source
        self._cap: Optional[cv2.VideoCapture] = None

    def open(self) -> "Camera":
        """
        Open the capture device.

        Raises:
            CameraError: If the device cannot be opened
        """
        self._cap = cv2.VideoCapture(self.source)

        if not self._cap.isOpened():
            self._cap.release()
            self._cap = None
            raise CameraError(f"Could not open capture device {self.source}")

        logger.info("Opened capture device %s at %dx%d", self.source, *self.resolution)
        return self

    def close(self):
        """Release the camera resources."""
        if self._cap is not None:
            self._cap.release()
            self._cap = None
            logger.info("Released capture device %s", self.source)

    @property
    def is_open(self) -> bool:
        """Check if camera is open and ready."""
        return self._cap is not None and self._cap.isOpened()

    @property
    def resolution(self) -> Tuple[int, int]:
        """Get current capture resolution (width, height)."""
        if self._cap is None:
            return (0, 0)
        return (
            int(self._cap.get(cv2.CAP_PROP_FRAME_WIDTH)),
            int(self._cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
        )

    def read(self) -> Optional[np.ndarray]:
        """
        Read the next frame, blocking until the device delivers one.

        Returns:
            Frame as numpy array (BGR format), or None if the read failed
        """
        if self._cap is None:
            return None

        ret, frame = self._cap.read()
        if not ret:
            return None

        return frame

    def __enter__(self):
        """Context manager entry - opens the camera."""
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - closes the camera."""
        self.close()
        return False


class MockCamera(Camera):
    """
    Mock camera for running without a real webcam.

    Generates animated test patterns in BGR order like a real device.
    """

    PATTERNS = ("gradient", "noise", "checkerboard")

    def __init__(
        self,
        width: int = 640,
        height: int = 480,
        pattern: str = "gradient"
    ):
        """
        Initialize mock camera.

        Args:
            width: Frame width
            height: Frame height
            pattern: Test pattern type ('gradient', 'noise', 'checkerboard')
        """
        super().__init__(0)
        if pattern not in self.PATTERNS:
            raise ValueError(f"Unknown mock pattern: {pattern}")
        self._frame_width = width
        self._frame_height = height
        self._frame_count = 0
        self._pattern = pattern
        self._is_open = False

    def open(self) -> "MockCamera":
        """Open the mock camera."""
        self._is_open = True
        logger.info("Opened mock camera (%s)", self._pattern)
        return self

    def close(self):
        """Close the mock camera."""
        self._is_open = False

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def resolution(self) -> Tuple[int, int]:
        return (self._frame_width, self._frame_height)

    def read(self) -> Optional[np.ndarray]:
        """Generate a test pattern frame."""
        if not self._is_open:
            return None

        self._frame_count += 1

        if self._pattern == "noise":
            return self._generate_noise()
        elif self._pattern == "checkerboard":
            return self._generate_checkerboard()
        return self._generate_gradient()

    def _generate_gradient(self) -> np.ndarray:
        """Generate an animated horizontal gradient."""
        offset = (self._frame_count * 2) % 256
        columns = (np.arange(self._frame_width) * 256 // self._frame_width + offset) % 256

        frame = np.empty((self._frame_height, self._frame_width, 3), dtype=np.uint8)
        frame[:, :, 0] = columns  # Blue
        frame[:, :, 1] = (columns + 85) % 256  # Green
        frame[:, :, 2] = (columns + 170) % 256  # Red
        return frame

    def _generate_noise(self) -> np.ndarray:
        """Generate random noise pattern."""
        return np.random.randint(
            0, 256,
            (self._frame_height, self._frame_width, 3),
            dtype=np.uint8
        )

    def _generate_checkerboard(self) -> np.ndarray:
        """Generate an animated checkerboard pattern."""
        frame = np.zeros((self._frame_height, self._frame_width, 3), dtype=np.uint8)

        block_size = 32
        offset = (self._frame_count // 10) % 2

        for y in range(0, self._frame_height, block_size):
            for x in range(0, self._frame_width, block_size):
                if ((x // block_size) + (y // block_size) + offset) % 2:
                    frame[y:y+block_size, x:x+block_size] = 255

        return frame
