"""Exception types for ASCII Webcam."""


class ASCIIWebcamError(Exception):
    """Base class for application errors."""


class CameraError(ASCIIWebcamError):
    """The capture device could not be opened."""


class ScreenError(ASCIIWebcamError):
    """The terminal screen could not be initialized."""


class EmptyFrameError(ASCIIWebcamError):
    """A snapshot was requested before any frame was received."""

    def __init__(self, message: str = "empty input"):
        super().__init__(message)


class SnapshotError(ASCIIWebcamError):
    """Writing a snapshot file failed."""
