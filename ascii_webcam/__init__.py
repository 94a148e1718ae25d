"""
ASCII Webcam - Live camera feed rendered as ASCII art in the terminal

A terminal application that turns a webcam feed into ASCII art with:
- Luma-based glyph mapping with an adjustable glyph ramp
- Optional per-cell 24-bit color
- A capture thread and an input thread feeding a single render loop
- Plain text screenshots of the last frame
"""

__version__ = "1.0.0"
__author__ = "ASCII Webcam Developer"

from .converter import CharacterSets, GlyphRamp, luma, glyph_rows
from .camera import Camera, MockCamera
from .channels import Channel, Selector, open_channels
from .controls import Command, InputListener, command_for_event
from .display import Screen, KeyEvent, ResizeEvent
from .errors import (
    ASCIIWebcamError,
    CameraError,
    ScreenError,
    EmptyFrameError,
    SnapshotError,
)
from .producer import FrameProducer
from .render import DisplayState, RenderLoop
from .snapshot import write_snapshot

__all__ = [
    # Brightness mapping
    "CharacterSets",
    "GlyphRamp",
    "luma",
    "glyph_rows",
    # Capture
    "Camera",
    "MockCamera",
    "FrameProducer",
    # Channels
    "Channel",
    "Selector",
    "open_channels",
    # Input
    "Command",
    "InputListener",
    "command_for_event",
    # Display
    "Screen",
    "KeyEvent",
    "ResizeEvent",
    "DisplayState",
    "RenderLoop",
    # Snapshots
    "write_snapshot",
    # Errors
    "ASCIIWebcamError",
    "CameraError",
    "ScreenError",
    "EmptyFrameError",
    "SnapshotError",
]
