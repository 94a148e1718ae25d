"""Shared fixtures for the ASCII Webcam test suite."""

import threading

import pytest
from PIL import Image

from ascii_webcam.channels import open_channels
from ascii_webcam.converter import GlyphRamp
from ascii_webcam.display import STATUS_STYLE

WEBCAM_RAMP = [' ', ' ', ' ', ' ', '.', ',', ':', ';', '+', '*', '?', '%', 'S', '#', '@']


class FakeScreen:
    """In-memory stand-in for display.Screen that records what was drawn."""

    def __init__(self, width=8, height=5, events=None):
        self.width = width
        self.height = height
        self.cells = {}
        self.syncs = 0
        self.clears = 0
        self.buffer = (width, height)
        self.statuses = []
        self.finalized = False
        self._events = list(events or [])
        self._idle = threading.Event()

    def size(self):
        return (self.width, self.height)

    def clear(self):
        self.cells = {}
        self.clears += 1
        self.buffer = self.size()

    def buffer_size(self):
        return self.buffer

    def set_cell(self, x, y, glyph, style=None):
        width, height = self.buffer
        if 0 <= x < width and 0 <= y < height:
            self.cells[(x, y)] = (glyph, style)

    def sync(self):
        self.syncs += 1

    def show_status(self, message, status_rows=1):
        self.clear()
        for i, char in enumerate(message[:self.width]):
            self.set_cell(i, self.height - status_rows, char, STATUS_STYLE)
        self.statuses.append(message)
        self.sync()

    def fini(self):
        self.finalized = True

    def poll_event(self, timeout=None):
        if self._events:
            return self._events.pop(0)
        # Nothing left to report: block like a quiet terminal would
        self._idle.wait()

    def row_text(self, y):
        return "".join(self.cells.get((x, y), (" ", None))[0] for x in range(self.width))


@pytest.fixture
def screen():
    return FakeScreen()


@pytest.fixture
def ramp():
    return GlyphRamp(WEBCAM_RAMP)


@pytest.fixture
def channels():
    frames, commands = open_channels("frames", "commands")
    return frames, commands


def solid_image(width, height, rgb):
    return Image.new("RGB", (width, height), rgb)
