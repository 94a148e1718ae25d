"""
Terminal screen for rendering ASCII frames.

Wraps a blessed Terminal with a cell buffer: callers write glyphs into
cells and then flush the whole buffer at once. Also provides the status
line and event polling (key presses and terminal resizes).
"""

import logging
import time
from contextlib import ExitStack
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from blessed import Terminal

from .errors import ScreenError

logger = logging.getLogger(__name__)

# A cell style is an RGB foreground colour, or None for the default style
Style = Optional[Tuple[int, int, int]]

STATUS_STYLE: Style = (205, 0, 0)


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal changed size."""
    width: int
    height: int


@dataclass(frozen=True)
class KeyEvent:
    """A key press: named keys carry ``name``, printable keys carry ``char``."""
    char: str = ""
    name: Optional[str] = None


Event = Union[ResizeEvent, KeyEvent]


class Screen:
    """
    Cell-buffered fullscreen terminal display.

    The buffer is only touched by the render loop; ``poll_event`` and
    ``size`` are safe to call from the listener and producer threads.
    """

    def __init__(
        self,
        term: Optional[Terminal] = None,
        resize_poll_interval: float = 0.1
    ):
        """
        Initialize the screen.

        Args:
            term: blessed Terminal to draw on (defaults to stdout)
            resize_poll_interval: Seconds between size checks while waiting for keys
        """
        self.term = term or Terminal()
        self.resize_poll_interval = resize_poll_interval
        self._stack: Optional[ExitStack] = None
        self._cells: List[List[Tuple[str, Style]]] = []
        self._last_size: Optional[Tuple[int, int]] = None

    def init(self):
        """
        Enter fullscreen raw mode with a hidden cursor.

        Raises:
            ScreenError: If the terminal cannot be set up
        """
        if not self.term.is_a_tty:
            raise ScreenError("Error initializing screen: not a terminal")

        stack = ExitStack()
        try:
            stack.enter_context(self.term.fullscreen())
            stack.enter_context(self.term.raw())
            stack.enter_context(self.term.hidden_cursor())
        except Exception as e:
            stack.close()
            raise ScreenError(f"Error initializing screen: {e}") from e

        self._stack = stack
        self._last_size = self.size()
        self.clear()
        logger.info("Screen initialized at %dx%d", *self._last_size)

    def fini(self):
        """Restore the terminal."""
        if self._stack is not None:
            self._write(self.term.normal)
            self._stack.close()
            self._stack = None
            logger.info("Screen finalized")

    def __enter__(self):
        self.init()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.fini()
        return False

    def size(self) -> Tuple[int, int]:
        """Get terminal dimensions (columns, rows)."""
        return (self.term.width, self.term.height)

    def clear(self):
        """Blank the cell buffer, resizing it to the current terminal."""
        width, height = self.size()
        self._cells = [[(" ", None)] * width for _ in range(height)]

    def set_cell(self, x: int, y: int, glyph: str, style: Style = None):
        """Write a glyph into the buffer; out-of-range cells are ignored."""
        if 0 <= y < len(self._cells) and 0 <= x < len(self._cells[y]):
            self._cells[y][x] = (glyph, style)

    def buffer_size(self) -> Tuple[int, int]:
        """Get the cell buffer dimensions (columns, rows)."""
        return (len(self._cells[0]) if self._cells else 0, len(self._cells))

    def get_cell(self, x: int, y: int) -> Tuple[str, Style]:
        return self._cells[y][x]

    def sync(self):
        """Redraw every cell of the buffer to the terminal."""
        term = self.term
        parts = [term.home, term.normal]
        current: Style = None

        for y, row in enumerate(self._cells):
            parts.append(term.move_xy(0, y))
            for glyph, style in row:
                if style != current:
                    parts.append(term.color_rgb(*style) if style else term.normal)
                    current = style
                parts.append(glyph)

        parts.append(term.normal)
        self._write("".join(parts))

    def show_status(self, message: str, status_rows: int = 1):
        """
        Show a message on the reserved bottom rows.

        Clears the whole screen first; the next frame overwrites it.
        """
        self.clear()
        width, height = self.size()
        base_y = height - status_rows

        if width > 0:
            for i, char in enumerate(message):
                self.set_cell(i % width, base_y + i // width, char, STATUS_STYLE)
        self.sync()

    def poll_event(self, timeout: Optional[float] = None) -> Optional[Event]:
        """
        Wait for the next key press or resize.

        Args:
            timeout: Seconds to wait (None blocks indefinitely)

        Returns:
            The event, or None if the timeout expired
        """
        deadline = None if timeout is None else time.monotonic() + timeout

        while True:
            size = self.size()
            if size != self._last_size:
                self._last_size = size
                return ResizeEvent(*size)

            wait = self.resize_poll_interval
            if deadline is not None:
                wait = min(wait, max(0.0, deadline - time.monotonic()))

            key = self.term.inkey(timeout=wait)
            if key:
                if key.is_sequence:
                    return KeyEvent(char=str(key), name=key.name)
                return KeyEvent(char=str(key))

            if deadline is not None and time.monotonic() >= deadline:
                return None

    def _write(self, text: str):
        self.term.stream.write(text)
        self.term.stream.flush()
