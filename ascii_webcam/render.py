"""
Render loop for the live ASCII feed.

The render loop is the only consumer of the frame and command channels
and the only owner of the display state. It applies commands, draws
frames into the screen buffer and keeps the last frame for snapshots.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional
from PIL import Image

from .channels import Channel, Selector
from .controls import Command
from .converter import GlyphRamp, frame_pixels
from .errors import ASCIIWebcamError
from .snapshot import write_snapshot

logger = logging.getLogger(__name__)


@dataclass
class DisplayState:
    """Mutable display settings, changed only in response to commands."""
    color_enabled: bool = False
    ramp: GlyphRamp = field(default_factory=GlyphRamp)


class RenderLoop:
    """
    Merges frames and commands and updates the screen.

    Frames and commands are served fairly; each is handled once, in the
    order it was sent on its own channel.
    """

    def __init__(
        self,
        screen,
        frames: Channel,
        commands: Channel,
        state: Optional[DisplayState] = None,
        snapshot_dir: str = ".",
        status_rows: int = 1
    ):
        """
        Initialize the render loop.

        Args:
            screen: Cell-buffered screen (see display.Screen)
            frames: Channel carrying resized frames
            commands: Channel carrying Command values
            state: Initial display state
            snapshot_dir: Directory screenshots are written to
            status_rows: Rows reserved for status messages
        """
        self.screen = screen
        self.frames = frames
        self.commands = commands
        self.state = state or DisplayState()
        self.snapshot_dir = snapshot_dir
        self.status_rows = status_rows
        self.last_frame: Optional[Image.Image] = None
        self.running = False
        self._selector = Selector([frames, commands])

    def run(self) -> int:
        """
        Serve both channels until a quit command arrives.

        Returns:
            Exit code (0 for success)
        """
        self.running = True
        while self.running:
            channel, message = self._selector.select()
            if channel is self.commands:
                self.handle_command(message)
            else:
                self.handle_frame(message)
        return 0

    def status(self, message: str):
        """Show a message on the status line."""
        self.screen.show_status(message, self.status_rows)

    def handle_command(self, command: Command):
        """Apply one command to the display state or screen."""
        if command is Command.RESIZE:
            self.status("Resize Requested")
            self.screen.sync()
        elif command is Command.COLOR_TOGGLE:
            self.status("Color Toggle")
            self.state.color_enabled = not self.state.color_enabled
            logger.info("Color %s", "enabled" if self.state.color_enabled else "disabled")
        elif command is Command.INCREASE_BRIGHTNESS:
            self.status("Increase Brightness")
            self.state.ramp.increase_brightness()
            logger.info("Increase brightness, ramp length %d", len(self.state.ramp))
        elif command is Command.DECREASE_BRIGHTNESS:
            self.status("Decrease Brightness")
            self.state.ramp.decrease_brightness()
            logger.info("Decrease brightness, ramp length %d", len(self.state.ramp))
        elif command is Command.SCREENSHOT:
            self.take_screenshot()
        elif command is Command.QUIT:
            logger.info("Quit requested")
            self.screen.fini()
            self.running = False
        else:
            logger.warning("Ignoring unknown command %r", command)

    def take_screenshot(self) -> Optional[str]:
        """
        Save the last frame and report the outcome on the status line.

        Returns:
            The written file path, or None on failure
        """
        try:
            filename = write_snapshot(self.last_frame, self.state.ramp, self.snapshot_dir)
        except ASCIIWebcamError as e:
            logger.warning("Screenshot failed: %s", e)
            self.status(f"Error dumping image to file: {e}")
            return None

        self.status(f"Screenshot saved to file: {filename}")
        return filename

    def handle_frame(self, image: Image.Image):
        """Draw a frame into the screen buffer and flush it."""
        pixels = frame_pixels(image)
        ramp = self.state.ramp
        indices = ramp.index_grid(pixels)
        color = self.state.color_enabled
        set_cell = self.screen.set_cell

        height, width = indices.shape
        if self.screen.buffer_size() != (width, height + self.status_rows):
            # Frame was captured at a different terminal size
            self.screen.clear()

        for y in range(height):
            for x in range(width):
                glyph = ramp[indices[y, x]]
                if color:
                    r, g, b = pixels[y, x]
                    set_cell(x, y, glyph, (int(r), int(g), int(b)))
                else:
                    set_cell(x, y, glyph, None)

        self.screen.sync()
        self.last_frame = image
