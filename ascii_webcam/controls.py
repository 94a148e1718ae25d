"""
Keyboard controls for the live ASCII feed.

The input listener turns terminal events into typed commands and sends
them to the render loop.
"""

import enum
import logging
import threading
from typing import Optional

from .channels import Channel
from .display import Event, KeyEvent, ResizeEvent

logger = logging.getLogger(__name__)

CTRL_C = "\x03"
ESCAPE = "\x1b"


class Command(enum.Enum):
    """Commands understood by the render loop."""
    RESIZE = "resize"
    COLOR_TOGGLE = "color_toggle"
    INCREASE_BRIGHTNESS = "increase_brightness"
    DECREASE_BRIGHTNESS = "decrease_brightness"
    SCREENSHOT = "screenshot"
    QUIT = "quit"


KEY_BINDINGS = {
    "q": Command.QUIT,
    ESCAPE: Command.QUIT,
    CTRL_C: Command.QUIT,
    "c": Command.COLOR_TOGGLE,
    "s": Command.SCREENSHOT,
    "+": Command.INCREASE_BRIGHTNESS,
    "-": Command.DECREASE_BRIGHTNESS,
}

NAMED_KEY_BINDINGS = {
    "KEY_ESCAPE": Command.QUIT,
    "KEY_CTRL_C": Command.QUIT,
}

HELP_TEXT = """
Keyboard Controls:
  q / ESC / Ctrl-C   Quit
  c                  Toggle color mode
  s                  Save screenshot
  +                  Increase brightness (shorten glyph ramp)
  -                  Decrease brightness (lengthen glyph ramp)
"""


def command_for_event(event: Event) -> Optional[Command]:
    """
    Map a terminal event to a command.

    Returns:
        The command, or None if the event is not bound
    """
    if isinstance(event, ResizeEvent):
        return Command.RESIZE
    if isinstance(event, KeyEvent):
        if event.name in NAMED_KEY_BINDINGS:
            return NAMED_KEY_BINDINGS[event.name]
        return KEY_BINDINGS.get(event.char)
    return None


class InputListener(threading.Thread):
    """
    Thread that polls the screen for events and sends commands.

    Unbound keys are dropped without feedback.
    """

    def __init__(self, screen, commands: Channel):
        """
        Initialize the listener.

        Args:
            screen: Object providing ``poll_event()``
            commands: Channel to send commands on
        """
        super().__init__(name="input-listener", daemon=True)
        self.screen = screen
        self.commands = commands

    def run(self):
        while True:
            event = self.screen.poll_event()
            command = command_for_event(event)
            if command is None:
                continue
            logger.debug("Key event %r -> %s", event, command.name)
            self.commands.send(command)
