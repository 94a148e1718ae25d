"""Tests for key bindings and the input listener."""

import pytest

from ascii_webcam.controls import Command, InputListener, command_for_event
from ascii_webcam.display import KeyEvent, ResizeEvent
from conftest import FakeScreen


@pytest.mark.parametrize("char, command", [
    ("q", Command.QUIT),
    ("\x1b", Command.QUIT),
    ("\x03", Command.QUIT),
    ("c", Command.COLOR_TOGGLE),
    ("s", Command.SCREENSHOT),
    ("+", Command.INCREASE_BRIGHTNESS),
    ("-", Command.DECREASE_BRIGHTNESS),
])
def test_key_bindings(char, command):
    assert command_for_event(KeyEvent(char=char)) is command


def test_named_escape_quits():
    assert command_for_event(KeyEvent(char="\x1b", name="KEY_ESCAPE")) is Command.QUIT


def test_resize_event():
    assert command_for_event(ResizeEvent(100, 40)) is Command.RESIZE


@pytest.mark.parametrize("event", [
    KeyEvent(char="x"),
    KeyEvent(char="Q"),
    KeyEvent(char="\x1b[A", name="KEY_UP"),
    None,
])
def test_unbound_events_ignored(event):
    assert command_for_event(event) is None


def test_listener_sends_commands_in_order(channels):
    _, commands = channels
    screen = FakeScreen(events=[
        KeyEvent(char="c"),
        KeyEvent(char="x"),
        ResizeEvent(80, 24),
        KeyEvent(char="-"),
        KeyEvent(char="q"),
    ])
    InputListener(screen, commands).start()

    received = [commands.receive() for _ in range(4)]
    assert received == [
        Command.COLOR_TOGGLE,
        Command.RESIZE,
        Command.DECREASE_BRIGHTNESS,
        Command.QUIT,
    ]


def test_listener_is_daemon(channels):
    _, commands = channels
    assert InputListener(FakeScreen(), commands).daemon
