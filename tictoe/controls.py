"""Gamepad buttons and the single-letter commands they stand for."""

from __future__ import annotations

import enum
from typing import Iterable, Iterator, Optional, TextIO


class Button(enum.IntFlag):
    """Gamepad button bits, as reported in a button mask."""

    DPAD_UP = 0x0001
    DPAD_DOWN = 0x0002
    DPAD_LEFT = 0x0004
    DPAD_RIGHT = 0x0008
    START = 0x0010
    BACK = 0x0020
    LEFT_THUMB = 0x0040
    RIGHT_THUMB = 0x0080
    LEFT_SHOULDER = 0x0100
    RIGHT_SHOULDER = 0x0200
    A = 0x1000
    B = 0x2000
    X = 0x4000
    Y = 0x8000


# Checked in this order; the first pressed button decides the command.
_PRIORITY: tuple[tuple[Button, str], ...] = (
    (Button.A, "i"),
    (Button.B, "q"),
    (Button.X, "x"),
    (Button.Y, "y"),
    (Button.START, "h"),
    (Button.DPAD_UP, "w"),
    (Button.DPAD_DOWN, "s"),
    (Button.DPAD_LEFT, "a"),
    (Button.DPAD_RIGHT, "d"),
    (Button.LEFT_THUMB, "l"),
    (Button.RIGHT_THUMB, "r"),
    (Button.LEFT_SHOULDER, "z"),
    (Button.RIGHT_SHOULDER, "c"),
    (Button.BACK, "q"),
)

_ALIASES: dict[str, Button] = {
    "up": Button.DPAD_UP,
    "down": Button.DPAD_DOWN,
    "left": Button.DPAD_LEFT,
    "right": Button.DPAD_RIGHT,
    "select": Button.BACK,
    "ls": Button.LEFT_THUMB,
    "rs": Button.RIGHT_THUMB,
    "lb": Button.LEFT_SHOULDER,
    "rb": Button.RIGHT_SHOULDER,
}


def command_for_buttons(buttons: int) -> Optional[str]:
    """Return the command for a button mask, or None if nothing is pressed."""
    mask = int(buttons)
    return next((cmd for button, cmd in _PRIORITY if mask & button), None)


def command_for_key(key: str) -> str:
    """Return the command for a button given by name, e.g. ``"A"`` or ``"up"``."""
    name = key.strip().lower()
    button = _ALIASES.get(name)
    if button is None:
        try:
            button = Button[name.upper()]
        except KeyError:
            raise ValueError(f"unknown button: {key!r}") from None
    command = command_for_buttons(button)
    assert command is not None
    return command


def read_commands(stream: TextIO) -> Iterator[str]:
    """Yield commands for the button names in a text stream, skipping unknown words."""
    for line in stream:
        for word in line.split():
            try:
                yield command_for_key(word)
            except ValueError:
                continue


def echo_commands(commands: Iterable[str], out: TextIO) -> None:
    """Echo each command until a quit command arrives."""
    for command in commands:
        if command == "q":
            out.write(f"{command} <-- have fun!\n")
            return
        out.write(f"{command} <--\n")