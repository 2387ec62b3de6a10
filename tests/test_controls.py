import io

import pytest

from tictoe.controls import (
    Button,
    command_for_buttons,
    command_for_key,
    echo_commands,
    read_commands,
)


@pytest.mark.parametrize(
    "button, command",
    [
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
    ],
)
def test_each_button_maps_to_its_command(button, command):
    assert command_for_buttons(button) == command


def test_no_buttons_gives_none():
    assert command_for_buttons(0) is None


def test_first_button_in_priority_wins():
    assert command_for_buttons(Button.A | Button.B) == "i"
    assert command_for_buttons(Button.DPAD_RIGHT | Button.DPAD_UP) == "w"
    assert command_for_buttons(int(Button.BACK | Button.RIGHT_SHOULDER)) == "c"


def test_command_for_key_accepts_names_and_aliases():
    assert command_for_key("A") == "i"
    assert command_for_key("up") == "w"
    assert command_for_key("DPAD_LEFT") == "a"
    assert command_for_key(" select ") == "q"


def test_command_for_key_matches_button_mask():
    for button in Button:
        assert command_for_key(button.name) == command_for_buttons(button)


def test_command_for_key_rejects_unknown():
    with pytest.raises(ValueError):
        command_for_key("turbo")


def test_read_commands_skips_unknown_words():
    stream = io.StringIO("a up\nbogus y\n\nback\n")
    assert list(read_commands(stream)) == ["i", "w", "y", "q"]


def test_echo_commands_stops_at_quit():
    out = io.StringIO()
    echo_commands(["w", "q", "i"], out)
    assert out.getvalue() == "w <--\nq <-- have fun!\n"


def test_echo_commands_without_quit_echoes_all():
    out = io.StringIO()
    echo_commands(iter(["a", "d"]), out)
    assert out.getvalue().splitlines() == ["a <--", "d <--"]