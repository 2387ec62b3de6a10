# tictoe

Tic-tac-toe in the terminal against a computer opponent that picks
random free squares. Input is given as gamepad button names, typed as
text, which are turned into single-letter commands.

## Installing

```
pip install .
```

## Playing

```
tictoe [--seed N]
```

`--seed` seeds the computer opponent's random choices so that a game
can be repeated.

The command reads button names from standard input, separated by
spaces or new lines. Words that are not button names are skipped.
Button names are not case-sensitive; besides the names of `Button`
members (`a`, `b`, `x`, `y`, `start`, `back`, `dpad_up`, ...) the
short forms `up`, `down`, `left`, `right`, `select`, `ls`, `rs`, `lb`
and `rb` are accepted.

At the `play?` prompt, type `y` to start a game or `x` to leave.
During a game:

| Button               | Command | Effect                          |
|----------------------|---------|---------------------------------|
| `up`                 | `w`     | move the cursor up              |
| `down`               | `s`     | move the cursor down            |
| `left`               | `a`     | move the cursor left            |
| `right`              | `d`     | move the cursor right           |
| `a`                  | `i`     | place your mark at the cursor   |
| `b` or `back`/`select` | `q`   | quit the current game           |

Any other button during a game prints `not a valid command`.

You play `x` and move first. Empty squares are shown as `r`; after a
cursor move the square under the cursor is shown in upper case. After
each of your marks the computer places an `o` on a random free square.
The game ends when a row, column or diagonal holds three of one mark,
or after the board has been filled with nine moves (`nobody wins`).
Placing a mark on a taken square prints a message and changes nothing.

## Using it from code

`Game.run` takes any iterable of command letters and writes to any
text stream; `play` offers games until the player answers `x` or the
commands run out:

```python
import io
import random

from tictoe.controls import read_commands
from tictoe.game import Game, play

out = io.StringIO()
game = Game(random.Random(1))
game.run(iter("iwi"), out)
print(game.render())
print(game.winner())

play(read_commands(io.StringIO("y a b\nx\n")), out, random.Random(1))
```

`Game` also offers `move`, `place`, `npc_move`, `winner` and
`is_full` for stepping through a game by hand; `TurnStack` is the
stack of marks that decides whose turn it is.

`tictoe.controls` provides `Button`, the gamepad button flags;
`command_for_buttons` turns a button mask into a command letter (the
first pressed button in a fixed order wins), `command_for_key` does the
same for a button name, `read_commands` yields commands from a text
stream, and `echo_commands` prints each command until a quit command
arrives, which is handy for checking an input mapping.

## What it does not do

The package does not read a physical gamepad. Buttons are only ever
given as names in text, or as integer masks passed to
`command_for_buttons`; there is no vibration or connection check.

## Running the tests

```
pip install .[test]
pytest
```