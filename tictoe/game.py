"""Tic-tac-toe against a random opponent, driven by single-letter commands."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, TextIO

from tictoe.controls import read_commands

EMPTY = "r"
_SIZE = 3
_MOVES = {"w": (-1, 0), "s": (1, 0), "a": (0, -1), "d": (0, 1)}
_LINES = (
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((2, 0), (1, 1), (0, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
)
_CLEAR = "\n" * 100
_INTRO = (
    "you are X\n"
    "X goes first\n"
    "dpadUP moves up\n"
    "dpadDOWN moves down\n"
    "dpadLEFT moves left\n"
    "dpadRIGHT moves right\n"
    "'select' or 'B' to quit\n"
    "press A to change to X\n"
)


class CellOccupiedError(ValueError):
    """Raised when placing a mark on a cell that already holds one."""


@dataclass
class _Node:
    mark: str
    next: Optional["_Node"]


class TurnStack:
    """A last-in, first-out stack of marks."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def push(self, mark: str) -> None:
        self._head = _Node(mark, self._head)
        self._size += 1

    def pop(self) -> str:
        if self._head is None:
            raise IndexError("pop from empty turn stack")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.mark

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        node = self._head
        while node is not None:
            yield node.mark
            node = node.next


class Game:
    """A board, a cursor, and the stack of turns that alternates x and o."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.board = [[EMPTY] * _SIZE for _ in range(_SIZE)]
        self.turns = TurnStack()
        for k in range(10):
            self.turns.push("o" if k % 2 == 0 else "x")
        self.cursor = (1, 1)

    def _render(self, highlight: Optional[tuple[int, int]] = None) -> str:
        rows = []
        for r, row in enumerate(self.board):
            cells = (
                cell.upper() if (r, c) == highlight else cell
                for c, cell in enumerate(row)
            )
            rows.append("".join(f" {cell} " for cell in cells) + "\n")
        return "".join(rows)

    def render(self) -> str:
        """Return the board as text, one row per line."""
        return self._render()

    def move(self, direction: str) -> tuple[int, int]:
        """Move the cursor one cell in w/s/a/d direction, staying on the board."""
        try:
            dr, dc = _MOVES[direction]
        except KeyError:
            raise ValueError(f"unknown direction: {direction!r}") from None
        row, col = self.cursor
        self.cursor = (
            min(max(row + dr, 0), _SIZE - 1),
            min(max(col + dc, 0), _SIZE - 1),
        )
        return self.cursor

    def place(self) -> str:
        """Put the next turn's mark under the cursor and return it."""
        row, col = self.cursor
        if self.board[row][col] != EMPTY:
            raise CellOccupiedError("there is already a X or an O there")
        mark = self.turns.pop()
        self.board[row][col] = mark
        return mark

    def npc_move(self) -> tuple[int, int]:
        """Place the next mark on a random free cell and return its position.

        On a full board the mark lands on a random occupied cell.
        """
        full = self.is_full()
        while True:
            row, col = self.rng.randrange(_SIZE), self.rng.randrange(_SIZE)
            if full or self.board[row][col] == EMPTY:
                break
        self.board[row][col] = self.turns.pop()
        return row, col

    def winner(self) -> Optional[str]:
        """Return the mark holding a full line, x checked before o, or None."""
        for mark in ("x", "o"):
            for line in _LINES:
                if all(self.board[r][c] == mark for r, c in line):
                    return mark
        return None

    def is_full(self) -> bool:
        return all(cell != EMPTY for row in self.board for cell in row)

    def _show(self, out: TextIO, highlight: Optional[tuple[int, int]] = None) -> None:
        out.write(_CLEAR)
        out.write(self._render(highlight))
        out.write("\n")

    def run(self, commands: Iterable[str], out: TextIO) -> Optional[str]:
        """Play one game from the commands; return the winning mark or None."""
        out.write(_INTRO)
        count = 0
        for choice in commands:
            if choice in _MOVES:
                self.move(choice)
                self._show(out, self.cursor)
            elif choice == "i":
                try:
                    self.place()
                except CellOccupiedError as exc:
                    out.write(f"{exc}\n\n")
                    continue
                self._show(out)
                mark = self.winner()
                if mark:
                    out.write(f" {mark} wins\n\n")
                    return mark
                count += 1
                self.npc_move()
                self._show(out)
                if count == 9:
                    out.write("nobody wins\n\n")
                    return None
                mark = self.winner()
                if mark:
                    out.write(f" {mark} wins\n\n")
                    return mark
                count += 1
            elif choice == "q":
                out.write("peace out\n\n")
                return None
            else:
                out.write("not a valid command\n\n")
        return None


def play(
    commands: Iterable[str], out: TextIO, rng: Optional[random.Random] = None
) -> None:
    """Offer games until the player declines or the commands run out."""
    stream = iter(commands)
    while True:
        out.write("play?\nY for yes, X for no\n\n")
        again = next(stream, None)
        if again is None:
            return
        if again == "y":
            game = Game(rng)
            out.write(game.render())
            out.write("\n")
            game.run(stream, out)
        if again == "x":
            out.write("goodbye in \n")
            for j in range(5, 0, -1):
                out.write(f"{j}\n")
            return
        out.write("enter either X or Y\n\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tictoe",
        description="Tic-tac-toe; type button names (a, b, x, y, up, down, ...) on stdin.",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the opponent")
    args = parser.parse_args(argv)
    play(read_commands(sys.stdin), sys.stdout, random.Random(args.seed))
    return 0


if __name__ == "__main__":
    sys.exit(main())