"""Move representation."""

from __future__ import annotations

from typing import NamedTuple

from movegen.constants import ACROSS, DOWN, ON_BOARD_MARK


class Tile(NamedTuple):
    """One letter of a move."""

    letter: str
    on_board: bool = False  # already on the board, not placed by the player
    blank: bool = False     # placed from a blank in the hand


class Move:
    """A legal placement: origin, direction and its letters in order."""

    __slots__ = ("row", "col", "direction", "tiles")

    def __init__(self, row: int, col: int, direction: str, tiles: tuple[Tile, ...]):
        if direction not in (ACROSS, DOWN):
            raise ValueError(f"direction must be {ACROSS!r} or {DOWN!r}, not {direction!r}")
        self.row = row
        self.col = col
        self.direction = direction  # 'H' or 'V'
        self.tiles = tuple(tiles)

    @property
    def x(self) -> int:
        return self.col

    @property
    def y(self) -> int:
        return self.row

    @property
    def word(self) -> str:
        return "".join(t.letter for t in self.tiles)

    @property
    def placed(self) -> list[tuple[str, int, int]]:
        """Tiles the player lays down as (letter, row, col)."""
        dr = 1 if self.direction == DOWN else 0
        dc = 1 if self.direction == ACROSS else 0
        return [
            (t.letter.lower() if t.blank else t.letter, self.row + i * dr, self.col + i * dc)
            for i, t in enumerate(self.tiles)
            if not t.on_board
        ]

    def encode(self) -> str:
        """Compact text form: x, y, a|d, length, letters.

        Numbers are written as ``chr(ord('0') + n)``. Letters already on
        the board show as ``_`` and blanks are lowercase.
        """
        letters = "".join(
            ON_BOARD_MARK if t.on_board else (t.letter.lower() if t.blank else t.letter)
            for t in self.tiles
        )
        return "".join((
            _digit(self.x),
            _digit(self.y),
            "d" if self.direction == DOWN else "a",
            _digit(len(self.tiles)),
            letters,
        ))

    def _key(self) -> tuple:
        return (self.row, self.col, self.direction, self.tiles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: Move) -> bool:
        return self._key() < other._key()

    def __repr__(self) -> str:
        arrow = "→" if self.direction == ACROSS else "↓"
        shown = "".join(
            t.letter.lower() if t.blank else (f"({t.letter})" if t.on_board else t.letter)
            for t in self.tiles
        )
        return f"{shown} at ({self.row},{self.col}) {arrow}"


def _digit(n: int) -> str:
    return chr(ord("0") + n)
