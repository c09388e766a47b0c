"""15×15 game board and hand."""

from __future__ import annotations

import string
from collections import Counter
from contextlib import contextmanager
from typing import Iterator

from movegen.constants import ACROSS, BLANK, BOARD_SIZE, CENTER, DOWN, EMPTY_CELLS
from movegen.exceptions import BoardFormatError


def on_board(*coords: int) -> bool:
    """True if every coordinate lies in [0, BOARD_SIZE)."""
    return all(0 <= c < BOARD_SIZE for c in coords)


class Board:
    """15x15 game board. Cells are None (empty), 'A'-'Z' (tile),
    or lowercase 'a'-'z' (blank used as that letter).

    ``hand`` maps a letter (or ``?`` for a blank) to how many of it the
    player holds.
    """

    def __init__(self, hand: dict[str, int] | None = None):
        self.cells: list[list[str | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self.hand: Counter[str] = Counter(hand or {})

    def get(self, row: int, col: int) -> str | None:
        """Letter at (row, col), or None."""
        if on_board(row, col):
            return self.cells[row][col]
        return None

    def set(self, row: int, col: int, letter: str | None) -> None:
        """Place a letter or clear the cell."""
        if on_board(row, col):
            self.cells[row][col] = letter

    def is_empty(self, row: int, col: int) -> bool:
        """True if no tile at (row, col). Off-board cells count as empty."""
        return self.get(row, col) is None

    def is_occupied(self, row: int, col: int) -> bool:
        return not self.is_empty(row, col)

    def count_tiles(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell is not None)

    def place_word(self, word: str, row: int, col: int, direction: str = ACROSS) -> None:
        """Write *word* starting at (row, col); letters off the board are dropped."""
        dr = 1 if direction == DOWN else 0
        dc = 1 if direction == ACROSS else 0
        for i, ch in enumerate(word):
            self.set(row + i * dr, col + i * dc, ch)

    def transpose(self) -> None:
        """Swap rows and columns in place. Applying it twice is a no-op."""
        cells = self.cells
        for r in range(BOARD_SIZE):
            for c in range(r + 1, BOARD_SIZE):
                cells[r][c], cells[c][r] = cells[c][r], cells[r][c]

    @contextmanager
    def transposed(self) -> Iterator[Board]:
        """Transpose for the duration of the block, restoring on exit."""
        self.transpose()
        try:
            yield self
        finally:
            self.transpose()

    def copy(self) -> Board:
        b = Board(self.hand)
        for r in range(BOARD_SIZE):
            b.cells[r] = self.cells[r][:]
        return b

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells and +self.hand == +other.hand

    # text format

    @classmethod
    def from_text(cls, text: str) -> Board:
        """Parse board text.

        Two layouts are accepted. The flat one is a single line of
        BOARD_SIZE*BOARD_SIZE cells in row-major order, a hand-size digit
        and that many hand letters. The grid one is BOARD_SIZE lines of
        cells followed by a hand line ("3ABC" or just "ABC").
        Spaces and dots are empty cells.
        """
        lines = text.splitlines()
        flat = next((ln for ln in lines if len(ln) > BOARD_SIZE * BOARD_SIZE), None)
        if flat is not None:
            grid_text = flat[:BOARD_SIZE * BOARD_SIZE]
            rows = [
                grid_text[r * BOARD_SIZE:(r + 1) * BOARD_SIZE]
                for r in range(BOARD_SIZE)
            ]
            hand_text = flat[BOARD_SIZE * BOARD_SIZE:]
            if _hand_size(hand_text) is None:
                raise BoardFormatError("hand size digit missing after the grid")
        else:
            if len(lines) < BOARD_SIZE:
                raise BoardFormatError(
                    f"expected {BOARD_SIZE} grid lines, got {len(lines)}"
                )
            rows = lines[:BOARD_SIZE]
            rest = [ln.strip() for ln in lines[BOARD_SIZE:] if ln.strip()]
            if len(rest) > 1:
                raise BoardFormatError("unexpected text after the hand line")
            hand_text = rest[0] if rest else ""

        board = cls()
        for r, row in enumerate(rows):
            if len(row) > BOARD_SIZE:
                raise BoardFormatError(f"row {r} is longer than {BOARD_SIZE} cells")
            for c, ch in enumerate(row):
                if ch in EMPTY_CELLS:
                    continue
                if not (ch.isascii() and ch.isalpha()):
                    raise BoardFormatError(f"bad cell {ch!r} at ({r},{c})")
                board.cells[r][c] = ch
        board.hand = _parse_hand(hand_text)
        return board

    def to_text(self) -> str:
        """Flat single-line form accepted by from_text."""
        grid = "".join(cell or " " for row in self.cells for cell in row)
        hand = "".join(sorted(self.hand.elements()))
        if len(hand) > 9:
            raise BoardFormatError("flat form holds at most 9 hand letters")
        return f"{grid}{len(hand)}{hand}"

    def __str__(self) -> str:
        header = "    " + " ".join(f"{c:>2}" for c in range(BOARD_SIZE))
        sep = "   " + "---" * BOARD_SIZE
        lines = [header, sep]
        for r in range(BOARD_SIZE):
            parts = [f"{r:>2} |"]
            for c in range(BOARD_SIZE):
                val = self.cells[r][c]
                if val:
                    parts.append(f" {val} ")
                else:
                    parts.append(" * " if (r, c) == (CENTER, CENTER) else " . ")
            lines.append("".join(parts))
        lines.append("Hand: " + " ".join(sorted(self.hand.elements())))
        return "\n".join(lines)


def _hand_size(text: str) -> int | None:
    """Leading ASCII digit as the hand size, or None."""
    if text and text[0] in string.digits:
        return int(text[0])
    return None


def _parse_hand(text: str) -> Counter[str]:
    hand: Counter[str] = Counter()
    text = text.rstrip("\r\n")
    size = _hand_size(text)
    if size is not None:
        letters = text[1:]
        if len(letters) < size:
            raise BoardFormatError(
                f"hand size {size} but only {len(letters)} letters given"
            )
        letters = letters[:size]
    else:
        letters = text.strip()
    for ch in letters:
        if ch == BLANK:
            hand[BLANK] += 1
        elif ch.isascii() and ch.isalpha():
            hand[ch.upper()] += 1
        else:
            raise BoardFormatError(f"bad hand letter {ch!r}")
    return hand
