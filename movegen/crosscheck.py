"""Cross-checks: which letters each empty cell can take.

A cross-check table is computed for one orientation of the board at a
time. Line ``x`` of the table runs along ``cells[x]``; the perpendicular
neighbours of ``(x, y)`` are ``(x - 1, y)`` and ``(x + 1, y)``. Running
the same routine on the transposed board gives the other direction.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from movegen.board import Board, on_board
from movegen.constants import ALPHABET, BLANK, BOARD_SIZE, CENTER
from movegen.trie import Trie


class CrossCheck:
    """Annotated letter set for one cell in one orientation.

    letters  letters that may be played (or passed through) here
    static   the letter already on the cell, uppercased, else None
    anchor   a word passing through here touches existing tiles
    end      the cell is empty, so a word may stop just before it
    """

    __slots__ = ("letters", "static", "anchor", "end")

    def __init__(
        self,
        letters: Iterable[str] = (),
        static: str | None = None,
        anchor: bool = False,
        end: bool = False,
    ):
        self.letters = frozenset(letters)
        self.static = static
        self.anchor = anchor
        self.end = end

    @classmethod
    def occupied(cls, letter: str) -> CrossCheck:
        letter = letter.upper()
        return cls((letter,), static=letter, anchor=True, end=False)

    @property
    def is_static(self) -> bool:
        return self.static is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CrossCheck):
            return NotImplemented
        return (self.letters, self.static, self.anchor, self.end) == (
            other.letters, other.static, other.anchor, other.end,
        )

    def __repr__(self) -> str:
        flags = "".join(
            f for f, on in (("A", self.anchor), ("E", self.end), ("S", self.is_static)) if on
        )
        return f"CrossCheck({''.join(sorted(self.letters))!r}, {flags or '-'})"


CrossCheckTable = list[list[CrossCheck]]


def candidate_letters(hand: Counter[str]) -> frozenset[str]:
    """Letters the hand can put down; a blank can be any letter."""
    if hand.get(BLANK, 0) > 0:
        return frozenset(ALPHABET)
    return frozenset(ch for ch, n in hand.items() if n > 0)


def perpendicular_run(board: Board, x: int, y: int) -> tuple[list[str], int]:
    """Letters of the perpendicular word through empty cell (x, y).

    Returns the letters (with a placeholder at the target) and the
    target's index within them. Tiles on both sides are collected.
    """
    cells = board.cells
    start = x
    while on_board(start - 1) and cells[start - 1][y] is not None:
        start -= 1
    run: list[str] = []
    i = start
    while on_board(i) and (cells[i][y] is not None or i == x):
        run.append((cells[i][y] or "").upper())
        i += 1
    return run, x - start


def compute_cross_checks(board: Board, trie: Trie) -> CrossCheckTable:
    """Cross-check table for the board in its current orientation."""
    cells = board.cells
    candidates = candidate_letters(board.hand)
    table: CrossCheckTable = []

    for x in range(BOARD_SIZE):
        line: list[CrossCheck] = []
        for y in range(BOARD_SIZE):
            ch = cells[x][y]
            if ch is not None:
                line.append(CrossCheck.occupied(ch))
                continue

            before = cells[x - 1][y] if on_board(x - 1) else None
            after = cells[x + 1][y] if on_board(x + 1) else None
            if before is None and after is None:
                # free floating, nothing perpendicular to satisfy
                line.append(CrossCheck(candidates, end=True))
                continue

            run, target = perpendicular_run(board, x, y)
            allowed = []
            for letter in candidates:
                run[target] = letter
                if trie.verify("".join(run)):
                    allowed.append(letter)
            line.append(CrossCheck(allowed, anchor=True, end=True))
        table.append(line)

    table[CENTER][CENTER].anchor = True
    return table


def row_and_column_checks(board: Board, trie: Trie) -> tuple[CrossCheckTable, CrossCheckTable]:
    """Checks for across plays (``[row][col]``) and down plays (``[col][row]``).

    The board is transposed for the second pass and always restored.
    """
    rows = compute_cross_checks(board, trie)
    with board.transposed():
        cols = compute_cross_checks(board, trie)
    return rows, cols
