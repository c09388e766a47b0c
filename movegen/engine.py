"""Move engine — anchor-based generation with trie pruning."""

from __future__ import annotations

import logging
import threading
import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, NamedTuple

from movegen.board import Board
from movegen.constants import ACROSS, BLANK, BOARD_SIZE, DOWN
from movegen.crosscheck import CrossCheck, row_and_column_checks
from movegen.exceptions import SearchError
from movegen.move import Move, Tile
from movegen.tasks import BranchCounter, MoveStream
from movegen.trie import Trie, TrieNode

log = logging.getLogger("movegen.search")


class _Branch(NamedTuple):
    row: int
    col: int
    direction: str
    line: list[CrossCheck]  # cross-checks along the play direction
    start: int              # index of the first letter within ``line``
    pos: int                # index of the next cell to fill
    node: TrieNode
    hand: Counter
    anchored: bool
    blanks: tuple[int, ...] = ()  # word offsets played with a blank


class MoveEngine:
    """Finds every legal move using cross-checks and trie pruning
    (similar to the Appel-Jacobson algorithm).

    Each letter extension runs as its own task on a thread pool.
    ``max_workers`` bounds the threads, not the number of queued
    branches.
    """

    def __init__(self, trie: Trie, max_workers: int | None = None):
        self.trie = trie
        self.max_workers = max_workers

    # public API

    def find_all_moves(self, board: Board) -> list[Move]:
        """Every legal move, in no particular order."""
        return list(self.iter_moves(board))

    def find_moves(self, board: Board, limit: int | None = None) -> list[Move]:
        """Deduplicated moves in a stable order, optionally truncated."""
        unique = sorted(set(self.iter_moves(board)))
        return unique if limit is None else unique[:limit]

    def iter_moves(
        self, board: Board, cancel: threading.Event | None = None,
    ) -> Iterator[Move]:
        """Yield moves as branches find them.

        Setting *cancel* stops new branches from being spawned. Closing
        the generator early does the same.
        """
        t0 = time.time()
        rows, cols = row_and_column_checks(board, self.trie)
        search = _Search(self.trie, board, cancel)
        found = 0

        with ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="movegen",
        ) as executor:
            search.executor = executor
            # the driver holds one token until every start cell is launched
            search.counter.launched()
            search.counter.start()
            try:
                for r in range(BOARD_SIZE):
                    for c in range(BOARD_SIZE):
                        if search.stopped():
                            break
                        if board.is_empty(r - 1, c):
                            search.launch(search.root_branch(r, c, DOWN, cols[c], r))
                        if board.is_empty(r, c - 1):
                            search.launch(search.root_branch(r, c, ACROSS, rows[r], c))
            finally:
                search.counter.finished()

            try:
                for move in search.stream:
                    found += 1
                    yield move
            finally:
                search.stop.set()

        search.counter.join()
        if search.failure is not None:
            raise SearchError("move search failed") from search.failure
        log.debug(
            "Found %d moves from %d branches in %.3fs",
            found, search.counter.launched_total - 1, time.time() - t0,
        )


class _Search:
    """Shared state of one search: stream, counter and pool."""

    def __init__(self, trie: Trie, board: Board, cancel: threading.Event | None):
        self.trie = trie
        self.board = board
        self.cancel = cancel
        self.stop = threading.Event()
        self.stream: MoveStream[Move] = MoveStream()
        self.counter = BranchCounter(self.stream)
        self.executor: ThreadPoolExecutor | None = None
        self.failure: BaseException | None = None
        self._lock = threading.Lock()

    def stopped(self) -> bool:
        return self.stop.is_set() or (self.cancel is not None and self.cancel.is_set())

    def root_branch(self, row: int, col: int, direction: str, line: list[CrossCheck], start: int) -> _Branch:
        return _Branch(
            row=row, col=col, direction=direction, line=line, start=start, pos=start,
            node=self.trie.root, hand=Counter(self.board.hand), anchored=False,
        )

    def launch(self, branch: _Branch) -> None:
        self.counter.launched()
        try:
            self.executor.submit(self._run, branch)
        except RuntimeError:
            self.counter.finished()
            if self.stopped():
                return  # pool is shutting down after the consumer left
            raise
        except BaseException:
            self.counter.finished()
            raise

    def _run(self, branch: _Branch) -> None:
        try:
            self._step(branch)
        except Exception as exc:
            log.exception(
                "Branch at (%d,%d) %s failed", branch.row, branch.col, branch.direction,
            )
            with self._lock:
                if self.failure is None:
                    self.failure = exc
            self.stop.set()
        finally:
            self.counter.finished()

    def _step(self, branch: _Branch) -> None:
        node = branch.node
        can_end = True

        if branch.pos < len(branch.line):
            cell = branch.line[branch.pos]
            anchored = branch.anchored or cell.anchor
            offset = branch.pos - branch.start
            for letter in cell.letters:
                child = node.children.get(letter)
                if child is None:
                    continue
                # a branch never mutates the hand it was given
                hand = branch.hand
                blanks = branch.blanks
                if cell.is_static:
                    pass
                elif hand[letter] > 0:
                    hand = hand.copy()
                    hand[letter] -= 1
                elif hand[BLANK] > 0:
                    hand = hand.copy()
                    hand[BLANK] -= 1
                    blanks = blanks + (offset,)
                else:
                    continue
                if self.stopped():
                    break
                self.launch(branch._replace(
                    node=child, hand=hand, anchored=anchored,
                    pos=branch.pos + 1, blanks=blanks,
                ))
            can_end = cell.end

        # anchored must already hold for the letters placed so far
        if node.is_terminal and branch.anchored and can_end:
            move = self._make_move(branch)
            if move is not None:
                self.stream.send(move)

    def _make_move(self, branch: _Branch) -> Move | None:
        dr = 1 if branch.direction == DOWN else 0
        dc = 1 if branch.direction == ACROSS else 0
        tiles: list[Tile] = []
        for i, letter in enumerate(branch.node.word()):
            existing = self.board.get(branch.row + i * dr, branch.col + i * dc)
            on_board = existing is not None and existing.upper() == letter
            tiles.append(Tile(letter, on_board=on_board, blank=i in branch.blanks))
        if all(t.on_board for t in tiles):
            return None
        return Move(branch.row, branch.col, branch.direction, tuple(tiles))
