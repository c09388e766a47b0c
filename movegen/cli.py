"""Command line for the move generator."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Sequence, TextIO

from movegen.board import Board
from movegen.dictionary import load_dictionary
from movegen.engine import MoveEngine
from movegen.exceptions import MovegenError

log = logging.getLogger("movegen")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="movegen",
        description="List every legal move for a board and hand",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--board", type=str, default=None,
                        help="Board file (default: read from stdin)")
    parser.add_argument("--workers", type=int, default=None,
                        help="Maximum search threads")
    parser.add_argument("--limit", type=int, default=None,
                        help="Print at most this many moves (sorted)")
    parser.add_argument("--pretty", action="store_true",
                        help="Readable output instead of the compact encoding")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def read_board(path: str | None, stdin: TextIO | None = None) -> Board:
    if path is None:
        return Board.from_text((stdin or sys.stdin).read())
    try:
        with open(path, "r", encoding="utf-8") as f:
            return Board.from_text(f.read())
    except OSError as exc:
        raise MovegenError(f"cannot read board {path}: {exc}") from exc


def run(args: argparse.Namespace, out: TextIO) -> int:
    trie = load_dictionary(args.dict)
    board = read_board(args.board)
    log.debug("Board:\n%s", board)

    engine = MoveEngine(trie, max_workers=args.workers)
    t0 = time.time()
    if args.limit is not None:
        moves = engine.find_moves(board, limit=args.limit)
    else:
        moves = engine.iter_moves(board)

    count = 0
    for move in moves:
        out.write((repr(move) if args.pretty else move.encode()) + "\n")
        count += 1
    log.info("Found %d moves in %.2fs.", count, time.time() - t0)
    return count


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        run(args, sys.stdout)
    except MovegenError as exc:
        log.error("%s", exc)
        return 1
    return 0
