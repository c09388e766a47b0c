"""Scrabble-style move generator — modular package."""

from movegen.constants import ACROSS, BLANK, BOARD_SIZE, CENTER, DOWN
from movegen.trie import Trie, TrieNode
from movegen.dictionary import build_trie, load_dictionary
from movegen.board import Board, on_board
from movegen.crosscheck import CrossCheck, compute_cross_checks, row_and_column_checks
from movegen.move import Move, Tile
from movegen.engine import MoveEngine
from movegen.exceptions import BoardFormatError, DictionaryError, MovegenError, SearchError

__all__ = [
    "ACROSS",
    "BLANK",
    "BOARD_SIZE",
    "CENTER",
    "DOWN",
    "Board",
    "BoardFormatError",
    "CrossCheck",
    "DictionaryError",
    "Move",
    "MoveEngine",
    "MovegenError",
    "SearchError",
    "Tile",
    "Trie",
    "TrieNode",
    "build_trie",
    "compute_cross_checks",
    "load_dictionary",
    "on_board",
    "row_and_column_checks",
]
