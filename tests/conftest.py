import pytest

from movegen.board import Board
from movegen.constants import ACROSS
from movegen.engine import MoveEngine
from movegen.trie import Trie


def make_board(hand: str = "", words=()) -> Board:
    """Board with *hand* letters and ``(word, row, col, direction)`` placements."""
    board = Board()
    for ch in hand:
        board.hand[ch] += 1
    for word, row, col, direction in words:
        board.place_word(word, row, col, direction)
    return board


def find(words, board: Board, **kwargs):
    engine = MoveEngine(Trie.from_words(words), **kwargs)
    return engine.find_all_moves(board)


@pytest.fixture
def small_trie() -> Trie:
    return Trie.from_words(["CAT", "CATS", "CAB", "AT", "AS", "TA", "SAT", "TAB"])


@pytest.fixture
def cat_board() -> Board:
    return make_board("S", [("CAT", 7, 7, ACROSS)])
