import string

from movegen.constants import ACROSS, BOARD_SIZE, CENTER, DOWN
from movegen.crosscheck import (
    CrossCheck,
    candidate_letters,
    compute_cross_checks,
    perpendicular_run,
    row_and_column_checks,
)
from movegen.trie import Trie

from conftest import make_board


def test_empty_board_cells_are_free_floating():
    board = make_board("ABC")
    rows, cols = row_and_column_checks(board, Trie.from_words(["CAB"]))
    for table in (rows, cols):
        for x in range(BOARD_SIZE):
            for y in range(BOARD_SIZE):
                cell = table[x][y]
                assert cell.letters == {"A", "B", "C"}
                assert cell.end
                assert not cell.is_static
                assert cell.anchor == ((x, y) == (CENTER, CENTER))


def test_center_is_always_an_anchor():
    board = make_board("Q", [("ZZZ", 0, 0, ACROSS)])
    rows, cols = row_and_column_checks(board, Trie())
    assert rows[CENTER][CENTER].anchor
    assert cols[CENTER][CENTER].anchor


def test_occupied_cells_are_static(small_trie):
    board = make_board("SABC", [("CAT", 7, 7, ACROSS)])
    rows, cols = row_and_column_checks(board, small_trie)
    for col, letter in zip(range(7, 10), "CAT"):
        for cell in (rows[7][col], cols[col][7]):
            assert cell == CrossCheck.occupied(letter)
            assert cell.letters == {letter}
            assert cell.anchor and not cell.end


def test_blank_tile_on_board_matches_as_uppercase():
    board = make_board("A", [("c", 3, 3, ACROSS)])
    rows = compute_cross_checks(board, Trie())
    assert rows[3][3].static == "C"
    assert rows[3][3].letters == {"C"}


def test_perpendicular_word_restricts_letters():
    # CAT across on row 7; a down play through (8, 8) would form "A?" down
    board = make_board("STB", [("CAT", 7, 7, ACROSS)])
    trie = Trie.from_words(["AS", "AT", "CATS"])
    rows, cols = row_and_column_checks(board, trie)
    below_a = rows[8][8]
    assert below_a.anchor and below_a.end
    assert below_a.letters == {"S", "T"}
    # column-wise checks: (7, 10) sits right of T, forming "CAT?" across
    right_of_t = cols[10][7]
    assert right_of_t.anchor
    assert right_of_t.letters == {"S"}
    # (6, 10) touches nothing across
    assert cols[10][6] == CrossCheck({"S", "T", "B"}, end=True)


def test_run_found_on_both_sides():
    board = make_board("AO", [("C", 4, 2, DOWN), ("T", 6, 2, DOWN)])
    run, target = perpendicular_run(board, 5, 2)
    assert run == ["C", "", "T"]
    assert target == 1
    rows = compute_cross_checks(board, Trie.from_words(["CAT", "COT", "CT"]))
    assert rows[5][2].letters == {"A", "O"}


def test_edge_run_with_tiles_only_after_target():
    # target at the top edge, tiles only below it
    board = make_board("AS", [("T", 1, 0, DOWN)])
    rows = compute_cross_checks(board, Trie.from_words(["AT"]))
    assert rows[0][0].anchor
    assert rows[0][0].letters == {"A"}
    # and at the bottom edge with tiles only above
    board = make_board("AS", [("T", 13, 14, DOWN)])
    rows = compute_cross_checks(board, Trie.from_words(["TA"]))
    assert rows[14][14].letters == {"A"}


def test_transposed_pass_sees_horizontal_neighbours():
    # tile only to the right of (0, 0): the across checks do not care,
    # the down checks must
    board = make_board("AS", [("T", 0, 1, ACROSS)])
    rows, cols = row_and_column_checks(board, Trie.from_words(["AT"]))
    assert not rows[0][0].anchor
    assert cols[0][0].anchor
    assert cols[0][0].letters == {"A"}


def test_board_restored_after_checks(small_trie):
    board = make_board("S", [("CAT", 2, 3, DOWN)])
    original = board.copy()
    row_and_column_checks(board, small_trie)
    assert board == original


def test_blank_in_hand_offers_whole_alphabet():
    assert candidate_letters(make_board("A?").hand) == frozenset(string.ascii_uppercase)
    assert candidate_letters(make_board("AB").hand) == {"A", "B"}
    hand = make_board("AB").hand
    hand["A"] = 0
    assert candidate_letters(hand) == {"B"}
