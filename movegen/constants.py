"""Board and alphabet constants."""

from __future__ import annotations

import string

BOARD_SIZE = 15
CENTER = 7  # 0-indexed center square

ALPHABET = string.ascii_uppercase
BLANK = "?"  # blank tile in the hand
EMPTY_CELLS = (" ", ".")  # accepted as empty in board text

# Move text encoding
ON_BOARD_MARK = "_"
ACROSS = "H"
DOWN = "V"
