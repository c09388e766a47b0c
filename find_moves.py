#!/usr/bin/env python3
"""
Move generator

Reads a 15x15 board and a hand (from stdin or --board), loads a word
list and prints every legal move, one per line.

    python find_moves.py --dict words.txt < board.txt
"""

import sys

from movegen.cli import main

if __name__ == "__main__":
    sys.exit(main())
