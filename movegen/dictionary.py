"""Word list loading into a prefix trie."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from movegen.constants import BOARD_SIZE
from movegen.exceptions import DictionaryError
from movegen.trie import Trie

log = logging.getLogger("movegen")

DEFAULT_PATHS = (
    "words.txt",
    "dictionary.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
)


def normalize(line: str) -> str | None:
    """Uppercased word, or None if the line is not a playable word."""
    word = line.strip().upper()
    if not word or len(word) > BOARD_SIZE or not word.isalpha() or not word.isascii():
        return None
    return word


def build_trie(lines: Iterable[str]) -> Trie:
    """Insert every usable line; blanks and junk are skipped."""
    trie = Trie()
    for line in lines:
        word = normalize(line)
        if word is not None:
            trie.insert(word)
    return trie


def load_dictionary(dict_path: str | None = None) -> Trie:
    """Load a word list, one word per line.

    An explicit *dict_path* must exist. Without one the default file
    names are tried in order.
    """
    if dict_path is not None:
        if not os.path.exists(dict_path):
            raise DictionaryError(f"dictionary file not found: {dict_path}")
        search_paths = [dict_path]
    else:
        search_paths = [p for p in DEFAULT_PATHS if os.path.exists(p)]
        if not search_paths:
            raise DictionaryError(
                "no dictionary file found (tried %s)" % ", ".join(DEFAULT_PATHS)
            )

    path = search_paths[0]
    try:
        with open(path, "r", encoding="utf-8") as f:
            trie = build_trie(f)
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryError(f"cannot read dictionary {path}: {exc}") from exc

    if not len(trie):
        raise DictionaryError(f"dictionary {path} contains no words")
    log.info("Loaded %s words from %s", f"{len(trie):,}", path)
    return trie
