from movegen.trie import Trie

WORDS = ["CAT", "CATS", "CAB", "DOG", "DO"]


def test_inserted_words_verify():
    trie = Trie.from_words(WORDS)
    for w in WORDS:
        assert trie.verify(w)
        assert w in trie


def test_prefixes_are_not_words():
    trie = Trie.from_words(WORDS)
    assert trie.is_prefix("CA")
    assert not trie.verify("CA")
    assert not trie.verify("C")


def test_missing_edge_is_a_plain_miss():
    trie = Trie.from_words(WORDS)
    assert trie.verify("CATZ") is False
    assert trie.verify("XYZ") is False
    assert not trie.is_prefix("DX")


def test_empty_string():
    trie = Trie.from_words(WORDS)
    assert not trie.verify("")
    assert trie.is_prefix("")


def test_insert_is_idempotent():
    trie = Trie()
    trie.insert("CAT")
    trie.insert("CAT")
    trie.insert("")
    assert len(trie) == 1
    assert list(trie.root.children) == ["C"]


def test_word_rebuilt_from_parent_links():
    trie = Trie.from_words(WORDS)
    node = trie.root.children["C"].children["A"].children["T"].children["S"]
    assert node.word() == "CATS"
    assert node.parent.word() == "CAT"
    assert trie.root.word() == ""
    assert trie.root.parent is None
