import pytest

from algokit.trie import PrefixTrie, run_commands


def test_count_of_whole_words_and_prefixes():
    words = ["hack", "hackerrank", "hat"]
    trie = PrefixTrie()
    for word in words:
        trie.insert(word)
    assert trie.count("") == len(words)
    assert trie.count("ha") == len(words)
    assert trie.count("hack") == len([w for w in words if w.startswith("hack")])
    assert trie.count("hackerrank") == 1


def test_missing_prefix_counts_zero():
    trie = PrefixTrie()
    trie.insert("apple")
    assert trie.count("b") == 0
    assert trie.count("applex") == 0


def test_duplicates_are_counted():
    trie = PrefixTrie()
    trie.insert("abc")
    trie.insert("abc")
    assert trie.count("abc") == 2
    assert trie.count("a") == 2


def test_invalid_characters_rejected():
    trie = PrefixTrie()
    with pytest.raises(ValueError):
        trie.insert("Abc")
    with pytest.raises(ValueError):
        trie.count("a1")


def test_run_commands_example():
    script = ["4", "add hack", "add hackerrank", "find hac", "find hak"]
    assert run_commands(script) == [2, 0]


def test_run_commands_truncated_script():
    with pytest.raises(ValueError):
        run_commands(["3", "add a"])