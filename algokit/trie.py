"""Prefix-counting trie over lowercase words."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from string import ascii_lowercase

__all__ = ["PrefixTrie", "run_commands"]

_ALPHABET = frozenset(ascii_lowercase)


@dataclass(eq=False)
class _Node:
    children: dict[str, "_Node"] = field(default_factory=dict)
    count: int = 0


class PrefixTrie:
    """Trie that counts how many inserted words pass through each prefix."""

    def __init__(self) -> None:
        self._root = _Node()

    @staticmethod
    def _check(text: str) -> None:
        bad = set(text) - _ALPHABET
        if bad:
            raise ValueError(f"only lowercase letters a-z are allowed, got {sorted(bad)!r}")

    def insert(self, word: str) -> None:
        """Add ``word``; duplicates are counted again."""
        self._check(word)
        node = self._root
        node.count += 1
        for ch in word:
            node = node.children.setdefault(ch, _Node())
            node.count += 1

    def count(self, prefix: str) -> int:
        """Number of inserted words that start with ``prefix``."""
        self._check(prefix)
        node = self._root
        for ch in prefix:
            child = node.children.get(ch)
            if child is None:
                return 0
            node = child
        return node.count


def run_commands(lines: Iterable[str]) -> list[int]:
    """Run a command script and return the answers to its queries.

    The script starts with the number of commands, followed by that many
    ``<op> <word>`` pairs. ``add`` inserts the word; any other operation
    asks how many added words start with it.
    """
    tokens = iter(token for line in lines for token in line.split())
    try:
        total = int(next(tokens))
    except StopIteration:
        raise ValueError("missing command count") from None
    trie = PrefixTrie()
    answers: list[int] = []
    for _ in range(total):
        try:
            op = next(tokens)
            word = next(tokens)
        except StopIteration:
            raise ValueError("fewer commands than announced") from None
        if op == "add":
            trie.insert(word)
        else:
            answers.append(trie.count(word))
    return answers