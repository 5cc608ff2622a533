"""Binary trie answering maximum-XOR queries over a multiset of integers."""

__all__ = ["XorTrie"]


class XorTrie:
    """Multiset of ``bits``-bit non-negative integers with maximum-XOR lookup."""

    def __init__(self, bits: int = 30) -> None:
        if bits < 1:
            raise ValueError("bits must be at least 1")
        self.bits = bits
        self._children: list[list[int]] = [[0, 0]]
        self._counts: list[int] = [0]

    def _check(self, value: int) -> None:
        if not 0 <= value < (1 << self.bits):
            raise ValueError(f"value {value} does not fit in {self.bits} bits")

    def _bits_of(self, value: int):
        return ((value >> shift) & 1 for shift in reversed(range(self.bits)))

    def insert(self, value: int) -> None:
        """Add one occurrence of ``value``."""
        self._check(value)
        pos = 0
        self._counts[0] += 1
        for bit in self._bits_of(value):
            if not self._children[pos][bit]:
                self._children.append([0, 0])
                self._counts.append(0)
                self._children[pos][bit] = len(self._children) - 1
            pos = self._children[pos][bit]
            self._counts[pos] += 1

    def _path(self, value: int) -> list[int] | None:
        path = [0]
        pos = 0
        for bit in self._bits_of(value):
            pos = self._children[pos][bit]
            if not pos or not self._counts[pos]:
                return None
            path.append(pos)
        return path

    def remove(self, value: int) -> None:
        """Remove one occurrence of ``value``; raise KeyError if absent."""
        self._check(value)
        path = self._path(value)
        if path is None:
            raise KeyError(value)
        for pos in path:
            self._counts[pos] -= 1

    def max_xor(self, value: int) -> int:
        """Largest ``value ^ x`` over the stored values ``x``."""
        self._check(value)
        if not self._counts[0]:
            raise ValueError("max_xor of an empty trie")
        answer = 0
        pos = 0
        for shift, bit in zip(reversed(range(self.bits)), self._bits_of(value)):
            wanted = self._children[pos][1 - bit]
            if wanted and self._counts[wanted]:
                answer |= 1 << shift
                pos = wanted
            else:
                pos = self._children[pos][bit]
        return answer