"""Bit-manipulation problems and a binary trie for maximum-XOR lookups."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from itertools import accumulate
from operator import xor
from typing import Iterable, Optional, Sequence

_BITS = 32


class _TrieNode:
    __slots__ = ("children",)

    def __init__(self) -> None:
        self.children: list[Optional[_TrieNode]] = [None, None]


class XorTrie:
    """A binary trie of 32-bit numbers answering maximum-XOR queries."""

    def __init__(self) -> None:
        self._root = _TrieNode()
        self._size = 0

    def insert(self, num: int) -> None:
        node = self._root
        for i in range(_BITS - 1, -1, -1):
            bit = (num >> i) & 1
            child = node.children[bit]
            if child is None:
                child = node.children[bit] = _TrieNode()
            node = child
        self._size += 1

    def find_max(self, num: int) -> int:
        """Return the largest num ^ x over stored x; raise ValueError if empty."""
        if not self._size:
            raise ValueError("the trie is empty")
        node = self._root
        best = 0
        for i in range(_BITS - 1, -1, -1):
            bit = (num >> i) & 1
            opposite = node.children[1 - bit]
            if opposite is not None:
                best |= 1 << i
                node = opposite
            else:
                node = node.children[bit]
        return best


def xor_queries(arr: Sequence[int], queries: Iterable[Sequence[int]]) -> list[int]:
    """Return the XOR of arr[left..right] for each inclusive [left, right] query."""
    prefix = list(accumulate(arr, xor))
    return [prefix[right] ^ (prefix[left - 1] if left else 0) for left, right in queries]


def find_kth_bit(n: int, k: int) -> str:
    """Return the k-th character (1-based) of S_n, where S_1 = "0" and
    S_i = S_(i-1) + "1" + reverse(invert(S_(i-1)))."""
    inverted = False
    while n > 1:
        length = (1 << n) - 1
        middle = length // 2 + 1
        if k == middle:
            return "0" if inverted else "1"
        if k > middle:
            k = length - k + 1
            inverted = not inverted
        n -= 1
    return "1" if inverted else "0"


def maximize_xor(nums: Iterable[int], queries: Sequence[Sequence[int]]) -> list[int]:
    """For each [x, m], return the largest x ^ v over v <= m in nums, or -1 if none."""
    values = sorted(nums)
    order = sorted(range(len(queries)), key=lambda i: (queries[i][1], queries[i][0], i))
    answers = [0] * len(queries)
    trie = XorTrie()
    taken = 0
    for index in order:
        x, limit = queries[index]
        while taken < len(values) and values[taken] <= limit:
            trie.insert(values[taken])
            taken += 1
        answers[index] = trie.find_max(x) if taken else -1
    return answers


def get_maximum_xor(nums: Sequence[int], maximum_bit: int) -> list[int]:
    """For each prefix, longest first, return the k below 2**maximum_bit maximising its XOR."""
    mask = (1 << maximum_bit) - 1
    current = reduce(xor, nums, 0)
    answers = []
    for num in reversed(nums):
        answers.append(current ^ mask)
        current ^= num
    return answers


def wonderful_substrings(word: str) -> int:
    """Count substrings of letters a-j in which at most one letter occurs an odd number of times."""
    seen = [0] * 1024
    seen[0] = 1
    total = 0
    state = 0
    for ch in word:
        state ^= 1 << (ord(ch) - ord("a"))
        total += seen[state]
        total += sum(seen[state ^ (1 << i)] for i in range(10))
        seen[state] += 1
    return total


def min_bit_flips(start: int, goal: int) -> int:
    """Return how many bits differ between start and goal."""
    diff = start ^ goal
    return bin(diff).count("1") if diff > 0 else 0


def largest_combination(candidates: Sequence[int]) -> int:
    """Return the size of the largest subset whose bitwise AND is non-zero."""
    return max(
        (sum(1 for c in candidates if c & (1 << i)) for i in range(_BITS)),
        default=0,
    )


def max_equal_rows_after_flips(mat: Iterable[Sequence[int]]) -> int:
    """Return the most rows that can be made all-equal by flipping chosen columns."""
    patterns = Counter(
        tuple(bit ^ row[0] for bit in row) for row in mat
    )
    return max(patterns.values(), default=0)