"""String problems: parsing, palindromes, subsequences and sentence checks."""

from __future__ import annotations

from collections import Counter
from functools import cmp_to_key, lru_cache
from itertools import chain, groupby, islice
from typing import Iterable, Sequence

_VOWEL_BITS = {"a": 1, "e": 2, "i": 4, "o": 8, "u": 16}


def parse_bool_expr(expression: str) -> bool:
    """Evaluate an expression of t, f, !(e), &(e,...) and |(e,...)."""
    pos = 0
    size = len(expression)

    def parse() -> bool:
        nonlocal pos
        if pos >= size:
            raise ValueError("unexpected end of expression")
        ch = expression[pos]
        if ch == "t":
            pos += 1
            return True
        if ch == "f":
            pos += 1
            return False
        if ch == "!":
            pos += 2
            value = not parse()
            pos += 1
            return value
        if ch in "&|":
            pos += 2
            values = []
            while True:
                if pos >= size:
                    raise ValueError("unterminated expression")
                if expression[pos] == ")":
                    break
                values.append(parse())
                if pos < size and expression[pos] == ",":
                    pos += 1
            pos += 1
            return all(values) if ch == "&" else any(values)
        raise ValueError(f"unexpected character {ch!r} at position {pos}")

    return parse()


def remove_subfolders(folder: Iterable[str]) -> list[str]:
    """Return the folders that are not inside another listed folder, sorted."""
    result: list[str] = []
    for path in sorted(folder):
        if not result or not path.startswith(result[-1] + "/"):
            result.append(path)
    return result


def find_the_longest_substring(s: str) -> int:
    """Return the length of the longest substring with each vowel an even number of times."""
    first_seen = {0: -1}
    mask = 0
    best = 0
    for i, ch in enumerate(s):
        mask ^= _VOWEL_BITS.get(ch, 0)
        if mask in first_seen:
            best = max(best, i - first_seen[mask])
        else:
            first_seen[mask] = i
    return best


def max_unique_split(s: str) -> int:
    """Return the most pieces s can be split into with all pieces distinct."""
    used: set[str] = set()

    def search(start: int) -> int:
        if start == len(s):
            return 0
        best = 0
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece not in used:
                used.add(piece)
                best = max(best, 1 + search(end))
                used.remove(piece)
        return best

    return search(0)


def _concat_order(a: str, b: str) -> int:
    if a + b > b + a:
        return -1
    if a + b < b + a:
        return 1
    return 0


def largest_number(nums: Iterable[int]) -> str:
    """Arrange non-negative integers to form the largest number, as a string."""
    pieces = sorted((str(num) for num in nums), key=cmp_to_key(_concat_order))
    if not pieces:
        raise ValueError("at least one number is required")
    if pieces[0] == "0":
        return "0"
    return "".join(pieces)


def are_sentences_similar(sentence1: str, sentence2: str) -> bool:
    """Return whether inserting one run of words into the shorter sentence gives the longer."""
    short, long_ = sentence1.split(), sentence2.split()
    if len(short) > len(long_):
        short, long_ = long_, short
    prefix = 0
    while prefix < len(short) and short[prefix] == long_[prefix]:
        prefix += 1
    suffix = 0
    while suffix < len(short) and short[-1 - suffix] == long_[-1 - suffix]:
        suffix += 1
    return prefix + suffix >= len(short)


def get_lucky(s: str, k: int) -> int:
    """Replace letters by alphabet positions, then sum the digits k times."""
    digits = "".join(str(ord(ch) - ord("a") + 1) for ch in s)
    result = 0
    for _ in range(k):
        result = sum(int(d) for d in digits)
        digits = str(result)
    return result


def make_fancy_string(s: str) -> str:
    """Drop characters so that no three consecutive characters are equal."""
    return "".join(
        "".join(islice(run, 2)) for _, run in groupby(s)
    )


def min_swaps(s: str) -> int:
    """Return the fewest swaps that balance a string of equally many '[' and ']'."""
    balance = 0
    worst = 0
    for ch in s:
        balance += 1 if ch == "[" else -1
        worst = max(worst, -balance)
    return (worst + 1) // 2


def shortest_palindrome(s: str) -> str:
    """Return the shortest palindrome formed by adding characters in front of s."""
    combined = s + "#" + s[::-1]
    lps = [0] * len(combined)
    for i in range(1, len(combined)):
        j = lps[i - 1]
        while j > 0 and combined[i] != combined[j]:
            j = lps[j - 1]
        if combined[i] == combined[j]:
            j += 1
        lps[i] = j
    palindrome_length = lps[-1] if lps else 0
    return s[palindrome_length:][::-1] + s


@lru_cache(maxsize=None)
def _ways(expression: str) -> tuple[int, ...]:
    results: list[int] = []
    for i, op in enumerate(expression):
        if op not in "+-*":
            continue
        left = _ways(expression[:i])
        right = _ways(expression[i + 1:])
        for a in left:
            for b in right:
                if op == "+":
                    results.append(a + b)
                elif op == "-":
                    results.append(a - b)
                else:
                    results.append(a * b)
    if not results:
        results.append(int(expression))
    return tuple(results)


def diff_ways_to_compute(expression: str) -> list[int]:
    """Return the value of every way of parenthesising an expression of + - *."""
    return list(_ways(expression))


def is_circular_sentence(sentence: str) -> bool:
    """Return whether each word ends with the next word's first letter, cyclically."""
    if not sentence:
        raise ValueError("sentence must not be empty")
    first = prev = sentence[0]
    for ch, following in zip(sentence[1:], chain(sentence[2:], [None])):
        if ch == " ":
            if following is not None and prev != following:
                return False
        else:
            prev = ch
    return prev == first


def take_characters(s: str, k: int) -> int:
    """Return the fewest characters taken from both ends to get k of each of a, b, c, or -1."""
    counts = Counter(s)

    def short() -> bool:
        return min(counts[c] for c in "abc") < k

    if short():
        return -1
    best = len(s)
    left = 0
    for right, ch in enumerate(s):
        counts[ch] -= 1
        while short():
            counts[s[left]] += 1
            left += 1
        best = min(best, len(s) - (right - left + 1))
    return best


def count_consistent_strings(allowed: str, words: Sequence[str]) -> int:
    """Count the words made only of characters in allowed."""
    allowed_set = set(allowed)
    return sum(1 for word in words if set(word) <= allowed_set)