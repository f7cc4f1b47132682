"""Dynamic-programming problems on strings, sequences and grids."""

from __future__ import annotations

from bisect import bisect_left
from itertools import combinations
from typing import Sequence


def shortest_common_supersequence(s1: str, s2: str) -> str:
    """Return a shortest string that has both s1 and s2 as subsequences."""
    n, m = len(s1), len(s2)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i, a in enumerate(s1, start=1):
        for j, b in enumerate(s2, start=1):
            if a == b:
                dp[i][j] = dp[i - 1][j - 1] + 1
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])

    pieces: list[str] = []
    i, j = n, m
    while i > 0 and j > 0:
        if s1[i - 1] == s2[j - 1]:
            pieces.append(s1[i - 1])
            i -= 1
            j -= 1
        elif dp[i - 1][j] > dp[i][j - 1]:
            pieces.append(s1[i - 1])
            i -= 1
        else:
            pieces.append(s2[j - 1])
            j -= 1
    pieces.extend(reversed(s1[:i]))
    pieces.extend(reversed(s2[:j]))
    return "".join(reversed(pieces))


def longest_common_subsequence(s1: str, s2: str) -> int:
    """Return the length of the longest common subsequence of two strings."""
    prev = [0] * (len(s2) + 1)
    for a in s1:
        cur = [0] * (len(s2) + 1)
        for j, b in enumerate(s2, start=1):
            cur[j] = prev[j - 1] + 1 if a == b else max(prev[j], cur[j - 1])
        prev = cur
    return prev[-1]


def num_distinct(s: str, t: str) -> int:
    """Return how many distinct subsequences of s equal t."""
    ways = [1] + [0] * len(t)
    for ch in s:
        for j in range(len(t), 0, -1):
            if t[j - 1] == ch:
                ways[j] += ways[j - 1]
    return ways[-1]


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Return the minimum top-to-bottom path sum, moving to adjacent indices below."""
    if not triangle:
        raise ValueError("triangle must have at least one row")
    below = list(triangle[-1])
    for row in reversed(triangle[:-1]):
        below = [value + min(below[j], below[j + 1]) for j, value in enumerate(row)]
    return below[0]


def count_squares(matrix: Sequence[Sequence[int]]) -> int:
    """Return the number of square submatrices made entirely of ones."""
    if not matrix or not matrix[0]:
        return 0
    sizes = [list(matrix[0])]
    total = sum(matrix[0])
    for i in range(1, len(matrix)):
        row = matrix[i]
        current = [row[0]]
        for j in range(1, len(row)):
            if row[j] == 1:
                current.append(1 + min(current[j - 1], sizes[i - 1][j], sizes[i - 1][j - 1]))
            else:
                current.append(row[j])
        sizes.append(current)
        total += sum(current)
    return total


def longest_palindrome_subsequence(s: str) -> int:
    """Return the length of the longest palindromic subsequence of s."""
    return longest_common_subsequence(s[::-1], s)


def min_insertions(s: str) -> int:
    """Return the fewest characters to insert to make s a palindrome."""
    return len(s) - longest_palindrome_subsequence(s)


def rob(nums: Sequence[int]) -> int:
    """Return the largest sum of values with no two adjacent ones taken."""
    if not nums:
        raise ValueError("at least one house is required")
    prev, prev2 = nums[0], 0
    for i in range(1, len(nums)):
        pick = nums[i] + (prev2 if i >= 2 else 0)
        prev2, prev = prev, max(pick, prev)
    return prev


def rob_circular(nums: Sequence[int]) -> int:
    """Like rob, but the first and last values count as adjacent."""
    if not nums:
        raise ValueError("at least one house is required")
    if len(nums) == 1:
        return nums[0]
    return max(rob(nums[1:]), rob(nums[:-1]))


def minimum_mountain_removals(nums: Sequence[int]) -> int:
    """Return the fewest removals leaving a strictly rising then strictly falling array."""
    n = len(nums)
    rising = [1] * n
    for i in range(n):
        for j in range(i):
            if nums[i] > nums[j]:
                rising[i] = max(rising[i], rising[j] + 1)
    falling = [1] * n
    for i in range(n - 1, -1, -1):
        for j in range(n - 1, i, -1):
            if nums[i] > nums[j]:
                falling[i] = max(falling[i], falling[j] + 1)
    longest = max(
        (rising[i] + falling[i] - 1 for i in range(1, n - 1) if rising[i] > 1 and falling[i] > 1),
        default=0,
    )
    return n - longest


def _half_toward_zero(value: int) -> int:
    half = abs(value) // 2
    return half if value >= 0 else -half


def minimum_difference(nums: Sequence[int]) -> int:
    """Split an even-length array into two equal halves minimising the difference of sums."""
    total = sum(nums)
    half = len(nums) // 2
    left_part, right_part = nums[:half], nums[half:2 * half]
    left: list[list[int]] = [[] for _ in range(half + 1)]
    right: list[list[int]] = [[] for _ in range(half + 1)]
    for size in range(half + 1):
        for chosen in combinations(range(half), size):
            left[size].append(sum(left_part[i] for i in chosen))
            right[size].append(sum(right_part[i] for i in chosen))
    for sums in right:
        sums.sort()

    best = min(abs(total - 2 * left[half][0]), abs(total - 2 * right[half][0]))
    for size in range(1, half):
        candidates = right[half - size]
        for a in left[size]:
            wanted = _half_toward_zero(total - 2 * a)
            pos = bisect_left(candidates, wanted)
            if pos < len(candidates):
                best = min(best, abs(total - 2 * (a + candidates[pos])))
    return best