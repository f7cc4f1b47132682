"""Array problems: prefix sums, sliding windows, two pointers and greedy fills."""

from __future__ import annotations

import math
from bisect import bisect_right
from collections import Counter
from typing import Iterator, Optional, Sequence

from algokit.nodes import ListNode


def can_arrange(arr: Sequence[int], k: int) -> bool:
    """Return whether arr splits into pairs whose sums are all divisible by k."""
    remainders = Counter(num % k for num in arr)
    if remainders[0] % 2:
        return False
    return all(remainders[r] == remainders[k - r] for r in range(1, k // 2 + 1))


def find_length_of_shortest_subarray(arr: Sequence[int]) -> int:
    """Return the length of the shortest subarray whose removal leaves arr non-decreasing."""
    n = len(arr)
    if n <= 1:
        return 0
    left = 0
    while left + 1 < n and arr[left] <= arr[left + 1]:
        left += 1
    if left == n - 1:
        return 0
    right = n - 1
    while right > 0 and arr[right - 1] <= arr[right]:
        right -= 1
    result = min(n - left - 1, right)
    i, j = 0, right
    while i <= left and j < n:
        if arr[i] <= arr[j]:
            result = min(result, j - i - 1)
            i += 1
        else:
            j += 1
    return result


def min_subarray(nums: Sequence[int], p: int) -> int:
    """Return the shortest subarray length to remove so the rest sums to a multiple of p.

    Removing the whole array is not allowed; -1 means it cannot be done.
    """
    rem = sum(nums) % p
    if rem == 0:
        return 0
    last_seen = {0: -1}
    prefix = 0
    shortest = len(nums)
    for i, num in enumerate(nums):
        prefix += num
        current = prefix % p
        target = (current - rem) % p
        if target in last_seen:
            shortest = min(shortest, i - last_seen[target])
        last_seen[current] = i
    return -1 if shortest == len(nums) else shortest


def decrypt(code: Sequence[int], k: int) -> list[int]:
    """Replace each value of a circular code by the sum of its next k (or previous -k) values."""
    n = len(code)
    if k == 0:
        return [0] * n
    if k > 0:
        offsets = range(1, k + 1)
    else:
        offsets = range(-1, k - 1, -1)
    return [sum(code[(i + step) % n] for step in offsets) for i in range(n)]


def chalk_replacer(chalk: Sequence[int], k: int) -> int:
    """Return the index of the student who runs out of chalk when k pieces are handed round."""
    k %= sum(chalk)
    for index, need in enumerate(chalk):
        if k < need:
            return index
        k -= need
    return -1


def max_matrix_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Return the largest sum reachable by negating adjacent pairs any number of times."""
    values = [x for row in matrix for x in row]
    if not values:
        return 0
    total = sum(abs(x) for x in values)
    negatives = sum(1 for x in values if x < 0)
    if negatives % 2:
        return total - 2 * min(abs(x) for x in values)
    return total


def missing_rolls(rolls: Sequence[int], mean: int, n: int) -> list[int]:
    """Return n dice values that make the mean of all rolls exactly mean, or [] if impossible."""
    missing = mean * (n + len(rolls)) - sum(rolls)
    if missing < n or missing > 6 * n:
        return []
    result = [1] * n
    missing -= n
    for i in range(n):
        if missing <= 0:
            break
        add = min(5, missing)
        result[i] += add
        missing -= add
    return result


def minimized_maximum(n: int, quantities: Sequence[int]) -> int:
    """Return the smallest possible largest share when distributing quantities to n stores."""

    def too_many(x: int) -> bool:
        return sum(-(-q // x) for q in quantities) > n

    low, high = 1, max(max(quantities, default=1), 1)
    while low < high:
        mid = (low + high) // 2
        if too_many(mid):
            low = mid + 1
        else:
            high = mid
    return low


def maximum_beauty(items: Sequence[Sequence[int]], queries: Sequence[int]) -> list[int]:
    """For each price limit, return the best beauty among items costing at most that much.

    Negative limits have no answer and are left out of the result.
    """
    prices = [0]
    beauties = [0]
    for price, beauty in sorted(map(tuple, items)):
        if beauty > beauties[-1]:
            prices.append(price)
            beauties.append(beauty)
    answers = []
    for limit in queries:
        pos = bisect_right(prices, limit) - 1
        if pos >= 0:
            answers.append(beauties[pos])
    return answers


def _spiral_cells(m: int, n: int) -> Iterator[tuple[int, int]]:
    top, bottom, left, right = 0, m - 1, 0, n - 1
    while top <= bottom and left <= right:
        for col in range(left, right + 1):
            yield top, col
        top += 1
        for row in range(top, bottom + 1):
            yield row, right
        right -= 1
        for col in range(right, left - 1, -1):
            yield bottom, col
        bottom -= 1
        for row in range(bottom, top - 1, -1):
            yield row, left
        left += 1


def _list_items(head: Optional[ListNode]) -> Iterator[int]:
    while head is not None:
        yield head.val
        head = head.next


def spiral_matrix(m: int, n: int, head: Optional[ListNode]) -> list[list[int]]:
    """Fill an m x n matrix clockwise from the top-left with list values; the rest is -1."""
    matrix = [[-1] * n for _ in range(m)]
    for value, (row, col) in zip(_list_items(head), _spiral_cells(m, n)):
        matrix[row][col] = value
    return matrix


def longest_subarray(nums: Sequence[int]) -> int:
    """Return the length of the longest run of the array's maximum value."""
    if not nums:
        raise ValueError("at least one number is required")
    peak = max(nums)
    longest = current = 0
    for num in nums:
        current = current + 1 if num == peak else 0
        longest = max(longest, current)
    return longest


def maximum_subarray_sum(nums: Sequence[int], k: int) -> int:
    """Return the largest sum of a length-k window with all values distinct, or 0."""
    window: set[int] = set()
    current = best = 0
    begin = 0
    for value in nums:
        if value not in window:
            current += value
            window.add(value)
            if len(window) == k:
                best = max(best, current)
                current -= nums[begin]
                window.remove(nums[begin])
                begin += 1
        else:
            while nums[begin] != value:
                current -= nums[begin]
                window.remove(nums[begin])
                begin += 1
            begin += 1
    return best


def divide_players(skill: Sequence[int]) -> int:
    """Pair players into teams of equal total skill; return the sum of products, or -1."""
    teams = len(skill) // 2
    if teams == 0:
        raise ValueError("at least two players are required")
    total = sum(skill)
    if total % teams:
        return -1
    target = total // teams
    ordered = sorted(skill)
    chemistry = 0
    for low, high in zip(ordered[:teams], reversed(ordered[len(ordered) - teams:])):
        if low + high != target:
            return -1
        chemistry += low * high
    return chemistry


def longest_square_streak(nums: Sequence[int]) -> int:
    """Return the longest chain where each value is the square of the previous, or -1."""
    streak: dict[int, int] = {}
    best = -1
    for num in sorted(nums):
        root = math.isqrt(num) if num >= 0 else -1
        if root >= 0 and root * root == num and root in streak:
            streak[num] = streak[root] + 1
            best = max(best, streak[num])
        else:
            streak[num] = 1
    return best