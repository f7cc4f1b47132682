"""Problems solved with priority queues and sweep events."""

from __future__ import annotations

import heapq
from itertools import chain
from typing import Iterable, Sequence


def find_kth_largest(nums: Iterable[int], k: int) -> int:
    """Return the k-th largest value, keeping a min-heap of size k."""
    if k < 1:
        raise ValueError("k must be at least 1")
    heap: list[int] = []
    for num in nums:
        heapq.heappush(heap, num)
        if len(heap) > k:
            heapq.heappop(heap)
    if not heap:
        raise ValueError("no values given")
    return heap[0]


def smallest_chair(times: Sequence[Sequence[int]], target_friend: int) -> int:
    """Return the chair number taken by the target friend.

    Each friend arrives and takes the lowest free chair; chairs free up at leaving time.
    """
    events = sorted((arrive, leave, index) for index, (arrive, leave) in enumerate(times))
    free = list(range(len(times)))
    occupied: list[tuple[int, int]] = []
    for arrive, leave, index in events:
        while occupied and occupied[0][0] <= arrive:
            heapq.heappush(free, heapq.heappop(occupied)[1])
        chair = heapq.heappop(free)
        if index == target_friend:
            return chair
        heapq.heappush(occupied, (leave, chair))
    raise ValueError(f"no friend with index {target_friend}")


def max_k_elements(nums: Iterable[int], k: int) -> int:
    """Take the largest value k times, scoring it and replacing it by its third rounded up."""
    heap = [-num for num in nums]
    heapq.heapify(heap)
    score = 0
    for _ in range(k):
        largest = -heapq.heappop(heap)
        score += largest
        heapq.heappush(heap, -(-largest // 3))
    return score


def min_groups(intervals: Iterable[Sequence[int]]) -> int:
    """Return the fewest groups so that no two inclusive intervals in a group overlap."""
    events = sorted(
        chain.from_iterable(((start, 1), (end + 1, -1)) for start, end in intervals)
    )
    best = active = 0
    for _, delta in events:
        active += delta
        best = max(best, active)
    return best