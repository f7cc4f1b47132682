"""Grid searches, shortest paths and course ordering on graphs."""

from __future__ import annotations

import heapq
from collections import deque
from string import ascii_lowercase
from typing import Iterable, Iterator, MutableSequence, Sequence

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for dr, dc in _STEPS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def _border(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for col in range(cols):
        yield 0, col
        yield rows - 1, col
    for row in range(rows):
        yield row, 0
        yield row, cols - 1


def _flood_from_border(grid: Sequence[Sequence[object]], land: object) -> set[tuple[int, int]]:
    """Return every cell equal to land that is connected to the border."""
    rows, cols = len(grid), len(grid[0])
    seen: set[tuple[int, int]] = set()
    stack = [cell for cell in _border(rows, cols) if grid[cell[0]][cell[1]] == land]
    while stack:
        cell = stack.pop()
        if cell in seen:
            continue
        seen.add(cell)
        for r, c in _neighbours(cell[0], cell[1], rows, cols):
            if (r, c) not in seen and grid[r][c] == land:
                stack.append((r, c))
    return seen


def num_enclaves(grid: Sequence[Sequence[int]]) -> int:
    """Count land cells (1) from which the border cannot be reached."""
    if not grid or not grid[0]:
        return 0
    reachable = _flood_from_border(grid, 1)
    return sum(
        1
        for i, row in enumerate(grid)
        for j, value in enumerate(row)
        if value == 1 and (i, j) not in reachable
    )


def capture_surrounded_regions(board: MutableSequence[MutableSequence[str]]) -> None:
    """Turn every 'O' region not connected to the border into 'X', in place."""
    if not board or not board[0]:
        return
    safe = _flood_from_border(board, "O")
    for i, row in enumerate(board):
        for j, value in enumerate(row):
            if value == "O" and (i, j) not in safe:
                row[j] = "X"


def ladder_length(begin_word: str, end_word: str, word_list: Iterable[str]) -> int:
    """Return the number of words in the shortest one-letter-change chain, or 0."""
    remaining = set(word_list)
    remaining.discard(begin_word)
    pending = deque([(begin_word, 1)])
    while pending:
        word, count = pending.popleft()
        if word == end_word:
            return count
        for i in range(len(word)):
            for ch in ascii_lowercase:
                candidate = word[:i] + ch + word[i + 1:]
                if candidate in remaining:
                    remaining.remove(candidate)
                    pending.append((candidate, count + 1))
    return 0


def minimum_effort_path(heights: Sequence[Sequence[int]]) -> int:
    """Return the least possible largest height step on a path from top-left to bottom-right."""
    rows, cols = len(heights), len(heights[0])
    best = {(0, 0): 0}
    heap = [(0, 0, 0)]
    while heap:
        effort, row, col = heapq.heappop(heap)
        if row == rows - 1 and col == cols - 1:
            return effort
        if effort > best.get((row, col), effort):
            continue
        for r, c in _neighbours(row, col, rows, cols):
            step = max(abs(heights[row][col] - heights[r][c]), effort)
            if step < best.get((r, c), float("inf")):
                best[(r, c)] = step
                heapq.heappush(heap, (step, r, c))
    return 0


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count groups of '1' cells joined horizontally or vertically."""
    if not grid or not grid[0]:
        return 0
    rows, cols = len(grid), len(grid[0])
    seen: set[tuple[int, int]] = set()
    islands = 0
    for i in range(rows):
        for j in range(cols):
            if grid[i][j] != "1" or (i, j) in seen:
                continue
            islands += 1
            seen.add((i, j))
            stack = [(i, j)]
            while stack:
                row, col = stack.pop()
                for r, c in _neighbours(row, col, rows, cols):
                    if grid[r][c] == "1" and (r, c) not in seen:
                        seen.add((r, c))
                        stack.append((r, c))
    return islands


def _topological_order(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    after: list[list[int]] = [[] for _ in range(num_courses)]
    indegree = [0] * num_courses
    for course, required in prerequisites:
        after[required].append(course)
        indegree[course] += 1
    pending = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while pending:
        node = pending.popleft()
        order.append(node)
        for nxt in after[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                pending.append(nxt)
    return order


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Return whether all courses can be taken given [course, prerequisite] pairs."""
    return len(_topological_order(num_courses, prerequisites)) == num_courses


def find_order(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """Return an order to take all courses, or an empty list if there is a cycle."""
    order = _topological_order(num_courses, prerequisites)
    return order if len(order) == num_courses else []


def count_unguarded(
    m: int, n: int, guards: Sequence[Sequence[int]], walls: Sequence[Sequence[int]]
) -> int:
    """Count cells of an m x n grid that are neither occupied nor seen by a guard."""
    free, seen_cell, blocked = 0, 1, 2
    grid = [[free] * n for _ in range(m)]
    for row, col in [*guards, *walls]:
        grid[row][col] = blocked
    for row, col in guards:
        for dr, dc in _STEPS:
            r, c = row + dr, col + dc
            while 0 <= r < m and 0 <= c < n and grid[r][c] != blocked:
                grid[r][c] = seen_cell
                r += dr
                c += dc
    return sum(row.count(free) for row in grid)


def minimum_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Return the fewest obstacles (1 cells) to remove to walk from top-left to bottom-right."""
    rows, cols = len(grid), len(grid[0])
    dist = {(0, 0): 0}
    heap = [(0, 0, 0)]
    while heap:
        d, row, col = heapq.heappop(heap)
        if row == rows - 1 and col == cols - 1:
            return d
        if d > dist.get((row, col), d):
            continue
        for r, c in _neighbours(row, col, rows, cols):
            nd = d + grid[r][c]
            if nd < dist.get((r, c), float("inf")):
                dist[(r, c)] = nd
                heapq.heappush(heap, (nd, r, c))
    return -1


def get_maximum_gold(grid: Sequence[Sequence[int]]) -> int:
    """Return the most gold collected on a path that never revisits a cell or steps on 0."""
    if grid and all(value for row in grid for value in row):
        return sum(sum(row) for row in grid)
    cells = [list(row) for row in grid]
    rows = len(cells)
    cols = len(cells[0]) if rows else 0
    best = 0

    def collect(row: int, col: int, total: int) -> None:
        nonlocal best
        gold = cells[row][col]
        cells[row][col] = 0
        total += gold
        best = max(best, total)
        for r, c in _neighbours(row, col, rows, cols):
            if cells[r][c]:
                collect(r, c, total)
        cells[row][col] = gold

    for i in range(rows):
        for j in range(cols):
            if cells[i][j]:
                collect(i, j, 0)
    return best


def rotate_the_box(box: Sequence[Sequence[str]]) -> list[list[str]]:
    """Rotate the box clockwise and let stones '#' fall onto obstacles '*' or the floor."""
    rows, cols = len(box), len(box[0])
    rotated = [["."] * rows for _ in range(cols)]
    for i, row in enumerate(box):
        bottom = cols - 1
        for j in range(cols - 1, -1, -1):
            if row[j] == "#":
                rotated[bottom][rows - 1 - i] = "#"
                bottom -= 1
            elif row[j] == "*":
                rotated[j][rows - 1 - i] = "*"
                bottom = j - 1
    return rotated