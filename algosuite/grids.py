"""Path counting, path costs and shortest-time searches on grids."""

from __future__ import annotations

import heapq
import math
from itertools import accumulate, chain
from typing import List, Sequence, Tuple


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths from the top-left to the bottom-right of m x n."""
    row = [1] * n
    for _ in range(1, m):
        row = list(accumulate(row))
    return row[-1]


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Count right/down paths that avoid cells marked 1."""
    first, *rest = grid
    row = []
    passable = True
    for cell in first:
        if cell == 1:
            passable = False
        row.append(1 if passable else 0)

    for line in rest:
        if line[0] == 1:
            row[0] = 0
        for j in range(1, len(row)):
            row[j] = 0 if line[j] else row[j] + row[j - 1]
    return row[-1]


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum along a right/down path across the grid."""
    first, *rest = grid
    row = list(accumulate(first))
    for line in rest:
        row[0] += line[0]
        for j in range(1, len(row)):
            row[j] = line[j] + min(row[j], row[j - 1])
    return row[-1]


def set_zeroes(matrix: List[List[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            for j in zero_cols:
                row[j] = 0


def max_points(points: Sequence[Sequence[int]]) -> int:
    """Pick one cell per row, losing the column distance between rows; return the best total."""
    previous = list(points[0])
    for row in points[1:]:
        left = list(accumulate((p + i for i, p in enumerate(previous)), max))
        right = list(
            accumulate(
                (p - i for i, p in reversed(list(enumerate(previous)))), max
            )
        )[::-1]
        previous = [
            max(best_left - i, best_right + i) + value
            for i, (best_left, best_right, value) in enumerate(zip(left, right, row))
        ]
    return max(previous)


def find_missing_and_repeated_values(grid: Sequence[Sequence[int]]) -> List[int]:
    """Return ``[repeated, missing]`` for an n x n grid meant to hold 1..n*n."""
    values = list(chain.from_iterable(grid))
    total = len(grid) * len(grid)
    # repeated - missing
    difference = sum(values) - total * (total + 1) // 2
    # repeated**2 - missing**2
    square_difference = sum(v * v for v in values) - total * (total + 1) * (
        2 * total + 1
    ) // 6
    if difference == 0:
        raise ValueError("grid has no repeated value")
    both = square_difference // difference
    return [(both + difference) // 2, (both - difference) // 2]


_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


def _earliest_arrival(grid: Sequence[Sequence[int]], move_costs: Tuple[int, ...]) -> int:
    rows, cols = len(grid), len(grid[0])
    best = [[math.inf] * cols for _ in range(rows)]
    best[0][0] = max(0, grid[0][0])
    heap = [(0, 0, 0, 0)]
    while heap:
        time, row, col, step = heapq.heappop(heap)
        if row == rows - 1 and col == cols - 1:
            return time
        cost = move_costs[step % len(move_costs)]
        for dr, dc in _DIRECTIONS:
            nr, nc = row + dr, col + dc
            if not (0 <= nr < rows and 0 <= nc < cols):
                continue
            arrival = max(grid[nr][nc], time) + cost
            if arrival < best[nr][nc]:
                best[nr][nc] = arrival
                heapq.heappush(heap, (arrival, nr, nc, step + 1))
    return -1


def min_time_to_reach(grid: Sequence[Sequence[int]]) -> int:
    """Earliest time to reach the last room when each move takes one second."""
    return _earliest_arrival(grid, (1,))


def min_time_to_reach_alternating(grid: Sequence[Sequence[int]]) -> int:
    """Earliest time to reach the last room when moves alternate one and two seconds."""
    return _earliest_arrival(grid, (1, 2))