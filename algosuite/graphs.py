"""Graph searches: topological orderings, shortest paths and tree distances."""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

MOD = 1_000_000_007


def _kahn_order(count: int, arcs: Iterable[Tuple[int, int]]) -> Iterator[int]:
    """Yield nodes in Kahn's order; nodes on or behind a cycle never appear."""
    successors: List[List[int]] = [[] for _ in range(count)]
    indegree = [0] * count
    for source, target in arcs:
        successors[source].append(target)
        indegree[target] += 1
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    while queue:
        node = queue.popleft()
        yield node
        for target in successors[node]:
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)


def _adjacency(edges: Sequence[Sequence[int]], count: int) -> List[List[int]]:
    """Build an undirected adjacency list for ``count`` nodes."""
    neighbours: List[List[int]] = [[] for _ in range(count)]
    for a, b in edges:
        neighbours[a].append(b)
        neighbours[b].append(a)
    return neighbours


def can_finish(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """True when the prerequisite graph has no cycle."""
    arcs = ((a, b) for a, b in prerequisites)
    return sum(1 for _ in _kahn_order(num_courses, arcs)) == num_courses


def find_order(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> List[int]:
    """Return an order to take every course in, or an empty list if none exists."""
    arcs = ((prerequisite, course) for course, prerequisite in prerequisites)
    order = list(_kahn_order(num_courses, arcs))
    return order if len(order) == num_courses else []


def find_min_height_trees(n: int, edges: Sequence[Sequence[int]]) -> List[int]:
    """Return the roots that give the tree its smallest height."""
    if n == 1:
        return [0]
    neighbours = _adjacency(edges, n)
    degree = [len(adjacent) for adjacent in neighbours]
    leaves = [node for node, d in enumerate(degree) if d == 1]
    remaining = n
    while remaining > 2:
        remaining -= len(leaves)
        next_leaves = []
        for leaf in leaves:
            for neighbour in neighbours[leaf]:
                degree[neighbour] -= 1
                if degree[neighbour] == 1:
                    next_leaves.append(neighbour)
        leaves = next_leaves
    return leaves


def eventual_safe_nodes(graph: Sequence[Sequence[int]]) -> List[int]:
    """Return, sorted, the nodes from which every path ends at a terminal node."""
    reversed_arcs = (
        (target, source) for source, targets in enumerate(graph) for target in targets
    )
    return sorted(_kahn_order(len(graph), reversed_arcs))


def _square_position(square: int, n: int) -> Tuple[int, int]:
    """Map a boustrophedon square number to its (row, column) on the board."""
    row = (n - 1) - (square - 1) // n
    col = (square - 1) % n
    if n % 2 == row % 2:
        col = (n - 1) - col
    return row, col


def snakes_and_ladders(board: Sequence[Sequence[int]]) -> int:
    """Fewest die rolls from square 1 to the last square, or -1 if unreachable."""
    n = len(board)
    last = n * n
    visited = {1}
    frontier = [1]
    moves = 0
    while frontier:
        next_frontier = []
        for square in frontier:
            if square == last:
                return moves
            for target in range(square + 1, min(square + 6, last) + 1):
                if target in visited:
                    continue
                visited.add(target)
                row, col = _square_position(target, n)
                destination = board[row][col]
                next_frontier.append(target if destination == -1 else destination)
        frontier = next_frontier
        moves += 1
    return -1


def check_if_prerequisite(
    n: int,
    prerequisites: Sequence[Sequence[int]],
    queries: Sequence[Sequence[int]],
) -> List[bool]:
    """For each query ``[u, v]``, tell whether u is a direct or indirect prerequisite of v."""
    if not prerequisites:
        return [False] * len(queries)
    successors: List[List[int]] = [[] for _ in range(n)]
    for before, after in prerequisites:
        successors[before].append(after)

    reachable = []
    for start in range(n):
        seen = {start}
        queue = deque([start])
        while queue:
            for neighbour in successors[queue.popleft()]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    queue.append(neighbour)
        reachable.append(seen)
    return [v in reachable[u] for u, v in queries]


def largest_path_value(colors: str, edges: Sequence[Sequence[int]]) -> int:
    """Largest count of one colour along any path, or -1 if the graph has a cycle."""
    n = len(colors)
    colour = [ord(c) - ord("a") for c in colors]
    successors: List[List[int]] = [[] for _ in range(n)]
    indegree = [0] * n
    for source, target in edges:
        successors[source].append(target)
        indegree[target] += 1

    best_counts = [[0] * 26 for _ in range(n)]
    for node, c in enumerate(colour):
        best_counts[node][c] = 1

    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    processed = 0
    best = 1
    while queue:
        node = queue.popleft()
        processed += 1
        for target in successors[node]:
            row = best_counts[target]
            for c, count in enumerate(best_counts[node]):
                candidate = count + (1 if c == colour[target] else 0)
                if candidate > row[c]:
                    row[c] = candidate
            best = max(best, max(row))
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)
    return best if processed == n else -1


def count_paths(n: int, roads: Sequence[Sequence[int]]) -> int:
    """Number of shortest paths from node 0 to node n - 1, modulo 10**9 + 7."""
    neighbours: List[List[Tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, weight in roads:
        neighbours[u].append((v, weight))
        neighbours[v].append((u, weight))

    distance = [math.inf] * n
    ways = [0] * n
    distance[0] = 0
    ways[0] = 1
    heap = [(0, 0)]
    while heap:
        dist, node = heapq.heappop(heap)
        if dist > distance[node]:
            continue
        for neighbour, weight in neighbours[node]:
            candidate = dist + weight
            if candidate < distance[neighbour]:
                distance[neighbour] = candidate
                ways[neighbour] = ways[node] % MOD
                heapq.heappush(heap, (candidate, neighbour))
            elif candidate == distance[neighbour]:
                ways[neighbour] = (ways[neighbour] + ways[node]) % MOD
    return ways[n - 1]


def _walk_distances(start: int, edges: Sequence[int]) -> Dict[int, int]:
    """Distances along the single outgoing edges from ``start`` until a repeat or a dead end."""
    distances: Dict[int, int] = {}
    step = 0
    while start != -1 and start not in distances:
        distances[start] = step
        step += 1
        start = edges[start]
    return distances


def closest_meeting_node(edges: Sequence[int], node1: int, node2: int) -> int:
    """Node reachable from both starts minimising the larger distance; ties pick the smaller index."""
    first = _walk_distances(node1, edges)
    second = _walk_distances(node2, edges)
    common = first.keys() & second.keys()
    return min(common, key=lambda node: (max(first[node], second[node]), node), default=-1)


def _count_within(neighbours: List[List[int]], start: int, limit: int) -> int:
    """Count nodes at distance at most ``limit`` from ``start``."""
    if limit < 0:
        return 0
    seen = {start}
    frontier = [start]
    count = 0
    depth = 0
    while frontier and depth <= limit:
        count += len(frontier)
        next_frontier = []
        for node in frontier:
            for neighbour in neighbours[node]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    next_frontier.append(neighbour)
        frontier = next_frontier
        depth += 1
    return count


def max_target_nodes(
    edges1: Sequence[Sequence[int]], edges2: Sequence[Sequence[int]], k: int
) -> List[int]:
    """For each node of the first tree, the most nodes within k edges after linking one edge to the second tree."""
    n, m = len(edges1) + 1, len(edges2) + 1
    first = _adjacency(edges1, n)
    second = _adjacency(edges2, m)
    best_second = max(_count_within(second, node, k - 1) for node in range(m))
    return [_count_within(first, node, k) + best_second for node in range(n)]


def _even_depths(neighbours: List[List[int]]) -> List[bool]:
    """Mark each node with whether its distance from node 0 is even."""
    is_even = [False] * len(neighbours)
    is_even[0] = True
    seen = {0}
    queue = deque([0])
    while queue:
        node = queue.popleft()
        for neighbour in neighbours[node]:
            if neighbour not in seen:
                seen.add(neighbour)
                is_even[neighbour] = not is_even[node]
                queue.append(neighbour)
    return is_even


def max_target_nodes_parity(
    edges1: Sequence[Sequence[int]], edges2: Sequence[Sequence[int]]
) -> List[int]:
    """For each node of the first tree, the most nodes at even distance after linking one edge to the second tree."""
    n, m = len(edges1) + 1, len(edges2) + 1
    first_even = _even_depths(_adjacency(edges1, n))
    even_second = sum(_even_depths(_adjacency(edges2, m)))
    best_second = max(even_second, m - even_second)
    even_first = sum(first_even)
    return [
        (even_first if is_even else n - even_first) + best_second
        for is_even in first_even
    ]