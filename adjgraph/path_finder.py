"""
Unweighted shortest path on an adjacency matrix.

Breadth-first search from the start vertex. Neighbors are explored in
ascending index order through a FIFO queue, so among equally short paths
the one found first by that traversal is returned. Every edge has the same
cost; this is not a weighted Dijkstra.
"""

from collections import deque
from typing import FrozenSet, List, Optional, Sequence, Tuple

EdgeKey = Tuple[int, int]


def edge_key(a: int, b: int) -> EdgeKey:
    """Order-independent key for the undirected edge {a, b}."""
    return (a, b) if a <= b else (b, a)


def shortest_path(matrix: Sequence[Sequence[int]], start: int, goal: int) -> List[int]:
    """
    Return the vertices of a minimum-hop path from start to goal.

    Returns [start] when start == goal and [] when goal is unreachable.

    Raises:
        IndexError if start or goal is not a vertex of the matrix.
    """
    n = len(matrix)
    for v in (start, goal):
        if not 0 <= v < n:
            raise IndexError(f"Vertex {v} out of range [0, {n})")

    visited = [False] * n
    prev: List[Optional[int]] = [None] * n
    visited[start] = True
    queue = deque([start])

    while queue:
        v = queue.popleft()
        if v == goal:
            break
        for i, cell in enumerate(matrix[v]):
            if cell and not visited[i]:
                visited[i] = True
                prev[i] = v
                queue.append(i)

    if not visited[goal]:
        return []

    path = []
    at: Optional[int] = goal
    while at is not None:
        path.append(at)
        at = prev[at]
    path.reverse()
    return path


def path_edge_keys(path: Sequence[int]) -> FrozenSet[EdgeKey]:
    """Edge keys of each consecutive pair along the path."""
    return frozenset(edge_key(a, b) for a, b in zip(path, path[1:]))
