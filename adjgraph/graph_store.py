"""
Graph store - single source of truth for the adjacency matrix.

The graph is undirected and unweighted. Vertices are the dense indices
0..n-1 and the matrix is kept symmetric with a zero diagonal at all times:
every mutation writes both M[i][j] and M[j][i] before returning.

Usage:
    store = GraphStore(4)
    store.set_edge(0, 1, True)
    store.neighbors(0)      # [1]
    store.edge_count()      # 1
    store.make_complete()
    store.is_complete()     # True
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import networkx as nx

logger = logging.getLogger(__name__)


def _empty_matrix(size: int) -> List[List[int]]:
    return [[0] * size for _ in range(size)]


class GraphStore:
    """
    Owns the adjacency matrix and the vertex count.

    Out-of-range vertex indices raise IndexError. Self-loops and
    non-positive sizes are ignored (the mutators return False).
    """

    def __init__(self, vertex_count: int = 4):
        if vertex_count < 1:
            raise ValueError(f"vertex_count must be >= 1, got {vertex_count}")
        self._n = vertex_count
        self._matrix = _empty_matrix(vertex_count)

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[int]]) -> GraphStore:
        """
        Build a store from a square 0/1 matrix.

        Raises:
            ValueError if the matrix is empty, not square, not symmetric,
            has a non-zero diagonal or holds anything but the ints 0 and 1
            (bools and floats are rejected).
        """
        size = len(matrix)
        if size == 0:
            raise ValueError("matrix must have at least one row")
        for i, row in enumerate(matrix):
            if len(row) != size:
                raise ValueError(f"row {i} has {len(row)} entries, expected {size}")
            for j, cell in enumerate(row):
                if type(cell) is not int or cell not in (0, 1):
                    raise ValueError(f"entry ({i}, {j}) must be 0 or 1, got {cell!r}")
        for i in range(size):
            if matrix[i][i]:
                raise ValueError(f"diagonal entry ({i}, {i}) must be 0")
            for j in range(i + 1, size):
                if matrix[i][j] != matrix[j][i]:
                    raise ValueError(f"matrix is not symmetric at ({i}, {j})")

        store = cls(size)
        store._matrix = [list(row) for row in matrix]
        return store

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def vertex_count(self) -> int:
        return self._n

    @property
    def matrix(self) -> List[List[int]]:
        """Copy of the adjacency matrix."""
        return [list(row) for row in self._matrix]

    def vertices(self) -> List[int]:
        return list(range(self._n))

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"Vertex {v} out of range [0, {self._n})")

    def has_edge(self, i: int, j: int) -> bool:
        self._check_vertex(i)
        self._check_vertex(j)
        return self._matrix[i][j] == 1

    def neighbors(self, i: int) -> List[int]:
        """Vertices adjacent to i, in ascending order."""
        self._check_vertex(i)
        return [j for j, cell in enumerate(self._matrix[i]) if cell]

    def edges(self) -> List[Tuple[int, int]]:
        """Every edge once, as (i, j) with i < j, in ascending order."""
        return [
            (i, j)
            for i in range(self._n)
            for j in range(i + 1, self._n)
            if self._matrix[i][j]
        ]

    def edge_count(self) -> int:
        return sum(sum(row[i + 1:]) for i, row in enumerate(self._matrix))

    def is_complete(self) -> bool:
        return all(
            cell == (0 if i == j else 1)
            for i, row in enumerate(self._matrix)
            for j, cell in enumerate(row)
        )

    def to_networkx(self) -> nx.Graph:
        """Undirected NetworkX view of the graph, isolated vertices included."""
        G = nx.Graph()
        G.add_nodes_from(range(self._n))
        G.add_edges_from(self.edges())
        return G

    # =========================================================================
    # Mutations
    # =========================================================================

    def resize(self, n: int) -> bool:
        """
        Replace the matrix with an n x n all-zero matrix.

        Edges are not carried over. Returns False (and changes nothing)
        when n is not positive.
        """
        if n < 1:
            logger.debug(f"Ignoring resize to {n}")
            return False
        self._n = n
        self._matrix = _empty_matrix(n)
        logger.info(f"Graph resized to {n} vertices")
        return True

    def set_edge(self, i: int, j: int, present: bool) -> bool:
        """
        Add or remove the undirected edge {i, j}.

        Both matrix entries are written together. Returns False for a
        self-loop, which is never stored.
        """
        self._check_vertex(i)
        self._check_vertex(j)
        if i == j:
            logger.debug(f"Ignoring self-loop on vertex {i}")
            return False
        value = 1 if present else 0
        self._matrix[i][j] = value
        self._matrix[j][i] = value
        logger.debug(f"Edge {i}-{j} {'set' if present else 'cleared'}")
        return True

    def make_complete(self) -> None:
        """Connect every pair of distinct vertices."""
        self._matrix = [
            [0 if i == j else 1 for j in range(self._n)]
            for i in range(self._n)
        ]
        logger.info(f"Graph made complete ({self.edge_count()} edges)")
