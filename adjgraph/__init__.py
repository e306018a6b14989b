"""
Adjacency Graph Explorer.

Build a small undirected graph from an adjacency matrix, edit its
connectivity by clicking vertices, and highlight the shortest path
between two vertices on a force-directed chart.
"""

__version__ = "0.1.0"
