"""
Pytest configuration and shared fixtures.

Small graphs used across the store, path finder and controller tests.
"""

import pytest

from adjgraph.graph_store import GraphStore
from adjgraph.interaction import InteractionController


@pytest.fixture
def cycle4() -> GraphStore:
    """4-cycle 0-1-2-3-0."""
    return GraphStore.from_matrix([
        [0, 1, 0, 1],
        [1, 0, 1, 0],
        [0, 1, 0, 1],
        [1, 0, 1, 0],
    ])


@pytest.fixture
def two_components() -> GraphStore:
    """Edges 0-1 and 2-3, with no connection between the pairs."""
    store = GraphStore(4)
    store.set_edge(0, 1, True)
    store.set_edge(2, 3, True)
    return store


@pytest.fixture
def complete4() -> GraphStore:
    store = GraphStore(4)
    store.make_complete()
    return store


@pytest.fixture
def controller(complete4) -> InteractionController:
    return InteractionController(complete4)
