import networkx as nx
import pytest

from adjgraph.graph_store import GraphStore


def assert_symmetric_zero_diagonal(store: GraphStore):
    m = store.matrix
    n = store.vertex_count
    assert len(m) == n and all(len(row) == n for row in m)
    for i in range(n):
        assert m[i][i] == 0
        for j in range(n):
            assert m[i][j] == m[j][i]


class TestResize:

    @pytest.mark.parametrize("n", [1, 2, 5, 10])
    def test_resize_gives_all_zero_matrix(self, complete4, n):
        assert complete4.resize(n) is True
        assert complete4.vertex_count == n
        assert complete4.matrix == [[0] * n for _ in range(n)]
        assert complete4.vertices() == list(range(n))

    @pytest.mark.parametrize("n", [0, -1, -10])
    def test_non_positive_resize_is_ignored(self, complete4, n):
        before = complete4.matrix
        assert complete4.resize(n) is False
        assert complete4.vertex_count == 4
        assert complete4.matrix == before

    def test_resize_drops_existing_edges(self, cycle4):
        cycle4.resize(4)
        assert cycle4.edge_count() == 0

    def test_constructor_rejects_empty_graph(self):
        with pytest.raises(ValueError):
            GraphStore(0)


class TestSetEdge:

    def test_set_then_clear_restores_zero(self):
        store = GraphStore(5)
        for i in range(5):
            for j in range(5):
                if i == j:
                    continue
                store.set_edge(i, j, True)
                assert store.has_edge(i, j) and store.has_edge(j, i)
                store.set_edge(i, j, False)
                m = store.matrix
                assert m[i][j] == 0 and m[j][i] == 0

    def test_symmetry_holds_after_every_mutation(self):
        store = GraphStore(4)
        ops = [(0, 1, True), (2, 0, True), (3, 1, True), (1, 0, False), (2, 3, True), (0, 2, False)]
        for i, j, present in ops:
            store.set_edge(i, j, present)
            assert_symmetric_zero_diagonal(store)

    def test_set_edge_is_idempotent(self):
        store = GraphStore(3)
        store.set_edge(0, 2, True)
        once = store.matrix
        store.set_edge(0, 2, True)
        assert store.matrix == once
        assert store.edge_count() == 1

    def test_self_loop_is_ignored(self):
        store = GraphStore(3)
        assert store.set_edge(1, 1, True) is False
        assert store.matrix[1][1] == 0
        assert store.edge_count() == 0

    @pytest.mark.parametrize("i, j", [(0, 4), (4, 0), (-1, 2), (2, 10)])
    def test_out_of_range_raises(self, i, j):
        store = GraphStore(4)
        with pytest.raises(IndexError):
            store.set_edge(i, j, True)


class TestQueries:

    def test_neighbors_ascending_and_complete(self):
        store = GraphStore(6)
        for j in (5, 1, 3):
            store.set_edge(2, j, True)
        assert store.neighbors(2) == [1, 3, 5]
        assert store.neighbors(4) == []
        m = store.matrix
        for i in range(6):
            nbrs = store.neighbors(i)
            assert nbrs == sorted(set(nbrs))
            assert nbrs == [j for j in range(6) if m[i][j] == 1]

    def test_edge_count_and_edges(self, cycle4):
        assert cycle4.edge_count() == 4
        assert cycle4.edges() == [(0, 1), (0, 3), (1, 2), (2, 3)]

    def test_is_complete(self, complete4, cycle4):
        assert complete4.is_complete() is True
        assert cycle4.is_complete() is False

    def test_single_vertex_is_complete(self):
        assert GraphStore(1).is_complete() is True

    @pytest.mark.parametrize("n", [1, 2, 4, 7])
    def test_make_complete(self, n):
        store = GraphStore(n)
        store.make_complete()
        assert store.is_complete()
        assert store.edge_count() == n * (n - 1) // 2
        assert_symmetric_zero_diagonal(store)

    def test_matrix_is_a_copy(self, cycle4):
        m = cycle4.matrix
        m[0][2] = 1
        assert cycle4.has_edge(0, 2) is False

    def test_to_networkx_keeps_isolated_vertices(self):
        store = GraphStore(4)
        store.set_edge(0, 1, True)
        G = store.to_networkx()
        assert isinstance(G, nx.Graph)
        assert sorted(G.nodes) == [0, 1, 2, 3]
        assert G.number_of_edges() == 1


class TestFromMatrix:

    def test_round_trips_matrix(self, cycle4):
        assert GraphStore.from_matrix(cycle4.matrix).matrix == cycle4.matrix

    @pytest.mark.parametrize("matrix", [
        [],
        [[0, 1], [1]],
        [[0, 1], [0, 0]],
        [[1, 0], [0, 0]],
        [[0, 2], [2, 0]],
        [[0, True], [True, 0]],
        [[0, 1.0], [1.0, 0]],
    ])
    def test_rejects_malformed_matrix(self, matrix):
        with pytest.raises(ValueError):
            GraphStore.from_matrix(matrix)
