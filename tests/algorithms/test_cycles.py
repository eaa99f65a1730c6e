import networkx as nx
import pytest

from graphengine.algorithms.cycles import find_cycle, has_cycle
from graphengine.graph.convert import to_networkx
from graphengine.graph.store import Graph
from graphengine.types.base import DfsStrategy


def assert_valid_cycle(graph, cycle):
    """The witness is closed and each consecutive pair is an edge."""
    assert cycle[0] == cycle[-1]
    assert len(cycle) >= 2
    for u, v in zip(cycle, cycle[1:]):
        assert graph.has_edge(u, v)


class TestDirected:
    def test_triangle(self, triangle_cycle):
        result = find_cycle(triangle_cycle)
        assert result.has_cycle
        assert bool(result)
        assert result.cycle == ("A", "B", "C", "A")

    def test_dag_is_acyclic(self, diamond_dag):
        result = find_cycle(diamond_dag)
        assert not result.has_cycle
        assert result.cycle is None
        assert not has_cycle(diamond_dag)

    def test_self_loop(self):
        g = Graph.from_edges([("A", "B"), ("B", "B")], directed=True)
        assert find_cycle(g).cycle == ("B", "B")

    def test_two_cycle(self):
        g = Graph.from_edges([("A", "B"), ("B", "A")], directed=True)
        assert find_cycle(g).cycle == ("A", "B", "A")

    def test_cross_edge_is_not_a_cycle(self):
        # C→B reaches an already finished vertex
        g = Graph.from_edges([("A", "B"), ("A", "C"), ("C", "B")], directed=True)
        assert not has_cycle(g)

    def test_cycle_in_later_component(self):
        g = Graph.from_edges(
            [("A", "B"), ("X", "Y"), ("Y", "Z"), ("Z", "Y")], directed=True
        )
        result = find_cycle(g)
        assert result.cycle == ("Y", "Z", "Y")

    def test_empty_graph(self):
        assert not has_cycle(Graph(directed=True))

    @pytest.mark.parametrize("strategy", list(DfsStrategy))
    def test_matches_networkx(self, random_graph_factory, strategy):
        for seed in range(40):
            g = random_graph_factory(seed, 8, 10, directed=True, self_loops=True)
            result = find_cycle(g, strategy=strategy)
            assert result.has_cycle == (not nx.is_directed_acyclic_graph(to_networkx(g)))
            if result.has_cycle:
                assert_valid_cycle(g, result.cycle)


class TestUndirected:
    def test_tree_is_acyclic(self, bfs_tree_graph):
        # 2-4 closes 0-1-4-2-0
        assert has_cycle(bfs_tree_graph)
        bfs_tree_graph.remove_edge(2, 4)
        assert not has_cycle(bfs_tree_graph)

    def test_single_edge_is_acyclic(self):
        assert not has_cycle(Graph.from_edges([("A", "B")]))

    def test_triangle(self):
        g = Graph.from_edges([("A", "B"), ("B", "C"), ("C", "A")])
        result = find_cycle(g)
        assert result.cycle == ("A", "B", "C", "A")

    def test_parallel_edges_form_a_cycle(self):
        g = Graph.from_edges([("A", "B", 1), ("A", "B", 2)])
        result = find_cycle(g)
        assert result.has_cycle
        assert result.cycle == ("A", "B", "A")

    def test_self_loop(self):
        g = Graph.from_edges([("A", "B"), ("B", "B")])
        assert find_cycle(g).cycle == ("B", "B")

    def test_forest(self, two_components):
        assert not has_cycle(two_components)

    def test_matches_networkx_forest_check(self, random_graph_factory):
        for seed in range(40):
            g = random_graph_factory(seed, 9, 8, directed=False)
            result = find_cycle(g)
            assert result.has_cycle == (not nx.is_forest(to_networkx(g)))
            if result.has_cycle:
                assert_valid_cycle(g, result.cycle)
