import pytest

from graphengine.algorithms.spf import bellman_ford, dijkstra, shortest_path
from graphengine.config import ENGINE_CONFIG
from graphengine.exceptions import NegativeWeightUnsupported, UnknownVertex
from graphengine.graph.store import Graph
from graphengine.types.base import INF
from graphengine.types.dto import PathResult


class TestDijkstra:
    def test_distances(self, dijkstra_graph):
        result = dijkstra(dijkstra_graph, "A")
        assert result.distances == {"A": 0, "B": 2, "C": 3, "D": 5, "E": 8}
        assert result.parents == {
            "A": None,
            "B": "A",
            "C": "B",
            "D": "B",
            "E": "C",
        }

    def test_paths(self, dijkstra_graph):
        result = dijkstra(dijkstra_graph, "A")
        assert result.path_to("D") == ("A", "B", "D")
        assert result.path_to("E") == ("A", "B", "C", "E")
        assert result.path_to("A") == ("A",)

    def test_unreachable(self, dijkstra_graph):
        result = dijkstra(dijkstra_graph, "D")
        assert result.distances == {"D": 0}
        assert result.distance_to("A") == INF
        assert not result.is_reachable("A")
        assert result.path_to("A") is None

    def test_undirected(self):
        g = Graph.from_edges([("A", "B", 4), ("B", "C", 1), ("A", "C", 7)])
        result = dijkstra(g, "C")
        assert result.distances == {"C": 0, "B": 1, "A": 5}

    def test_parallel_edges_use_lightest(self):
        g = Graph.from_edges([("A", "B", 9), ("A", "B", 2)], directed=True)
        assert dijkstra(g, "A").distances["B"] == 2

    def test_zero_weight_edges(self):
        g = Graph.from_edges(
            [("A", "B", 0), ("B", "C", 0), ("A", "C", 1)], directed=True
        )
        assert dijkstra(g, "A").distances == {"A": 0, "B": 0, "C": 0}

    def test_float_weights(self):
        g = Graph.from_edges([("A", "B", 0.5), ("B", "C", 0.25)], directed=True)
        assert dijkstra(g, "A").distances["C"] == pytest.approx(0.75)

    def test_equal_cost_tie_keeps_first_parent(self):
        # A→B→D and A→C→D both cost 2; B's relaxation of D comes first
        g = Graph.from_edges(
            [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1)],
            directed=True,
        )
        result = dijkstra(g, "A")
        assert result.distances["D"] == 2
        assert result.parents["D"] == "B"

    def test_target_early_exit(self, dijkstra_graph):
        result = dijkstra(dijkstra_graph, "A", target="C")
        assert result.distance_to("C") == 3
        assert result.path_to("C") == ("A", "B", "C")
        # E is settled only after C, so it is not reported
        assert "E" not in result.distances

    def test_unknown_source_and_target(self, dijkstra_graph):
        with pytest.raises(UnknownVertex, match="Source vertex 'Z'"):
            dijkstra(dijkstra_graph, "Z")
        with pytest.raises(UnknownVertex, match="Target vertex 'Z'"):
            dijkstra(dijkstra_graph, "A", target="Z")

    def test_negative_weight_rejected(self, negative_dag):
        with pytest.raises(NegativeWeightUnsupported) as exc_info:
            dijkstra(negative_dag, "A")
        err = exc_info.value
        assert (err.source, err.target, err.weight) == ("B", "D", -5)
        assert "bellman_ford" in str(err)

    def test_negative_weight_unvalidated_does_not_crash(self, negative_dag):
        result = dijkstra(negative_dag, "A", validate_weights=False)
        assert set(result.distances) == {"A", "B", "C", "D"}

    def test_unvalidated_negative_edge_into_settled_vertex(self):
        g = Graph.from_edges([("A", "B", 1), ("B", "A", -5)], directed=True)
        result = dijkstra(g, "A", validate_weights=False)
        assert result.distances == {"A": 0, "B": 1}
        assert result.parents == {"A": None, "B": "A"}
        for vertex in result.distances:
            assert result.path_to(vertex)[-1] == vertex

    def test_unvalidated_paths_always_resolve(self, random_graph_factory):
        for seed in range(20):
            g = random_graph_factory(
                seed, 10, 25, directed=True, min_weight=-4, max_weight=6
            )
            result = dijkstra(g, 0, validate_weights=False)
            assert result.distances[0] == 0
            for vertex in result.distances:
                path = result.path_to(vertex)
                assert path[0] == 0 and path[-1] == vertex

    def test_validation_default_from_config(self, negative_dag, monkeypatch):
        monkeypatch.setattr(ENGINE_CONFIG, "validate_dijkstra_weights", False)
        dijkstra(negative_dag, "A")

    def test_idempotent(self, dijkstra_graph):
        assert dijkstra(dijkstra_graph, "A") == dijkstra(dijkstra_graph, "A")


class TestBellmanFord:
    def test_negative_edge_without_cycle(self, negative_dag):
        result = bellman_ford(negative_dag, "A")
        assert not result.has_negative_cycle
        assert result.distances == {"A": 0, "B": 1, "C": 4, "D": -4}
        assert result.path_to("D") == ("A", "B", "D")

    def test_matches_dijkstra_on_scenario(self, dijkstra_graph):
        result = bellman_ford(dijkstra_graph, "A")
        assert not result.has_negative_cycle
        assert result.distances == dijkstra(dijkstra_graph, "A").distances

    def test_negative_cycle_detected(self):
        g = Graph.from_edges(
            [("S", "A", 1), ("A", "B", -2), ("B", "A", 1), ("B", "T", 1)],
            directed=True,
        )
        result = bellman_ford(g, "S")
        assert result.has_negative_cycle
        assert "T" in result.distances
        assert result.path_to("T") is None
        assert result.path_to("S") is None

    def test_unreachable_negative_cycle_is_ignored(self):
        g = Graph.from_edges(
            [("S", "A", 2), ("X", "Y", -3), ("Y", "X", 1)], directed=True
        )
        result = bellman_ford(g, "S")
        assert not result.has_negative_cycle
        assert result.distances == {"S": 0, "A": 2}

    def test_negative_undirected_edge_is_a_cycle(self):
        g = Graph.from_edges([("A", "B", -1)])
        assert bellman_ford(g, "A").has_negative_cycle

    def test_single_vertex(self):
        g = Graph(directed=True)
        g.add_vertex("A")
        result = bellman_ford(g, "A")
        assert result.distances == {"A": 0}
        assert not result.has_negative_cycle

    def test_unknown_source(self, negative_dag):
        with pytest.raises(UnknownVertex):
            bellman_ford(negative_dag, "nope")


class TestShortestPath:
    def test_auto_uses_dijkstra_for_non_negative(self, dijkstra_graph):
        result = shortest_path(dijkstra_graph, "A", "E")
        assert result == PathResult("A", "E", 8, ("A", "B", "C", "E"))
        assert result.found

    def test_auto_handles_negative_weights(self, negative_dag):
        result = shortest_path(negative_dag, "A", "D")
        assert (result.distance, result.path) == (-4, ("A", "B", "D"))
        assert not result.has_negative_cycle

    def test_unreachable(self, dijkstra_graph):
        result = shortest_path(dijkstra_graph, "E", "A")
        assert result.distance == INF
        assert result.path is None
        assert not result.found

    def test_explicit_method(self, dijkstra_graph):
        result = shortest_path(dijkstra_graph, "A", "D", method="bellman_ford")
        assert (result.distance, result.path) == (5, ("A", "B", "D"))

    def test_negative_cycle_is_a_result_state(self):
        g = Graph.from_edges([("A", "B", -1), ("B", "A", -1)], directed=True)
        result = shortest_path(g, "A", "B")
        assert result.has_negative_cycle
        assert result.path is None
        assert not result.found

    def test_negative_undirected_edge_is_a_result_state(self):
        g = Graph.from_edges([("A", "B", 1), ("B", "C", -1)])
        result = shortest_path(g, "A", "C")
        assert result.has_negative_cycle
        assert result.path is None

    def test_invalid_method(self, dijkstra_graph):
        with pytest.raises(ValueError, match="Invalid method"):
            shortest_path(dijkstra_graph, "A", "B", method="astar")

    def test_unknown_target(self, dijkstra_graph):
        with pytest.raises(UnknownVertex):
            shortest_path(dijkstra_graph, "A", "Q")
