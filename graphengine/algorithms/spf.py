"""Single-source shortest paths: Dijkstra and Bellman-Ford.

Dijkstra keeps a tentative distance per vertex and a priority queue without
decrease-key. An improved distance inserts a fresh queue entry; entries whose
key exceeds the vertex's current distance are stale and skipped when
extracted. Ties between equal keys are extracted in insertion order, which
affects only which of several equal-weight parents is reported, never the
distances.

Bellman-Ford relaxes every adjacency entry in a fixed order, up to ``|V| - 1``
rounds, then runs one more pass: any further improvement proves a negative
cycle reachable from the source. Rounds stop early once a full pass changes
nothing, since later rounds could not change the fixed point either.

Notes:
    In an undirected graph each edge can be traversed both ways, so a single
    negative undirected edge already forms a negative cycle.
"""

from __future__ import annotations

from typing import List, Optional

from graphengine.config import ENGINE_CONFIG
from graphengine.exceptions import NegativeWeightUnsupported
from graphengine.graph.store import Graph
from graphengine.logging import algorithm_span, get_logger
from graphengine.structures.priority_queue import PriorityQueue
from graphengine.types.base import INF, VertexID, Weight
from graphengine.types.dto import BellmanFordResult, PathResult, ShortestPathResult

logger = get_logger(__name__)


def dijkstra(
    graph: Graph,
    source: VertexID,
    target: Optional[VertexID] = None,
    validate_weights: Optional[bool] = None,
) -> ShortestPathResult:
    """Compute shortest paths from ``source`` on a non-negatively weighted graph.

    Args:
        graph: Directed or undirected graph with weights >= 0.
        source: Start vertex.
        target: Optional destination. If given, the search stops as soon as
            ``target`` is settled; only settled vertices are reported.
        validate_weights: Scan for negative weights first and raise. Defaults
            to ``ENGINE_CONFIG.validate_dijkstra_weights``. Without the scan a
            negative edge yields wrong distances rather than an error.

    Returns:
        ShortestPathResult with distances and parents of settled vertices.

    Raises:
        UnknownVertex: If ``source`` or ``target`` is not in the graph.
        NegativeWeightUnsupported: If validation finds a negative edge.
    """
    src = graph.vertex_map.index(source, "Source vertex")
    dst = None if target is None else graph.vertex_map.index(target, "Target vertex")
    if ENGINE_CONFIG.resolve_validate_weights(validate_weights):
        _reject_negative_weights(graph)

    adj = graph.adjacency_by_index()
    dist: List[Weight] = [INF] * len(adj)
    parent: List[Optional[int]] = [None] * len(adj)
    settled: List[bool] = [False] * len(adj)
    settled_order: List[int] = []

    with algorithm_span(
        logger,
        "dijkstra",
        vertices=graph.vertex_count(),
        edges=graph.edge_count(),
        target=target,
    ) as stats:
        stale = 0
        dist[src] = 0
        min_pq: PriorityQueue[int] = PriorityQueue()
        min_pq.insert(0, src)

        while not min_pq.is_empty():
            current_dist, node = min_pq.extract_min()
            if current_dist > dist[node] or settled[node]:
                stale += 1
                continue
            settled[node] = True
            settled_order.append(node)
            if node == dst:
                break

            for neighbor, weight in adj[node]:
                # Settled distances are final; keeps parents a tree
                if settled[neighbor]:
                    continue
                new_dist = current_dist + weight
                if new_dist < dist[neighbor]:
                    dist[neighbor] = new_dist
                    parent[neighbor] = node
                    min_pq.insert(new_dist, neighbor)

        stats["settled"] = len(settled_order)
        stats["stale_entries"] = stale

    return _build_result(graph, source, settled_order, dist, parent)


def bellman_ford(graph: Graph, source: VertexID) -> BellmanFordResult:
    """Compute shortest paths from ``source``; negative weights allowed.

    Args:
        graph: Directed or undirected graph with arbitrary real weights.
        source: Start vertex.

    Returns:
        BellmanFordResult. When ``has_negative_cycle`` is True the distances
        are informational only and must not be used as shortest-path weights.

    Raises:
        UnknownVertex: If ``source`` is not in the graph.
    """
    src = graph.vertex_map.index(source, "Source vertex")
    adj = graph.adjacency_by_index()
    n = len(adj)
    # Fixed relaxation order: adjacency order of each vertex, by vertex index
    arcs = [(u, v, w) for u in range(n) for v, w in adj[u]]

    dist: List[Weight] = [INF] * n
    parent: List[Optional[int]] = [None] * n
    dist[src] = 0

    with algorithm_span(
        logger, "bellman_ford", vertices=n, arcs=len(arcs)
    ) as stats:
        rounds = 0
        for _ in range(n - 1):
            rounds += 1
            changed = False
            for u, v, w in arcs:
                if dist[u] != INF and dist[u] + w < dist[v]:
                    dist[v] = dist[u] + w
                    parent[v] = u
                    changed = True
            if not changed:
                break

        has_negative_cycle = any(
            dist[u] != INF and dist[u] + w < dist[v] for u, v, w in arcs
        )
        stats["rounds"] = rounds
        stats["has_negative_cycle"] = has_negative_cycle

    if has_negative_cycle:
        logger.debug("Negative cycle reachable from '%s'", source)

    reached = [i for i in range(n) if dist[i] != INF]
    base = _build_result(graph, source, reached, dist, parent)
    return BellmanFordResult(
        source=base.source,
        distances=base.distances,
        parents=base.parents,
        has_negative_cycle=has_negative_cycle,
    )


def shortest_path(
    graph: Graph,
    source: VertexID,
    target: VertexID,
    method: str = "auto",
) -> PathResult:
    """Find one shortest path from ``source`` to ``target``.

    Args:
        graph: Graph to search.
        source: Start vertex.
        target: Destination vertex.
        method: ``"dijkstra"``, ``"bellman_ford"``, or ``"auto"`` to use
            Dijkstra unless some edge weight is negative.

    Returns:
        PathResult. An unreachable target gives ``distance=INF`` and no
        path. A negative cycle reachable from ``source`` sets
        ``has_negative_cycle`` and leaves ``path`` as None.

    Raises:
        UnknownVertex: If ``source`` or ``target`` is not in the graph.
        ValueError: If ``method`` is unknown.
    """
    graph.vertex_map.index(target, "Target vertex")
    if method == "auto":
        method = "bellman_ford" if _has_negative_weight(graph) else "dijkstra"

    has_negative_cycle = False
    if method == "dijkstra":
        result: ShortestPathResult = dijkstra(graph, source, target=target)
    elif method == "bellman_ford":
        result = bellman_ford(graph, source)
        has_negative_cycle = result.has_negative_cycle
    else:
        raise ValueError(
            f"Invalid method '{method}'. "
            "Valid values are: auto, dijkstra, bellman_ford"
        )
    return PathResult(
        source=source,
        target=target,
        distance=result.distance_to(target),
        path=result.path_to(target),
        has_negative_cycle=has_negative_cycle,
    )


def _has_negative_weight(graph: Graph) -> bool:
    return any(w < 0 for _u, _v, w in graph.edges_by_index())


def _reject_negative_weights(graph: Graph) -> None:
    to_id = graph.vertex_map.to_id
    for u, v, w in graph.edges_by_index():
        if w < 0:
            raise NegativeWeightUnsupported(to_id[u], to_id[v], w)


def _build_result(
    graph: Graph,
    source: VertexID,
    reached: List[int],
    dist: List[Weight],
    parent: List[Optional[int]],
) -> ShortestPathResult:
    to_id = graph.vertex_map.to_id
    return ShortestPathResult(
        source=source,
        distances={to_id[i]: dist[i] for i in reached},
        parents={
            to_id[i]: (to_id[parent[i]] if parent[i] is not None else None)
            for i in reached
        },
    )
