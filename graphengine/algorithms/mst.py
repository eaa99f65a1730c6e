"""Minimum spanning trees: Kruskal and Prim.

Both require an undirected graph. On a disconnected graph both return a
minimum spanning forest; check `SpanningTreeResult.is_spanning_tree`.

Kruskal sorts edges by weight with a stable sort, so equal weights keep
insertion order and the output is reproducible. Self-loops never join two
components and are always rejected.

Prim grows a tree from a root by repeatedly extracting the lightest frontier
edge. Frontier entries are not removed when their far endpoint joins the tree
by another edge; such entries are stale and skipped on extraction.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from graphengine.graph.store import Graph, IndexedEdge
from graphengine.logging import algorithm_span, get_logger
from graphengine.structures.priority_queue import PriorityQueue
from graphengine.structures.union_find import UnionFind
from graphengine.types.base import VertexID, Weight
from graphengine.types.dto import SpanningTreeResult

logger = get_logger(__name__)


def kruskal(graph: Graph) -> SpanningTreeResult:
    """Kruskal's minimum spanning tree (forest) algorithm.

    Args:
        graph: Undirected weighted graph.

    Returns:
        SpanningTreeResult whose edges keep the orientation they were added
        with, in acceptance order.

    Raises:
        ValueError: If the graph is directed.
    """
    _require_undirected(graph, "kruskal")
    n = graph.vertex_count()

    with algorithm_span(
        logger, "kruskal", vertices=n, edges=graph.edge_count()
    ) as stats:
        sets = UnionFind(n)
        accepted: List[IndexedEdge] = []
        for u, v, w in sorted(graph.edges_by_index(), key=lambda edge: edge[2]):
            if len(accepted) == n - 1:
                break
            if sets.union(u, v):
                accepted.append((u, v, w))
        stats["accepted"] = len(accepted)
        stats["components"] = sets.set_count

    if sets.set_count > 1:
        logger.debug("kruskal: input has %d components", sets.set_count)
    return _build_result(graph, accepted, sets.set_count)


def prim(graph: Graph, root: Optional[VertexID] = None) -> SpanningTreeResult:
    """Prim's minimum spanning tree algorithm.

    Args:
        graph: Undirected weighted graph.
        root: Vertex to grow the tree from. If given, only ``root``'s
            component is spanned. If None, the tree is re-seeded from every
            vertex not yet covered, in insertion order, producing a forest.

    Returns:
        SpanningTreeResult whose edges are oriented (tree side, new vertex),
        in acceptance order.

    Raises:
        ValueError: If the graph is directed.
        UnknownVertex: If ``root`` is not in the graph.
    """
    _require_undirected(graph, "prim")
    if root is not None:
        seeds: List[int] = [graph.vertex_map.index(root, "Root vertex")]
    else:
        seeds = list(range(graph.vertex_count()))

    adj = graph.adjacency_by_index()
    in_tree = [False] * len(adj)
    accepted: List[IndexedEdge] = []
    trees = 0

    with algorithm_span(
        logger, "prim", vertices=len(adj), edges=graph.edge_count()
    ) as stats:
        stale = 0
        for seed in seeds:
            if in_tree[seed]:
                continue
            trees += 1
            in_tree[seed] = True
            frontier: PriorityQueue[Tuple[int, int]] = PriorityQueue()
            for neighbor, weight in adj[seed]:
                if not in_tree[neighbor]:
                    frontier.insert(weight, (seed, neighbor))

            while not frontier.is_empty():
                weight, (near, far) = frontier.extract_min()
                if in_tree[far]:
                    stale += 1
                    continue
                in_tree[far] = True
                accepted.append((near, far, weight))
                for neighbor, edge_weight in adj[far]:
                    if not in_tree[neighbor]:
                        frontier.insert(edge_weight, (far, neighbor))

        stats["accepted"] = len(accepted)
        stats["trees"] = trees
        stats["stale_entries"] = stale

    if trees > 1:
        logger.debug("prim: spanned %d trees", trees)
    return _build_result(graph, accepted, trees)


def _require_undirected(graph: Graph, name: str) -> None:
    if graph.directed:
        raise ValueError(f"{name} requires an undirected graph.")


def _build_result(
    graph: Graph, accepted: List[IndexedEdge], components: int
) -> SpanningTreeResult:
    to_id = graph.vertex_map.to_id
    total: Weight = sum(w for _u, _v, w in accepted)
    return SpanningTreeResult(
        edges=tuple((to_id[u], to_id[v], w) for u, v, w in accepted),
        total_weight=total,
        vertex_count=graph.vertex_count(),
        component_count=components,
    )
