"""Topological ordering by DFS finishing order.

DFS is started from every WHITE vertex in insertion order so disconnected
parts are covered. Each vertex is recorded when it turns BLACK; the reversed
finishing order places every edge's source before its target. A back edge
means the graph has a cycle and the sort fails with `NotADag` during the same
pass.

Many valid orders can exist; the one returned depends on vertex insertion and
adjacency order.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

from graphengine.algorithms.cycles import cycle_from_back_edge
from graphengine.algorithms.traversal import dfs_events_by_index
from graphengine.config import ENGINE_CONFIG
from graphengine.exceptions import NotADag
from graphengine.graph.store import Graph
from graphengine.logging import algorithm_span, get_logger
from graphengine.types.base import Color, DfsEvent, DfsStrategy, VertexID

logger = get_logger(__name__)


def topological_sort(
    graph: Graph,
    strategy: Optional[Union[DfsStrategy, str]] = None,
) -> Tuple[VertexID, ...]:
    """Return the vertices of a DAG so that every edge points forward.

    Args:
        graph: Directed acyclic graph.
        strategy: DfsStrategy or its name; ``ENGINE_CONFIG.dfs_strategy`` if None.

    Returns:
        Tuple of all vertices; for each edge ``u -> v``, ``u`` precedes ``v``.

    Raises:
        ValueError: If the graph is undirected.
        NotADag: If the graph contains a cycle; ``.cycle`` holds a witness.
    """
    if not graph.directed:
        raise ValueError("Topological sort requires a directed graph.")

    resolved = ENGINE_CONFIG.resolve_strategy(strategy)
    colors = [Color.WHITE] * graph.vertex_count()
    parent: Dict[int, Optional[int]] = {}
    finished: List[int] = []

    with algorithm_span(
        logger,
        "topological_sort",
        vertices=graph.vertex_count(),
        edges=graph.edge_count(),
    ) as stats:
        events = dfs_events_by_index(
            graph.adjacency_by_index(),
            range(graph.vertex_count()),
            colors,
            resolved,
        )
        for event, u, v in events:
            if event == DfsEvent.DISCOVER:
                parent[u] = v
            elif event == DfsEvent.FINISH:
                finished.append(u)
            elif event == DfsEvent.BACK_EDGE:
                to_id = graph.vertex_map.to_id
                cycle = cycle_from_back_edge(parent, u, v)
                stats["cycle_length"] = len(cycle) - 1
                raise NotADag(tuple(to_id[i] for i in cycle))
        stats["ordered"] = len(finished)

    to_id = graph.vertex_map.to_id
    return tuple(to_id[i] for i in reversed(finished))


def is_dag(
    graph: Graph,
    strategy: Optional[Union[DfsStrategy, str]] = None,
) -> bool:
    """Return True if ``graph`` is directed and acyclic."""
    if not graph.directed:
        return False
    try:
        topological_sort(graph, strategy)
    except NotADag:
        return False
    return True
