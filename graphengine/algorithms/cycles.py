"""Cycle detection on top of the DFS event engine.

Directed graphs: a cycle exists iff DFS meets a back edge, i.e. an edge into
a GRAY vertex.

Undirected graphs: every tree edge is stored twice, so the mirror entry
leading from a vertex back to its DFS parent also shows up as a back edge.
Exactly one such entry per vertex is skipped. Any further edge to a GRAY
vertex closes a cycle; this includes a second parallel edge to the parent
and self-loops, both of which are cycles in a multigraph.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Set, Tuple, Union

from graphengine.algorithms.traversal import dfs_events_by_index
from graphengine.config import ENGINE_CONFIG
from graphengine.graph.store import Graph
from graphengine.logging import algorithm_span, get_logger
from graphengine.types.base import Color, DfsEvent, DfsStrategy
from graphengine.types.dto import CycleResult

logger = get_logger(__name__)


def find_cycle(
    graph: Graph,
    strategy: Optional[Union[DfsStrategy, str]] = None,
) -> CycleResult:
    """Search the whole graph for a cycle.

    Every connected part is covered: DFS restarts from each vertex that is
    still WHITE, in insertion order. The search stops at the first cycle.

    Args:
        graph: Directed or undirected graph.
        strategy: DfsStrategy or its name; ``ENGINE_CONFIG.dfs_strategy`` if None.

    Returns:
        CycleResult with a closed witness sequence, e.g. ``(A, B, C, A)``, when
        a cycle exists.
    """
    resolved = ENGINE_CONFIG.resolve_strategy(strategy)
    with algorithm_span(
        logger,
        "find_cycle",
        vertices=graph.vertex_count(),
        edges=graph.edge_count(),
        directed=graph.directed,
    ) as stats:
        found = _first_cycle(graph, resolved)
        stats["has_cycle"] = found is not None

    if found is None:
        return CycleResult(has_cycle=False)
    to_id = graph.vertex_map.to_id
    return CycleResult(has_cycle=True, cycle=tuple(to_id[i] for i in found))


def has_cycle(
    graph: Graph,
    strategy: Optional[Union[DfsStrategy, str]] = None,
) -> bool:
    """Return True if ``graph`` contains at least one cycle."""
    return find_cycle(graph, strategy).has_cycle


def _first_cycle(graph: Graph, strategy: DfsStrategy) -> Optional[Tuple[int, ...]]:
    colors = [Color.WHITE] * graph.vertex_count()
    parent: Dict[int, Optional[int]] = {}
    # Vertices whose single mirror entry to the DFS parent was already skipped
    skipped_parent_edge: Set[int] = set()
    undirected = not graph.directed

    events = dfs_events_by_index(
        graph.adjacency_by_index(),
        range(graph.vertex_count()),
        colors,
        strategy,
    )
    for event, u, v in events:
        if event == DfsEvent.DISCOVER:
            parent[u] = v
        elif event == DfsEvent.BACK_EDGE:
            if (
                undirected
                and v == parent[u]
                and u not in skipped_parent_edge
            ):
                skipped_parent_edge.add(u)
                continue
            return cycle_from_back_edge(parent, u, v)
    return None


def cycle_from_back_edge(
    parent: Dict[int, Optional[int]], tail: int, head: int
) -> Tuple[int, ...]:
    """Build ``head -> ... -> tail -> head`` from the DFS tree path."""
    chain: List[int] = [tail]
    node = tail
    while node != head:
        node = parent[node]
        chain.append(node)
    chain.reverse()
    chain.append(head)
    return tuple(chain)
