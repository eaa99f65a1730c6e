"""Connected components via union-find.

Directed graphs are treated as undirected, yielding weakly connected
components.
"""

from __future__ import annotations

from typing import Dict, List

from graphengine.graph.store import Graph
from graphengine.logging import algorithm_span, get_logger
from graphengine.structures.union_find import UnionFind
from graphengine.types.base import VertexID

logger = get_logger(__name__)


def connected_components(graph: Graph) -> List[List[VertexID]]:
    """Group vertices into connected components.

    Returns:
        One list per component. Components are ordered by their first vertex
        in insertion order, and vertices within a component keep insertion
        order.
    """
    n = graph.vertex_count()
    with algorithm_span(
        logger, "connected_components", vertices=n, edges=graph.edge_count()
    ) as stats:
        sets = UnionFind(n)
        for u, v, _w in graph.edges_by_index():
            sets.union(u, v)

        slot_of_root: Dict[int, int] = {}
        groups: List[List[VertexID]] = []
        to_id = graph.vertex_map.to_id
        for index in range(n):
            root = sets.find(index)
            if root not in slot_of_root:
                slot_of_root[root] = len(groups)
                groups.append([])
            groups[slot_of_root[root]].append(to_id[index])
        stats["components"] = len(groups)
    return groups


def is_connected(graph: Graph) -> bool:
    """True if the graph has at most one (weakly) connected component."""
    return len(connected_components(graph)) <= 1
