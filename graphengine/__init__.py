"""graphengine: graph algorithms over directed and undirected weighted graphs.

Primary API:
    Graph - Adjacency-list graph keyed by opaque vertex ids
    bfs(), dfs() - Traversals; dfs() exposes the three-color state
    find_cycle(), has_cycle() - Cycle detection with a witness cycle
    topological_sort() - DFS finishing order; raises NotADag on cycles
    dijkstra(), bellman_ford(), shortest_path() - Single-source shortest paths
    kruskal(), prim() - Minimum spanning trees (forests)
    to_networkx(), from_networkx() - NetworkX interop

Example:
    from graphengine import Graph, dijkstra

    g = Graph.from_edges([("A", "B", 2), ("B", "C", 1)], directed=True)
    result = dijkstra(g, "A")
    result.distances  # {"A": 0, "B": 2, "C": 3}
    result.path_to("C")  # ("A", "B", "C")
"""

from __future__ import annotations

from graphengine import logging
from graphengine._version import __version__
from graphengine.algorithms import (
    bellman_ford,
    bfs,
    connected_components,
    dfs,
    dijkstra,
    find_cycle,
    has_cycle,
    is_connected,
    is_dag,
    iter_dfs_events,
    kruskal,
    prim,
    reconstruct_path,
    shortest_path,
    topological_sort,
)
from graphengine.config import ENGINE_CONFIG, EngineConfig
from graphengine.exceptions import (
    GraphEngineError,
    NegativeWeightUnsupported,
    NotADag,
    UnknownVertex,
)
from graphengine.graph.convert import from_networkx, to_networkx
from graphengine.graph.store import Graph, VertexMap
from graphengine.structures import PriorityQueue, UnionFind
from graphengine.types.base import INF, Color, DfsEvent, DfsStrategy
from graphengine.types.dto import (
    BellmanFordResult,
    CycleResult,
    DfsResult,
    PathResult,
    ShortestPathResult,
    SpanningTreeResult,
    TraversalResult,
)

__all__ = [
    # Version
    "__version__",
    # Graph store
    "Graph",
    "VertexMap",
    "to_networkx",
    "from_networkx",
    # Algorithms
    "bfs",
    "dfs",
    "iter_dfs_events",
    "find_cycle",
    "has_cycle",
    "topological_sort",
    "is_dag",
    "dijkstra",
    "bellman_ford",
    "shortest_path",
    "kruskal",
    "prim",
    "connected_components",
    "is_connected",
    "reconstruct_path",
    # Support structures
    "PriorityQueue",
    "UnionFind",
    # Types and results
    "INF",
    "Color",
    "DfsEvent",
    "DfsStrategy",
    "TraversalResult",
    "DfsResult",
    "PathResult",
    "ShortestPathResult",
    "BellmanFordResult",
    "CycleResult",
    "SpanningTreeResult",
    # Errors
    "GraphEngineError",
    "UnknownVertex",
    "NegativeWeightUnsupported",
    "NotADag",
    # Configuration
    "EngineConfig",
    "ENGINE_CONFIG",
    # Utilities
    "logging",
]
