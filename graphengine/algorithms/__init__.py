"""Graph algorithms operating on `graphengine.graph.Graph`.

Every routine treats the graph as read-only input and allocates its own
working state (distance maps, queues, colorings), so independent calls on an
unmodified graph may run concurrently.
"""

from graphengine.algorithms.components import connected_components, is_connected
from graphengine.algorithms.cycles import find_cycle, has_cycle
from graphengine.algorithms.mst import kruskal, prim
from graphengine.algorithms.paths import reconstruct_path
from graphengine.algorithms.spf import bellman_ford, dijkstra, shortest_path
from graphengine.algorithms.topo import is_dag, topological_sort
from graphengine.algorithms.traversal import (
    bfs,
    dfs,
    dfs_events_by_index,
    iter_dfs_events,
)

__all__ = [
    "bfs",
    "dfs",
    "dfs_events_by_index",
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
]
