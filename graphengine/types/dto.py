"""Immutable result records returned by the algorithms.

Distance and parent maps hold reached vertices only; a vertex missing from a
distance map is unreached, which `distance_to` reports as ``INF``. Parent
maps map the source (and every DFS root) to ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from graphengine.types.base import INF, Color, EdgeTuple, VertexID, Weight

DistanceMap = Dict[VertexID, Weight]
ParentMap = Dict[VertexID, Optional[VertexID]]


@dataclass(frozen=True)
class TraversalResult:
    """Breadth-first search output.

    Attributes:
        source: Start vertex.
        order: Vertices in discovery order (non-decreasing distance).
        distances: Hop count from ``source`` for every reached vertex.
        parents: BFS-tree predecessor for every reached vertex.
    """

    source: VertexID
    order: Tuple[VertexID, ...]
    distances: DistanceMap
    parents: ParentMap

    def distance_to(self, vertex: VertexID) -> Weight:
        return self.distances.get(vertex, INF)

    def path_to(self, vertex: VertexID) -> Optional[Tuple[VertexID, ...]]:
        """Vertices from ``source`` to ``vertex``, or None if unreached."""
        # Import here to avoid circular import
        from graphengine.algorithms.paths import reconstruct_path

        return reconstruct_path(self.parents, vertex)

    def layers(self) -> List[Tuple[VertexID, ...]]:
        """Group vertices by hop count, each group in discovery order."""
        groups: List[List[VertexID]] = []
        for vertex in self.order:
            hops = int(self.distances[vertex])
            while len(groups) <= hops:
                groups.append([])
            groups[hops].append(vertex)
        return [tuple(group) for group in groups]


@dataclass(frozen=True)
class DfsResult:
    """Depth-first search output.

    Attributes:
        preorder: Vertices in discovery order.
        postorder: Vertices in finishing order.
        parents: DFS-forest predecessor of each discovered vertex.
        colors: Final color of every vertex in the graph; BLACK for visited,
            WHITE for vertices the search never reached.
    """

    preorder: Tuple[VertexID, ...]
    postorder: Tuple[VertexID, ...]
    parents: ParentMap
    colors: Dict[VertexID, Color]


@dataclass(frozen=True)
class ShortestPathResult:
    """Single-source shortest-path output.

    Attributes:
        source: Start vertex.
        distances: Shortest-path weight for every reached vertex.
        parents: Predecessor on one shortest path for every reached vertex.
    """

    source: VertexID
    distances: DistanceMap
    parents: ParentMap

    def distance_to(self, vertex: VertexID) -> Weight:
        return self.distances.get(vertex, INF)

    def is_reachable(self, vertex: VertexID) -> bool:
        return vertex in self.distances

    def path_to(self, vertex: VertexID) -> Optional[Tuple[VertexID, ...]]:
        """Vertices of one shortest path to ``vertex``, or None if unreached."""
        from graphengine.algorithms.paths import reconstruct_path

        return reconstruct_path(self.parents, vertex)


@dataclass(frozen=True)
class BellmanFordResult(ShortestPathResult):
    """Bellman-Ford output.

    When ``has_negative_cycle`` is True a negative-weight cycle is reachable
    from the source: distances are informational only and `path_to` returns
    None for every vertex.
    """

    has_negative_cycle: bool = False

    def path_to(self, vertex: VertexID) -> Optional[Tuple[VertexID, ...]]:
        """One shortest path to ``vertex``; None if unreached or undefined."""
        if self.has_negative_cycle:
            return None
        return super().path_to(vertex)


@dataclass(frozen=True)
class PathResult:
    """Point-to-point shortest-path output.

    Attributes:
        source: Start vertex.
        target: Destination vertex.
        distance: Shortest-path weight, ``INF`` when unreachable.
        path: Vertices from ``source`` to ``target``; None when unreachable
            or when a negative cycle makes the path undefined.
        has_negative_cycle: A negative cycle is reachable from ``source``;
            ``distance`` is then informational only.
    """

    source: VertexID
    target: VertexID
    distance: Weight
    path: Optional[Tuple[VertexID, ...]]
    has_negative_cycle: bool = False

    @property
    def found(self) -> bool:
        """True if a well-defined shortest path exists."""
        return self.path is not None


@dataclass(frozen=True)
class CycleResult:
    """Cycle detection output.

    Attributes:
        has_cycle: Whether the graph contains a cycle.
        cycle: One witness cycle as a closed vertex sequence whose first and
            last elements are equal, e.g. ``("A", "B", "C", "A")``; None when
            acyclic.
    """

    has_cycle: bool
    cycle: Optional[Tuple[VertexID, ...]] = None

    def __bool__(self) -> bool:
        return self.has_cycle


@dataclass(frozen=True)
class SpanningTreeResult:
    """Minimum spanning tree (or forest) output.

    Attributes:
        edges: Accepted edges ``(u, v, weight)`` in acceptance order.
        total_weight: Sum of accepted edge weights.
        vertex_count: Number of vertices in the input graph.
        component_count: Number of trees in the resulting forest.
    """

    edges: Tuple[EdgeTuple, ...]
    total_weight: Weight
    vertex_count: int
    component_count: int

    @property
    def is_spanning_tree(self) -> bool:
        """True if the edges connect every vertex (``|V| - 1`` edges)."""
        if self.vertex_count <= 1:
            return True
        return len(self.edges) == self.vertex_count - 1
