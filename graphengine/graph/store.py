"""Adjacency-list graph with dense integer vertex indices.

`Graph` stores vertices under caller-supplied hashable ids but keeps all
adjacency data keyed by dense integer indices assigned in insertion order.
`VertexMap` is the translation table between the two. Algorithms work on the
index-level adjacency (`Graph.adjacency_by_index`) and translate results back
to ids at the boundary.

Rules enforced by the store:
  - Vertices must be added explicitly; `add_edge` never creates them.
  - Duplicate vertices raise ValueError.
  - Unknown vertices raise `UnknownVertex`.
  - Undirected edges are stored as two mirrored adjacency entries that are
    always inserted and removed together. An undirected self-loop is stored
    once.
  - Parallel edges are allowed and keep their insertion order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
)

from graphengine.config import ENGINE_CONFIG
from graphengine.exceptions import UnknownVertex
from graphengine.types.base import EdgeTuple, VertexID, Weight, is_valid_weight

#: Index-level adjacency entry: (neighbor_index, weight).
IndexedNeighbor = Tuple[int, Weight]

#: Index-level logical edge: (source_index, target_index, weight).
IndexedEdge = Tuple[int, int, Weight]


@dataclass
class VertexMap:
    """Bidirectional mapping between vertex ids and dense integer indices.

    Attributes:
        to_index: Maps vertex ids to indices.
        to_id: Maps indices (list positions) back to vertex ids.

    Example:
        >>> vmap = VertexMap.from_ids(["A", "B"])
        >>> vmap.to_index["B"]
        1
        >>> vmap.to_id[0]
        'A'
    """

    to_index: Dict[VertexID, int] = field(default_factory=dict)
    to_id: List[VertexID] = field(default_factory=list)

    @classmethod
    def from_ids(cls, ids: Iterable[VertexID]) -> "VertexMap":
        """Create a VertexMap from ids in index order.

        Raises:
            ValueError: If an id occurs twice.
        """
        vmap = cls()
        for vertex in ids:
            vmap.add(vertex)
        return vmap

    def add(self, vertex: VertexID) -> int:
        """Assign the next free index to ``vertex`` and return it."""
        if vertex in self.to_index:
            raise ValueError(f"Vertex '{vertex}' already exists in this graph.")
        index = len(self.to_id)
        self.to_index[vertex] = index
        self.to_id.append(vertex)
        return index

    def index(self, vertex: VertexID, role: str = "Vertex") -> int:
        """Return the index of ``vertex``.

        Raises:
            UnknownVertex: If the vertex was never added.
        """
        try:
            return self.to_index[vertex]
        except (KeyError, TypeError):
            raise UnknownVertex(vertex, role) from None

    def __contains__(self, vertex: object) -> bool:
        try:
            return vertex in self.to_index
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self.to_id)


class Graph:
    """Directed or undirected weighted multigraph.

    Args:
        directed: If False (default), every edge is mirrored in the adjacency
            of both endpoints.

    Example:
        >>> g = Graph.from_edges([("A", "B", 2)], directed=True)
        >>> g.neighbors("A")
        (('B', 2),)
    """

    def __init__(self, directed: bool = False) -> None:
        self._directed = bool(directed)
        self._vertices = VertexMap()
        self._adj: List[List[IndexedNeighbor]] = []
        # Logical edges in insertion order; one entry per undirected edge.
        self._edges: List[IndexedEdge] = []

    #
    # Construction helpers
    #
    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Sequence[Any]],
        directed: bool = False,
        vertices: Optional[Iterable[VertexID]] = None,
    ) -> "Graph":
        """Build a graph from ``(u, v)`` or ``(u, v, weight)`` items.

        Endpoints are added on first sight, after any ``vertices`` given
        explicitly (useful for isolated vertices or a fixed index order).

        Raises:
            ValueError: If an item has neither two nor three fields.
        """
        graph = cls(directed=directed)
        for vertex in vertices or ():
            graph.add_vertex(vertex)
        for item in edges:
            if len(item) == 2:
                u, v = item
                weight = ENGINE_CONFIG.default_weight
            elif len(item) == 3:
                u, v, weight = item
            else:
                raise ValueError(
                    f"Edge item {item!r} must be (source, target) or "
                    "(source, target, weight)."
                )
            for endpoint in (u, v):
                if endpoint not in graph:
                    graph.add_vertex(endpoint)
            graph.add_edge(u, v, weight)
        return graph

    @classmethod
    def from_adjacency(
        cls,
        adjacency: Mapping[VertexID, Iterable[Any]],
        directed: bool = False,
    ) -> "Graph":
        """Build a graph from ``{vertex: [neighbor | (neighbor, weight), ...]}``.

        Every listed entry becomes one edge; for an undirected graph list each
        edge under one endpoint only. Neighbors that are not keys are added.

        An entry that is already a vertex (every key is) is a bare neighbor,
        so tuple vertex ids can be listed by name. Any other 2-tuple is read
        as ``(neighbor, weight)``; to give a weight to a tuple-valued
        neighbor, nest it: ``((1, 2), 5)``.

        Raises:
            ValueError: If a weight is not a finite real number.
        """
        graph = cls(directed=directed)
        for vertex in adjacency:
            graph.add_vertex(vertex)
        for vertex, entries in adjacency.items():
            for entry in entries:
                is_pair = isinstance(entry, tuple) and len(entry) == 2
                if is_pair and entry not in graph:
                    neighbor, weight = entry
                else:
                    neighbor, weight = entry, ENGINE_CONFIG.default_weight
                if neighbor not in graph:
                    graph.add_vertex(neighbor)
                graph.add_edge(vertex, neighbor, weight)
        return graph

    def copy(self) -> "Graph":
        """Return an independent snapshot of this graph."""
        clone = Graph(directed=self._directed)
        clone._vertices = VertexMap(
            to_index=dict(self._vertices.to_index),
            to_id=list(self._vertices.to_id),
        )
        clone._adj = [list(entries) for entries in self._adj]
        clone._edges = list(self._edges)
        return clone

    #
    # Vertex management
    #
    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def vertex_map(self) -> VertexMap:
        """The id <-> index translation table (read-only by convention)."""
        return self._vertices

    def add_vertex(self, vertex: VertexID) -> int:
        """Add a vertex and return its internal index.

        Raises:
            ValueError: If the vertex already exists.
            TypeError: If the id is not hashable.
        """
        hash(vertex)
        index = self._vertices.add(vertex)
        self._adj.append([])
        return index

    def has_vertex(self, vertex: VertexID) -> bool:
        return vertex in self._vertices

    __contains__ = has_vertex

    def vertices(self) -> Tuple[VertexID, ...]:
        """All vertex ids in insertion order."""
        return tuple(self._vertices.to_id)

    def vertex_count(self) -> int:
        return len(self._vertices)

    __len__ = vertex_count

    def index_of(self, vertex: VertexID) -> int:
        """Return the internal index of ``vertex``.

        Raises:
            UnknownVertex: If the vertex was never added.
        """
        return self._vertices.index(vertex)

    def vertex_at(self, index: int) -> VertexID:
        """Return the id stored at ``index``."""
        return self._vertices.to_id[index]

    #
    # Edge management
    #
    def add_edge(
        self, u: VertexID, v: VertexID, weight: Optional[Weight] = None
    ) -> None:
        """Add an edge ``u -> v`` (mirrored as ``v -> u`` when undirected).

        Args:
            u: Source vertex. Must exist in the graph.
            v: Target vertex. Must exist in the graph.
            weight: Numeric weight; defaults to ``ENGINE_CONFIG.default_weight``.

        Raises:
            UnknownVertex: If either endpoint was never added.
            ValueError: If the weight is not a finite real number.
        """
        ui = self._vertices.index(u, "Source vertex")
        vi = self._vertices.index(v, "Target vertex")
        if weight is None:
            weight = ENGINE_CONFIG.default_weight
        if not is_valid_weight(weight):
            raise ValueError(
                f"Edge '{u}' -> '{v}' has invalid weight {weight!r}; "
                "expected a finite real number."
            )

        self._adj[ui].append((vi, weight))
        if not self._directed and ui != vi:
            self._adj[vi].append((ui, weight))
        self._edges.append((ui, vi, weight))

    def remove_edge(
        self, u: VertexID, v: VertexID, weight: Optional[Weight] = None
    ) -> None:
        """Remove the earliest-inserted edge ``u -> v``.

        For undirected graphs the edge may be given in either orientation and
        both mirrored adjacency entries are removed. If ``weight`` is given,
        only an edge with exactly that weight matches.

        Raises:
            UnknownVertex: If either endpoint was never added.
            ValueError: If no matching edge exists.
        """
        ui = self._vertices.index(u, "Source vertex")
        vi = self._vertices.index(v, "Target vertex")

        for pos, (a, b, w) in enumerate(self._edges):
            if weight is not None and w != weight:
                continue
            if (a, b) == (ui, vi) or (
                not self._directed and (a, b) == (vi, ui)
            ):
                break
        else:
            raise ValueError(f"No edge from '{u}' to '{v}' to remove.")

        del self._edges[pos]
        self._adj[a].remove((b, w))
        if not self._directed and a != b:
            self._adj[b].remove((a, w))

    def has_edge(self, u: VertexID, v: VertexID) -> bool:
        """Return True if at least one edge ``u -> v`` exists."""
        if u not in self._vertices or v not in self._vertices:
            return False
        vi = self._vertices.to_index[v]
        return any(n == vi for n, _ in self._adj[self._vertices.to_index[u]])

    def neighbors(self, vertex: VertexID) -> Tuple[Tuple[VertexID, Weight], ...]:
        """Return ``(neighbor, weight)`` pairs in adjacency order.

        Raises:
            UnknownVertex: If the vertex was never added.
        """
        index = self._vertices.index(vertex)
        to_id = self._vertices.to_id
        return tuple((to_id[n], w) for n, w in self._adj[index])

    def degree(self, vertex: VertexID) -> int:
        """Number of adjacency entries of ``vertex`` (out-degree if directed)."""
        return len(self._adj[self._vertices.index(vertex)])

    def edges(self) -> Iterator[EdgeTuple]:
        """Yield each logical edge once as ``(u, v, weight)``, in insertion order."""
        to_id = self._vertices.to_id
        for ui, vi, w in self._edges:
            yield to_id[ui], to_id[vi], w

    def edge_count(self) -> int:
        """Number of logical edges (an undirected edge counts once)."""
        return len(self._edges)

    #
    # Index-level access for algorithms
    #
    def adjacency_by_index(self) -> List[List[IndexedNeighbor]]:
        """Index-level adjacency lists. Callers must not mutate them."""
        return self._adj

    def edges_by_index(self) -> List[IndexedEdge]:
        """Index-level logical edges in insertion order. Do not mutate."""
        return self._edges

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return (
            f"Graph({kind}, vertices={self.vertex_count()}, "
            f"edges={self.edge_count()})"
        )
