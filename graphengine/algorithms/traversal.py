"""Breadth-first and depth-first traversal.

BFS produces hop-count distances and a BFS tree. DFS is built on a single
event engine (`dfs_events_by_index`) that drives the three-color state
machine; cycle detection and topological sorting consume the same events.

The engine has two interchangeable strategies. ``ITERATIVE`` keeps an explicit
stack of ``[vertex, parent, next_neighbor_position]`` frames, so resuming a
vertex after a child finishes is a position increment; it handles arbitrarily
deep graphs. ``RECURSIVE`` uses nested generators and is limited by the
interpreter recursion limit. Given the same adjacency order both emit the same
event sequence.

Neighbor order is the adjacency insertion order, which is the source of
non-uniqueness in visitation and finishing orders.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from graphengine.config import ENGINE_CONFIG
from graphengine.graph.store import Graph, IndexedNeighbor
from graphengine.logging import algorithm_span, get_logger
from graphengine.types.base import Color, DfsEvent, DfsStrategy, VertexID
from graphengine.types.dto import DfsResult, TraversalResult

logger = get_logger(__name__)

#: Index-level DFS event: (event, u, v) with v possibly None.
IndexedEvent = Tuple[DfsEvent, int, Optional[int]]


def bfs(graph: Graph, source: VertexID) -> TraversalResult:
    """Breadth-first search from ``source``.

    Vertices are marked visited when enqueued, so none is queued twice and
    each is discovered in non-decreasing hop order.

    Args:
        graph: Graph to traverse.
        source: Start vertex.

    Returns:
        TraversalResult with discovery order, hop counts and BFS parents.
        Unreachable vertices are absent from both maps.

    Raises:
        UnknownVertex: If ``source`` is not in the graph.
    """
    src = graph.vertex_map.index(source, "Source vertex")
    adj = graph.adjacency_by_index()
    to_id = graph.vertex_map.to_id

    with algorithm_span(
        logger, "bfs", vertices=graph.vertex_count(), edges=graph.edge_count()
    ) as stats:
        hops: List[Optional[int]] = [None] * len(adj)
        parent: List[Optional[int]] = [None] * len(adj)
        hops[src] = 0
        order = [src]
        queue = deque([src])
        while queue:
            node = queue.popleft()
            next_hops = hops[node] + 1
            for neighbor, _weight in adj[node]:
                if hops[neighbor] is None:
                    hops[neighbor] = next_hops
                    parent[neighbor] = node
                    order.append(neighbor)
                    queue.append(neighbor)
        stats["reached"] = len(order)

    return TraversalResult(
        source=source,
        order=tuple(to_id[i] for i in order),
        distances={to_id[i]: hops[i] for i in order},
        parents={
            to_id[i]: (to_id[parent[i]] if parent[i] is not None else None)
            for i in order
        },
    )


def dfs_events_by_index(
    adj: Sequence[Sequence[IndexedNeighbor]],
    roots: Iterable[int],
    colors: List[Color],
    strategy: DfsStrategy = DfsStrategy.ITERATIVE,
) -> Iterator[IndexedEvent]:
    """Run DFS over index-level adjacency and yield its events.

    Roots that are not WHITE when reached are skipped. ``colors`` is owned by
    the caller and updated in place, so independent runs never share state
    and a caller may stop consuming events at any point.

    Args:
        adj: Adjacency lists of ``(neighbor_index, weight)`` entries.
        roots: Start indices, tried in order.
        colors: One Color per vertex index, normally all WHITE.
        strategy: Frame-keeping strategy.

    Yields:
        ``(DfsEvent, u, v)`` triples; see `DfsEvent` for their meaning.
    """
    if strategy == DfsStrategy.RECURSIVE:
        return _recursive_events(adj, roots, colors)
    return _iterative_events(adj, roots, colors)


def _iterative_events(
    adj: Sequence[Sequence[IndexedNeighbor]],
    roots: Iterable[int],
    colors: List[Color],
) -> Iterator[IndexedEvent]:
    for root in roots:
        if colors[root] != Color.WHITE:
            continue
        colors[root] = Color.GRAY
        yield DfsEvent.DISCOVER, root, None
        stack: List[List] = [[root, None, 0]]
        while stack:
            frame = stack[-1]
            node, parent, pos = frame
            neighbors = adj[node]
            if pos < len(neighbors):
                frame[2] = pos + 1
                nxt = neighbors[pos][0]
                color = colors[nxt]
                if color == Color.WHITE:
                    colors[nxt] = Color.GRAY
                    yield DfsEvent.DISCOVER, nxt, node
                    stack.append([nxt, node, 0])
                elif color == Color.GRAY:
                    yield DfsEvent.BACK_EDGE, node, nxt
                else:
                    yield DfsEvent.NONTREE_EDGE, node, nxt
            else:
                stack.pop()
                colors[node] = Color.BLACK
                yield DfsEvent.FINISH, node, parent


def _recursive_events(
    adj: Sequence[Sequence[IndexedNeighbor]],
    roots: Iterable[int],
    colors: List[Color],
) -> Iterator[IndexedEvent]:
    def visit(node: int, parent: Optional[int]) -> Iterator[IndexedEvent]:
        colors[node] = Color.GRAY
        yield DfsEvent.DISCOVER, node, parent
        for nxt, _weight in adj[node]:
            color = colors[nxt]
            if color == Color.WHITE:
                yield from visit(nxt, node)
            elif color == Color.GRAY:
                yield DfsEvent.BACK_EDGE, node, nxt
            else:
                yield DfsEvent.NONTREE_EDGE, node, nxt
        colors[node] = Color.BLACK
        yield DfsEvent.FINISH, node, parent

    for root in roots:
        if colors[root] == Color.WHITE:
            yield from visit(root, None)


def iter_dfs_events(
    graph: Graph,
    roots: Optional[Iterable[VertexID]] = None,
    strategy: Optional[Union[DfsStrategy, str]] = None,
) -> Iterator[Tuple[DfsEvent, VertexID, Optional[VertexID]]]:
    """Yield DFS events with vertex ids instead of indices.

    Args:
        graph: Graph to traverse.
        roots: Start vertices in order; all vertices in insertion order if None.
        strategy: DfsStrategy or its name; ``ENGINE_CONFIG.dfs_strategy`` if None.

    Raises:
        UnknownVertex: If a root is not in the graph.
    """
    # Resolve eagerly so bad arguments fail at call time, not on first next()
    resolved = ENGINE_CONFIG.resolve_strategy(strategy)
    root_indices = _root_indices(graph, roots)
    colors = [Color.WHITE] * graph.vertex_count()
    to_id = graph.vertex_map.to_id
    events = dfs_events_by_index(
        graph.adjacency_by_index(), root_indices, colors, resolved
    )
    return (
        (event, to_id[u], (to_id[v] if v is not None else None))
        for event, u, v in events
    )


def dfs(
    graph: Graph,
    source: Optional[VertexID] = None,
    strategy: Optional[Union[DfsStrategy, str]] = None,
) -> DfsResult:
    """Depth-first search from ``source``, or over the whole graph.

    Args:
        graph: Graph to traverse.
        source: Start vertex. If None, every still-unvisited vertex is used as
            a root in insertion order, producing a DFS forest.
        strategy: DfsStrategy or its name; ``ENGINE_CONFIG.dfs_strategy`` if None.

    Returns:
        DfsResult with preorder, postorder (finishing order), parents and the
        final color of every vertex.

    Raises:
        UnknownVertex: If ``source`` is not in the graph.
    """
    resolved = ENGINE_CONFIG.resolve_strategy(strategy)
    roots = _root_indices(graph, None if source is None else [source])
    to_id = graph.vertex_map.to_id
    colors = [Color.WHITE] * graph.vertex_count()
    preorder: List[int] = []
    postorder: List[int] = []
    parent: dict = {}

    with algorithm_span(
        logger,
        "dfs",
        vertices=graph.vertex_count(),
        edges=graph.edge_count(),
        strategy=resolved.name,
    ) as stats:
        for event, u, v in dfs_events_by_index(
            graph.adjacency_by_index(), roots, colors, resolved
        ):
            if event == DfsEvent.DISCOVER:
                preorder.append(u)
                parent[u] = v
            elif event == DfsEvent.FINISH:
                postorder.append(u)
        stats["reached"] = len(preorder)

    return DfsResult(
        preorder=tuple(to_id[i] for i in preorder),
        postorder=tuple(to_id[i] for i in postorder),
        parents={
            to_id[i]: (to_id[p] if p is not None else None)
            for i, p in parent.items()
        },
        colors={to_id[i]: color for i, color in enumerate(colors)},
    )


def _root_indices(graph: Graph, roots: Optional[Iterable[VertexID]]) -> List[int]:
    if roots is None:
        return list(range(graph.vertex_count()))
    return [graph.vertex_map.index(root, "Root vertex") for root in roots]
