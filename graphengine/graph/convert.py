"""Conversion utilities between `Graph` and NetworkX multigraphs.

Parallel edges survive the round trip because both directions use NetworkX
multigraph classes. Vertex insertion order is preserved.
"""

from __future__ import annotations

from typing import Optional, Union

import networkx as nx

from graphengine.config import ENGINE_CONFIG
from graphengine.graph.store import Graph
from graphengine.types.base import Weight

NxGraph = Union[nx.Graph, nx.DiGraph, nx.MultiGraph, nx.MultiDiGraph]


def to_networkx(graph: Graph, weight_attr: str = "weight") -> NxGraph:
    """Convert a Graph to ``nx.MultiDiGraph`` or ``nx.MultiGraph``.

    Args:
        graph: The graph to convert.
        weight_attr: Edge attribute that receives the edge weight.

    Returns:
        A NetworkX multigraph whose directedness matches ``graph``.
    """
    nx_graph = nx.MultiDiGraph() if graph.directed else nx.MultiGraph()
    nx_graph.add_nodes_from(graph.vertices())
    for u, v, weight in graph.edges():
        nx_graph.add_edge(u, v, **{weight_attr: weight})
    return nx_graph


def from_networkx(
    nx_graph: NxGraph,
    weight_attr: str = "weight",
    default_weight: Optional[Weight] = None,
) -> Graph:
    """Convert any NetworkX graph to a Graph.

    Args:
        nx_graph: NetworkX Graph, DiGraph, MultiGraph or MultiDiGraph.
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight for edges lacking ``weight_attr``; defaults to
            ``ENGINE_CONFIG.default_weight``.

    Returns:
        A Graph with the same vertices, edges and directedness.
    """
    if default_weight is None:
        default_weight = ENGINE_CONFIG.default_weight

    graph = Graph(directed=nx_graph.is_directed())
    for node in nx_graph.nodes:
        graph.add_vertex(node)
    for u, v, data in nx_graph.edges(data=True):
        graph.add_edge(u, v, data.get(weight_attr, default_weight))
    return graph
