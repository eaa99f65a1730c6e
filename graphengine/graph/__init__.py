"""Graph store and conversion helpers.

This package provides the adjacency-list `Graph` with its `VertexMap`
id/index table, and networkx interop in `convert`.
"""

from graphengine.graph.store import Graph, VertexMap

__all__ = ["Graph", "VertexMap"]
