"""Error taxonomy for graphengine.

Structural problems (an unknown vertex, a precondition the caller asked to
validate) are raised. Expected algorithmic outcomes such as negative cycles
or unreachable targets are reported through result fields instead.
"""

from __future__ import annotations

from typing import Optional, Sequence

from graphengine.types.base import VertexID, Weight


class GraphEngineError(Exception):
    """Base class for all graphengine errors."""


class UnknownVertex(GraphEngineError, KeyError):
    """An operation referenced a vertex that is not in the graph."""

    def __init__(self, vertex: VertexID, role: str = "Vertex") -> None:
        self.vertex = vertex
        self.role = role
        super().__init__(f"{role} '{vertex}' does not exist in the graph.")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class NegativeWeightUnsupported(GraphEngineError, ValueError):
    """Dijkstra was asked to validate weights and found a negative edge."""

    def __init__(self, source: VertexID, target: VertexID, weight: Weight) -> None:
        self.source = source
        self.target = target
        self.weight = weight
        super().__init__(
            f"Edge '{source}' -> '{target}' has negative weight {weight}; "
            "use bellman_ford() for graphs with negative weights."
        )


class NotADag(GraphEngineError, ValueError):
    """Topological sort was invoked on a graph that contains a cycle."""

    def __init__(self, cycle: Optional[Sequence[VertexID]] = None) -> None:
        self.cycle = tuple(cycle) if cycle is not None else None
        if self.cycle:
            rendered = " -> ".join(str(v) for v in self.cycle)
            message = f"Graph is not a DAG; cycle found: {rendered}"
        else:
            message = "Graph is not a DAG."
        super().__init__(message)
