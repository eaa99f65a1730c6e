"""Base aliases and enums shared by the graph store and the algorithms."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Hashable, Tuple, Union

#: Opaque, hashable vertex identifier supplied by the caller.
VertexID = Hashable

#: Numeric edge weight (distance, cost, latency, ...).
Weight = Union[int, float]

#: Distance of a vertex that was never reached.
INF: float = math.inf

#: A logical edge as exposed by the public API: (source, target, weight).
EdgeTuple = Tuple[VertexID, VertexID, Weight]


class Color(IntEnum):
    """Three-state DFS coloring of a vertex."""

    #: Not discovered yet.
    WHITE = 0
    #: Discovered and still on the current exploration path.
    GRAY = 1
    #: Discovered and fully explored.
    BLACK = 2


class DfsStrategy(IntEnum):
    """How depth-first search keeps its frames.

    Both strategies visit neighbors in adjacency order and therefore produce
    identical colorings, events and finishing orders.
    """

    #: Explicit stack of (vertex, next-neighbor-position) frames.
    ITERATIVE = 1
    #: Python call stack; bounded by ``sys.getrecursionlimit()``.
    RECURSIVE = 2

    @classmethod
    def from_string(cls, value: str) -> "DfsStrategy":
        """Parse a case-insensitive strategy name.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid dfs strategy '{value}'. Valid values are: {valid}"
            ) from None


class DfsEvent(IntEnum):
    """Events emitted by the DFS engine.

    Every event is a ``(DfsEvent, u, v)`` triple:

    - ``DISCOVER``: ``u`` turned GRAY; ``v`` is its DFS parent or ``None``.
    - ``BACK_EDGE``: edge ``u -> v`` where ``v`` is GRAY.
    - ``NONTREE_EDGE``: edge ``u -> v`` where ``v`` is already BLACK.
    - ``FINISH``: ``u`` turned BLACK; ``v`` is its DFS parent or ``None``.
    """

    DISCOVER = 1
    BACK_EDGE = 2
    NONTREE_EDGE = 3
    FINISH = 4


def is_valid_weight(weight: object) -> bool:
    """Return True for finite real numbers (``bool`` excluded)."""
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        return False
    # Ints are exact; isfinite would overflow on huge ones
    return isinstance(weight, int) or math.isfinite(weight)
