"""Path reconstruction from predecessor maps."""

from __future__ import annotations

from typing import Mapping, Optional, Tuple

from graphengine.types.base import VertexID


def reconstruct_path(
    parents: Mapping[VertexID, Optional[VertexID]],
    target: VertexID,
) -> Optional[Tuple[VertexID, ...]]:
    """Walk predecessors back from ``target`` to a vertex without one.

    Args:
        parents: Predecessor map from a traversal or shortest-path run.
        target: Last vertex of the path.

    Returns:
        Vertices from the root of ``target``'s tree to ``target``, or None if
        ``target`` is not in ``parents`` (unreached).

    Raises:
        ValueError: If the predecessor chain loops, which happens when a
            negative cycle corrupted a Bellman-Ford parent map.
    """
    if target not in parents:
        return None

    path = [target]
    seen = {target}
    current = parents[target]
    while current is not None:
        if current in seen:
            raise ValueError(
                f"Predecessor chain of '{target}' loops through '{current}'."
            )
        seen.add(current)
        path.append(current)
        current = parents.get(current)
    path.reverse()
    return tuple(path)
