"""Support structures reused by the algorithms."""

from graphengine.structures.priority_queue import PriorityQueue
from graphengine.structures.union_find import UnionFind

__all__ = ["PriorityQueue", "UnionFind"]
