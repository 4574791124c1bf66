"""Data structures backing the graph algorithms."""

from graphtk.structures.disjoint_set import DisjointSet
from graphtk.structures.priority_queue import PriorityQueueWithLookup

__all__ = [
    "DisjointSet",
    "PriorityQueueWithLookup",
]
