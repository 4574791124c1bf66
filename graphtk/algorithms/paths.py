"""Path reconstruction helpers."""

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Sequence

from graphtk.algorithms.common import cost_fabric
from graphtk.types import Cost, CostFunc, NodeID


def backtrack(
    pred: Mapping[NodeID, NodeID], dst_node: NodeID, src_node: NodeID
) -> List[NodeID]:
    """Follow predecessors from ``dst_node`` back to ``src_node``.

    Args:
        pred: Predecessor of every discovered vertex except ``src_node``.
        dst_node: Vertex to start backtracking from.
        src_node: Vertex the search started at.

    Returns:
        The path from ``src_node`` to ``dst_node``, both inclusive.

    Raises:
        KeyError: If the chain breaks before reaching ``src_node``.
    """
    path = [dst_node]
    node = dst_node
    while node != src_node:
        node = pred[node]
        path.append(node)
    path.reverse()
    return path


def path_edges(path: Sequence[NodeID]) -> Iterable[tuple]:
    """Yield consecutive ``(u, v)`` pairs along ``path``."""
    return zip(path, path[1:])


def path_cost(path: Sequence[NodeID], cost_func: Optional[CostFunc] = None) -> Cost:
    """Sum edge costs along ``path`` (hop count when ``cost_func`` is None)."""
    cost_func = cost_fabric(cost_func)
    return sum(cost_func(u, v) for u, v in path_edges(path))
