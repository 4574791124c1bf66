"""Input normalization shared by the search algorithms."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional

from graphtk.types import (
    Cost,
    CostFunc,
    NeighborFunc,
    Neighbors,
    NodeID,
    StopCondition,
)

_NO_NEIGHBORS = ()

# Default for optional goal vertices; None is a valid vertex.
NO_NODE: NodeID = object()


def neighbor_fabric(neighbors: Neighbors) -> NeighborFunc:
    """Return a neighbor function for either a callable or an adjacency mapping.

    A vertex missing from an adjacency mapping has no neighbors.
    """
    if isinstance(neighbors, Mapping):
        adjacency = neighbors

        def get_neighbors(node: NodeID):
            return adjacency.get(node, _NO_NEIGHBORS)

        return get_neighbors

    if callable(neighbors):
        return neighbors

    raise TypeError(
        f"neighbors must be a callable or a mapping, got {type(neighbors).__name__}"
    )


def stop_condition_fabric(
    dst_node: NodeID = NO_NODE,
    stop_condition: Optional[StopCondition] = None,
) -> StopCondition:
    """Build the stop predicate from exactly one of a goal or a predicate.

    Raises:
        ValueError: If both or neither are given.
    """
    if stop_condition is not None:
        if dst_node is not NO_NODE:
            raise ValueError("Pass either dst_node or stop_condition, not both.")
        return stop_condition

    if dst_node is NO_NODE:
        raise ValueError("Either dst_node or stop_condition is required.")

    def is_goal(node: NodeID) -> bool:
        return node == dst_node

    return is_goal


def unit_cost(src_node: NodeID, dst_node: NodeID) -> Cost:
    """Cost function of an unweighted graph."""
    return 1


def cost_fabric(cost_func: Optional[CostFunc]) -> CostFunc:
    return unit_cost if cost_func is None else cost_func
