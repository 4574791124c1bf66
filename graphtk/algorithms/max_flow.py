"""Maximum flow and minimum cut (Edmonds-Karp).

Repeatedly finds a shortest augmenting path with ``bfs`` over the edges that
still have residual capacity, pushes the path's bottleneck capacity along it,
and stops when the sink is no longer reachable. The vertices still reachable
from the source then form the source side of a minimum cut, whose capacity
equals the maximum flow.

Every input edge ``(u, v)`` gets a residual reverse edge ``(v, u)`` so that
flow pushed earlier can be cancelled by a later augmenting path.
"""

from __future__ import annotations

from typing import (
    Dict,
    Iterable,
    List,
    Literal,
    Mapping,
    Optional,
    Set,
    Tuple,
    Union,
    overload,
)

from graphtk.algorithms.bfs import bfs, flood_fill
from graphtk.algorithms.paths import path_edges
from graphtk.config import ALGO_CONFIG
from graphtk.logging import get_logger
from graphtk.types import Cost, FlowSummary, NodeID, NodePair

logger = get_logger(__name__)


def unit_capacities(
    adjacency: Mapping[NodeID, Iterable[NodeID]],
) -> Dict[NodePair, int]:
    """Normalize an unweighted graph into unit capacities in both directions.

    Every listed neighbor pair ``u - v`` becomes the capacities ``(u, v) = 1``
    and ``(v, u) = 1``.
    """
    capacities: Dict[NodePair, int] = {}
    for u, nbrs in adjacency.items():
        for v in nbrs:
            if u == v:
                continue
            capacities[u, v] = 1
            capacities[v, u] = 1
    return capacities


def _residual_graph(
    capacities: Mapping[NodePair, Cost],
) -> Tuple[Dict[NodePair, Cost], Dict[NodeID, Set[NodeID]]]:
    residual: Dict[NodePair, Cost] = {}
    adjacency: Dict[NodeID, Set[NodeID]] = {}
    for (u, v), capacity in capacities.items():
        if capacity < 0:
            raise ValueError(
                f"Capacity of edge ({u!r}, {v!r}) is negative: {capacity}"
            )
        if u == v:
            continue
        residual[u, v] = residual.get((u, v), 0) + capacity
        residual.setdefault((v, u), 0)
        adjacency.setdefault(u, set()).add(v)
        adjacency.setdefault(v, set()).add(u)
    return residual, adjacency


@overload
def calc_max_flow(
    capacities: Mapping[NodePair, Cost],
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: Literal[False] = False,
    tolerance: Optional[float] = None,
) -> Cost: ...


@overload
def calc_max_flow(
    capacities: Mapping[NodePair, Cost],
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: Literal[True],
    tolerance: Optional[float] = None,
) -> Tuple[Cost, FlowSummary]: ...


def calc_max_flow(
    capacities: Mapping[NodePair, Cost],
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: bool = False,
    tolerance: Optional[float] = None,
) -> Union[Cost, Tuple[Cost, FlowSummary]]:
    """Compute the maximum flow from ``src_node`` to ``dst_node``.

    Integer capacities always terminate with an exact integer result. Float
    capacities are supported through ``tolerance``: a residual capacity at or
    below it counts as exhausted.

    Args:
        capacities: Capacity of each directed edge ``(u, v)``. The input is not
            modified. For an undirected or unweighted graph, build it with
            ``unit_capacities``.
        src_node: Source vertex.
        dst_node: Sink vertex.
        return_summary: If True, also return a ``FlowSummary`` describing edge
            flows, residual capacities and the minimum cut.
        tolerance: Residual capacity treated as zero. Defaults to
            ``ALGO_CONFIG.flow_tolerance``.

    Returns:
        The maximum flow value, or ``(flow, FlowSummary)`` with
        ``return_summary=True``.

    Raises:
        ValueError: If a capacity is negative.

    Examples:
        >>> caps = {("s", "a"): 3, ("a", "t"): 2, ("s", "t"): 1}
        >>> calc_max_flow(caps, "s", "t")
        3
    """
    tolerance = ALGO_CONFIG.flow_tolerance if tolerance is None else tolerance
    residual, adjacency = _residual_graph(capacities)

    def residual_neighbors(node: NodeID) -> Iterable[NodeID]:
        for nbr in adjacency.get(node, ()):
            if residual[node, nbr] > tolerance:
                yield nbr

    max_flow: Cost = 0
    augmentations = 0

    # Degenerate case (s == t): conservation forces the flow value to zero.
    while src_node != dst_node:
        result = bfs(src_node, residual_neighbors, dst_node)
        if not result:
            break

        edges = list(path_edges(result.path))
        path_flow = min(residual[edge] for edge in edges)
        for u, v in edges:
            residual[u, v] -= path_flow
            residual[v, u] += path_flow

        max_flow += path_flow
        augmentations += 1

    logger.debug(
        "Max flow %r -> %r: %s after %d augmenting paths",
        src_node,
        dst_node,
        max_flow,
        augmentations,
    )

    if not return_summary:
        return max_flow

    return max_flow, _build_flow_summary(
        max_flow,
        capacities,
        residual,
        src_node,
        flood_fill(src_node, residual_neighbors),
        augmentations,
    )


def _build_flow_summary(
    total_flow: Cost,
    capacities: Mapping[NodePair, Cost],
    residual: Dict[NodePair, Cost],
    src_node: NodeID,
    reachable: List[NodeID],
    augmentations: int,
) -> FlowSummary:
    """Construct a ``FlowSummary`` from the final residual graph."""
    reachable_set = set(reachable)
    reachable_set.add(src_node)

    edge_flow: Dict[NodePair, Cost] = {}
    for (u, v), capacity in capacities.items():
        if u == v:
            continue
        # Capacity moved off (u, v) is flow; flow cancelled back from an
        # opposite input edge (v, u) shows up there instead.
        edge_flow[u, v] = max(capacity - residual[u, v], 0)

    min_cut = [
        (u, v)
        for (u, v), capacity in capacities.items()
        if capacity > 0 and u in reachable_set and v not in reachable_set
    ]

    return FlowSummary(
        total_flow=total_flow,
        edge_flow=edge_flow,
        residual_cap=dict(residual),
        reachable=reachable_set,
        min_cut=min_cut,
        augmentations=augmentations,
    )


def min_cut(
    capacities: Mapping[NodePair, Cost],
    src_node: NodeID,
    dst_node: NodeID,
    *,
    tolerance: Optional[float] = None,
) -> Tuple[Cost, Set[NodeID], List[NodePair]]:
    """Find a minimum ``src_node``-``dst_node`` cut.

    Returns:
        ``(cut_value, source_side, cut_edges)``: the cut capacity (equal to the
        maximum flow), the vertices on the source side, and the input edges
        crossing from the source side to the sink side.
    """
    flow, summary = calc_max_flow(
        capacities, src_node, dst_node, return_summary=True, tolerance=tolerance
    )
    return flow, summary.reachable, summary.min_cut
