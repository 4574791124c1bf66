"""All-pairs shortest path costs (Floyd-Warshall)."""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional

from graphtk.config import ALGO_CONFIG
from graphtk.types import Cost, CostFunc, NodeID, NodePair


def floyd_warshall(
    adjacency: Mapping[NodeID, Iterable[NodeID]],
    cost_func: Optional[CostFunc] = None,
    *,
    unreachable: Optional[Cost] = None,
) -> Dict[NodePair, Cost]:
    """Compute the cheapest cost between every ordered pair of vertices.

    Runs in O(V^3) time and O(V^2) memory, so it suits dense or small graphs.
    Negative cycles are not detected; with one present the result is wrong.

    Args:
        adjacency: Neighbors of each vertex. The keys are the vertex set, so
            vertices without outgoing edges must be present with an empty
            collection.
        cost_func: Cost of the direct edge ``(u, v)`` for ``u != v``. Must return
            the unreachable sentinel for non-adjacent pairs. Defaults to 1 for
            listed edges and the sentinel otherwise.
        unreachable: Sentinel cost for pairs without a path. Defaults to
            ``ALGO_CONFIG.unreachable_cost``.

    Returns:
        Mapping of ``(u, v)`` to the cheapest cost from ``u`` to ``v``. Pairs
        with no path keep the sentinel (or a value at least as large).
    """
    inf = ALGO_CONFIG.unreachable_cost if unreachable is None else unreachable
    vertices = list(adjacency)

    get_cost = cost_func
    if get_cost is None:
        neighbor_sets = {u: set(adjacency[u]) for u in vertices}

        def get_cost(u: NodeID, v: NodeID) -> Cost:
            return 1 if v in neighbor_sets[u] else inf

    costs: Dict[NodePair, Cost] = {}
    for u in vertices:
        for v in vertices:
            costs[u, v] = 0 if u == v else get_cost(u, v)

    # Intermediate vertex in the outer loop: after round k every cost[i, j] is
    # optimal over paths whose inner vertices come from the first k vertices.
    for k in vertices:
        for i in vertices:
            cost_ik = costs[i, k]
            if cost_ik >= inf:
                continue
            for j in vertices:
                alt_cost = cost_ik + costs[k, j]
                if alt_cost < costs[i, j]:
                    costs[i, j] = alt_cost

    return costs
