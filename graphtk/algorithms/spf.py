"""Shortest-path-first (SPF) algorithms: Dijkstra and A*.

Both run the same best-first loop over a ``PriorityQueueWithLookup``. A vertex
is re-queued whenever a strictly cheaper path to it is found; an alternative
path of equal cost is never adopted, so among several shortest paths the first
one discovered is returned.

Notes:
    Edge costs must be non-negative. A* additionally needs an admissible
    heuristic (one that never overestimates the remaining cost) to return an
    optimal path. Neither precondition is checked: violating them still
    terminates on finite graphs but may return a suboptimal path.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple

from graphtk.algorithms.common import (
    NO_NODE,
    cost_fabric,
    neighbor_fabric,
    stop_condition_fabric,
)
from graphtk.algorithms.paths import backtrack
from graphtk.logging import get_logger
from graphtk.structures.priority_queue import PriorityQueueWithLookup
from graphtk.types import (
    Cost,
    CostFunc,
    HeuristicFunc,
    Neighbors,
    NodeID,
    SearchResult,
    StopCondition,
)

logger = get_logger(__name__)


def _best_first(
    src_node: NodeID,
    neighbors: Neighbors,
    cost_func: CostFunc,
    is_stop: Optional[StopCondition],
    estimate: Callable[[NodeID], Cost],
) -> Tuple[NodeID, Dict[NodeID, Cost], Dict[NodeID, NodeID]]:
    """Run the SPF loop.

    Args:
        src_node: Vertex to search from.
        neighbors: Neighbor function or adjacency mapping.
        cost_func: Cost of the edge between two adjacent vertices.
        is_stop: Stop predicate checked on every dequeued vertex. None maps out
            the whole reachable graph.
        estimate: Remaining-cost estimate added to the queue priority
            (constant zero for Dijkstra).

    Returns:
        ``(stop_node, costs, pred)`` where ``stop_node`` is ``NO_NODE``
        when the search was exhausted without meeting the stop condition.
    """
    get_neighbors = neighbor_fabric(neighbors)

    costs: Dict[NodeID, Cost] = {src_node: 0}
    pred: Dict[NodeID, NodeID] = {}
    min_pq = PriorityQueueWithLookup()
    min_pq.enqueue(src_node, estimate(src_node))

    while min_pq:
        node_id = min_pq.dequeue()
        if is_stop is not None and is_stop(node_id):
            return node_id, costs, pred

        src_to_node_cost = costs[node_id]
        for neighbor_id in get_neighbors(node_id):
            src_to_neigh_cost = src_to_node_cost + cost_func(node_id, neighbor_id)
            if neighbor_id in costs and src_to_neigh_cost >= costs[neighbor_id]:
                # not better than the best known path
                continue

            costs[neighbor_id] = src_to_neigh_cost
            pred[neighbor_id] = node_id
            min_pq.update(neighbor_id, src_to_neigh_cost + estimate(neighbor_id))

    return NO_NODE, costs, pred


def _to_result(
    src_node: NodeID,
    stop_node: NodeID,
    costs: Dict[NodeID, Cost],
    pred: Dict[NodeID, NodeID],
) -> SearchResult:
    if stop_node is NO_NODE:
        return SearchResult(found=False, costs=costs, pred=pred, reachable=list(costs))
    return SearchResult(
        found=True,
        path=backtrack(pred, stop_node, src_node),
        costs=costs,
        pred=pred,
        reachable=list(costs),
    )


def _zero_estimate(node: NodeID) -> Cost:
    return 0


def dijkstra(
    src_node: NodeID,
    neighbors: Neighbors,
    cost_func: Optional[CostFunc] = None,
    dst_node: NodeID = NO_NODE,
    *,
    stop_condition: Optional[StopCondition] = None,
) -> SearchResult:
    """Find a cheapest path with Dijkstra's algorithm.

    Args:
        src_node: Vertex to search from.
        neighbors: Neighbor function or adjacency mapping.
        cost_func: Non-negative cost of the edge ``(u, v)``. Defaults to 1.
        dst_node: Goal vertex. Mutually exclusive with ``stop_condition``.
        stop_condition: Predicate marking an acceptable stop vertex. The first
            such vertex to be settled ends the search.

    Returns:
        SearchResult. ``costs`` is final for every settled vertex and an upper
        bound for vertices still queued when the search stopped. On failure
        ``reachable`` lists every vertex reachable from ``src_node``.

    Raises:
        ValueError: If both or neither of ``dst_node`` and ``stop_condition``
            are given.
    """
    is_stop = stop_condition_fabric(dst_node, stop_condition)
    stop_node, costs, pred = _best_first(
        src_node, neighbors, cost_fabric(cost_func), is_stop, _zero_estimate
    )
    if stop_node is NO_NODE:
        logger.debug(
            "Dijkstra from %r exhausted after reaching %d vertices",
            src_node,
            len(costs),
        )
    return _to_result(src_node, stop_node, costs, pred)


def astar(
    src_node: NodeID,
    dst_node: NodeID,
    neighbors: Neighbors,
    cost_func: CostFunc,
    heuristic: HeuristicFunc,
) -> SearchResult:
    """Find a cheapest path with the A* search algorithm.

    The queue priority of a vertex ``v`` is its best known cost plus
    ``heuristic(v, dst_node)``.

    Args:
        src_node: Vertex to search from.
        dst_node: Goal vertex.
        neighbors: Neighbor function or adjacency mapping.
        cost_func: Non-negative cost of the edge ``(u, v)``.
        heuristic: Estimated cost from a vertex to the goal. Must be admissible
            for the returned path to be optimal.

    Returns:
        SearchResult. On failure ``reachable`` lists every vertex reachable
        from ``src_node``.
    """

    def estimate(node: NodeID) -> Cost:
        return heuristic(node, dst_node)

    def is_goal(node: NodeID) -> bool:
        return node == dst_node

    stop_node, costs, pred = _best_first(
        src_node, neighbors, cost_func, is_goal, estimate
    )
    if stop_node is NO_NODE:
        logger.debug(
            "A* from %r to %r exhausted after reaching %d vertices",
            src_node,
            dst_node,
            len(costs),
        )
    return _to_result(src_node, stop_node, costs, pred)


def flood_fill_costs(
    src_node: NodeID,
    neighbors: Neighbors,
    cost_func: Optional[CostFunc] = None,
) -> Tuple[Dict[NodeID, Cost], Dict[NodeID, NodeID]]:
    """Map the cheapest cost to every vertex reachable from ``src_node``.

    Runs Dijkstra without an early exit. With the default unit cost this is
    equivalent to a breadth-first search.

    Returns:
        ``(costs, pred)``: the cost of the cheapest path to each reachable
        vertex and its predecessor on that path. Use
        ``graphtk.algorithms.paths.backtrack`` to turn ``pred`` into a path.
    """
    _, costs, pred = _best_first(
        src_node, neighbors, cost_fabric(cost_func), None, _zero_estimate
    )
    return costs, pred
