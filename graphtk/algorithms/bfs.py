"""Unweighted traversal: breadth-first and depth-first search.

All searches mark a vertex visited when it is queued (or pushed), not when it
is expanded, so no vertex is ever queued twice. The start vertex is always
visited and is checked against the stop condition first.

Neighbors may be given as a function ``node -> iterable of nodes`` or as an
adjacency mapping. Searches over implicit graphs terminate only if the
reachable part is finite or the stop condition is eventually met.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Dict, List, Optional

from graphtk.algorithms.common import (
    NO_NODE,
    neighbor_fabric,
    stop_condition_fabric,
)
from graphtk.algorithms.paths import backtrack
from graphtk.logging import get_logger
from graphtk.types import (
    Cost,
    Neighbors,
    NodeID,
    SearchResult,
    StopCondition,
)

logger = get_logger(__name__)


def bfs(
    src_node: NodeID,
    neighbors: Neighbors,
    dst_node: NodeID = NO_NODE,
    *,
    stop_condition: Optional[StopCondition] = None,
) -> SearchResult:
    """Find a path with the fewest hops.

    Vertices are expanded in non-decreasing hop distance from ``src_node``, so
    the first vertex satisfying the stop condition is reached by a shortest
    path.

    Args:
        src_node: Vertex to search from.
        neighbors: Neighbor function or adjacency mapping.
        dst_node: Goal vertex. Mutually exclusive with ``stop_condition``.
        stop_condition: Predicate marking an acceptable stop vertex.

    Returns:
        SearchResult with hop counts in ``costs``. When the search is
        exhausted, ``found`` is False and ``reachable`` lists every vertex
        reachable from ``src_node``.

    Raises:
        ValueError: If both or neither of ``dst_node`` and ``stop_condition``
            are given.
    """
    is_stop = stop_condition_fabric(dst_node, stop_condition)
    get_neighbors = neighbor_fabric(neighbors)

    costs: Dict[NodeID, Cost] = {src_node: 0}  # doubles as the visited set
    pred: Dict[NodeID, NodeID] = {}
    queue = deque([src_node])

    while queue:
        node = queue.popleft()
        if is_stop(node):
            return SearchResult(
                found=True,
                path=backtrack(pred, node, src_node),
                costs=costs,
                pred=pred,
                reachable=list(costs),
            )

        next_cost = costs[node] + 1
        for neighbor in get_neighbors(node):
            if neighbor in costs:
                continue
            costs[neighbor] = next_cost
            pred[neighbor] = node
            queue.append(neighbor)

    logger.debug(
        "BFS from %r exhausted after visiting %d vertices", src_node, len(costs)
    )
    return SearchResult(found=False, costs=costs, pred=pred, reachable=list(costs))


def find_any_path(
    src_node: NodeID,
    neighbors: Neighbors,
    dst_node: NodeID = NO_NODE,
    *,
    stop_condition: Optional[StopCondition] = None,
    heuristic: Optional[Callable[[NodeID], Cost]] = None,
) -> SearchResult:
    """Find some path using an iterative depth-first search.

    The path is not guaranteed to be the shortest. With ``heuristic``, the
    neighbors of each vertex are pushed so that the one with the lowest
    estimate is explored first (greedy depth-first search).

    Args:
        src_node: Vertex to search from.
        neighbors: Neighbor function or adjacency mapping.
        dst_node: Goal vertex. Mutually exclusive with ``stop_condition``.
        stop_condition: Predicate marking an acceptable stop vertex.
        heuristic: Optional estimate of the remaining cost from a vertex.

    Returns:
        SearchResult without costs. On failure ``reachable`` lists every
        vertex reachable from ``src_node``.
    """
    is_stop = stop_condition_fabric(dst_node, stop_condition)
    get_neighbors = neighbor_fabric(neighbors)

    visited = {src_node}
    order: List[NodeID] = [src_node]
    pred: Dict[NodeID, NodeID] = {}
    stack = [src_node]

    while stack:
        node = stack.pop()
        if is_stop(node):
            return SearchResult(
                found=True,
                path=backtrack(pred, node, src_node),
                pred=pred,
                reachable=order,
            )

        candidates = get_neighbors(node)
        if heuristic is not None:
            # Highest estimate pushed first, so the lowest is popped first
            candidates = sorted(candidates, key=heuristic, reverse=True)

        for neighbor in candidates:
            if neighbor in visited:
                continue
            visited.add(neighbor)
            order.append(neighbor)
            pred[neighbor] = node
            stack.append(neighbor)

    logger.debug(
        "DFS from %r exhausted after visiting %d vertices", src_node, len(order)
    )
    return SearchResult(found=False, pred=pred, reachable=order)


def has_path(
    src_node: NodeID,
    neighbors: Neighbors,
    dst_node: NodeID = NO_NODE,
    *,
    stop_condition: Optional[StopCondition] = None,
) -> bool:
    """Return True if a vertex satisfying the stop condition is reachable."""
    is_stop = stop_condition_fabric(dst_node, stop_condition)
    get_neighbors = neighbor_fabric(neighbors)

    visited = {src_node}
    stack = [src_node]
    while stack:
        node = stack.pop()
        if is_stop(node):
            return True
        for neighbor in get_neighbors(node):
            if neighbor not in visited:
                visited.add(neighbor)
                stack.append(neighbor)
    return False


def flood_fill(src_node: NodeID, neighbors: Neighbors) -> List[NodeID]:
    """Return every vertex reachable from ``src_node``, itself included.

    Vertices are listed in discovery order of a depth-first traversal.
    """
    get_neighbors = neighbor_fabric(neighbors)

    visited = {src_node}
    order = [src_node]
    stack = [src_node]
    while stack:
        node = stack.pop()
        for neighbor in get_neighbors(node):
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                stack.append(neighbor)
    return order
