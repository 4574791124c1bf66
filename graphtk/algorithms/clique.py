"""Maximal and maximum clique search (Bron-Kerbosch).

The search is exponential in the worst case; there is no polynomial algorithm
for general graphs. Use it on small to moderate vertex counts only.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Mapping, Set

from graphtk.config import ALGO_CONFIG
from graphtk.logging import get_logger
from graphtk.types import NodeID

logger = get_logger(__name__)


def _bron_kerbosch(
    clique: List[NodeID],
    candidates: Set[NodeID],
    processed: Set[NodeID],
    adjacency: Dict[NodeID, Set[NodeID]],
    rank: Dict[NodeID, int],
) -> Iterator[Set[NodeID]]:
    if not candidates and not processed:
        yield set(clique)
        return

    # Snapshot in adjacency order: candidates shrinks while we iterate
    for vertex in sorted(candidates, key=rank.__getitem__):
        vertex_neighbors = adjacency[vertex]
        yield from _bron_kerbosch(
            clique + [vertex],
            candidates & vertex_neighbors,
            processed & vertex_neighbors,
            adjacency,
            rank,
        )
        candidates.discard(vertex)
        processed.add(vertex)


def iter_maximal_cliques(
    adjacency: Mapping[NodeID, Iterable[NodeID]],
) -> Iterator[Set[NodeID]]:
    """Yield every maximal clique of an undirected graph.

    Args:
        adjacency: Neighbors of each vertex. Must be symmetric (``v`` lists
            ``u`` whenever ``u`` lists ``v``). Self-loops are ignored.

    Yields:
        Sets of vertices that are pairwise adjacent and cannot be extended.
    """
    graph = {
        node: {nbr for nbr in nbrs if nbr != node} for node, nbrs in adjacency.items()
    }
    if len(graph) > ALGO_CONFIG.clique_warn_size:
        logger.warning(
            "Clique search over %d vertices may take exponential time", len(graph)
        )
    rank = {node: i for i, node in enumerate(graph)}
    yield from _bron_kerbosch([], set(graph), set(), graph, rank)


def max_clique(adjacency: Mapping[NodeID, Iterable[NodeID]]) -> Set[NodeID]:
    """Return a largest clique of an undirected graph.

    When several cliques share the maximum size, the first one found is kept.

    Args:
        adjacency: Symmetric neighbors of each vertex.

    Returns:
        The vertices of a maximum clique; empty for an empty graph.
    """
    best: Set[NodeID] = set()
    for clique in iter_maximal_cliques(adjacency):
        if len(clique) > len(best):
            best = clique
    logger.debug("Maximum clique has %d vertices", len(best))
    return best
