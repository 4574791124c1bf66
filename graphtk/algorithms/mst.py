"""Minimum spanning tree construction (Kruskal's algorithm)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from graphtk.logging import get_logger
from graphtk.structures.disjoint_set import DisjointSet
from graphtk.types import Cost, Edge, NodeID, NodePair

logger = get_logger(__name__)

EdgeInput = Union[
    Iterable[Union[Edge, Tuple[NodeID, NodeID, Cost]]],
    Mapping[NodePair, Cost],
]


def _as_edges(edges: EdgeInput) -> List[Edge]:
    if isinstance(edges, Mapping):
        return [Edge(src, dst, weight) for (src, dst), weight in edges.items()]
    return [edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges]


def min_spanning_tree(
    edges: EdgeInput,
    vertices: Optional[Iterable[NodeID]] = None,
) -> List[Edge]:
    """Build a minimum spanning forest of an undirected weighted graph.

    Edges are taken in ascending weight order (stable, so equal weights keep
    their input order) and kept unless both endpoints are already connected.
    A disconnected graph yields a forest with one tree per component.

    Args:
        edges: ``Edge`` objects, ``(src, dst, weight)`` triples, or a mapping
            ``{(src, dst): weight}``.
        vertices: Vertex set. Defaults to every edge endpoint. Supplying it
            lets isolated vertices count as their own components.

    Returns:
        The selected edges in the order they were added.

    Raises:
        KeyError: If an edge endpoint is missing from ``vertices``.
    """
    edge_list = _as_edges(edges)
    if vertices is None:
        vertices = (node for edge in edge_list for node in (edge.src, edge.dst))
    disjoint_set = DisjointSet(vertices)

    tree: List[Edge] = []
    for edge in sorted(edge_list, key=lambda e: e.weight):
        root_src = disjoint_set.find(edge.src)
        root_dst = disjoint_set.find(edge.dst)
        if root_src == root_dst:
            # would close a cycle
            continue
        tree.append(edge)
        disjoint_set.union(root_src, root_dst)

    components = len(disjoint_set) - len(tree)
    if components > 1:
        logger.debug(
            "Graph is disconnected: spanning forest has %d trees", components
        )
    return tree


def complete_graph_mst(
    vertices: Sequence[NodeID],
    weight_func: Callable[[NodeID, NodeID], Cost],
) -> List[Edge]:
    """Build a minimum spanning tree of the complete graph over ``vertices``.

    Evaluates ``weight_func`` for every unordered pair, i.e. O(V^2) calls, so
    it becomes expensive quickly.
    """
    edges = [
        Edge(u, v, weight_func(u, v))
        for i, u in enumerate(vertices)
        for v in vertices[i + 1 :]
    ]
    return min_spanning_tree(edges, vertices)


def total_weight(edges: Iterable[Edge]) -> Cost:
    """Sum the weights of ``edges``."""
    return sum(edge.weight for edge in edges)
