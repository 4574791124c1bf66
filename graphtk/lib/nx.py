"""NetworkX graph conversion utilities.

graphtk algorithms take plain adjacency mappings and cost functions. The
helpers below derive those from a NetworkX graph, and turn an adjacency
mapping back into one for drawing or cross-checking.

Example:
    >>> import networkx as nx
    >>> from graphtk.algorithms import dijkstra
    >>> from graphtk.lib.nx import adjacency_from_networkx, cost_func_from_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=1)
    >>> G.add_edge("B", "C", weight=2)
    >>> result = dijkstra(
    ...     "A",
    ...     adjacency_from_networkx(G),
    ...     cost_func_from_networkx(G),
    ...     "C",
    ... )
    >>> result.path, result.cost
    (['A', 'B', 'C'], 3)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Set, Union

import networkx as nx

from graphtk.types import Cost, CostFunc, Edge, NodeID, NodePair

if TYPE_CHECKING:
    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


def adjacency_from_networkx(G: NxGraph) -> Dict[NodeID, Set[NodeID]]:
    """Build an adjacency mapping with every node of ``G`` as a key.

    Directed graphs map each node to its successors; undirected graphs map it
    to its neighbors.
    """
    return {node: set(G.neighbors(node)) for node in G.nodes}


def cost_func_from_networkx(
    G: NxGraph,
    cost_attr: str = "weight",
    default_cost: Cost = 1,
) -> CostFunc:
    """Return a cost function reading ``cost_attr`` from the edges of ``G``.

    For multigraphs the cheapest parallel edge is used. Edges without the
    attribute cost ``default_cost``.

    Raises:
        KeyError: When the returned function is called for a non-adjacent pair.
    """
    multigraph = G.is_multigraph()

    def get_cost(u: NodeID, v: NodeID) -> Cost:
        data = G.get_edge_data(u, v)
        if data is None:
            raise KeyError(f"No edge between '{u}' and '{v}'.")
        if multigraph:
            return min(attr.get(cost_attr, default_cost) for attr in data.values())
        return data.get(cost_attr, default_cost)

    return get_cost


def capacities_from_networkx(
    G: NxGraph,
    capacity_attr: str = "capacity",
    default_capacity: Cost = 1,
) -> Dict[NodePair, Cost]:
    """Build a capacity mapping for ``calc_max_flow``.

    Parallel edges are summed. Undirected edges yield capacity in both
    directions.
    """
    capacities: Dict[NodePair, Cost] = {}
    directed = G.is_directed()
    for u, v, data in G.edges(data=True):
        if u == v:
            continue
        capacity = data.get(capacity_attr, default_capacity)
        capacities[u, v] = capacities.get((u, v), 0) + capacity
        if not directed:
            capacities[v, u] = capacities.get((v, u), 0) + capacity
    return capacities


def edges_from_networkx(
    G: NxGraph,
    weight_attr: str = "weight",
    default_weight: Cost = 1,
) -> List[Edge]:
    """List the edges of ``G`` as ``Edge`` objects, e.g. for ``min_spanning_tree``."""
    return [
        Edge(u, v, data.get(weight_attr, default_weight))
        for u, v, data in G.edges(data=True)
    ]


def to_networkx(
    adjacency: Mapping[NodeID, Any],
    cost_func: Optional[CostFunc] = None,
    *,
    cost_attr: str = "weight",
    directed: bool = True,
) -> NxGraph:
    """Convert an adjacency mapping into a NetworkX graph.

    Args:
        adjacency: Neighbors of each vertex. Every key becomes a node.
        cost_func: If given, each edge gets ``cost_attr = cost_func(u, v)``.
        cost_attr: Edge attribute name for the cost.
        directed: Build a ``DiGraph`` if True, otherwise a ``Graph``.

    Returns:
        A NetworkX ``DiGraph`` or ``Graph``.
    """
    nx_graph = nx.DiGraph() if directed else nx.Graph()
    nx_graph.add_nodes_from(adjacency)
    for u, nbrs in adjacency.items():
        for v in nbrs:
            if cost_func is None:
                nx_graph.add_edge(u, v)
            else:
                nx_graph.add_edge(u, v, **{cost_attr: cost_func(u, v)})
    return nx_graph
