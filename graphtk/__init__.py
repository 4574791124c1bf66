"""graphtk: graph search and optimization algorithms.

The algorithms work on implicit graphs: callers pass a start vertex, a
neighbor function (or an adjacency mapping) and, where weighted, a cost
function. Nothing is stored between calls.

Primary API:
    bfs(), find_any_path(), has_path(), flood_fill() - unweighted traversal
    dijkstra(), astar(), flood_fill_costs() - weighted shortest paths
    floyd_warshall() - all-pairs shortest costs
    min_spanning_tree(), complete_graph_mst() - Kruskal spanning forests
    max_clique(), iter_maximal_cliques() - Bron-Kerbosch clique search
    calc_max_flow(), min_cut() - Edmonds-Karp max flow / min cut
    DisjointSet, PriorityQueueWithLookup - supporting data structures

Example:
    from graphtk import dijkstra

    graph = {"A": {"B", "C"}, "B": {"D"}, "C": {"D"}, "D": set()}
    weights = {("A", "B"): 1, ("A", "C"): 4, ("B", "D"): 1, ("C", "D"): 1}

    result = dijkstra("A", graph, lambda u, v: weights[u, v], "D")
    if result:
        print(result.path, result.cost)  # ['A', 'B', 'D'] 2
"""

from __future__ import annotations

from graphtk import logging
from graphtk._version import __version__
from graphtk.algorithms import (
    astar,
    backtrack,
    bfs,
    calc_max_flow,
    complete_graph_mst,
    dijkstra,
    find_any_path,
    flood_fill,
    flood_fill_costs,
    floyd_warshall,
    has_path,
    iter_maximal_cliques,
    max_clique,
    min_cut,
    min_spanning_tree,
    path_cost,
    total_weight,
    unit_capacities,
)
from graphtk.config import ALGO_CONFIG, AlgorithmConfig
from graphtk.structures import DisjointSet, PriorityQueueWithLookup
from graphtk.types import Edge, FlowSummary, SearchResult

__all__ = [
    # Version
    "__version__",
    # Traversal
    "bfs",
    "find_any_path",
    "has_path",
    "flood_fill",
    # Weighted shortest paths
    "dijkstra",
    "astar",
    "flood_fill_costs",
    "floyd_warshall",
    "backtrack",
    "path_cost",
    # Spanning trees
    "min_spanning_tree",
    "complete_graph_mst",
    "total_weight",
    # Cliques
    "max_clique",
    "iter_maximal_cliques",
    # Flows
    "calc_max_flow",
    "min_cut",
    "unit_capacities",
    # Structures
    "DisjointSet",
    "PriorityQueueWithLookup",
    # Types
    "Edge",
    "FlowSummary",
    "SearchResult",
    # Configuration
    "AlgorithmConfig",
    "ALGO_CONFIG",
    # Utilities
    "logging",
]
