"""Graph search and optimization algorithms."""

from graphtk.algorithms.bfs import bfs, find_any_path, flood_fill, has_path
from graphtk.algorithms.clique import iter_maximal_cliques, max_clique
from graphtk.algorithms.floyd_warshall import floyd_warshall
from graphtk.algorithms.max_flow import calc_max_flow, min_cut, unit_capacities
from graphtk.algorithms.mst import complete_graph_mst, min_spanning_tree, total_weight
from graphtk.algorithms.paths import backtrack, path_cost
from graphtk.algorithms.spf import astar, dijkstra, flood_fill_costs

__all__ = [
    "astar",
    "backtrack",
    "bfs",
    "calc_max_flow",
    "complete_graph_mst",
    "dijkstra",
    "find_any_path",
    "flood_fill",
    "flood_fill_costs",
    "floyd_warshall",
    "has_path",
    "iter_maximal_cliques",
    "max_clique",
    "min_cut",
    "min_spanning_tree",
    "path_cost",
    "total_weight",
    "unit_capacities",
]
