"""Integrations with external graph libraries."""

from graphtk.lib.nx import (
    adjacency_from_networkx,
    capacities_from_networkx,
    cost_func_from_networkx,
    edges_from_networkx,
    to_networkx,
)

__all__ = [
    "adjacency_from_networkx",
    "capacities_from_networkx",
    "cost_func_from_networkx",
    "edges_from_networkx",
    "to_networkx",
]
