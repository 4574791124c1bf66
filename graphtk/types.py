"""Type aliases and result containers shared by graphtk algorithms.

Graphs are never materialized by the library. Callers describe them with a
neighbor function (or an adjacency mapping) plus optional cost and heuristic
functions; the containers below carry what the algorithms hand back.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import (
    Callable,
    Dict,
    Hashable,
    Iterable,
    List,
    Mapping,
    Set,
    Tuple,
    Union,
)

NodeID = Hashable
Cost = Union[int, float]

NeighborFunc = Callable[[NodeID], Iterable[NodeID]]
Neighbors = Union[NeighborFunc, Mapping[NodeID, Iterable[NodeID]]]
CostFunc = Callable[[NodeID, NodeID], Cost]
HeuristicFunc = Callable[[NodeID, NodeID], Cost]
StopCondition = Callable[[NodeID], bool]

# Directed vertex pair used as a key for cost tables and capacities.
NodePair = Tuple[NodeID, NodeID]


@dataclass(frozen=True)
class Edge:
    """Weighted edge between two vertices.

    Attributes:
        src: Source vertex.
        dst: Destination vertex.
        weight: Edge weight.
    """

    src: NodeID
    dst: NodeID
    weight: Cost = 1


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a single-source search.

    Attributes:
        found: Whether the goal (or stop condition) was reached.
        path: Vertices from the start to the stop vertex, inclusive. Empty when
            ``found`` is False.
        costs: Best known cost from the start per discovered vertex. Hop counts
            for BFS; empty for depth-first searches.
        pred: Predecessor of each discovered vertex except the start.
        reachable: Every vertex discovered from the start. On failure this is
            the full reachable set.
    """

    found: bool
    path: List[NodeID] = field(default_factory=list)
    costs: Dict[NodeID, Cost] = field(default_factory=dict)
    pred: Dict[NodeID, NodeID] = field(default_factory=dict)
    reachable: List[NodeID] = field(default_factory=list)

    @property
    def cost(self) -> Cost:
        """Total cost to the stop vertex, ``math.inf`` if nothing was found."""
        if not self.found:
            return math.inf
        if self.costs:
            return self.costs[self.path[-1]]
        return len(self.path) - 1

    def __bool__(self) -> bool:
        return self.found


@dataclass(frozen=True)
class FlowSummary:
    """Summary of a max-flow computation.

    Attributes:
        total_flow: Maximum flow value achieved.
        edge_flow: Net flow pushed over each input capacity edge.
        residual_cap: Remaining capacity per residual edge, reverse edges included.
        reachable: Vertices reachable from the source in the final residual graph,
            i.e. the source side of the minimum cut.
        min_cut: Input edges leading from the source side to the sink side.
        augmentations: Number of augmenting paths used.
    """

    total_flow: Cost
    edge_flow: Dict[NodePair, Cost]
    residual_cap: Dict[NodePair, Cost]
    reachable: Set[NodeID]
    min_cut: List[NodePair]
    augmentations: int = 0
