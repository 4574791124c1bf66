"""Configuration defaults for graphtk algorithms."""

import math
from dataclasses import dataclass
from typing import Union


@dataclass
class AlgorithmConfig:
    """Tunable defaults shared by the algorithm entry points.

    Every value can be overridden per call through the matching keyword argument.
    """

    # Cost assigned by Floyd-Warshall to pairs with no direct edge. Python numbers
    # never overflow, so infinity is safe to sum. Set a large integer such as
    # 2**62 to keep all-integer cost tables.
    unreachable_cost: Union[int, float] = math.inf

    # Residual capacity at or below this value counts as saturated in max-flow.
    flow_tolerance: float = 1e-10

    # Clique search logs a warning above this many vertices.
    clique_warn_size: int = 64


# Global configuration instance
ALGO_CONFIG = AlgorithmConfig()
