"""Register the sample graph fixtures for algorithm tests."""

from sample_graphs import (  # noqa: F401
    clrs_flow,
    diamond,
    grid5,
    line4,
    triangle,
    two_cliques,
)
