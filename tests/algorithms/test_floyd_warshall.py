import math

from graphtk.algorithms.floyd_warshall import floyd_warshall
from graphtk.config import ALGO_CONFIG


class TestFloydWarshall:
    def test_unweighted_line(self, line4):
        costs = floyd_warshall(line4)
        assert costs["A", "D"] == 3
        assert costs["B", "D"] == 2
        assert costs["A", "A"] == 0
        assert costs["D", "A"] == math.inf
        assert len(costs) == 16

    def test_weighted_diamond(self, diamond):
        adjacency, weights = diamond

        def cost(u, v):
            return weights.get((u, v), math.inf)

        costs = floyd_warshall(adjacency, cost)
        assert costs["A", "D"] == 2
        assert costs["A", "C"] == 4
        assert costs["C", "D"] == 1
        assert costs["D", "A"] == math.inf

    def test_triangle_all_pairs_one_hop(self, triangle):
        costs = floyd_warshall(triangle)
        for (u, v), cost in costs.items():
            assert cost == (0 if u == v else 1)

    def test_integer_sentinel(self, line4):
        costs = floyd_warshall(line4, unreachable=10**9)
        assert costs["D", "A"] == 10**9
        assert costs["A", "D"] == 3
        assert all(isinstance(cost, int) for cost in costs.values())

    def test_config_sentinel(self, line4, monkeypatch):
        monkeypatch.setattr(ALGO_CONFIG, "unreachable_cost", -1 + 2**62)
        costs = floyd_warshall(line4)
        assert costs["C", "B"] == 2**62 - 1

    def test_shortcut_through_intermediate(self):
        adjacency = {"A": ["B", "C"], "B": ["C"], "C": []}
        weights = {("A", "B"): 1, ("B", "C"): 1, ("A", "C"): 5}
        costs = floyd_warshall(
            adjacency, lambda u, v: weights.get((u, v), math.inf)
        )
        assert costs["A", "C"] == 2

    def test_empty_graph(self):
        assert floyd_warshall({}) == {}
