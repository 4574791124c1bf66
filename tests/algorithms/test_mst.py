from graphtk.algorithms.mst import (
    complete_graph_mst,
    min_spanning_tree,
    total_weight,
)
from graphtk.types import Edge


class TestMinSpanningTree:
    def test_square_with_diagonal(self):
        # A-B (1), B-C (2), C-D (1), D-A (3), A-C (2)
        edges = [
            Edge("A", "B", 1),
            Edge("B", "C", 2),
            Edge("C", "D", 1),
            Edge("D", "A", 3),
            Edge("A", "C", 2),
        ]
        tree = min_spanning_tree(edges)
        assert len(tree) == 3
        assert total_weight(tree) == 4
        # stable sort: B-C is listed before A-C
        assert tree == [Edge("A", "B", 1), Edge("C", "D", 1), Edge("B", "C", 2)]

    def test_tuple_and_mapping_inputs(self):
        tuples = [("A", "B", 4), ("B", "C", 1), ("A", "C", 2)]
        mapping = {("A", "B"): 4, ("B", "C"): 1, ("A", "C"): 2}
        assert total_weight(min_spanning_tree(tuples)) == 3
        assert min_spanning_tree(mapping) == min_spanning_tree(tuples)

    def test_disconnected_forest(self):
        edges = [("A", "B", 1), ("C", "D", 2)]
        tree = min_spanning_tree(edges, vertices=["A", "B", "C", "D", "E"])
        assert tree == [Edge("A", "B", 1), Edge("C", "D", 2)]

    def test_no_edges(self):
        assert min_spanning_tree([], vertices=[1, 2, 3]) == []

    def test_complete_graph(self):
        points = [(0, 0), (0, 1), (5, 5), (5, 6)]

        def distance(a, b):
            return abs(a[0] - b[0]) + abs(a[1] - b[1])

        tree = complete_graph_mst(points, distance)
        assert len(tree) == 3
        # two unit edges plus the cheapest bridge (0,1)-(5,5) = 9
        assert total_weight(tree) == 11

    def test_edge_is_value_type(self):
        assert Edge("A", "B", 1) == Edge("A", "B", 1)
        assert len({Edge("A", "B", 1), Edge("A", "B", 1)}) == 1
        assert Edge("A", "B").weight == 1
