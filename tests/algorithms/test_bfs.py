import logging

import pytest

from graphtk.algorithms.bfs import bfs, find_any_path, flood_fill, has_path


class TestBFS:
    def test_bfs_triangle_takes_direct_edge(self, triangle):
        result = bfs("A", triangle, "C")
        assert result.found
        assert result.path == ["A", "C"]
        assert result.cost == 1

    def test_bfs_line(self, line4):
        result = bfs("A", line4, "D")
        assert result.path == ["A", "B", "C", "D"]
        assert result.costs == {"A": 0, "B": 1, "C": 2, "D": 3}
        assert result.pred == {"B": "A", "C": "B", "D": "C"}

    def test_bfs_start_is_goal(self, line4):
        result = bfs("B", line4, "B")
        assert result.path == ["B"]
        assert result.cost == 0

    def test_bfs_unreachable_exposes_reachable_set(self, line4):
        result = bfs("C", line4, "A")
        assert not result
        assert result.path == []
        assert set(result.reachable) == {"C", "D"}

    def test_bfs_stop_condition(self, grid5):
        _, neighbors = grid5
        result = bfs((0, 0), neighbors, stop_condition=lambda cell: cell[1] == 4)
        assert result.found
        assert result.path[0] == (0, 0)
        assert result.path[-1][1] == 4
        # around the wall: (0,0) -> (0,2) -> (2,2) -> (2,4)
        assert result.cost == 6

    def test_bfs_neighbor_function(self):
        # Implicit unbounded graph, bounded by the stop condition
        result = bfs(0, lambda n: (n + 1, n * 2), 10)
        assert result.path == [0, 1, 2, 4, 5, 10]

    def test_bfs_never_enqueues_twice(self):
        calls = []

        def neighbors(node):
            calls.append(node)
            return {"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []}[node]

        result = bfs("A", neighbors, "Z")
        assert not result
        assert sorted(calls) == ["A", "B", "C", "D"]

    def test_bfs_missing_key_has_no_neighbors(self):
        result = bfs("A", {"A": ["B"]}, "C")
        assert not result
        assert result.reachable == ["A", "B"]

    def test_bfs_requires_exactly_one_goal(self, line4):
        with pytest.raises(ValueError):
            bfs("A", line4)
        with pytest.raises(ValueError):
            bfs("A", line4, "D", stop_condition=lambda n: True)

    def test_bfs_rejects_bad_neighbors(self):
        with pytest.raises(TypeError):
            bfs("A", 42, "B")

    def test_bfs_none_is_a_valid_goal(self):
        result = bfs("A", {"A": [None]}, None)
        assert result.found
        assert result.path == ["A", None]


class TestDFS:
    def test_find_any_path(self, triangle):
        result = find_any_path("A", triangle, "B")
        assert result.found
        assert result.path[0] == "A" and result.path[-1] == "B"
        for u, v in zip(result.path, result.path[1:]):
            assert v in triangle[u]

    def test_find_any_path_fails_with_empty_path(self, line4):
        result = find_any_path("D", line4, "A")
        assert not result
        assert result.path == []
        assert result.reachable == ["D"]

    def test_find_any_path_greedy(self):
        adjacency = {"S": ["A", "B"], "A": ["G"], "B": ["G"], "G": []}
        estimates = {"S": 2, "A": 5, "B": 1, "G": 0}
        result = find_any_path("S", adjacency, "G", heuristic=estimates.__getitem__)
        assert result.path == ["S", "B", "G"]

        estimates["A"] = 0
        result = find_any_path("S", adjacency, "G", heuristic=estimates.__getitem__)
        assert result.path == ["S", "A", "G"]

    def test_has_path(self, line4):
        assert has_path("A", line4, "D")
        assert not has_path("D", line4, "A")
        assert has_path("A", line4, stop_condition=lambda n: n in "CD")

    def test_flood_fill(self, two_cliques):
        assert set(flood_fill("A", two_cliques)) == set("ABCDEF")
        assert flood_fill("G", two_cliques) == ["G"]

    def test_flood_fill_starts_with_source(self, line4):
        assert flood_fill("B", line4) == ["B", "C", "D"]


class TestDFSVisitedAtPush:
    """Depth-first searches mark a vertex visited when it is pushed."""

    # B and C both lead to D, and D leads back to A
    ADJACENCY = {"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": ["A"]}

    def _recording_neighbors(self, calls):
        def neighbors(node):
            calls.append(node)
            return self.ADJACENCY[node]

        return neighbors

    def test_find_any_path_expands_each_vertex_once(self):
        calls = []
        result = find_any_path("A", self._recording_neighbors(calls), "Z")
        assert not result
        assert sorted(calls) == ["A", "B", "C", "D"]
        assert sorted(result.reachable) == ["A", "B", "C", "D"]

    def test_find_any_path_greedy_expands_each_vertex_once(self):
        calls = []
        estimates = {"A": 3, "B": 2, "C": 1, "D": 0}
        result = find_any_path(
            "A",
            self._recording_neighbors(calls),
            "Z",
            heuristic=estimates.__getitem__,
        )
        assert not result
        assert sorted(calls) == ["A", "B", "C", "D"]

    def test_flood_fill_expands_each_vertex_once(self):
        calls = []
        reached = flood_fill("A", self._recording_neighbors(calls))
        assert sorted(calls) == ["A", "B", "C", "D"]
        assert sorted(reached) == ["A", "B", "C", "D"]
        assert len(reached) == len(set(reached))

    def test_has_path_expands_each_vertex_once(self):
        calls = []
        assert not has_path("A", self._recording_neighbors(calls), "Z")
        assert sorted(calls) == ["A", "B", "C", "D"]

    def test_none_is_a_valid_goal(self):
        adjacency = {"A": ["B"], "B": [None]}
        assert find_any_path("A", adjacency, None).path == ["A", "B", None]
        assert has_path("A", adjacency, None)
        assert not has_path("B", {"B": []}, None)

    def test_find_any_path_logs_exhaustion(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="graphtk"):
            result = find_any_path("A", {"A": ["B"]}, "Z")
        assert not result
        assert any(
            record.name == "graphtk.algorithms.bfs"
            and "DFS from 'A' exhausted" in record.getMessage()
            for record in caplog.records
        )
