"""最良優先探索（UCS / A*）のテスト"""
import random

import pytest

from classic_solver.graph.model import Graph
from classic_solver.search.engine import run_search_modes, search
from classic_solver.search.heuristics import (
    HEURISTICS,
    euclidean_heuristic,
    manhattan_heuristic,
    zero_heuristic,
)


def random_weight_grid(rows, cols, seed):
    """重み 1〜3 のランダム格子（隣接セル間の距離は 1 なので両ヒューリスティックとも無矛盾）"""
    rng = random.Random(seed)
    g = Graph()
    for x in range(rows):
        for y in range(cols):
            g.add_vertex(x * cols + y + 1, x * 10 + y)
    for x in range(rows):
        for y in range(cols):
            vid = x * cols + y + 1
            if y + 1 < cols:
                g.add_edge(vid, vid + 1, rng.randint(1, 3))
            if x + 1 < rows:
                g.add_edge(vid, vid + cols, rng.randint(1, 3))
    return g


class TestTriangle:
    """三角形グラフでの探索のテスト"""

    def test_ucs_takes_two_hop_path(self, triangle_graph):
        result = search(triangle_graph, 1, 3, zero_heuristic)

        assert result.cost == pytest.approx(2.0)
        assert result.path == [1, 2, 3]
        assert result.expanded == 3
        assert result.pushes == 4
        assert result.max_frontier == 2
        assert result.found

    def test_astar_same_cost(self, triangle_graph):
        for heuristic in (euclidean_heuristic, manhattan_heuristic):
            result = search(triangle_graph, 1, 3, heuristic)
            assert result.cost == pytest.approx(2.0)
            assert result.path == [1, 2, 3]

    def test_start_equals_goal(self, triangle_graph):
        result = search(triangle_graph, 2, 2, zero_heuristic)

        assert result.cost == 0.0
        assert result.path == [2]
        assert result.expanded == 1
        assert result.pushes == 1

    def test_inadmissible_heuristic_is_not_detected(self, triangle_graph):
        """過大評価するヒューリスティックでは最適でないコストがそのまま返る"""

        def overestimate(graph, vertex, goal):
            return 100.0 if vertex == 2 else 0.0

        result = search(triangle_graph, 1, 3, overestimate)
        assert result.cost == pytest.approx(5.0)
        assert result.path == [1, 3]


class TestLazyDeletion:
    """古いエントリの遅延削除のテスト"""

    def test_stale_entry_is_not_expanded(self):
        g = Graph()
        g.add_edge(1, 2, 5)
        g.add_edge(1, 3, 1)
        g.add_edge(3, 2, 1)
        g.add_edge(2, 4, 10)

        result = search(g, 1, 4, zero_heuristic)

        assert result.cost == pytest.approx(12.0)
        assert result.path == [1, 3, 2, 4]
        # 2 は2回積まれるが、展開は1回だけ
        assert result.pushes == 5
        assert result.expanded == 4
        assert result.max_frontier == 2

    def test_graph_is_not_mutated(self, triangle_graph):
        before = {v: list(edges) for v, edges in triangle_graph.adj.items()}
        search(triangle_graph, 1, 3, euclidean_heuristic)
        assert triangle_graph.adj == before


class TestTolerances:
    """古さ判定（1e-9）と緩和判定（1e-12）の許容誤差のテスト"""

    @staticmethod
    def near_equal_graph(shortcut):
        g = Graph()
        g.add_edge(1, 2, 1.0)
        g.add_edge(1, 3, 0.5)
        g.add_edge(3, 2, shortcut)
        return g

    def test_near_equal_duplicate_is_expanded_again(self):
        """g の差が 1e-9 以内の重複エントリは古いとみなされず、もう一度展開される"""
        g = self.near_equal_graph(0.5 - 1e-10)
        g.add_edge(2, 4, 1.0)

        result = search(g, 1, 4, zero_heuristic)

        assert result.cost == pytest.approx(2.0 - 1e-10, abs=1e-15)
        assert result.path == [1, 3, 2, 4]
        # 頂点 2 は 2回積まれ、2回とも展開される
        assert result.pushes == 5
        assert result.expanded == 5
        assert result.max_frontier == 2

    def test_tiny_improvement_is_not_relaxed(self):
        """1e-12 より小さい改善では g を更新せず、積み直しもしない"""
        g = self.near_equal_graph(0.5 - 1e-13)

        result = search(g, 1, 2, zero_heuristic)

        assert result.cost == 1.0
        assert result.path == [1, 2]
        assert result.pushes == 3
        assert result.expanded == 3

    def test_improvement_above_tolerance_is_relaxed(self):
        g = self.near_equal_graph(0.5 - 1e-11)

        result = search(g, 1, 2, zero_heuristic)

        assert result.cost == pytest.approx(1.0 - 1e-11, abs=1e-15)
        assert result.cost < 1.0
        assert result.path == [1, 3, 2]
        assert result.pushes == 4
        assert result.expanded == 3


class TestUnreachable:
    """到達不能な場合のテスト"""

    def test_no_path_keeps_counters(self):
        g = Graph()
        g.add_vertex(1, 0)
        g.add_vertex(2, 1)
        g.add_vertex(3, 2)
        g.add_edge(1, 3, 1)

        result = search(g, 1, 2, zero_heuristic)

        assert result.cost is None
        assert result.path is None
        assert not result.found
        assert result.expanded == 2
        assert result.pushes == 2
        assert result.max_frontier == 1
        assert result.runtime_sec >= 0.0


class TestGrid:
    """5×6 格子での探索のテスト"""

    def test_costs_and_expansions(self, grid_problem):
        results = run_search_modes(grid_problem.graph, grid_problem.start, grid_problem.goal)

        ucs = results["UCS"]
        assert ucs.cost == pytest.approx(9.0)
        assert ucs.path[0] == 1 and ucs.path[-1] == 30
        assert len(ucs.path) == 10

        for mode in ("A* Euclidean", "A* Manhattan"):
            assert results[mode].cost == pytest.approx(9.0)
            assert results[mode].expanded <= ucs.expanded

    def test_counter_invariants(self, grid_problem):
        results = run_search_modes(grid_problem.graph, grid_problem.start, grid_problem.goal)
        for result in results.values():
            assert result.pushes >= result.expanded
            assert result.max_frontier <= result.pushes

    def test_deterministic(self, grid_problem):
        g, s, d = grid_problem.graph, grid_problem.start, grid_problem.goal
        for heuristic in HEURISTICS.values():
            a = search(g, s, d, heuristic)
            b = search(g, s, d, heuristic)
            assert (a.path, a.cost, a.expanded, a.pushes, a.max_frontier) == (
                b.path, b.cost, b.expanded, b.pushes, b.max_frontier
            )


class TestOptimality:
    """無矛盾なヒューリスティックなら UCS と A* のコストが一致すること"""

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_costs_match_ucs(self, seed):
        g = random_weight_grid(6, 7, seed)
        results = run_search_modes(g, 1, 42)

        ucs_cost = results["UCS"].cost
        assert results["A* Euclidean"].cost == pytest.approx(ucs_cost)
        assert results["A* Manhattan"].cost == pytest.approx(ucs_cost)
        for result in results.values():
            assert result.pushes >= result.expanded
            assert result.max_frontier <= result.pushes
