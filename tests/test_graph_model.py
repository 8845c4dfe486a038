"""Graph（探索用グラフ）のテスト"""
import pytest

from classic_solver.graph.model import Graph, decode_cell


class TestDecodeCell:
    """セルID → 座標変換のテスト"""

    @pytest.mark.parametrize(
        "cell, expected",
        [(0, (0, 0)), (7, (0, 7)), (45, (4, 5)), (123, (12, 3)),
         (-5, (0, -5)), (-45, (-4, -5)), (-120, (-12, 0))],
    )
    def test_decode(self, cell, expected):
        assert decode_cell(cell) == expected


class TestGraph:
    """Graph の基本操作のテスト"""

    def test_add_edge_is_symmetric(self):
        g = Graph()
        g.add_edge(1, 2, 3.5)

        assert [(e.to, e.weight) for e in g.neighbors(1)] == [(2, 3.5)]
        assert [(e.to, e.weight) for e in g.neighbors(2)] == [(1, 3.5)]
        assert g.vertices == {1, 2}

    def test_edge_endpoints_without_cell(self):
        """辺だけで登録された頂点は座標を持たない"""
        g = Graph()
        g.add_vertex(1, 12)
        g.add_edge(1, 2, 1)

        assert g.coords(1) == (1, 2)
        assert g.coords(2) is None

    def test_negative_weight_rejected(self):
        g = Graph()
        with pytest.raises(ValueError):
            g.add_edge(1, 2, -1)

    def test_iter_edges_once_per_undirected_edge(self, triangle_graph):
        assert sorted(triangle_graph.iter_edges()) == [(1, 2, 1), (1, 3, 5), (2, 3, 1)]

    def test_iter_edges_skips_self_loop_keeps_parallel(self):
        g = Graph()
        g.add_edge(1, 1, 2)
        g.add_edge(1, 2, 1)
        g.add_edge(2, 1, 4)

        assert list(g.iter_edges()) == [(1, 2, 1), (1, 2, 4)]

    def test_unknown_vertex_has_no_neighbors(self):
        assert Graph().neighbors(99) == []
