"""テスト共通のフィクスチャ"""
import pytest

from classic_solver.csp.constraint_graph import ConstraintGraph
from classic_solver.graph.generator import generate_grid_lines
from classic_solver.graph.model import Graph
from classic_solver.graph.parser import parse_search_lines


@pytest.fixture
def triangle_graph():
    """(1,2,1), (2,3,1), (1,3,5) の三角形グラフ（セルは一直線に並べる）"""
    g = Graph()
    g.add_vertex(1, 0)
    g.add_vertex(2, 1)
    g.add_vertex(3, 2)
    g.add_edge(1, 2, 1)
    g.add_edge(2, 3, 1)
    g.add_edge(1, 3, 5)
    return g


@pytest.fixture
def grid_problem():
    """5×6 の単位重み格子（start=1, goal=30）"""
    return parse_search_lines(generate_grid_lines(5, 6))


def make_constraint_graph(edges):
    graph = ConstraintGraph()
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


@pytest.fixture
def triangle_constraints():
    return make_constraint_graph([(1, 2), (2, 3), (1, 3)])
