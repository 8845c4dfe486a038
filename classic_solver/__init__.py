# -*- coding: utf-8 -*-
"""
classic_solver パッケージの入口となるモジュールです。

CLI や api_proto/local_api.py などから:

    from classic_solver import run_search, run_coloring

と呼び出されることを想定しています。

- run_search   : 許容性診断 → UCS / A* Euclidean / A* Manhattan の3モード探索
- run_coloring : 自己ループ検査 → 初期 AC-3 → MRV / LCV バックトラック
"""

from __future__ import annotations

from typing import Dict, Tuple

from .csp.constraint_graph import ConstraintGraph
from .csp.search import run_coloring, solve_coloring
from .graph.model import Graph
from .graph.parser import (
    ColoringProblem,
    SearchProblem,
    parse_coloring_file,
    parse_coloring_lines,
    parse_search_file,
    parse_search_lines,
)
from .logging_utils import get_logger
from .search.admissibility import check_admissibility
from .search.engine import run_search_modes, search
from .types import AdmissibilityReport, ColoringStats, SearchResult

logger = get_logger()

__all__ = [
    "AdmissibilityReport",
    "ColoringProblem",
    "ColoringStats",
    "ConstraintGraph",
    "Graph",
    "SearchProblem",
    "SearchResult",
    "check_admissibility",
    "parse_coloring_file",
    "parse_coloring_lines",
    "parse_search_file",
    "parse_search_lines",
    "run_coloring",
    "run_search",
    "search",
    "solve_coloring",
]


def run_search(
    graph: Graph,
    start: int,
    goal: int,
) -> Tuple[AdmissibilityReport, Dict[str, SearchResult]]:
    """
    探索のメイン関数です。

    1. グラフ全体のヒューリスティック許容性を診断
    2. 3つのモードで start → goal を探索
    """
    logger.info("=== run_search() START ===")
    logger.info("Graph: %d vertices, start=%d, goal=%d", len(graph), start, goal)

    report = check_admissibility(graph)
    results = run_search_modes(graph, start, goal)

    logger.info("=== run_search() END ===")
    return report, results
