# -*- coding: utf-8 -*-
"""
最良優先探索（UCS / A*）を行うモジュールです。

ヒューリスティックが 0 なら UCS（ダイクストラ法）、
そうでなければ A* として動きます。

ざっくり流れ
------------
1. g(start) = 0 とし、(h(start), start, 0) を優先度キューに入れる
2. キューから f 最小（同点なら頂点ID最小）のエントリを取り出す
3. エントリの g が記録済みの最良 g と食い違えば「古いエントリ」なので捨てる
4. ゴールなら親ポインタをたどって経路を復元して終了
5. そうでなければ隣接辺を緩和し、改善した頂点をキューに積み直す

decrease-key は使わず、「重複して積み、古いものは取り出し時に捨てる」
（遅延削除）方式です。カウンタ（展開数・プッシュ数）はこの方式に依存するので、
別のキュー構造に置き換えないこと。
"""

from __future__ import annotations

import heapq
import math
import time
from typing import Dict, List, Tuple

from ..config import (
    RELAXATION_TOLERANCE,
    SEARCH_PROGRESS_LOG_INTERVAL,
    STALE_ENTRY_TOLERANCE,
)
from ..graph.model import Graph
from ..logging_utils import get_logger
from ..types import SearchResult
from .heuristics import HEURISTICS, HeuristicFn

logger = get_logger()


def reconstruct_path(parent: Dict[int, int], start: int, goal: int) -> List[int]:
    """親ポインタをたどって start → goal の頂点列を作ります。"""
    path = [goal]
    node = goal
    while node != start:
        node = parent[node]
        path.append(node)
    path.reverse()
    return path


def search(graph: Graph, start: int, goal: int, heuristic: HeuristicFn) -> SearchResult:
    """
    start から goal への最小コスト経路を探索します。

    Parameters
    ----------
    graph : Graph
        探索対象のグラフ（変更しない）。
    start, goal : int
        グラフに含まれる頂点ID。
    heuristic : callable
        h(graph, vertex, goal) -> float。

    Returns
    -------
    SearchResult
        到達不能のときも cost / path が None の結果を返し、カウンタは埋めます。
    """
    g_cost: Dict[int, float] = {start: 0.0}
    parent: Dict[int, int] = {}

    # 優先度付きキュー：(f, vertex, g)。f が同じなら頂点IDの小さい方が先
    frontier: List[Tuple[float, int, float]] = []
    heapq.heappush(frontier, (heuristic(graph, start, goal), start, 0.0))
    pushes = 1
    expanded = 0
    max_frontier = 0

    t0 = time.perf_counter()

    while frontier:
        max_frontier = max(max_frontier, len(frontier))
        _, u, g_u = heapq.heappop(frontier)

        # より安い経路が後から見つかったエントリは捨てる（展開数には数えない）
        if abs(g_u - g_cost.get(u, math.inf)) > STALE_ENTRY_TOLERANCE:
            continue

        expanded += 1

        if expanded % SEARCH_PROGRESS_LOG_INTERVAL == 0:
            logger.info(
                "[search] expanded = %d, pushes = %d, frontier_size = %d",
                expanded, pushes, len(frontier),
            )

        if u == goal:
            return SearchResult(
                cost=g_cost[goal],
                path=reconstruct_path(parent, start, goal),
                expanded=expanded,
                pushes=pushes,
                max_frontier=max_frontier,
                runtime_sec=time.perf_counter() - t0,
            )

        for edge in graph.neighbors(u):
            tentative = g_u + edge.weight
            if tentative + RELAXATION_TOLERANCE < g_cost.get(edge.to, math.inf):
                g_cost[edge.to] = tentative
                parent[edge.to] = u
                f = tentative + heuristic(graph, edge.to, goal)
                heapq.heappush(frontier, (f, edge.to, tentative))
                pushes += 1

    # キューが空になった = 到達不能
    return SearchResult(
        cost=None,
        path=None,
        expanded=expanded,
        pushes=pushes,
        max_frontier=max_frontier,
        runtime_sec=time.perf_counter() - t0,
    )


def run_search_modes(graph: Graph, start: int, goal: int) -> Dict[str, SearchResult]:
    """
    UCS / A* Euclidean / A* Manhattan の3モードを順番に実行します。

    グラフは読み取り専用なので、同じグラフに対して続けて呼んでも問題ありません。
    """
    results: Dict[str, SearchResult] = {}
    for mode, heuristic in HEURISTICS.items():
        result = search(graph, start, goal, heuristic)
        logger.info(
            "Mode %s: cost=%s, expanded=%d, pushes=%d, max_frontier=%d",
            mode,
            "NO PATH" if result.cost is None else f"{result.cost:.6f}",
            result.expanded, result.pushes, result.max_frontier,
        )
        results[mode] = result
    return results
