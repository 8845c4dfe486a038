# -*- coding: utf-8 -*-
"""
探索で使うヒューリスティック関数をまとめたモジュールです。

どの関数も (graph, vertex, goal) だけで値が決まる純粋関数です。
- zero      : 常に 0（UCS = ダイクストラ法と同じ動きになる）
- euclidean : セル座標どうしの直線距離
- manhattan : セル座標どうしの L1 距離

セルIDを持たない頂点については 0 を返します（過大評価にはならない）。
"""

from __future__ import annotations

import math
from typing import Callable, Dict

from ..graph.model import Graph

# h(graph, vertex, goal) -> 推定残りコスト
HeuristicFn = Callable[[Graph, int, int], float]


def zero_heuristic(graph: Graph, vertex: int, goal: int) -> float:
    return 0.0


def euclidean_heuristic(graph: Graph, vertex: int, goal: int) -> float:
    pv, pg = graph.coords(vertex), graph.coords(goal)
    if pv is None or pg is None:
        return 0.0
    return math.hypot(pv[0] - pg[0], pv[1] - pg[1])


def manhattan_heuristic(graph: Graph, vertex: int, goal: int) -> float:
    pv, pg = graph.coords(vertex), graph.coords(goal)
    if pv is None or pg is None:
        return 0.0
    return float(abs(pv[0] - pg[0]) + abs(pv[1] - pg[1]))


# 表示名 → ヒューリスティック（レポートはこの順で出力する）
HEURISTICS: Dict[str, HeuristicFn] = {
    "UCS": zero_heuristic,
    "A* Euclidean": euclidean_heuristic,
    "A* Manhattan": manhattan_heuristic,
}
