# -*- coding: utf-8 -*-
"""
classic_solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

# 平面上の座標 (x, y)
Coord = Tuple[int, int]

# 無向辺 (u, v, weight)
WeightedEdge = Tuple[int, int, float]


@dataclass(frozen=True)
class Edge:
    """隣接リストの1要素（行き先と重み）です。"""

    to: int
    weight: float


@dataclass(frozen=True)
class SearchResult:
    """
    1回の探索（UCS / A*）の結果を表すクラスです。

    Attributes
    ----------
    cost : float or None
        ゴールまでの最小コスト。到達不能なら None。
    path : list of int or None
        start から goal までの頂点列（両端を含む）。到達不能なら None。
    expanded : int
        展開した頂点数（古いエントリは数えない）。
    pushes : int
        優先度キューへ積んだ回数（start を含む）。
    max_frontier : int
        観測されたフロンティアの最大サイズ。
    runtime_sec : float
        探索ループの経過時間（秒）。
    """

    cost: Optional[float]
    path: Optional[List[int]]
    expanded: int
    pushes: int
    max_frontier: int
    runtime_sec: float

    @property
    def found(self) -> bool:
        """ゴールに到達できたかどうか。"""
        return self.cost is not None


@dataclass(frozen=True)
class AdmissibilityReport:
    """
    各辺の重みと座標距離を比較した「許容性チェック」の結果です。

    euclidean_ok / manhattan_ok が False のとき、
    そのヒューリスティックはこのグラフでは過大評価しうることを意味します。
    """

    euclidean_ok: bool
    manhattan_ok: bool
    edges_checked: int
    euclidean_violations: List[WeightedEdge] = field(default_factory=list)
    manhattan_violations: List[WeightedEdge] = field(default_factory=list)


@dataclass
class ColoringStats:
    """彩色探索の統計情報です。"""

    assignments: int = 0  # 値を仮割り当てした回数
    backtracks: int = 0   # 仮割り当てを取り消した回数
    revisions: int = 0    # revise で値を1つ以上削除した回数


@dataclass
class ColoringState:
    """
    彩色 CSP の探索中の状態を表すクラスです。

    solve 呼び出しごとに新しく作られ、その呼び出しだけが所有します。

    Attributes
    ----------
    domains : dict[int, set[int]]
        各変数が取り得る色の集合。
    assignment : dict[int, int]
        変数 → 確定済みの色。
    trail : list of (int, int)
        ドメインから削除した (変数, 値) の履歴。末尾から戻せば復元できる。
    stats : ColoringStats
        探索の統計情報。
    """

    domains: Dict[int, Set[int]]
    assignment: Dict[int, int] = field(default_factory=dict)
    trail: List[Tuple[int, int]] = field(default_factory=list)
    stats: ColoringStats = field(default_factory=ColoringStats)
