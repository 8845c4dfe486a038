# -*- coding: utf-8 -*-
"""
探索用の無向重み付きグラフを表すモジュールです。

各頂点には「セルID」という整数を持たせることができ、
これを 10 で割った商と余り（0 方向への切り捨て）として 2次元座標 (x, y) に読み替えます。
ヒューリスティック（ユークリッド距離・マンハッタン距離）は
この座標を使って計算されます。
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Set

from ..config import CELL_BASE
from ..types import Coord, Edge, WeightedEdge


def decode_cell(cell: int) -> Coord:
    """
    セルIDを座標 (x, y) に変換します。

    商は 0 方向への切り捨て、余りは cell と同じ符号になるので、負のセルIDでは
    x, y がともに 0 以下になります（Python の // と % とは異なる）。

    例:
    - 0   -> (0, 0)
    - 45  -> (4, 5)
    - -5  -> (0, -5)
    - -45 -> (-4, -5)
    """
    x = abs(cell) // CELL_BASE
    if cell < 0:
        x = -x
    return x, cell - x * CELL_BASE


class Graph:
    """
    無向重み付きグラフ。

    add_edge は常に両方向の辺を追加します。
    探索中は読み取り専用として扱います。
    """

    def __init__(self) -> None:
        self.vertices: Set[int] = set()
        self.cell_id: Dict[int, int] = {}
        self.adj: Dict[int, List[Edge]] = {}

    def add_vertex(self, vid: int, cell: int) -> None:
        """頂点を登録し、セルIDを記録します（再登録ならセルIDを上書き）。"""
        self.vertices.add(vid)
        self.cell_id[vid] = cell
        self.adj.setdefault(vid, [])

    def add_edge(self, u: int, v: int, weight: float) -> None:
        """
        u - v 間に重み weight の無向辺を追加します。

        端点がまだ登録されていなければ、セルIDなしの頂点として登録します。
        """
        if weight < 0:
            raise ValueError(f"Edge weight must be non-negative: {u}-{v} ({weight})")

        self.adj.setdefault(u, []).append(Edge(v, weight))
        self.adj.setdefault(v, []).append(Edge(u, weight))
        self.vertices.add(u)
        self.vertices.add(v)

    def neighbors(self, vid: int) -> List[Edge]:
        return self.adj.get(vid, [])

    def coords(self, vid: int) -> Optional[Coord]:
        """頂点の座標を返します。セルIDが未登録なら None。"""
        cell = self.cell_id.get(vid)
        if cell is None:
            return None
        return decode_cell(cell)

    def iter_edges(self) -> Iterator[WeightedEdge]:
        """
        無向辺を1回ずつ (u, v, weight) の形で列挙します（u < v）。

        自己ループは含みません。多重辺はそれぞれ1回ずつ返します。
        """
        for u in sorted(self.adj):
            for edge in self.adj[u]:
                if u < edge.to:
                    yield u, edge.to, edge.weight

    def __len__(self) -> int:
        return len(self.vertices)
