# -*- coding: utf-8 -*-
"""
彩色 CSP の制約グラフを表すモジュールです。

辺 (u, v) は「u と v は異なる色でなければならない」という
2変数間の不等式制約を意味します。
"""

from __future__ import annotations

from typing import Dict, List, Set


class ConstraintGraph:
    """変数の集合と、変数 → 隣接変数集合（対称）のマップ。"""

    def __init__(self) -> None:
        self.variables: Set[int] = set()
        self.neighbors: Dict[int, Set[int]] = {}

    def add_edge(self, u: int, v: int) -> None:
        """u != v 制約を追加し、両端を変数として登録します。u == v なら自己ループ。"""
        self.neighbors.setdefault(u, set()).add(v)
        self.neighbors.setdefault(v, set()).add(u)
        self.variables.add(u)
        self.variables.add(v)

    def neighbors_of(self, var: int) -> List[int]:
        """隣接変数を昇順で返します（走査順を決定的にするため）。"""
        return sorted(self.neighbors.get(var, ()))

    def has_self_loop(self) -> bool:
        return any(v in self.neighbors.get(v, ()) for v in self.variables)

    def __len__(self) -> int:
        return len(self.variables)
