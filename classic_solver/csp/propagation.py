# -*- coding: utf-8 -*-
"""
制約伝播（AC-3）を行うモジュールです。

彩色 CSP の制約は「隣り合う変数は異なる色」だけなので、
値 a が変数 xj 側に支持（b != a となる b）を持たないのは
「xj のドメインが {a} だけになったとき」に限られます。

ドメインから値を削除するたびに (変数, 値) を trail に積むので、
undo_to() で任意のチェックポイントまで正確に巻き戻せます。
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Tuple

from ..types import ColoringState
from .constraint_graph import ConstraintGraph

# 有向アーク (xi, xj)：xi のドメインを xj に対して整合させる
Arc = Tuple[int, int]


def revise(state: ColoringState, xi: int, xj: int) -> bool:
    """
    xi のドメインから、xj 側に支持を持たない値を取り除きます。

    Returns
    -------
    bool
        値を1つ以上削除したら True。
    """
    dx = state.domains.get(xi)
    dy = state.domains.get(xj)
    if dx is None or dy is None:
        return False

    unsupported = [a for a in sorted(dx) if not any(b != a for b in dy)]
    for a in unsupported:
        dx.discard(a)
        state.trail.append((xi, a))

    if unsupported:
        state.stats.revisions += 1
    return bool(unsupported)


def ac3(state: ColoringState, graph: ConstraintGraph, queue: Deque[Arc]) -> bool:
    """
    キュー内のアークを FIFO で処理し、アーク整合性を回復します。

    途中でドメインが空になった変数があれば即座に False を返します。
    （その時点までの削除は trail に残るので、呼び出し側で巻き戻すこと）
    """
    while queue:
        xi, xj = queue.popleft()
        if revise(state, xi, xj):
            if not state.domains[xi]:
                return False
            # xi のドメインが縮んだので、xi を支持に使っていた隣接変数を再検査
            for xk in graph.neighbors_of(xi):
                if xk != xj:
                    queue.append((xk, xi))
    return True


def initial_ac3(state: ColoringState, graph: ConstraintGraph) -> bool:
    """全ての隣接ペアについて両方向のアークを積み、AC-3 を実行します。"""
    queue: Deque[Arc] = deque(
        (xi, xj)
        for xi in sorted(graph.variables)
        for xj in graph.neighbors_of(xi)
    )
    return ac3(state, graph, queue)


def undo_to(state: ColoringState, checkpoint: int) -> None:
    """trail をチェックポイントの長さまで後ろから戻し、削除した値を復元します。"""
    while len(state.trail) > checkpoint:
        var, val = state.trail.pop()
        state.domains[var].add(val)
