# -*- coding: utf-8 -*-
"""
彩色 CSP のバックトラック探索を行うモジュールです。

ざっくり流れ
------------
1. 自己ループがあれば即失敗（どんな色数でも充足不能）
2. 全体に AC-3 をかけ、解に絶対に使われない値を落とす
3. MRV（残り候補が最少の変数、同点なら ID 最小）で変数を選ぶ
4. LCV（未割り当ての隣接変数のドメインとの衝突数が少ない順、同点なら値の小さい順）
   で値を試す
5. 値を割り当てたら (隣接変数, 変数) のアークで AC-3 を再実行
6. 失敗したら trail をチェックポイントまで巻き戻して次の値へ

再帰の代わりに「選択点（ChoicePoint）のスタック」で実装しているので、
変数が多くても Python の再帰上限に引っかかりません。
試す順序と巻き戻しの位置は再帰版と全く同じです。
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..logging_utils import get_logger
from ..types import ColoringState, ColoringStats
from .constraint_graph import ConstraintGraph
from .domains import build_initial_domains
from .propagation import ac3, initial_ac3, undo_to

logger = get_logger()


@dataclass
class ChoicePoint:
    """
    1つの変数について「どの値まで試したか」を覚えておく選択点です。

    checkpoint は、この変数の値を試し始める前の trail の長さです。
    """

    var: int
    values: List[int]
    checkpoint: int
    next_index: int = 0


def select_mrv(state: ColoringState, graph: ConstraintGraph) -> Optional[int]:
    """
    次に割り当てる変数を選びます（MRV）。

    - 未割り当ての変数のうち、ドメインサイズが最も小さいもの
    - 同じなら、変数IDの小さいもの
    """
    candidates = [v for v in graph.variables if v not in state.assignment]
    if not candidates:
        return None
    return min(candidates, key=lambda v: (len(state.domains[v]), v))


def order_lcv(state: ColoringState, graph: ConstraintGraph, var: int) -> List[int]:
    """
    LCV（Least Constraining Value）で値の順序付けを行う。

    各値について「未割り当ての隣接変数のうち、現在のドメインにその値を含むもの」
    の数を数え、少ない順（同点なら値の小さい順）に並べます。
    仮割り当て後の前方検査はしない、現在のドメインに対する静的な数え上げです。
    """
    open_neighbors = [
        nb for nb in graph.neighbors_of(var) if nb not in state.assignment
    ]

    scored: List[Tuple[int, int]] = []
    for val in state.domains[var]:
        conflicts = sum(1 for nb in open_neighbors if val in state.domains[nb])
        scored.append((conflicts, val))

    scored.sort()
    return [val for _, val in scored]


def consistent_assign(state: ColoringState, graph: ConstraintGraph, var: int, val: int) -> bool:
    """割り当て済みの隣接変数に、同じ色を持つものがいなければ True。"""
    for nb in graph.neighbors_of(var):
        if state.assignment.get(nb) == val:
            return False
    return True


def assign(state: ColoringState, var: int, val: int) -> None:
    """var = val を記録し、var のドメインから他の値を（trail に積みつつ）取り除く。"""
    state.assignment[var] = val
    dom = state.domains[var]
    for other in sorted(dom):
        if other != val:
            dom.discard(other)
            state.trail.append((var, other))
    state.stats.assignments += 1


def unassign(state: ColoringState, var: int, checkpoint: int) -> None:
    """var の割り当てを外し、trail をチェックポイントまで巻き戻す。"""
    del state.assignment[var]
    undo_to(state, checkpoint)
    state.stats.backtracks += 1


def _try_next_value(state: ColoringState, graph: ConstraintGraph, cp: ChoicePoint) -> bool:
    """
    選択点 cp の残りの値を LCV 順に試し、AC-3 を通過した値があれば
    割り当てたまま True を返します。全て失敗したら False。
    """
    while cp.next_index < len(cp.values):
        val = cp.values[cp.next_index]
        cp.next_index += 1

        if not consistent_assign(state, graph, cp.var, val):
            continue

        assign(state, cp.var, val)

        # var を固定した影響を隣接変数へ伝播
        queue = deque((nb, cp.var) for nb in graph.neighbors_of(cp.var))
        if ac3(state, graph, queue):
            return True

        unassign(state, cp.var, cp.checkpoint)

    return False


def backtrack(state: ColoringState, graph: ConstraintGraph) -> bool:
    """
    MRV / LCV 順のバックトラック探索を行います。

    成功したら state.assignment に完全な割り当てが残り True を返します。
    """
    stack: List[ChoicePoint] = []
    descend = True

    while True:
        if descend:
            if len(state.assignment) == len(graph.variables):
                return True

            var = select_mrv(state, graph)
            if var is None:
                return False

            stack.append(
                ChoicePoint(
                    var=var,
                    values=order_lcv(state, graph, var),
                    checkpoint=len(state.trail),
                )
            )

        if _try_next_value(state, graph, stack[-1]):
            descend = True
            continue

        # この変数の値は全滅 → 1つ上の変数の割り当てを取り消して次の値へ
        stack.pop()
        if not stack:
            return False

        parent = stack[-1]
        unassign(state, parent.var, parent.checkpoint)
        descend = False


def run_coloring(
    graph: ConstraintGraph,
    colors: int,
) -> Tuple[Optional[Dict[int, int]], ColoringStats]:
    """
    彩色 CSP を解き、(割り当て or None, 統計情報) を返します。

    状態（ドメイン・割り当て・trail）は呼び出しごとに新しく作るので、
    同じグラフに対して何度呼んでも互いに影響しません。

    ドメインは自己ループの判定より先に作るので、colors < 1 は自己ループの有無に
    かかわらず ValueError になります（失敗として None を返すことはありません）。
    """
    state = ColoringState(domains=build_initial_domains(graph, colors))
    logger.info("Run coloring: Vars=%d, Colors=%d", len(graph.variables), colors)

    if graph.has_self_loop():
        logger.info("Self-loop found: unsatisfiable")
        return None, state.stats

    if not initial_ac3(state, graph):
        logger.info("Initial AC-3 wiped out a domain: unsatisfiable")
        return None, state.stats

    ok = backtrack(state, graph)
    logger.info(
        "Coloring %s: assignments=%d, backtracks=%d, revisions=%d",
        "succeeded" if ok else "failed",
        state.stats.assignments, state.stats.backtracks, state.stats.revisions,
    )

    if not ok:
        return None, state.stats
    return dict(state.assignment), state.stats


def solve_coloring(graph: ConstraintGraph, colors: int) -> Optional[Dict[int, int]]:
    """彩色 CSP を解き、割り当てを返します。解がなければ None。"""
    solution, _ = run_coloring(graph, colors)
    return solution
