# -*- coding: utf-8 -*-
"""
ヒューリスティックの許容性（admissibility）をグラフ全体で診断するモジュールです。

各無向辺について、辺の重みと両端のセル座標間の距離を比べます。
重みが距離より小さい辺が1本でもあれば、その距離を使うヒューリスティックは
このグラフでは「過大評価しうる」＝許容的でないと判定します。

この診断は情報提供のみで、探索エンジン側では何も強制しません。
"""

from __future__ import annotations

import numpy as np

from ..config import ADMISSIBILITY_TOLERANCE
from ..graph.model import Graph
from ..logging_utils import get_logger
from ..types import AdmissibilityReport

logger = get_logger()


def check_admissibility(graph: Graph) -> AdmissibilityReport:
    """
    全ての無向辺を1回ずつ調べ、ユークリッド距離・マンハッタン距離それぞれについて
    「重み + 許容誤差 < 距離」となる辺があるかを判定します。

    端点のどちらかがセルIDを持たない辺は距離が定義できないので対象外です。

    Returns
    -------
    AdmissibilityReport
        ファミリごとの判定と、違反した辺の一覧。
    """
    edges = []
    rows = []
    for u, v, w in graph.iter_edges():
        pu, pv = graph.coords(u), graph.coords(v)
        if pu is None or pv is None:
            logger.debug("Skip edge %d-%d: vertex without cell id", u, v)
            continue
        edges.append((u, v, w))
        rows.append((w, pu[0] - pv[0], pu[1] - pv[1]))

    if not rows:
        return AdmissibilityReport(euclidean_ok=True, manhattan_ok=True, edges_checked=0)

    arr = np.asarray(rows, dtype=float)
    weights, dx, dy = arr[:, 0], arr[:, 1], arr[:, 2]

    l2 = np.hypot(dx, dy)
    l1 = np.abs(dx) + np.abs(dy)

    euclid_bad = weights + ADMISSIBILITY_TOLERANCE < l2
    manh_bad = weights + ADMISSIBILITY_TOLERANCE < l1

    report = AdmissibilityReport(
        euclidean_ok=not bool(euclid_bad.any()),
        manhattan_ok=not bool(manh_bad.any()),
        edges_checked=len(edges),
        euclidean_violations=[e for e, bad in zip(edges, euclid_bad) if bad],
        manhattan_violations=[e for e, bad in zip(edges, manh_bad) if bad],
    )

    logger.info(
        "Admissibility: edges=%d, euclidean_ok=%s, manhattan_ok=%s",
        report.edges_checked, report.euclidean_ok, report.manhattan_ok,
    )
    return report
