# -*- coding: utf-8 -*-
"""
探索結果・彩色結果をもとに表示用の情報を構築するモジュールです。

- コンソール向けのレポート行（format_*）
- API 向けの JSON 化できる dict（build_*_payload）
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

import pandas as pd

from ..config import REPORT_FLOAT_DIGITS
from ..types import AdmissibilityReport, ColoringStats, SearchResult

NO_PATH = "NO PATH"
FAILURE = "failure"


def _fmt_float(x: float) -> str:
    return f"{x:.{REPORT_FLOAT_DIGITS}f}"


def _fmt_cost(cost: Optional[float]) -> str:
    return NO_PATH if cost is None else _fmt_float(cost)


def format_admissibility(report: AdmissibilityReport) -> List[str]:
    def yes_no(ok: bool) -> str:
        return "YES" if ok else "NO"

    return [
        "Heuristic validity checks for this graph:",
        f"Euclidean admissible (w >= Euclidean for every edge)? {yes_no(report.euclidean_ok)}",
        f"Manhattan admissible (w >= Manhattan for every edge)? {yes_no(report.manhattan_ok)}",
    ]


def format_mode_result(mode: str, result: SearchResult) -> List[str]:
    """
    1モード分の探索結果をレポート行にします。

    経路の行は、経路が見つかったときだけ出力します。
    """
    lines = ["", f"MODE: {mode}", f"Optimal cost: {_fmt_cost(result.cost)}"]
    if result.path is not None:
        lines.append("Path: " + " -> ".join(str(v) for v in result.path))
    lines += [
        f"Expanded: {result.expanded}",
        f"Pushes: {result.pushes}",
        f"Max frontier: {result.max_frontier}",
        f"Runtime (s): {_fmt_float(result.runtime_sec)}",
    ]
    return lines


def build_comparison_frame(results: Mapping[str, SearchResult]) -> pd.DataFrame:
    """
    モード横断の比較表を DataFrame で作ります（index = モード名）。

    到達不能なモードの cost は NaN になります。
    """
    records = [
        {
            "mode": mode,
            "cost": r.cost,
            "expanded": r.expanded,
            "pushes": r.pushes,
            "max_frontier": r.max_frontier,
            "runtime_sec": r.runtime_sec,
        }
        for mode, r in results.items()
    ]
    frame = pd.DataFrame.from_records(
        records,
        columns=["mode", "cost", "expanded", "pushes", "max_frontier", "runtime_sec"],
    ).set_index("mode")
    # 全モード到達不能だと object 列になるので、float に揃えて None → NaN にする
    frame["cost"] = frame["cost"].astype(float)
    return frame


def format_comparison(results: Mapping[str, SearchResult]) -> List[str]:
    costs = ", ".join(f"{mode}: {_fmt_cost(r.cost)}" for mode, r in results.items())
    expanded = ", ".join(str(r.expanded) for r in results.values())

    frame = build_comparison_frame(results)
    table = frame.to_string(
        float_format=_fmt_float,
        na_rep=NO_PATH,
    )

    return [
        "",
        "Comparison:",
        f"Costs: {costs}",
        f"Expanded ({', '.join(results)}): {expanded}",
        "",
        *table.splitlines(),
    ]


def format_search_report(
    vertex_count: int,
    adjacency_count: int,
    report: AdmissibilityReport,
    results: Mapping[str, SearchResult],
) -> str:
    """探索レポート全体（グラフ概要・許容性・各モード・比較）を1つの文字列にします。"""
    lines = [
        f"Parsed graph: {vertex_count} vertices, adjacency lists for {adjacency_count} vertices."
    ]
    lines += format_admissibility(report)
    for mode, result in results.items():
        lines += format_mode_result(mode, result)
    lines += format_comparison(results)
    return "\n".join(lines)


def format_coloring(solution: Optional[Mapping[int, int]]) -> str:
    """
    彩色結果を1行にします。

    例: ``SOLUTION: {1: 1, 2: 2, 3: 3}``（変数の昇順）、解なしなら ``failure``。
    """
    if solution is None:
        return FAILURE
    body = ", ".join(f"{var}: {solution[var]}" for var in sorted(solution))
    return f"SOLUTION: {{{body}}}"


def build_search_payload(
    report: AdmissibilityReport,
    results: Mapping[str, SearchResult],
) -> Dict[str, Any]:
    """API 用に、許容性診断とモードごとの結果を dict にまとめます。"""
    return {
        "status": "ok",
        "admissibility": {
            "euclidean_ok": report.euclidean_ok,
            "manhattan_ok": report.manhattan_ok,
            "edges_checked": report.edges_checked,
            "euclidean_violations": [list(e) for e in report.euclidean_violations],
            "manhattan_violations": [list(e) for e in report.manhattan_violations],
        },
        "modes": {
            mode: {
                "cost": r.cost,
                "path": r.path,
                "expanded": r.expanded,
                "pushes": r.pushes,
                "max_frontier": r.max_frontier,
                "runtime_sec": r.runtime_sec,
            }
            for mode, r in results.items()
        },
    }


def build_coloring_payload(
    solution: Optional[Mapping[int, int]],
    stats: ColoringStats,
) -> Dict[str, Any]:
    """API 用に、彩色結果と統計情報を dict にまとめます（キーは昇順）。"""
    return {
        "status": "ok",
        "solution": None if solution is None else {
            str(var): solution[var] for var in sorted(solution)
        },
        "stats": {
            "assignments": stats.assignments,
            "backtracks": stats.backtracks,
            "revisions": stats.revisions,
        },
    }
