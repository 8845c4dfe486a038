# -*- coding: utf-8 -*-
"""
コマンドラインのエントリポイントをまとめたモジュールです。

- classic-astar FILE   : 探索レポート（許容性診断 + 3モード + 比較）
- classic-csp FILE     : 彩色結果を1行（SOLUTION: {...} または failure）
- classic-gridgen      : ベンチマーク用の格子グラフ入力ファイルを生成

各 main 関数は終了コードを返します（console_scripts がそのまま sys.exit に渡す）。
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from . import run_coloring, run_search
from .config import GRID_DEFAULT_COLS, GRID_DEFAULT_OUTPUT, GRID_DEFAULT_ROWS
from .graph.generator import write_grid_file
from .graph.parser import parse_coloring_file, parse_search_file
from .logging_utils import get_logger
from .postprocess.render_result import FAILURE, format_coloring, format_search_report

logger = get_logger()


def _input_parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    # 引数なしのときは argparse に任せず、自前で usage を出して終了コードを決める
    parser.add_argument("input", nargs="?", help="入力ファイルのパス")
    return parser


def astar_main(argv: Optional[List[str]] = None) -> int:
    """探索（UCS / A*）の CLI。"""
    parser = _input_parser("classic-astar", "UCS / A* (Euclidean, Manhattan) の比較実行")
    args = parser.parse_args(argv)

    if args.input is None:
        print(f"Usage: {parser.prog} <inputfile>")
        return 1

    try:
        problem = parse_search_file(args.input)
    except OSError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        logger.debug("Failed to read %s", args.input, exc_info=True)
        return 1

    if problem.start is None or problem.goal is None:
        print("Missing S or D in input file.")
        return 0

    graph = problem.graph
    report, results = run_search(graph, problem.start, problem.goal)
    print(format_search_report(len(graph.vertices), len(graph.adj), report, results))
    return 0


def csp_main(argv: Optional[List[str]] = None) -> int:
    """グラフ彩色 CSP の CLI。"""
    parser = _input_parser("classic-csp", "AC-3 + MRV/LCV バックトラックによるグラフ彩色")
    args = parser.parse_args(argv)

    if args.input is None:
        print(f"Usage: {parser.prog} <inputfile>")
        return 0

    try:
        problem = parse_coloring_file(args.input)
    except OSError as e:
        print(f"IO error: {e}", file=sys.stderr)
        logger.debug("Failed to read %s", args.input, exc_info=True)
        return 1

    if problem.colors is None or problem.colors < 1:
        logger.warning("colors is missing or < 1: %s", problem.colors)
        print(FAILURE)
        return 0

    solution, _ = run_coloring(problem.graph, problem.colors)
    print(format_coloring(solution))
    return 0


def gridgen_main(argv: Optional[List[str]] = None) -> int:
    """格子グラフ入力ファイルの生成 CLI。"""
    parser = argparse.ArgumentParser(
        prog="classic-gridgen",
        description="4近傍・重み1の格子グラフ入力ファイルを生成します",
    )
    parser.add_argument("--rows", type=int, default=GRID_DEFAULT_ROWS, help="行数")
    parser.add_argument("--cols", type=int, default=GRID_DEFAULT_COLS, help="列数（1..10）")
    parser.add_argument("--output", default=GRID_DEFAULT_OUTPUT, help="出力ファイル")
    args = parser.parse_args(argv)

    try:
        path = write_grid_file(args.output, args.rows, args.cols)
    except ValueError as e:
        parser.error(str(e))
    except OSError as e:
        print(f"Error writing file: {e}", file=sys.stderr)
        return 1

    print(f"{path} generated (rows={args.rows}, cols={args.cols})")
    return 0
