# -*- coding: utf-8 -*-
"""
行指向のテキスト入力を内部表現に変換するモジュールです。

主な役割:
- 探索用入力（頂点・辺・S/D 行）を Graph に変換
- 彩色用入力（colors=K 行・辺行）を ConstraintGraph に変換

共通ルール:
- 空行と "#" で始まる行は無視
- どのパターンにも当てはまらない行、数値として読めない行も黙って無視
  （DEBUG ログにだけ残します）
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from ..csp.constraint_graph import ConstraintGraph
from ..logging_utils import get_logger
from .model import Graph

logger = get_logger()

COLORS_PREFIX = "colors="


@dataclass
class SearchProblem:
    """探索用入力のパース結果です。start / goal は未指定なら None。"""

    graph: Graph = field(default_factory=Graph)
    start: Optional[int] = None
    goal: Optional[int] = None


@dataclass
class ColoringProblem:
    """彩色用入力のパース結果です。colors は未指定なら None。"""

    graph: ConstraintGraph = field(default_factory=ConstraintGraph)
    colors: Optional[int] = None


def _split_fields(line: str) -> List[str]:
    return [part.strip() for part in line.split(",")]


def _content_lines(lines: Iterable[str]) -> Iterable[str]:
    """空行とコメント行を取り除き、前後の空白を落とした行を返します。"""
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        yield line


def parse_search_lines(lines: Iterable[str]) -> SearchProblem:
    """
    探索用入力をパースします。

    書式
    ----
    - ``id,cell``      : 頂点の宣言
    - ``u,v,weight``   : 無向辺の宣言
    - ``S,id`` / ``D,id`` : start / goal（大文字小文字は区別しない）
    """
    problem = SearchProblem()

    for line in _content_lines(lines):
        parts = _split_fields(line)
        try:
            if len(parts) == 2 and parts[0].upper() == "S":
                problem.start = int(parts[1])
            elif len(parts) == 2 and parts[0].upper() == "D":
                problem.goal = int(parts[1])
            elif len(parts) == 2:
                problem.graph.add_vertex(int(parts[0]), int(parts[1]))
            elif len(parts) == 3:
                weight = float(parts[2])
                if not math.isfinite(weight):
                    raise ValueError(f"non-finite weight: {parts[2]}")
                problem.graph.add_edge(int(parts[0]), int(parts[1]), weight)
            else:
                logger.debug("Ignored line: %r", line)
        except ValueError as e:
            logger.debug("Ignored malformed line %r (%s)", line, e)

    return problem


def parse_coloring_lines(lines: Iterable[str]) -> ColoringProblem:
    """
    彩色用入力をパースします。

    書式
    ----
    - ``colors=K`` : 色数（複数あれば最後のものが有効）
    - ``u,v``      : 隣接制約（3列目以降は無視）
    """
    problem = ColoringProblem()

    for line in _content_lines(lines):
        try:
            if line.startswith(COLORS_PREFIX):
                problem.colors = int(line[len(COLORS_PREFIX):].strip())
                continue

            parts = _split_fields(line)
            if len(parts) >= 2:
                problem.graph.add_edge(int(parts[0]), int(parts[1]))
            else:
                logger.debug("Ignored line: %r", line)
        except ValueError as e:
            logger.debug("Ignored malformed line %r (%s)", line, e)

    return problem


def _read_lines(path: str | Path) -> List[str]:
    # OSError（存在しない・読めない）は呼び出し側（CLI）まで伝播させる
    return Path(path).read_text(encoding="utf-8-sig").splitlines()


def parse_search_file(path: str | Path) -> SearchProblem:
    return parse_search_lines(_read_lines(path))


def parse_coloring_file(path: str | Path) -> ColoringProblem:
    return parse_coloring_lines(_read_lines(path))
