# -*- coding: utf-8 -*-
"""
変数ごとの初期ドメイン（候補色の集合）を作るモジュールです。
"""

from __future__ import annotations

from typing import Dict, Set

from .constraint_graph import ConstraintGraph


def build_initial_domains(graph: ConstraintGraph, colors: int) -> Dict[int, Set[int]]:
    """
    全変数のドメインを {1, ..., colors} で初期化します。

    colors < 1 は呼び出し側のエラーです（CLI / API 側で事前に弾く）。
    """
    if colors < 1:
        raise ValueError(f"Number of colors must be >= 1: {colors}")
    return {v: set(range(1, colors + 1)) for v in graph.variables}
