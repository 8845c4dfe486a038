# -*- coding: utf-8 -*-
"""
ベンチマーク用の格子グラフ入力ファイルを生成するモジュールです。

- 頂点ID は 1..rows*cols（行優先）
- セルID は x*10 + y（x: 行, y: 列）
- 4近傍を重み 1 の辺で結ぶ
- start は左上（ID=1）、goal は右下（ID=rows*cols）
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import numpy as np

from ..config import CELL_BASE, GRID_DEFAULT_COLS, GRID_DEFAULT_OUTPUT, GRID_DEFAULT_ROWS
from ..logging_utils import get_logger

logger = get_logger()


def generate_grid_lines(
    rows: int = GRID_DEFAULT_ROWS,
    cols: int = GRID_DEFAULT_COLS,
) -> List[str]:
    """
    格子グラフの入力ファイルの各行を生成します。

    セルIDの列成分は CELL_BASE 未満でなければ座標として読み戻せないため、
    cols は 1..CELL_BASE に制限します。
    """
    if rows < 1 or not 1 <= cols <= CELL_BASE:
        raise ValueError(f"Invalid grid size: rows={rows}, cols={cols}")

    ids = np.arange(1, rows * cols + 1).reshape(rows, cols)
    cells = np.arange(rows)[:, None] * CELL_BASE + np.arange(cols)[None, :]

    lines = ["# generated grid graph"]

    for x in range(rows):
        for y in range(cols):
            lines.append(f"{ids[x, y]},{cells[x, y]}")

    # 右隣 → 下隣 の順に、各セルから辺を出す
    for x in range(rows):
        for y in range(cols):
            if y + 1 < cols:
                lines.append(f"{ids[x, y]},{ids[x, y + 1]},1")
            if x + 1 < rows:
                lines.append(f"{ids[x, y]},{ids[x + 1, y]},1")

    lines.append("S,1")
    lines.append(f"D,{rows * cols}")
    return lines


def write_grid_file(
    path: str | Path = GRID_DEFAULT_OUTPUT,
    rows: int = GRID_DEFAULT_ROWS,
    cols: int = GRID_DEFAULT_COLS,
) -> Path:
    """格子グラフを生成してファイルに書き出し、そのパスを返します。"""
    p = Path(path)
    lines = generate_grid_lines(rows, cols)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    logger.info("Wrote grid graph to %s (rows=%d, cols=%d)", p, rows, cols)
    return p
