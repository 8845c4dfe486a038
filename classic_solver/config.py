# -*- coding: utf-8 -*-
"""
classic_solver 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- セルIDから座標への変換基数
- 探索・伝播で使う浮動小数点の許容誤差
- ログの出力レベル
- グリッド生成のデフォルトサイズ
などを変更できます。

※ 許容誤差は探索結果（カウンタ）に直接影響するので、むやみに変えないこと。
"""

from __future__ import annotations

import os

# ==== グラフ関連 ===========================================================

# セルID → 座標 (x, y) の変換基数
# x = cell // CELL_BASE, y = cell % CELL_BASE
CELL_BASE: int = 10

# ==== 探索関連 =============================================================

# ヒープから取り出したエントリの g と、記録済みの最良 g の差がこれを超えたら「古い」エントリ
STALE_ENTRY_TOLERANCE: float = 1e-9

# g(u) + w が記録済み g(v) よりこれ以上小さいときだけ緩和する
RELAXATION_TOLERANCE: float = 1e-12

# 何回展開するごとに進捗ログを出すか
SEARCH_PROGRESS_LOG_INTERVAL: int = 1000

# ==== ヒューリスティック診断 ===============================================

# 辺の重み + ADMISSIBILITY_TOLERANCE < 距離 のとき「許容的でない」とみなす
ADMISSIBILITY_TOLERANCE: float = 1e-12

# ==== 出力関連 =============================================================

# コスト・実行時間を表示するときの小数点以下の桁数
REPORT_FLOAT_DIGITS: int = 6

# ==== グリッド生成関連 =====================================================

GRID_DEFAULT_ROWS: int = 5
GRID_DEFAULT_COLS: int = 6
GRID_DEFAULT_OUTPUT: str = "astar_medium.txt"

# ==== ログ関連 =============================================================

# 環境変数 CLASSIC_SOLVER_LOG_LEVEL で上書き可能（DEBUG / INFO / WARNING ...）
LOG_LEVEL: str = os.getenv("CLASSIC_SOLVER_LOG_LEVEL", "INFO").upper()
