# -*- coding: utf-8 -*-
"""
classic_solver.search パッケージ

グラフ探索（UCS / A*）に関する処理をまとめています。
- heuristics.py    : ゼロ・ユークリッド・マンハッタンのヒューリスティック
- admissibility.py : ヒューリスティックの許容性診断
- engine.py        : 遅延削除つき優先度キューによる最良優先探索
"""
