# -*- coding: utf-8 -*-
"""
classic_solver.graph パッケージ

探索用グラフと入力ファイルに関する処理をまとめたサブパッケージです。
- model.py     : 無向重み付きグラフとセルID → 座標の変換
- parser.py    : 行指向テキストから Graph / ConstraintGraph への変換
- generator.py : ベンチマーク用の格子グラフ入力ファイルの生成
"""
