# -*- coding: utf-8 -*-
"""
classic_solver.postprocess パッケージ

探索・彩色の結果をレポート文字列や API 用 dict に整形する処理をまとめています。
"""
