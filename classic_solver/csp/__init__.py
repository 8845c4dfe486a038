# -*- coding: utf-8 -*-
"""
classic_solver.csp パッケージ

グラフ彩色 CSP（制約充足問題）に関する処理をまとめています。

主に以下の役割を持つモジュールから構成されています。
- constraint_graph.py : 変数と不等式制約の隣接構造
- domains.py          : 変数ごとの初期ドメイン（1..K）の作成
- propagation.py      : AC-3 による制約伝播と trail による巻き戻し
- search.py           : MRV / LCV 順のバックトラック探索
"""
